"""
Logger Configuration.

Values come from keyword arguments, then ``DUOLOG_*`` environment variables,
then a local ``.env`` file.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .levels import Level, parse_level


class LogConfig(BaseSettings):
    """Construction-time settings for a ``duolog.Logger``.

    Frozen once built; the logger keeps its own mutable copy of the parts
    that change at runtime (flags, path, levels).
    """

    model_config = SettingsConfigDict(
        env_prefix="DUOLOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    log_to_console: bool = Field(default=True, description="Emit colored lines to stdout")
    log_to_file: bool = Field(default=False, description="Append JSON lines to log_file_path")
    log_file_path: str = Field(default="", description="Log file path, relative or absolute")
    level_for_console: Level = Field(default=Level.INFO, description="Initial console threshold")
    level_for_file: Level = Field(default=Level.INFO, description="Initial file threshold")

    @field_validator("level_for_console", "level_for_file", mode="before")
    @classmethod
    def _parse_level(cls, value: Any) -> Level:
        if value is None or value == "":
            return Level.INFO
        return parse_level(value)

    @model_validator(mode="after")
    def _require_path_for_file_logging(self) -> "LogConfig":
        if self.log_to_file and not self.log_file_path:
            raise ValueError("log_file_path is required when log_to_file is enabled")
        return self
