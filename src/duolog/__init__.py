"""
duolog: dual-sink structured logging.

Every call goes independently to:
- console: colored one-line output on stdout
- file: JSON lines appended to a log file

Each sink has its own runtime-adjustable level, can be switched on and off
while the program runs, and the file sink can be re-pointed at a new path.

Library: structlog + orjson for JSON rendering, pydantic-settings for config.
"""

from .config import LogConfig
from .core import Logger
from .exceptions import (
    DuologError,
    EmitError,
    InvalidLevelError,
    LogFileError,
    LoggerClosedError,
    SinkClosedError,
)
from .interceptors import DuologHandler
from .levels import Level, LevelGate, parse_level
from .record import Group, Record
from .sinks import BaseSink, ConsoleSink, FileSink

__all__ = [
    "BaseSink",
    "ConsoleSink",
    "DuologError",
    "DuologHandler",
    "EmitError",
    "FileSink",
    "Group",
    "InvalidLevelError",
    "Level",
    "LevelGate",
    "LogConfig",
    "LogFileError",
    "Logger",
    "LoggerClosedError",
    "Record",
    "SinkClosedError",
    "parse_level",
]
