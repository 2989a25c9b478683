"""
Severity levels and per-sink level gates.
"""

from __future__ import annotations

import threading
from enum import IntEnum

from .exceptions import InvalidLevelError


class Level(IntEnum):
    """Ordered severity. Values line up with the stdlib ``logging`` constants."""

    DEBUG = 10
    INFO = 20
    WARN = 30
    ERROR = 40


_LEVEL_ALIASES: dict[str, Level] = {
    "DEBUG": Level.DEBUG,
    "INFO": Level.INFO,
    "WARN": Level.WARN,
    "WARNING": Level.WARN,
    "ERROR": Level.ERROR,
}


def parse_level(value: Level | int | str) -> Level:
    """Normalize a level given as a ``Level``, its integer value or its name."""
    if isinstance(value, Level):
        return value
    if isinstance(value, bool):
        raise InvalidLevelError(value)
    if isinstance(value, int):
        try:
            return Level(value)
        except ValueError:
            raise InvalidLevelError(value) from None
    if isinstance(value, str):
        if value.strip().isdigit():
            return parse_level(int(value))
        level = _LEVEL_ALIASES.get(value.strip().upper())
        if level is None:
            raise InvalidLevelError(value)
        return level
    raise InvalidLevelError(value)


class LevelGate:
    """Mutable minimum-severity threshold shared by reference with one sink.

    Reads are lock-free: rebinding an attribute is atomic, so a reader sees
    either the old or the new level. Writers serialize on a private lock.
    """

    __slots__ = ("_level", "_write_lock")

    def __init__(self, level: Level | int | str = Level.INFO):
        self._level = parse_level(level)
        self._write_lock = threading.Lock()

    def get(self) -> Level:
        return self._level

    def set(self, level: Level | int | str) -> None:
        parsed = parse_level(level)
        with self._write_lock:
            self._level = parsed

    def enabled(self, level: Level | int) -> bool:
        return level >= self._level

    def __repr__(self) -> str:
        return f"LevelGate({self._level.name})"
