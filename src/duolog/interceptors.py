"""
Interceptors for capturing standard library logs into a duolog Logger.
"""

from __future__ import annotations

import logging

from .core import Logger
from .levels import Level


def map_stdlib_level(levelno: int) -> Level:
    """Collapse a stdlib level number onto the four duolog levels.

    CRITICAL has no counterpart and maps to ERROR.
    """
    if levelno >= logging.ERROR:
        return Level.ERROR
    if levelno >= logging.WARNING:
        return Level.WARN
    if levelno >= logging.INFO:
        return Level.INFO
    return Level.DEBUG


class DuologHandler(logging.Handler):
    """
    Redirect standard library logging events to a duolog Logger.

    Third-party libraries that log through ``logging`` then land in the same
    console and file sinks as application logs, tagged with their logger name.
    """

    def __init__(self, target: Logger, level: int = logging.NOTSET):
        super().__init__(level)
        self.target = target

    def emit(self, record: logging.LogRecord) -> None:
        try:
            msg = self.format(record)
            self.target.log(map_stdlib_level(record.levelno), msg, logger=record.name)
        except Exception:
            self.handleError(record)
