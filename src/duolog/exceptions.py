"""
duolog exception hierarchy.

Every error carries a stable ``code`` and a ``details`` mapping so callers
can branch on the failure without parsing messages. Nothing here is fatal to
the process: reconfiguration failures leave the logger in a degraded but
usable state and are reported by raising one of these.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple


class DuologError(Exception):
    """Root of all duolog errors."""

    def __init__(
        self,
        message: str,
        *,
        code: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.details = details or {}


# ================================
# Levels
# ================================


class InvalidLevelError(DuologError, ValueError):
    """A value that does not name one of the four severity levels.

    Raised directly by ``parse_level`` and ``LevelGate.set``. When it comes
    from ``LogConfig`` validation, pydantic reports it as a ``ValidationError``.
    """

    def __init__(self, value: Any) -> None:
        super().__init__(
            f"Invalid log level: {value!r}",
            code="INVALID_LEVEL",
            details={"value": value},
        )


# ================================
# File lifecycle
# ================================


class LogFileError(DuologError):
    """Creating, opening or closing a log file failed.

    ``step`` is one of ``create_directory``, ``open_file`` or ``close_file``.
    The underlying ``OSError`` is kept as ``__cause__``.
    """

    def __init__(self, message: str, *, path: str, step: str) -> None:
        super().__init__(message, code="LOG_FILE_ERROR", details={"path": path, "step": step})
        self.path = path
        self.step = step


class SinkClosedError(DuologError):
    """Emit was attempted on a sink whose resources were already released."""

    def __init__(self, sink: str) -> None:
        super().__init__(f"Sink '{sink}' is closed", code="SINK_CLOSED", details={"sink": sink})


class LoggerClosedError(DuologError):
    """The logger was closed and cannot re-open its file sink."""

    def __init__(self) -> None:
        super().__init__("Logger is closed; file logging cannot be re-enabled", code="LOGGER_CLOSED")


# ================================
# Emission
# ================================


class EmitError(DuologError):
    """One or more sinks failed to write a record.

    Raised after every enabled sink was attempted. ``errors`` holds
    ``(sink_name, exception)`` pairs in dispatch order.
    """

    def __init__(self, errors: List[Tuple[str, BaseException]]) -> None:
        names = ", ".join(name for name, _ in errors)
        super().__init__(
            f"Failed to emit log record to: {names}",
            code="EMIT_FAILED",
            details={"sinks": [name for name, _ in errors]},
        )
        self.errors = errors
