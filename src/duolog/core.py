"""
Dual-sink logger facade.

A ``Logger`` fans every call out to an optional colored console sink and an
optional JSON lines file sink. Each sink has its own level gate and its own
enabled flag, and both can be reconfigured while other threads are logging.
"""

from __future__ import annotations

import threading
from typing import Any

from .config import LogConfig
from .diagnostics import get_logger
from .exceptions import EmitError, LoggerClosedError
from .levels import Level, LevelGate, parse_level
from .record import Record
from .sinks import BaseSink, ConsoleSink, FileSink

logger = get_logger(__name__)


class Logger:
    """Routes records to a console sink and a file sink independently.

    Args:
        config: Construction settings. Defaults to ``LogConfig()``, which reads
            ``DUOLOG_*`` environment variables.
        stream: Console output stream (default: stdout)

    Raises:
        LogFileError: The log directory or file could not be created.
    """

    def __init__(self, config: LogConfig | None = None, *, stream: Any = None):
        self._config = config or LogConfig()
        self._stream = stream

        # Gates live as long as the logger; sinks are rebuilt around them.
        self._console_gate = LevelGate(self._config.level_for_console)
        self._file_gate = LevelGate(self._config.level_for_file)

        # Guards every read or swap of the file sink, and file emission itself.
        self._file_lock = threading.RLock()

        self._console_sink: BaseSink | None = None
        self._file_sink: BaseSink | None = None
        self._console_enabled = self._config.log_to_console
        self._file_enabled = False
        self._file_path = self._config.log_file_path
        self._closed = False

        if self._config.log_to_console:
            self._console_sink = ConsoleSink(self._console_gate, stream)

        if self._config.log_to_file:
            self._file_sink = FileSink(self._file_path, self._file_gate, lock=self._file_lock)
            self._file_enabled = True

    # =========================================================================
    # Logging API
    # =========================================================================

    def debug(self, msg: str, /, **attrs: Any) -> None:
        self._dispatch(Level.DEBUG, msg, attrs)

    def info(self, msg: str, /, **attrs: Any) -> None:
        self._dispatch(Level.INFO, msg, attrs)

    def warn(self, msg: str, /, **attrs: Any) -> None:
        self._dispatch(Level.WARN, msg, attrs)

    warning = warn

    def error(self, msg: str, /, **attrs: Any) -> None:
        self._dispatch(Level.ERROR, msg, attrs)

    def log(self, level: Level | int | str, msg: str, /, **attrs: Any) -> None:
        self._dispatch(parse_level(level), msg, attrs)

    def _dispatch(self, level: Level, msg: str, attrs: dict[str, Any]) -> None:
        """Send one record to every enabled sink.

        Both sinks are always attempted; failures are collected and raised
        together once dispatch is over.
        """
        record = Record(level=level, msg=msg, attrs=attrs)
        errors: list[tuple[str, BaseException]] = []

        console = self._console_sink
        if self._console_enabled and console is not None:
            try:
                console.emit(record)
            except Exception as exc:
                errors.append((console.name, exc))

        if self._file_enabled:
            with self._file_lock:
                sink = self._file_sink
                if self._file_enabled and sink is not None:
                    try:
                        sink.emit(record)
                    except Exception as exc:
                        errors.append((sink.name, exc))

        if errors:
            raise EmitError(errors) from errors[0][1]

    # =========================================================================
    # Levels
    # =========================================================================

    def set_console_level(self, level: Level | int | str) -> None:
        self._console_gate.set(level)

    def set_file_level(self, level: Level | int | str) -> None:
        self._file_gate.set(level)

    def get_console_level(self) -> Level:
        return self._console_gate.get()

    def get_file_level(self) -> Level:
        return self._file_gate.get()

    # =========================================================================
    # Lifecycle
    # =========================================================================

    @property
    def config(self) -> LogConfig:
        return self._config

    @property
    def console_enabled(self) -> bool:
        return self._console_enabled

    @property
    def file_enabled(self) -> bool:
        return self._file_enabled

    @property
    def file_path(self) -> str:
        return self._file_path

    @property
    def closed(self) -> bool:
        return self._closed

    def enable_console(self, enable: bool) -> None:
        """Turn console output on or off; the console threshold is kept."""
        if enable and self._console_sink is None:
            self._console_sink = ConsoleSink(self._console_gate, self._stream)
        self._console_enabled = enable
        logger.debug("console sink toggled", enabled=enable)

    def enable_file(self, enable: bool) -> None:
        """Turn file output on or off.

        Disabling closes the handle but keeps the path. Enabling re-opens
        the stored path in append mode around the same level gate.

        Raises:
            LogFileError: Closing the old handle or opening the file failed.
                File logging is left disabled.
            LoggerClosedError: Enabling after ``close()``.
        """
        with self._file_lock:
            if not enable:
                if not self._file_enabled:
                    return
                sink, self._file_sink = self._file_sink, None
                self._file_enabled = False
                if sink is not None:
                    sink.close()
                logger.debug("file sink disabled", path=self._file_path)
                return

            if self._closed:
                raise LoggerClosedError()
            if self._file_enabled:
                return
            self._file_sink = FileSink(self._file_path, self._file_gate, lock=self._file_lock)
            self._file_enabled = True
            logger.debug("file sink enabled", path=self._file_path)

    def change_file_path(self, path: str) -> None:
        """Point the file sink at ``path``.

        If file logging is not active only the stored path changes. Otherwise
        the current file is closed before the new one is opened; when either
        step fails the error is raised and file logging stays disabled, with
        no attempt to go back to the previous file.

        Raises:
            LogFileError: Closing the current file or opening the new one failed.
        """
        with self._file_lock:
            if path == self._file_path:
                return

            if not self._file_enabled:
                self._file_path = path
                return

            old_path = self._file_path
            sink, self._file_sink = self._file_sink, None
            self._file_enabled = False
            if sink is not None:
                sink.close()

            self._file_sink = FileSink(path, self._file_gate, lock=self._file_lock)
            self._file_path = path
            self._file_enabled = True
            logger.debug("log file path changed", old_path=old_path, path=path)

    def close(self) -> None:
        """Release the file handle. Safe to call more than once.

        Console output keeps working; the file sink cannot be re-enabled.

        Raises:
            LogFileError: The handle could not be closed. It is not retried.
        """
        with self._file_lock:
            if self._closed:
                return
            self._closed = True
            sink, self._file_sink = self._file_sink, None
            self._file_enabled = False
            if sink is not None:
                sink.close()
            logger.debug("logger closed")

    def __enter__(self) -> "Logger":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def __repr__(self) -> str:
        return (
            f"Logger(console={'on' if self._console_enabled else 'off'}:{self.get_console_level().name}, "
            f"file={'on' if self._file_enabled else 'off'}:{self.get_file_level().name}, "
            f"path={self._file_path!r})"
        )
