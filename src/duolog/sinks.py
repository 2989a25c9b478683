"""
Log sink abstractions and concrete implementations.
"""

from __future__ import annotations

import sys
import threading
from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Any

from .diagnostics import get_logger
from .exceptions import LogFileError, SinkClosedError
from .formatters import ConsoleFormatter, JsonLineRenderer
from .levels import Level, LevelGate
from .record import Record

logger = get_logger(__name__)

DIRECTORY_MODE = 0o755


def make_dirs(directory: Path, mode: int = DIRECTORY_MODE) -> None:
    """Create ``directory`` and every missing parent, each with ``mode`` (before umask)."""
    missing = []
    for candidate in (directory, *directory.parents):
        if candidate.is_dir():
            break
        missing.append(candidate)
    for candidate in reversed(missing):
        candidate.mkdir(mode=mode, exist_ok=True)
        if not candidate.is_dir():
            raise NotADirectoryError(f"not a directory: '{candidate}'")


def open_log_file(path: str) -> IO[str]:
    """Open ``path`` for appending, creating missing parent directories first.

    New files get mode 0o666 before umask (the ``open`` default).
    """
    try:
        make_dirs(Path(path).parent)
    except OSError as exc:
        raise LogFileError(
            f"failed to create directory for log file '{path}': {exc}",
            path=path,
            step="create_directory",
        ) from exc

    try:
        handle = open(path, "a", encoding="utf-8")
    except OSError as exc:
        raise LogFileError(
            f"failed to open log file '{path}': {exc}",
            path=path,
            step="open_file",
        ) from exc

    logger.debug("log file opened", path=path)
    return handle


# =============================================================================
# Sink Abstraction (Strategy Pattern)
# =============================================================================


class BaseSink(ABC):
    """A destination for log records, gated by its own level threshold."""

    name: str = "sink"

    def __init__(self, gate: LevelGate):
        self._gate = gate

    @property
    def gate(self) -> LevelGate:
        return self._gate

    def enabled(self, level: Level) -> bool:
        return self._gate.enabled(level)

    @abstractmethod
    def emit(self, record: Record) -> None:
        """Write a record if its level passes the gate."""
        ...

    @abstractmethod
    def close(self) -> None:
        """Close the sink and release resources."""
        ...


class ConsoleSink(BaseSink):
    """Colored single-line output to a shared text stream.

    Args:
        gate: Level threshold, shared by reference with the owning logger.
        stream: Output stream (default: stdout)
    """

    name = "console"

    def __init__(self, gate: LevelGate, stream: Any = None):
        super().__init__(gate)
        self._stream = stream or sys.stdout
        self._lock = threading.Lock()

    @property
    def stream(self) -> Any:
        return self._stream

    def emit(self, record: Record) -> None:
        if not self.enabled(record.level):
            return
        line = ConsoleFormatter.format(record) + "\n"
        with self._lock:
            self._stream.write(line)
            self._stream.flush()

    def close(self) -> None:
        # The stream is shared with the rest of the process and stays open.
        with self._lock:
            self._stream.flush()


class FileSink(BaseSink):
    """Append-only JSON lines file sink.

    Owns the file handle: it is opened on construction and released exactly
    once by ``close``. ``lock`` is the lock the owning logger also holds
    while swapping sinks, so emission never races a close.
    """

    name = "file"

    def __init__(self, path: str, gate: LevelGate, *, lock: threading.RLock | None = None):
        super().__init__(gate)
        self._path = path
        self._lock = lock or threading.RLock()
        self._render = JsonLineRenderer()
        self._file: IO[str] | None = open_log_file(path)

    @property
    def path(self) -> str:
        return self._path

    @property
    def closed(self) -> bool:
        return self._file is None

    def emit(self, record: Record) -> None:
        if not self.enabled(record.level):
            return
        line = self._render(record) + "\n"
        with self._lock:
            if self._file is None:
                raise SinkClosedError(self.name)
            self._file.write(line)
            self._file.flush()

    def close(self) -> None:
        with self._lock:
            if self._file is None:
                return
            handle, self._file = self._file, None
            try:
                handle.close()
            except OSError as exc:
                raise LogFileError(
                    f"failed to close log file '{self._path}': {exc}",
                    path=self._path,
                    step="close_file",
                ) from exc
        logger.debug("log file closed", path=self._path)
