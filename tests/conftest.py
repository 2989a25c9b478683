import io
import typing as t

import pytest

from duolog import Level, LogConfig, Logger

ENV_VARS = (
    "DUOLOG_LOG_TO_CONSOLE",
    "DUOLOG_LOG_TO_FILE",
    "DUOLOG_LOG_FILE_PATH",
    "DUOLOG_LEVEL_FOR_CONSOLE",
    "DUOLOG_LEVEL_FOR_FILE",
)


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """
    Runs every test from an empty directory with no DUOLOG_* variables set,
    so neither the host environment nor a stray .env file leaks into LogConfig.
    """
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    yield


@pytest.fixture
def stream() -> io.StringIO:
    """In-memory console stream."""
    return io.StringIO()


@pytest.fixture
def log_path(tmp_path) -> str:
    """A log file path under a directory that does not exist yet."""
    return str(tmp_path / "logs" / "app.log")


@pytest.fixture
def make_logger(stream):
    """Factory for loggers writing their console output to the ``stream`` fixture."""
    created: list[Logger] = []

    def _make(**options: t.Any) -> Logger:
        options.setdefault("level_for_console", Level.INFO)
        options.setdefault("level_for_file", Level.INFO)
        logger = Logger(LogConfig(**options), stream=stream)
        created.append(logger)
        return logger

    yield _make

    for logger in created:
        logger.close()


@pytest.fixture
def read_lines():
    """Reads a log file back as a list of lines without newlines."""
    def _read(path) -> list[str]:
        with open(path, encoding="utf-8") as f:
            return f.read().splitlines()

    return _read
