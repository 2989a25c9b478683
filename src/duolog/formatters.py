"""
Record formatters: colored console lines and JSON lines.
"""

from __future__ import annotations

from typing import Any

import orjson
import structlog
from structlog.typing import EventDict

from .levels import Level
from .record import Record, flatten_values, nest_groups

# =============================================================================
# Console Formatter
# =============================================================================

RESET = "\x1b[0m"


def ansi(code: int) -> str:
    """SGR escape for a single color code."""
    return f"\x1b[{code}m"


class ConsoleFormatter:
    """Renders ``[<colored abbr>] message value value ...``.

    Group structure is not kept on the console: nested attributes are
    flattened to their bare values, in order.
    """

    DEFAULT_COLOR = 37
    LEVEL_COLORS = {
        Level.DEBUG: 35,  # magenta
        Level.INFO: 34,  # blue
        Level.WARN: 33,  # yellow
        Level.ERROR: 31,  # red
    }
    LEVEL_ABBREVIATIONS = {
        Level.DEBUG: "DBG",
        Level.INFO: "INF",
        Level.WARN: "WRN",
        Level.ERROR: "ERR",
    }

    @classmethod
    def color_code(cls, level: int) -> int:
        return cls.LEVEL_COLORS.get(int(level), cls.DEFAULT_COLOR)

    @classmethod
    def abbreviation(cls, level: int) -> str:
        abbr = cls.LEVEL_ABBREVIATIONS.get(int(level))
        if abbr:
            return abbr
        name = getattr(level, "name", None) or str(level)
        return name[:3].upper()

    @classmethod
    def format(cls, record: Record) -> str:
        """Format a record into one line, without the trailing newline."""
        level = record.level
        line = f"[{ansi(cls.color_code(level))}{cls.abbreviation(level)}{RESET}] {record.msg}"
        values = flatten_values(record.attrs)
        if values:
            line += " " + " ".join(str(v) for v in values)
        return line


# =============================================================================
# JSON Serialization
# =============================================================================

RESERVED_KEYS = ("time", "level", "msg")
RESERVED_KEY_PREFIX = "attr."

# orjson only encodes integers in [-2**63, 2**64 - 1].
_MIN_JSON_INT = -(2**63)
_MAX_JSON_INT = 2**64 - 1


def _stringify_wide_ints(v: Any) -> Any:
    if isinstance(v, int) and not isinstance(v, bool):
        if v < _MIN_JSON_INT or v > _MAX_JSON_INT:
            return str(v)
        return v
    if isinstance(v, dict):
        return {k: _stringify_wide_ints(item) for k, item in v.items()}
    if isinstance(v, (list, tuple)):
        return [_stringify_wide_ints(item) for item in v]
    return v


def orjson_dumps(v: Any, *, default: Any = None) -> str:
    """Fast JSON serialization using orjson.

    Integers orjson cannot represent are written as decimal strings.
    """
    option = orjson.OPT_UTC_Z | orjson.OPT_NAIVE_UTC | orjson.OPT_NON_STR_KEYS
    try:
        return orjson.dumps(v, default=default, option=option).decode()
    except orjson.JSONEncodeError:
        return orjson.dumps(_stringify_wide_ints(v), default=default, option=option).decode()


def record_to_event_dict(record: Record) -> EventDict:
    """Build the ordered event dict for a record: time, level, msg, attributes.

    Attributes named like a core field are kept under ``attr.<name>``.
    """
    event_dict: EventDict = {
        "time": record.time,
        "level": record.level.name,
        "msg": record.msg,
    }
    for key, value in nest_groups(record.attrs).items():
        if key in RESERVED_KEYS:
            key = RESERVED_KEY_PREFIX + key
        event_dict[key] = value
    return event_dict


class JsonLineRenderer:
    """Serializes records to single-line JSON objects via structlog's JSONRenderer."""

    def __init__(self) -> None:
        self._renderer = structlog.processors.JSONRenderer(serializer=orjson_dumps)

    def __call__(self, record: Record) -> str:
        return self._renderer(None, record.level.name.lower(), record_to_event_dict(record))
