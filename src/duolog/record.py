"""
Log records and attribute groups.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from .levels import Level


class Group:
    """A named, ordered collection of attributes nested inside a record.

    The name is the keyword the group is passed under::

        log.info("request served", status=200, http=Group(method="GET", path="/"))

    Groups may contain groups. A plain ``dict`` value is an ordinary value,
    not a group.
    """

    __slots__ = ("attrs",)

    def __init__(self, /, **attrs: Any):
        self.attrs: dict[str, Any] = attrs

    def __iter__(self) -> Iterator[tuple[str, Any]]:
        return iter(self.attrs.items())

    def __len__(self) -> int:
        return len(self.attrs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Group):
            return NotImplemented
        return self.attrs == other.attrs

    def __repr__(self) -> str:
        inner = ", ".join(f"{k}={v!r}" for k, v in self.attrs.items())
        return f"Group({inner})"


@dataclass(frozen=True)
class Record:
    """One log event. Built per call and discarded after dispatch."""

    level: Level
    msg: str
    attrs: dict[str, Any] = field(default_factory=dict)
    time: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


def flatten_values(attrs: dict[str, Any]) -> list[Any]:
    """Leaf values in order, descending into groups and dropping every key."""
    values: list[Any] = []
    for value in attrs.values():
        if isinstance(value, Group):
            values.extend(flatten_values(value.attrs))
        else:
            values.append(value)
    return values


def nest_groups(attrs: dict[str, Any]) -> dict[str, Any]:
    """Plain-dict view of ``attrs`` with each group turned into a nested dict.

    Empty groups are dropped.
    """
    nested: dict[str, Any] = {}
    for key, value in attrs.items():
        if isinstance(value, Group):
            if not value:
                continue
            nested[key] = nest_groups(value.attrs)
        else:
            nested[key] = value
    return nested
