"""
Internal diagnostics for duolog's own lifecycle events.

These go to the stdlib logger ``duolog`` (silent by default through a
``NullHandler``) and never to the sinks the package manages.
"""

from __future__ import annotations

import logging

import structlog

PACKAGE_LOGGER = "duolog"

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())

_PROCESSORS = [
    structlog.stdlib.filter_by_level,
    structlog.processors.KeyValueRenderer(key_order=["event"], drop_missing=True),
]


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger bound to a stdlib logger under ``duolog``."""
    return structlog.wrap_logger(
        logging.getLogger(name or PACKAGE_LOGGER),
        processors=_PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
    )
