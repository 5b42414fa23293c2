"""
Logging for structval.

Loggers wrap the standard library logger of the same name, so output follows
whatever the application configures for "structval" and stays silent
otherwise. Events below the logger's effective level are dropped before any
rendering happens.
"""

import logging

import structlog
from structlog.types import Processor

_PROCESSORS: list[Processor] = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_log_level,
    structlog.processors.KeyValueRenderer(key_order=["event", "level"]),
]


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger bound to the standard library logger `name`."""
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=_PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
    )
