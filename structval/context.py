"""
Context manager for validation configuration (e.g., the message formatter).
"""

from contextlib import contextmanager
from contextvars import ContextVar

from .messages import Formatter, default_formatter

# Context variable for the default message formatter
_formatter: ContextVar[Formatter] = ContextVar("formatter", default=default_formatter)


def current_formatter() -> Formatter:
    """Return the formatter in effect for the current context."""
    return _formatter.get()


@contextmanager
def validation_context(*, formatter: Formatter = default_formatter):
    """
    Context manager for validation configuration.

    Args:
        formatter: Function `(path, kind, value, expected_name) -> str` used for
                   every message that has no custom override. Applies to
                   `validate()` calls made inside the block.

    Example:
        from structval import validate, validation_context, format_path

        def terse(path, kind, value, expected):
            return f"{format_path(path)}: expected {expected}"

        with validation_context(formatter=terse):
            validate({"x": "a"}, {"x": int}).first_error().message
            # "x: expected Int"
    """
    token = _formatter.set(formatter)
    try:
        yield
    finally:
        _formatter.reset(token)
