"""
Validation failures (returned as data) and schema errors (raised).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .messages import FailureKind, Formatter, MessageConfig, default_formatter, get_message
from .paths import format_path
from .types import Path


class DescriptorError(TypeError):
    """
    A type descriptor is malformed, e.g. a union without a dispatch function.

    This signals a bug in the schema, not bad input, so it is raised rather
    than collected as a validation error.
    """


@dataclass(frozen=True, slots=True)
class ValidationError:
    """One failure: where it happened, what was there and what was expected."""

    path: Path
    value: Any
    expected: str
    kind: FailureKind
    message: str

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> dict[str, Any]:
        """Serialize for reporting."""
        return {
            "path": list(self.path),
            "xpath": format_path(self.path),
            "kind": self.kind.value,
            "expected": self.expected,
            "message": self.message,
        }


def build_error(
    path: Path,
    value: Any,
    expected: str,
    kind: FailureKind,
    messages: MessageConfig = None,
    formatter: Formatter = default_formatter,
) -> ValidationError:
    """Create a ValidationError, resolving its message right away."""
    message = get_message(messages, path, kind, value, expected, formatter)
    return ValidationError(
        path=path, value=value, expected=expected, kind=kind, message=message
    )
