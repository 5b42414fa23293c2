"""
Validation result returned by `validate()`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .errors import ValidationError
from .types import Err, Ok


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """
    Every failure found for one value, in encounter order.

    Struct fields are visited in declaration order and list/tuple items in
    index order, so `first_error()` is deterministic.
    """

    value: Any
    errors: tuple[ValidationError, ...] = ()

    def is_valid(self) -> bool:
        return not self.errors

    def first_error(self) -> ValidationError | None:
        return self.errors[0] if self.errors else None

    @property
    def messages(self) -> list[str]:
        return [e.message for e in self.errors]

    def to_result(self) -> Ok[Any] | Err[tuple[ValidationError, ...]]:
        """
        Convert to an Ok/Err pair.

        Returns:
            Ok(value) if there are no errors
            Err(errors) otherwise
        """
        if self.errors:
            return Err(self.errors)
        return Ok(self.value)

    def __bool__(self) -> bool:
        return self.is_valid()

    def __str__(self) -> str:
        if not self.errors:
            return "[structval] value is valid"
        return "\n".join(self.messages)
