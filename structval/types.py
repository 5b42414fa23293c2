"""
Type definitions for structval.

Provides a minimal Result type (Ok/Err) and type aliases.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Success result containing a value."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Error result containing an error value."""

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True


class Missing(Enum):
    """
    Sentinel for an absent value, as opposed to a value that is present and None.

    A struct field that does not appear in the input is read as MISSING.
    """

    MISSING = "MISSING"

    def __repr__(self) -> str:
        return "MISSING"


MISSING = Missing.MISSING

# Type aliases
CheckFn = Callable[[Any], bool]
PathSegment = str | int
Path = tuple[PathSegment, ...]
DispatchFn = Callable[[Any], Any]
