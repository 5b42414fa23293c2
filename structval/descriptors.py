"""
Type descriptors for structval.

A descriptor is an immutable, declarative description of a type: a name, a
membership predicate (`is_`) and, for composite kinds, the descriptors of its
parts. The set of variants is closed; `Kind` enumerates it and the validator
core matches on it exhaustively.

Usage:
    from structval import Struct, List, Maybe, Subtype, Str, Num

    Positive = Subtype(Num, lambda n: n > 0, "Positive")
    Person = Struct({
        "name": Str,
        "age": Maybe(Positive),
        "tags": List(Str),
    }, "Person")
"""

from __future__ import annotations

import enum
import math
import typing
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType

from .errors import DescriptorError
from .types import MISSING, CheckFn, DispatchFn


class Kind(enum.Enum):
    PRIMITIVE = "primitive"
    SUBTYPE = "subtype"
    STRUCT = "struct"
    DICT = "dict"
    LIST = "list"
    TUPLE = "tuple"
    UNION = "union"
    ENUM = "enum"
    MAYBE = "maybe"


def is_nil(value: typing.Any) -> bool:
    """True for None and for an absent value."""
    return value is None or value is MISSING


def is_sequence(value: typing.Any) -> bool:
    """True for indexable sequences, excluding strings and bytes."""
    return isinstance(value, Sequence) and not isinstance(
        value, (str, bytes, bytearray)
    )


def _callable_name(fn: typing.Callable) -> str:
    return getattr(fn, "__name__", None) or type(fn).__name__


@dataclass(frozen=True, slots=True, eq=False)
class Primitive:
    """A leaf type defined entirely by its membership function."""

    name: str
    check: CheckFn
    py_type: typing.Any = None

    kind: typing.ClassVar[Kind] = Kind.PRIMITIVE

    def is_(self, value: typing.Any) -> bool:
        return bool(self.check(value))


@dataclass(frozen=True, slots=True, eq=False)
class Subtype:
    """A base type narrowed by a predicate."""

    base: Descriptor
    predicate: CheckFn
    name: str | None = None

    kind: typing.ClassVar[Kind] = Kind.SUBTYPE

    def __post_init__(self) -> None:
        if self.name is None:
            label = f"{{{self.base.name} | {_callable_name(self.predicate)}}}"
            object.__setattr__(self, "name", label)

    def is_(self, value: typing.Any) -> bool:
        return self.base.is_(value) and bool(self.predicate(value))


@dataclass(frozen=True, slots=True, eq=False)
class Struct:
    """A record with named, typed fields. Extra keys in a value are allowed."""

    fields: Mapping[str, Descriptor]
    name: str = "Struct"

    kind: typing.ClassVar[Kind] = Kind.STRUCT

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))

    def is_(self, value: typing.Any) -> bool:
        if not isinstance(value, Mapping):
            return False
        return all(d.is_(value.get(k, MISSING)) for k, d in self.fields.items())


@dataclass(frozen=True, slots=True, eq=False)
class Dict:
    """A mapping with uniformly typed keys and values."""

    domain: Descriptor
    codomain: Descriptor
    name: str | None = None

    kind: typing.ClassVar[Kind] = Kind.DICT

    def __post_init__(self) -> None:
        if self.name is None:
            label = f"dict[{self.domain.name}, {self.codomain.name}]"
            object.__setattr__(self, "name", label)

    def is_(self, value: typing.Any) -> bool:
        if not isinstance(value, Mapping):
            return False
        return all(
            self.domain.is_(k) and self.codomain.is_(v) for k, v in value.items()
        )


@dataclass(frozen=True, slots=True, eq=False)
class List:
    """A sequence whose elements all share one type."""

    element: Descriptor
    name: str | None = None

    kind: typing.ClassVar[Kind] = Kind.LIST

    def __post_init__(self) -> None:
        if self.name is None:
            object.__setattr__(self, "name", f"list[{self.element.name}]")

    def is_(self, value: typing.Any) -> bool:
        return is_sequence(value) and all(self.element.is_(x) for x in value)


@dataclass(frozen=True, slots=True, eq=False)
class Tuple:
    """A fixed-length sequence with a type per position."""

    elements: tuple[Descriptor, ...]
    name: str | None = None

    kind: typing.ClassVar[Kind] = Kind.TUPLE

    def __post_init__(self) -> None:
        object.__setattr__(self, "elements", tuple(self.elements))
        if self.name is None:
            inner = ", ".join(d.name for d in self.elements)
            object.__setattr__(self, "name", f"tuple[{inner}]")

    def is_(self, value: typing.Any) -> bool:
        return (
            is_sequence(value)
            and len(value) == len(self.elements)
            and all(d.is_(x) for d, x in zip(self.elements, value))
        )


@dataclass(frozen=True, slots=True, eq=False)
class Union:
    """
    Exactly one of several candidate types.

    `dispatch(value)` picks the candidate, by index or by returning the
    candidate itself. Any other result means the value fits no candidate.
    """

    candidates: tuple[Descriptor, ...]
    dispatch: DispatchFn | None = None
    name: str | None = None

    kind: typing.ClassVar[Kind] = Kind.UNION

    def __post_init__(self) -> None:
        object.__setattr__(self, "candidates", tuple(self.candidates))
        if self.name is None:
            label = " | ".join(d.name for d in self.candidates)
            object.__setattr__(self, "name", label)

    @classmethod
    def by_membership(
        cls, candidates: Iterable[Descriptor], name: str | None = None
    ) -> Union:
        """Build a union that dispatches to the first candidate accepting the value."""
        options = tuple(candidates)

        def dispatch(value: typing.Any) -> int | None:
            for i, candidate in enumerate(options):
                if candidate.is_(value):
                    return i
            return None

        return cls(options, dispatch, name)

    def select(self, value: typing.Any) -> Descriptor | None:
        """
        Run the dispatch function and return the chosen candidate, or None.

        Raises:
            DescriptorError: If the union has no dispatch function
        """
        if self.dispatch is None:
            raise DescriptorError(f"Union {self.name!r} has no dispatch function")

        chosen = self.dispatch(value)
        if isinstance(chosen, int) and not isinstance(chosen, bool):
            if 0 <= chosen < len(self.candidates):
                return self.candidates[chosen]
            return None
        for candidate in self.candidates:
            if chosen is candidate:
                return candidate
        return None

    def is_(self, value: typing.Any) -> bool:
        chosen = self.select(value)
        return chosen is not None and chosen.is_(value)


@dataclass(frozen=True, slots=True, eq=False)
class Enum:
    """
    A fixed, finite set of allowed values.

    `values` is any iterable of values, or a mapping whose keys are the values
    (e.g. value -> display label).
    """

    values: tuple[typing.Any, ...]
    name: str = "Enum"

    kind: typing.ClassVar[Kind] = Kind.ENUM

    def __post_init__(self) -> None:
        values = self.values
        if isinstance(values, Mapping):
            values = values.keys()
        object.__setattr__(self, "values", tuple(values))

    def is_(self, value: typing.Any) -> bool:
        # bool is an int subclass; keep True from matching 1
        return any(
            value == allowed and isinstance(value, bool) == isinstance(allowed, bool)
            for allowed in self.values
        )


@dataclass(frozen=True, slots=True, eq=False)
class Maybe:
    """The wrapped type, or None/absent."""

    inner: Descriptor
    name: str | None = None

    kind: typing.ClassVar[Kind] = Kind.MAYBE

    def __post_init__(self) -> None:
        if self.name is None:
            object.__setattr__(self, "name", f"Optional[{self.inner.name}]")

    def is_(self, value: typing.Any) -> bool:
        return is_nil(value) or self.inner.is_(value)


Descriptor = typing.Union[Primitive, Subtype, Struct, Dict, List, Tuple, Union, Enum, Maybe]
DESCRIPTOR_TYPES = (Primitive, Subtype, Struct, Dict, List, Tuple, Union, Enum, Maybe)


def _is_number(x: typing.Any) -> bool:
    if isinstance(x, bool):
        return False
    # Ints are exact; only floats can be NaN or infinite
    return isinstance(x, int) or (isinstance(x, float) and math.isfinite(x))


Any = Primitive("Any", lambda _: True, typing.Any)
Nil = Primitive("Nil", is_nil, type(None))
Str = Primitive("Str", lambda x: isinstance(x, str), str)
Num = Primitive("Num", _is_number, float)
Int = Primitive("Int", lambda x: isinstance(x, int) and not isinstance(x, bool), int)
Bool = Primitive("Bool", lambda x: isinstance(x, bool), bool)
Func = Primitive("Func", callable, typing.Callable)
Obj = Primitive("Obj", lambda x: isinstance(x, Mapping), dict)
Arr = Primitive("Arr", is_sequence, list)

_BUILTIN_TYPES: dict[type, Primitive] = {
    object: Any,
    type(None): Nil,
    str: Str,
    float: Num,
    int: Int,
    bool: Bool,
    dict: Obj,
    list: Arr,
}


def to_descriptor(schema: typing.Any) -> Descriptor:
    """
    Coerce a shorthand schema to a descriptor.

    Conversion rules:
        descriptor -> pass through
        type -> Primitive (built-in primitives for str, int, float, ...)
        dict -> Struct with recursive conversion
        [x] -> List of x
        (x, y, ...) -> Tuple
        {a, b, ...} -> Enum
        callable -> Primitive using it as the membership check

    Raises:
        DescriptorError: If `schema` cannot be converted
    """
    if isinstance(schema, DESCRIPTOR_TYPES):
        return schema

    if isinstance(schema, type):
        if schema in _BUILTIN_TYPES:
            return _BUILTIN_TYPES[schema]

        def type_check(x: typing.Any, t: type = schema) -> bool:
            return isinstance(x, t)

        return Primitive(schema.__name__, type_check, schema)

    if isinstance(schema, dict):
        return Struct({k: to_descriptor(v) for k, v in schema.items()})

    if isinstance(schema, list):
        if len(schema) != 1:
            raise DescriptorError(
                "List shorthand needs exactly one element type; use Union for several"
            )
        return List(to_descriptor(schema[0]))

    if isinstance(schema, tuple):
        return Tuple(tuple(to_descriptor(s) for s in schema))

    if isinstance(schema, (set, frozenset)):
        return Enum(tuple(schema))

    if callable(schema):
        return Primitive(_callable_name(schema), schema)

    raise DescriptorError(f"Cannot convert {type(schema).__name__} to a descriptor")
