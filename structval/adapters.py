"""
Adapters built on the validator core.

- field_validators: one validation callable per struct field (e.g. for form bindings)
- validate_at: validate a sub-value of a larger document
- to_pydantic: compile a struct descriptor to a Pydantic model
"""

from __future__ import annotations

from collections.abc import Sequence
from functools import partial
from typing import Annotated, Any, Callable, Literal
from typing import Optional as TypingOptional
from typing import Union as TypingUnion

from pydantic import AfterValidator, create_model

from .core import validate
from .descriptors import (
    Descriptor,
    Dict,
    Enum,
    List,
    Maybe,
    Primitive,
    Struct,
    Subtype,
    Tuple,
    Union,
    to_descriptor,
)
from .errors import DescriptorError
from .messages import Formatter, MessageConfig
from .paths import extend, get_in, to_path
from .result import ValidationResult
from .types import Path, PathSegment


def _as_struct(schema: Any) -> Struct:
    descriptor = to_descriptor(schema)
    if not isinstance(descriptor, Struct):
        raise DescriptorError(f"Expected a struct descriptor, got {descriptor.name}")
    return descriptor


def field_validators(
    schema: Any,
    messages: MessageConfig = None,
    path: Path | Sequence[PathSegment] | str = (),
    formatter: Formatter | None = None,
) -> dict[str, Callable[[Any], ValidationResult]]:
    """
    Build one validator per struct field, each reporting under its own path.

    Every callable gets the whole `messages` tree. Messages are looked up by
    the full reported path, so a field only reaches its own sub-tree, and a
    seeded `path` must be mirrored in the tree.

    Usage:
        checks = field_validators(Person, messages={"name": "bad name"})
        checks["name"](42).first_error().message   # "bad name"
        checks["name"](42).first_error().path      # ("name",)
    """
    struct = _as_struct(schema)
    root = to_path(path)
    return {
        key: partial(
            validate,
            type=field_type,
            messages=messages,
            path=extend(root, key),
            formatter=formatter,
        )
        for key, field_type in struct.fields.items()
    }


def validate_at(
    document: Any,
    schema: Any,
    path: Path | Sequence[PathSegment] | str,
    messages: MessageConfig = None,
) -> ValidationResult:
    """
    Validate the value found at `path` inside `document`.

    Error paths are reported relative to the document. A path that does not
    exist is validated as an absent value.

    Usage:
        validate_at({"user": {"age": "x"}}, Int, "user.age").first_error().path
        # ("user", "age")
    """
    at = to_path(path)
    return validate(get_in(document, at), schema, messages=messages, path=at)


def to_pydantic(name: str, schema: Any) -> type:
    """
    Compile a struct descriptor to a Pydantic model.

    Args:
        name: Name of the generated model class
        schema: Struct descriptor or dict shorthand

    Returns:
        A Pydantic BaseModel subclass

    Usage:
        User = to_pydantic("User", Struct({"name": Str, "email": Maybe(Str)}))
        user = User(name="Alice")
    """
    struct = _as_struct(schema)

    fields: dict[str, Any] = {}
    for key, field_type in struct.fields.items():
        annotation = _annotation(field_type)
        if isinstance(field_type, Maybe):
            fields[key] = (annotation, None)
        else:
            fields[key] = (annotation, ...)

    return create_model(name, **fields)


def _predicate_validator(predicate: Callable[[Any], bool], label: str) -> AfterValidator:
    def check(value: Any) -> Any:
        if not predicate(value):
            raise ValueError(f"should be truthy for the predicate {label}")
        return value

    return AfterValidator(check)


def _annotation(d: Descriptor) -> Any:
    """Map a descriptor to a Pydantic-compatible type annotation."""
    match d:
        case Primitive(py_type=t):
            return t if t is not None else Any
        case Maybe(inner=inner):
            return TypingOptional[_annotation(inner)]
        case Subtype(base=base, predicate=predicate, name=label):
            return Annotated[_annotation(base), _predicate_validator(predicate, label)]
        case Struct(name=label):
            return to_pydantic(label, d)
        case Dict(domain=domain, codomain=codomain):
            return dict[_annotation(domain), _annotation(codomain)]
        case List(element=element):
            return list[_annotation(element)]
        case Tuple(elements=elements):
            return tuple[tuple(_annotation(e) for e in elements)]
        case Union(candidates=candidates):
            return TypingUnion[tuple(_annotation(c) for c in candidates)]
        case Enum(values=values):
            return Literal[values]

    raise DescriptorError(f"Unknown descriptor: {d!r}")
