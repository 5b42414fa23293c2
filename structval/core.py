"""
Recursive validation of values against type descriptors.

Every branch returns its own list of errors and the caller concatenates them,
so one call reports every violation instead of stopping at the first.
Container checks short-circuit: a value that is not the expected container
yields a single error and its children are not visited.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from .context import current_formatter
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
    is_nil,
    is_sequence,
    to_descriptor,
)
from .errors import DescriptorError, ValidationError, build_error
from .logs import get_logger
from .messages import FailureKind, Formatter, MessageConfig, default_formatter
from .paths import extend, to_path
from .result import ValidationResult
from .types import MISSING, Path, PathSegment

logger = get_logger(__name__)


def validate_value(
    value: Any,
    descriptor: Descriptor,
    path: Path = (),
    messages: MessageConfig = None,
    formatter: Formatter = default_formatter,
) -> list[ValidationError]:
    """
    Validate `value` against `descriptor`, returning every failure found.

    Raises:
        DescriptorError: If the descriptor is malformed
    """
    if descriptor.is_(value):
        return []

    def fail(kind: FailureKind) -> list[ValidationError]:
        return [build_error(path, value, descriptor.name, kind, messages, formatter)]

    def child(item: Any, d: Descriptor, segment: PathSegment) -> list[ValidationError]:
        return validate_value(item, d, extend(path, segment), messages, formatter)

    match descriptor:
        case Primitive():
            return fail(FailureKind.TYPE)

        case Maybe(inner=inner):
            if is_nil(value):
                return []
            return validate_value(value, inner, path, messages, formatter)

        case Subtype(base=base, predicate=predicate):
            errors = validate_value(value, base, path, messages, formatter)
            if errors:
                return errors
            if not predicate(value):
                return fail(FailureKind.PREDICATE)
            return []

        case Struct(fields=fields):
            if not isinstance(value, Mapping):
                return fail(FailureKind.STRUCT)
            errors = []
            for key, field_type in fields.items():
                errors.extend(child(value.get(key, MISSING), field_type, key))
            return errors

        case Dict(domain=domain, codomain=codomain):
            if not isinstance(value, Mapping):
                return fail(FailureKind.INPUT)
            errors = []
            for key, item in value.items():
                errors.extend(child(key, domain, key))
                errors.extend(child(item, codomain, key))
            return errors

        case List(element=element):
            if not is_sequence(value):
                return fail(FailureKind.INPUT)
            errors = []
            for i, item in enumerate(value):
                errors.extend(child(item, element, i))
            return errors

        case Tuple(elements=elements):
            if not is_sequence(value) or len(value) != len(elements):
                return fail(FailureKind.INPUT)
            errors = []
            for i, (item, item_type) in enumerate(zip(value, elements)):
                errors.extend(child(item, item_type, i))
            return errors

        case Union():
            chosen = descriptor.select(value)
            if chosen is None:
                return fail(FailureKind.DISPATCH)
            return validate_value(value, chosen, path, messages, formatter)

        case Enum():
            return fail(FailureKind.TYPE)

    logger.error("unknown_descriptor", descriptor=repr(descriptor))
    raise DescriptorError(f"Unknown descriptor: {descriptor!r}")


def validate(
    value: Any,
    type: Any,
    *,
    messages: MessageConfig = None,
    path: Path | Sequence[PathSegment] | str = (),
    formatter: Formatter | None = None,
) -> ValidationResult:
    """
    Validate a value against a type descriptor or shorthand schema.

    Args:
        value: The value to validate
        type: A descriptor, or shorthand accepted by `to_descriptor`
        messages: Custom message tree, or ":xpath" to report bare paths
        path: Root path to report errors under, as segments or "a.b[0]"
        formatter: Default message formatter; overrides `validation_context`

    Returns:
        ValidationResult with every failure found

    Raises:
        DescriptorError: If the descriptor is malformed

    Usage:
        Person = Struct({"name": Str, "tags": List(Str)})
        result = validate({"name": "Ada", "tags": ["a", 1]}, Person)
        result.first_error().path     # ("tags", 1)
        result.first_error().message  # 'tags[1] is 1, should be a Str'
    """
    descriptor = to_descriptor(type)
    errors = validate_value(
        value,
        descriptor,
        to_path(path),
        messages,
        formatter or current_formatter(),
    )
    logger.debug(
        "validation_complete",
        descriptor=descriptor.name,
        errors=len(errors),
        valid=not errors,
    )
    return ValidationResult(value=value, errors=tuple(errors))
