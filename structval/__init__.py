"""
structval - Structural validation with path-addressed errors.

Usage:
    from structval import Struct, List, Maybe, Subtype, Num, Str, validate

    Person = Struct({
        "name": Str,
        "age": Maybe(Subtype(Num, lambda n: n >= 0, "Age")),
        "tags": List(Str),
    }, "Person")

    result = validate({"name": "Ada", "tags": ["a", 1]}, Person)
    result.is_valid()               # False
    result.first_error().path       # ("tags", 1)
    result.first_error().message    # 'tags[1] is 1, should be a Str'
"""

from .adapters import field_validators, to_pydantic, validate_at
from .context import validation_context
from .core import validate, validate_value
from .descriptors import (
    Any,
    Arr,
    Bool,
    Descriptor,
    Dict,
    Enum,
    Func,
    Int,
    Kind,
    List,
    Maybe,
    Nil,
    Num,
    Obj,
    Primitive,
    Str,
    Struct,
    Subtype,
    Tuple,
    Union,
    to_descriptor,
)
from .errors import DescriptorError, ValidationError
from .messages import XPATH, FailureKind, default_formatter, render_value, resolve
from .paths import format_path, get_in, parse_path
from .result import ValidationResult
from .types import MISSING, Err, Ok

__all__ = [
    # Entry points
    "validate",
    "validate_value",
    "validation_context",
    # Descriptors
    "Descriptor",
    "Kind",
    "Primitive",
    "Subtype",
    "Struct",
    "Dict",
    "List",
    "Tuple",
    "Union",
    "Enum",
    "Maybe",
    "to_descriptor",
    # Built-in primitives
    "Any",
    "Nil",
    "Str",
    "Num",
    "Int",
    "Bool",
    "Func",
    "Obj",
    "Arr",
    # Results and errors
    "ValidationResult",
    "ValidationError",
    "DescriptorError",
    "FailureKind",
    "Ok",
    "Err",
    "MISSING",
    # Messages and paths
    "XPATH",
    "resolve",
    "default_formatter",
    "render_value",
    "format_path",
    "parse_path",
    "get_in",
    # Adapters
    "field_validators",
    "validate_at",
    "to_pydantic",
]
