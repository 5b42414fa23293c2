"""
Message resolution and default formatting for validation errors.

A message configuration mirrors the shape of the descriptor it applies to:

    messages = {
        ":struct": "expected an object",
        "name": "bad name",
        "tags": {":input": "tags must be a list", 0: "first tag is wrong"},
    }

Ordinary keys follow field names and indices; reserved keys select a failure
kind at the node they sit on. A plain string (or callable) node applies to
every failure at or below it. The special string ":xpath" replaces every
message with the failing path itself.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from enum import Enum
from typing import Any, Callable, Union

from .paths import format_path
from .types import MISSING, Path

XPATH = ":xpath"


class FailureKind(Enum):
    INPUT = ":input"
    TYPE = ":type"
    PREDICATE = ":predicate"
    DISPATCH = ":dispatch"
    STRUCT = ":struct"


MessageFn = Callable[[Any, Path], str]
MessageConfig = Union[str, MessageFn, Mapping[Any, Any], None]
Formatter = Callable[[Path, FailureKind, Any, str], str]

# Kind keys tried, in order, once the walk reaches the failing node
_KIND_KEYS: dict[FailureKind, tuple[str, ...]] = {
    FailureKind.INPUT: (":input",),
    FailureKind.TYPE: (":type",),
    FailureKind.PREDICATE: (":predicate",),
    FailureKind.DISPATCH: (":dispatch",),
    FailureKind.STRUCT: (":struct", ":input"),
}


def _is_leaf(node: Any) -> bool:
    return isinstance(node, str) or callable(node)


def _child(node: Mapping[Any, Any], segment: Any) -> Any:
    if segment in node:
        return node[segment]
    # Index segments may be configured by their string form
    if isinstance(segment, int) and str(segment) in node:
        return node[str(segment)]
    return None


def resolve(
    messages: MessageConfig, path: Path, kind: FailureKind
) -> str | MessageFn | None:
    """
    Find the custom message for a failure of `kind` at `path`.

    Returns None when nothing is configured, which means the default
    formatter should be used.
    """
    node: Any = messages
    for segment in path:
        if node is None:
            return None
        if _is_leaf(node):
            return node
        if not isinstance(node, Mapping):
            return None
        node = _child(node, segment)

    if node is None or _is_leaf(node):
        return node
    if isinstance(node, Mapping):
        for key in _KIND_KEYS[kind]:
            found = node.get(key)
            if found is not None and _is_leaf(found):
                return found
    return None


def _is_plain(value: Any, seen: frozenset[int] = frozenset()) -> bool:
    """True if `value` survives a JSON round trip unchanged in shape."""
    if value is None or isinstance(value, (str, int, float)):
        return True
    if id(value) in seen:
        return False
    seen = seen | {id(value)}
    if isinstance(value, (list, tuple)):
        return all(_is_plain(v, seen) for v in value)
    if isinstance(value, dict):
        return all(isinstance(k, str) and _is_plain(v, seen) for k, v in value.items())
    return False


def render_value(value: Any) -> str:
    """
    Render an offending value for a message.

    JSON for plain data, so strings are quoted and None reads as null.
    Anything JSON would distort (sets, objects, non-string keys) renders
    with repr. MISSING reads as undefined.
    """
    if value is MISSING:
        return "undefined"
    if _is_plain(value):
        return json.dumps(value, ensure_ascii=False)
    return repr(value)


def default_formatter(path: Path, kind: FailureKind, value: Any, expected: str) -> str:
    """Build the default message for a failure."""
    where = format_path(path)
    rendered = render_value(value)
    if kind is FailureKind.PREDICATE:
        return f"{where} is {rendered}, should be truthy for the predicate"
    if kind is FailureKind.DISPATCH:
        return f"{where} is {rendered}, should be dispatchable to one of {expected}"
    return f"{where} is {rendered}, should be a {expected}"


def get_message(
    messages: MessageConfig,
    path: Path,
    kind: FailureKind,
    value: Any,
    expected: str,
    formatter: Formatter = default_formatter,
) -> str:
    """Resolve the final message text for one failure."""
    if messages == XPATH:
        return format_path(path)

    found = resolve(messages, path, kind)
    if found is None:
        return formatter(path, kind, value, expected)
    if callable(found):
        return found(value, path)
    return found
