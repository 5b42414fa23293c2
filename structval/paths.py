"""
Path helpers for structval.

A path is a tuple of segments (field names and list indices) locating a value
inside a nested structure. Paths are only ever extended, never mutated, so
sibling branches can share a parent path safely.

String form:
- Keys joined by dots: "user.name"
- Indices in brackets: "tags[1]", "[0].name"
- The root path renders as "value"
"""

import re
from collections.abc import Mapping, Sequence
from typing import Any

from .types import MISSING, Path, PathSegment

ROOT_LABEL = "value"

KEY_PATTERN = re.compile(r"^[a-zA-Z_][a-zA-Z0-9_-]*")
INDEX_PATTERN = re.compile(r"^\[(-?\d+)\]")


def extend(path: Path, segment: PathSegment) -> Path:
    """Return a new path with `segment` appended."""
    return (*path, segment)


def format_path(path: Path, root: str = ROOT_LABEL) -> str:
    """
    Render a path as a dotted/bracketed string.

    Examples:
        format_path(())                   # "value"
        format_path(("user", "name"))     # "user.name"
        format_path(("tags", 1))          # "tags[1]"
        format_path((0, "name"))          # "[0].name"
    """
    if not path:
        return root

    out: list[str] = []
    for segment in path:
        if isinstance(segment, int) and not isinstance(segment, bool):
            out.append(f"[{segment}]")
        elif out:
            out.append(f".{segment}")
        else:
            out.append(str(segment))
    return "".join(out)


def parse_path(path_str: str) -> Path:
    """
    Parse a dotted/bracketed path string into a path tuple.

    Raises:
        ValueError: If the string is not a valid path
    """
    if not path_str:
        return ()

    segments: list[PathSegment] = []
    remaining = path_str

    while remaining:
        if match := INDEX_PATTERN.match(remaining):
            segments.append(int(match.group(1)))
        elif match := KEY_PATTERN.match(remaining):
            segments.append(match.group(0))
        else:
            raise ValueError(f"Invalid path syntax at: {remaining}")
        remaining = remaining[match.end() :]

        # Skip dot separator if present
        if remaining.startswith("."):
            remaining = remaining[1:]
            if not remaining or remaining.startswith("["):
                raise ValueError(f"Invalid path syntax: {path_str}")

    return tuple(segments)


def to_path(path: Path | Sequence[PathSegment] | str | None) -> Path:
    """Coerce a path string, list or tuple into a path tuple."""
    if path is None:
        return ()
    if isinstance(path, str):
        return parse_path(path)
    return tuple(path)


def get_in(data: Any, path: Path, default: Any = MISSING) -> Any:
    """
    Walk `data` along `path`, returning `default` when a step cannot be taken.

    Examples:
        get_in({"a": {"b": [1, 2]}}, ("a", "b", 1))   # 2
        get_in({"a": {}}, ("a", "x"))                 # MISSING
    """
    current = data
    for segment in path:
        if isinstance(current, Mapping):
            if segment not in current:
                return default
            current = current[segment]
        elif isinstance(current, Sequence) and not isinstance(current, (str, bytes)):
            if not isinstance(segment, int) or not -len(current) <= segment < len(current):
                return default
            current = current[segment]
        else:
            return default
    return current
