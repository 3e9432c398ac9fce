"""Dotted key path resolution over dictionary trees.

Lookups return a tagged result, ``Found(value)`` or ``NOT_FOUND``, so callers
inside the engine can tell a miss from a value that happens to equal its key.
The public API collapses ``NOT_FOUND`` back to the key string.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Union

from glossa.i18n.errors import NonStringResultError


@dataclass(frozen=True)
class Found:
    """A value resolved from a dictionary."""

    value: Any


class _NotFound:
    """Singleton marker for an unresolved path."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NOT_FOUND"


NOT_FOUND = _NotFound()

LookupResult = Union[Found, _NotFound]


def _descend(node: Any, segment: str) -> LookupResult:
    if isinstance(node, Mapping):
        if segment in node:
            return Found(node[segment])
        return NOT_FOUND

    if isinstance(node, Sequence) and not isinstance(node, str):
        # Sequence items are addressed by their index written as a key segment
        if not segment.isdigit():
            return NOT_FOUND
        index = int(segment)
        if index < len(node):
            return Found(node[index])

    return NOT_FOUND


def lookup(dictionary: Mapping, path: str, strict: bool = True) -> LookupResult:
    """Resolve a dotted path in a dictionary tree.

    Args:
        dictionary: Locale dictionary to search.
        path: Key such as ``"greeting"`` or ``"menu.items.0.label"``.
        strict: If True, a resolved value that is not a string raises.

    Returns:
        ``Found(value)`` or ``NOT_FOUND``. A stored ``None`` is found.

    Raises:
        NonStringResultError: If ``strict`` and the value is not a string.
    """
    if "." not in path:
        result = Found(dictionary[path]) if path in dictionary else NOT_FOUND
    else:
        result = Found(dictionary)
        for segment in path.split("."):
            result = _descend(result.value, segment)
            if result is NOT_FOUND:
                break

    if strict and isinstance(result, Found) and not isinstance(result.value, str):
        raise NonStringResultError(path)

    return result


def resolve_path(dictionary: Mapping, path: str, strict: bool = True) -> Any:
    """Resolve a dotted path, returning the path itself when it is absent."""
    result = lookup(dictionary, path, strict)
    return result.value if isinstance(result, Found) else path
