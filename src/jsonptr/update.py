"""Pointer-guided updates that return a new document.

The input is never mutated: only the containers along the pointer are
shallow-copied, every other value is shared with the original document.
"""

from __future__ import annotations

import copy
from collections.abc import Callable, Mapping, MutableMapping, Sequence
from typing import Any

from .pointer import PointerLike, as_pointer
from .resolve import parse_index, step


def update(data: Any, pointer: PointerLike, transform: Callable[[Any], Any]) -> Any:
    """Replace the value at *pointer* with ``transform(old_value)``.

    Array segments may be given as ``int`` or as decimal text
    (``["foo", 0]`` and ``"/foo/0"`` address the same element).

    Raises
    ------
    TraversalError
        If the pointer cannot be followed; no partial document is returned.
    """
    parts = as_pointer(pointer).parts
    return _update_in(data, parts, 0, transform, data)


def set_value(data: Any, pointer: PointerLike, value: Any) -> Any:
    """Return a copy of *data* with *value* placed at *pointer*."""
    return update(data, pointer, lambda _old: value)


def _update_in(
    value: Any,
    parts: Sequence[str],
    depth: int,
    transform: Callable[[Any], Any],
    document: Any,
) -> Any:
    if depth == len(parts):
        return transform(value)
    segment = parts[depth]
    child = step(value, segment, consumed=parts[:depth], document=document).unwrap()
    return _replace_child(value, segment, _update_in(child, parts, depth + 1, transform, document))


def _replace_child(container: Any, segment: str, child: Any) -> Any:
    match container:
        case list():
            updated = copy.copy(container)
            updated[parse_index(segment)] = child
            return updated
        case tuple():
            index = parse_index(segment)
            return (*container[:index], child, *container[index + 1 :])
        case MutableMapping():
            updated = copy.copy(container)
            updated[segment] = child
            return updated
        case Mapping():
            return {**container, segment: child}
    raise TypeError(f"Cannot rebuild {type(container).__name__}")


__all__ = ["set_value", "update"]
