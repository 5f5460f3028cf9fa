"""Iterate the immediate children of the value at a pointer.

Each visitor receives the child's pointer and value. When the pointer does
not resolve, or resolves to a scalar, there is nothing to visit: :func:`map_children`
returns ``[]`` and :func:`reduce_children` returns the accumulator untouched.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from typing import Any

from .navigate import join
from .pointer import JsonPointer, PointerLike, as_pointer
from .resolve import try_resolve
from .types import Ok


def iter_children(pointer: PointerLike, data: Any) -> Iterator[tuple[JsonPointer, Any]]:
    """Yield ``(child_pointer, child_value)`` pairs in document order."""
    ptr = as_pointer(pointer)
    match try_resolve(data, ptr):
        case Ok(value=Mapping() as obj):
            for key, child in obj.items():
                yield join(ptr, [key]), child
        case Ok(value=list() | tuple() as array):
            for index, child in enumerate(array):
                yield join(ptr, [str(index)]), child


def map_children[R](
    pointer: PointerLike, data: Any, visitor: Callable[[JsonPointer, Any], R]
) -> list[R]:
    """Collect ``visitor(child_pointer, child_value)`` for every child."""
    return [visitor(child_ptr, child) for child_ptr, child in iter_children(pointer, data)]


def each_child(pointer: PointerLike, data: Any, visitor: Callable[[JsonPointer, Any], Any]) -> None:
    for child_ptr, child in iter_children(pointer, data):
        visitor(child_ptr, child)


def reduce_children[A](
    pointer: PointerLike,
    data: Any,
    acc: A,
    visitor: Callable[[JsonPointer, Any, A], A],
) -> A:
    """Fold the children into *acc*, in document order."""
    for child_ptr, child in iter_children(pointer, data):
        acc = visitor(child_ptr, child, acc)
    return acc


__all__ = ["each_child", "iter_children", "map_children", "reduce_children"]
