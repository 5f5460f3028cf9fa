"""Resolve a JSON Pointer against decoded JSON data.

:func:`try_resolve` never raises for traversal failures and returns a tagged
:class:`~jsonptr.types.Ok` / :class:`~jsonptr.types.Err`; :func:`resolve` is
the raising convenience form built on top of it.

Example::

    >>> resolve({"€": ["quux", "ren"]}, "/%E2%82%AC/1")
    'ren'
    >>> try_resolve([10, 20, 30], ["5"])
    Err(error=IndexOutOfRangeError("array at '/' of [10,20,30] does not have an item at index 5"))
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import Any

from .errors import (
    IndexOutOfRangeError,
    KeyNotFoundError,
    NonNumericSegmentError,
    ShapeMismatchError,
    TraversalError,
)
from .pointer import JsonPointer, PointerLike, as_pointer, to_uri
from .types import Err, Ok, shape_of, snapshot

_INDEX_RE = re.compile(r"-?[0-9]+")

_MISSING: Any = object()


def parse_index(segment: str) -> int | None:
    """Return the decimal array index in *segment*, or ``None`` if it is not numeric.

    Negative numbers parse; callers reject them as out of range.
    """
    if _INDEX_RE.fullmatch(segment) is None:
        return None
    return int(segment)


def _failure(
    error_cls: type[TraversalError],
    value: Any,
    segment: str,
    consumed: Sequence[str],
    document: Any,
) -> Err[TraversalError]:
    path = to_uri(JsonPointer(tuple(consumed)))
    return Err(error_cls(shape_of(value), segment, path, snapshot(document)))


def step(
    value: Any, segment: str, *, consumed: Sequence[str], document: Any
) -> Ok[Any] | Err[TraversalError]:
    """Follow a single *segment* from *value*.

    *consumed* and *document* only feed the error message.
    """
    shape = shape_of(value)
    match shape:
        case "array":
            index = parse_index(segment)
            if index is None:
                return _failure(NonNumericSegmentError, value, segment, consumed, document)
            if not 0 <= index < len(value):
                return _failure(IndexOutOfRangeError, value, segment, consumed, document)
            return Ok(value[index])
        case "object":
            if segment not in value:
                return _failure(KeyNotFoundError, value, segment, consumed, document)
            return Ok(value[segment])
        case _:
            return _failure(ShapeMismatchError, value, segment, consumed, document)


def try_resolve(data: Any, pointer: PointerLike) -> Ok[Any] | Err[TraversalError]:
    """Look up the value addressed by *pointer* inside *data*.

    The root pointer returns *data* itself, whatever its shape.
    """
    parts = as_pointer(pointer).parts
    current = data
    for depth, segment in enumerate(parts):
        outcome = step(current, segment, consumed=parts[:depth], document=data)
        if isinstance(outcome, Err):
            return outcome
        current = outcome.value
    return Ok(current)


def resolve(data: Any, pointer: PointerLike, default: Any = _MISSING) -> Any:
    """Return the value addressed by *pointer* inside *data*.

    Parameters
    ----------
    data
        Decoded JSON (``dict`` / ``list`` / scalars).
    pointer
        A :class:`~jsonptr.pointer.JsonPointer`, pointer text or a sequence
        of segments.
    default
        Returned instead of raising when the pointer cannot be followed.

    Raises
    ------
    TraversalError
        If the pointer cannot be followed and no *default* is given.
    MalformedPointerError
        If *pointer* is text that does not start with ``/``.
    """
    outcome = try_resolve(data, pointer)
    if default is _MISSING:
        return outcome.unwrap()
    return outcome.unwrap_or(default)


__all__ = ["parse_index", "resolve", "step", "try_resolve"]
