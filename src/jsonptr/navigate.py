"""Pointer algebra: appending and removing segments."""

from __future__ import annotations

from collections.abc import Sequence

from .errors import RootBacktrackError
from .escape import split_tokens
from .pointer import JsonPointer, PointerLike, as_pointer
from .types import Err, Ok


def join(pointer: PointerLike, additional: str | Sequence[str | int]) -> JsonPointer:
    """Append segments to *pointer*.

    A string is treated as a slash-delimited suffix in pointer text form: it
    is percent-decoded and unescaped before appending (``"a~1b/c"`` appends
    ``"a/b"`` and ``"c"``). One leading ``/`` is ignored, so ``"/c"`` and
    ``"c"`` append the same segment. Any other sequence is appended verbatim,
    one segment per item.
    """
    base = as_pointer(pointer)
    if isinstance(additional, str):
        extra: Sequence[str | int] = split_tokens(additional.removeprefix("/"))
    else:
        extra = additional
    return JsonPointer(base.parts + tuple(extra))


def try_backtrack(pointer: PointerLike) -> Ok[JsonPointer] | Err[RootBacktrackError]:
    """Drop the last segment; the root pointer yields ``Err``."""
    ptr = as_pointer(pointer)
    if ptr.is_root:
        return Err(RootBacktrackError())
    return Ok(JsonPointer(ptr.parts[:-1]))


def backtrack(pointer: PointerLike) -> JsonPointer:
    """Like :func:`try_backtrack` but raises :class:`RootBacktrackError`."""
    return try_backtrack(pointer).unwrap()


def try_pop(pointer: PointerLike) -> Ok[tuple[JsonPointer, str]] | Err[RootBacktrackError]:
    """Drop the last segment and return it alongside the shortened pointer."""
    ptr = as_pointer(pointer)
    if ptr.is_root:
        return Err(RootBacktrackError())
    return Ok((JsonPointer(ptr.parts[:-1]), ptr.parts[-1]))


def pop(pointer: PointerLike) -> tuple[JsonPointer, str]:
    return try_pop(pointer).unwrap()


__all__ = ["backtrack", "join", "pop", "try_backtrack", "try_pop"]
