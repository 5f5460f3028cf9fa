"""Exceptions raised by jsonptr."""

from __future__ import annotations


class JsonPointerError(ValueError):
    """Base exception for all JSON Pointer errors."""


class MalformedPointerError(JsonPointerError):
    """Raised when pointer text does not start with ``/``."""


class RootBacktrackError(JsonPointerError):
    """Raised when removing a segment from the root pointer."""

    def __init__(self) -> None:
        super().__init__("cannot backtrack the root pointer")


class TraversalError(JsonPointerError):
    """A pointer could not be followed through a document.

    Attributes
    ----------
    shape : str
        JSON shape name of the value that could not be traversed
        (``"null"``, ``"boolean"``, ``"number"``, ``"string"``, ``"array"``
        or ``"object"``).
    segment : str
        The segment that failed.
    path : str
        Rendered pointer of the part already consumed.
    document : str
        Compact JSON snapshot of the document being traversed.
    """

    def __init__(self, shape: str, segment: str, path: str, document: str) -> None:
        self.shape = shape
        self.segment = segment
        self.path = path
        self.document = document
        super().__init__(self._format())

    def _format(self) -> str:
        return (
            f"{self.shape} at '{self.path}' of {self.document} "
            f"can not take the path {self.segment}"
        )


class ShapeMismatchError(TraversalError):
    """Raised when segments remain but the current value is a scalar."""


class IndexOutOfRangeError(TraversalError):
    """Raised when a numeric array index has no element."""

    def _format(self) -> str:
        return (
            f"array at '{self.path}' of {self.document} "
            f"does not have an item at index {self.segment}"
        )


class NonNumericSegmentError(TraversalError):
    """Raised when an array is addressed with a non-numeric segment."""

    def _format(self) -> str:
        return (
            f"array at '{self.path}' of {self.document} "
            f"cannot access with non-numerical value {self.segment}"
        )


class KeyNotFoundError(TraversalError):
    """Raised when an object lacks the requested key."""

    def _format(self) -> str:
        return f"object at '{self.path}' of {self.document} cannot access with key '{self.segment}'"


__all__ = [
    "IndexOutOfRangeError",
    "JsonPointerError",
    "KeyNotFoundError",
    "MalformedPointerError",
    "NonNumericSegmentError",
    "RootBacktrackError",
    "ShapeMismatchError",
    "TraversalError",
]
