from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, NoReturn

from pydantic import JsonValue
from pydantic_core import to_json


def shape_of(value: Any) -> str:
    """Return the JSON shape name of *value*.

    ``bool`` is matched before numbers since it subclasses ``int``.
    """
    match value:
        case None:
            return "null"
        case bool():
            return "boolean"
        case int() | float():
            return "number"
        case str():
            return "string"
        case list() | tuple():
            return "array"
        case Mapping():
            return "object"
        case _:
            return type(value).__name__


def snapshot(document: Any) -> str:
    """Compact JSON text of *document* for error messages."""
    return to_json(document, serialize_unknown=True).decode()


@dataclass(frozen=True, slots=True)
class Ok[T]:
    """Successful outcome carrying ``value``."""

    value: T

    @property
    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value

    def unwrap_or[D](self, default: D) -> T | D:
        return self.value


@dataclass(frozen=True, slots=True)
class Err[E: Exception]:
    """Failed outcome carrying the exception that describes it."""

    error: E

    @property
    def is_ok(self) -> bool:
        return False

    def unwrap(self) -> NoReturn:
        raise self.error

    def unwrap_or[D](self, default: D) -> D:
        return default


type Result[T, E: Exception] = Ok[T] | Err[E]


__all__ = ["Err", "JsonValue", "Ok", "Result", "shape_of", "snapshot"]
