"""The :class:`JsonPointer` value type and its text forms.

A pointer is stored as a tuple of *unescaped* segments, outermost first.
RFC 6901 escaping (``~0``/``~1``) and percent-encoding only exist at the text
boundary::

    >>> ptr = JsonPointer.parse("/currency/%E2%82%AC")
    >>> ptr.parts
    ('currency', '€')
    >>> ptr.to_uri()
    '/currency/%E2%82%AC'
    >>> ptr.to_uri(options=RenderOptions(authority="schema"))
    'schema#/currency/%E2%82%AC'
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Any, overload
from urllib.parse import ParseResult, SplitResult, urlsplit

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from .errors import MalformedPointerError
from .escape import quote_segment, split_tokens


@dataclass(slots=True)
class RenderOptions:
    """
    Options for rendering a pointer as text.

    ``authority`` is prepended as ``<authority>#`` to produce the URI
    fragment form.
    """

    authority: str | None = None


def _segment_text(segment: Any) -> str:
    if isinstance(segment, str):
        return segment
    # bool is an int subclass but never a valid array index
    if isinstance(segment, int) and not isinstance(segment, bool):
        return str(segment)
    raise TypeError(f"JSON Pointer segments must be str or int, got {type(segment).__name__}")


@dataclass(frozen=True, slots=True)
class JsonPointer:
    """An immutable, document-independent JSON Pointer."""

    parts: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "parts", tuple(_segment_text(p) for p in self.parts))

    @classmethod
    def parse(cls, uri: str | SplitResult | ParseResult) -> JsonPointer:
        return from_uri(uri)

    @classmethod
    def from_parts(cls, parts: Sequence[str | int]) -> JsonPointer:
        return cls(tuple(parts))

    @property
    def is_root(self) -> bool:
        return not self.parts

    def to_uri(self, *, options: RenderOptions | None = None) -> str:
        return to_uri(self, options=options)

    def __str__(self) -> str:
        return self.to_uri()

    def __len__(self) -> int:
        return len(self.parts)

    def __iter__(self) -> Iterator[str]:
        return iter(self.parts)

    @overload
    def __getitem__(self, index: int) -> str: ...

    @overload
    def __getitem__(self, index: slice) -> JsonPointer: ...

    def __getitem__(self, index: int | slice) -> str | JsonPointer:
        if isinstance(index, slice):
            return JsonPointer(self.parts[index])
        return self.parts[index]

    def __truediv__(self, additional: str | int | Sequence[str | int]) -> JsonPointer:
        from .navigate import join

        if isinstance(additional, int):
            additional = [additional]
        return join(self, additional)

    # -- pydantic integration -------------------------------------------

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.to_string_ser_schema(),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return {"type": "string", "format": "json-pointer"}

    @classmethod
    def _validate(cls, value: Any) -> JsonPointer:
        try:
            return as_pointer(value)
        except TypeError as exc:
            # pydantic only reports ValueError/AssertionError as validation errors
            raise ValueError(str(exc)) from exc


ROOT = JsonPointer()


def _pointer_text(uri: str | SplitResult | ParseResult) -> str:
    """Pick the component of *uri* that holds the pointer."""
    if isinstance(uri, (SplitResult, ParseResult)):
        return uri.fragment or uri.path
    if uri.startswith("/"):
        return uri
    if "#" in uri:
        return uri.split("#", 1)[1]
    return urlsplit(uri).path


def from_uri(uri: str | SplitResult | ParseResult) -> JsonPointer:
    """Parse a pointer from its path, URI text or structured URI form.

    ``"/"`` is the root pointer. The fragment holds the pointer when the text
    carries one (``"schema#/a/b"``), otherwise the URI path does.

    Raises
    ------
    MalformedPointerError
        If the pointer text does not start with ``/``.
    """
    text = _pointer_text(uri)
    if not text.startswith("/"):
        raise MalformedPointerError(f"JSON Pointer must start with '/', got: {uri!r}")
    return JsonPointer(tuple(split_tokens(text[1:])))


def to_uri(pointer: PointerLike, *, options: RenderOptions | None = None) -> str:
    """Render *pointer* as ``/seg1/seg2``, or ``authority#/seg1/seg2``."""
    opts = options or RenderOptions()
    path = "/" + "/".join(quote_segment(segment) for segment in as_pointer(pointer).parts)
    if opts.authority:
        return f"{opts.authority}#{path}"
    return path


type PointerLike = JsonPointer | str | SplitResult | ParseResult | Sequence[str | int]


def as_pointer(value: PointerLike) -> JsonPointer:
    """Coerce a pointer, pointer text or segment sequence into a :class:`JsonPointer`."""
    if isinstance(value, JsonPointer):
        return value
    if isinstance(value, (str, SplitResult, ParseResult)):
        return from_uri(value)
    if isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray)):
        return JsonPointer.from_parts(value)
    raise TypeError(f"Cannot interpret {type(value).__name__} as a JSON Pointer")


__all__ = ["ROOT", "JsonPointer", "PointerLike", "RenderOptions", "as_pointer", "from_uri", "to_uri"]
