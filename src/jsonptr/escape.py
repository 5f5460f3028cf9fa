"""RFC 6901 token escaping, plus the percent-encoding used by the URI forms."""

from __future__ import annotations

from urllib.parse import quote, unquote

from .errors import MalformedPointerError

# RFC 3986 reserved characters. Unreserved ones are always left alone by ``quote``.
_URI_SAFE = ":/?#[]@!$&'()*+,;="


def escape(segment: str) -> str:
    """Escape a single JSON Pointer token (RFC 6901)."""
    return segment.replace("~", "~0").replace("/", "~1")


def unescape(token: str) -> str:
    """Unescape a single JSON Pointer token (RFC 6901)."""
    return token.replace("~1", "/").replace("~0", "~")


def quote_segment(segment: str) -> str:
    """Escape *segment* and percent-encode the result for URI output.

    Non-ASCII text is encoded as UTF-8 percent sequences, e.g. ``"€"`` becomes
    ``"%E2%82%AC"``.
    """
    return quote(escape(segment), safe=_URI_SAFE)


def split_tokens(text: str) -> list[str]:
    """Percent-decode *text*, split it on ``/`` and unescape every token.

    A single trailing empty token (``"a/"``) is dropped, so ``""`` yields ``[]``.

    Raises
    ------
    MalformedPointerError
        If the percent-decoded bytes are not valid UTF-8 (``"%FF"``).
    """
    try:
        decoded = unquote(text, errors="strict")
    except UnicodeDecodeError as exc:
        raise MalformedPointerError(f"JSON Pointer is not valid UTF-8: {text!r}") from exc
    tokens = decoded.split("/")
    if tokens[-1] == "":
        tokens.pop()
    return [unescape(token) for token in tokens]
