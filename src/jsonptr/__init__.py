from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("jsonptr")
except PackageNotFoundError:  # pragma: no cover - local source tree without installed metadata
    __version__ = "0.1.0"

from .children import each_child, iter_children, map_children, reduce_children
from .errors import (
    IndexOutOfRangeError,
    JsonPointerError,
    KeyNotFoundError,
    MalformedPointerError,
    NonNumericSegmentError,
    RootBacktrackError,
    ShapeMismatchError,
    TraversalError,
)
from .escape import escape, unescape
from .navigate import backtrack, join, pop, try_backtrack, try_pop
from .pointer import ROOT, JsonPointer, RenderOptions, as_pointer, from_uri, to_uri
from .resolve import resolve, try_resolve
from .types import Err, JsonValue, Ok, shape_of
from .update import set_value, update

__all__ = [
    "ROOT",
    "Err",
    "IndexOutOfRangeError",
    "JsonPointer",
    "JsonPointerError",
    "JsonValue",
    "KeyNotFoundError",
    "MalformedPointerError",
    "NonNumericSegmentError",
    "Ok",
    "RenderOptions",
    "RootBacktrackError",
    "ShapeMismatchError",
    "TraversalError",
    "as_pointer",
    "backtrack",
    "each_child",
    "escape",
    "from_uri",
    "iter_children",
    "join",
    "map_children",
    "pop",
    "reduce_children",
    "resolve",
    "set_value",
    "shape_of",
    "to_uri",
    "try_backtrack",
    "try_pop",
    "try_resolve",
    "unescape",
    "update",
]
