"""Tests for jsonptr.update — pointer-guided updates that copy instead of mutate."""

from __future__ import annotations

import copy
from collections import OrderedDict
from types import MappingProxyType

import pytest

from jsonptr import (
    IndexOutOfRangeError,
    KeyNotFoundError,
    NonNumericSegmentError,
    ShapeMismatchError,
    set_value,
    update,
)

# ===================================================================
# Basic updates
# ===================================================================


class TestUpdate:
    def test_increment_array_item(self):
        assert update({"foo": [1, 2]}, ["foo", "0"], lambda x: x + 1) == {"foo": [2, 2]}

    def test_text_pointer(self):
        assert update({"a": {"b": 1}}, "/a/b", lambda x: x * 10) == {"a": {"b": 10}}

    def test_integer_segment(self):
        assert update({"foo": [1, 2]}, ["foo", 1], lambda x: -x) == {"foo": [1, -2]}

    def test_root_transform(self):
        assert update(3, [], lambda x: x + 1) == 4
        assert update({"a": 1}, "/", lambda doc: {**doc, "b": 2}) == {"a": 1, "b": 2}

    def test_escaped_key(self):
        assert update({"a/b": 1}, "/a~1b", str) == {"a/b": "1"}

    def test_transform_receives_old_value(self):
        seen = []

        def record(value):
            seen.append(value)
            return value

        update({"x": [{"y": "old"}]}, "/x/0/y", record)
        assert seen == ["old"]

    def test_set_value(self):
        doc = {"user": {"name": "Alice", "tags": ["a", "b"]}}
        result = set_value(doc, "/user/tags/1", "z")
        assert result == {"user": {"name": "Alice", "tags": ["a", "z"]}}


# ===================================================================
# Structural sharing / immutability
# ===================================================================


class TestNoMutation:
    def test_input_not_mutated(self):
        doc = {"foo": [1, 2], "bar": {"baz": True}}
        before = copy.deepcopy(doc)
        update(doc, "/foo/0", lambda x: x + 1)
        assert doc == before

    def test_siblings_are_shared(self):
        doc = {"foo": [1, 2], "bar": {"baz": True}}
        result = update(doc, "/foo/0", lambda x: x + 1)
        assert result["bar"] is doc["bar"]
        assert result["foo"] is not doc["foo"]
        assert result is not doc

    def test_key_order_preserved(self):
        doc = {"a": 1, "b": 2, "c": 3}
        assert list(update(doc, "/b", lambda x: x)) == ["a", "b", "c"]

    def test_tuple_stays_tuple(self):
        assert update({"t": (1, 2, 3)}, "/t/1", lambda x: 0) == {"t": (1, 0, 3)}

    def test_mapping_subclass_preserved(self):
        result = update(OrderedDict(a=1), "/a", lambda x: 2)
        assert isinstance(result, OrderedDict)
        assert result == OrderedDict(a=2)

    def test_read_only_mapping_rebuilt_as_dict(self):
        doc = MappingProxyType({"a": 1})
        assert update(doc, "/a", lambda x: 2) == {"a": 2}


# ===================================================================
# Failures
# ===================================================================


class TestUpdateFailures:
    def test_missing_key(self):
        with pytest.raises(KeyNotFoundError, match="cannot access with key 'nope'"):
            update({"a": 1}, "/nope", lambda x: x)

    def test_out_of_range(self):
        with pytest.raises(IndexOutOfRangeError):
            update({"a": [1]}, ["a", 4], lambda x: x)

    def test_non_numeric(self):
        with pytest.raises(NonNumericSegmentError):
            update([1], "/first", lambda x: x)

    def test_scalar(self):
        with pytest.raises(ShapeMismatchError) as exc_info:
            update({"a": 1}, "/a/b", lambda x: x)
        assert exc_info.value.path == "/a"
        assert exc_info.value.document == '{"a":1}'

    def test_transform_not_called_on_failure(self):
        calls = []
        with pytest.raises(KeyNotFoundError):
            update({"a": {}}, "/a/b", calls.append)
        assert calls == []
