"""Tests for jsonptr.children — map/each/reduce over one level."""

from __future__ import annotations

import pytest

from jsonptr import JsonPointer, each_child, iter_children, map_children, reduce_children, to_uri


def _rendered(pointer, value):
    return to_uri(pointer), value


class TestMapChildren:
    def test_object(self):
        data = {"foo": {"bar": "baz"}}
        assert map_children(["foo"], data, _rendered) == [("/foo/bar", "baz")]

    def test_array(self):
        data = {"foo": ["bar", "baz"]}
        assert map_children(["foo"], data, _rendered) == [("/foo/0", "bar"), ("/foo/1", "baz")]

    def test_root(self):
        assert map_children("/", {"a": 1, "b": 2}, _rendered) == [("/a", 1), ("/b", 2)]

    def test_keys_with_special_characters(self):
        data = {"a/b": 1, "~": 2, "€": 3}
        result = map_children([], data, lambda p, v: p)
        assert result == [JsonPointer(("a/b",)), JsonPointer(("~",)), JsonPointer(("€",))]
        assert [to_uri(p) for p in result] == ["/a~1b", "/~0", "/%E2%82%AC"]

    def test_insertion_order(self):
        data = {"z": 1, "a": 2, "m": 3}
        assert map_children([], data, lambda p, v: p[-1]) == ["z", "a", "m"]

    @pytest.mark.parametrize("data", [{"foo": 1}, {"foo": None}, {"foo": "s"}, {"foo": True}, {}])
    def test_vacuous(self, data):
        assert map_children("/foo", data, _rendered) == []

    def test_empty_containers(self):
        assert map_children([], [], _rendered) == []
        assert map_children([], {}, _rendered) == []


class TestEachChild:
    def test_visits_in_order(self):
        seen = []
        result = each_child("/", [10, 20], lambda p, v: seen.append((str(p), v)))
        assert result is None
        assert seen == [("/0", 10), ("/1", 20)]

    def test_no_visits_when_unresolved(self):
        seen = []
        assert each_child("/missing", {"a": 1}, lambda p, v: seen.append(p)) is None
        assert seen == []


class TestReduceChildren:
    def test_sum(self):
        data = {"nums": [1, 2, 3]}
        assert reduce_children("/nums", data, 0, lambda p, v, acc: acc + v) == 6

    def test_threads_accumulator_in_order(self):
        data = {"a": 1, "b": 2}
        result = reduce_children([], data, [], lambda p, v, acc: [*acc, to_uri(p)])
        assert result == ["/a", "/b"]

    @pytest.mark.parametrize("data", [{"x": 5}, {"y": [1]}, 3])
    def test_vacuous_returns_accumulator(self, data):
        acc = object()
        assert reduce_children("/x", data, acc, lambda p, v, a: None) is acc


class TestIterChildren:
    def test_yields_pairs(self):
        pairs = list(iter_children("/a", {"a": ("x", "y")}))
        assert pairs == [(JsonPointer(("a", "0")), "x"), (JsonPointer(("a", "1")), "y")]
