from __future__ import annotations

import argparse
import json
import platform
import timeit
from collections.abc import Callable

import pydantic

from jsonptr import JsonPointer, from_uri, map_children, resolve, to_uri, try_resolve, update


def _per_op_ns(fn: Callable[[], object], repeats: int) -> tuple[int, float]:
    """Return ``(loops, best ns per call)`` using ``timeit``'s autoranging."""
    timer = timeit.Timer(fn)
    loops, _ = timer.autorange()
    best = min(timer.repeat(repeat=repeats, number=loops))
    return loops, best / loops * 1e9


def _document() -> dict:
    return json.loads(
        '{"user": {"id": 123, "name": "Ada Lovelace", "email": "ada@example.com", '
        '"tags": ["math", "programming", "history"], '
        '"prefs": {"newsletter": true, "theme": "dark", "a/b~c": 1}}, '
        '"events": [{"type": "click", "ts": 1700000000, "meta": {"x": 1, "y": 2}},'
        '{"type": "scroll", "ts": 1700000001, "meta": {"dx": 3, "dy": 4}}]}'
    )


def main() -> None:
    parser = argparse.ArgumentParser(description="Microbenchmarks for jsonptr.")
    parser.add_argument("--repeats", type=int, default=5)
    args = parser.parse_args()

    doc = _document()
    deep_text = "/events/1/meta/dy"
    deep = from_uri(deep_text)
    escaped = JsonPointer(("user", "prefs", "a/b~c"))

    scenarios: list[tuple[str, Callable[[], object]]] = [
        ("from_uri /events/1/meta/dy", lambda: from_uri(deep_text)),
        ("from_uri percent-encoded", lambda: from_uri("/currency/%E2%82%AC")),
        ("to_uri escaped segments", lambda: to_uri(escaped)),
        ("resolve (parsed pointer)", lambda: resolve(doc, deep)),
        ("resolve (pointer text)", lambda: resolve(doc, deep_text)),
        ("try_resolve missing key", lambda: try_resolve(doc, ["user", "missing"])),
        ("update deep array item", lambda: update(doc, deep, lambda v: v + 1)),
        ("map_children /user", lambda: map_children(["user"], doc, lambda p, v: p)),
    ]

    print(f"python {platform.python_version()}, pydantic {pydantic.__version__}")
    print()
    name_w = max(len(name) for name, _ in scenarios)
    print(f"{'scenario'.ljust(name_w)}  {'loops':>8}  {'ns/op':>10}")
    for name, fn in scenarios:
        loops, ns = _per_op_ns(fn, args.repeats)
        print(f"{name.ljust(name_w)}  {loops:>8}  {ns:>10.0f}")


if __name__ == "__main__":
    main()
