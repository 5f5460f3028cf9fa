"""jsonptr demo — address, read, update and walk JSON documents by pointer."""

import json

from pydantic import BaseModel

import jsonptr as jp

schema = json.loads(
    """
{
  "definitions": {"foo\\"bar": {"type": "number"}, "€": {"type": "string"}},
  "properties": {
    "price": {"$ref": "#/definitions/foo%22bar"},
    "currency": {"$ref": "#/definitions/%E2%82%AC"}
  },
  "oneOf": [{"multipleOf": 5}, {"multipleOf": 3}]
}
"""
)


# ── 1. Parse and render ──────────────────────────────────────────────
#
# Pointers hold unescaped segments; ~0/~1 and percent-encoding only
# appear in the text form.

ptr = jp.from_uri("/definitions/foo%22bar")
print("1) from_uri / to_uri")
print(f"   parts={ptr.parts}")
print(f"   path={jp.to_uri(ptr)}")
print(f"   uri={jp.to_uri(ptr, options=jp.RenderOptions(authority='schema.json'))}")
print()


# ── 2. Resolve, raising or tagged ────────────────────────────────────

print("2) resolve / try_resolve")
for prop in ("price", "currency"):
    ref = jp.resolve(schema, ["properties", prop, "$ref"])
    print(f"   {prop}: {ref} -> {jp.resolve(schema, ref)}")
outcome = jp.try_resolve(schema, "/oneOf/7")
print(f"   /oneOf/7 -> ok={outcome.is_ok}")
try:
    outcome.unwrap()
except jp.TraversalError as exc:
    print(f"   error: {exc}")
print()


# ── 3. Update without mutating ───────────────────────────────────────

bumped = jp.update(schema, "/oneOf/0/multipleOf", lambda n: n * 2)
print("3) update — the original document is left untouched")
print(f"   before: {schema['oneOf']}")
print(f"   after:  {bumped['oneOf']}")
print(f"   shared: {bumped['definitions'] is schema['definitions']}")
print()


# ── 4. Navigate ──────────────────────────────────────────────────────

child = jp.join(ptr, ["type"])
print("4) join / backtrack / pop")
print(f"   join:      {child}")
print(f"   backtrack: {jp.backtrack(child)}")
print(f"   pop:       {jp.pop(child)}")
print(f"   root:      ok={jp.try_backtrack(jp.ROOT).is_ok}")
print()


# ── 5. Walk one level ────────────────────────────────────────────────

print("5) map_children / reduce_children")
for path, value in jp.map_children("/definitions", schema, lambda p, v: (str(p), v)):
    print(f"   {path}: {value}")
total = jp.reduce_children(
    "/oneOf", schema, 0, lambda p, v, acc: acc + jp.resolve(v, "/multipleOf")
)
print(f"   sum of multipleOf: {total}")
print()


# ── 6. Pointers as pydantic fields ───────────────────────────────────


class Ref(BaseModel):
    target: jp.JsonPointer


ref = Ref(target="/definitions/%E2%82%AC")
print("6) JsonPointer in a BaseModel")
print(f"   {ref!r}")
print(f"   {ref.model_dump_json()}")
