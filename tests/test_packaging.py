"""Tests for the declared project metadata."""

from __future__ import annotations

import ast
import re
import sys
import tomllib
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent

# Import names whose distribution name on the index differs.
_DISTRIBUTIONS = {"pydantic_core": "pydantic-core"}


def _declared() -> set[str]:
    project = tomllib.loads((ROOT / "pyproject.toml").read_text(encoding="utf-8"))["project"]
    return {
        re.split(r"[<>=!~;\[ ]", dep, maxsplit=1)[0].lower() for dep in project["dependencies"]
    }


def _imported() -> set[str]:
    names: set[str] = set()
    for path in (ROOT / "src" / "jsonptr").glob("*.py"):
        tree = ast.parse(path.read_text(encoding="utf-8"))
        for node in ast.walk(tree):
            if isinstance(node, ast.Import):
                names.update(alias.name.split(".")[0] for alias in node.names)
            elif isinstance(node, ast.ImportFrom) and node.level == 0 and node.module:
                names.add(node.module.split(".")[0])
    return {name for name in names if name not in sys.stdlib_module_names and name != "__future__"}


class TestDependencies:
    def test_pydantic_core_declared(self):
        assert "pydantic-core" in _declared()

    def test_every_third_party_import_declared(self):
        declared = _declared()
        for name in _imported():
            assert _DISTRIBUTIONS.get(name, name) in declared, name
