"""DEFENV FILE PURPOSE
Purpose: policy checks for the accessor module (ordinary/strict pairs + __all__ coverage).
Hot path: no.
"""

from __future__ import annotations

import ast
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
ACCESSORS = ROOT / "defenv" / "accessors.py"

# Types that need no parsing have no strict form.
ORDINARY_ONLY = {"get_string"}


def fail(msg: str) -> None:
    print(f"ACCESSOR_CHECK_FAIL: {msg}", file=sys.stderr)
    raise SystemExit(1)


def _exported(tree: ast.Module) -> set[str]:
    for node in tree.body:
        if isinstance(node, ast.Assign) and any(
            isinstance(t, ast.Name) and t.id == "__all__" for t in node.targets
        ):
            return {elt.value for elt in node.value.elts if isinstance(elt, ast.Constant)}
    fail(f"__all__ missing in {ACCESSORS}")
    return set()


def main(path: Path = ACCESSORS) -> None:
    tree = ast.parse(path.read_text(encoding="utf-8"), filename=str(path))
    public = {
        node.name
        for node in tree.body
        if isinstance(node, ast.FunctionDef) and node.name.startswith("get_")
    }
    if not public:
        fail(f"no accessors found in {path}")

    strict = {n for n in public if n.endswith("_strict")}
    ordinary = public - strict

    for name in sorted(ordinary - ORDINARY_ONLY):
        if f"{name}_strict" not in strict:
            fail(f"{name} has no strict form")
    for name in sorted(strict):
        if name[: -len("_strict")] not in ordinary:
            fail(f"{name} has no ordinary form")
    for name in sorted(ORDINARY_ONLY):
        if f"{name}_strict" in strict:
            fail(f"{name} must not have a strict form")

    missing = public - _exported(tree)
    if missing:
        fail(f"not exported in __all__: {sorted(missing)}")

    print("ACCESSOR_CHECK_OK")


if __name__ == "__main__":
    main(Path(sys.argv[1]) if len(sys.argv) > 1 else ACCESSORS)
