#!/usr/bin/env python3
"""CI enforcement: fail on sqlalchemy imports outside the SQLAlchemy backend.

SQLAlchemy is an optional extra; every other module must import cleanly
without it.
"""

from __future__ import annotations

import ast
import sys
from pathlib import Path

ALLOWED_FILES = {Path("introspection") / "sqlalchemy_backend.py"}
SRC_DIR = Path(__file__).resolve().parent.parent / "src" / "jsonapi_schemagen"


def _imported_modules(tree: ast.AST) -> list[tuple[int, str]]:
    found: list[tuple[int, str]] = []
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            found.extend((node.lineno, alias.name) for alias in node.names)
        elif isinstance(node, ast.ImportFrom) and node.module:
            found.append((node.lineno, node.module))
    return found


def check() -> list[str]:
    violations: list[str] = []
    for py_file in sorted(SRC_DIR.rglob("*.py")):
        rel = py_file.relative_to(SRC_DIR)
        if rel in ALLOWED_FILES:
            continue
        try:
            tree = ast.parse(py_file.read_text())
        except SyntaxError:
            continue
        for lineno, module in _imported_modules(tree):
            if module == "sqlalchemy" or module.startswith("sqlalchemy."):
                violations.append(f"{rel}:{lineno}: import {module}")
    return violations


def main() -> None:
    violations = check()
    if violations:
        print("ERROR: sqlalchemy imports found outside introspection/sqlalchemy_backend.py:")
        for v in violations:
            print(f"  {v}")
        sys.exit(1)
    print("OK: sqlalchemy is only imported by the SQLAlchemy backend")


if __name__ == "__main__":
    main()
