"""Property-name casing for generated documents.

Only property names are renamed: the keys of every ``properties`` mapping
and the entries of every ``required`` list.  JSON-Schema keywords such as
``anyOf`` or ``nullable`` are left alone.  The transform never reorders
lists and applying it twice gives the same result as applying it once.
"""

from __future__ import annotations

from typing import Any

from pydantic.alias_generators import to_camel, to_snake


def cased(name: str, case: str) -> str:
    if case == "camel":
        return to_camel(name) if "_" in name else name
    if case == "snake":
        return to_snake(name)
    return name


def transform_keys(tree: Any, case: str) -> Any:
    """Return a copy of *tree* with property names converted to *case*."""
    if isinstance(tree, list):
        return [transform_keys(item, case) for item in tree]
    if not isinstance(tree, dict):
        return tree

    result: dict[str, Any] = {}
    for key, value in tree.items():
        if key == "properties" and isinstance(value, dict):
            result[key] = {
                cased(name, case): transform_keys(child, case)
                for name, child in value.items()
            }
        elif key == "required" and isinstance(value, list):
            result[key] = [cased(v, case) if isinstance(v, str) else v for v in value]
        else:
            result[key] = transform_keys(value, case)
    return result
