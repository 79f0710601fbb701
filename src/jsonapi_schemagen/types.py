"""Column kind to JSON-Schema fragment resolution.

Lookup order: custom mappers from the config, then the built-in table.
Float and decimal kinds switch between number and string representations
according to ``float_as_string`` / ``decimal_as_string``.  Every call returns
a fresh copy so callers may mutate the result.
"""

from __future__ import annotations

import copy
from decimal import Decimal
from typing import Any

from jsonapi_schemagen.config import SchemaConfig

_BUILTIN_KINDS: dict[str, dict[str, Any]] = {
    "text": {"type": "string"},
    "string": {"type": "string"},
    "integer": {"type": "integer"},
    "boolean": {"type": "boolean"},
    "date": {"type": "string", "format": "date"},
    "time": {"type": "string", "format": "time"},
    "datetime": {"type": "string", "format": "date-time"},
    "json": {"type": "object", "properties": {}},
    "jsonb": {"type": "object", "properties": {}},
    "hash": {"type": "object", "properties": {}},
    "object": {"type": "object", "properties": {}},
    "binary": {"type": "string", "format": "binary"},
    "trueclass": {"type": "boolean", "default": True},
    "falseclass": {"type": "boolean", "default": False},
    "array": {
        "type": "array",
        "items": {
            "anyOf": [
                {"type": "string"},
                {"type": "integer"},
                {"type": "boolean"},
                {"type": "number", "format": "float"},
                {"type": "object", "properties": {}},
                {"type": "number", "format": "double"},
            ]
        },
    },
}


class TypeResolver:
    """Maps primitive kind names to schema fragments."""

    def __init__(self, config: SchemaConfig | None = None) -> None:
        config = config or SchemaConfig()
        self.custom_type_mappers = config.custom_type_mappers
        self.float_as_string = config.float_as_string
        self.decimal_as_string = config.decimal_as_string

    def resolve(self, kind: str | None) -> dict[str, Any] | None:
        """Return the fragment for *kind*, or None when nothing maps it."""
        if not kind:
            return None
        key = str(kind).strip().lower()
        if key in self.custom_type_mappers:
            return copy.deepcopy(self.custom_type_mappers[key])
        if key == "float":
            return {"type": "string" if self.float_as_string else "number", "format": "float"}
        if key == "decimal":
            return {"type": "string" if self.decimal_as_string else "number", "format": "double"}
        mapping = _BUILTIN_KINDS.get(key)
        return copy.deepcopy(mapping) if mapping is not None else None

    @staticmethod
    def kind_of_value(value: Any) -> str | None:
        """Guess a kind name from a literal value of a serialized instance."""
        # bool is a subclass of int; check it first
        if isinstance(value, bool):
            return "trueclass" if value else "falseclass"
        if isinstance(value, int):
            return "integer"
        if isinstance(value, float):
            return "float"
        if isinstance(value, Decimal):
            return "decimal"
        if isinstance(value, str):
            return "string"
        if isinstance(value, dict):
            return "hash"
        if isinstance(value, (list, tuple)):
            return "array"
        return None
