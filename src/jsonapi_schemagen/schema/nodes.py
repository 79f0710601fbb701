"""Constructors for the schema node shapes the builders emit."""

from __future__ import annotations

from typing import Any


def object_schema(properties: dict[str, Any] | None = None) -> dict[str, Any]:
    return {"type": "object", "properties": properties if properties is not None else {}}


def array_schema(items: dict[str, Any]) -> dict[str, Any]:
    return {"type": "array", "items": items}


def string_schema(default: str | None = None) -> dict[str, Any]:
    if default is None:
        return {"type": "string"}
    return {"type": "string", "default": default}


def identifier_schema(type_name: str) -> dict[str, Any]:
    """``{id, type}`` resource identifier, ``type`` defaulting to *type_name*."""
    return object_schema({"id": string_schema(), "type": string_schema(default=type_name)})


def resource_schema(
    type_name: str,
    attributes: dict[str, Any],
    relationships: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Resource object schema; ``relationships`` is omitted when empty."""
    properties: dict[str, Any] = {
        "type": string_schema(default=type_name),
        "id": string_schema(),
        "attributes": attributes,
    }
    if relationships:
        properties["relationships"] = relationships
    return object_schema(properties)
