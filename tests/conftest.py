"""Test fixtures for jsonapi_schemagen tests."""

from __future__ import annotations

from typing import Any

import pytest

from jsonapi_schemagen.config import SchemaConfig
from jsonapi_schemagen.definition.models import EntityDefinition
from jsonapi_schemagen.definition.registry import DefinitionRegistry
from jsonapi_schemagen.generator import SchemaGenerator
from jsonapi_schemagen.introspection.static import ColumnSpec, ModelSpec
from jsonapi_schemagen.telemetry import TelemetrySink

DEFAULT_COLUMNS: list[dict[str, Any]] = [
    {"name": "id", "type": "integer"},
    {"name": "name", "type": "string"},
    {"name": "created_at", "type": "datetime"},
]


def make_test_config(**overrides: Any) -> SchemaConfig:
    """Create a SchemaConfig for testing (static backend by default)."""
    return SchemaConfig(**overrides)


def make_test_model(
    name: str = "Thing",
    columns: list[dict[str, Any]] | None = None,
) -> ModelSpec:
    """Create a static model from column dicts."""
    specs = [ColumnSpec(**column) for column in (columns if columns is not None else DEFAULT_COLUMNS)]
    return ModelSpec(name=name, columns=specs)


def make_test_definition(
    name: str = "things",
    columns: list[dict[str, Any]] | None = None,
    **fields: Any,
) -> EntityDefinition:
    """Create an EntityDefinition backed by a static model."""
    fields.setdefault("orm_model", make_test_model(name.title(), columns))
    return EntityDefinition(name=name, **fields)


def make_test_generator(
    *definitions: EntityDefinition,
    config: SchemaConfig | None = None,
    telemetry_sink: TelemetrySink | None = None,
) -> SchemaGenerator:
    """Create a generator with *definitions* registered."""
    registry = DefinitionRegistry()
    for definition in definitions:
        registry.register(definition)
    return SchemaGenerator(config or make_test_config(), registry, telemetry_sink=telemetry_sink)


@pytest.fixture()
def user_definition() -> EntityDefinition:
    """``users`` with a nullable, create-optional email and an enum status column."""
    return make_test_definition(
        "users",
        columns=[
            {"name": "id", "type": "integer"},
            {"name": "name", "type": "string"},
            {"name": "email", "type": "string"},
            {"name": "status", "type": "integer", "enum": {"active": 0, "inactive": 1}},
        ],
        attributes=["id", "name", "email"],
        nullable_attributes=["email"],
        optional_create_request_attributes=["email"],
    )


@pytest.fixture()
def chain_definitions() -> list[EntityDefinition]:
    """Relationship chain a -> b -> c -> d, declared by name."""
    return [
        make_test_definition("a", relationships={"belongs_to": {"b": "b"}}),
        make_test_definition("b", relationships={"has_many": {"cs": "c"}}),
        make_test_definition("c", relationships={"belongs_to": {"d": "d"}}),
        make_test_definition("d"),
    ]
