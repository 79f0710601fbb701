"""SchemaGenerator facade -- one object that wires config, introspector,
registry and the composers.

Example::

    registry = DefinitionRegistry()
    load_definition_directory("schemas/definitions", registry)
    generator = SchemaGenerator(SchemaConfig(), registry)

    generator.response("users", ExpansionPolicy(expand=True, exclude={"orders"}))
    generator.request("users", "create")
    components = generator.aggregate()   # every entity's named schemas
"""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Any

from jsonapi_schemagen.casing import transform_keys
from jsonapi_schemagen.config import SchemaConfig
from jsonapi_schemagen.definition.loader import load_definition_directory
from jsonapi_schemagen.definition.models import EntityDefinition, RequestMode
from jsonapi_schemagen.definition.registry import DefinitionRegistry
from jsonapi_schemagen.errors import DefinitionNotFoundError
from jsonapi_schemagen.introspection.base import ModelIntrospector, create_introspector
from jsonapi_schemagen.schema.attributes import AttributeSchemaBuilder
from jsonapi_schemagen.schema.included import IncludedSchemaBuilder
from jsonapi_schemagen.schema.policy import ExpansionPolicy
from jsonapi_schemagen.schema.relationships import RelationshipSchemaBuilder
from jsonapi_schemagen.schema.request import RequestComposer
from jsonapi_schemagen.schema.response import ResponseComposer
from jsonapi_schemagen.telemetry import NoOpTelemetrySink, TelemetryEvent, TelemetrySink
from jsonapi_schemagen.types import TypeResolver

logger = logging.getLogger(__name__)


class SchemaGenerator:
    """Single entry point for generating schema documents."""

    def __init__(
        self,
        config: SchemaConfig | None = None,
        registry: DefinitionRegistry | None = None,
        *,
        introspector: ModelIntrospector | None = None,
        telemetry_sink: TelemetrySink | None = None,
    ) -> None:
        self.config = config or SchemaConfig()
        self.registry = registry if registry is not None else DefinitionRegistry()
        self.introspector = introspector or create_introspector(self.config)
        self.telemetry = telemetry_sink or NoOpTelemetrySink()

        resolver = TypeResolver(self.config)
        self.attribute_builder = AttributeSchemaBuilder(self.config, self.introspector, resolver)
        self.relationship_builder = RelationshipSchemaBuilder(self.config)
        self.included_builder = IncludedSchemaBuilder(
            self.config, self.attribute_builder, self.relationship_builder, self.registry
        )
        self.responses = ResponseComposer(
            self.config, self.attribute_builder, self.relationship_builder, self.included_builder
        )
        self.requests = RequestComposer(self.config, self.attribute_builder)

    @classmethod
    def from_directory(
        cls,
        directory: str | Path,
        config: SchemaConfig | None = None,
        *,
        introspector: ModelIntrospector | None = None,
        telemetry_sink: TelemetrySink | None = None,
    ) -> SchemaGenerator:
        """Build a generator over every definition YAML file in *directory*."""
        registry = DefinitionRegistry()
        count = load_definition_directory(directory, registry)
        logger.info("Loaded %d entity definitions from %s", count, directory)
        return cls(config, registry, introspector=introspector, telemetry_sink=telemetry_sink)

    def definition(self, target: EntityDefinition | str) -> EntityDefinition:
        definition = self.registry.resolve(target)
        if definition is None:
            raise DefinitionNotFoundError(f"No entity definition named {target!r}")
        return definition

    def attributes(self, target: EntityDefinition | str) -> dict[str, Any]:
        definition = self.definition(target)
        schema = transform_keys(self.attribute_builder.build(definition), self.config.key_case)
        return self._finish(definition, "attributes", schema)

    def relationships(
        self, target: EntityDefinition | str, policy: ExpansionPolicy | None = None
    ) -> dict[str, Any]:
        definition = self.definition(target)
        schema = transform_keys(self.relationship_builder.build(definition, policy), self.config.key_case)
        return self._finish(definition, "relationships", schema)

    def included(
        self, target: EntityDefinition | str, policy: ExpansionPolicy | None = None
    ) -> dict[str, Any]:
        definition = self.definition(target)
        schema = self.included_builder.build(definition, self.responses.effective_policy(policy))
        schema = transform_keys(schema, self.config.key_case)
        return self._finish(definition, "included", schema)

    def response(
        self,
        target: EntityDefinition | str,
        policy: ExpansionPolicy | None = None,
        *,
        collection: bool = False,
    ) -> dict[str, Any]:
        definition = self.definition(target)
        started = time.perf_counter()
        schema = self.responses.build(definition, policy, collection=collection)
        kind = "collection" if collection else "response"
        return self._finish(definition, kind, schema, started)

    def request(self, target: EntityDefinition | str, mode: RequestMode) -> dict[str, Any]:
        definition = self.definition(target)
        started = time.perf_counter()
        schema = self.requests.build(definition, mode)
        return self._finish(definition, f"{mode}_request", schema, started)

    def definitions(self, target: EntityDefinition | str) -> dict[str, dict[str, Any]]:
        """Named schemas for one entity, ready for an OpenAPI ``components.schemas``."""
        definition = self.definition(target)
        prefix = definition.bundle_name
        expanded = ExpansionPolicy(
            expand=True,
            exclude=definition.expansion_exclusions,
            expand_nested=self.config.expand_nested_from_expand,
        )
        return {
            prefix: self.response(definition),
            f"{prefix}Expanded": self.response(definition, expanded),
            f"{prefix}Collection": self.response(definition, collection=True),
            f"{prefix}CreateRequest": self.request(definition, "create"),
            f"{prefix}UpdateRequest": self.request(definition, "update"),
        }

    def aggregate(self, names: list[str] | None = None) -> dict[str, dict[str, Any]]:
        """Merge the named schemas of several entities (all registered by default).

        Raises ValueError when two entities produce the same schema name.
        """
        merged: dict[str, dict[str, Any]] = {}
        for name in names if names is not None else self.registry.names():
            for schema_name, schema in self.definitions(name).items():
                if schema_name in merged:
                    raise ValueError(f"Duplicate schema name {schema_name!r} from entity {name!r}")
                merged[schema_name] = schema
        return merged

    def _finish(
        self,
        definition: EntityDefinition,
        kind: str,
        schema: dict[str, Any],
        started: float | None = None,
    ) -> dict[str, Any]:
        """Emit the telemetry event for *schema*; composers have already cased it."""
        duration_ms = None
        if started is not None:
            duration_ms = round((time.perf_counter() - started) * 1000, 3)
        self.telemetry.emit(
            TelemetryEvent(entity=definition.name, document=kind, duration_ms=duration_ms)
        )
        return schema
