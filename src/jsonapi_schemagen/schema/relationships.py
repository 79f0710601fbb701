"""Relationship schema builder -- the ``relationships`` object of a resource."""

from __future__ import annotations

import logging
from typing import Any

from jsonapi_schemagen.config import SchemaConfig
from jsonapi_schemagen.definition.graph import POINTER_KINDS, target_name
from jsonapi_schemagen.definition.models import EntityDefinition, Relationships
from jsonapi_schemagen.schema.nodes import array_schema, identifier_schema, object_schema
from jsonapi_schemagen.schema.policy import ExpansionPolicy
from jsonapi_schemagen.tree import add_at, delete_at

logger = logging.getLogger(__name__)


def collapsed_relationship() -> dict[str, Any]:
    """Presence-only form: ``meta.included`` defaulting to false."""
    return object_schema(
        {"meta": object_schema({"included": {"type": "boolean", "default": False}})}
    )


def expanded_relationship(type_name: str, *, collection: bool = False) -> dict[str, Any]:
    """``data`` pointer form: one identifier, or an array of them for to-many."""
    identifier = identifier_schema(type_name)
    return object_schema({"data": array_schema(identifier) if collection else identifier})


class RelationshipSchemaBuilder:
    def __init__(self, config: SchemaConfig) -> None:
        self.config = config

    def build(
        self,
        definition: EntityDefinition,
        policy: ExpansionPolicy | None = None,
        relationships: Relationships | None = None,
    ) -> dict[str, Any]:
        """Build the relationships object; ``{}`` when there is nothing to show.

        *relationships* replaces the definition's own map, which is how an
        explicit map is supplied for a nested hop.
        """
        policy = policy or ExpansionPolicy()
        relationships = relationships if relationships is not None else definition.relationships
        if not relationships.has_pointers() and not definition.additional_response_relations:
            return {}

        schema = object_schema()
        for kind in POINTER_KINDS:
            for relation, target in getattr(relationships, kind).items():
                type_name = target_name(target)
                if policy.expand and not policy.excludes(relation, type_name):
                    fragment = expanded_relationship(type_name, collection=kind == "has_many")
                else:
                    if policy.expand:
                        logger.debug("%s.%s excluded from expansion", definition.name, relation)
                    fragment = collapsed_relationship()
                schema["properties"][relation] = fragment

        schema = add_at(schema, definition.additional_response_relations, "properties")
        for name in definition.excluded_response_relations:
            schema = delete_at(schema, f"properties.{name}")
        if not schema["properties"]:
            return {}
        return schema
