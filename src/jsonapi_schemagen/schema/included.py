"""Included schema builder -- the ``included`` side-loaded resources array.

The builder walks the relationship graph from the root definition and emits
one resource schema per reachable entity into ``included.items.anyOf``:

- hop one: every ``belongs_to``, ``has_many`` and ``additional_included``
  target of the root that the policy does not exclude;
- hop two (``policy.expand_nested`` only): the direct targets of each hop-one
  entity, or the root's ``nested_relationships[<relation>]`` map when one is
  declared for that relationship.

Traversal never goes past hop two, and entries are keyed by entity name so
a target reached twice (two relationships to the same type, or a cycle back
to an entity already emitted) appears once.  Each emitted entity's own
relationships are built with the exclusions that still apply one hop down.
"""

from __future__ import annotations

import logging
from typing import Any

from jsonapi_schemagen.config import SchemaConfig
from jsonapi_schemagen.definition.graph import RelatedEntity, one_hop_names, related_entities
from jsonapi_schemagen.definition.models import EntityDefinition, Relationships
from jsonapi_schemagen.definition.registry import DefinitionRegistry
from jsonapi_schemagen.schema.attributes import AttributeSchemaBuilder
from jsonapi_schemagen.schema.nodes import array_schema, resource_schema
from jsonapi_schemagen.schema.policy import ExpansionPolicy
from jsonapi_schemagen.schema.relationships import RelationshipSchemaBuilder
from jsonapi_schemagen.tree import add_at

logger = logging.getLogger(__name__)


class IncludedSchemaBuilder:
    def __init__(
        self,
        config: SchemaConfig,
        attributes: AttributeSchemaBuilder,
        relationships: RelationshipSchemaBuilder,
        registry: DefinitionRegistry | None = None,
    ) -> None:
        self.config = config
        self.attributes = attributes
        self.relationships = relationships
        self.registry = registry

    def build(
        self, definition: EntityDefinition, policy: ExpansionPolicy | None = None
    ) -> dict[str, Any]:
        """Return ``{"included": ...}``, or ``{}`` for an entity with no graph."""
        policy = policy or ExpansionPolicy()
        if definition.relationships.is_empty() and not definition.additional_response_included:
            return {}

        entries: dict[str, dict[str, Any]] = {}
        first_hop = [
            related
            for related in related_entities(definition.relationships, self.registry)
            if not self._excluded(definition, related, policy)
        ]
        for related in first_hop:
            self._emit(
                entries,
                related.definition,
                policy,
                definition.nested_relationships.get(related.relation),
            )

        if policy.expand_nested:
            for related in first_hop:
                hop = definition.nested_relationships.get(
                    related.relation, related.definition.relationships
                )
                for nested in related_entities(hop, self.registry):
                    if self._excluded(related.definition, nested, policy):
                        continue
                    if nested.definition.name == definition.name:
                        logger.debug(
                            "%s -> %s -> %s cycles back to the root",
                            definition.name,
                            related.relation,
                            nested.relation,
                        )
                    self._emit(entries, nested.definition, policy)

        if not entries and not definition.additional_response_included:
            return {}

        schema = {"included": array_schema({"anyOf": list(entries.values())})}
        if definition.additional_response_included:
            schema = add_at(schema, definition.additional_response_included, "included.items.anyOf")
        return schema

    def resource(
        self,
        definition: EntityDefinition,
        policy: ExpansionPolicy,
        relationships: Relationships | None = None,
    ) -> dict[str, Any]:
        """Schema of one included resource: type, id, attributes, relationships.

        *relationships* is the root's ``nested_relationships`` override for
        the relation that reached *definition*, if any.
        """
        derived = policy.derive(one_hop_names(definition, relationships))
        return resource_schema(
            definition.name,
            self.attributes.build(definition),
            self.relationships.build(definition, derived, relationships),
        )

    def _emit(
        self,
        entries: dict[str, dict[str, Any]],
        definition: EntityDefinition,
        policy: ExpansionPolicy,
        relationships: Relationships | None = None,
    ) -> None:
        if definition.name in entries:
            return
        entries[definition.name] = self.resource(definition, policy, relationships)

    @staticmethod
    def _excluded(
        owner: EntityDefinition, related: RelatedEntity, policy: ExpansionPolicy
    ) -> bool:
        if policy.excludes(related.relation, related.definition):
            logger.debug(
                "Not including %s.%s (%s): excluded",
                owner.name,
                related.relation,
                related.definition.name,
            )
            return True
        return False
