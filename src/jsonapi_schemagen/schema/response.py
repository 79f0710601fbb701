"""Response document composer -- single and collection JSON:API responses."""

from __future__ import annotations

import copy
from typing import Any

from jsonapi_schemagen.casing import transform_keys
from jsonapi_schemagen.config import SchemaConfig
from jsonapi_schemagen.definition.models import EntityDefinition
from jsonapi_schemagen.schema.attributes import AttributeSchemaBuilder
from jsonapi_schemagen.schema.included import IncludedSchemaBuilder
from jsonapi_schemagen.schema.nodes import array_schema, object_schema, resource_schema
from jsonapi_schemagen.schema.policy import ExpansionPolicy
from jsonapi_schemagen.schema.relationships import RelationshipSchemaBuilder
from jsonapi_schemagen.tree import ROOT, add_at

_PAGE_COUNTER = {"type": "integer", "default": 1}

PAGINATION_META: dict[str, Any] = object_schema(
    {
        "page": object_schema(
            {
                "totalPages": _PAGE_COUNTER,
                "count": _PAGE_COUNTER,
                "rowsPerPage": _PAGE_COUNTER,
                "currentPage": _PAGE_COUNTER,
            }
        )
    }
)

JSONAPI_OBJECT: dict[str, Any] = object_schema({"version": {"type": "string", "default": "1.0"}})


class ResponseComposer:
    def __init__(
        self,
        config: SchemaConfig,
        attributes: AttributeSchemaBuilder,
        relationships: RelationshipSchemaBuilder,
        included: IncludedSchemaBuilder,
    ) -> None:
        self.config = config
        self.attributes = attributes
        self.relationships = relationships
        self.included = included

    def effective_policy(self, policy: ExpansionPolicy | None) -> ExpansionPolicy:
        policy = policy or ExpansionPolicy()
        if policy.expand and self.config.expand_nested_from_expand and not policy.expand_nested:
            return policy.model_copy(update={"expand_nested": True})
        return policy

    def meta_schema(self) -> dict[str, Any] | None:
        """Collection ``meta`` block; None when pagination is off and nothing replaces it."""
        if self.config.custom_meta_response_schema is not None:
            return copy.deepcopy(self.config.custom_meta_response_schema)
        if self.config.pagination_enabled:
            return copy.deepcopy(PAGINATION_META)
        return None

    def build(
        self,
        definition: EntityDefinition,
        policy: ExpansionPolicy | None = None,
        *,
        collection: bool = False,
    ) -> dict[str, Any]:
        policy = self.effective_policy(policy)

        data = resource_schema(
            definition.name,
            self.attributes.build(definition),
            self.relationships.build(definition, policy),
        )
        schema: dict[str, Any] = {"data": array_schema(data) if collection else data}

        if policy.expand:
            schema = add_at(schema, self.included.build(definition, policy), ROOT)

        if collection:
            meta = self.meta_schema()
            if meta is not None:
                schema = add_at(schema, {"meta": meta}, ROOT)

        schema = add_at(schema, {"jsonapi": JSONAPI_OBJECT}, ROOT)
        return transform_keys(object_schema(schema), self.config.key_case)
