"""Attribute schema builder -- the ``attributes`` object of a resource.

Per attribute, in declaration order:

1. ``array_types`` override, verbatim.
2. ``additional_response_attributes`` override, verbatim.
3. Otherwise the kind is resolved: array columns map to the ``array`` kind,
   other columns go through the TypeResolver; an unmapped kind falls back to
   the serialized instance (when enabled) and finally to a generic object.
4. Nullable attributes get ``nullable: true``; enum attributes get ``enum``
   and ``default``.  The two are independent.

An attribute the introspector does not know yields ``{}`` and a warning.
Additional response attributes are then merged in and excluded ones
deleted, exclusions last so an excluded name always wins.
"""

from __future__ import annotations

import copy
import logging
from typing import Any

from jsonapi_schemagen.casing import cased
from jsonapi_schemagen.config import SchemaConfig
from jsonapi_schemagen.definition.models import EntityDefinition
from jsonapi_schemagen.errors import UnknownAttributeError
from jsonapi_schemagen.introspection.base import ModelIntrospector
from jsonapi_schemagen.schema.nodes import object_schema
from jsonapi_schemagen.tree import ROOT, add_at, delete_at
from jsonapi_schemagen.types import TypeResolver

logger = logging.getLogger(__name__)


class AttributeSchemaBuilder:
    def __init__(
        self,
        config: SchemaConfig,
        introspector: ModelIntrospector,
        resolver: TypeResolver | None = None,
    ) -> None:
        self.config = config
        self.introspector = introspector
        self.resolver = resolver or TypeResolver(config)

    def attribute_names(self, definition: EntityDefinition) -> list[str]:
        if definition.attributes is not None:
            return list(definition.attributes)
        if definition.orm_model is None:
            return []
        return self.introspector.attribute_names(definition.orm_model)

    def build(self, definition: EntityDefinition) -> dict[str, Any]:
        properties: dict[str, Any] = {}
        for name in self.attribute_names(definition):
            if name not in definition.array_types and name in definition.additional_response_attributes:
                # filled by the merge below; merging the override into a copy
                # of itself would concatenate its lists
                properties[name] = {}
            else:
                properties[name] = self.build_attribute(definition, name)
        schema = object_schema(properties)

        schema = add_at(schema, definition.additional_response_attributes, "properties")
        for name in definition.excluded_response_attributes:
            schema = delete_at(schema, f"properties.{name}")
        return schema

    def build_attribute(self, definition: EntityDefinition, name: str) -> dict[str, Any]:
        if name in definition.array_types:
            return copy.deepcopy(definition.array_types[name])
        if name in definition.additional_response_attributes:
            return copy.deepcopy(definition.additional_response_attributes[name])

        try:
            fragment, enum_values = self._introspect(definition, name)
        except UnknownAttributeError:
            logger.warning(
                "%s does not have an attribute named %r; leaving its schema empty",
                definition.name,
                name,
            )
            return {}

        if fragment is None and self.config.use_serialized_instance:
            fragment = self._from_serialized_instance(definition, name)
        if fragment is None:
            fragment = self.resolver.resolve("object") or {}

        if name in definition.nullable_attributes:
            fragment = add_at(fragment, {"nullable": True}, ROOT)
        if enum_values:
            default = definition.default_enum_value(name)
            fragment = add_at(
                fragment,
                {"enum": list(enum_values), "default": enum_values[0] if default is None else default},
                ROOT,
            )
        return fragment

    def _introspect(
        self, definition: EntityDefinition, name: str
    ) -> tuple[dict[str, Any] | None, list[str] | None]:
        model = definition.orm_model
        if model is None:
            return None, None

        if self.introspector.is_array_column(model, name):
            return self.resolver.resolve("array"), self.introspector.enum_values(model, name)

        kind = self.introspector.column_kind(model, name)
        fragment = self.resolver.resolve(kind)
        if fragment is None and kind:
            logger.warning(
                "No type mapping for kind %r of %s.%s", kind, definition.name, name
            )
        return fragment, self.introspector.enum_values(model, name)

    def _from_serialized_instance(
        self, definition: EntityDefinition, name: str
    ) -> dict[str, Any] | None:
        instance = definition.serialized_instance
        data = instance.get("data", instance) if isinstance(instance, dict) else {}
        attributes = data.get("attributes", {}) if isinstance(data, dict) else {}
        if not isinstance(attributes, dict):
            return None

        for key in (name, cased(name, "camel")):
            if key in attributes:
                return self.resolver.resolve(self.resolver.kind_of_value(attributes[key]))
        return None
