"""Request document composer -- create and update request bodies.

The ``required`` list is derived after the mode's additions and exclusions
have been applied: it is every remaining property minus the mode's optional
attributes and the nullable attributes.
"""

from __future__ import annotations

import logging
from typing import Any

from jsonapi_schemagen.casing import transform_keys
from jsonapi_schemagen.config import SchemaConfig
from jsonapi_schemagen.definition.models import REQUEST_MODES, EntityDefinition, RequestMode
from jsonapi_schemagen.schema.attributes import AttributeSchemaBuilder
from jsonapi_schemagen.schema.nodes import object_schema
from jsonapi_schemagen.tree import add_at, delete_at, get_at

logger = logging.getLogger(__name__)

DATA_PROPERTIES = "properties.data.properties"


class RequestComposer:
    def __init__(self, config: SchemaConfig, attributes: AttributeSchemaBuilder) -> None:
        self.config = config
        self.attributes = attributes

    def build(self, definition: EntityDefinition, mode: RequestMode) -> dict[str, Any]:
        if mode not in REQUEST_MODES:
            raise ValueError(f"Unknown request mode {mode!r}; expected one of {REQUEST_MODES}")

        schema = object_schema({"data": self.attributes.build(definition)})

        schema = add_at(schema, definition.additional_request_attributes(mode), DATA_PROPERTIES)
        for name in definition.excluded_request_attributes(mode):
            schema = delete_at(schema, f"{DATA_PROPERTIES}.{name}")

        not_required = set(definition.optional_request_attributes(mode))
        not_required.update(definition.nullable_attributes)
        properties = get_at(schema, DATA_PROPERTIES, {})
        required = [name for name in properties if name not in not_required]
        logger.debug("%s %s request requires %s", definition.name, mode, required)

        schema = add_at(schema, {"required": required}, "properties.data")
        return transform_keys(schema, self.config.key_case)
