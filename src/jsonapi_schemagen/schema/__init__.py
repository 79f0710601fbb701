"""Schema builders and document composers."""

from jsonapi_schemagen.schema.attributes import AttributeSchemaBuilder
from jsonapi_schemagen.schema.included import IncludedSchemaBuilder
from jsonapi_schemagen.schema.policy import ExpansionPolicy
from jsonapi_schemagen.schema.relationships import (
    RelationshipSchemaBuilder,
    collapsed_relationship,
    expanded_relationship,
)
from jsonapi_schemagen.schema.request import RequestComposer
from jsonapi_schemagen.schema.response import ResponseComposer

__all__ = [
    "AttributeSchemaBuilder",
    "ExpansionPolicy",
    "IncludedSchemaBuilder",
    "RelationshipSchemaBuilder",
    "RequestComposer",
    "ResponseComposer",
    "collapsed_relationship",
    "expanded_relationship",
]
