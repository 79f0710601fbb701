"""Entity definitions -- models, registry, YAML loading and validation."""

from jsonapi_schemagen.definition.graph import RelatedEntity, one_hop_names, related_entities
from jsonapi_schemagen.definition.loader import load_definition_directory, load_definition_file
from jsonapi_schemagen.definition.models import EntityDefinition, Relationships
from jsonapi_schemagen.definition.registry import DefinitionRegistry
from jsonapi_schemagen.definition.validator import (
    validate_definition_directory,
    validate_definition_file,
    validate_definitions,
)

__all__ = [
    "DefinitionRegistry",
    "EntityDefinition",
    "RelatedEntity",
    "Relationships",
    "load_definition_directory",
    "load_definition_file",
    "one_hop_names",
    "related_entities",
    "validate_definition_directory",
    "validate_definition_file",
    "validate_definitions",
]
