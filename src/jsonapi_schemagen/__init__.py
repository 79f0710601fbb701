"""jsonapi-schemagen -- JSON-Schema documents for JSON:API resources.

Entity definitions (YAML or Python) describe a resource; the generator
introspects its model and composes response, collection and request
schemas with optional relationship expansion.

Public API::

    from jsonapi_schemagen import SchemaConfig, SchemaGenerator, ExpansionPolicy
    from jsonapi_schemagen.definition import DefinitionRegistry, load_definition_directory
    from jsonapi_schemagen.tree import add_at, delete_at, path_exists
"""

from jsonapi_schemagen.config import SchemaConfig, load_config_file
from jsonapi_schemagen.definition import DefinitionRegistry, EntityDefinition, Relationships
from jsonapi_schemagen.generator import SchemaGenerator
from jsonapi_schemagen.introspection import ModelSpec
from jsonapi_schemagen.schema import ExpansionPolicy

__all__ = [
    "DefinitionRegistry",
    "EntityDefinition",
    "ExpansionPolicy",
    "ModelSpec",
    "Relationships",
    "SchemaConfig",
    "SchemaGenerator",
    "load_config_file",
]
__version__ = "0.1.0"
