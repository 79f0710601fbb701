"""Model introspection backends."""

from jsonapi_schemagen.introspection.base import ModelIntrospector, create_introspector
from jsonapi_schemagen.introspection.static import ColumnSpec, ModelSpec, StaticIntrospector

__all__ = [
    "ColumnSpec",
    "ModelIntrospector",
    "ModelSpec",
    "StaticIntrospector",
    "create_introspector",
]
