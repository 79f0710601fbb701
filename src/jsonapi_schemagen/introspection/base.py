"""Model introspection protocol and backend factory."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from jsonapi_schemagen.config import SchemaConfig
from jsonapi_schemagen.errors import UnsupportedBackendError


@runtime_checkable
class ModelIntrospector(Protocol):
    """Reads attribute metadata off a backend-specific model handle.

    ``column_kind`` and ``is_array_column`` raise UnknownAttributeError for
    attributes the model does not have.  ``column_kind`` returns the kind
    name understood by TypeResolver, or None when the backend cannot name it.
    """

    def attribute_names(self, model: Any) -> list[str]: ...

    def column_kind(self, model: Any, name: str) -> str | None: ...

    def is_array_column(self, model: Any, name: str) -> bool: ...

    def enum_values(self, model: Any, name: str) -> list[str] | None: ...


def create_introspector(config: SchemaConfig) -> ModelIntrospector:
    """Factory function to create the introspector named by ``config.orm``.

    Raises:
        UnsupportedBackendError: If the backend is not recognised.
    """
    if config.orm == "static":
        from jsonapi_schemagen.introspection.static import StaticIntrospector

        return StaticIntrospector()
    elif config.orm == "sqlalchemy":
        from jsonapi_schemagen.introspection.sqlalchemy_backend import SQLAlchemyIntrospector

        return SQLAlchemyIntrospector(config)
    else:
        raise UnsupportedBackendError(config.orm)
