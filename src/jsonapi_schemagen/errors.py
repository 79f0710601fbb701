"""Exception hierarchy for schema generation.

Only ``UnsupportedBackendError`` and ``DefinitionNotFoundError`` reach the
caller during normal generation.  ``UnknownAttributeError`` is raised by
introspectors and contained by the attribute builder, which degrades the
affected fragment and keeps going.
"""

from __future__ import annotations


class SchemaGenError(Exception):
    """Base class for all errors raised by jsonapi_schemagen."""


class UnsupportedBackendError(SchemaGenError):
    """The configured introspection backend is not recognised."""

    def __init__(self, backend: str) -> None:
        super().__init__(f"Unsupported introspection backend: {backend!r}")
        self.backend = backend


class UnknownAttributeError(SchemaGenError, LookupError):
    """An introspector was asked about an attribute the model does not have."""

    def __init__(self, model: str, attribute: str) -> None:
        super().__init__(f"{model} does not have an attribute named {attribute!r}")
        self.model = model
        self.attribute = attribute


class DefinitionNotFoundError(SchemaGenError):
    """No entity definition is registered under the requested name."""
