"""Pydantic models for entity definitions and their relationship maps."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_pascal

RequestMode = Literal["create", "update"]
REQUEST_MODES: tuple[str, ...] = ("create", "update")


class _StrictModel(BaseModel):
    """Shared strict model settings for definition contracts."""

    model_config = ConfigDict(extra="forbid", frozen=True)


def _normalize_string_list(values: list[str]) -> list[str]:
    """Trim whitespace and drop empty entries while preserving order."""
    normalized: list[str] = []
    for value in values:
        if not isinstance(value, str):
            continue
        cleaned = value.strip()
        if cleaned:
            normalized.append(cleaned)
    return normalized


class Relationships(_StrictModel):
    """Relationship map of one entity.

    Targets are either EntityDefinition instances or entity names; names are
    resolved through a DefinitionRegistry when the graph is walked, which is
    how mutually referencing entities are declared.
    """

    belongs_to: dict[str, EntityDefinition | str] = Field(default_factory=dict)
    has_many: dict[str, EntityDefinition | str] = Field(default_factory=dict)
    additional_included: dict[str, EntityDefinition | str] = Field(
        default_factory=dict
    )

    def has_pointers(self) -> bool:
        """True when there is at least one to-one or to-many relationship."""
        return bool(self.belongs_to or self.has_many)

    def is_empty(self) -> bool:
        return not (self.belongs_to or self.has_many or self.additional_included)


class EntityDefinition(_StrictModel):
    """Declarative description of one JSON:API resource type.

    ``name`` is the JSON:API ``type`` value and the lookup key used while
    walking the relationship graph.  ``orm_model`` is whatever the configured
    introspector understands (a ``ModelSpec`` for the static backend, a
    mapped class for SQLAlchemy).  ``attributes`` overrides the introspected
    attribute list when set.

    The remaining fields are override hooks.  They all default to empty and
    are only ever read by the builders.
    """

    name: str
    schema_name: str | None = None
    orm_model: Any = None
    attributes: list[str] | None = None
    relationships: Relationships = Field(default_factory=Relationships)
    nested_relationships: dict[str, Relationships] = Field(default_factory=dict)
    expansion_exclusions: list[str] = Field(default_factory=list)
    serialized_instance: dict[str, Any] = Field(default_factory=dict)

    array_types: dict[str, dict[str, Any]] = Field(default_factory=dict)
    additional_create_request_attributes: dict[str, Any] = Field(default_factory=dict)
    additional_update_request_attributes: dict[str, Any] = Field(default_factory=dict)
    additional_response_attributes: dict[str, Any] = Field(default_factory=dict)
    additional_response_relations: dict[str, Any] = Field(default_factory=dict)
    additional_response_included: dict[str, Any] = Field(default_factory=dict)
    excluded_create_request_attributes: list[str] = Field(default_factory=list)
    excluded_update_request_attributes: list[str] = Field(default_factory=list)
    excluded_response_attributes: list[str] = Field(default_factory=list)
    excluded_response_relations: list[str] = Field(default_factory=list)
    optional_create_request_attributes: list[str] = Field(default_factory=list)
    optional_update_request_attributes: list[str] = Field(default_factory=list)
    nullable_attributes: list[str] = Field(default_factory=list)
    enum_defaults: dict[str, Any] = Field(default_factory=dict)

    @field_validator("name")
    @classmethod
    def normalize_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("name must not be empty")
        return value

    @field_validator("attributes")
    @classmethod
    def normalize_attributes(cls, values: list[str] | None) -> list[str] | None:
        if values is None:
            return None
        return _normalize_string_list(values)

    @field_validator(
        "expansion_exclusions",
        "excluded_create_request_attributes",
        "excluded_update_request_attributes",
        "excluded_response_attributes",
        "excluded_response_relations",
        "optional_create_request_attributes",
        "optional_update_request_attributes",
        "nullable_attributes",
    )
    @classmethod
    def normalize_lists(cls, values: list[str]) -> list[str]:
        return _normalize_string_list(values)

    @property
    def bundle_name(self) -> str:
        """Prefix for the named schemas of this entity (``Users``, ``UsersCreateRequest``)."""
        return self.schema_name or to_pascal(self.name)

    def default_enum_value(self, attribute: str) -> Any | None:
        return self.enum_defaults.get(attribute)

    def additional_request_attributes(self, mode: RequestMode) -> dict[str, Any]:
        _check_mode(mode)
        if mode == "create":
            return self.additional_create_request_attributes
        return self.additional_update_request_attributes

    def excluded_request_attributes(self, mode: RequestMode) -> list[str]:
        _check_mode(mode)
        if mode == "create":
            return self.excluded_create_request_attributes
        return self.excluded_update_request_attributes

    def optional_request_attributes(self, mode: RequestMode) -> list[str]:
        _check_mode(mode)
        if mode == "create":
            return self.optional_create_request_attributes
        return self.optional_update_request_attributes


def _check_mode(mode: str) -> None:
    if mode not in REQUEST_MODES:
        raise ValueError(f"Unknown request mode {mode!r}; expected one of {REQUEST_MODES}")


Relationships.model_rebuild()
EntityDefinition.model_rebuild()
