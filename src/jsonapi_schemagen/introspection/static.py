"""Static introspection backend.

Models are plain ``ModelSpec`` values describing their columns, usually
declared under ``model:`` in a definition YAML file::

    model:
      name: User
      columns:
        - {name: id, type: integer}
        - {name: tags, type: string, array: true}
        - {name: status, type: integer, enum: {active: 0, inactive: 1}}
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, field_validator

from jsonapi_schemagen.definition.models import _StrictModel
from jsonapi_schemagen.errors import UnknownAttributeError


class ColumnSpec(_StrictModel):
    name: str
    type: str = "string"
    array: bool = False
    enum: list[str] = Field(default_factory=list)

    @field_validator("name", "type")
    @classmethod
    def normalize_text(cls, value: str) -> str:
        return value.strip()

    @field_validator("enum", mode="before")
    @classmethod
    def enum_keys(cls, value: Any) -> list[str]:
        # a mapping declares key -> stored value; only the keys are documented
        if isinstance(value, dict):
            return [str(key) for key in value]
        return value


class ModelSpec(_StrictModel):
    name: str
    columns: list[ColumnSpec] = Field(default_factory=list)

    def column(self, name: str) -> ColumnSpec | None:
        for column in self.columns:
            if column.name == name:
                return column
        return None


class StaticIntrospector:
    """Introspector over ModelSpec column tables."""

    def attribute_names(self, model: ModelSpec | None) -> list[str]:
        if model is None:
            return []
        return [column.name for column in model.columns]

    def _column(self, model: ModelSpec | None, name: str) -> ColumnSpec:
        column = model.column(name) if isinstance(model, ModelSpec) else None
        if column is None:
            model_name = model.name if isinstance(model, ModelSpec) else repr(model)
            raise UnknownAttributeError(model_name, name)
        return column

    def column_kind(self, model: ModelSpec | None, name: str) -> str | None:
        return self._column(model, name).type or None

    def is_array_column(self, model: ModelSpec | None, name: str) -> bool:
        return self._column(model, name).array

    def enum_values(self, model: ModelSpec | None, name: str) -> list[str] | None:
        return list(self._column(model, name).enum) or None
