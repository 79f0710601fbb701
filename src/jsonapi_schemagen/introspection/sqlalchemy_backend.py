"""SQLAlchemy introspection backend.

Reads column attributes off declaratively mapped classes through
``sqlalchemy.inspect``.  Install with the ``sqlalchemy`` extra.
"""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import inspect as sa_inspect
from sqlalchemy import types as sa_types
from sqlalchemy.exc import NoInspectionAvailable

from jsonapi_schemagen.config import SchemaConfig
from jsonapi_schemagen.errors import UnknownAttributeError

logger = logging.getLogger(__name__)

# Subclasses come before their bases (Float < Numeric, Text/Enum < String).
_KIND_BY_TYPE: tuple[tuple[type, str], ...] = (
    (sa_types.ARRAY, "array"),
    (sa_types.Boolean, "boolean"),
    (sa_types.Integer, "integer"),
    (sa_types.Float, "float"),
    (sa_types.Numeric, "decimal"),
    (sa_types.DateTime, "datetime"),
    (sa_types.Date, "date"),
    (sa_types.Time, "time"),
    (sa_types.Text, "text"),
    (sa_types.Enum, "string"),
    (sa_types.String, "string"),
    (sa_types.JSON, "json"),
    (sa_types.LargeBinary, "binary"),
)


def _model_name(model: Any) -> str:
    return getattr(model, "__name__", repr(model))


class SQLAlchemyIntrospector:
    """Introspector over SQLAlchemy mapped classes."""

    def __init__(self, config: SchemaConfig | None = None) -> None:
        config = config or SchemaConfig(orm="sqlalchemy")
        self.custom_enum_method = config.custom_enum_method
        self.attributes_method = config.attributes_method

    def attribute_names(self, model: Any) -> list[str]:
        if model is None:
            return []
        if self.attributes_method and hasattr(model, self.attributes_method):
            return [str(name) for name in getattr(model, self.attributes_method)()]
        return [attr.key for attr in self._mapper(model).column_attrs]

    def _mapper(self, model: Any) -> Any:
        try:
            return sa_inspect(model)
        except NoInspectionAvailable as exc:
            raise UnknownAttributeError(_model_name(model), "<mapper>") from exc

    def _column(self, model: Any, name: str) -> Any:
        if model is None:
            raise UnknownAttributeError("None", name)
        column_attrs = self._mapper(model).column_attrs
        if name not in column_attrs:
            raise UnknownAttributeError(_model_name(model), name)
        return column_attrs[name].columns[0]

    def column_kind(self, model: Any, name: str) -> str | None:
        column_type = self._column(model, name).type
        for type_class, kind in _KIND_BY_TYPE:
            if isinstance(column_type, type_class):
                return kind
        logger.debug(
            "No kind for %s.%s (%s)", _model_name(model), name, type(column_type).__name__
        )
        return None

    def is_array_column(self, model: Any, name: str) -> bool:
        return isinstance(self._column(model, name).type, sa_types.ARRAY)

    def enum_values(self, model: Any, name: str) -> list[str] | None:
        if self.custom_enum_method and hasattr(model, self.custom_enum_method):
            values = getattr(model, self.custom_enum_method)(name)
            if not values:
                return None
            return [str(v) for v in values]
        column_type = self._column(model, name).type
        if isinstance(column_type, sa_types.Enum):
            return list(column_type.enums) or None
        return None
