"""Generator configuration -- the contract between the host app and the engine.

A SchemaConfig is read once at process start and handed to every builder.
It is frozen; ``with_type_mapper`` returns a modified copy instead of
mutating in place, so one config can be shared by concurrent generation
calls.

Example usage::

    config = SchemaConfig(
        orm="sqlalchemy",
        decimal_as_string=True,
        pagination_enabled=False,
    ).with_type_mapper("array", {"type": "array", "items": {"type": "string"}})

Example YAML (``load_config_file``)::

    orm: static
    float_as_string: true
    key_case: camel
    custom_type_mappers:
      money:
        type: string
        format: decimal
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

KEY_CASES = ("camel", "snake", "none")


@dataclass(frozen=True)
class SchemaConfig:
    """Process-wide settings for schema generation.

    Attributes:
        orm: Introspection backend name, ``"static"`` or ``"sqlalchemy"``.
            Anything else is rejected by ``create_introspector``.
        float_as_string: Render float columns as ``{"type": "string"}``.
        decimal_as_string: Render decimal columns as ``{"type": "string"}``.
        custom_type_mappers: Kind name to schema fragment; consulted before
            the built-in table.
        use_serialized_instance: Infer unmapped attribute kinds from the
            definition's example JSON:API document.
        custom_enum_method: Name of a model classmethod returning the enum
            values for an attribute name (SQLAlchemy backend).
        attributes_method: Name of a model classmethod returning the
            attribute names to document (SQLAlchemy backend).
        pagination_enabled: Emit the pagination ``meta`` block on collection
            responses.
        custom_meta_response_schema: Replaces the pagination ``meta`` block.
        expand_nested_from_expand: Expanded responses also expand one
            further hop of the relationship graph.
        key_case: Property-name casing of generated documents: ``"camel"``,
            ``"snake"`` or ``"none"``.
    """

    orm: str = "static"
    float_as_string: bool = False
    decimal_as_string: bool = False
    custom_type_mappers: dict[str, dict[str, Any]] = field(default_factory=dict)
    use_serialized_instance: bool = False
    custom_enum_method: str | None = None
    attributes_method: str | None = None
    pagination_enabled: bool = True
    custom_meta_response_schema: dict[str, Any] | None = None
    expand_nested_from_expand: bool = False
    key_case: str = "camel"

    def __post_init__(self) -> None:
        if self.key_case not in KEY_CASES:
            raise ValueError(
                f"key_case must be one of {', '.join(KEY_CASES)}, got {self.key_case!r}"
            )
        mappers = self.custom_type_mappers or {}
        if not isinstance(mappers, dict):
            raise ValueError(
                f"custom_type_mappers must be a mapping, got {type(mappers).__name__}"
            )
        normalized = {str(kind).strip().lower(): mapping for kind, mapping in mappers.items()}
        object.__setattr__(self, "custom_type_mappers", normalized)

    def with_type_mapper(self, kind: str, mapping: dict[str, Any]) -> SchemaConfig:
        """Return a copy with one extra (or replaced) custom type mapping."""
        mappers = dict(self.custom_type_mappers)
        mappers[kind.strip().lower()] = mapping
        return replace(self, custom_type_mappers=mappers)


def load_config_file(path: str | Path) -> SchemaConfig:
    """Read a SchemaConfig from YAML.  An empty file yields the defaults."""
    path = Path(path)
    with open(path, encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    if raw is None:
        return SchemaConfig()
    if not isinstance(raw, dict):
        raise ValueError(f"Config YAML root must be a mapping: {path}")

    known = {f.name for f in fields(SchemaConfig)}
    unknown = sorted(set(raw) - known)
    if unknown:
        raise ValueError(f"Unknown config keys in {path}: {', '.join(unknown)}")

    config = SchemaConfig(**raw)
    logger.debug("Loaded schema config from %s (orm=%s)", path, config.orm)
    return config
