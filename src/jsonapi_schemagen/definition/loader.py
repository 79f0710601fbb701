"""YAML entity-definition loading. Files starting with underscore are skipped.

``model`` may be a mapping (a static ``ModelSpec``) or a ``module:Class``
import path (a mapped class for the SQLAlchemy backend).  Relationship
targets are entity names, resolved later through the registry.
"""

from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Any

import yaml

from jsonapi_schemagen.definition.models import EntityDefinition
from jsonapi_schemagen.definition.registry import DefinitionRegistry
from jsonapi_schemagen.introspection.static import ModelSpec

logger = logging.getLogger(__name__)

DEFINITION_SUFFIXES = ("*.yaml", "*.yml")


def import_model(path: str) -> Any:
    """Import ``package.module:ClassName``."""
    module_name, sep, attr = path.partition(":")
    if not sep or not module_name or not attr:
        raise ValueError(f"Model import path must look like 'module:ClassName', got {path!r}")
    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise ValueError(f"Cannot import model module {module_name!r}: {exc}") from exc
    try:
        return getattr(module, attr)
    except AttributeError as exc:
        raise ValueError(f"Module {module_name!r} has no attribute {attr!r}") from exc


def _model_from(raw: Any, name: str) -> Any:
    if raw is None:
        return None
    if isinstance(raw, str):
        return import_model(raw)
    if isinstance(raw, dict):
        spec = dict(raw)
        spec.setdefault("name", name)
        return ModelSpec.model_validate(spec)
    raise ValueError(f"'model' must be a mapping or an import path, got {type(raw).__name__}")


def load_definition_file(path: Path) -> EntityDefinition:
    with open(path, encoding="utf-8") as f:
        raw_data = yaml.safe_load(f)
    if raw_data is None:
        raise ValueError(f"Empty definition YAML: {path}")
    if not isinstance(raw_data, dict):
        raise ValueError(f"Definition YAML root must be a mapping: {path}")

    data: dict[str, Any] = dict(raw_data)
    name = data.get("name") or path.name.split(".")[0]
    data["name"] = name
    data["orm_model"] = _model_from(data.pop("model", None), name)
    return EntityDefinition.model_validate(data)


def iter_definition_files(directory: Path) -> list[Path]:
    paths: set[Path] = set()
    for pattern in DEFINITION_SUFFIXES:
        paths.update(directory.rglob(pattern))
    return sorted(p for p in paths if not p.name.startswith("_"))


def load_definition_directory(directory: str | Path, registry: DefinitionRegistry) -> int:
    """Load all YAML definitions from a directory recursively. Returns count loaded."""
    directory = Path(directory)
    if not directory.is_dir():
        logger.warning("Definition directory does not exist: %s", directory)
        return 0

    count = 0
    for path in iter_definition_files(directory):
        try:
            definition = load_definition_file(path)
            registry.register(definition)
            count += 1
        except (yaml.YAMLError, KeyError, ValueError, TypeError) as exc:
            logger.exception("Failed to load entity definition from %s: %s", path, exc)
    return count
