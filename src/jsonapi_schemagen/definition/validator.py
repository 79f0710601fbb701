"""Definition YAML validator -- ensures entity definitions are well-formed.

Validation checks:
  - The file loads and parses into an EntityDefinition
  - Filename matches the entity name
  - Hook lists only name attributes the entity has (when its attributes are
    known statically: an explicit ``attributes`` list or a static model)
  - Enum defaults are among the column's enum values
  - Excluded relations name a declared relationship
  - No duplicate names across a directory
  - Every relationship target named by string is defined in the directory
"""

from __future__ import annotations

import logging
from pathlib import Path

from jsonapi_schemagen.definition.graph import INCLUDED_KINDS
from jsonapi_schemagen.definition.loader import iter_definition_files, load_definition_file
from jsonapi_schemagen.definition.models import EntityDefinition
from jsonapi_schemagen.introspection.static import ModelSpec

logger = logging.getLogger(__name__)


def _display(path: Path, project_root: Path | None) -> str:
    if project_root:
        try:
            return str(path.relative_to(project_root))
        except ValueError:
            return str(path)
    return str(path)


def _known_attributes(definition: EntityDefinition) -> set[str] | None:
    if definition.attributes is not None:
        return set(definition.attributes)
    if isinstance(definition.orm_model, ModelSpec):
        return {column.name for column in definition.orm_model.columns}
    return None


def check_definition(definition: EntityDefinition) -> list[str]:
    """Return the problems found in one definition (without a file prefix)."""
    errors: list[str] = []

    known = _known_attributes(definition)
    if known is not None:
        response_names = known | set(definition.additional_response_attributes) | set(definition.array_types)
        hooks: dict[str, tuple[list[str], set[str]]] = {
            "nullable_attributes": (definition.nullable_attributes, response_names),
            "excluded_response_attributes": (definition.excluded_response_attributes, response_names),
        }
        for mode in ("create", "update"):
            request_names = response_names | set(definition.additional_request_attributes(mode))
            hooks[f"optional_{mode}_request_attributes"] = (
                definition.optional_request_attributes(mode),
                request_names,
            )
            hooks[f"excluded_{mode}_request_attributes"] = (
                definition.excluded_request_attributes(mode),
                request_names,
            )
        for hook, (names, allowed) in hooks.items():
            for name in names:
                if name not in allowed:
                    errors.append(f"{hook} names unknown attribute '{name}'")
        for name in definition.enum_defaults:
            if name not in response_names:
                errors.append(f"enum_defaults names unknown attribute '{name}'")

    if isinstance(definition.orm_model, ModelSpec):
        for name, default in definition.enum_defaults.items():
            column = definition.orm_model.column(name)
            if column is not None and column.enum and str(default) not in column.enum:
                errors.append(
                    f"enum default '{default}' for '{name}' is not one of {column.enum}"
                )

    declared_relations = (
        set(definition.relationships.belongs_to)
        | set(definition.relationships.has_many)
        | set(definition.additional_response_relations)
    )
    for name in definition.excluded_response_relations:
        if name not in declared_relations:
            errors.append(f"excluded_response_relations names unknown relationship '{name}'")

    return errors


def validate_definition_file(
    path: Path, *, project_root: Path | None = None
) -> tuple[EntityDefinition | None, list[str]]:
    """Validate a single definition YAML file.

    Returns a tuple of (definition_or_none, list_of_errors).
    """
    display_path = _display(path, project_root)

    try:
        definition = load_definition_file(path)
    except Exception as exc:
        return None, [f"{display_path}: Failed to load -- {exc}"]

    errors = [f"{display_path}: {problem}" for problem in check_definition(definition)]

    name = path.name
    if not name.startswith(f"{definition.name}."):
        errors.append(
            f"{display_path}: Filename '{name}' should match entity name "
            f"'{definition.name}' (expected '{definition.name}.yaml')"
        )

    return definition, errors


def _string_targets(definition: EntityDefinition) -> list[tuple[str, str]]:
    maps = [definition.relationships, *definition.nested_relationships.values()]
    targets: list[tuple[str, str]] = []
    for relationships in maps:
        for kind in INCLUDED_KINDS:
            for relation, target in getattr(relationships, kind).items():
                if isinstance(target, str):
                    targets.append((relation, target))
    return targets


def validate_definition_directory(
    directory: str | Path, *, project_root: Path | None = None
) -> tuple[int, list[str]]:
    """Validate all definition YAML files in a directory (recursively).

    Returns a tuple of (definition_count, list_of_errors).
    """
    directory = Path(directory)
    if not directory.is_dir():
        return 0, [f"Definition directory not found: {directory}"]

    yaml_files = iter_definition_files(directory)
    if not yaml_files:
        return 0, [f"No definition YAML files found in {directory}"]

    errors: list[str] = []
    seen: dict[str, Path] = {}
    loaded: list[tuple[Path, EntityDefinition]] = []

    for path in yaml_files:
        definition, file_errors = validate_definition_file(path, project_root=project_root)
        if file_errors:
            errors.extend(file_errors)
        if definition is None:
            continue

        if definition.name in seen:
            errors.append(
                f"{_display(path, project_root)}: Duplicate name '{definition.name}' -- "
                f"already defined in {_display(seen[definition.name], project_root)}"
            )
            continue
        seen[definition.name] = path
        loaded.append((path, definition))

    for path, definition in loaded:
        for relation, target in _string_targets(definition):
            if target not in seen:
                errors.append(
                    f"{_display(path, project_root)}: Relationship '{relation}' targets "
                    f"undefined entity '{target}'"
                )

    return len(loaded), errors


def validate_definitions(directory: str | Path) -> tuple[int, int]:
    """Log every problem; returns (definition_count, error_count)."""
    count, errors = validate_definition_directory(directory)
    for err in errors:
        logger.error("%s", err)
    return count, len(errors)
