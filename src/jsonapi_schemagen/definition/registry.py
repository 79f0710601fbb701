"""Definition registry -- in-memory index of entity definitions by name.

Relationship targets declared by name are resolved here while the graph is
walked.  All mutations go through register(), which rejects duplicate names.
"""

from __future__ import annotations

import logging

from jsonapi_schemagen.definition.models import EntityDefinition

logger = logging.getLogger(__name__)


class DefinitionRegistry:
    """In-memory registry of all loaded entity definitions."""

    def __init__(self) -> None:
        self._definitions: dict[str, EntityDefinition] = {}

    def register(self, definition: EntityDefinition) -> None:
        """Add a definition.

        Raises ValueError if a definition with the same name is already registered.
        """
        if definition.name in self._definitions:
            raise ValueError(f"Duplicate entity definition registered: {definition.name!r}")
        self._definitions[definition.name] = definition

    def get(self, name: str) -> EntityDefinition | None:
        """Look up a definition by entity name. Returns None if not found."""
        return self._definitions.get(name)

    def resolve(self, target: EntityDefinition | str) -> EntityDefinition | None:
        """Return *target* itself, or the registered definition it names."""
        if isinstance(target, EntityDefinition):
            return target
        return self._definitions.get(target)

    def names(self) -> list[str]:
        return list(self._definitions)

    def __contains__(self, name: object) -> bool:
        return name in self._definitions

    def __len__(self) -> int:
        return len(self._definitions)
