"""One-hop walks over the implicit relationship graph.

The graph is never materialized: these helpers resolve the direct targets
of one Relationships map at a time.  Targets that cannot be resolved are
logged and skipped so one bad edge does not abort a document.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from jsonapi_schemagen.definition.models import EntityDefinition, Relationships
from jsonapi_schemagen.definition.registry import DefinitionRegistry

logger = logging.getLogger(__name__)

POINTER_KINDS = ("belongs_to", "has_many")
INCLUDED_KINDS = ("belongs_to", "has_many", "additional_included")


@dataclass(frozen=True)
class RelatedEntity:
    """A resolved edge: relationship name, edge kind and target definition."""

    relation: str
    kind: str
    definition: EntityDefinition


def target_name(target: EntityDefinition | str) -> str:
    """Entity name of a relationship target, resolved or not."""
    if isinstance(target, EntityDefinition):
        return target.name
    return target


def related_entities(
    relationships: Relationships,
    registry: DefinitionRegistry | None = None,
    kinds: tuple[str, ...] = INCLUDED_KINDS,
) -> list[RelatedEntity]:
    """Resolve the direct targets of *relationships*, in declaration order."""
    related: list[RelatedEntity] = []
    for kind in kinds:
        for relation, target in getattr(relationships, kind).items():
            if isinstance(target, EntityDefinition):
                definition: EntityDefinition | None = target
            elif registry is not None:
                definition = registry.resolve(target)
            else:
                definition = None
            if definition is None:
                logger.warning(
                    "Relationship %r points at unknown entity %r; skipping it",
                    relation,
                    target,
                )
                continue
            related.append(RelatedEntity(relation=relation, kind=kind, definition=definition))
    return related


def one_hop_names(
    definition: EntityDefinition, relationships: Relationships | None = None
) -> set[str]:
    """Relationship names and target entity names of a definition's pointers.

    *relationships* stands in for the definition's own map when given.
    """
    if relationships is None:
        relationships = definition.relationships
    names: set[str] = set()
    for kind in POINTER_KINDS:
        for relation, target in getattr(relationships, kind).items():
            names.add(relation)
            names.add(target_name(target))
    return names
