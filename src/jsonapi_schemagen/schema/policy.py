"""Per-call expansion policy for relationship and included fragments."""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import Field, field_validator

from jsonapi_schemagen.definition.models import EntityDefinition, _StrictModel


class ExpansionPolicy(_StrictModel):
    """Controls how far a response document expands the relationship graph.

    ``expand`` switches relationship pointers from the collapsed
    ``meta.included`` form to ``data`` identifiers and turns on the
    ``included`` fragment.  ``exclude`` names relationships (or target
    entity names) that stay collapsed and are left out of ``included``.
    ``expand_nested`` adds the targets one hop further to ``included``.
    """

    expand: bool = False
    exclude: frozenset[str] = Field(default_factory=frozenset)
    expand_nested: bool = False

    @field_validator("exclude", mode="before")
    @classmethod
    def normalize_exclude(cls, values: Iterable[str]) -> frozenset[str]:
        if isinstance(values, str):
            values = [values]
        return frozenset(v.strip() for v in values if isinstance(v, str) and v.strip())

    def excludes(self, relation: str, target: str | EntityDefinition) -> bool:
        """True when either the relationship name or the target's name is excluded."""
        name = target.name if isinstance(target, EntityDefinition) else target
        return relation in self.exclude or name in self.exclude

    def derive(self, names: Iterable[str]) -> ExpansionPolicy:
        """Policy for one hop down: keep only exclusions that apply at that hop."""
        return ExpansionPolicy(
            expand=self.expand,
            exclude=self.exclude.intersection(names),
            expand_nested=False,
        )
