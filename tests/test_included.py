"""Tests for IncludedSchemaBuilder graph expansion."""

from __future__ import annotations

import logging

import pytest
from conftest import make_test_definition, make_test_generator

from jsonapi_schemagen.schema.policy import ExpansionPolicy
from jsonapi_schemagen.schema.relationships import collapsed_relationship, expanded_relationship

NESTED = ExpansionPolicy(expand=True, expand_nested=True)
ONE_HOP = ExpansionPolicy(expand=True)


def _included(*definitions, root: str, policy: ExpansionPolicy) -> dict:
    generator = make_test_generator(*definitions)
    return generator.included_builder.build(generator.definition(root), policy)


def _types(schema: dict) -> list[str]:
    return [entry["properties"]["type"]["default"] for entry in schema["included"]["items"]["anyOf"]]


class TestDepthBound:
    def test_one_hop_without_nesting(self, chain_definitions):
        assert _types(_included(*chain_definitions, root="a", policy=ONE_HOP)) == ["b"]

    def test_two_hops_with_nesting(self, chain_definitions):
        assert _types(_included(*chain_definitions, root="a", policy=NESTED)) == ["b", "c"]

    def test_never_three_hops(self, chain_definitions):
        assert "d" not in _types(_included(*chain_definitions, root="a", policy=NESTED))

    def test_third_hop_reachable_within_two(self, chain_definitions):
        a, b, c, d = chain_definitions
        a = make_test_definition(
            "a", relationships={"belongs_to": {"b": "b"}, "has_many": {"ds": "d"}}
        )
        assert _types(_included(a, b, c, d, root="a", policy=NESTED)) == ["b", "d", "c"]


class TestExclusions:
    def test_first_hop_excluded_by_relation(self, chain_definitions):
        a, b, c, d = chain_definitions
        root = make_test_definition(
            "a", relationships={"belongs_to": {"b": "b", "other": "d"}}
        )
        policy = ExpansionPolicy(expand=True, exclude={"other"})
        assert _types(_included(root, b, c, d, root="a", policy=policy)) == ["b"]

    def test_second_hop_excluded_by_target(self, chain_definitions):
        policy = ExpansionPolicy(expand=True, expand_nested=True, exclude={"c"})
        schema = _included(*chain_definitions, root="a", policy=policy)
        assert _types(schema) == ["b"]
        b_entry = schema["included"]["items"]["anyOf"][0]
        assert b_entry["properties"]["relationships"]["properties"]["cs"] == collapsed_relationship()

    def test_included_relationships_expand_when_not_excluded(self, chain_definitions):
        schema = _included(*chain_definitions, root="a", policy=ONE_HOP)
        b_entry = schema["included"]["items"]["anyOf"][0]
        assert b_entry["properties"]["relationships"]["properties"]["cs"] == expanded_relationship(
            "c", collection=True
        )


class TestGraphShapes:
    def test_cycle_terminates(self, caplog: pytest.LogCaptureFixture):
        a = make_test_definition("a", relationships={"belongs_to": {"b": "b"}})
        b = make_test_definition("b", relationships={"belongs_to": {"a": "a"}})
        with caplog.at_level(logging.DEBUG, logger="jsonapi_schemagen.schema.included"):
            schema = _included(a, b, root="a", policy=NESTED)
        assert _types(schema) == ["b", "a"]
        assert "cycles back to the root" in caplog.text

    def test_target_reached_twice_appears_once(self):
        posts = make_test_definition(
            "posts",
            relationships={"belongs_to": {"author": "users", "editor": "users"}},
        )
        users = make_test_definition("users")
        assert _types(_included(posts, users, root="posts", policy=ONE_HOP)) == ["users"]

    def test_nested_relationships_override(self, chain_definitions):
        a, b, c, d = chain_definitions
        a = make_test_definition(
            "a",
            relationships={"belongs_to": {"b": "b"}},
            nested_relationships={"b": {"belongs_to": {"shortcut": "d"}}},
        )
        assert _types(_included(a, b, c, d, root="a", policy=NESTED)) == ["b", "d"]

    def test_nested_override_shapes_hop_one_relationships(self, chain_definitions):
        _, b, c, d = chain_definitions
        a = make_test_definition(
            "a",
            relationships={"belongs_to": {"b": "b"}},
            nested_relationships={"b": {"belongs_to": {"shortcut": "d"}}},
        )
        schema = _included(a, b, c, d, root="a", policy=NESTED)
        entry = schema["included"]["items"]["anyOf"][0]
        relationships = entry["properties"]["relationships"]["properties"]
        assert list(relationships) == ["shortcut"]
        assert relationships["shortcut"] == expanded_relationship("d")

    def test_additional_included_targets(self):
        posts = make_test_definition(
            "posts", relationships={"additional_included": {"site": "sites"}}
        )
        sites = make_test_definition("sites")
        assert _types(_included(posts, sites, root="posts", policy=ONE_HOP)) == ["sites"]

    def test_additional_response_included_appended(self, chain_definitions):
        a, b, c, d = chain_definitions
        extra = {"type": "object", "properties": {"type": {"type": "string", "default": "external"}}}
        a = make_test_definition(
            "a",
            relationships={"belongs_to": {"b": "b"}},
            additional_response_included=extra,
        )
        assert _types(_included(a, b, c, d, root="a", policy=ONE_HOP)) == ["b", "external"]

    def test_no_graph(self):
        assert _included(make_test_definition("tags"), root="tags", policy=NESTED) == {}

    def test_unknown_target_skipped(self, caplog: pytest.LogCaptureFixture):
        posts = make_test_definition("posts", relationships={"belongs_to": {"author": "ghosts"}})
        with caplog.at_level(logging.WARNING, logger="jsonapi_schemagen.definition.graph"):
            assert _included(posts, root="posts", policy=ONE_HOP) == {}
        assert "unknown entity 'ghosts'" in caplog.text

    def test_entry_is_resource_schema(self, chain_definitions):
        entry = _included(*chain_definitions, root="a", policy=ONE_HOP)["included"]["items"]["anyOf"][0]
        assert list(entry["properties"]) == ["type", "id", "attributes", "relationships"]
        assert entry["properties"]["attributes"]["properties"]["created_at"] == {
            "type": "string",
            "format": "date-time",
        }
