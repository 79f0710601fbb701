"""Tests for EntityDefinition, Relationships and ExpansionPolicy models."""

from __future__ import annotations

import pytest
from conftest import make_test_definition
from pydantic import ValidationError

from jsonapi_schemagen.definition.models import EntityDefinition, Relationships
from jsonapi_schemagen.schema.policy import ExpansionPolicy


class TestEntityDefinition:
    def test_name_trimmed(self):
        assert EntityDefinition(name="  users ").name == "users"

    def test_empty_name_rejected(self):
        with pytest.raises(ValidationError, match="name must not be empty"):
            EntityDefinition(name="   ")

    def test_unknown_field_rejected(self):
        with pytest.raises(ValidationError):
            EntityDefinition(name="users", timestamps=True)

    def test_frozen(self):
        definition = EntityDefinition(name="users")
        with pytest.raises(ValidationError):
            definition.name = "accounts"

    def test_hook_lists_normalized(self):
        definition = EntityDefinition(
            name="users",
            nullable_attributes=[" email ", "", "phone"],
            attributes=["id", " ", "name"],
        )
        assert definition.nullable_attributes == ["email", "phone"]
        assert definition.attributes == ["id", "name"]

    def test_attributes_default_to_introspection(self):
        assert EntityDefinition(name="users").attributes is None

    def test_bundle_name(self):
        assert EntityDefinition(name="order_items").bundle_name == "OrderItems"
        assert EntityDefinition(name="order_items", schema_name="LineItem").bundle_name == "LineItem"

    def test_request_hooks_by_mode(self):
        definition = EntityDefinition(
            name="users",
            additional_create_request_attributes={"password": {"type": "string"}},
            excluded_update_request_attributes=["id"],
            optional_update_request_attributes=["name"],
        )
        assert definition.additional_request_attributes("create") == {"password": {"type": "string"}}
        assert definition.additional_request_attributes("update") == {}
        assert definition.excluded_request_attributes("update") == ["id"]
        assert definition.optional_request_attributes("update") == ["name"]
        assert definition.optional_request_attributes("create") == []

    def test_unknown_request_mode(self):
        with pytest.raises(ValueError, match="Unknown request mode 'delete'"):
            EntityDefinition(name="users").excluded_request_attributes("delete")  # type: ignore[arg-type]

    def test_default_enum_value(self):
        definition = EntityDefinition(name="users", enum_defaults={"status": "inactive"})
        assert definition.default_enum_value("status") == "inactive"
        assert definition.default_enum_value("role") is None


class TestRelationships:
    def test_targets_by_name_or_definition(self):
        category = make_test_definition("categories")
        relationships = Relationships(belongs_to={"category": category}, has_many={"tags": "tags"})
        assert relationships.belongs_to["category"] is category
        assert relationships.has_many["tags"] == "tags"

    def test_has_pointers(self):
        assert Relationships(has_many={"tags": "tags"}).has_pointers()
        assert not Relationships(additional_included={"owner": "users"}).has_pointers()

    def test_is_empty(self):
        assert Relationships().is_empty()
        assert not Relationships(additional_included={"owner": "users"}).is_empty()

    def test_nested_relationships_field(self):
        definition = EntityDefinition(
            name="posts",
            relationships={"belongs_to": {"author": "users"}},
            nested_relationships={"author": {"has_many": {"posts": "posts"}}},
        )
        assert definition.nested_relationships["author"].has_many == {"posts": "posts"}


class TestExpansionPolicy:
    def test_defaults(self):
        policy = ExpansionPolicy()
        assert not policy.expand
        assert policy.exclude == frozenset()
        assert not policy.expand_nested

    def test_exclude_normalized(self):
        assert ExpansionPolicy(exclude=[" orders ", "", "tags"]).exclude == {"orders", "tags"}
        assert ExpansionPolicy(exclude="orders").exclude == {"orders"}

    def test_excludes_relation_or_target(self):
        policy = ExpansionPolicy(exclude={"author"})
        assert policy.excludes("author", "users")
        assert policy.excludes("writer", make_test_definition("author"))
        assert not policy.excludes("editor", "users")

    def test_derive_keeps_only_applicable_exclusions(self):
        policy = ExpansionPolicy(expand=True, exclude={"orders", "tags"}, expand_nested=True)
        derived = policy.derive({"tags", "owner"})
        assert derived.expand
        assert derived.exclude == {"tags"}
        assert not derived.expand_nested
