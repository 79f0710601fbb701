"""Tests for TypeResolver kind mapping."""

from __future__ import annotations

from decimal import Decimal

import pytest
from conftest import make_test_config

from jsonapi_schemagen.types import TypeResolver


class TestResolve:
    @pytest.mark.parametrize(
        ("kind", "expected"),
        [
            ("string", {"type": "string"}),
            ("text", {"type": "string"}),
            ("integer", {"type": "integer"}),
            ("boolean", {"type": "boolean"}),
            ("datetime", {"type": "string", "format": "date-time"}),
            ("date", {"type": "string", "format": "date"}),
            ("binary", {"type": "string", "format": "binary"}),
            ("jsonb", {"type": "object", "properties": {}}),
            ("falseclass", {"type": "boolean", "default": False}),
        ],
    )
    def test_builtin_kinds(self, kind: str, expected: dict):
        assert TypeResolver().resolve(kind) == expected

    def test_kind_is_case_insensitive(self):
        assert TypeResolver().resolve(" Integer ") == {"type": "integer"}

    def test_float_and_decimal_are_numbers_by_default(self):
        resolver = TypeResolver()
        assert resolver.resolve("float") == {"type": "number", "format": "float"}
        assert resolver.resolve("decimal") == {"type": "number", "format": "double"}

    def test_as_string_flags(self):
        resolver = TypeResolver(make_test_config(float_as_string=True, decimal_as_string=True))
        assert resolver.resolve("float") == {"type": "string", "format": "float"}
        assert resolver.resolve("decimal") == {"type": "string", "format": "double"}

    def test_custom_mapper_wins_over_builtin(self):
        config = make_test_config().with_type_mapper("string", {"type": "string", "maxLength": 255})
        assert TypeResolver(config).resolve("string") == {"type": "string", "maxLength": 255}

    def test_custom_mapper_for_new_kind(self):
        config = make_test_config(custom_type_mappers={"Money": {"type": "string", "format": "money"}})
        resolver = TypeResolver(config)
        assert resolver.resolve("money") == {"type": "string", "format": "money"}

    def test_unknown_kind(self):
        resolver = TypeResolver()
        assert resolver.resolve("geometry") is None
        assert resolver.resolve(None) is None

    def test_results_are_fresh_copies(self):
        resolver = TypeResolver()
        first = resolver.resolve("array")
        first["items"]["anyOf"].clear()
        assert len(resolver.resolve("array")["items"]["anyOf"]) == 6


class TestKindOfValue:
    @pytest.mark.parametrize(
        ("value", "kind"),
        [
            (True, "trueclass"),
            (False, "falseclass"),
            (3, "integer"),
            (1.5, "float"),
            (Decimal("9.99"), "decimal"),
            ("x", "string"),
            ({"a": 1}, "hash"),
            ([1, 2], "array"),
            (None, None),
        ],
    )
    def test_value_kinds(self, value, kind):
        assert TypeResolver.kind_of_value(value) == kind
