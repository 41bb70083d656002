"""Tests for the PostgreSQL function renderer."""

import pytest
from shortguid.sql import render_drop_functions, render_postgres_functions


class TestRenderPostgresFunctions:
    """Tests for render_postgres_functions()."""

    def test_default_schema(self) -> None:
        """Test that functions are created in public by default."""
        sql = render_postgres_functions()

        assert "CREATE OR REPLACE FUNCTION public.encode_short_guid(value uuid)" in sql
        assert "CREATE OR REPLACE FUNCTION public.decode_short_guid(data varchar)" in sql

    def test_custom_schema(self) -> None:
        """Test rendering into another schema."""
        sql = render_postgres_functions("util")

        assert "util.encode_short_guid" in sql
        assert "util.decode_short_guid" in sql
        assert "public." not in sql

    def test_return_types(self) -> None:
        """Test the declared return types."""
        sql = render_postgres_functions()

        assert "RETURNS varchar(22)" in sql
        assert "RETURNS uuid" in sql

    def test_alphabet_substitution(self) -> None:
        """Test that both directions swap the URL-safe characters."""
        sql = render_postgres_functions()

        assert "translate(data, '-_', '+/') || '=='" in sql
        assert "'+/', '-_'" in sql
        assert "22\n" in sql

    def test_byte_order_swap_in_both_functions(self) -> None:
        """Test that both functions reorder bytes to GUID order."""
        sql = render_postgres_functions()

        assert sql.count("substr(h, 7, 2) || substr(h, 5, 2)") == 2

    def test_decode_checks_length(self) -> None:
        """Test that decode raises for byte counts other than 16."""
        sql = render_postgres_functions()

        assert "IF length(h) <> 32 THEN" in sql
        assert "RAISE EXCEPTION" in sql

    def test_invalid_schema(self) -> None:
        """Test that schema names are restricted to identifiers."""
        for schema in ["public; DROP TABLE users", "1abc", "", "a.b", "public\n"]:
            with pytest.raises(ValueError, match="Invalid schema name"):
                render_postgres_functions(schema)


class TestRenderDropFunctions:
    """Tests for render_drop_functions()."""

    def test_drop(self) -> None:
        """Test rendering DROP statements."""
        sql = render_drop_functions("util")

        assert "DROP FUNCTION IF EXISTS util.decode_short_guid(varchar);" in sql
        assert "DROP FUNCTION IF EXISTS util.encode_short_guid(uuid);" in sql

    def test_drop_invalid_schema(self) -> None:
        """Test that DROP rendering validates the schema."""
        with pytest.raises(ValueError):
            render_drop_functions("bad schema")
