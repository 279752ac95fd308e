"""Unit tests for dialect resolution and adapter construction."""

import pytest

from fluentsql.adapters import (
    AdapterFactory,
    GenericAdapter,
    MySQLAdapter,
    PostgresAdapter,
    SQLiteAdapter,
    get_adapter,
)
from fluentsql.common.exceptions import ErrorCode, FluentSQLError
from fluentsql.constants import Dialect


class TestDialect:
    """Test Dialect lookup."""

    @pytest.mark.parametrize(
        "selector, expected",
        [
            ("postgres", Dialect.POSTGRES),
            ("PostgreSQL", Dialect.POSTGRES),
            ("pg", Dialect.POSTGRES),
            (" mysql ", Dialect.MYSQL),
            ("sqlite3", Dialect.SQLITE),
            ("SQLITE", Dialect.SQLITE),
            ("default", Dialect.GENERIC),
            ("generic", Dialect.GENERIC),
        ],
    )
    def test_names_and_aliases_resolve(self, selector, expected):
        assert Dialect(selector) is expected

    def test_unknown_name_raises_value_error(self):
        with pytest.raises(ValueError):
            Dialect("oracle")

    def test_non_string_raises_value_error(self):
        with pytest.raises(ValueError):
            Dialect(42)


class TestAdapterFactory:
    """Test AdapterFactory."""

    @pytest.mark.parametrize(
        "dialect, adapter_cls",
        [
            (Dialect.GENERIC, GenericAdapter),
            (Dialect.POSTGRES, PostgresAdapter),
            (Dialect.MYSQL, MySQLAdapter),
            (Dialect.SQLITE, SQLiteAdapter),
            ("postgresql", PostgresAdapter),
            ("sqlite3", SQLiteAdapter),
        ],
    )
    def test_create_returns_matching_adapter(self, dialect, adapter_cls):
        adapter = AdapterFactory.create(dialect)

        assert type(adapter) is adapter_cls
        assert adapter.placeholder_count == 0

    def test_create_passes_escaping(self):
        adapter = AdapterFactory.create("mysql", escaping=False)

        assert adapter.escaping is False
        assert adapter.escape("id") == "id"

    def test_create_passes_escape_char(self):
        adapter = AdapterFactory.create("generic", escape_char="`")

        assert adapter.escape("id") == "`id`"

    def test_each_call_returns_a_new_adapter(self):
        first = AdapterFactory.create("postgres")
        first.placeholder()

        second = AdapterFactory.create("postgres")

        assert first is not second
        assert second.placeholder() == "$1"

    def test_unknown_dialect_fails_fast(self):
        """No silent fallback to the generic adapter."""
        with pytest.raises(FluentSQLError) as exc_info:
            AdapterFactory.create("oracle")

        error = exc_info.value
        assert error.error_code == ErrorCode.DIALECT_NOT_SUPPORTED
        assert error.details["dialect"] == "oracle"
        assert error.details["supported"] == ["generic", "postgres", "mysql", "sqlite"]
        assert isinstance(error.cause, ValueError)
        assert "Unsupported dialect: 'oracle'" in str(error)

    def test_get_adapter_delegates_to_factory(self):
        adapter = get_adapter("pg", escaping=False)

        assert isinstance(adapter, PostgresAdapter)
        assert adapter.escaping is False
