"""Unit tests for dialect adapters."""

import pytest

from fluentsql.adapters import (
    BaseAdapter,
    GenericAdapter,
    MySQLAdapter,
    PostgresAdapter,
    SQLiteAdapter,
)
from fluentsql.constants import Dialect


class TestEscaping:
    """Test identifier escaping."""

    @pytest.fixture
    def adapter(self):
        return GenericAdapter()

    def test_escape_wraps_identifier(self, adapter):
        assert adapter.escape("users") == '"users"'

    def test_escape_disabled_returns_identifier(self, adapter):
        adapter.set_escaping(False)

        assert adapter.escape("users") == "users"

    def test_qualified_identifier_escapes_only_column(self, adapter):
        """The alias and dot are preserved, only the column is wrapped."""
        adapter.set_escaping(True)
        assert adapter.escape("t.col") == 't."col"'

        adapter.set_escaping(False)
        assert adapter.escape("t.col") == "t.col"

    def test_multi_part_identifier_escapes_last_segment(self, adapter):
        assert adapter.escape("db.t.col") == 'db.t."col"'

    def test_already_escaped_identifier_is_wrapped_again(self, adapter):
        """No detection of quoted input; escape is a pure wrap."""
        assert adapter.escape('"users"') == '""users""'

    def test_escape_all_preserves_order_and_length(self, adapter):
        assert adapter.escape_all(["a", "b"]) == ['"a"', '"b"']
        assert adapter.escape_all([]) == []

    def test_escape_all_accepts_any_iterable(self, adapter):
        assert adapter.escape_all(k for k in ("x", "y.z")) == ['"x"', 'y."z"']

    def test_toggle_applies_to_later_calls_only(self, adapter):
        before = adapter.escape("id")
        adapter.set_escaping(False)
        after = adapter.escape("id")

        assert before == '"id"'
        assert after == "id"
        assert adapter.escaping is False

    def test_escaping_defaults_on(self):
        assert GenericAdapter().escaping is True
        assert GenericAdapter(escaping=False).escaping is False

    def test_mysql_uses_backticks(self):
        adapter = MySQLAdapter()

        assert adapter.escape("order") == "`order`"
        assert adapter.escape("o.total") == "o.`total`"

    def test_sqlite_uses_double_quotes(self):
        assert SQLiteAdapter().escape("name") == '"name"'

    def test_generic_escape_char_is_configurable(self):
        adapter = GenericAdapter(escape_char="`")

        assert adapter.escape("name") == "`name`"

    def test_postgres_escape_char_is_configurable(self):
        adapter = PostgresAdapter(escape_char="'")

        assert adapter.escape("name") == "'name'"


class TestStaticPlaceholders:
    """Test adapters with a fixed placeholder token."""

    @pytest.mark.parametrize("adapter_cls", [GenericAdapter, MySQLAdapter, SQLiteAdapter])
    def test_placeholder_is_question_mark(self, adapter_cls):
        adapter = adapter_cls()

        assert adapter.placeholder() == "?"
        assert adapter.placeholder() == "?"

    def test_placeholders_one_per_value(self):
        adapter = GenericAdapter()

        assert adapter.placeholders(10, 20, 30) == ["?", "?", "?"]

    def test_placeholders_without_values(self):
        adapter = GenericAdapter()

        assert adapter.placeholders() == []
        assert adapter.placeholder_count == 0

    def test_each_call_reserves_a_slot(self):
        """Static dialects still track reserved positions."""
        adapter = SQLiteAdapter()
        adapter.placeholder()
        adapter.placeholders("a", "b")

        assert adapter.placeholder_count == 3

        adapter.reset()
        assert adapter.placeholder_count == 0


class TestNumberedPlaceholders:
    """Test the PostgreSQL numbered placeholder state machine."""

    def test_fresh_adapter_starts_at_one(self):
        adapter = PostgresAdapter()

        assert adapter.placeholder() == "$1"
        assert adapter.placeholder() == "$2"

    def test_reset_restarts_numbering(self):
        adapter = PostgresAdapter()
        adapter.placeholder()
        adapter.placeholder()

        adapter.reset()

        assert adapter.placeholder() == "$1"

    def test_reset_after_many_placeholders_matches_fresh_instance(self):
        adapter = PostgresAdapter()
        for _ in range(25):
            adapter.placeholder()

        adapter.reset()

        assert adapter.placeholder() == PostgresAdapter().placeholder()

    def test_placeholders_are_positional(self):
        adapter = PostgresAdapter()
        adapter.placeholder()

        assert adapter.placeholders("a", "b", "c") == ["$2", "$3", "$4"]
        assert adapter.placeholder_count == 4

    def test_reset_keeps_escaping_flag(self):
        adapter = PostgresAdapter()
        adapter.set_escaping(False)
        adapter.placeholder()

        adapter.reset()

        assert adapter.escaping is False
        assert adapter.escape("id") == "id"


class TestAdapterInterface:
    """Test the shared adapter contract."""

    @pytest.mark.parametrize(
        "adapter_cls, dialect",
        [
            (GenericAdapter, Dialect.GENERIC),
            (PostgresAdapter, Dialect.POSTGRES),
            (MySQLAdapter, Dialect.MYSQL),
            (SQLiteAdapter, Dialect.SQLITE),
        ],
    )
    def test_dialect_attribute(self, adapter_cls, dialect):
        adapter = adapter_cls()

        assert isinstance(adapter, BaseAdapter)
        assert adapter.dialect is dialect

    def test_base_adapter_is_abstract(self):
        with pytest.raises(TypeError):
            BaseAdapter()

    def test_custom_adapter_only_formats_placeholders(self):
        """A subclass provides the token format; counting is inherited."""

        class NamedAdapter(BaseAdapter):
            dialect = Dialect.GENERIC

            def _format_placeholder(self, position):
                return f":p{position}"

        adapter = NamedAdapter()

        assert adapter.placeholders(1, 2) == [":p1", ":p2"]
        adapter.reset()
        assert adapter.placeholder() == ":p1"

    def test_repr_shows_state(self):
        adapter = PostgresAdapter()
        adapter.placeholder()

        assert repr(adapter) == "PostgresAdapter(dialect='postgres', escaping=True, placeholder_count=1)"
