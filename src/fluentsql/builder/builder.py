import logging
from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Mapping, Optional, Sequence, Union

from fluentsql.adapters import AdapterFactory, BaseAdapter
from fluentsql.constants import Dialect, LogFlag
from fluentsql.query import Query
from fluentsql.sinks import LoggingQuerySink, QuerySink
from fluentsql.utils import traced

if TYPE_CHECKING:
    from fluentsql.settings import FluentSQLSettings


def _query_span_attributes(builder: "Builder") -> Dict[str, Any]:
    return {
        "fluentsql.dialect": builder.dialect.value,
        "fluentsql.clause_count": len(builder._query.clauses()),
        "fluentsql.binding_count": len(builder._query.bindings()),
    }


class Builder:
    """Fluent SQL statement builder.

    A builder owns one active ``Query`` and one dialect adapter. Clause
    methods escape identifiers and reserve placeholders through the adapter,
    append the fragment to the query, and append the values for those
    placeholders in the same left-to-right order. ``query()`` hands the
    finished query back and starts a fresh one.

    Expression helpers (``eq``, ``in_``, ...) return strings but bind their
    values into the active query immediately, so build them in the order
    their placeholders appear in the final statement.

    A builder is not safe for concurrent use. Give each concurrent caller
    its own instance.

    Example:
        >>> b = Builder("postgres")
        >>> q = (
        ...     b.select("id", "name")
        ...     .from_("users u")
        ...     .where(b.and_(b.eq("u.id", 5), b.gt("u.age", 18)))
        ...     .query()
        ... )
        >>> q.sql()
        'SELECT id, name FROM "users" u WHERE (u."id" = $1 AND u."age" > $2)'
        >>> q.bindings()
        [5, 18]
    """

    def __init__(
        self,
        dialect: Union[Dialect, str],
        *,
        escaping: bool = True,
        log_flags: LogFlag = LogFlag.DEFAULT,
        sinks: Optional[Iterable[QuerySink]] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize builder.

        Args:
            dialect: Dialect member or name; selects the adapter.
            escaping: Whether identifiers are escaped.
            log_flags: What the built-in logging sink reports per query.
            sinks: Extra observers notified with every finalized query.
            logger: Logger for the built-in logging sink.

        Raises:
            FluentSQLError: If the dialect is not supported.
        """
        self._adapter = AdapterFactory.create(dialect, escaping=escaping)
        self._query = Query()
        self._logging_sink = LoggingQuerySink(log_flags, logger)
        self._sinks: List[QuerySink] = [self._logging_sink]
        self._sinks.extend(sinks or [])

    @classmethod
    def from_settings(cls, settings: Optional["FluentSQLSettings"] = None, **kwargs: Any) -> "Builder":
        """Create a builder configured from ``FluentSQLSettings``.

        Args:
            settings: Settings to use; defaults to ``get_settings()``.
            **kwargs: Passed through to the constructor (e.g. ``sinks``).
        """
        if settings is None:
            from fluentsql.settings import get_settings
            settings = get_settings()

        return cls(
            settings.dialect,
            escaping=settings.escaping,
            log_flags=settings.log_flag,
            **kwargs,
        )

    @property
    def adapter(self) -> BaseAdapter:
        return self._adapter

    @property
    def dialect(self) -> Dialect:
        return self._adapter.dialect

    def set_escaping(self, escaping: bool) -> None:
        self._adapter.set_escaping(escaping)

    @property
    def escaping(self) -> bool:
        return self._adapter.escaping

    def set_log_flags(self, log_flags: LogFlag) -> None:
        self._logging_sink.flags = LogFlag(log_flags)

    @property
    def log_flags(self) -> LogFlag:
        return self._logging_sink.flags

    def add_sink(self, sink: QuerySink) -> None:
        self._sinks.append(sink)

    def reset(self) -> None:
        """Discard the active query and restart placeholder numbering."""
        self._query = Query()
        self._adapter.reset()

    @traced("fluentsql.builder.query", attribute_getter=_query_span_attributes)
    def query(self) -> Query:
        """Finalize the active query.

        The builder is reset before sinks run, so a sink that reuses the
        builder starts from a clean state.

        Returns:
            The finished query with its SQL and bindings.
        """
        query = self._query
        self.reset()
        for sink in self._sinks:
            sink.emit(query, dialect=self.dialect)
        return query

    def _table(self, table: str) -> str:
        # "name alias": only the name is escaped
        name, space, alias = table.partition(" ")
        return f"{self._adapter.escape(name)}{space}{alias}"

    # statements

    def insert(self, table: str) -> "Builder":
        """Generate ``INSERT INTO table``."""
        self._query.add_clause(f"INSERT INTO {self._adapter.escape(table)}")
        return self

    def values(self, values: Mapping[str, Any]) -> "Builder":
        """Generate ``(cols) VALUES (placeholders)`` and bind each value.

        Columns, placeholders and bindings follow the mapping's order.
        """
        keys = self._adapter.escape_all(values.keys())
        self._query.add_binding(*values.values())
        self._query.add_clause(f"({', '.join(keys)})")

        placeholders = self._adapter.placeholders(*values.values())
        self._query.add_clause(f"VALUES ({', '.join(placeholders)})")
        return self

    def returning(self, *columns: str) -> "Builder":
        """Generate a RETURNING clause (postgres and sqlite only)."""
        self._query.add_clause(f"RETURNING {', '.join(self._adapter.escape_all(columns))}")
        return self

    def update(self, table: str) -> "Builder":
        """Generate ``UPDATE table``."""
        self._query.add_clause(f"UPDATE {self._adapter.escape(table)}")
        return self

    def set(self, values: Mapping[str, Any]) -> "Builder":
        """Generate ``SET col = placeholder, ...`` and bind each value.

        Qualified keys (``alias.column``) keep the alias verbatim and escape
        the column.
        """
        updates = []
        for key, value in values.items():
            alias, dot, column = key.partition(".")
            if dot:
                key = f"{alias}.{self._adapter.escape(column)}"
            else:
                key = self._adapter.escape(key)
            updates.append(f"{key} = {self._adapter.placeholder()}")
            self._query.add_binding(value)

        self._query.add_clause(f"SET {', '.join(updates)}")
        return self

    def delete(self, table: str) -> "Builder":
        """Generate ``DELETE FROM table``."""
        self._query.add_clause(f"DELETE FROM {self._adapter.escape(table)}")
        return self

    def select(self, *columns: str) -> "Builder":
        """Generate ``SELECT c1, c2``; columns are used verbatim."""
        self._query.add_clause(f"SELECT {', '.join(columns)}")
        return self

    def from_(self, *tables: str) -> "Builder":
        """Generate ``FROM t1, t2 alias``; only table names are escaped."""
        self._query.add_clause(f"FROM {', '.join(self._table(t) for t in tables)}")
        return self

    def _join(self, kind: str, table: str, expressions: Sequence[str]) -> "Builder":
        """Generate ``<kind> JOIN table ON expressions`` with expressions space-joined."""
        self._query.add_clause(f"{kind} JOIN {self._table(table)} ON {' '.join(expressions)}")
        return self

    def inner_join(self, table: str, *expressions: str) -> "Builder":
        """Generate ``INNER JOIN table ON expressions``."""
        return self._join("INNER", table, expressions)

    def left_outer_join(self, table: str, *expressions: str) -> "Builder":
        """Generate ``LEFT OUTER JOIN table ON expressions``."""
        return self._join("LEFT OUTER", table, expressions)

    def right_outer_join(self, table: str, *expressions: str) -> "Builder":
        """Generate ``RIGHT OUTER JOIN table ON expressions``."""
        return self._join("RIGHT OUTER", table, expressions)

    def full_outer_join(self, table: str, *expressions: str) -> "Builder":
        """Generate ``FULL OUTER JOIN table ON expressions``."""
        return self._join("FULL OUTER", table, expressions)

    def cross_join(self, table: str) -> "Builder":
        """Generate ``CROSS JOIN table``."""
        self._query.add_clause(f"CROSS JOIN {self._table(table)}")
        return self

    def where(self, expression: str, *bindings: Any) -> "Builder":
        """Generate ``WHERE expression``.

        ``bindings`` are for placeholders written by hand into
        ``expression``; values bound by expression helpers are already on
        the query. An empty expression adds nothing.
        """
        if not expression:
            return self
        self._query.add_clause(f"WHERE {expression}")
        self._query.add_binding(*bindings)
        return self

    def order_by(self, *expressions: str) -> "Builder":
        """Generate ``ORDER BY e1, e2``."""
        self._query.add_clause(f"ORDER BY {', '.join(expressions)}")
        return self

    def group_by(self, *columns: str) -> "Builder":
        """Generate ``GROUP BY c1, c2``."""
        self._query.add_clause(f"GROUP BY {', '.join(columns)}")
        return self

    def having(self, *expressions: str) -> "Builder":
        """Generate ``HAVING e1, e2``."""
        self._query.add_clause(f"HAVING {', '.join(expressions)}")
        return self

    def limit(self, offset: int, count: int) -> "Builder":
        """Generate ``LIMIT count OFFSET offset``.

        Args:
            offset: Rows to skip
            count: Maximum rows to return

        Returns:
            The builder, for chaining
        """
        self._query.add_clause(f"LIMIT {count:d} OFFSET {offset:d}")
        return self

    # aggregates

    def avg(self, column: str) -> str:
        """Return ``AVG(column)``."""
        return f"AVG({self._adapter.escape(column)})"

    def count(self, column: str) -> str:
        """Return ``COUNT(column)``."""
        return f"COUNT({self._adapter.escape(column)})"

    def sum(self, column: str) -> str:
        """Return ``SUM(column)``."""
        return f"SUM({self._adapter.escape(column)})"

    def min(self, column: str) -> str:
        """Return ``MIN(column)``."""
        return f"MIN({self._adapter.escape(column)})"

    def max(self, column: str) -> str:
        """Return ``MAX(column)``."""
        return f"MAX({self._adapter.escape(column)})"

    # expressions

    def _compare(self, key: str, operator: str, value: Any) -> str:
        self._query.add_binding(value)
        return f"{self._adapter.escape(key)} {operator} {self._adapter.placeholder()}"

    def eq(self, key: str, value: Any) -> str:
        """Return ``column = placeholder`` and bind ``value``."""
        return self._compare(key, "=", value)

    def not_eq(self, key: str, value: Any) -> str:
        """Return ``column != placeholder`` and bind ``value``."""
        return self._compare(key, "!=", value)

    def gt(self, key: str, value: Any) -> str:
        """Return ``column > placeholder`` and bind ``value``."""
        return self._compare(key, ">", value)

    def gte(self, key: str, value: Any) -> str:
        """Return ``column >= placeholder`` and bind ``value``."""
        return self._compare(key, ">=", value)

    def lt(self, key: str, value: Any) -> str:
        """Return ``column < placeholder`` and bind ``value``."""
        return self._compare(key, "<", value)

    def lte(self, key: str, value: Any) -> str:
        """Return ``column <= placeholder`` and bind ``value``."""
        return self._compare(key, "<=", value)

    def in_(self, key: str, *values: Any) -> str:
        """Return ``column IN (p1,p2)`` and bind each value."""
        self._query.add_binding(*values)
        return f"{self._adapter.escape(key)} IN ({','.join(self._adapter.placeholders(*values))})"

    def not_in(self, key: str, *values: Any) -> str:
        """Return ``column NOT IN (p1,p2)`` and bind each value."""
        self._query.add_binding(*values)
        return f"{self._adapter.escape(key)} NOT IN ({','.join(self._adapter.placeholders(*values))})"

    def and_(self, *expressions: str) -> str:
        """Return ``(e1 AND e2)``, or an empty string for no expressions."""
        if not expressions:
            return ""
        return f"({' AND '.join(expressions)})"

    def or_(self, *expressions: str) -> str:
        """Return ``e1 OR e2``."""
        return " OR ".join(expressions)

    # schema

    def create_table(
        self,
        table: str,
        fields: Sequence[str],
        constraints: Sequence[str] = (),
    ) -> "Builder":
        """Generate a CREATE TABLE statement.

        Each field and constraint becomes its own tab-indented clause;
        every entry but the last is followed by a comma.

        Example:
            >>> b = Builder("sqlite")
            >>> b.create_table("users", ["id INT", "name TEXT"], ["PRIMARY KEY (id)"]).query().sql()
            'CREATE TABLE "users"( \\tid INT, \\tname TEXT, \\tPRIMARY KEY (id) )'
        """
        self._query.add_clause(f"CREATE TABLE {self._adapter.escape(table)}(")

        entries = list(fields) + list(constraints)
        for index, entry in enumerate(entries):
            separator = "," if index < len(entries) - 1 else ""
            self._query.add_clause(f"\t{entry}{separator}")

        self._query.add_clause(")")
        return self

    def alter_table(self, table: str) -> "Builder":
        """Generate ``ALTER TABLE table``; the name is not escaped."""
        self._query.add_clause(f"ALTER TABLE {table}")
        return self

    def drop_table(self, table: str) -> "Builder":
        """Generate ``DROP TABLE table``."""
        self._query.add_clause(f"DROP TABLE {self._adapter.escape(table)}")
        return self

    def add(self, column: str, column_type: str) -> "Builder":
        """Generate ``ADD column type``."""
        self._query.add_clause(f"ADD {column} {column_type}")
        return self

    def drop(self, column: str) -> "Builder":
        """Generate ``DROP column``."""
        self._query.add_clause(f"DROP {column}")
        return self

    def create_index(self, index: str, table: str, *columns: str) -> "Builder":
        """Generate ``CREATE INDEX index ON table(c1,c2)``; only columns are escaped."""
        self._query.add_clause(
            f"CREATE INDEX {index} ON {table}({','.join(self._adapter.escape_all(columns))})"
        )
        return self
