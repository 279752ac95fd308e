"""Ordered accumulator of SQL fragments and their bindings."""

from typing import Any, List, Tuple


class Query:
    """Accumulates clause fragments and bound values for one statement.

    Clauses render in insertion order joined by a single space. Bindings are
    kept in insertion order and must line up positionally with the
    placeholders in the rendered SQL: whoever adds a fragment containing
    placeholders also adds the matching values, left to right.

    The query never parses or validates what it is given.

    Example:
        >>> q = Query()
        >>> q.add_clause("SELECT id FROM users")
        >>> q.add_clause("WHERE id = ?")
        >>> q.add_binding(5)
        >>> q.sql()
        'SELECT id FROM users WHERE id = ?'
        >>> q.bindings()
        [5]
    """

    def __init__(self):
        self._clauses: List[str] = []
        self._bindings: List[Any] = []

    def add_clause(self, clause: str) -> None:
        """Append a fragment verbatim."""
        self._clauses.append(clause)

    def add_binding(self, *values: Any) -> None:
        """Append each value in argument order. No values is a no-op."""
        self._bindings.extend(values)

    def sql(self) -> str:
        """Render all clauses joined by a single space."""
        return " ".join(self._clauses)

    def bindings(self) -> List[Any]:
        """Get the bindings in insertion order."""
        return list(self._bindings)

    def clauses(self) -> List[str]:
        return list(self._clauses)

    def as_tuple(self) -> Tuple[str, Tuple[Any, ...]]:
        """Get both SQL and bindings, ready for ``cursor.execute(*q.as_tuple())``."""
        return self.sql(), tuple(self._bindings)

    def __repr__(self) -> str:
        return f"Query(sql={self.sql()!r}, bindings={self._bindings!r})"
