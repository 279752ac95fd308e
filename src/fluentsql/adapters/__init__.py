"""Dialect adapters for identifier escaping and placeholder generation.

Adapters only format identifiers and placeholders. They never hold clauses
or bindings; the builder layer feeds their output into a ``Query``.

Available Adapters:
    - GenericAdapter: ``?`` placeholders, configurable escape character
    - PostgresAdapter: ``$1, $2, ...`` numbered placeholders
    - MySQLAdapter: ``?`` placeholders, backtick escaping
    - SQLiteAdapter: ``?`` placeholders, double-quote escaping

Example:
    >>> from fluentsql.adapters import get_adapter
    >>> adapter = get_adapter("postgres")
    >>> adapter.escape("u.name"), adapter.placeholder()
    ('u."name"', '$1')
"""

from fluentsql.adapters.base import BaseAdapter
from fluentsql.adapters.factory import AdapterFactory, get_adapter
from fluentsql.adapters.generic import GenericAdapter, MySQLAdapter, SQLiteAdapter
from fluentsql.adapters.postgres import PostgresAdapter

__all__ = [
    "BaseAdapter",
    "AdapterFactory",
    "get_adapter",
    "GenericAdapter",
    "MySQLAdapter",
    "SQLiteAdapter",
    "PostgresAdapter",
]
