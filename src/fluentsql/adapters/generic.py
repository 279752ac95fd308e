"""Adapters for dialects with a static placeholder token."""

from typing import Optional

from fluentsql.adapters.base import BaseAdapter
from fluentsql.constants import Dialect


class GenericAdapter(BaseAdapter):
    """Static ``?`` placeholders with a configurable escape character.

    Example:
        >>> adapter = GenericAdapter(escape_char="`")
        >>> adapter.placeholders(10, 20)
        ['?', '?']
    """

    dialect = Dialect.GENERIC
    placeholder_token = "?"

    def __init__(self, escaping: bool = True, escape_char: Optional[str] = None):
        super().__init__(escaping=escaping)
        if escape_char is not None:
            self.escape_char = escape_char

    def _format_placeholder(self, position: int) -> str:
        return self.placeholder_token


class MySQLAdapter(GenericAdapter):
    """MySQL: ``?`` placeholders, backtick escaping."""

    dialect = Dialect.MYSQL
    escape_char = "`"


class SQLiteAdapter(GenericAdapter):
    """SQLite: ``?`` placeholders, double-quote escaping."""

    dialect = Dialect.SQLITE
