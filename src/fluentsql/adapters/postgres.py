"""Adapter for PostgreSQL numbered placeholders."""

from typing import Optional

from fluentsql.adapters.base import BaseAdapter
from fluentsql.constants import Dialect


class PostgresAdapter(BaseAdapter):
    """Numbered ``$1, $2, ...`` placeholders, double-quote escaping.

    The number embedded in each token is the running placeholder count, so
    the first placeholder after ``reset()`` is always ``$1``.

    Example:
        >>> adapter = PostgresAdapter()
        >>> adapter.placeholder(), adapter.placeholder()
        ('$1', '$2')
        >>> adapter.reset()
        >>> adapter.placeholder()
        '$1'
    """

    dialect = Dialect.POSTGRES
    placeholder_prefix = "$"

    def __init__(self, escaping: bool = True, escape_char: Optional[str] = None):
        super().__init__(escaping=escaping)
        if escape_char is not None:
            self.escape_char = escape_char

    def _format_placeholder(self, position: int) -> str:
        return f"{self.placeholder_prefix}{position}"
