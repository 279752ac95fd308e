"""Dialect and logging constants.

This module contains the enumerations that select adapter behaviour and
control what the builder reports about finalized queries. They live in the
bottom layer so adapters, the builder and settings can all import them
without circular dependencies.
"""

from enum import Enum, IntFlag
from typing import Optional


class Dialect(str, Enum):
    """SQL dialect a builder renders for.

    Each member maps to exactly one adapter implementation. Lookup by value
    is case-insensitive and accepts a few common driver aliases, so
    ``Dialect("PostgreSQL")`` and ``Dialect("sqlite3")`` both resolve.

    Values:
        GENERIC: Static ``?`` placeholders, double-quote escaping.
        POSTGRES: Numbered ``$1, $2, ...`` placeholders, double-quote escaping.
        MYSQL: Static ``?`` placeholders, backtick escaping.
        SQLITE: Static ``?`` placeholders, double-quote escaping.

    Example:
        >>> Dialect("postgresql")
        <Dialect.POSTGRES: 'postgres'>
        >>> Dialect("oracle")
        Traceback (most recent call last):
        ...
        ValueError: 'oracle' is not a valid Dialect
    """

    GENERIC = "generic"
    POSTGRES = "postgres"
    MYSQL = "mysql"
    SQLITE = "sqlite"

    @classmethod
    def _missing_(cls, value: object) -> Optional["Dialect"]:
        if not isinstance(value, str):
            return None
        normalized = value.strip().lower()
        normalized = _DIALECT_ALIASES.get(normalized, normalized)
        for member in cls:
            if member.value == normalized:
                return member
        return None


_DIALECT_ALIASES = {
    "default": "generic",
    "postgresql": "postgres",
    "pg": "postgres",
    "sqlite3": "sqlite",
}


class LogFlag(IntFlag):
    """What the built-in logging sink reports for each finalized query.

    Flags combine with ``|``; ``LogFlag.QUERY | LogFlag.BINDINGS`` logs both
    the rendered SQL and its bindings.
    """

    DEFAULT = 0
    QUERY = 1
    BINDINGS = 2
