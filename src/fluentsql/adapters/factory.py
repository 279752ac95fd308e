"""Adapter Factory.

This module maps each ``Dialect`` to its adapter class. Selection is an
explicit lookup over the enumerated dialects: an unrecognized selector is a
construction error, never a silent fallback to the generic adapter.
"""

from typing import Dict, Optional, Type, Union

from fluentsql.adapters.base import BaseAdapter
from fluentsql.adapters.generic import GenericAdapter, MySQLAdapter, SQLiteAdapter
from fluentsql.adapters.postgres import PostgresAdapter
from fluentsql.common.exceptions import dialect_not_supported_error
from fluentsql.constants import Dialect
from fluentsql.logging import get_logger

logger = get_logger(__name__)


class AdapterFactory:
    """Factory for creating dialect-specific adapters.

    Example:
        >>> AdapterFactory.create("postgres")
        PostgresAdapter(dialect='postgres', escaping=True, placeholder_count=0)
        >>> AdapterFactory.create(Dialect.MYSQL, escaping=False).escape("id")
        'id'
    """

    _ADAPTERS: Dict[Dialect, Type[BaseAdapter]] = {
        Dialect.GENERIC: GenericAdapter,
        Dialect.POSTGRES: PostgresAdapter,
        Dialect.MYSQL: MySQLAdapter,
        Dialect.SQLITE: SQLiteAdapter,
    }

    @staticmethod
    def resolve(dialect: Union[Dialect, str]) -> Dialect:
        """Resolve a dialect selector to a ``Dialect`` member.

        Args:
            dialect: ``Dialect`` member or name/alias such as ``"postgresql"``.

        Returns:
            The matching ``Dialect``.

        Raises:
            FluentSQLError: If the selector names no supported dialect.
        """
        if isinstance(dialect, Dialect):
            return dialect
        try:
            return Dialect(dialect)
        except ValueError as exc:
            raise dialect_not_supported_error(
                dialect,
                supported=[d.value for d in Dialect],
                cause=exc,
            ) from exc

    @classmethod
    def create(
        cls,
        dialect: Union[Dialect, str],
        *,
        escaping: bool = True,
        escape_char: Optional[str] = None,
    ) -> BaseAdapter:
        """Create the adapter for a dialect.

        Args:
            dialect: ``Dialect`` member or name/alias.
            escaping: Initial escaping flag.
            escape_char: Optional override of the dialect quote character.

        Returns:
            A fresh adapter with a zero placeholder count.

        Raises:
            FluentSQLError: If the dialect is not supported.
        """
        resolved = cls.resolve(dialect)
        adapter_cls = cls._ADAPTERS.get(resolved)
        if adapter_cls is None:
            raise dialect_not_supported_error(
                resolved.value,
                supported=[d.value for d in cls._ADAPTERS],
            )

        adapter = adapter_cls(escaping=escaping, escape_char=escape_char)

        logger.debug(
            "Created adapter",
            extra={"dialect": resolved.value, "adapter": adapter_cls.__name__},
        )
        return adapter


def get_adapter(
    dialect: Union[Dialect, str],
    *,
    escaping: bool = True,
    escape_char: Optional[str] = None,
) -> BaseAdapter:
    """Get an adapter for ``dialect``; see ``AdapterFactory.create``."""
    return AdapterFactory.create(dialect, escaping=escaping, escape_char=escape_char)
