from abc import ABC, abstractmethod
from typing import Any, Iterable, List

from fluentsql.constants import Dialect


class BaseAdapter(ABC):
    """Base interface for dialect adapters.

    An adapter formats the two dialect-dependent pieces of a statement:
    identifiers (wrapped in the dialect quote character when escaping is on)
    and parameter placeholders. It does NOT hold clauses or bindings; that
    is the Query's job, and the two never reference each other.

    Every ``placeholder()`` call reserves the next positional slot and
    advances ``placeholder_count`` by one, whatever the dialect. Numbered
    dialects embed the count in the token; static dialects ignore it.

    The counter is per-query state. The owning builder must call ``reset()``
    every time it starts a new query; nothing enforces this automatically.
    The escaping flag is per-builder and survives ``reset()``.

    Attributes:
        dialect: Dialect this adapter renders for.
        escape_char: Character wrapped around escaped identifiers.
        placeholder_count: Placeholders reserved since the last reset.
    """

    dialect: Dialect
    escape_char: str = '"'

    def __init__(self, escaping: bool = True):
        """Initialize adapter.

        Args:
            escaping: Whether ``escape`` wraps identifiers initially.
        """
        self._escaping = escaping
        self.placeholder_count = 0

    @abstractmethod
    def _format_placeholder(self, position: int) -> str:
        """Build the placeholder token for a 1-based position.

        Args:
            position: Slot reserved by the current ``placeholder()`` call

        Returns:
            Dialect-specific placeholder token
        """
        pass

    def escape(self, identifier: str) -> str:
        """Wrap an identifier in the dialect quote character.

        Qualified names keep their prefix verbatim and only the segment after
        the last dot is wrapped, so ``u.name`` becomes ``u."name"``. Nothing
        is validated: already-quoted input is wrapped again.

        Args:
            identifier: Column, table or qualified name

        Returns:
            Escaped identifier, or the identifier unchanged when escaping is off
        """
        if not self._escaping:
            return identifier

        prefix, dot, name = identifier.rpartition(".")
        return f"{prefix}{dot}{self.escape_char}{name}{self.escape_char}"

    def escape_all(self, identifiers: Iterable[str]) -> List[str]:
        """Escape each identifier, preserving order."""
        return [self.escape(identifier) for identifier in identifiers]

    def placeholder(self) -> str:
        """Reserve the next positional slot and return its token."""
        self.placeholder_count += 1
        return self._format_placeholder(self.placeholder_count)

    def placeholders(self, *values: Any) -> List[str]:
        """Reserve one slot per value, in order, and return their tokens."""
        return [self.placeholder() for _ in values]

    def set_escaping(self, escaping: bool) -> None:
        self._escaping = escaping

    @property
    def escaping(self) -> bool:
        return self._escaping

    def reset(self) -> None:
        """Clear per-query state. The escaping flag is kept."""
        self.placeholder_count = 0

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(dialect={self.dialect.value!r}, "
            f"escaping={self._escaping}, placeholder_count={self.placeholder_count})"
        )
