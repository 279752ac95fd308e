"""Observers notified with every finalized query.

A builder hands each query it finalizes to its sinks, in registration
order. Sinks are plain objects with an ``emit`` method, so tests and host
applications can capture output without touching shared logger state.
"""

import logging
from typing import List, Optional, Protocol, Tuple, runtime_checkable

from fluentsql.constants import Dialect, LogFlag
from fluentsql.logging import get_logger
from fluentsql.query import Query


@runtime_checkable
class QuerySink(Protocol):
    """Receives finalized queries from a builder."""

    def emit(self, query: Query, *, dialect: Dialect) -> None:
        ...


class LoggingQuerySink:
    """Logs finalized queries according to ``LogFlag`` values.

    ``LogFlag.QUERY`` logs the rendered SQL and ``LogFlag.BINDINGS`` logs
    the bindings, each as its own INFO record. ``LogFlag.DEFAULT`` logs
    nothing.

    Attributes:
        flags: Active log flags; may be changed between queries.
        logger: Logger records are written to.
    """

    def __init__(
        self,
        flags: LogFlag = LogFlag.DEFAULT,
        logger: Optional[logging.Logger] = None,
    ):
        self.flags = LogFlag(flags)
        self.logger = logger or get_logger("fluentsql.builder")

    def emit(self, query: Query, *, dialect: Dialect) -> None:
        if not self.flags:
            return

        extra = {"dialect": Dialect(dialect).value}
        if self.flags & LogFlag.QUERY:
            self.logger.info("%s", query.sql(), extra=extra)
        if self.flags & LogFlag.BINDINGS:
            self.logger.info("%s", query.bindings(), extra=extra)


class CollectingQuerySink:
    """Keeps every emitted query in memory.

    Example:
        >>> sink = CollectingQuerySink()
        >>> builder = Builder("sqlite", sinks=[sink])
        >>> query = builder.select("id").from_("users").query()
        >>> sink.last().sql()
        'SELECT id FROM "users"'
    """

    def __init__(self):
        self.records: List[Tuple[Dialect, Query]] = []

    def emit(self, query: Query, *, dialect: Dialect) -> None:
        self.records.append((dialect, query))

    @property
    def queries(self) -> List[Query]:
        return [query for _, query in self.records]

    def last(self) -> Optional[Query]:
        if not self.records:
            return None
        return self.records[-1][1]

    def clear(self) -> None:
        self.records.clear()
