"""fluentsql - fluent SQL statement builder.

Code is organized in layers:
- constants/, common/, logging/, telemetry/ and settings/ as the foundation
- query/ and adapters/ as the core: clause/binding accumulation and
  dialect-specific escaping and placeholders
- builder/ and sinks/ as the fluent clause layer and its observers

Example:
    >>> from fluentsql import Builder
    >>> b = Builder("postgres")
    >>> q = b.update("users").set({"name": "ada"}).where(b.eq("id", 1)).query()
    >>> q.as_tuple()
    ('UPDATE "users" SET "name" = $1 WHERE "id" = $2', ('ada', 1))
"""

from fluentsql.__version__ import __version__

from fluentsql.constants import Dialect, LogFlag
from fluentsql.common.exceptions import ErrorCode, FluentSQLError
from fluentsql.query import Query
from fluentsql.adapters import (
    AdapterFactory,
    BaseAdapter,
    GenericAdapter,
    MySQLAdapter,
    PostgresAdapter,
    SQLiteAdapter,
    get_adapter,
)
from fluentsql.sinks import CollectingQuerySink, LoggingQuerySink, QuerySink
from fluentsql.builder import Builder

__all__ = [
    "__version__",
    # Core
    "Query",
    "BaseAdapter",
    "GenericAdapter",
    "PostgresAdapter",
    "MySQLAdapter",
    "SQLiteAdapter",
    "AdapterFactory",
    "get_adapter",
    "Dialect",
    # Builder layer
    "Builder",
    "LogFlag",
    "QuerySink",
    "LoggingQuerySink",
    "CollectingQuerySink",
    # Exceptions
    "FluentSQLError",
    "ErrorCode",
]
