"""Query sinks: observers for finalized queries."""

from fluentsql.sinks.query_sinks import CollectingQuerySink, LoggingQuerySink, QuerySink

__all__ = [
    "QuerySink",
    "LoggingQuerySink",
    "CollectingQuerySink",
]
