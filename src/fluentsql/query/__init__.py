"""Query accumulation and rendering."""

from fluentsql.query.query import Query

__all__ = [
    "Query",
]
