"""Fluent clause construction on top of Query and the dialect adapters."""

from fluentsql.builder.builder import Builder

__all__ = [
    "Builder",
]
