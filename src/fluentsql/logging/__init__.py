"""Logging infrastructure for fluentsql.

This module provides structured logging with JSON output and context
tracking. Library code only ever calls ``get_logger``; ``setup_logging`` is
for applications that want fluentsql's JSON console output.
"""

from fluentsql.logging.filters import ContextFilter, clear_logging_context, set_logging_context
from fluentsql.logging.logger import CustomJsonFormatter, get_logger, setup_logging

__all__ = [
    "get_logger",
    "setup_logging",
    "CustomJsonFormatter",
    "ContextFilter",
    "set_logging_context",
    "clear_logging_context",
]
