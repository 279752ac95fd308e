"""Logging filters for context injection.

This module provides a filter that stamps every log record with the SDK
identity and any static context registered by the host application.
"""

from __future__ import annotations

import logging
from contextvars import ContextVar
from typing import Any, Dict, Optional

from fluentsql.__version__ import __version__

environment_var: ContextVar[Optional[str]] = ContextVar("environment", default=None)
extra_context_var: ContextVar[Optional[Dict[str, Any]]] = ContextVar("extra_context", default=None)


class ContextFilter(logging.Filter):
    """Logging filter that adds context variables to log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        """Add context variables to the log record.

        Args:
            record: Log record to enhance

        Returns:
            Always True (doesn't filter out any records)
        """
        setattr(record, "sdk_name", "fluentsql")
        setattr(record, "sdk_version", __version__)

        environment = environment_var.get()
        if environment is not None:
            setattr(record, "environment", environment)

        for key, value in (extra_context_var.get() or {}).items():
            if not hasattr(record, key):
                setattr(record, key, value)

        return True


def set_logging_context(
    environment: Optional[str] = None,
    extra: Optional[Dict[str, Any]] = None,
) -> None:
    """Set static context stamped on every record.

    Passing ``None`` clears the corresponding value.
    """
    environment_var.set(environment)
    extra_context_var.set(dict(extra) if extra else None)


def clear_logging_context() -> None:
    """Clear all logging context variables."""
    environment_var.set(None)
    extra_context_var.set(None)
