"""Constants shared across fluentsql layers."""

from fluentsql.constants.dialect import Dialect, LogFlag

__all__ = [
    "Dialect",
    "LogFlag",
]
