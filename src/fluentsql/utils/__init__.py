"""Utility helpers for fluentsql."""

from fluentsql.utils.decorators import traced

__all__ = [
    "traced",
]
