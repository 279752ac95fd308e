"""Settings for fluentsql, built on Pydantic Settings.

Configuration Sources (precedence order):
    1. Keyword arguments passed to ``FluentSQLSettings(...)``
    2. Environment variables with the ``FLUENTSQL_`` prefix
    3. A ``.env`` file in the working directory
    4. Default values in code

Quick Start:
    >>> from fluentsql.settings import get_settings
    >>> settings = get_settings()
    >>> settings.dialect
    <Dialect.GENERIC: 'generic'>
"""

from .main import FluentSQLSettings, get_settings, _reload_settings

__all__ = [
    "FluentSQLSettings",
    "get_settings",
    "_reload_settings",
]
