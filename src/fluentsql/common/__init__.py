"""Common exceptions for fluentsql.

Exception Design:
    Errors are categorized with ``ErrorCode`` values on a single
    ``FluentSQLError`` class instead of many specific exception classes.
    Helper functions build correctly coded errors with structured details.
"""

from fluentsql.common.exceptions import (
    FluentSQLError,
    ErrorCode,
    # Helper functions
    configuration_error,
    dialect_not_supported_error,
)

__all__ = [
    "FluentSQLError",
    "ErrorCode",
    "configuration_error",
    "dialect_not_supported_error",
]
