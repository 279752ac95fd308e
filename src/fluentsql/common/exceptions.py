from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(Enum):
    """Standard error codes for fluentsql.

    Errors are categorized by code rather than by a deep exception class
    hierarchy. Each category has its own number range.

    Attributes:
        CONFIG_*: Configuration-related errors (1xxx)
        DIALECT_*: Dialect selection errors (3xxx)
    """
    # Configuration errors (1xxx)
    CONFIG_ERROR = "CONFIG_001"
    CONFIG_INVALID = "CONFIG_002"

    # Dialect errors (3xxx)
    DIALECT_NOT_SUPPORTED = "DIALECT_001"


class FluentSQLError(Exception):
    """Base exception for all fluentsql errors.

    The builder core is a pure accumulator, so this is only raised for
    construction-time misconfiguration such as an unknown dialect.

    Attributes:
        message: Error message
        error_code: Error code from ErrorCode enum
        details: Additional error details
        cause: Optional underlying exception
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.CONFIG_ERROR,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.cause = cause

        # Lazy import to avoid circular dependency
        from fluentsql.logging import get_logger
        logger = get_logger(__name__)
        logger.error(
            message,
            extra={"error_code": error_code.value, "details": self.details},
            exc_info=cause is not None,
        )

    def __str__(self) -> str:
        msg = f"[{self.error_code.value}] {self.message}"
        if self.cause:
            msg = f"{msg} (caused by: {type(self.cause).__name__}: {str(self.cause)})"
        return msg

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for serialization."""
        return {
            "type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code.value,
            "error_name": self.error_code.name,
            "details": self.details,
        }


def configuration_error(
    message: str,
    config_key: Optional[str] = None,
    **kwargs
) -> FluentSQLError:
    """Create a configuration error.

    Args:
        message: Error message
        config_key: Configuration key that caused the error
        **kwargs: Additional arguments for FluentSQLError

    Returns:
        FluentSQLError with CONFIG_ERROR code unless ``error_code`` is given
    """
    details = dict(kwargs.pop("details", None) or {})
    if config_key:
        details["config_key"] = config_key
    kwargs.setdefault("error_code", ErrorCode.CONFIG_ERROR)

    return FluentSQLError(
        message=message,
        details=details,
        **kwargs
    )


def dialect_not_supported_error(
    dialect: Any,
    supported: Optional[list] = None,
    **kwargs
) -> FluentSQLError:
    """Create an error for an unrecognized dialect selector.

    Args:
        dialect: The selector that failed to resolve
        supported: Dialect names that would have been accepted
        **kwargs: Additional arguments for FluentSQLError

    Returns:
        FluentSQLError with DIALECT_NOT_SUPPORTED code
    """
    details = dict(kwargs.pop("details", None) or {})
    details["dialect"] = str(dialect)
    message = f"Unsupported dialect: {dialect!r}."
    if supported:
        details["supported"] = list(supported)
        message = f"{message} Supported dialects: {', '.join(supported)}"

    return FluentSQLError(
        message=message,
        error_code=ErrorCode.DIALECT_NOT_SUPPORTED,
        details=details,
        **kwargs
    )
