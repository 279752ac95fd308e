import logging
from typing import Any, Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from fluentsql.common.exceptions import ErrorCode, configuration_error
from fluentsql.constants import Dialect, LogFlag


class FluentSQLSettings(BaseSettings):
    """Builder defaults loaded from the environment.

    Environment variables use the ``FLUENTSQL_`` prefix, e.g.
    ``FLUENTSQL_DIALECT=postgres`` or ``FLUENTSQL_LOG_FLAGS=3``. A ``.env``
    file in the working directory is read as well.
    """

    model_config = SettingsConfigDict(
        env_prefix="FLUENTSQL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    dialect: Dialect = Field(
        default=Dialect.GENERIC,
        description="SQL dialect used to pick the adapter (generic, postgres, mysql, sqlite)"
    )
    escaping: bool = Field(
        default=True,
        description="Whether identifiers are wrapped in the dialect quote character"
    )
    log_flags: int = Field(
        default=int(LogFlag.DEFAULT),
        ge=0,
        le=int(LogFlag.QUERY | LogFlag.BINDINGS),
        description="Bitmask of LogFlag values: 1 logs SQL, 2 logs bindings, 3 logs both"
    )
    log_level: str = Field(
        default="INFO",
        description="Level passed to setup_logging for the fluentsql logger"
    )

    @field_validator("dialect", mode="before")
    @classmethod
    def validate_dialect(cls, v: Any) -> Dialect:
        """Resolve dialect names and aliases through ``Dialect``."""
        if isinstance(v, Dialect):
            return v
        try:
            return Dialect(v)
        except ValueError:
            supported = ", ".join(d.value for d in Dialect)
            raise ValueError(
                f"Unsupported dialect '{v}'. Supported dialects: {supported}"
            )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Invalid log level '{v}'")
        return level

    @property
    def log_flag(self) -> LogFlag:
        """``log_flags`` as a ``LogFlag`` value."""
        return LogFlag(self.log_flags)


_settings: Optional[FluentSQLSettings] = None


def get_settings(force_reload: bool = False) -> FluentSQLSettings:
    """Get the singleton settings instance.

    Args:
        force_reload: If True, creates a new instance even if one already
                     exists. Useful when environment variables have changed.

    Returns:
        FluentSQLSettings: The singleton settings instance

    Raises:
        FluentSQLError: If the environment holds an invalid value.

    Note:
        This function is thread-safe for reading but not for the initial
        creation.
    """
    global _settings

    if _settings is None or force_reload:
        try:
            _settings = FluentSQLSettings()
        except ValidationError as exc:
            first = exc.errors()[0]
            field = str(first["loc"][0]) if first.get("loc") else None
            raise configuration_error(
                f"Invalid fluentsql settings: {first['msg']}",
                config_key=f"FLUENTSQL_{field.upper()}" if field else None,
                error_code=ErrorCode.CONFIG_INVALID,
                cause=exc,
            ) from exc

    return _settings


def _reload_settings() -> FluentSQLSettings:
    """Force reload of settings.

    This is primarily for testing purposes where you need to reset
    the singleton instance.
    """
    global _settings
    _settings = None
    return get_settings(force_reload=True)
