"""Settings for rolegraph resolvers.

This module provides a Pydantic-validated configuration model shared by
the resolver, the query engine and the logging setup.

Settings come through RoleGraphConfig. load_config_from_env() is the
only place that reads the process environment.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, ValidationError, field_validator

from .exceptions import ConfigurationError


class LogLevel(str, Enum):
    """Standard log levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class RoleGraphConfig(BaseModel):
    """Configuration for a RoleResolver and the managers it hands out.

    Environment variables (see :func:`load_config_from_env`):
        ROLEGRAPH_LOG_LEVEL          — DEBUG | INFO | WARNING | ERROR | CRITICAL
        ROLEGRAPH_LOG_JSON           — emit JSON log lines
        ROLEGRAPH_VALIDATE_TABLES    — validate role tables at construction
        ROLEGRAPH_STRICT_MAX_ROLE    — reject incomparable roles in get_max_role
    """

    log_level: LogLevel = Field(
        default=LogLevel.INFO,
        description="Logging level",
    )
    log_json: bool = Field(
        default=False,
        description="Use JSON log format (default: plain text)",
    )
    validate_tables: bool = Field(
        default=True,
        description="Validate role hierarchy and permission tables when a resolver is built",
    )
    strict_max_role: bool = Field(
        default=False,
        description=(
            "Raise IncomparableRolesError from get_max_role() when two held roles "
            "are unrelated. Off = keep the first-listed role of an unrelated pair."
        ),
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str | LogLevel) -> LogLevel:
        """Convert string to LogLevel enum."""
        if isinstance(v, LogLevel):
            return v
        if isinstance(v, str):
            try:
                return LogLevel[v.upper()]
            except KeyError:
                raise ValueError(f"Invalid log level: {v}. Must be one of {[e.value for e in LogLevel]}")
        raise ValueError(f"Log level must be string or LogLevel enum, got {type(v)}")

    model_config = {
        "use_enum_values": True,
        "extra": "forbid",
        "frozen": True,
    }


_TRUTHY = ("true", "1", "yes", "on")
_FALSY = ("false", "0", "no", "off", "")


def _env_flag(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    raise ConfigurationError(f"{name} must be a boolean flag, got {raw!r}", variable=name)


def load_config_from_env() -> RoleGraphConfig:
    """Load configuration from environment variables.

    Environment variables:
    - ROLEGRAPH_LOG_LEVEL: Logging level (default: INFO)
    - ROLEGRAPH_LOG_JSON: Use JSON log format (default: false)
    - ROLEGRAPH_VALIDATE_TABLES: Validate role tables (default: true)
    - ROLEGRAPH_STRICT_MAX_ROLE: Strict get_max_role (default: false)

    Returns:
        RoleGraphConfig with values from environment or defaults.

    Raises:
        ConfigurationError: If a variable holds an unusable value.
    """
    import os

    try:
        return RoleGraphConfig(
            log_level=os.getenv("ROLEGRAPH_LOG_LEVEL", "INFO"),
            log_json=_env_flag("ROLEGRAPH_LOG_JSON", os.getenv("ROLEGRAPH_LOG_JSON", "false")),
            validate_tables=_env_flag(
                "ROLEGRAPH_VALIDATE_TABLES", os.getenv("ROLEGRAPH_VALIDATE_TABLES", "true")
            ),
            strict_max_role=_env_flag(
                "ROLEGRAPH_STRICT_MAX_ROLE", os.getenv("ROLEGRAPH_STRICT_MAX_ROLE", "false")
            ),
        )
    except ValidationError as e:
        raise ConfigurationError(str(e), errors=e.errors()) from e


__all__ = [
    "LogLevel",
    "RoleGraphConfig",
    "load_config_from_env",
]
