"""Logging utilities for rolegraph.

This module provides:
- Logging configuration from RoleGraphConfig
- Safe preview utilities for role and permission collections
- Structured logging with the principal under evaluation
"""

from __future__ import annotations

import json
import logging
from typing import Any, Optional

from .config import LogLevel, RoleGraphConfig

# LogRecord attributes that are not copied into structured output
_RESERVED_ATTRS = frozenset(
    {
        "name", "msg", "args", "created", "filename", "funcName",
        "levelname", "levelno", "lineno", "module", "msecs",
        "message", "pathname", "process", "processName", "relativeCreated",
        "thread", "threadName", "taskName", "exc_info", "exc_text", "stack_info",
        "principal",
    }
)


def safe_preview(value: Any, limit: int = 240) -> str:
    """Create a length-bounded, single-line preview of a value for logging.

    Sets and frozensets are sorted first so that the preview of a role
    closure or permission set is stable between runs.

    Args:
        value: The value to preview (any type)
        limit: Maximum length of the preview (default: 240)

    Returns:
        A truncated string representation
    """
    if value is None:
        return ""

    if isinstance(value, (set, frozenset)):
        value = sorted(value, key=str)

    if isinstance(value, str):
        s = value
    elif isinstance(value, (dict, list, tuple)):
        try:
            s = json.dumps(value, default=str, ensure_ascii=False)
        except (TypeError, ValueError):
            s = str(value)
    else:
        s = str(value)

    s = " ".join(s.split())

    if len(s) > limit:
        return s[: limit - 1] + "…"

    return s


class RoleGraphFormatter(logging.Formatter):
    """Formatter that emits JSON or plain text and carries the principal.

    Extra fields passed through ``extra=`` are included as safe previews.
    """

    def __init__(
        self,
        json_format: bool = True,
        *args: Any,
        **kwargs: Any,
    ):
        super().__init__(*args, **kwargs)
        self.json_format = json_format

    def format(self, record: logging.LogRecord) -> str:
        principal = getattr(record, "principal", None)

        log_data: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if principal:
            log_data["principal"] = str(principal)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS:
                log_data[key] = safe_preview(value)

        if self.json_format:
            return json.dumps(log_data, default=str, ensure_ascii=False)

        parts = [
            f"[{log_data['timestamp']}]",
            f"{log_data['level']}",
            f"{log_data['logger']}",
        ]
        if principal:
            parts.append(f"principal={log_data['principal']}")
        parts.append(f": {log_data['message']}")
        return " ".join(parts)


class PrincipalLoggerAdapter(logging.LoggerAdapter):
    """Logger adapter that tags every record with the principal identity.

    Usage:
        logger = get_principal_logger(__name__, principal="user-123")
        logger.info("Permission denied", extra={"permission": "user:delete"})
    """

    def __init__(self, logger: logging.Logger, principal: Optional[str] = None):
        super().__init__(logger, {})
        self.principal = principal

    def process(self, msg: str, kwargs: dict[str, Any]) -> tuple[str, dict[str, Any]]:
        principal = kwargs.pop("principal", self.principal)
        extra = kwargs.get("extra", {})
        if principal:
            extra["principal"] = principal
        kwargs["extra"] = extra
        return msg, kwargs


def setup_logging(
    config: Optional[RoleGraphConfig] = None,
    json_format: Optional[bool] = None,
) -> None:
    """Configure the root logger for a process hosting rolegraph.

    Args:
        config: RoleGraphConfig instance (if None, loads from environment)
        json_format: Override ``config.log_json`` when given
    """
    if config is None:
        from .config import load_config_from_env

        config = load_config_from_env()

    log_level = logging.getLevelName(LogLevel(config.log_level).value)
    if json_format is None:
        json_format = config.log_json

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(RoleGraphFormatter(json_format=json_format))
    root_logger.addHandler(console_handler)


def get_principal_logger(name: str, principal: Optional[str] = None) -> PrincipalLoggerAdapter:
    """Get a logger adapter bound to a principal.

    Args:
        name: Logger name (typically __name__)
        principal: Optional principal identifier to include in all logs

    Returns:
        PrincipalLoggerAdapter instance
    """
    return PrincipalLoggerAdapter(logging.getLogger(name), principal=principal)


__all__ = [
    "safe_preview",
    "RoleGraphFormatter",
    "PrincipalLoggerAdapter",
    "setup_logging",
    "get_principal_logger",
]
