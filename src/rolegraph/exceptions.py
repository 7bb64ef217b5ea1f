"""Exception hierarchy for rolegraph.

All errors inherit from RoleGraphError and carry a stable error code.

Lookup misses (unknown roles or permissions) are never errors; the
resolver answers them with empty sets. Only malformed input, invalid
settings and explicit ``require_*`` checks raise.

Usage:
    from rolegraph.exceptions import (
        RoleGraphError,
        PermissionDeniedError,
        RoleGraphValidationError,
    )
"""

from __future__ import annotations

from typing import Any

__all__ = [
    "RoleGraphError",
    "ConfigurationError",
    "RoleGraphValidationError",
    "AuthorizationError",
    "PermissionDeniedError",
    "IncomparableRolesError",
]


# ---- Exception Hierarchy ----------------------------------------------------


class RoleGraphError(Exception):
    """Base exception for rolegraph.

    Attributes:
        code: Stable error code string (e.g. "PERMISSION_DENIED").
        message: Human-readable error description.
        details: Additional context as keyword arguments.
    """

    code: str = "INTERNAL_ERROR"
    message: str = "An internal error occurred"

    def __init__(self, message: str | None = None, code: str | None = None, **kwargs: Any) -> None:
        self.message = message or self.message
        self.code = code or self.code
        self.details = kwargs
        super().__init__(self.message)


class ConfigurationError(RoleGraphError):
    """Invalid or missing configuration."""

    code: str = "CONFIGURATION_ERROR"
    message: str = "Invalid rolegraph configuration"


class RoleGraphValidationError(RoleGraphError):
    """Role hierarchy or permission table is malformed."""

    code: str = "ROLE_GRAPH_INVALID"
    message: str = "Role graph input is malformed"


class AuthorizationError(RoleGraphError):
    """Base for failed authorization decisions."""

    code: str = "AUTHORIZATION_ERROR"
    message: str = "Authorization failed"


class PermissionDeniedError(AuthorizationError):
    """Principal lacks a required permission or role."""

    code: str = "PERMISSION_DENIED"
    message: str = "Permission denied"


class IncomparableRolesError(AuthorizationError):
    """Held roles have no hierarchy relation, so no maximum exists."""

    code: str = "INCOMPARABLE_ROLES"
    message: str = "Held roles are not ordered by the hierarchy"

