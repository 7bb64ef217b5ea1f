"""Authorization queries for one principal.

``PermissionManager`` answers permission and role checks against a
built :class:`~rolegraph.permissions.resolver.RoleResolver`. Every query
is read-only; unknown roles and permissions give a negative answer,
never an exception. Only the ``require_*`` helpers and strict
``get_max_role()`` raise.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from ..exceptions import IncomparableRolesError, PermissionDeniedError
from ..logging import get_principal_logger
from .models import PermissionContext

if TYPE_CHECKING:
    from .resolver import RoleResolver


class PermissionManager:
    """Query engine binding a principal to a role cache.

    Args:
        resolver: Built role cache.
        context: Principal's held roles and explicit permissions.
        strict_max_role: Raise from :meth:`get_max_role` on unrelated
            roles. ``None`` uses the resolver's config.
    """

    __slots__ = ("_resolver", "_context", "_strict_max_role", "_log")

    def __init__(
        self,
        resolver: RoleResolver,
        context: PermissionContext,
        *,
        strict_max_role: bool | None = None,
    ) -> None:
        self._resolver = resolver
        self._context = context
        if strict_max_role is None:
            strict_max_role = resolver.config.strict_max_role
        self._strict_max_role = strict_max_role
        self._log = get_principal_logger(__name__, principal=context.principal_id)

    @property
    def context(self) -> PermissionContext:
        return self._context

    @property
    def resolver(self) -> RoleResolver:
        return self._resolver

    # ── Permissions ─────────────────────────────────────

    def has_permission(self, permission: str) -> bool:
        """Check if the principal holds ``permission``.

        Explicit grants are checked first and do not need the role cache
        at all. Otherwise any held role whose effective permissions
        contain ``permission`` satisfies the check.
        """
        if permission in self._context.permissions:
            return True
        return any(permission in self._resolver.permissions_of(role) for role in self._context.roles)

    def has_permissions(self, permissions: Iterable[str]) -> bool:
        """Check that every permission is held. Empty input is True."""
        return all(self.has_permission(p) for p in permissions)

    def has_any_permission(self, permissions: Iterable[str]) -> bool:
        """Check that at least one permission is held. Empty input is False."""
        return any(self.has_permission(p) for p in permissions)

    def effective_permissions(self) -> frozenset[str]:
        """Explicit grants plus the effective permissions of every held role."""
        result = set(self._context.permissions)
        for role in self._context.roles:
            result.update(self._resolver.permissions_of(role))
        return frozenset(result)

    # ── Roles ───────────────────────────────────────────

    def has_role(self, role: str) -> bool:
        """Check if ``role`` is held directly or inherited by a held role."""
        if role in self._context.roles:
            return True
        return any(role in self._resolver.closure_of(held) for held in self._context.roles)

    def effective_roles(self) -> frozenset[str]:
        """Held roles plus every role they inherit from."""
        result = set(self._context.roles)
        for role in self._context.roles:
            result.update(self._resolver.closure_of(role))
        return frozenset(result)

    def get_max_role(self) -> str | None:
        """Return the most senior held role, or None if no role is held.

        Folds over the held roles in order: the current champion stays
        while its closure contains the candidate, and a candidate whose
        closure contains the champion takes over. Roles the hierarchy
        does not relate (e.g. two siblings) leave the champion in place,
        so the first-listed of them wins.

        In strict mode the result must inherit from every other held role,
        so the answer is the same for any ordering of the held roles.

        Raises:
            IncomparableRolesError: In strict mode, when no held role
                inherits from all the others.
        """
        roles = self._context.roles
        if not roles:
            return None

        champion = roles[0]
        for candidate in roles[1:]:
            if candidate in self._resolver.closure_of(champion):
                continue
            if champion in self._resolver.closure_of(candidate):
                champion = candidate

        if self._strict_max_role:
            closure = self._resolver.closure_of(champion)
            for role in roles:
                if role != champion and role not in closure:
                    raise IncomparableRolesError(
                        f"Roles '{champion}' and '{role}' are not related by the hierarchy",
                        roles=(champion, role),
                    )
        return champion

    # ── Enforcement ─────────────────────────────────────

    def require_permission(self, permission: str) -> None:
        """Raise PermissionDeniedError unless ``permission`` is held."""
        if not self.has_permission(permission):
            self._log.info("Permission denied", extra={"permission": permission})
            raise PermissionDeniedError(
                f"Missing permission '{permission}'",
                permission=permission,
                principal=self._context.principal_id,
            )

    def require_role(self, role: str) -> None:
        """Raise PermissionDeniedError unless ``role`` is held or inherited."""
        if not self.has_role(role):
            self._log.info("Role check failed", extra={"role": role})
            raise PermissionDeniedError(
                f"Missing role '{role}'",
                role=role,
                principal=self._context.principal_id,
            )

    def __repr__(self) -> str:
        return f"PermissionManager(roles={self._context.roles!r}, permissions={len(self._context.permissions)})"


__all__ = ["PermissionManager"]
