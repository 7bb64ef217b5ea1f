"""Resolution cache: closures and effective permissions, built once.

``RoleResolver`` takes the role tables explicitly, computes every
closure and every effective permission set in its constructor, and
serves read-only lookups afterwards. Nothing is computed on demand; a
role the build pass never saw resolves to an empty set.

One resolver can serve any number of principals through
:meth:`RoleResolver.for_context`.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import TYPE_CHECKING, Mapping, Sequence

from ..config import RoleGraphConfig
from ..logging import safe_preview
from .inheritance import aggregate_all_permissions, compute_role_closures
from .models import PermissionContext, RoleGraph

if TYPE_CHECKING:
    from .manager import PermissionManager

logger = logging.getLogger(__name__)

_EMPTY: frozenset[str] = frozenset()


class RoleResolver:
    """Precomputed role closures and effective permissions.

    Args:
        hierarchy: Role → roles it directly inherits from.
        role_permissions: Role → permissions granted directly.
        config: Optional settings. ``validate_tables`` controls input
            validation; ``strict_max_role`` is handed to managers.

    Raises:
        RoleGraphValidationError: If validation is on and a table is malformed.

    Example::

        resolver = RoleResolver(ROLE_HIERARCHY, ROLE_BASED_PERMISSIONS)
        manager = resolver.for_context(PermissionContext(roles=("admin",)))
        manager.has_permission("product:read")  # True
    """

    __slots__ = ("_config", "_graph", "_closures", "_permissions")

    def __init__(
        self,
        hierarchy: Mapping[str, Sequence[str]],
        role_permissions: Mapping[str, Sequence[str]],
        *,
        config: RoleGraphConfig | None = None,
    ) -> None:
        self._config = config or RoleGraphConfig()
        graph = RoleGraph.from_tables(
            hierarchy,
            role_permissions,
            validate=self._config.validate_tables,
        )
        self._build(graph)

    @classmethod
    def from_graph(cls, graph: RoleGraph, *, config: RoleGraphConfig | None = None) -> RoleResolver:
        """Build a resolver from an already validated :class:`RoleGraph`."""
        resolver = cls.__new__(cls)
        resolver._config = config or RoleGraphConfig()
        resolver._build(graph)
        return resolver

    def _build(self, graph: RoleGraph) -> None:
        closures = compute_role_closures(graph.hierarchy)
        permissions = aggregate_all_permissions(graph.role_permissions, closures)

        self._graph = graph
        self._closures = MappingProxyType(closures)
        self._permissions = MappingProxyType(permissions)

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Built role cache: %d closures, %d permission sets",
                len(closures),
                len(permissions),
                extra={"roles": safe_preview(set(closures) | set(permissions))},
            )

    # ── Lookups ─────────────────────────────────────────

    @property
    def config(self) -> RoleGraphConfig:
        return self._config

    @property
    def graph(self) -> RoleGraph:
        return self._graph

    @property
    def closures(self) -> Mapping[str, frozenset[str]]:
        """Read-only view of every computed closure."""
        return self._closures

    @property
    def role_permissions(self) -> Mapping[str, frozenset[str]]:
        """Read-only view of every computed effective permission set."""
        return self._permissions

    @property
    def roles(self) -> frozenset[str]:
        """Roles that have a cached closure or permission set."""
        return frozenset(self._closures) | frozenset(self._permissions)

    def knows_role(self, role: str) -> bool:
        """Check if the build pass produced an entry for ``role``."""
        return role in self._closures or role in self._permissions

    def closure_of(self, role: str) -> frozenset[str]:
        """Roles ``role`` inherits from. Empty for roles never built."""
        return self._closures.get(role, _EMPTY)

    def permissions_of(self, role: str) -> frozenset[str]:
        """Effective permissions of ``role``. Empty for roles never built."""
        return self._permissions.get(role, _EMPTY)

    # ── Query engine ────────────────────────────────────

    def for_context(
        self,
        context: PermissionContext,
        *,
        strict_max_role: bool | None = None,
    ) -> PermissionManager:
        """Bind a principal to this cache.

        Args:
            context: Roles and explicit permissions of the principal.
            strict_max_role: Override ``config.strict_max_role``.
        """
        from .manager import PermissionManager

        return PermissionManager(self, context, strict_max_role=strict_max_role)

    def __repr__(self) -> str:
        return f"RoleResolver(closures={len(self._closures)}, permission_sets={len(self._permissions)})"


__all__ = ["RoleResolver"]
