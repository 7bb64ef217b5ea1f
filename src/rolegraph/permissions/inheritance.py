"""Role inheritance closure and permission aggregation.

Provides:
- ``compute_role_closure()`` — every role reachable from one role.
- ``compute_role_closures()`` — closures for every role in a hierarchy.
- ``aggregate_permissions()`` — a role's grants plus its ancestors' grants.
- ``aggregate_all_permissions()`` — the same for a whole permission table.

All functions are pure: identical tables always give identical sets.
"""

from __future__ import annotations

import logging
from typing import Mapping, Sequence

logger = logging.getLogger(__name__)

_EMPTY: frozenset[str] = frozenset()


def compute_role_closure(
    role: str,
    hierarchy: Mapping[str, Sequence[str]],
    memo: Mapping[str, frozenset[str]] | None = None,
) -> frozenset[str]:
    """Collect every role reachable from ``role`` through parent edges.

    Traversal uses an explicit worklist, so depth is bounded by memory
    rather than the interpreter stack. A role already collected is not
    expanded again; that prunes only the branch that revisits it.

    A direct self-edge (``A → A``) is ignored. A role that reaches itself
    through another role (``A → B → A``) is part of its own closure.

    Args:
        role: Role to expand. Unknown roles yield an empty set.
        hierarchy: Role → roles it directly inherits from.
        memo: Finished closures of other roles. A parent found here is
            merged in whole instead of being walked again.

    Returns:
        Frozenset of reachable roles.

    Example::

        >>> sorted(compute_role_closure("admin", {"admin": ["manager"], "manager": ["user"]}))
        ['manager', 'user']
    """
    closure: set[str] = set()
    queue = [parent for parent in hierarchy.get(role, ()) if parent != role]

    while queue:
        parent = queue.pop()
        if parent in closure:
            continue
        closure.add(parent)
        if memo is not None and parent in memo:
            closure.update(memo[parent])
            continue
        queue.extend(hierarchy.get(parent, ()))

    if role in closure:
        logger.debug("Role '%s' inherits from itself through a cycle", role)

    return frozenset(closure)


def compute_role_closures(hierarchy: Mapping[str, Sequence[str]]) -> dict[str, frozenset[str]]:
    """Compute the closure of every role that is a key of ``hierarchy``.

    Closures finished earlier in the pass are reused for later roles.
    Roles that only appear as parents get no entry; callers treat a
    missing entry as an empty closure.
    """
    closures: dict[str, frozenset[str]] = {}
    for role in hierarchy:
        closures[role] = compute_role_closure(role, hierarchy, closures)
    return closures


def aggregate_permissions(
    role: str,
    role_permissions: Mapping[str, Sequence[str]],
    closure: frozenset[str] | set[str] = _EMPTY,
) -> frozenset[str]:
    """Union a role's direct grants with those of every role in ``closure``.

    A role missing from ``role_permissions`` contributes nothing. The
    result does not record which ancestor a grant came from.

    Example::

        >>> table = {"manager": ["product:update"], "user": ["product:read"]}
        >>> sorted(aggregate_permissions("manager", table, frozenset({"user"})))
        ['product:read', 'product:update']
    """
    permissions: set[str] = set(role_permissions.get(role, ()))
    for inherited in closure:
        permissions.update(role_permissions.get(inherited, ()))
    return frozenset(permissions)


def aggregate_all_permissions(
    role_permissions: Mapping[str, Sequence[str]],
    closures: Mapping[str, frozenset[str]],
) -> dict[str, frozenset[str]]:
    """Compute effective permissions for every key of ``role_permissions``.

    Each role uses its entry in ``closures``, or an empty closure if it has none.
    """
    return {
        role: aggregate_permissions(role, role_permissions, closures.get(role, _EMPTY))
        for role in role_permissions
    }


__all__ = [
    "aggregate_all_permissions",
    "aggregate_permissions",
    "compute_role_closure",
    "compute_role_closures",
]
