"""Role hierarchy resolution and permission checks.

Defines:
- RoleGraph / PermissionContext: validated inputs
- compute_role_closure(): roles reachable through inheritance
- aggregate_permissions(): direct plus inherited grants
- RoleResolver: closures and permission sets built once per instance
- PermissionManager: permission, role and max-role queries
- ROLE_HIERARCHY / ROLE_BASED_PERMISSIONS: sample tables
"""

from .constants import ROLE_BASED_PERMISSIONS, ROLE_HIERARCHY, Permissions, Roles
from .inheritance import (
    aggregate_all_permissions,
    aggregate_permissions,
    compute_role_closure,
    compute_role_closures,
)
from .manager import PermissionManager
from .models import PermissionContext, RoleGraph
from .resolver import RoleResolver

__all__ = [
    "ROLE_BASED_PERMISSIONS",
    "ROLE_HIERARCHY",
    "PermissionContext",
    "PermissionManager",
    "Permissions",
    "RoleGraph",
    "RoleResolver",
    "Roles",
    "aggregate_all_permissions",
    "aggregate_permissions",
    "compute_role_closure",
    "compute_role_closures",
]
