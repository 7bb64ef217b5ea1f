"""Sample role and permission tables.

Provides:
- ``Roles`` — role name constants.
- ``Permissions`` — permission string constants (``resource:action`` format).
- ``ROLE_HIERARCHY`` — role → roles it directly inherits from.
- ``ROLE_BASED_PERMISSIONS`` — role → permissions granted directly.

These tables are plain data. Resolvers never read them implicitly; pass
them to :class:`~rolegraph.permissions.resolver.RoleResolver` explicitly.
"""

from __future__ import annotations


class Roles:
    """Role names used by the sample tables."""

    SUPER_ADMIN = "super_admin"
    ADMIN = "admin"
    MANAGER = "manager"
    SALES_MANAGER = "sales_manager"
    PROOF_READER = "proof_reader"
    EDITOR = "editor"
    PREMIUM_USER = "premium_user"
    USER = "user"


class Permissions:
    """Permission constants used by the sample tables.

    Format: ``{resource}:{action}``. Permissions are opaque and compared
    by equality only; there are no wildcards.
    """

    # ── Products ────────────────────────────────────────
    PRODUCT_CREATE = "product:create"
    PRODUCT_READ = "product:read"
    PRODUCT_UPDATE = "product:update"
    PRODUCT_DELETE = "product:delete"
    PRODUCT_REVIEW = "product:review"

    # ── Users ───────────────────────────────────────────
    USER_CREATE = "user:create"
    USER_DELETE = "user:delete"


# ── Role Hierarchy ──────────────────────────────────────
# A role inherits everything its parents hold.

ROLE_HIERARCHY: dict[str, tuple[str, ...]] = {
    Roles.SUPER_ADMIN: (Roles.ADMIN,),
    Roles.ADMIN: (Roles.MANAGER,),
    Roles.MANAGER: (
        Roles.PROOF_READER,
        Roles.EDITOR,
        Roles.SALES_MANAGER,
    ),
    Roles.SALES_MANAGER: (Roles.USER,),
    Roles.PROOF_READER: (Roles.USER,),
    Roles.EDITOR: (Roles.USER,),
    # user roles
    Roles.PREMIUM_USER: (Roles.USER,),
    Roles.USER: (),
}


# ── Direct Grants ───────────────────────────────────────

ROLE_BASED_PERMISSIONS: dict[str, tuple[str, ...]] = {
    Roles.SUPER_ADMIN: (),
    Roles.ADMIN: (
        Permissions.PRODUCT_DELETE,
        Permissions.USER_DELETE,
        Permissions.USER_CREATE,
    ),
    Roles.MANAGER: (
        Permissions.PRODUCT_CREATE,
        Permissions.PRODUCT_UPDATE,
    ),
    Roles.PROOF_READER: (Permissions.PRODUCT_UPDATE,),
    Roles.EDITOR: (
        Permissions.PRODUCT_CREATE,
        Permissions.PRODUCT_UPDATE,
    ),
    Roles.PREMIUM_USER: (Permissions.PRODUCT_REVIEW,),
    Roles.USER: (Permissions.PRODUCT_READ,),
}


__all__ = [
    "ROLE_BASED_PERMISSIONS",
    "ROLE_HIERARCHY",
    "Permissions",
    "Roles",
]
