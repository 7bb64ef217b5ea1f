"""Input models: the role graph and the principal under evaluation."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Annotated, Any, Iterable, Mapping, Sequence

from pydantic import BaseModel, Field, ValidationError, field_validator

from ..exceptions import RoleGraphValidationError

Identifier = Annotated[str, Field(min_length=1)]


class RoleGraph(BaseModel):
    """Validated, immutable snapshot of the two role tables.

    Attributes:
        hierarchy: Role → roles it directly inherits from (order kept).
        role_permissions: Role → permissions granted directly to it.

    Either table may mention roles the other does not; a missing key is
    an empty contribution, never an error. Cycles are allowed.
    """

    model_config = {"frozen": True, "extra": "forbid", "validate_default": True}

    hierarchy: dict[Identifier, tuple[Identifier, ...]] = Field(default_factory=dict)
    role_permissions: dict[Identifier, tuple[Identifier, ...]] = Field(default_factory=dict)

    @field_validator("hierarchy", "role_permissions", mode="after")
    @classmethod
    def freeze_table(cls, v: dict[str, tuple[str, ...]]) -> Mapping[str, tuple[str, ...]]:
        """Expose tables as read-only views."""
        return MappingProxyType(v)

    @classmethod
    def from_tables(
        cls,
        hierarchy: Mapping[str, Sequence[str]],
        role_permissions: Mapping[str, Sequence[str]],
        *,
        validate: bool = True,
    ) -> RoleGraph:
        """Build a graph from host-supplied tables.

        Args:
            hierarchy: Role → parent roles.
            role_permissions: Role → direct permissions.
            validate: Reject non-string or empty identifiers. When False the
                tables are copied as-is.

        Raises:
            RoleGraphValidationError: If ``validate`` is set and a table is
                malformed.
        """
        if not validate:
            return cls.model_construct(
                hierarchy=MappingProxyType({role: tuple(parents) for role, parents in hierarchy.items()}),
                role_permissions=MappingProxyType(
                    {role: tuple(perms) for role, perms in role_permissions.items()}
                ),
            )
        try:
            return cls.model_validate(
                {"hierarchy": hierarchy, "role_permissions": role_permissions}
            )
        except ValidationError as e:
            raise RoleGraphValidationError(
                f"Invalid role graph: {e.error_count()} error(s)",
                errors=e.errors(include_url=False),
            ) from e

    def roles(self) -> frozenset[str]:
        """Every role mentioned anywhere in either table."""
        found = set(self.hierarchy) | set(self.role_permissions)
        for parents in self.hierarchy.values():
            found.update(parents)
        return frozenset(found)


def _ordered_unique(values: Iterable[str]) -> tuple[str, ...]:
    return tuple(dict.fromkeys(values))


@dataclass(frozen=True)
class PermissionContext:
    """The principal being authorized.

    - roles: Roles held directly, in the order the host supplied them.
      Order matters for :meth:`PermissionManager.get_max_role`.
    - permissions: Explicit grants. These bypass role resolution.
    - principal_id: Optional identity, used only for log records.
    """

    roles: tuple[str, ...] = ()
    permissions: frozenset[str] = field(default_factory=frozenset)
    principal_id: str | None = None

    def __post_init__(self) -> None:
        roles = (self.roles,) if isinstance(self.roles, str) else self.roles
        permissions = (self.permissions,) if isinstance(self.permissions, str) else self.permissions
        object.__setattr__(self, "roles", _ordered_unique(roles))
        object.__setattr__(self, "permissions", frozenset(permissions))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> PermissionContext:
        """Build a context from the host's ``{"roles": [...], "permissions": [...]}`` record.

        An ``"id"`` key, if present, becomes ``principal_id``.
        """
        principal_id = data.get("id")
        return cls(
            roles=data.get("roles") or (),
            permissions=data.get("permissions") or (),
            principal_id=str(principal_id) if principal_id is not None else None,
        )


__all__ = [
    "PermissionContext",
    "RoleGraph",
]
