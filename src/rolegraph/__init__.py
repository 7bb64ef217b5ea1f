from .config import LogLevel, RoleGraphConfig, load_config_from_env
from .exceptions import (
    AuthorizationError,
    ConfigurationError,
    IncomparableRolesError,
    PermissionDeniedError,
    RoleGraphError,
    RoleGraphValidationError,
)
from .logging import (
    PrincipalLoggerAdapter,
    RoleGraphFormatter,
    get_principal_logger,
    safe_preview,
    setup_logging,
)
from .permissions import (
    ROLE_BASED_PERMISSIONS,
    ROLE_HIERARCHY,
    PermissionContext,
    PermissionManager,
    Permissions,
    RoleGraph,
    RoleResolver,
    Roles,
    aggregate_all_permissions,
    aggregate_permissions,
    compute_role_closure,
    compute_role_closures,
)

__all__ = [
    'RoleResolver',
    'PermissionManager',
    'PermissionContext',
    'RoleGraph',
    'compute_role_closure',
    'compute_role_closures',
    'aggregate_permissions',
    'aggregate_all_permissions',
    'ROLE_HIERARCHY',
    'ROLE_BASED_PERMISSIONS',
    'Roles',
    'Permissions',
    'RoleGraphConfig',
    'LogLevel',
    'load_config_from_env',
    'RoleGraphError',
    'ConfigurationError',
    'RoleGraphValidationError',
    'AuthorizationError',
    'PermissionDeniedError',
    'IncomparableRolesError',
    'safe_preview',
    'RoleGraphFormatter',
    'PrincipalLoggerAdapter',
    'setup_logging',
    'get_principal_logger',
]
