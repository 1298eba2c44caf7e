"""
hrcore Permissions - Public API
===============================
"""

from hrcore.permissions.constants import (
    ACTION_LABELS,
    MODULE_LABELS,
    PERMISSION_CATALOG,
    PermissionAction,
    PermissionModule,
    PermissionSource,
    is_catalog_permission,
    parse_permission_key,
    permission_key,
)
from hrcore.permissions.defaults import DEFAULT_ROLE_GRANTS, default_grants_for
from hrcore.permissions.models import (
    CompanyMembership,
    PermissionOverride,
    ResolvedPermission,
)
from hrcore.permissions.provider import (
    InMemoryPermissionProvider,
    PermissionProvider,
    PermissionStore,
)
from hrcore.permissions.resolver import PermissionResolver, resolve_permission


def __getattr__(name: str):
    # Imported lazily: administration depends on hrcore.config, which
    # itself imports from this package; the DB provider needs Django.
    if name in {"PermissionAdministrator", "OverrideChange"}:
        from hrcore.permissions import management

        return getattr(management, name)
    if name == "DbPermissionProvider":
        from hrcore.permissions.db_provider import DbPermissionProvider

        return DbPermissionProvider
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")


__all__ = [
    "PermissionModule",
    "PermissionAction",
    "MODULE_LABELS",
    "ACTION_LABELS",
    "PERMISSION_CATALOG",
    "PermissionSource",
    "is_catalog_permission",
    "permission_key",
    "parse_permission_key",
    "DEFAULT_ROLE_GRANTS",
    "default_grants_for",
    "CompanyMembership",
    "PermissionOverride",
    "ResolvedPermission",
    "PermissionProvider",
    "PermissionStore",
    "InMemoryPermissionProvider",
    "DbPermissionProvider",
    "PermissionResolver",
    "resolve_permission",
    "PermissionAdministrator",
    "OverrideChange",
]
