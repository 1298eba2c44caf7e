"""
hrcore Roles - Public API
=========================
"""

from hrcore.roles.hierarchy import (
    ADMIN_ROLES,
    ROLE_HIERARCHY,
    Role,
    can_access_billing,
    can_access_settings,
    can_manage_hr,
    can_manage_users,
    can_view_reports,
    meets_minimum,
    parse_role,
    rank,
)

__all__ = [
    "Role",
    "ROLE_HIERARCHY",
    "ADMIN_ROLES",
    "parse_role",
    "rank",
    "meets_minimum",
    "can_manage_users",
    "can_manage_hr",
    "can_view_reports",
    "can_access_settings",
    "can_access_billing",
]
