"""
hrcore Roles — Hierarchy
========================
Total order over the coarse tenant roles.

Every comparison goes through the numeric rank. Two roles are never
compared by their string values.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Optional, Union


class Role(Enum):
    EMPLOYEE = "employee"
    MANAGER = "manager"
    HR_MANAGER = "hr_manager"
    COMPANY_ADMIN = "company_admin"
    SUPER_ADMIN = "super_admin"

    @property
    def rank(self) -> int:
        return ROLE_HIERARCHY[self]

    @property
    def label(self) -> str:
        """Human form used in denial messages ("hr manager")."""
        return self.value.replace("_", " ", 1)


ROLE_HIERARCHY: Dict[Role, int] = {
    Role.EMPLOYEE: 1,
    Role.MANAGER: 2,
    Role.HR_MANAGER: 3,
    Role.COMPANY_ADMIN: 4,
    Role.SUPER_ADMIN: 5,
}

ADMIN_ROLES = frozenset({Role.COMPANY_ADMIN, Role.SUPER_ADMIN})


def parse_role(value: Union[str, Role, None]) -> Optional[Role]:
    """
    Normalize a role value coming from a session or a database row.

    None stays None (no role). Unknown strings raise ValueError.
    """
    if value is None or isinstance(value, Role):
        return value
    try:
        return Role(str(value).strip())
    except ValueError:
        raise ValueError(
            f"role '{value}' not valid. "
            f"Must be one of: {sorted(r.value for r in Role)}"
        ) from None


def rank(role: Role) -> int:
    return ROLE_HIERARCHY[role]


def meets_minimum(actual: Optional[Role], required: Role) -> bool:
    """True when `actual` ranks at or above `required`. No role never does."""
    if actual is None:
        return False
    return ROLE_HIERARCHY[actual] >= ROLE_HIERARCHY[required]


# ══════════════════════════════════════════════════════════════
# CONVENIENCE PREDICATES
# ══════════════════════════════════════════════════════════════

def can_manage_users(role: Optional[Role]) -> bool:
    return meets_minimum(role, Role.COMPANY_ADMIN)


def can_manage_hr(role: Optional[Role]) -> bool:
    return meets_minimum(role, Role.HR_MANAGER)


def can_view_reports(role: Optional[Role]) -> bool:
    return meets_minimum(role, Role.MANAGER)


def can_access_settings(role: Optional[Role]) -> bool:
    return meets_minimum(role, Role.COMPANY_ADMIN)


def can_access_billing(role: Optional[Role]) -> bool:
    return meets_minimum(role, Role.COMPANY_ADMIN)
