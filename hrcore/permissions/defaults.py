"""
hrcore Permissions - Default Role Grants
========================================
The template used to seed a company's role permissions. Companies can
diverge from it afterwards; reset restores this template.
"""

from __future__ import annotations

from typing import Dict, FrozenSet, Tuple

from hrcore.permissions.constants import (
    PERMISSION_CATALOG,
    PermissionAction,
    PermissionModule,
)
from hrcore.roles import Role

PermissionPair = Tuple[PermissionModule, PermissionAction]

_M = PermissionModule
_A = PermissionAction


def _catalog_pairs(modules, actions) -> FrozenSet[PermissionPair]:
    return frozenset(
        (module, action)
        for module in modules
        for action in actions
        if (module, action) in PERMISSION_CATALOG
    )


_COMPANY_ADMIN = frozenset(
    pair for pair in PERMISSION_CATALOG
    if pair != (_M.COMPLIANCE, _A.MANAGE)
)

_HR_MANAGER = _catalog_pairs(
    (
        _M.DASHBOARD,
        _M.EMPLOYEES,
        _M.DEPARTMENTS,
        _M.LEAVE,
        _M.TIME_TRACKING,
        _M.DOCUMENTS,
        _M.RECRUITMENT,
        _M.PERFORMANCE,
        _M.EXPENSES,
    ),
    (_A.READ, _A.CREATE, _A.UPDATE, _A.APPROVE, _A.VERIFY),
)

_MANAGER = (
    _catalog_pairs((_M.DASHBOARD, _M.EMPLOYEES, _M.DEPARTMENTS), (_A.READ,))
    | _catalog_pairs(
        (_M.LEAVE, _M.TIME_TRACKING, _M.EXPENSES), (_A.READ, _A.APPROVE)
    )
    | _catalog_pairs((_M.PERFORMANCE,), (_A.READ, _A.CREATE, _A.UPDATE))
)

_EMPLOYEE = (
    _catalog_pairs((_M.DASHBOARD, _M.EMPLOYEES, _M.DEPARTMENTS), (_A.READ,))
    | _catalog_pairs(
        (_M.LEAVE, _M.EXPENSES), (_A.READ, _A.CREATE, _A.UPDATE, _A.DELETE)
    )
    | _catalog_pairs((_M.TIME_TRACKING,), (_A.READ, _A.CREATE))
    | _catalog_pairs((_M.DOCUMENTS, _M.PERFORMANCE), (_A.READ,))
)

# super_admin has no rows: it bypasses fine-grained checks.
DEFAULT_ROLE_GRANTS: Dict[Role, FrozenSet[PermissionPair]] = {
    Role.SUPER_ADMIN: frozenset(),
    Role.COMPANY_ADMIN: _COMPANY_ADMIN,
    Role.HR_MANAGER: _HR_MANAGER,
    Role.MANAGER: _MANAGER,
    Role.EMPLOYEE: _EMPLOYEE,
}

del _M, _A


def default_grants_for(role: Role) -> FrozenSet[PermissionPair]:
    return DEFAULT_ROLE_GRANTS.get(role, frozenset())
