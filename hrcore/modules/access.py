"""
hrcore Modules — Navigation Access Listing
==========================================
Per-module access for the current subject, as used to build navigation.

Evaluation order for each catalog module:
  1. tenant frozen                          → frozen
  2. any granted permission on the module   → permission_granted
     (no_plan when the plan still lacks it)
  3. role below the module's min_role       → no_role
  4. plan lacks the module                  → no_plan
  5. otherwise                              → ok
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Dict, Optional, Tuple

from hrcore.modules.catalog import HR_MODULES, ModuleConfig, ModuleId
from hrcore.permissions.constants import PermissionModule
from hrcore.roles import Role, meets_minimum

if TYPE_CHECKING:
    from hrcore.permissions.resolver import PermissionResolver
    from hrcore.tenancy.state import TenantState


class ModuleAccessReason(Enum):
    OK = "ok"
    NO_ROLE = "no_role"
    NO_PLAN = "no_plan"
    FROZEN = "frozen"
    PERMISSION_GRANTED = "permission_granted"


# Navigation module → permission module whose grants unlock it.
MODULE_PERMISSION_MAP: Dict[ModuleId, PermissionModule] = {
    ModuleId.DASHBOARD: PermissionModule.DASHBOARD,
    ModuleId.EMPLOYEES: PermissionModule.EMPLOYEES,
    ModuleId.DEPARTMENTS: PermissionModule.DEPARTMENTS,
    ModuleId.LEAVE: PermissionModule.LEAVE,
    ModuleId.PAYROLL: PermissionModule.PAYROLL,
    ModuleId.PERFORMANCE: PermissionModule.PERFORMANCE,
    ModuleId.RECRUITMENT: PermissionModule.RECRUITMENT,
    ModuleId.DOCUMENTS: PermissionModule.DOCUMENTS,
    ModuleId.EXPENSES: PermissionModule.EXPENSES,
    ModuleId.COMPLIANCE: PermissionModule.COMPLIANCE,
    ModuleId.TIME_TRACKING: PermissionModule.TIME_TRACKING,
    ModuleId.SHIFTS: PermissionModule.TIME_TRACKING,
}


@dataclass(frozen=True)
class ModuleAccess:
    module: ModuleConfig
    has_access: bool
    reason: ModuleAccessReason

    @property
    def module_id(self) -> ModuleId:
        return self.module.module_id


@dataclass(frozen=True)
class ModuleAccessList:
    """Access for every catalog module, in catalog order."""

    modules: Tuple[ModuleAccess, ...]

    @property
    def accessible(self) -> Tuple[ModuleAccess, ...]:
        return tuple(m for m in self.modules if m.has_access)

    @property
    def restricted(self) -> Tuple[ModuleAccess, ...]:
        return tuple(m for m in self.modules if not m.has_access)

    def get(self, module_id: ModuleId) -> Optional[ModuleAccess]:
        for entry in self.modules:
            if entry.module_id == module_id:
                return entry
        return None

    def can_access_module(self, module_id: ModuleId) -> bool:
        entry = self.get(module_id)
        return entry is not None and entry.has_access


def _evaluate(
    module: ModuleConfig,
    role: Optional[Role],
    tenant_state: "TenantState",
    permissions: Optional["PermissionResolver"],
) -> ModuleAccess:
    if tenant_state.is_frozen:
        return ModuleAccess(module, False, ModuleAccessReason.FROZEN)

    plan_ok = (
        module.plan_required is None
        or tenant_state.has_module(module.plan_required)
    )

    permission_module = MODULE_PERMISSION_MAP.get(module.module_id)
    if (
        permissions is not None
        and permission_module is not None
        and permissions.can_access_module(permission_module)
    ):
        if not plan_ok:
            return ModuleAccess(module, False, ModuleAccessReason.NO_PLAN)
        return ModuleAccess(module, True, ModuleAccessReason.PERMISSION_GRANTED)

    if not meets_minimum(role, module.min_role):
        return ModuleAccess(module, False, ModuleAccessReason.NO_ROLE)

    if not plan_ok:
        return ModuleAccess(module, False, ModuleAccessReason.NO_PLAN)

    return ModuleAccess(module, True, ModuleAccessReason.OK)


def compute_module_access(
    role: Optional[Role],
    tenant_state: "TenantState",
    permissions: Optional["PermissionResolver"] = None,
) -> ModuleAccessList:
    """
    Compute navigation access for all catalog modules.

    `permissions` may be None while the subject's grants are still
    loading; role and plan decide alone in that case.
    """
    return ModuleAccessList(
        modules=tuple(
            _evaluate(module, role, tenant_state, permissions)
            for module in HR_MODULES
        )
    )
