"""
hrcore Modules — Static Module Catalog
======================================
Coarse feature areas with their minimum role and the plan feature that
unlocks them. Loaded once at import, immutable thereafter.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple

from hrcore.roles import Role


class ModuleId(Enum):
    DASHBOARD = "dashboard"
    EMPLOYEES = "employees"
    DIRECTORY = "directory"
    DEPARTMENTS = "departments"
    LEAVE = "leave"
    TIME_TRACKING = "time_tracking"
    SHIFTS = "shifts"
    DOCUMENTS = "documents"
    RECRUITMENT = "recruitment"
    PERFORMANCE = "performance"
    PAYROLL = "payroll"
    COMPLIANCE = "compliance"
    AUDIT = "audit"
    INTEGRATIONS = "integrations"
    EXPENSES = "expenses"
    MY_TEAM = "my_team"


@dataclass(frozen=True)
class ModuleConfig:
    """
    One catalog entry.

    plan_required=None means the module is available on every plan.
    """

    module_id: ModuleId
    name: str
    description: str
    path: str
    min_role: Role
    plan_required: Optional[ModuleId] = None

    def __post_init__(self):
        if not isinstance(self.module_id, ModuleId):
            raise ValueError("module_id must be ModuleId.")

        if not isinstance(self.min_role, Role):
            raise ValueError("min_role must be Role.")

        if self.plan_required is not None and not isinstance(
            self.plan_required, ModuleId
        ):
            raise ValueError("plan_required must be ModuleId or None.")

        if not self.path.startswith("/"):
            raise ValueError("path must be absolute.")


HR_MODULES: Tuple[ModuleConfig, ...] = (
    ModuleConfig(
        module_id=ModuleId.DASHBOARD,
        name="Dashboard",
        description="Your personalized overview and quick actions",
        path="/app/dashboard",
        min_role=Role.EMPLOYEE,
    ),
    ModuleConfig(
        module_id=ModuleId.EMPLOYEES,
        name="Employees",
        description="Manage employee records and profiles",
        path="/app/employees",
        min_role=Role.EMPLOYEE,
        plan_required=ModuleId.EMPLOYEES,
    ),
    ModuleConfig(
        module_id=ModuleId.DEPARTMENTS,
        name="Departments",
        description="Organize team structure",
        path="/app/departments",
        min_role=Role.EMPLOYEE,
        plan_required=ModuleId.DIRECTORY,
    ),
    ModuleConfig(
        module_id=ModuleId.LEAVE,
        name="Leave Management",
        description="Handle time-off requests",
        path="/app/leave",
        min_role=Role.EMPLOYEE,
        plan_required=ModuleId.LEAVE,
    ),
    ModuleConfig(
        module_id=ModuleId.TIME_TRACKING,
        name="Time Tracking",
        description="Track work hours and attendance",
        path="/app/time",
        min_role=Role.EMPLOYEE,
        plan_required=ModuleId.TIME_TRACKING,
    ),
    ModuleConfig(
        module_id=ModuleId.SHIFTS,
        name="Shift Management",
        description="Configure shifts and assignments",
        path="/app/shifts",
        min_role=Role.HR_MANAGER,
        plan_required=ModuleId.TIME_TRACKING,
    ),
    ModuleConfig(
        module_id=ModuleId.DOCUMENTS,
        name="Documents",
        description="Store and manage employee documents",
        path="/app/documents",
        min_role=Role.HR_MANAGER,
        plan_required=ModuleId.DOCUMENTS,
    ),
    ModuleConfig(
        module_id=ModuleId.RECRUITMENT,
        name="Recruitment",
        description="Manage job postings and candidates",
        path="/app/recruitment",
        min_role=Role.HR_MANAGER,
        plan_required=ModuleId.RECRUITMENT,
    ),
    ModuleConfig(
        module_id=ModuleId.PERFORMANCE,
        name="Performance",
        description="Track reviews and feedback",
        path="/app/performance",
        min_role=Role.MANAGER,
        plan_required=ModuleId.PERFORMANCE,
    ),
    ModuleConfig(
        module_id=ModuleId.PAYROLL,
        name="Payroll",
        description="Process payroll runs",
        path="/app/payroll",
        min_role=Role.HR_MANAGER,
        plan_required=ModuleId.PAYROLL,
    ),
    ModuleConfig(
        module_id=ModuleId.EXPENSES,
        name="Expenses",
        description="Submit and manage expense claims",
        path="/app/expenses",
        min_role=Role.EMPLOYEE,
        plan_required=ModuleId.EXPENSES,
    ),
    ModuleConfig(
        module_id=ModuleId.MY_TEAM,
        name="My Team",
        description="Manage your direct reports, approvals, and team calendar",
        path="/app/my-team",
        min_role=Role.MANAGER,
    ),
)

_CATALOG_BY_ID: Dict[ModuleId, ModuleConfig] = {
    module.module_id: module for module in HR_MODULES
}


def get_module(module_id: ModuleId) -> ModuleConfig | None:
    """Catalog entry for a module, or None when it is not a navigable module."""
    return _CATALOG_BY_ID.get(module_id)
