"""
hrcore Permissions - Modules, Actions and Catalog
=================================================
Fine-grained permission key space: every (module, action) pair is a
distinct permission unit. The catalog lists the pairs that exist.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Tuple


class PermissionModule(Enum):
    DASHBOARD = "dashboard"
    EMPLOYEES = "employees"
    DEPARTMENTS = "departments"
    LEAVE = "leave"
    TIME_TRACKING = "time_tracking"
    DOCUMENTS = "documents"
    RECRUITMENT = "recruitment"
    PERFORMANCE = "performance"
    PAYROLL = "payroll"
    EXPENSES = "expenses"
    COMPLIANCE = "compliance"
    AUDIT = "audit"
    INTEGRATIONS = "integrations"
    SETTINGS = "settings"
    USERS = "users"
    SHIFTS = "shifts"
    ATTENDANCE = "attendance"
    MY_TEAM = "my_team"


class PermissionAction(Enum):
    READ = "read"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
    APPROVE = "approve"
    PROCESS = "process"
    VERIFY = "verify"
    EXPORT = "export"
    MANAGE = "manage"
    LOCK = "lock"


class PermissionSource(Enum):
    """Where a resolved grant or denial came from."""

    SUPER_ADMIN = "super_admin"
    EXPLICIT_ALLOW = "explicit_allow"
    EXPLICIT_DENY = "explicit_deny"
    ROLE = "role"
    NONE = "none"


MODULE_LABELS: Dict[PermissionModule, str] = {
    PermissionModule.DASHBOARD: "Dashboard",
    PermissionModule.EMPLOYEES: "Employees",
    PermissionModule.DEPARTMENTS: "Departments",
    PermissionModule.LEAVE: "Leave Management",
    PermissionModule.TIME_TRACKING: "Time Tracking",
    PermissionModule.DOCUMENTS: "Documents",
    PermissionModule.RECRUITMENT: "Recruitment",
    PermissionModule.PERFORMANCE: "Performance",
    PermissionModule.PAYROLL: "Payroll",
    PermissionModule.EXPENSES: "Expenses",
    PermissionModule.COMPLIANCE: "Compliance",
    PermissionModule.AUDIT: "Audit Logs",
    PermissionModule.INTEGRATIONS: "Integrations",
    PermissionModule.SETTINGS: "Settings",
    PermissionModule.USERS: "Users",
    PermissionModule.SHIFTS: "Shift Management",
    PermissionModule.ATTENDANCE: "Attendance",
    PermissionModule.MY_TEAM: "My Team",
}

ACTION_LABELS: Dict[PermissionAction, str] = {
    PermissionAction.READ: "View",
    PermissionAction.CREATE: "Create",
    PermissionAction.UPDATE: "Edit",
    PermissionAction.DELETE: "Delete",
    PermissionAction.APPROVE: "Approve",
    PermissionAction.PROCESS: "Process",
    PermissionAction.VERIFY: "Verify",
    PermissionAction.EXPORT: "Export",
    PermissionAction.MANAGE: "Manage",
    PermissionAction.LOCK: "Lock",
}


# ══════════════════════════════════════════════════════════════
# PERMISSION CATALOG — the pairs that exist, with display names
# ══════════════════════════════════════════════════════════════

_M = PermissionModule
_A = PermissionAction

PERMISSION_CATALOG: Dict[Tuple[PermissionModule, PermissionAction], str] = {
    (_M.DASHBOARD, _A.READ): "View Dashboard",

    (_M.EMPLOYEES, _A.READ): "View Employees",
    (_M.EMPLOYEES, _A.CREATE): "Create Employees",
    (_M.EMPLOYEES, _A.UPDATE): "Update Employees",
    (_M.EMPLOYEES, _A.DELETE): "Delete Employees",
    (_M.EMPLOYEES, _A.EXPORT): "Export Employees",

    (_M.DEPARTMENTS, _A.READ): "View Departments",
    (_M.DEPARTMENTS, _A.CREATE): "Create Departments",
    (_M.DEPARTMENTS, _A.UPDATE): "Update Departments",
    (_M.DEPARTMENTS, _A.DELETE): "Delete Departments",

    (_M.LEAVE, _A.READ): "View Leave",
    (_M.LEAVE, _A.CREATE): "Request Leave",
    (_M.LEAVE, _A.UPDATE): "Update Leave",
    (_M.LEAVE, _A.DELETE): "Cancel Leave",
    (_M.LEAVE, _A.APPROVE): "Approve Leave",

    (_M.TIME_TRACKING, _A.READ): "View Time",
    (_M.TIME_TRACKING, _A.CREATE): "Clock In/Out",
    (_M.TIME_TRACKING, _A.UPDATE): "Update Time",
    (_M.TIME_TRACKING, _A.DELETE): "Delete Time",
    (_M.TIME_TRACKING, _A.APPROVE): "Approve Time",

    (_M.DOCUMENTS, _A.READ): "View Documents",
    (_M.DOCUMENTS, _A.CREATE): "Upload Documents",
    (_M.DOCUMENTS, _A.UPDATE): "Update Documents",
    (_M.DOCUMENTS, _A.DELETE): "Delete Documents",
    (_M.DOCUMENTS, _A.VERIFY): "Verify Documents",
    (_M.DOCUMENTS, _A.PROCESS): "Process Documents",

    (_M.RECRUITMENT, _A.READ): "View Recruitment",
    (_M.RECRUITMENT, _A.CREATE): "Create Jobs",
    (_M.RECRUITMENT, _A.UPDATE): "Update Recruitment",
    (_M.RECRUITMENT, _A.DELETE): "Delete Recruitment",
    (_M.RECRUITMENT, _A.APPROVE): "Manage Offers",

    (_M.PERFORMANCE, _A.READ): "View Performance",
    (_M.PERFORMANCE, _A.CREATE): "Create Reviews",
    (_M.PERFORMANCE, _A.UPDATE): "Update Reviews",
    (_M.PERFORMANCE, _A.DELETE): "Delete Reviews",
    (_M.PERFORMANCE, _A.APPROVE): "Finalize Reviews",

    (_M.PAYROLL, _A.READ): "View Payroll",
    (_M.PAYROLL, _A.CREATE): "Create Payroll",
    (_M.PAYROLL, _A.UPDATE): "Update Payroll",
    (_M.PAYROLL, _A.DELETE): "Delete Payroll",
    (_M.PAYROLL, _A.PROCESS): "Process Payroll",
    (_M.PAYROLL, _A.APPROVE): "Approve Payroll",
    (_M.PAYROLL, _A.EXPORT): "Export Payroll",

    (_M.EXPENSES, _A.READ): "View Expenses",
    (_M.EXPENSES, _A.CREATE): "Submit Expenses",
    (_M.EXPENSES, _A.UPDATE): "Update Expenses",
    (_M.EXPENSES, _A.DELETE): "Delete Expenses",
    (_M.EXPENSES, _A.APPROVE): "Approve Expenses",

    (_M.COMPLIANCE, _A.READ): "View Compliance",
    (_M.COMPLIANCE, _A.MANAGE): "Manage Compliance",

    (_M.AUDIT, _A.READ): "View Audit Logs",
    (_M.AUDIT, _A.EXPORT): "Export Audit Logs",

    (_M.INTEGRATIONS, _A.READ): "View Integrations",
    (_M.INTEGRATIONS, _A.MANAGE): "Manage Integrations",

    (_M.SETTINGS, _A.READ): "View Settings",
    (_M.SETTINGS, _A.UPDATE): "Update Settings",

    (_M.USERS, _A.READ): "View Users",
    (_M.USERS, _A.CREATE): "Invite Users",
    (_M.USERS, _A.UPDATE): "Update Users",
    (_M.USERS, _A.DELETE): "Remove Users",

    (_M.SHIFTS, _A.READ): "View Shifts",
    (_M.SHIFTS, _A.CREATE): "Create Shifts",
    (_M.SHIFTS, _A.UPDATE): "Update Shifts",
    (_M.SHIFTS, _A.DELETE): "Delete Shifts",
    (_M.SHIFTS, _A.MANAGE): "Manage Shift Assignments",

    (_M.ATTENDANCE, _A.READ): "View Attendance",
    (_M.ATTENDANCE, _A.CREATE): "Generate Attendance",
    (_M.ATTENDANCE, _A.UPDATE): "Update Attendance",
    (_M.ATTENDANCE, _A.LOCK): "Lock Attendance",
    (_M.ATTENDANCE, _A.EXPORT): "Export Attendance",
}

del _M, _A


def is_catalog_permission(
    module: PermissionModule, action: PermissionAction
) -> bool:
    return (module, action) in PERMISSION_CATALOG


def permission_key(module: PermissionModule, action: PermissionAction) -> str:
    """Canonical storage key: 'module:action'."""
    return f"{module.value}:{action.value}"


def parse_permission_key(key: str) -> Tuple[PermissionModule, PermissionAction]:
    module, sep, action = str(key).partition(":")
    if not sep:
        raise ValueError(f"permission key '{key}' must be 'module:action'.")
    return PermissionModule(module), PermissionAction(action)
