"""
Tests — Module Catalog and Navigation Access
============================================
"""

from __future__ import annotations

import pytest

from hrcore.modules import (
    HR_MODULES,
    MODULE_PERMISSION_MAP,
    ModuleAccessReason,
    ModuleConfig,
    ModuleId,
    compute_module_access,
    get_module,
)
from hrcore.permissions import PermissionModule, PermissionResolver, default_grants_for
from hrcore.plans import ALL_MODULES, PlanFeatures
from hrcore.roles import Role
from hrcore.tenancy import TenantState


def _state(modules=ALL_MODULES, frozen: bool = False) -> TenantState:
    return TenantState(
        is_frozen=frozen,
        plan_features=PlanFeatures(modules=modules),
    )


def _resolver(role: Role) -> PermissionResolver:
    return PermissionResolver(role=role, role_grants=default_grants_for(role))


# ══════════════════════════════════════════════════════════════
# CATALOG
# ══════════════════════════════════════════════════════════════


class TestCatalog:
    def test_catalog_order_and_size(self):
        assert len(HR_MODULES) == 12
        assert HR_MODULES[0].module_id == ModuleId.DASHBOARD
        assert HR_MODULES[-1].module_id == ModuleId.MY_TEAM

    def test_min_roles(self):
        assert get_module(ModuleId.SHIFTS).min_role == Role.HR_MANAGER
        assert get_module(ModuleId.PERFORMANCE).min_role == Role.MANAGER
        assert get_module(ModuleId.EXPENSES).min_role == Role.EMPLOYEE

    def test_plan_required(self):
        assert get_module(ModuleId.DASHBOARD).plan_required is None
        assert get_module(ModuleId.DEPARTMENTS).plan_required == ModuleId.DIRECTORY
        assert get_module(ModuleId.SHIFTS).plan_required == ModuleId.TIME_TRACKING

    def test_non_navigable_module_has_no_entry(self):
        assert get_module(ModuleId.AUDIT) is None

    def test_entry_validation(self):
        with pytest.raises(ValueError, match="absolute"):
            ModuleConfig(
                module_id=ModuleId.AUDIT,
                name="Audit",
                description="Audit trail",
                path="app/audit",
                min_role=Role.COMPANY_ADMIN,
            )
        with pytest.raises(ValueError):
            ModuleConfig(
                module_id=ModuleId.AUDIT,
                name="Audit",
                description="Audit trail",
                path="/app/audit",
                min_role="company_admin",
            )

    def test_shifts_map_to_time_tracking_permissions(self):
        assert MODULE_PERMISSION_MAP[ModuleId.SHIFTS] == PermissionModule.TIME_TRACKING
        assert ModuleId.MY_TEAM not in MODULE_PERMISSION_MAP


# ══════════════════════════════════════════════════════════════
# ACCESS LISTING
# ══════════════════════════════════════════════════════════════


class TestModuleAccessListing:
    def test_frozen_tenant_blocks_everything(self):
        listing = compute_module_access(Role.SUPER_ADMIN, _state(frozen=True))
        assert listing.accessible == ()
        assert {m.reason for m in listing.modules} == {ModuleAccessReason.FROZEN}

    def test_role_and_plan_without_permissions(self):
        listing = compute_module_access(
            Role.EMPLOYEE,
            _state(modules=[ModuleId.EMPLOYEES, ModuleId.DIRECTORY]),
        )
        assert listing.get(ModuleId.DASHBOARD).reason == ModuleAccessReason.OK
        assert listing.get(ModuleId.EMPLOYEES).reason == ModuleAccessReason.OK
        assert listing.get(ModuleId.DEPARTMENTS).reason == ModuleAccessReason.OK
        assert listing.get(ModuleId.LEAVE).reason == ModuleAccessReason.NO_PLAN
        assert listing.get(ModuleId.PAYROLL).reason == ModuleAccessReason.NO_ROLE
        assert listing.get(ModuleId.MY_TEAM).reason == ModuleAccessReason.NO_ROLE

    def test_permission_grant_unlocks_module(self):
        listing = compute_module_access(
            Role.EMPLOYEE, _state(), _resolver(Role.EMPLOYEE)
        )
        # time_tracking grants open shifts despite its hr_manager minimum
        shifts = listing.get(ModuleId.SHIFTS)
        assert shifts.has_access is True
        assert shifts.reason == ModuleAccessReason.PERMISSION_GRANTED

    def test_permission_grant_still_needs_plan(self):
        listing = compute_module_access(
            Role.EMPLOYEE,
            _state(modules=[ModuleId.EMPLOYEES]),
            _resolver(Role.EMPLOYEE),
        )
        leave = listing.get(ModuleId.LEAVE)
        assert leave.has_access is False
        assert leave.reason == ModuleAccessReason.NO_PLAN

    def test_no_grants_falls_back_to_role(self):
        listing = compute_module_access(
            Role.EMPLOYEE, _state(), _resolver(Role.EMPLOYEE)
        )
        payroll = listing.get(ModuleId.PAYROLL)
        assert payroll.reason == ModuleAccessReason.NO_ROLE
        assert not listing.can_access_module(ModuleId.PAYROLL)

    def test_accessible_and_restricted_partition_catalog(self):
        listing = compute_module_access(
            Role.MANAGER, _state(), _resolver(Role.MANAGER)
        )
        assert len(listing.accessible) + len(listing.restricted) == len(HR_MODULES)
        assert listing.can_access_module(ModuleId.MY_TEAM)
        assert not listing.can_access_module(ModuleId.AUDIT)

    def test_missing_module_list_means_unrestricted(self):
        listing = compute_module_access(Role.HR_MANAGER, TenantState())
        assert listing.can_access_module(ModuleId.PAYROLL)
