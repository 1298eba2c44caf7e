"""
Tests — Admin-Configurable Rules
================================
"""

from __future__ import annotations

import pytest

from hrcore.config import DEFAULT_TRIAL_TOTAL_DAYS, InMemoryConfigStore, RoleTemplate
from hrcore.modules import ModuleId
from hrcore.permissions import PermissionAction, PermissionModule, default_grants_for
from hrcore.plans import PLAN_PRO, PlanDefinition, PlanFeatures, has_module_access
from hrcore.roles import Role

M = PermissionModule
A = PermissionAction


class TestRoleTemplate:
    def test_super_admin_template_must_be_empty(self):
        with pytest.raises(ValueError, match="super_admin"):
            RoleTemplate(role=Role.SUPER_ADMIN, grants={(M.DASHBOARD, A.READ)})

    def test_grants_must_be_catalog_pairs(self):
        with pytest.raises(ValueError, match="dashboard:delete"):
            RoleTemplate(role=Role.EMPLOYEE, grants={(M.DASHBOARD, A.DELETE)})

    def test_grants_frozen(self):
        template = RoleTemplate(role=Role.EMPLOYEE, grants=[(M.DASHBOARD, A.READ)])
        assert template.grants == frozenset({(M.DASHBOARD, A.READ)})


class TestInMemoryConfigStore:
    def test_stock_presets(self):
        store = InMemoryConfigStore()
        pro = store.get_plan(PLAN_PRO)
        assert pro is not None
        assert has_module_access(pro.features, ModuleId.PERFORMANCE)
        assert store.get_plan("Platinum") is None

    def test_stock_templates(self):
        store = InMemoryConfigStore()
        for role in Role:
            assert store.get_role_template(role).grants == default_grants_for(role)

    def test_custom_plan(self):
        store = InMemoryConfigStore()
        store.add_plan(
            PlanDefinition(
                name="Payroll Only",
                features=PlanFeatures(modules=[ModuleId.PAYROLL]),
            )
        )
        plan = store.get_plan("Payroll Only")
        assert plan.features.modules == (ModuleId.PAYROLL,)

    def test_trial_length(self):
        assert InMemoryConfigStore().get_trial_total_days() == DEFAULT_TRIAL_TOTAL_DAYS == 14
        assert InMemoryConfigStore(trial_total_days=30).get_trial_total_days() == 30
        with pytest.raises(ValueError):
            InMemoryConfigStore(trial_total_days=0)
