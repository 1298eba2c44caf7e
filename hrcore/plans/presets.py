"""
hrcore Plans — Named Plan Presets
=================================
The module lists sold under each plan name. Seed data for the config
store; tenants resolve their actual features through a PlanProvider.
"""

from __future__ import annotations

from typing import Dict, Tuple

from hrcore.modules.catalog import ModuleId
from hrcore.plans.models import PlanDefinition, PlanFeatures, SupportTier


PLAN_FREE = "Free"
PLAN_BASIC = "Basic"
PLAN_PRO = "Pro"
PLAN_ENTERPRISE = "Enterprise"

PLAN_MODULES: Dict[str, Tuple[ModuleId, ...]] = {
    PLAN_FREE: (ModuleId.EMPLOYEES, ModuleId.DIRECTORY),
    PLAN_BASIC: (
        ModuleId.EMPLOYEES,
        ModuleId.DIRECTORY,
        ModuleId.LEAVE,
        ModuleId.TIME_TRACKING,
    ),
    PLAN_PRO: (
        ModuleId.EMPLOYEES,
        ModuleId.DIRECTORY,
        ModuleId.LEAVE,
        ModuleId.TIME_TRACKING,
        ModuleId.DOCUMENTS,
        ModuleId.RECRUITMENT,
        ModuleId.PERFORMANCE,
    ),
    PLAN_ENTERPRISE: (
        ModuleId.EMPLOYEES,
        ModuleId.DIRECTORY,
        ModuleId.LEAVE,
        ModuleId.TIME_TRACKING,
        ModuleId.DOCUMENTS,
        ModuleId.RECRUITMENT,
        ModuleId.PERFORMANCE,
        ModuleId.PAYROLL,
        ModuleId.COMPLIANCE,
        ModuleId.AUDIT,
        ModuleId.INTEGRATIONS,
    ),
}


DEFAULT_PLANS: Tuple[PlanDefinition, ...] = (
    PlanDefinition(
        name=PLAN_FREE,
        features=PlanFeatures(
            modules=PLAN_MODULES[PLAN_FREE],
            max_employees=5,
            max_storage_gb=1,
        ),
    ),
    PlanDefinition(
        name=PLAN_BASIC,
        features=PlanFeatures(
            modules=PLAN_MODULES[PLAN_BASIC],
            max_employees=25,
            max_storage_gb=5,
            support=SupportTier.EMAIL,
        ),
    ),
    PlanDefinition(
        name=PLAN_PRO,
        features=PlanFeatures(
            modules=PLAN_MODULES[PLAN_PRO],
            max_employees=100,
            max_storage_gb=50,
            support=SupportTier.PRIORITY,
        ),
    ),
    PlanDefinition(
        name=PLAN_ENTERPRISE,
        features=PlanFeatures(
            modules=PLAN_MODULES[PLAN_ENTERPRISE],
            max_employees=None,
            max_storage_gb=500,
            support=SupportTier.DEDICATED,
            sso=True,
            api=True,
            audit=True,
        ),
    ),
)
