"""
hrcore Plans - Public API
=========================
"""

from hrcore.plans.models import (
    ALL_MODULES,
    PlanDefinition,
    PlanFeatures,
    SupportTier,
    has_module_access,
)
from hrcore.plans.presets import (
    DEFAULT_PLANS,
    PLAN_BASIC,
    PLAN_ENTERPRISE,
    PLAN_FREE,
    PLAN_MODULES,
    PLAN_PRO,
)
from hrcore.plans.provider import InMemoryPlanProvider, PlanProvider

__all__ = [
    "ALL_MODULES",
    "SupportTier",
    "PlanFeatures",
    "PlanDefinition",
    "has_module_access",
    "PLAN_FREE",
    "PLAN_BASIC",
    "PLAN_PRO",
    "PLAN_ENTERPRISE",
    "PLAN_MODULES",
    "DEFAULT_PLANS",
    "PlanProvider",
    "InMemoryPlanProvider",
]
