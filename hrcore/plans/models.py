"""
hrcore Plans — Plan Feature Models
==================================
Immutable plan feature sets and the plan-gated module check.

The module set of a plan is either an explicit list of ModuleId values
or the sentinel "all".
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, Optional, Tuple, Union

from hrcore.modules.catalog import ModuleId


ALL_MODULES = "all"


class SupportTier(Enum):
    COMMUNITY = "community"
    EMAIL = "email"
    PRIORITY = "priority"
    DEDICATED = "dedicated"


def _normalize_modules(
    modules: Union[str, Iterable[Union[ModuleId, str]]],
) -> Union[str, Tuple[ModuleId, ...]]:
    if isinstance(modules, str):
        if modules != ALL_MODULES:
            raise ValueError(
                f"modules must be '{ALL_MODULES}' or a collection of module ids."
            )
        return ALL_MODULES

    normalized = set()
    for module in modules:
        # Stored payloads may carry the sentinel inside a list: ["all"].
        if module == ALL_MODULES:
            return ALL_MODULES
        if isinstance(module, ModuleId):
            normalized.add(module)
            continue
        try:
            normalized.add(ModuleId(str(module)))
        except ValueError:
            raise ValueError(f"module '{module}' not valid.") from None
    return tuple(sorted(normalized, key=lambda m: m.value))


@dataclass(frozen=True)
class PlanFeatures:
    """Feature flags granted by a subscription plan."""

    modules: Union[str, Tuple[ModuleId, ...]]
    max_employees: Optional[int] = None  # None = unlimited
    max_storage_gb: int = 1
    support: SupportTier = SupportTier.COMMUNITY
    sso: bool = False
    api: bool = False
    audit: bool = False

    def __post_init__(self):
        object.__setattr__(self, "modules", _normalize_modules(self.modules))

        if self.max_employees is not None and self.max_employees < 0:
            raise ValueError("max_employees must be >= 0 or None.")

        if self.max_storage_gb < 0:
            raise ValueError("max_storage_gb must be >= 0.")

        if not isinstance(self.support, SupportTier):
            raise ValueError("support must be SupportTier.")

    @property
    def includes_all_modules(self) -> bool:
        return self.modules == ALL_MODULES

    def allows_employee_count(self, count: int) -> bool:
        if self.max_employees is None:
            return True
        return count <= self.max_employees

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PlanFeatures":
        """Build from a subscription's stored feature payload."""
        return cls(
            modules=data.get("modules") or (),
            max_employees=data.get("max_employees"),
            max_storage_gb=int(data.get("max_storage_gb", 1)),
            support=SupportTier(data.get("support", SupportTier.COMMUNITY.value)),
            sso=bool(data.get("sso", False)),
            api=bool(data.get("api", False)),
            audit=bool(data.get("audit", False)),
        )


@dataclass(frozen=True)
class PlanDefinition:
    """A named plan and its features."""

    name: str
    features: PlanFeatures

    def __post_init__(self):
        if not self.name or not isinstance(self.name, str):
            raise ValueError("name must be a non-empty string.")


# ══════════════════════════════════════════════════════════════
# PLAN GATING
# ══════════════════════════════════════════════════════════════

def has_module_access(
    plan_features: Optional[PlanFeatures],
    module_id: ModuleId,
) -> bool:
    """
    Plan-gated access only. Role gating is the caller's separate check.

    No plan means no access.
    """
    if plan_features is None:
        return False
    if plan_features.includes_all_modules:
        return True
    return module_id in plan_features.modules
