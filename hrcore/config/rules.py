"""
hrcore Config — Admin-Configurable Rules
========================================
Plan presets, role-default templates, and trial defaults come from
admin-configurable data, not from engine logic.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterable, Optional, Protocol, Tuple

from hrcore.permissions.constants import (
    PERMISSION_CATALOG,
    PermissionAction,
    PermissionModule,
)
from hrcore.permissions.defaults import DEFAULT_ROLE_GRANTS
from hrcore.plans.models import PlanDefinition
from hrcore.plans.presets import DEFAULT_PLANS
from hrcore.roles import Role

PermissionPair = Tuple[PermissionModule, PermissionAction]

DEFAULT_TRIAL_TOTAL_DAYS = 14


# ══════════════════════════════════════════════════════════════
# ROLE TEMPLATE
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class RoleTemplate:
    """Default grants applied to a role when a company is seeded or reset."""

    role: Role
    grants: FrozenSet[PermissionPair] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        object.__setattr__(self, "grants", frozenset(self.grants))
        if self.role == Role.SUPER_ADMIN and self.grants:
            raise ValueError("super_admin template must be empty.")
        unknown = [pair for pair in self.grants if pair not in PERMISSION_CATALOG]
        if unknown:
            raise ValueError(
                "template grants must be catalog permissions, got: "
                f"{sorted(f'{m.value}:{a.value}' for m, a in unknown)}"
            )


# ══════════════════════════════════════════════════════════════
# CONFIG STORE PROTOCOL
# ══════════════════════════════════════════════════════════════

class ConfigStore(Protocol):
    """
    Protocol for admin-configured rule storage.

    Implementations may back this with a database, file, or in-memory store.
    """

    def get_plan(self, name: str) -> Optional[PlanDefinition]:
        """Fetch a plan preset by name."""
        ...  # pragma: no cover

    def get_role_template(self, role: Role) -> RoleTemplate:
        """Fetch the default grants template for a role."""
        ...  # pragma: no cover

    def get_trial_total_days(self) -> int:
        """Length of a new trial, used when a subscription does not say."""
        ...  # pragma: no cover


# ══════════════════════════════════════════════════════════════
# IN-MEMORY CONFIG STORE (for testing / bootstrap)
# ══════════════════════════════════════════════════════════════

class InMemoryConfigStore:
    """In-memory config store seeded with the stock presets and templates."""

    def __init__(
        self,
        plans: Iterable[PlanDefinition] = DEFAULT_PLANS,
        templates: Iterable[RoleTemplate] | None = None,
        trial_total_days: int = DEFAULT_TRIAL_TOTAL_DAYS,
    ) -> None:
        if trial_total_days <= 0:
            raise ValueError("trial_total_days must be positive.")

        self._plans: Dict[str, PlanDefinition] = {}
        for plan in plans:
            self.add_plan(plan)

        self._templates: Dict[Role, RoleTemplate] = {
            role: RoleTemplate(role=role, grants=grants)
            for role, grants in DEFAULT_ROLE_GRANTS.items()
        }
        for template in templates or ():
            self.set_role_template(template)

        self._trial_total_days = trial_total_days

    def add_plan(self, plan: PlanDefinition) -> None:
        self._plans[plan.name] = plan

    def set_role_template(self, template: RoleTemplate) -> None:
        self._templates[template.role] = template

    def get_plan(self, name: str) -> Optional[PlanDefinition]:
        return self._plans.get(name)

    def get_role_template(self, role: Role) -> RoleTemplate:
        return self._templates.get(role, RoleTemplate(role=role))

    def get_trial_total_days(self) -> int:
        return self._trial_total_days
