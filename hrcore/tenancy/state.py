"""
hrcore Tenancy — Tenant Lifecycle State
=======================================
Derives the per-load tenant state from the company, its subscription,
and any active impersonation session.

The derivation is pure: the same snapshots and `now` always give the
same TenantState. It is recomputed on every tenant-context load and
never stored.
"""

from __future__ import annotations

import math
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from hrcore.config.rules import ConfigStore, InMemoryConfigStore
from hrcore.modules.catalog import ModuleId
from hrcore.plans.models import PlanFeatures, has_module_access
from hrcore.roles import Role
from hrcore.tenancy.impersonation import ImpersonationSession
from hrcore.tenancy.subscriptions import (
    WRITE_BLOCKING_STATUSES,
    CompanySnapshot,
    SubscriptionSnapshot,
    SubscriptionStatus,
    is_aware,
)

_SECONDS_PER_DAY = 24 * 60 * 60


@dataclass(frozen=True)
class TenantState:
    """
    Lifecycle flags for the company in the current session.

    Defaults describe an active, writable company with no subscription
    data and no module restriction.
    """

    company_id: Optional[uuid.UUID] = None
    is_frozen: bool = False
    is_trialing: bool = False
    is_trial_expired: bool = False
    is_past_due: bool = False
    is_impersonating: bool = False
    subscription_status: Optional[SubscriptionStatus] = None
    effective_status: Optional[SubscriptionStatus] = None
    trial_days_remaining: Optional[int] = None
    trial_total_days: Optional[int] = None
    plan_features: Optional[PlanFeatures] = None
    can_write: bool = True

    def __post_init__(self):
        if self.trial_days_remaining is not None and self.trial_days_remaining < 0:
            raise ValueError("trial_days_remaining must be >= 0 or None.")

    @property
    def plan_modules(self):
        if self.plan_features is None:
            return None
        return self.plan_features.modules

    def has_module(self, module_id: ModuleId) -> bool:
        """
        Plan view of the tenant context. A subscription without any
        module list leaves every module available.
        """
        if self.plan_features is None or not self.plan_features.modules:
            return True
        return has_module_access(self.plan_features, module_id)


def _trial_days_remaining(
    trial_ends_at: Optional[datetime], now: datetime
) -> Optional[int]:
    if trial_ends_at is None:
        return None
    seconds = (trial_ends_at - now).total_seconds()
    return max(0, math.ceil(seconds / _SECONDS_PER_DAY))


def derive_tenant_state(
    company: Optional[CompanySnapshot],
    subscription: Optional[SubscriptionSnapshot] = None,
    impersonation: Optional[ImpersonationSession] = None,
    now: Optional[datetime] = None,
    config: Optional[ConfigStore] = None,
) -> TenantState:
    """
    Build the TenantState for one load.

    `impersonation` is the caller's active session, if any; it only
    counts when it targets this company.
    """
    now = now or datetime.now(timezone.utc)
    if not is_aware(now):
        raise ValueError("now must be timezone-aware.")
    config = config or InMemoryConfigStore()

    is_frozen = (not company.is_active) if company is not None else False

    status = subscription.status if subscription is not None else None
    trial_ends_at = subscription.trial_ends_at if subscription is not None else None

    is_trial_expired = (
        status == SubscriptionStatus.TRIALING
        and trial_ends_at is not None
        and trial_ends_at < now
    )
    effective_status = (
        SubscriptionStatus.TRIAL_EXPIRED if is_trial_expired else status
    )

    trial_days_remaining = _trial_days_remaining(trial_ends_at, now)
    if is_trial_expired:
        trial_days_remaining = 0

    trial_total_days = None
    if trial_ends_at is not None:
        trial_total_days = (
            subscription.trial_total_days or config.get_trial_total_days()
        )

    is_impersonating = (
        impersonation is not None
        and company is not None
        and impersonation.company_id == company.company_id
    )

    can_write = (
        not is_frozen
        and not is_trial_expired
        and status not in WRITE_BLOCKING_STATUSES
    )

    return TenantState(
        company_id=company.company_id if company is not None else None,
        is_frozen=is_frozen,
        is_trialing=status == SubscriptionStatus.TRIALING and not is_trial_expired,
        is_trial_expired=is_trial_expired,
        is_past_due=status == SubscriptionStatus.PAST_DUE,
        is_impersonating=is_impersonating,
        subscription_status=status,
        effective_status=effective_status,
        trial_days_remaining=trial_days_remaining,
        trial_total_days=trial_total_days,
        plan_features=subscription.features if subscription is not None else None,
        can_write=can_write,
    )


def effective_role(role: Optional[Role], state: TenantState) -> Optional[Role]:
    """While impersonating, the platform admin views the company as its admin."""
    if state.is_impersonating:
        return Role.COMPANY_ADMIN
    return role


# ══════════════════════════════════════════════════════════════
# WRITE ELIGIBILITY
# ══════════════════════════════════════════════════════════════

class WriteEligibility(Enum):
    ACTIVE_WRITABLE = "ACTIVE_WRITABLE"
    FROZEN_READONLY = "FROZEN_READONLY"
    IMPERSONATED_READONLY = "IMPERSONATED_READONLY"


def write_eligibility(state: TenantState) -> WriteEligibility:
    """Impersonation wins over frozen; any state can follow any other."""
    if state.is_impersonating:
        return WriteEligibility.IMPERSONATED_READONLY
    if state.is_frozen:
        return WriteEligibility.FROZEN_READONLY
    return WriteEligibility.ACTIVE_WRITABLE
