"""
hrcore Tenancy — Company and Subscription Snapshots
===================================================
Read-only views of the records the tenant state is derived from.
Loaded by the host application; nothing here persists them.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional

from hrcore.plans.models import PlanFeatures


# ══════════════════════════════════════════════════════════════
# SUBSCRIPTION STATUS
# ══════════════════════════════════════════════════════════════

class SubscriptionStatus(Enum):
    ACTIVE = "active"
    TRIALING = "trialing"
    PAST_DUE = "past_due"
    PAUSED = "paused"
    CANCELED = "canceled"
    TRIAL_EXPIRED = "trial_expired"


# Statuses under which the company may not write.
WRITE_BLOCKING_STATUSES = frozenset({
    SubscriptionStatus.PAST_DUE,
    SubscriptionStatus.PAUSED,
    SubscriptionStatus.CANCELED,
    SubscriptionStatus.TRIAL_EXPIRED,
})


# ══════════════════════════════════════════════════════════════
# SNAPSHOTS
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class CompanySnapshot:
    """
    The company as seen by the current session.

    is_active=False means the account is frozen (billing lapse or an
    administrative freeze).
    """

    company_id: uuid.UUID
    name: str
    is_active: bool = True
    slug: Optional[str] = None

    def __post_init__(self):
        if not isinstance(self.company_id, uuid.UUID):
            raise ValueError("company_id must be UUID.")

        if not self.name or not isinstance(self.name, str):
            raise ValueError("name must be a non-empty string.")


@dataclass(frozen=True)
class SubscriptionSnapshot:
    """Current subscription of a company."""

    status: SubscriptionStatus
    plan_name: Optional[str] = None
    trial_ends_at: Optional[datetime] = None
    trial_total_days: Optional[int] = None
    features: Optional[PlanFeatures] = None

    def __post_init__(self):
        if isinstance(self.status, str):
            object.__setattr__(self, "status", SubscriptionStatus(self.status))

        if not isinstance(self.status, SubscriptionStatus):
            raise ValueError("status must be SubscriptionStatus.")

        if self.trial_ends_at is not None and not is_aware(self.trial_ends_at):
            raise ValueError("trial_ends_at must be timezone-aware.")

        if self.trial_total_days is not None and self.trial_total_days <= 0:
            raise ValueError("trial_total_days must be positive or None.")


def is_aware(value: datetime) -> bool:
    return value.tzinfo is not None and value.utcoffset() is not None
