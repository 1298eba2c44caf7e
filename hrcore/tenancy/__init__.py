"""
hrcore Tenancy - Public API
===========================
"""

from hrcore.tenancy.guard import TenantGuard, is_valid_uuid, validate_id
from hrcore.tenancy.impersonation import (
    ImpersonationLogEntry,
    ImpersonationRegistry,
    ImpersonationSession,
)
from hrcore.tenancy.state import (
    TenantState,
    WriteEligibility,
    derive_tenant_state,
    effective_role,
    write_eligibility,
)
from hrcore.tenancy.subscriptions import (
    CompanySnapshot,
    SubscriptionSnapshot,
    SubscriptionStatus,
)

__all__ = [
    "SubscriptionStatus",
    "CompanySnapshot",
    "SubscriptionSnapshot",
    "ImpersonationSession",
    "ImpersonationLogEntry",
    "ImpersonationRegistry",
    "TenantState",
    "derive_tenant_state",
    "effective_role",
    "WriteEligibility",
    "write_eligibility",
    "TenantGuard",
    "is_valid_uuid",
    "validate_id",
]
