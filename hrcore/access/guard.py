"""
hrcore Access — Write Guard
===========================
Mutation entry point. A write passes only when BOTH hold:
  - the tenant allows writes (not impersonating, not frozen), and
  - the action's own gate (permission / role / module) passes.

The tenant-state denial is reported first.
"""

from __future__ import annotations

from typing import Optional

from hrcore.access.engine import AccessContext, PermissionRequirement, check_access
from hrcore.access.verdict import AccessVerdict
from hrcore.errors import WriteBlockedError
from hrcore.modules.catalog import ModuleId
from hrcore.rejection import RejectionReason
from hrcore.roles import Role
from hrcore.tenancy.state import TenantState
from hrcore.tenancy.subscriptions import SubscriptionStatus

_POLICY = "write_guard"


def write_block_message(state: TenantState) -> str:
    """Why the tenant cannot write, most specific cause first."""
    if state.is_frozen:
        return "Your account is frozen. Please update billing to make changes."
    if state.is_trial_expired:
        return "Your trial has expired. Please upgrade to continue."
    if state.is_past_due:
        return "Your payment is past due. Please update billing to make changes."
    if state.subscription_status == SubscriptionStatus.PAUSED:
        return "Your subscription is paused. Please reactivate to make changes."
    if state.subscription_status == SubscriptionStatus.CANCELED:
        return "Your subscription is canceled. Please subscribe to make changes."
    return "You cannot make changes at this time."


class WriteGuard:
    """Combines the writes-only check with an action's own gate."""

    def check(
        self,
        context: AccessContext,
        required_role: Optional[Role] = None,
        required_module: Optional[ModuleId] = None,
        permission: Optional[PermissionRequirement] = None,
    ) -> AccessVerdict:
        tenant_verdict = check_access(context, writes_only=True)
        if not tenant_verdict.has_access:
            return tenant_verdict
        return check_access(
            context,
            required_role=required_role,
            required_module=required_module,
            permission=permission,
        )

    def can_write(self, context: AccessContext, **gate) -> bool:
        return self.check(context, **gate).has_access


def guard_write(
    context: AccessContext,
    required_role: Optional[Role] = None,
    required_module: Optional[ModuleId] = None,
    permission: Optional[PermissionRequirement] = None,
) -> Optional[RejectionReason]:
    """
    Evaluate a write.

    Returns None if allowed, RejectionReason if blocked.
    """
    verdict = WriteGuard().check(
        context,
        required_role=required_role,
        required_module=required_module,
        permission=permission,
    )
    return verdict.to_rejection(_POLICY)


def require_write(
    context: AccessContext,
    required_role: Optional[Role] = None,
    required_module: Optional[ModuleId] = None,
    permission: Optional[PermissionRequirement] = None,
) -> None:
    """Raise WriteBlockedError unless the write is allowed."""
    rejection = guard_write(
        context,
        required_role=required_role,
        required_module=required_module,
        permission=permission,
    )
    if rejection is not None:
        raise WriteBlockedError(rejection)
