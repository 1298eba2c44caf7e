"""
hrcore Access — Unified Access Decision Engine
==============================================
Combines tenant state, fine-grained permissions, the role hierarchy and
plan gating into one verdict.

Evaluation order (first failure wins):
  1. writes_only   → impersonating, then frozen; otherwise GRANT at once
  2. permission    → denied by the resolver
  3. required_role → below the minimum rank
  4. required_module → missing from the plan
  5. tenant frozen
  6. GRANT

A call without options always grants. The engine never caches: every
verdict is computed from the context it is handed.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from typing import Optional, Tuple

from hrcore.access.verdict import AccessVerdict, DenialReason
from hrcore.modules.catalog import ModuleId
from hrcore.permissions.constants import (
    ACTION_LABELS,
    PermissionAction,
    PermissionModule,
)
from hrcore.permissions.provider import PermissionProvider
from hrcore.permissions.resolver import PermissionResolver
from hrcore.roles import Role, meets_minimum
from hrcore.tenancy.state import TenantState, effective_role

logger = logging.getLogger("hrcore.access")

PermissionRequirement = Tuple[PermissionModule, PermissionAction]

MSG_IMPERSONATING = "Read-only mode. Exit impersonation to make changes."
MSG_FROZEN_WRITES = "Account is frozen. Write operations are disabled."
MSG_PLAN_UPGRADE = "This feature requires upgrading your plan."
MSG_FROZEN = "Account is frozen. Please update billing."


# ══════════════════════════════════════════════════════════════
# ACCESS CONTEXT
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class AccessContext:
    """
    Everything a decision depends on, passed explicitly.

    permissions=None means the subject's grants are not loaded; any
    fine-grained permission check then denies.
    """

    role: Optional[Role]
    tenant_state: TenantState
    permissions: Optional[PermissionResolver] = None
    company_id: Optional[uuid.UUID] = None
    user_id: str = ""


def resolve_access_context(
    user_id: Optional[str],
    company_id: Optional[uuid.UUID],
    tenant_state: Optional[TenantState],
    provider: PermissionProvider,
    role: Optional[Role] = None,
) -> Optional[AccessContext]:
    """
    Build the context for one request.

    Returns None while the session or tenant is not resolved; callers
    treat None as deny.
    """
    if not user_id or company_id is None or tenant_state is None:
        return None

    if role is None:
        role = provider.get_member_role(company_id, user_id)
    role = effective_role(role, tenant_state)

    return AccessContext(
        role=role,
        tenant_state=tenant_state,
        permissions=PermissionResolver.for_subject(
            provider, company_id, user_id, role=role
        ),
        company_id=company_id,
        user_id=user_id,
    )


# ══════════════════════════════════════════════════════════════
# MESSAGES
# ══════════════════════════════════════════════════════════════

def permission_denied_message(
    module: PermissionModule, action: PermissionAction
) -> str:
    return (
        f"You don't have permission to {ACTION_LABELS[action].lower()} "
        f"{module.value.replace('_', ' ', 1)}"
    )


def role_required_message(role: Role) -> str:
    return f"Requires {role.label} role or higher."


# ══════════════════════════════════════════════════════════════
# DECISION
# ══════════════════════════════════════════════════════════════

def _grant(state: TenantState) -> AccessVerdict:
    return AccessVerdict(
        has_access=True,
        is_frozen=state.is_frozen,
        is_impersonating=state.is_impersonating,
    )


def _deny(
    context: AccessContext, reason: DenialReason, message: str
) -> AccessVerdict:
    logger.info(
        "Access denied for user '%s' in company %s: %s",
        context.user_id,
        context.company_id,
        reason.value,
    )
    return AccessVerdict(
        has_access=False,
        denial_reason=reason,
        message=message,
        is_frozen=context.tenant_state.is_frozen,
        is_impersonating=context.tenant_state.is_impersonating,
    )


def check_access(
    context: AccessContext,
    required_role: Optional[Role] = None,
    required_module: Optional[ModuleId] = None,
    permission: Optional[PermissionRequirement] = None,
    writes_only: bool = False,
) -> AccessVerdict:
    state = context.tenant_state

    if writes_only:
        if state.is_impersonating:
            return _deny(context, DenialReason.IMPERSONATING, MSG_IMPERSONATING)
        if state.is_frozen:
            return _deny(context, DenialReason.FROZEN, MSG_FROZEN_WRITES)
        return _grant(state)

    if permission is not None:
        module, action = permission
        allowed = (
            context.permissions is not None
            and context.permissions.can(module, action)
        )
        if not allowed:
            return _deny(
                context,
                DenialReason.PERMISSION,
                permission_denied_message(module, action),
            )

    if required_role is not None and not meets_minimum(context.role, required_role):
        return _deny(context, DenialReason.ROLE, role_required_message(required_role))

    if required_module is not None and not state.has_module(required_module):
        return _deny(context, DenialReason.MODULE, MSG_PLAN_UPGRADE)

    if state.is_frozen:
        return _deny(context, DenialReason.FROZEN, MSG_FROZEN)

    return _grant(state)


# ══════════════════════════════════════════════════════════════
# CONVENIENCE WRAPPERS
# ══════════════════════════════════════════════════════════════

def check_role(context: AccessContext, role: Role) -> AccessVerdict:
    return check_access(context, required_role=role)


def check_module(context: AccessContext, module_id: ModuleId) -> AccessVerdict:
    return check_access(context, required_module=module_id)


def check_permission(
    context: AccessContext,
    module: PermissionModule,
    action: PermissionAction,
) -> AccessVerdict:
    return check_access(context, permission=(module, action))


def check_writes(context: AccessContext) -> AccessVerdict:
    return check_access(context, writes_only=True)
