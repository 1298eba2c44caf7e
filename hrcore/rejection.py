"""
hrcore — Rejection Model
========================
Structured reasons for blocked mutations.

A denial from the decision engine is an AccessVerdict value. When a
mutation path needs something it can log, audit, or raise, the verdict
is converted into a RejectionReason.

Every rejection must be:
- Deterministic (same input → same rejection)
- Auditable (code + message + policy)
- Machine-readable (code)
- Human-readable (message)
"""

from __future__ import annotations

from dataclasses import dataclass


# ══════════════════════════════════════════════════════════════
# REJECTION REASON (frozen explanation structure)
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class RejectionReason:
    """
    Structured reason for a blocked operation.

    Fields:
        code:        Machine-readable rejection code (e.g. 'TENANT_FROZEN').
        message:     Human-readable explanation.
        policy_name: Name of the policy that caused rejection.
    """

    code: str
    message: str
    policy_name: str

    def __post_init__(self):
        if not self.code or not isinstance(self.code, str):
            raise ValueError("code must be a non-empty string.")

        if not self.message or not isinstance(self.message, str):
            raise ValueError("message must be a non-empty string.")

        if not self.policy_name or not isinstance(self.policy_name, str):
            raise ValueError("policy_name must be a non-empty string.")

    def to_dict(self) -> dict:
        """Serialize for audit payloads."""
        return {
            "code": self.code,
            "message": self.message,
            "policy_name": self.policy_name,
        }


# ══════════════════════════════════════════════════════════════
# STANDARD REJECTION CODES
# ══════════════════════════════════════════════════════════════

class ReasonCode:
    """
    Known rejection codes.

    Convention: SCREAMING_SNAKE_CASE.
    """

    # ── Tenant lifecycle ──────────────────────────────────────
    TENANT_FROZEN = "TENANT_FROZEN"
    TRIAL_EXPIRED = "TRIAL_EXPIRED"
    IMPERSONATING = "IMPERSONATING"

    # ── Context / authorization ───────────────────────────────
    NO_ACTIVE_CONTEXT = "NO_ACTIVE_CONTEXT"
    PERMISSION_DENIED = "PERMISSION_DENIED"
    ROLE_REQUIRED = "ROLE_REQUIRED"
    PLAN_UPGRADE_REQUIRED = "PLAN_UPGRADE_REQUIRED"
    RECORD_NOT_IN_COMPANY = "RECORD_NOT_IN_COMPANY"
    INVALID_IDENTIFIER = "INVALID_IDENTIFIER"

    # ── Permission administration ─────────────────────────────
    NOT_COMPANY_ADMIN = "NOT_COMPANY_ADMIN"
    TARGET_NOT_MEMBER = "TARGET_NOT_MEMBER"
    SUPER_ADMIN_IMMUTABLE = "SUPER_ADMIN_IMMUTABLE"
    LAST_ADMIN_LOCKOUT = "LAST_ADMIN_LOCKOUT"
    INVALID_PERMISSION = "INVALID_PERMISSION"

    # ── Impersonation ─────────────────────────────────────────
    NOT_PLATFORM_ADMIN = "NOT_PLATFORM_ADMIN"
