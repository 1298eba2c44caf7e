"""
hrcore — Exceptions
===================
Raised by the guard helpers and by administrative operations.

Access denials from the decision engine are NOT exceptions. They are
AccessVerdict values. These errors exist for call sites that must stop
(a data operation without a company, a blocked write, an invalid admin
change) and each carries the RejectionReason that explains it.
"""

from __future__ import annotations

from hrcore.rejection import RejectionReason


class AccessCoreError(Exception):
    """Base error carrying a structured rejection."""

    def __init__(self, rejection: RejectionReason):
        self.rejection = rejection
        super().__init__(rejection.message)

    @property
    def code(self) -> str:
        return self.rejection.code


# ── Tenant guard ──────────────────────────────────────────────

class TenantGuardError(AccessCoreError):
    """A data operation was attempted outside a valid tenant context."""
    pass


class TenantContextUnavailable(TenantGuardError):
    """No authenticated user or no company selected (or still loading)."""
    pass


class TenantFrozenError(TenantGuardError):
    """Write attempted while the company account is frozen."""
    pass


class ModuleUnavailableError(TenantGuardError):
    """Module is not part of the company's plan."""
    pass


class OwnershipError(TenantGuardError):
    """Record does not belong to the current company."""
    pass


class InvalidIdentifierError(TenantGuardError):
    """Identifier missing or not a UUID."""
    pass


# ── Write guard ───────────────────────────────────────────────

class WriteBlockedError(AccessCoreError):
    """Mutation blocked by tenant state or by the action's own gate."""
    pass


# ── Administration ────────────────────────────────────────────

class PermissionManagementError(AccessCoreError):
    """Permission override or role grant change refused."""
    pass


class ImpersonationError(AccessCoreError):
    """Impersonation session could not be started."""
    pass
