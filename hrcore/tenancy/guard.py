"""
hrcore Tenancy — Tenant Guard
=============================
Raising checks for data operations. Each helper either returns the
validated company id or raises a TenantGuardError subclass.

Messages are generic and never reveal another tenant's data.
"""

from __future__ import annotations

import re
import uuid
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from hrcore.errors import (
    InvalidIdentifierError,
    ModuleUnavailableError,
    OwnershipError,
    TenantContextUnavailable,
    TenantFrozenError,
)
from hrcore.modules.catalog import ModuleId
from hrcore.rejection import ReasonCode, RejectionReason
from hrcore.tenancy.state import TenantState

_POLICY = "tenant_guard"

_UUID_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[1-5][0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$",
    re.IGNORECASE,
)


def _reason(code: str, message: str) -> RejectionReason:
    return RejectionReason(code=code, message=message, policy_name=_POLICY)


# ══════════════════════════════════════════════════════════════
# IDENTIFIER VALIDATION
# ══════════════════════════════════════════════════════════════

def is_valid_uuid(value: Any) -> bool:
    return isinstance(value, str) and _UUID_PATTERN.match(value) is not None


def validate_id(value: Optional[str], field_name: str = "ID") -> str:
    if not value:
        raise InvalidIdentifierError(
            _reason(ReasonCode.INVALID_IDENTIFIER, f"{field_name} is required")
        )
    if not is_valid_uuid(value):
        raise InvalidIdentifierError(
            _reason(ReasonCode.INVALID_IDENTIFIER, f"Invalid {field_name} format")
        )
    return value


# ══════════════════════════════════════════════════════════════
# TENANT GUARD
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class TenantGuard:
    """
    Guard bound to one session's tenant context.

    state=None means the tenant context has not loaded yet; every check
    then fails as if no company were selected.
    """

    is_authenticated: bool
    company_id: Optional[uuid.UUID]
    state: Optional[TenantState] = None

    def require_company(self) -> uuid.UUID:
        if not self.is_authenticated:
            raise TenantContextUnavailable(
                _reason(ReasonCode.NO_ACTIVE_CONTEXT, "Authentication required")
            )
        if self.company_id is None or self.state is None:
            raise TenantContextUnavailable(
                _reason(ReasonCode.NO_ACTIVE_CONTEXT, "No company selected")
            )
        return self.company_id

    def require_active_company(self) -> uuid.UUID:
        company_id = self.require_company()
        if self.state.is_frozen:
            raise TenantFrozenError(
                _reason(
                    ReasonCode.TENANT_FROZEN,
                    "Company account is frozen. Please update billing.",
                )
            )
        return company_id

    def _require_plan_module(self, module_id: ModuleId) -> None:
        if not self.state.has_module(module_id):
            raise ModuleUnavailableError(
                _reason(
                    ReasonCode.PLAN_UPGRADE_REQUIRED,
                    f'Module "{module_id.value}" is not available '
                    "on your current plan",
                )
            )

    def require_module(self, module_id: ModuleId) -> uuid.UUID:
        company_id = self.require_company()
        self._require_plan_module(module_id)
        return company_id

    def require_module_write(self, module_id: ModuleId) -> uuid.UUID:
        company_id = self.require_active_company()
        self._require_plan_module(module_id)
        return company_id

    def validate_ownership(
        self, record_company_id: Union[uuid.UUID, str, None]
    ) -> bool:
        company_id = self.require_company()
        if record_company_id is None or str(record_company_id) != str(company_id):
            raise OwnershipError(
                _reason(
                    ReasonCode.RECORD_NOT_IN_COMPANY,
                    "Access denied: Record does not belong to your company",
                )
            )
        return True

    def with_company_id(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Copy of `data` stamped with the current company id."""
        return {**data, "company_id": self.require_company()}
