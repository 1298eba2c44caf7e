"""
Tests — Tenant Guard
====================
"""

from __future__ import annotations

import uuid

import pytest

from hrcore.errors import (
    InvalidIdentifierError,
    ModuleUnavailableError,
    OwnershipError,
    TenantContextUnavailable,
    TenantFrozenError,
    TenantGuardError,
)
from hrcore.modules import ModuleId
from hrcore.plans import PlanFeatures
from hrcore.rejection import ReasonCode
from hrcore.tenancy import TenantGuard, TenantState, is_valid_uuid, validate_id

COMPANY_ID = uuid.uuid5(uuid.NAMESPACE_URL, "hrcore-guard-company")
LEAVE_ONLY = PlanFeatures(modules=[ModuleId.LEAVE])


def _guard(frozen: bool = False, features=LEAVE_ONLY) -> TenantGuard:
    return TenantGuard(
        is_authenticated=True,
        company_id=COMPANY_ID,
        state=TenantState(
            company_id=COMPANY_ID, is_frozen=frozen, plan_features=features
        ),
    )


class TestRequireCompany:
    def test_returns_company_id(self):
        assert _guard().require_company() == COMPANY_ID

    def test_unauthenticated(self):
        guard = TenantGuard(is_authenticated=False, company_id=COMPANY_ID)
        with pytest.raises(TenantContextUnavailable, match="Authentication required"):
            guard.require_company()

    def test_no_company(self):
        guard = TenantGuard(is_authenticated=True, company_id=None)
        with pytest.raises(TenantContextUnavailable, match="No company selected") as exc:
            guard.require_company()
        assert exc.value.code == ReasonCode.NO_ACTIVE_CONTEXT

    def test_state_still_loading(self):
        guard = TenantGuard(is_authenticated=True, company_id=COMPANY_ID, state=None)
        with pytest.raises(TenantGuardError):
            guard.require_active_company()


class TestActiveCompanyAndModules:
    def test_frozen_blocks_writes(self):
        with pytest.raises(TenantFrozenError) as exc:
            _guard(frozen=True).require_active_company()
        assert str(exc.value) == "Company account is frozen. Please update billing."

    def test_frozen_still_allows_reads(self):
        assert _guard(frozen=True).require_module(ModuleId.LEAVE) == COMPANY_ID

    def test_module_not_on_plan(self):
        with pytest.raises(ModuleUnavailableError) as exc:
            _guard().require_module(ModuleId.PAYROLL)
        assert str(exc.value) == 'Module "payroll" is not available on your current plan'
        assert exc.value.code == ReasonCode.PLAN_UPGRADE_REQUIRED

    def test_module_write_checks_frozen_first(self):
        with pytest.raises(TenantFrozenError):
            _guard(frozen=True).require_module_write(ModuleId.PAYROLL)

    def test_module_write_allowed(self):
        assert _guard().require_module_write(ModuleId.LEAVE) == COMPANY_ID


class TestOwnership:
    def test_same_company(self):
        assert _guard().validate_ownership(COMPANY_ID) is True
        assert _guard().validate_ownership(str(COMPANY_ID)) is True

    @pytest.mark.parametrize("record_company", [None, uuid.uuid4()])
    def test_other_or_missing_company(self, record_company):
        with pytest.raises(OwnershipError) as exc:
            _guard().validate_ownership(record_company)
        assert "does not belong to your company" in str(exc.value)

    def test_with_company_id(self):
        payload = _guard().with_company_id({"name": "Leave request"})
        assert payload == {"name": "Leave request", "company_id": COMPANY_ID}


class TestIdentifiers:
    def test_valid_uuid(self):
        assert is_valid_uuid("0f8fad5b-d9cb-469f-a165-70867728950e")
        assert not is_valid_uuid("0f8fad5b-d9cb-469f-c165-70867728950e")
        assert not is_valid_uuid("not-a-uuid")
        assert not is_valid_uuid(None)

    def test_validate_id(self):
        value = "0f8fad5b-d9cb-469f-a165-70867728950e"
        assert validate_id(value, "employee_id") == value

    def test_validate_id_missing(self):
        with pytest.raises(InvalidIdentifierError, match="employee_id is required"):
            validate_id(None, "employee_id")

    def test_validate_id_malformed(self):
        with pytest.raises(InvalidIdentifierError, match="Invalid ID format"):
            validate_id("12345")
