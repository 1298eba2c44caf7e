"""
Tests — Tenant Lifecycle State
==============================
Derivation of frozen / trial / impersonation flags and write eligibility.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timedelta, timezone

import pytest

from hrcore.config import InMemoryConfigStore
from hrcore.modules import ModuleId
from hrcore.plans import ALL_MODULES, PlanFeatures
from hrcore.roles import Role
from hrcore.tenancy import (
    CompanySnapshot,
    ImpersonationSession,
    SubscriptionSnapshot,
    SubscriptionStatus,
    TenantState,
    WriteEligibility,
    derive_tenant_state,
    effective_role,
    write_eligibility,
)

COMPANY_ID = uuid.uuid5(uuid.NAMESPACE_URL, "hrcore-state-company")
NOW = datetime(2025, 6, 1, 12, 0, 0, tzinfo=timezone.utc)


def _company(active: bool = True, company_id: uuid.UUID = COMPANY_ID) -> CompanySnapshot:
    return CompanySnapshot(company_id=company_id, name="Acme", is_active=active)


def _subscription(status="active", **kwargs) -> SubscriptionSnapshot:
    return SubscriptionSnapshot(status=status, **kwargs)


# ══════════════════════════════════════════════════════════════
# FROZEN
# ══════════════════════════════════════════════════════════════


class TestFrozen:
    def test_inactive_company_is_frozen(self):
        state = derive_tenant_state(_company(active=False), _subscription(), now=NOW)
        assert state.is_frozen is True
        assert state.can_write is False

    def test_active_company_can_write(self):
        state = derive_tenant_state(_company(), _subscription(), now=NOW)
        assert state.is_frozen is False
        assert state.can_write is True
        assert state.company_id == COMPANY_ID

    def test_no_company_is_not_frozen(self):
        state = derive_tenant_state(None, None, now=NOW)
        assert state.is_frozen is False
        assert state.company_id is None


# ══════════════════════════════════════════════════════════════
# TRIAL
# ══════════════════════════════════════════════════════════════


class TestTrial:
    def test_active_trial(self):
        state = derive_tenant_state(
            _company(),
            _subscription("trialing", trial_ends_at=NOW + timedelta(days=3, hours=2)),
            now=NOW,
        )
        assert state.is_trialing is True
        assert state.is_trial_expired is False
        assert state.trial_days_remaining == 4
        assert state.trial_total_days == 14
        assert state.effective_status == SubscriptionStatus.TRIALING
        assert state.can_write is True

    def test_expired_trial(self):
        state = derive_tenant_state(
            _company(),
            _subscription("trialing", trial_ends_at=NOW - timedelta(minutes=1)),
            now=NOW,
        )
        assert state.is_trial_expired is True
        assert state.is_trialing is False
        assert state.trial_days_remaining == 0
        assert state.effective_status == SubscriptionStatus.TRIAL_EXPIRED
        assert state.subscription_status == SubscriptionStatus.TRIALING
        assert state.can_write is False

    def test_trial_end_only_matters_while_trialing(self):
        state = derive_tenant_state(
            _company(),
            _subscription("active", trial_ends_at=NOW - timedelta(days=2)),
            now=NOW,
        )
        assert state.is_trial_expired is False
        assert state.trial_days_remaining == 0
        assert state.can_write is True

    def test_no_trial_end(self):
        state = derive_tenant_state(_company(), _subscription(), now=NOW)
        assert state.trial_days_remaining is None
        assert state.trial_total_days is None

    def test_trial_length_from_subscription_or_config(self):
        ends = NOW + timedelta(days=10)
        explicit = derive_tenant_state(
            _company(),
            _subscription("trialing", trial_ends_at=ends, trial_total_days=30),
            now=NOW,
        )
        assert explicit.trial_total_days == 30

        configured = derive_tenant_state(
            _company(),
            _subscription("trialing", trial_ends_at=ends),
            now=NOW,
            config=InMemoryConfigStore(trial_total_days=21),
        )
        assert configured.trial_total_days == 21

    def test_naive_trial_end_rejected(self):
        with pytest.raises(ValueError, match="timezone-aware"):
            _subscription("trialing", trial_ends_at=datetime(2025, 6, 5, 12, 0, 0))

    def test_naive_now_rejected(self):
        with pytest.raises(ValueError, match="timezone-aware"):
            derive_tenant_state(
                _company(),
                _subscription("trialing", trial_ends_at=NOW + timedelta(days=2)),
                now=datetime(2025, 6, 1, 12, 0, 0),
            )

    def test_non_utc_trial_end_compares_by_instant(self):
        plus_two = timezone(timedelta(hours=2))
        # 13:00 at +02:00 is 11:00 UTC, one hour before NOW.
        ends = datetime(2025, 6, 1, 13, 0, 0, tzinfo=plus_two)
        state = derive_tenant_state(
            _company(), _subscription("trialing", trial_ends_at=ends), now=NOW
        )
        assert state.is_trial_expired is True


# ══════════════════════════════════════════════════════════════
# BILLING STATUS
# ══════════════════════════════════════════════════════════════


class TestBillingStatus:
    @pytest.mark.parametrize("status", ["past_due", "paused", "canceled", "trial_expired"])
    def test_blocking_statuses(self, status):
        state = derive_tenant_state(_company(), _subscription(status), now=NOW)
        assert state.can_write is False
        assert state.is_frozen is False

    def test_past_due_flag(self):
        state = derive_tenant_state(_company(), _subscription("past_due"), now=NOW)
        assert state.is_past_due is True

    def test_unknown_status_rejected(self):
        with pytest.raises(ValueError):
            _subscription("expired")


# ══════════════════════════════════════════════════════════════
# PLAN MODULES
# ══════════════════════════════════════════════════════════════


class TestPlanModules:
    def test_has_module_follows_features(self):
        state = derive_tenant_state(
            _company(),
            _subscription(features=PlanFeatures(modules=[ModuleId.LEAVE])),
            now=NOW,
        )
        assert state.has_module(ModuleId.LEAVE) is True
        assert state.has_module(ModuleId.PAYROLL) is False
        assert state.plan_modules == (ModuleId.LEAVE,)

    def test_all_modules(self):
        state = TenantState(plan_features=PlanFeatures(modules=ALL_MODULES))
        assert state.has_module(ModuleId.PAYROLL) is True

    def test_missing_module_list_is_unrestricted(self):
        assert TenantState().has_module(ModuleId.PAYROLL) is True
        empty = TenantState(plan_features=PlanFeatures(modules=()))
        assert empty.has_module(ModuleId.PAYROLL) is True


# ══════════════════════════════════════════════════════════════
# IMPERSONATION
# ══════════════════════════════════════════════════════════════


def _session(company_id: uuid.UUID = COMPANY_ID) -> ImpersonationSession:
    return ImpersonationSession(
        session_id=uuid.uuid4(),
        admin_user_id="platform-1",
        company=_company(company_id=company_id),
        started_at=NOW,
    )


class TestImpersonationFlag:
    def test_session_for_this_company(self):
        state = derive_tenant_state(
            _company(), _subscription(), impersonation=_session(), now=NOW
        )
        assert state.is_impersonating is True

    def test_session_for_other_company_ignored(self):
        state = derive_tenant_state(
            _company(),
            _subscription(),
            impersonation=_session(uuid.uuid4()),
            now=NOW,
        )
        assert state.is_impersonating is False

    def test_effective_role_while_impersonating(self):
        state = TenantState(is_impersonating=True)
        assert effective_role(None, state) == Role.COMPANY_ADMIN
        assert effective_role(Role.EMPLOYEE, TenantState()) == Role.EMPLOYEE


# ══════════════════════════════════════════════════════════════
# WRITE ELIGIBILITY
# ══════════════════════════════════════════════════════════════


class TestWriteEligibility:
    def test_states(self):
        assert write_eligibility(TenantState()) == WriteEligibility.ACTIVE_WRITABLE
        assert (
            write_eligibility(TenantState(is_frozen=True))
            == WriteEligibility.FROZEN_READONLY
        )
        assert (
            write_eligibility(TenantState(is_impersonating=True))
            == WriteEligibility.IMPERSONATED_READONLY
        )

    def test_impersonation_wins_over_frozen(self):
        state = TenantState(is_frozen=True, is_impersonating=True)
        assert write_eligibility(state) == WriteEligibility.IMPERSONATED_READONLY

    def test_states_are_revisitable(self):
        sequence = [
            TenantState(),
            TenantState(is_frozen=True),
            TenantState(is_impersonating=True),
            TenantState(),
        ]
        assert [write_eligibility(s) for s in sequence] == [
            WriteEligibility.ACTIVE_WRITABLE,
            WriteEligibility.FROZEN_READONLY,
            WriteEligibility.IMPERSONATED_READONLY,
            WriteEligibility.ACTIVE_WRITABLE,
        ]
