"""
Tests — Rejection Model and Errors
==================================
"""

from __future__ import annotations

import pytest

from hrcore.errors import (
    AccessCoreError,
    TenantFrozenError,
    TenantGuardError,
    WriteBlockedError,
)
from hrcore.rejection import ReasonCode, RejectionReason


class TestRejectionReason:
    def test_to_dict(self):
        reason = RejectionReason(
            code=ReasonCode.TENANT_FROZEN,
            message="Account is frozen.",
            policy_name="write_guard",
        )
        assert reason.to_dict() == {
            "code": "TENANT_FROZEN",
            "message": "Account is frozen.",
            "policy_name": "write_guard",
        }

    @pytest.mark.parametrize("field", ["code", "message", "policy_name"])
    def test_fields_required(self, field):
        values = {"code": "X", "message": "m", "policy_name": "p"}
        values[field] = ""
        with pytest.raises(ValueError, match=field):
            RejectionReason(**values)


class TestErrors:
    def test_error_carries_rejection(self):
        reason = RejectionReason("IMPERSONATING", "Read-only mode.", "write_guard")
        error = WriteBlockedError(reason)
        assert error.rejection is reason
        assert error.code == "IMPERSONATING"
        assert str(error) == "Read-only mode."
        assert isinstance(error, AccessCoreError)

    def test_tenant_guard_hierarchy(self):
        reason = RejectionReason("TENANT_FROZEN", "Frozen.", "tenant_guard")
        assert isinstance(TenantFrozenError(reason), TenantGuardError)
