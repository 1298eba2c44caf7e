"""
Tests — Impersonation Registry
==============================
"""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timedelta, timezone

import pytest

from hrcore.errors import ImpersonationError
from hrcore.rejection import ReasonCode
from hrcore.tenancy import CompanySnapshot, ImpersonationLogEntry, ImpersonationRegistry

T0 = datetime(2025, 6, 1, 12, 0, 0, tzinfo=timezone.utc)
ACME = CompanySnapshot(company_id=uuid.uuid4(), name="Acme")
GLOBEX = CompanySnapshot(company_id=uuid.uuid4(), name="Globex")
SESSION_1 = uuid.uuid5(uuid.NAMESPACE_URL, "impersonation-session-1")
SESSION_2 = uuid.uuid5(uuid.NAMESPACE_URL, "impersonation-session-2")


class TestStart:
    def test_only_platform_admins(self):
        registry = ImpersonationRegistry()
        with pytest.raises(ImpersonationError) as exc:
            registry.start("user-1", False, ACME, now=T0)
        assert exc.value.code == ReasonCode.NOT_PLATFORM_ADMIN
        assert registry.log == ()
        assert registry.active_session_for("user-1") is None

    def test_start_logs_entry(self):
        registry = ImpersonationRegistry()
        session = registry.start(
            "pa-1", True, ACME, now=T0, session_id=SESSION_1, user_agent="pytest"
        )
        assert session.company_id == ACME.company_id
        assert registry.is_impersonating("pa-1", ACME.company_id)
        assert not registry.is_impersonating("pa-1", GLOBEX.company_id)

        (entry,) = registry.log
        assert entry.action == "start"
        assert entry.session_id == SESSION_1
        assert entry.duration_seconds is None
        assert entry.to_dict()["metadata"] == {"company_name": "Acme"}

    def test_new_session_replaces_previous(self):
        registry = ImpersonationRegistry()
        registry.start("pa-1", True, ACME, now=T0, session_id=SESSION_1)
        registry.start(
            "pa-1", True, GLOBEX, now=T0 + timedelta(minutes=5), session_id=SESSION_2
        )

        assert registry.active_session_for("pa-1").company_id == GLOBEX.company_id
        assert [(e.action, e.session_id) for e in registry.log] == [
            ("start", SESSION_1),
            ("end", SESSION_1),
            ("start", SESSION_2),
        ]


class TestStop:
    def test_stop_records_duration(self, caplog):
        registry = ImpersonationRegistry()
        registry.start("pa-1", True, ACME, now=T0, session_id=SESSION_1)
        with caplog.at_level(logging.INFO, logger="hrcore.tenancy"):
            ended = registry.stop("pa-1", now=T0 + timedelta(seconds=95))

        assert ended.session_id == SESSION_1
        assert registry.active_session_for("pa-1") is None
        end = registry.log[-1]
        assert end.action == "end"
        assert end.duration_seconds == 95
        assert end.to_dict()["metadata"]["duration_seconds"] == 95
        assert "stopped impersonating" in caplog.text

    def test_stop_without_session(self):
        registry = ImpersonationRegistry()
        assert registry.stop("pa-1", now=T0) is None
        assert registry.log == ()


class TestAuthChanges:
    def test_sign_out_clears_session(self):
        registry = ImpersonationRegistry()
        registry.start("pa-1", True, ACME, now=T0)
        registry.clear_on_sign_out("pa-1")
        assert registry.active_session_for("pa-1") is None
        assert [e.action for e in registry.log] == ["start"]

    def test_user_switch_clears_session(self):
        registry = ImpersonationRegistry()
        registry.start("pa-1", True, ACME, now=T0)
        registry.on_user_switch("pa-1", "pa-1")
        assert registry.active_session_for("pa-1") is not None
        registry.on_user_switch("pa-1", "someone-else")
        assert registry.active_session_for("pa-1") is None

    def test_losing_platform_admin_clears_session(self):
        registry = ImpersonationRegistry()
        registry.start("pa-1", True, ACME, now=T0)
        registry.on_platform_admin_lost("pa-1")
        assert registry.active_session_for("pa-1") is None


class TestLogEntry:
    def test_action_validated(self):
        with pytest.raises(ValueError):
            ImpersonationLogEntry(
                session_id=SESSION_1,
                admin_user_id="pa-1",
                company_id=ACME.company_id,
                company_name="Acme",
                action="pause",
                occurred_at=T0,
            )
