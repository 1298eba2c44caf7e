"""
hrcore Tenancy — Impersonation Sessions
=======================================
A platform admin may view a company as if they were its admin. While a
session is active every write for that company is refused.

Every start and every end is appended to an audit log. A session is
dropped without an end entry when its admin signs out, another user
signs in, or the admin loses platform-admin status.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Dict, List, Optional, Tuple

from hrcore.errors import ImpersonationError
from hrcore.rejection import ReasonCode, RejectionReason
from hrcore.tenancy.subscriptions import CompanySnapshot

logger = logging.getLogger("hrcore.tenancy")

ACTION_START = "start"
ACTION_END = "end"


@dataclass(frozen=True)
class ImpersonationSession:
    session_id: uuid.UUID
    admin_user_id: str
    company: CompanySnapshot
    started_at: datetime

    @property
    def company_id(self) -> uuid.UUID:
        return self.company.company_id


@dataclass(frozen=True)
class ImpersonationLogEntry:
    """One audit row. duration_seconds is set on end entries only."""

    session_id: uuid.UUID
    admin_user_id: str
    company_id: uuid.UUID
    company_name: str
    action: str
    occurred_at: datetime
    duration_seconds: Optional[int] = None
    user_agent: Optional[str] = None

    def __post_init__(self):
        if self.action not in (ACTION_START, ACTION_END):
            raise ValueError(
                f"action must be '{ACTION_START}' or '{ACTION_END}'."
            )

    def to_dict(self) -> dict:
        metadata = {"company_name": self.company_name}
        if self.duration_seconds is not None:
            metadata["duration_seconds"] = self.duration_seconds
        return {
            "admin_user_id": self.admin_user_id,
            "impersonated_company_id": str(self.company_id),
            "action": self.action,
            "session_id": str(self.session_id),
            "user_agent": self.user_agent,
            "metadata": metadata,
        }


class ImpersonationRegistry:
    """
    Active sessions keyed by admin user, plus the audit log.

    One admin holds at most one session; starting another replaces it.
    """

    def __init__(self) -> None:
        self._sessions: Dict[str, ImpersonationSession] = {}
        self._log: List[ImpersonationLogEntry] = []

    @property
    def log(self) -> Tuple[ImpersonationLogEntry, ...]:
        return tuple(self._log)

    def active_session_for(
        self,
        admin_user_id: str,
        company_id: Optional[uuid.UUID] = None,
    ) -> Optional[ImpersonationSession]:
        session = self._sessions.get(admin_user_id)
        if session is None:
            return None
        if company_id is not None and session.company_id != company_id:
            return None
        return session

    def is_impersonating(
        self, admin_user_id: str, company_id: uuid.UUID
    ) -> bool:
        return self.active_session_for(admin_user_id, company_id) is not None

    def start(
        self,
        admin_user_id: str,
        is_platform_admin: bool,
        company: CompanySnapshot,
        now: Optional[datetime] = None,
        session_id: Optional[uuid.UUID] = None,
        user_agent: Optional[str] = None,
    ) -> ImpersonationSession:
        if not is_platform_admin:
            raise ImpersonationError(
                RejectionReason(
                    code=ReasonCode.NOT_PLATFORM_ADMIN,
                    message="Only platform admins can impersonate companies.",
                    policy_name="impersonation",
                )
            )

        now = now or datetime.now(timezone.utc)
        if admin_user_id in self._sessions:
            self.stop(admin_user_id, now=now, user_agent=user_agent)

        session = ImpersonationSession(
            session_id=session_id or uuid.uuid4(),
            admin_user_id=admin_user_id,
            company=company,
            started_at=now,
        )
        self._sessions[admin_user_id] = session
        self._log.append(
            ImpersonationLogEntry(
                session_id=session.session_id,
                admin_user_id=admin_user_id,
                company_id=company.company_id,
                company_name=company.name,
                action=ACTION_START,
                occurred_at=now,
                user_agent=user_agent,
            )
        )
        logger.info(
            "Admin '%s' started impersonating company %s (session %s)",
            admin_user_id,
            company.company_id,
            session.session_id,
        )
        return session

    def stop(
        self,
        admin_user_id: str,
        now: Optional[datetime] = None,
        user_agent: Optional[str] = None,
    ) -> Optional[ImpersonationSession]:
        """End the admin's session. Returns it, or None when there was none."""
        session = self._sessions.pop(admin_user_id, None)
        if session is None:
            return None

        now = now or datetime.now(timezone.utc)
        duration = int((now - session.started_at).total_seconds())
        self._log.append(
            ImpersonationLogEntry(
                session_id=session.session_id,
                admin_user_id=admin_user_id,
                company_id=session.company_id,
                company_name=session.company.name,
                action=ACTION_END,
                occurred_at=now,
                duration_seconds=max(duration, 0),
                user_agent=user_agent,
            )
        )
        logger.info(
            "Admin '%s' stopped impersonating company %s after %ss",
            admin_user_id,
            session.company_id,
            max(duration, 0),
        )
        return session

    # ── auth changes ──────────────────────────────────────────

    def clear_on_sign_out(self, admin_user_id: str) -> None:
        self._sessions.pop(admin_user_id, None)

    def on_user_switch(
        self, previous_user_id: str, current_user_id: Optional[str]
    ) -> None:
        if current_user_id != previous_user_id:
            self._sessions.pop(previous_user_id, None)

    def on_platform_admin_lost(self, admin_user_id: str) -> None:
        if self._sessions.pop(admin_user_id, None) is not None:
            logger.info(
                "Cleared impersonation for '%s': no longer a platform admin",
                admin_user_id,
            )
