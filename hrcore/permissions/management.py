"""
hrcore Permissions - Administration
===================================
Admin operations over overrides and role-default grants.

Rules enforced here:
- caller must be an active company_admin or super_admin of the company
- super_admin permissions (user or role) cannot be modified
- the last admin cannot lose users:update through a deny override
- only catalog permissions can be granted, denied, or overridden
- writing an override replaces any existing one for the same key;
  clearing it reverts the user to the role default
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Iterable, Optional

from hrcore.config.rules import ConfigStore, InMemoryConfigStore
from hrcore.errors import PermissionManagementError
from hrcore.permissions.constants import (
    PermissionAction,
    PermissionModule,
    is_catalog_permission,
    permission_key,
)
from hrcore.permissions.models import PermissionOverride
from hrcore.permissions.provider import PermissionStore
from hrcore.rejection import ReasonCode, RejectionReason
from hrcore.roles import ADMIN_ROLES, Role

logger = logging.getLogger("hrcore.permissions")

_POLICY = "permission_administration"


@dataclass(frozen=True)
class OverrideChange:
    """One requested override change. granted=None clears the override."""

    module: PermissionModule
    action: PermissionAction
    granted: Optional[bool]


def _refuse(code: str, message: str) -> PermissionManagementError:
    return PermissionManagementError(
        RejectionReason(code=code, message=message, policy_name=_POLICY)
    )


class PermissionAdministrator:
    """Writes overrides and role grants through a PermissionStore."""

    def __init__(
        self,
        store: PermissionStore,
        config: ConfigStore | None = None,
    ) -> None:
        self._store = store
        self._config = config or InMemoryConfigStore()

    # ── validation helpers ────────────────────────────────────

    def _require_admin(self, company_id: uuid.UUID, actor_id: str) -> None:
        role = self._store.get_member_role(company_id, actor_id)
        if role not in ADMIN_ROLES:
            raise _refuse(
                ReasonCode.NOT_COMPANY_ADMIN,
                "Not authorized to manage permissions.",
            )

    @staticmethod
    def _require_catalog(
        module: PermissionModule, action: PermissionAction
    ) -> None:
        if not is_catalog_permission(module, action):
            raise _refuse(
                ReasonCode.INVALID_PERMISSION,
                f"Invalid permission '{permission_key(module, action)}'.",
            )

    def _target_role(self, company_id: uuid.UUID, user_id: str) -> Role:
        role = self._store.get_member_role(company_id, user_id)
        if role is None:
            raise _refuse(
                ReasonCode.TARGET_NOT_MEMBER,
                "Target user not found in company.",
            )
        if role == Role.SUPER_ADMIN:
            raise _refuse(
                ReasonCode.SUPER_ADMIN_IMMUTABLE,
                "Cannot modify super_admin permissions.",
            )
        return role

    def _check_last_admin(
        self,
        company_id: uuid.UUID,
        target_user_id: str,
        change: OverrideChange,
    ) -> None:
        if not (
            change.module == PermissionModule.USERS
            and change.action == PermissionAction.UPDATE
            and change.granted is False
        ):
            return
        other_admins = [
            m for m in self._store.get_active_members(company_id)
            if m.user_id != target_user_id and m.role in ADMIN_ROLES
        ]
        if not other_admins:
            raise _refuse(
                ReasonCode.LAST_ADMIN_LOCKOUT,
                "Cannot remove user management permission from last admin.",
            )

    # ── user overrides ────────────────────────────────────────

    def set_user_override(
        self,
        company_id: uuid.UUID,
        actor_id: str,
        target_user_id: str,
        module: PermissionModule,
        action: PermissionAction,
        granted: Optional[bool],
        now: datetime | None = None,
    ) -> None:
        """Set (granted=True/False) or clear (granted=None) one override."""
        self.set_user_overrides_batch(
            company_id=company_id,
            actor_id=actor_id,
            target_user_id=target_user_id,
            changes=(OverrideChange(module, action, granted),),
            now=now,
        )

    def set_user_overrides_batch(
        self,
        company_id: uuid.UUID,
        actor_id: str,
        target_user_id: str,
        changes: Iterable[OverrideChange],
        now: datetime | None = None,
    ) -> int:
        """
        Apply several override changes. Every change is validated before
        any is written. Returns the number of changes applied.
        """
        changes = tuple(changes)
        self._require_admin(company_id, actor_id)
        self._target_role(company_id, target_user_id)
        for change in changes:
            self._require_catalog(change.module, change.action)
            self._check_last_admin(company_id, target_user_id, change)

        stamp = now or datetime.now(timezone.utc)
        for change in changes:
            if change.granted is None:
                self._store.delete_override(
                    company_id, target_user_id, change.module, change.action
                )
            else:
                self._store.upsert_override(
                    PermissionOverride(
                        company_id=company_id,
                        user_id=target_user_id,
                        module=change.module,
                        action=change.action,
                        granted=change.granted,
                        created_by=actor_id,
                        updated_at=stamp,
                    )
                )
            logger.info(
                "Override %s for user '%s' in company %s set to %s by '%s'",
                permission_key(change.module, change.action),
                target_user_id,
                company_id,
                change.granted,
                actor_id,
            )
        return len(changes)

    # ── role defaults ─────────────────────────────────────────

    def set_role_permission(
        self,
        company_id: uuid.UUID,
        actor_id: str,
        role: Role,
        module: PermissionModule,
        action: PermissionAction,
        grant: bool,
    ) -> None:
        self._require_admin(company_id, actor_id)
        if role == Role.SUPER_ADMIN:
            raise _refuse(
                ReasonCode.SUPER_ADMIN_IMMUTABLE,
                "Cannot modify super_admin permissions.",
            )
        self._require_catalog(module, action)

        self._store.set_role_grant(company_id, role, (module, action), grant)
        logger.info(
            "Role %s in company %s: %s %s by '%s'",
            role.value,
            company_id,
            "granted" if grant else "revoked",
            permission_key(module, action),
            actor_id,
        )

    def initialize_company(self, company_id: uuid.UUID) -> None:
        """Seed every non-super_admin role from the configured templates."""
        for role in Role:
            if role == Role.SUPER_ADMIN:
                continue
            template = self._config.get_role_template(role)
            self._store.replace_role_grants(company_id, role, template.grants)
        logger.info("Initialized role permissions for company %s", company_id)

    def reset_role_to_defaults(
        self,
        company_id: uuid.UUID,
        actor_id: str,
        role: Role,
    ) -> None:
        self._require_admin(company_id, actor_id)
        if role == Role.SUPER_ADMIN:
            raise _refuse(
                ReasonCode.SUPER_ADMIN_IMMUTABLE,
                "Cannot modify super_admin permissions.",
            )
        template = self._config.get_role_template(role)
        self._store.replace_role_grants(company_id, role, template.grants)
        logger.info(
            "Reset role %s in company %s to defaults by '%s'",
            role.value,
            company_id,
            actor_id,
        )
