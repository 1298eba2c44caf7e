"""
hrcore Permissions - Deterministic Permission Resolver
======================================================
Merges role-default grants with explicit per-user overrides.

Precedence (highest first):
  1. super_admin          → granted   (source: super_admin)
  2. explicit override    → its value (source: explicit_allow / explicit_deny)
  3. role default grant   → granted   (source: role)
  4. nothing              → denied    (source: none)
"""

from __future__ import annotations

import logging
import uuid
from typing import FrozenSet, Mapping, Optional, Tuple

from hrcore.permissions.constants import (
    PERMISSION_CATALOG,
    PermissionAction,
    PermissionModule,
    PermissionSource,
)
from hrcore.permissions.models import PermissionOverride, ResolvedPermission
from hrcore.permissions.provider import PermissionProvider
from hrcore.roles import Role

logger = logging.getLogger("hrcore.permissions")

PermissionPair = Tuple[PermissionModule, PermissionAction]


def resolve_permission(
    role: Optional[Role],
    overrides: Mapping[PermissionPair, PermissionOverride],
    role_grants: FrozenSet[PermissionPair],
    module: PermissionModule,
    action: PermissionAction,
) -> ResolvedPermission:
    """Pure four-step resolution for one (module, action) pair."""
    if role == Role.SUPER_ADMIN:
        return ResolvedPermission(
            module, action, True, PermissionSource.SUPER_ADMIN
        )

    override = overrides.get((module, action))
    if override is not None:
        return ResolvedPermission(module, action, override.granted, override.source)

    if (module, action) in role_grants:
        return ResolvedPermission(module, action, True, PermissionSource.ROLE)

    return ResolvedPermission(module, action, False, PermissionSource.NONE)


class PermissionResolver:
    """
    Resolver over one subject's permission snapshot.

    Build one per request/render cycle with `for_subject`; the snapshot is
    never reused after the underlying overrides or grants change.
    """

    def __init__(
        self,
        role: Optional[Role],
        role_grants: FrozenSet[PermissionPair] = frozenset(),
        overrides: Tuple[PermissionOverride, ...] = (),
        user_id: str = "",
    ) -> None:
        self._role = role
        self._role_grants = frozenset(role_grants)
        self._user_id = user_id
        self._overrides: dict[PermissionPair, PermissionOverride] = {}
        for override in overrides:
            self._overrides[override.key] = override

    @classmethod
    def for_subject(
        cls,
        provider: PermissionProvider,
        company_id: uuid.UUID,
        user_id: str,
        role: Optional[Role] = None,
    ) -> "PermissionResolver":
        """
        Load a snapshot from the provider.

        `role` overrides the stored membership role (the session's
        effective role, e.g. while impersonating).
        """
        if role is None:
            role = provider.get_member_role(company_id, user_id)

        role_grants: FrozenSet[PermissionPair] = frozenset()
        if role is not None and role != Role.SUPER_ADMIN:
            role_grants = provider.get_role_grants(company_id, role)

        overrides = provider.get_overrides(company_id, user_id)
        return cls(
            role=role,
            role_grants=role_grants,
            overrides=overrides,
            user_id=user_id,
        )

    @property
    def role(self) -> Optional[Role]:
        return self._role

    def resolve(
        self, module: PermissionModule, action: PermissionAction
    ) -> ResolvedPermission:
        resolved = resolve_permission(
            self._role, self._overrides, self._role_grants, module, action
        )
        logger.debug(
            "Resolved %s:%s for user '%s' → %s (%s)",
            module.value,
            action.value,
            self._user_id,
            resolved.granted,
            resolved.source.value,
        )
        return resolved

    def can(self, module: PermissionModule, action: PermissionAction) -> bool:
        return self.resolve(module, action).granted

    def resolve_all(self) -> tuple[ResolvedPermission, ...]:
        """Full matrix over the catalog, ordered by (module, action)."""
        pairs = sorted(
            PERMISSION_CATALOG,
            key=lambda pair: (pair[0].value, pair[1].value),
        )
        return tuple(self.resolve(module, action) for module, action in pairs)

    def module_permissions(
        self, module: PermissionModule
    ) -> tuple[ResolvedPermission, ...]:
        return tuple(p for p in self.resolve_all() if p.module == module)

    def can_access_module(self, module: PermissionModule) -> bool:
        """True when any permission on the module resolves granted."""
        if self._role == Role.SUPER_ADMIN:
            return True
        return any(p.granted for p in self.module_permissions(module))
