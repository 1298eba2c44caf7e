"""
hrcore Permissions - Immutable Override/Resolution Models
=========================================================
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from hrcore.permissions.constants import (
    ACTION_LABELS,
    PERMISSION_CATALOG,
    PermissionAction,
    PermissionModule,
    PermissionSource,
    permission_key,
)
from hrcore.roles import Role


@dataclass(frozen=True)
class CompanyMembership:
    """A user's role inside one company."""

    company_id: uuid.UUID
    user_id: str
    role: Role
    is_active: bool = True

    def __post_init__(self):
        if not isinstance(self.company_id, uuid.UUID):
            raise ValueError("company_id must be UUID.")

        if not self.user_id or not isinstance(self.user_id, str):
            raise ValueError("user_id must be a non-empty string.")

        if not isinstance(self.role, Role):
            raise ValueError("role must be Role.")

    def sort_key(self) -> tuple[str, str]:
        return (str(self.company_id), self.user_id)


@dataclass(frozen=True)
class PermissionOverride:
    """
    Explicit per-user grant or deny for one (module, action) pair.

    An override for a key always wins over the role default for that key.
    """

    company_id: uuid.UUID
    user_id: str
    module: PermissionModule
    action: PermissionAction
    granted: bool
    created_by: Optional[str] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        if not isinstance(self.company_id, uuid.UUID):
            raise ValueError("company_id must be UUID.")

        if not self.user_id or not isinstance(self.user_id, str):
            raise ValueError("user_id must be a non-empty string.")

        if not isinstance(self.module, PermissionModule):
            raise ValueError("module must be PermissionModule.")

        if not isinstance(self.action, PermissionAction):
            raise ValueError("action must be PermissionAction.")

        if not isinstance(self.granted, bool):
            raise ValueError("granted must be bool.")

    @property
    def key(self) -> tuple[PermissionModule, PermissionAction]:
        return (self.module, self.action)

    @property
    def source(self) -> PermissionSource:
        if self.granted:
            return PermissionSource.EXPLICIT_ALLOW
        return PermissionSource.EXPLICIT_DENY

    def sort_key(self) -> tuple[str, str, str, str]:
        return (
            str(self.company_id),
            self.user_id,
            self.module.value,
            self.action.value,
        )


@dataclass(frozen=True)
class ResolvedPermission:
    """Resolution outcome with provenance, for checks and admin explanations."""

    module: PermissionModule
    action: PermissionAction
    granted: bool
    source: PermissionSource

    def __post_init__(self):
        if not isinstance(self.source, PermissionSource):
            raise ValueError("source must be PermissionSource.")

    @property
    def key(self) -> str:
        return permission_key(self.module, self.action)

    @property
    def name(self) -> str:
        return PERMISSION_CATALOG.get(
            (self.module, self.action),
            f"{ACTION_LABELS[self.action]} {self.module.value}",
        )

    @property
    def is_explicit(self) -> bool:
        return self.source in (
            PermissionSource.EXPLICIT_ALLOW,
            PermissionSource.EXPLICIT_DENY,
        )

    @property
    def is_inherited(self) -> bool:
        return self.source in (PermissionSource.ROLE, PermissionSource.SUPER_ADMIN)

    def to_dict(self) -> dict:
        return {
            "module": self.module.value,
            "action": self.action.value,
            "name": self.name,
            "has_permission": self.granted,
            "source": self.source.value,
        }
