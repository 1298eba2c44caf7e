"""
hrcore Permissions - DB-backed Provider
=======================================
Resolves memberships, role grants, and overrides from relational tables.
Reads current rows on every call; nothing is cached here.
"""

from __future__ import annotations

import uuid
from typing import FrozenSet, Iterable, Tuple

from hrcore.permissions.constants import (
    PermissionAction,
    PermissionModule,
    is_catalog_permission,
    parse_permission_key,
    permission_key,
)
from hrcore.permissions.models import CompanyMembership, PermissionOverride
from hrcore.roles import Role, parse_role

PermissionPair = Tuple[PermissionModule, PermissionAction]


def _catalog_pair(key: str) -> PermissionPair | None:
    try:
        pair = parse_permission_key(key)
    except ValueError:
        return None
    if not is_catalog_permission(*pair):
        return None
    return pair


class DbPermissionProvider:
    def get_member_role(
        self, company_id: uuid.UUID, user_id: str
    ) -> Role | None:
        if not isinstance(user_id, str) or not user_id.strip():
            return None
        if not isinstance(company_id, uuid.UUID):
            return None

        from hrcore.permissions_store.models import CompanyMember

        row = CompanyMember.objects.filter(
            company_id=company_id,
            user_id=user_id.strip(),
            is_active=True,
        ).first()
        if row is None:
            return None
        try:
            return parse_role(row.role)
        except ValueError:
            return None

    def get_role_grants(
        self, company_id: uuid.UUID, role: Role
    ) -> FrozenSet[PermissionPair]:
        if not isinstance(company_id, uuid.UUID):
            return frozenset()

        from hrcore.permissions_store.models import RolePermission

        keys = (
            RolePermission.objects.filter(company_id=company_id, role=role.value)
            .order_by("permission_key")
            .values_list("permission_key", flat=True)
        )
        pairs = (_catalog_pair(key) for key in keys)
        return frozenset(pair for pair in pairs if pair is not None)

    def get_overrides(
        self, company_id: uuid.UUID, user_id: str
    ) -> tuple[PermissionOverride, ...]:
        if not isinstance(user_id, str) or not user_id.strip():
            return tuple()
        if not isinstance(company_id, uuid.UUID):
            return tuple()

        from hrcore.permissions_store.models import UserPermission

        rows = UserPermission.objects.filter(
            company_id=company_id,
            user_id=user_id.strip(),
        ).order_by("permission_key", "id")

        overrides: list[PermissionOverride] = []
        for row in rows:
            pair = _catalog_pair(row.permission_key)
            if pair is None:
                continue
            overrides.append(
                PermissionOverride(
                    company_id=row.company_id,
                    user_id=row.user_id,
                    module=pair[0],
                    action=pair[1],
                    granted=bool(row.granted),
                    created_by=row.created_by or None,
                    updated_at=row.updated_at,
                )
            )
        return tuple(sorted(overrides, key=lambda o: o.sort_key()))

    def get_active_members(
        self, company_id: uuid.UUID
    ) -> tuple[CompanyMembership, ...]:
        if not isinstance(company_id, uuid.UUID):
            return tuple()

        from hrcore.permissions_store.models import CompanyMember

        members: list[CompanyMembership] = []
        for row in CompanyMember.objects.filter(
            company_id=company_id, is_active=True
        ).order_by("user_id"):
            try:
                role = parse_role(row.role)
            except ValueError:
                continue
            members.append(
                CompanyMembership(
                    company_id=row.company_id,
                    user_id=row.user_id,
                    role=role,
                    is_active=row.is_active,
                )
            )
        return tuple(members)

    # ── write side ────────────────────────────────────────────

    def upsert_override(self, override: PermissionOverride) -> None:
        from hrcore.permissions_store.models import UserPermission

        UserPermission.objects.update_or_create(
            company_id=override.company_id,
            user_id=override.user_id,
            permission_key=permission_key(override.module, override.action),
            defaults={
                "granted": override.granted,
                "created_by": override.created_by or "",
            },
        )

    def delete_override(
        self,
        company_id: uuid.UUID,
        user_id: str,
        module: PermissionModule,
        action: PermissionAction,
    ) -> bool:
        from hrcore.permissions_store.models import UserPermission

        deleted, _ = UserPermission.objects.filter(
            company_id=company_id,
            user_id=user_id,
            permission_key=permission_key(module, action),
        ).delete()
        return deleted > 0

    def set_role_grant(
        self,
        company_id: uuid.UUID,
        role: Role,
        pair: PermissionPair,
        granted: bool,
    ) -> None:
        from hrcore.permissions_store.models import RolePermission

        key = permission_key(*pair)
        if granted:
            RolePermission.objects.get_or_create(
                company_id=company_id,
                role=role.value,
                permission_key=key,
            )
        else:
            RolePermission.objects.filter(
                company_id=company_id,
                role=role.value,
                permission_key=key,
            ).delete()

    def replace_role_grants(
        self,
        company_id: uuid.UUID,
        role: Role,
        pairs: Iterable[PermissionPair],
    ) -> None:
        from django.db import transaction

        from hrcore.permissions_store.models import RolePermission

        keys = sorted({permission_key(*pair) for pair in pairs})
        with transaction.atomic():
            RolePermission.objects.filter(
                company_id=company_id, role=role.value
            ).delete()
            RolePermission.objects.bulk_create(
                [
                    RolePermission(
                        company_id=company_id,
                        role=role.value,
                        permission_key=key,
                    )
                    for key in keys
                ]
            )
