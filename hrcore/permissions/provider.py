"""
hrcore Permissions - Provider Protocols and In-Memory Provider
==============================================================
Read side (PermissionProvider) is all the resolver needs. The write side
(PermissionStore) is used by permission administration.
"""

from __future__ import annotations

import uuid
from typing import FrozenSet, Iterable, Mapping, Protocol, Tuple

from hrcore.permissions.constants import PermissionAction, PermissionModule
from hrcore.permissions.models import CompanyMembership, PermissionOverride
from hrcore.roles import Role

PermissionPair = Tuple[PermissionModule, PermissionAction]


class PermissionProvider(Protocol):
    def get_member_role(
        self, company_id: uuid.UUID, user_id: str
    ) -> Role | None:
        ...

    def get_role_grants(
        self, company_id: uuid.UUID, role: Role
    ) -> FrozenSet[PermissionPair]:
        ...

    def get_overrides(
        self, company_id: uuid.UUID, user_id: str
    ) -> tuple[PermissionOverride, ...]:
        ...


class PermissionStore(PermissionProvider, Protocol):
    def get_active_members(
        self, company_id: uuid.UUID
    ) -> tuple[CompanyMembership, ...]:
        ...

    def upsert_override(self, override: PermissionOverride) -> None:
        ...

    def delete_override(
        self,
        company_id: uuid.UUID,
        user_id: str,
        module: PermissionModule,
        action: PermissionAction,
    ) -> bool:
        ...

    def set_role_grant(
        self,
        company_id: uuid.UUID,
        role: Role,
        pair: PermissionPair,
        granted: bool,
    ) -> None:
        ...

    def replace_role_grants(
        self,
        company_id: uuid.UUID,
        role: Role,
        pairs: Iterable[PermissionPair],
    ) -> None:
        ...


class InMemoryPermissionProvider:
    """
    Deterministic in-memory provider used for bootstrap/tests.
    """

    def __init__(
        self,
        memberships: Iterable[CompanyMembership] | None = None,
        role_grants: Mapping[tuple[uuid.UUID, Role], Iterable[PermissionPair]]
        | None = None,
        overrides: Iterable[PermissionOverride] | None = None,
    ):
        self._members: dict[tuple[uuid.UUID, str], CompanyMembership] = {}
        self._role_grants: dict[tuple[uuid.UUID, Role], set[PermissionPair]] = {}
        self._overrides: dict[
            tuple[uuid.UUID, str], dict[PermissionPair, PermissionOverride]
        ] = {}

        for membership in memberships or ():
            key = (membership.company_id, membership.user_id)
            if key in self._members:
                raise ValueError(
                    f"Duplicate membership for user '{membership.user_id}' "
                    f"in company '{membership.company_id}'."
                )
            self._members[key] = membership

        for (company_id, role), pairs in (role_grants or {}).items():
            self.replace_role_grants(company_id, role, pairs)

        for override in overrides or ():
            self.upsert_override(override)

    # ── read side ─────────────────────────────────────────────

    def get_member_role(
        self, company_id: uuid.UUID, user_id: str
    ) -> Role | None:
        membership = self._members.get((company_id, user_id))
        if membership is None or not membership.is_active:
            return None
        return membership.role

    def get_role_grants(
        self, company_id: uuid.UUID, role: Role
    ) -> FrozenSet[PermissionPair]:
        return frozenset(self._role_grants.get((company_id, role), ()))

    def get_overrides(
        self, company_id: uuid.UUID, user_id: str
    ) -> tuple[PermissionOverride, ...]:
        by_key = self._overrides.get((company_id, user_id), {})
        return tuple(sorted(by_key.values(), key=lambda o: o.sort_key()))

    def get_active_members(
        self, company_id: uuid.UUID
    ) -> tuple[CompanyMembership, ...]:
        members = (
            m for m in self._members.values()
            if m.company_id == company_id and m.is_active
        )
        return tuple(sorted(members, key=lambda m: m.sort_key()))

    # ── write side ────────────────────────────────────────────

    def add_membership(self, membership: CompanyMembership) -> None:
        self._members[(membership.company_id, membership.user_id)] = membership

    def upsert_override(self, override: PermissionOverride) -> None:
        # A newer override for the same key supersedes the old one.
        by_key = self._overrides.setdefault(
            (override.company_id, override.user_id), {}
        )
        by_key[override.key] = override

    def delete_override(
        self,
        company_id: uuid.UUID,
        user_id: str,
        module: PermissionModule,
        action: PermissionAction,
    ) -> bool:
        by_key = self._overrides.get((company_id, user_id), {})
        return by_key.pop((module, action), None) is not None

    def set_role_grant(
        self,
        company_id: uuid.UUID,
        role: Role,
        pair: PermissionPair,
        granted: bool,
    ) -> None:
        grants = self._role_grants.setdefault((company_id, role), set())
        if granted:
            grants.add(pair)
        else:
            grants.discard(pair)

    def replace_role_grants(
        self,
        company_id: uuid.UUID,
        role: Role,
        pairs: Iterable[PermissionPair],
    ) -> None:
        self._role_grants[(company_id, role)] = set(pairs)
