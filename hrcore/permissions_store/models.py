"""
hrcore Permissions Store - Relational Permission State
======================================================
CompanyMember holds a user's role inside a company.
RolePermission maps (company, role) to granted permission keys.
UserPermission holds explicit per-user overrides (granted True/False).
"""

from __future__ import annotations

from django.db import models


class MemberRole(models.TextChoices):
    EMPLOYEE = "employee", "Employee"
    MANAGER = "manager", "Manager"
    HR_MANAGER = "hr_manager", "HR Manager"
    COMPANY_ADMIN = "company_admin", "Company Admin"
    SUPER_ADMIN = "super_admin", "Super Admin"


class CompanyMember(models.Model):
    company_id = models.UUIDField()
    user_id = models.CharField(max_length=255)
    role = models.CharField(max_length=32, choices=MemberRole.choices)
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "hrcore_company_users"
        ordering = ["company_id", "user_id"]
        constraints = [
            models.UniqueConstraint(
                fields=["company_id", "user_id"],
                name="uq_company_user",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.company_id}:{self.user_id} ({self.role})"


class RolePermission(models.Model):
    company_id = models.UUIDField()
    role = models.CharField(max_length=32, choices=MemberRole.choices)
    permission_key = models.CharField(max_length=64)
    created_by = models.CharField(max_length=255, blank=True, default="")
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "hrcore_role_permissions"
        ordering = ["company_id", "role", "permission_key"]
        indexes = [
            models.Index(fields=["company_id", "role"], name="idx_role_perm_company_role"),
        ]
        constraints = [
            models.UniqueConstraint(
                fields=["company_id", "role", "permission_key"],
                name="uq_role_permission",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.company_id}:{self.role}:{self.permission_key}"


class UserPermission(models.Model):
    company_id = models.UUIDField()
    user_id = models.CharField(max_length=255)
    permission_key = models.CharField(max_length=64)
    granted = models.BooleanField(default=True)
    created_by = models.CharField(max_length=255, blank=True, default="")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "hrcore_user_permissions"
        ordering = ["company_id", "user_id", "permission_key"]
        indexes = [
            models.Index(fields=["company_id", "user_id"], name="idx_user_perm_company_user"),
        ]
        constraints = [
            models.UniqueConstraint(
                fields=["company_id", "user_id", "permission_key"],
                name="uq_user_permission",
            ),
        ]

    def __str__(self) -> str:
        verdict = "allow" if self.granted else "deny"
        return f"{self.company_id}:{self.user_id}:{self.permission_key} ({verdict})"
