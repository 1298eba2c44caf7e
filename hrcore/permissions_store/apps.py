"""
hrcore Permissions Store - App Configuration
============================================
Persistent memberships, role grants, and per-user overrides.
"""

from django.apps import AppConfig


class PermissionsStoreConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "hrcore.permissions_store"
    label = "hrcore_permissions_store"
    verbose_name = "hrcore Permissions Store"
