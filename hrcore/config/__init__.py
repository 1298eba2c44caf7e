"""
hrcore Config — Public API
==========================
Admin-configurable rules (plan presets, role templates, trial length).
"""

from hrcore.config.rules import (
    DEFAULT_TRIAL_TOTAL_DAYS,
    ConfigStore,
    InMemoryConfigStore,
    RoleTemplate,
)

__all__ = [
    "DEFAULT_TRIAL_TOTAL_DAYS",
    "RoleTemplate",
    "ConfigStore",
    "InMemoryConfigStore",
]
