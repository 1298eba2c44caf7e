"""
hrcore Modules - Public API
===========================
"""

from hrcore.modules.catalog import HR_MODULES, ModuleConfig, ModuleId, get_module


def __getattr__(name: str):
    # The access listing reads tenant state, which depends on plans and
    # therefore on this package; load it on first use.
    if name in {
        "ModuleAccess",
        "ModuleAccessList",
        "ModuleAccessReason",
        "MODULE_PERMISSION_MAP",
        "compute_module_access",
    }:
        from hrcore.modules import access

        return getattr(access, name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")


__all__ = [
    "ModuleId",
    "ModuleConfig",
    "HR_MODULES",
    "get_module",
    "ModuleAccess",
    "ModuleAccessList",
    "ModuleAccessReason",
    "MODULE_PERMISSION_MAP",
    "compute_module_access",
]
