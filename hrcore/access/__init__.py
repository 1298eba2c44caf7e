"""
hrcore Access - Public API
==========================
"""

from hrcore.access.engine import (
    AccessContext,
    check_access,
    check_module,
    check_permission,
    check_role,
    check_writes,
    permission_denied_message,
    resolve_access_context,
    role_required_message,
)
from hrcore.access.guard import (
    WriteGuard,
    guard_write,
    require_write,
    write_block_message,
)
from hrcore.access.presentation import (
    FallbackMode,
    GateDecision,
    LockIcon,
    decide_gate,
    lock_icon_for,
)
from hrcore.access.verdict import AccessVerdict, DenialReason

__all__ = [
    "AccessVerdict",
    "DenialReason",
    "AccessContext",
    "resolve_access_context",
    "check_access",
    "check_role",
    "check_module",
    "check_permission",
    "check_writes",
    "permission_denied_message",
    "role_required_message",
    "WriteGuard",
    "guard_write",
    "require_write",
    "write_block_message",
    "FallbackMode",
    "GateDecision",
    "LockIcon",
    "decide_gate",
    "lock_icon_for",
]
