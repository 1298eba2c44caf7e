"""
hrcore Access — Verdict Model
=============================
The single result type of every access decision. Denials are values;
nothing in the decision path raises.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

from hrcore.rejection import ReasonCode, RejectionReason


class DenialReason(Enum):
    ROLE = "role"
    MODULE = "module"
    FROZEN = "frozen"
    IMPERSONATING = "impersonating"
    PERMISSION = "permission"


_REJECTION_CODES: Dict[DenialReason, str] = {
    DenialReason.IMPERSONATING: ReasonCode.IMPERSONATING,
    DenialReason.FROZEN: ReasonCode.TENANT_FROZEN,
    DenialReason.PERMISSION: ReasonCode.PERMISSION_DENIED,
    DenialReason.ROLE: ReasonCode.ROLE_REQUIRED,
    DenialReason.MODULE: ReasonCode.PLAN_UPGRADE_REQUIRED,
}


@dataclass(frozen=True)
class AccessVerdict:
    """
    Outcome of one check.

    A granted verdict has no denial reason and an empty message; a
    denied verdict always has both.
    """

    has_access: bool
    denial_reason: Optional[DenialReason] = None
    message: str = ""
    is_frozen: bool = False
    is_impersonating: bool = False

    def __post_init__(self):
        if self.has_access and self.denial_reason is not None:
            raise ValueError("Granted verdict cannot carry a denial reason.")

        if not self.has_access and (self.denial_reason is None or not self.message):
            raise ValueError("Denied verdict requires a denial reason and message.")

    def to_rejection(self, policy_name: str) -> Optional[RejectionReason]:
        """RejectionReason for a denial, None when access is granted."""
        if self.has_access:
            return None
        return RejectionReason(
            code=_REJECTION_CODES[self.denial_reason],
            message=self.message,
            policy_name=policy_name,
        )

    def to_dict(self) -> dict:
        return {
            "has_access": self.has_access,
            "denial_reason": (
                self.denial_reason.value if self.denial_reason is not None else None
            ),
            "message": self.message,
            "is_frozen": self.is_frozen,
            "is_impersonating": self.is_impersonating,
        }
