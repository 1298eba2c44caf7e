"""
hrcore Access — Presentation Adapter
====================================
Turns a verdict into what a gated element should do. Rendering itself
belongs to the host application.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from hrcore.access.verdict import AccessVerdict, DenialReason


class FallbackMode(Enum):
    HIDE = "hide"
    DISABLE = "disable"
    LOCK_ICON = "lock-icon"
    CUSTOM = "custom"


class LockIcon(Enum):
    LOCK = "Lock"
    SHIELD_OFF = "ShieldOff"
    CROWN = "Crown"
    EYE = "Eye"


def lock_icon_for(reason: Optional[DenialReason]) -> LockIcon:
    if reason == DenialReason.PERMISSION:
        return LockIcon.SHIELD_OFF
    if reason == DenialReason.MODULE:
        return LockIcon.CROWN
    if reason == DenialReason.IMPERSONATING:
        return LockIcon.EYE
    return LockIcon.LOCK


@dataclass(frozen=True)
class GateDecision:
    """
    visible:  render the element at all
    enabled:  element is interactive
    use_fallback: render the caller's custom fallback instead
    """

    visible: bool
    enabled: bool
    icon: Optional[LockIcon] = None
    message: str = ""
    use_fallback: bool = False


_HIDDEN = GateDecision(visible=False, enabled=False)


def decide_gate(
    verdict: Optional[AccessVerdict],
    fallback: FallbackMode = FallbackMode.HIDE,
    denied_message: Optional[str] = None,
) -> GateDecision:
    """
    verdict=None means access is still loading: render nothing rather
    than flash the element.
    """
    if verdict is None:
        return _HIDDEN

    if verdict.has_access:
        return GateDecision(visible=True, enabled=True)

    message = denied_message or verdict.message

    if fallback == FallbackMode.HIDE:
        return _HIDDEN

    if fallback == FallbackMode.DISABLE:
        return GateDecision(visible=True, enabled=False, message=message)

    if fallback == FallbackMode.LOCK_ICON:
        return GateDecision(
            visible=True,
            enabled=False,
            icon=lock_icon_for(verdict.denial_reason),
            message=message,
        )

    return GateDecision(
        visible=True, enabled=False, message=message, use_fallback=True
    )
