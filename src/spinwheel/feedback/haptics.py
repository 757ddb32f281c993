"""Haptic feedback interface.

The engine never talks to haptic hardware. Platforms supply a
:class:`HapticProvider`; :class:`HapticManager` maps wheel events onto it.
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol


class ImpactStyle(str, Enum):
    LIGHT = "light"
    MEDIUM = "medium"
    HEAVY = "heavy"


class NotificationType(str, Enum):
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


class HapticProvider(Protocol):
    """Platform haptics backend."""

    def trigger_impact(self, style: ImpactStyle) -> None: ...

    def trigger_notification(self, kind: NotificationType) -> None: ...

    def trigger_selection(self) -> None: ...


class HapticManager:
    """Semantic haptic events for wheel interaction."""

    def __init__(self, provider: HapticProvider) -> None:
        self.provider = provider
        self.is_enabled = True

    def wheel_touch_began(self) -> None:
        """Light impact when a finger first lands on the wheel."""
        if self.is_enabled:
            self.provider.trigger_impact(ImpactStyle.LIGHT)

    def spin_started(self) -> None:
        """Medium impact when released momentum starts a spin."""
        if self.is_enabled:
            self.provider.trigger_impact(ImpactStyle.MEDIUM)

    def spin_completed(self) -> None:
        """Success notification when the wheel lands on a sector."""
        if self.is_enabled:
            self.provider.trigger_notification(NotificationType.SUCCESS)

    def selection_changed(self) -> None:
        if self.is_enabled:
            self.provider.trigger_selection()
