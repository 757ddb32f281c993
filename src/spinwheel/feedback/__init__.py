"""Presentation-side collaborator interfaces."""

from .haptics import HapticManager, HapticProvider, ImpactStyle, NotificationType

__all__ = ["HapticManager", "HapticProvider", "ImpactStyle", "NotificationType"]
