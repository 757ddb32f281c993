"""Pytest configuration and shared fixtures for spinwheel."""

from __future__ import annotations

import pytest

from spinwheel.core.logging import set_log_level
from spinwheel.core.session import SpinSession
from spinwheel.feedback.haptics import HapticManager


class RecordingHapticProvider:
    """Haptic backend that records every call."""

    def __init__(self) -> None:
        self.events: list[tuple[str, str]] = []

    def trigger_impact(self, style) -> None:
        self.events.append(("impact", style.value))

    def trigger_notification(self, kind) -> None:
        self.events.append(("notification", kind.value))

    def trigger_selection(self) -> None:
        self.events.append(("selection", ""))


@pytest.fixture(autouse=True)
def _restore_log_level():
    yield
    set_log_level("INFO")


@pytest.fixture
def session() -> SpinSession:
    return SpinSession()


@pytest.fixture
def haptic_provider() -> RecordingHapticProvider:
    return RecordingHapticProvider()


@pytest.fixture
def haptics(haptic_provider: RecordingHapticProvider) -> HapticManager:
    return HapticManager(haptic_provider)
