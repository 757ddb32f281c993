"""Core value types shared by the physics functions and the session."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple


class Point(NamedTuple):
    """Screen-space point (Y grows downward)."""

    x: float
    y: float


class SpinPhase(str, Enum):
    """Mutually exclusive interaction phase of a spin session."""

    IDLE = "idle"
    DRAGGING = "dragging"
    PRESSING = "pressing"
    SPINNING = "spinning"


@dataclass(frozen=True)
class DragUpdate:
    """Deltas produced by one drag sample.

    Attributes:
        angle_delta: Shortest signed angle change since the previous sample (degrees).
        time_delta: Time elapsed since the previous sample (seconds).
    """

    angle_delta: float
    time_delta: float
