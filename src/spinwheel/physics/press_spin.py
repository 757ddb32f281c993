"""Press-and-hold spin input.

Holding the wheel's center zone builds velocity on a linear ramp instead of
drag-release momentum.
"""

from __future__ import annotations

import math
from typing import Sequence

from ..core.constants import CENTER_RADIUS, MAX_HOLD_DURATION, MAX_VELOCITY, VELOCITY_PER_SECOND


def velocity(
    hold_duration: float,
    clockwise: bool | None = None,
    *,
    velocity_per_second: float = VELOCITY_PER_SECOND,
    max_velocity: float = MAX_VELOCITY,
) -> float:
    """Spin velocity earned by holding the center for ``hold_duration``.

    Args:
        hold_duration: Seconds the center was held.
        clockwise: ``None`` for the unsigned magnitude, otherwise the sign
            follows the direction (negative for counter-clockwise).
        velocity_per_second: Ramp rate (deg/s gained per second held).
        max_velocity: Cap on the magnitude.

    Returns:
        Velocity in deg/s; 0 for a non-positive hold.
    """
    if hold_duration <= 0:
        return 0.0

    magnitude = min(hold_duration * velocity_per_second, max_velocity)
    if clockwise is None or clockwise:
        return magnitude
    return -magnitude


def is_in_center_region(
    point: Sequence[float],
    wheel_size: float,
    center_radius: float = CENTER_RADIUS,
) -> bool:
    """True if ``point`` lies within ``center_radius`` of the wheel's center.

    The wheel occupies a ``wheel_size x wheel_size`` square whose origin is
    the top-left corner.
    """
    px, py = point
    half = wheel_size / 2
    return math.hypot(px - half, py - half) <= center_radius


def hold_progress(hold_duration: float, max_hold_duration: float = MAX_HOLD_DURATION) -> float:
    """Fraction of the full ramp reached, for progress-ring feedback."""
    if hold_duration <= 0 or max_hold_duration <= 0:
        return 0.0
    return min(hold_duration / max_hold_duration, 1.0)
