"""Wraparound-correct angle arithmetic (degrees)."""

from __future__ import annotations

from ..core.constants import FULL_ROTATION_DEG, HALF_ROTATION_DEG


def difference(from_angle: float, to_angle: float) -> float:
    """Shortest signed angular difference from ``from_angle`` to ``to_angle``.

    Raw samples from ``atan2`` wrap at ±180°, so a drag from 170° to -170°
    is a 20° clockwise move, not -340°. Any number of whole turns between
    the two inputs is discarded.

    Args:
        from_angle: Starting angle (degrees).
        to_angle: Ending angle (degrees).

    Returns:
        Signed difference in degrees, in the range (-180, 180].
    """
    diff = (to_angle - from_angle) % FULL_ROTATION_DEG
    if diff > HALF_ROTATION_DEG:
        diff -= FULL_ROTATION_DEG
    return float(diff)


def normalize(angle: float) -> float:
    """Map an angle of any magnitude into [0, 360)."""
    result = angle % FULL_ROTATION_DEG
    # Tiny negative inputs round up to exactly one full turn
    if result >= FULL_ROTATION_DEG:
        result -= FULL_ROTATION_DEG
    return float(result)
