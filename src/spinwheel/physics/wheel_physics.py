"""Momentum and deceleration physics for the wheel.

Velocities are in degrees per second, positive = clockwise. Friction is a
per-frame multiplicative decay, so decay speed is tied to the frame rate.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from ..core.constants import (
    DEFAULT_FPS,
    DEFAULT_FRICTION,
    DEFAULT_STOP_THRESHOLD,
    FULL_ROTATION_DEG,
    HALF_ROTATION_DEG,
    MAX_VELOCITY,
)


def angular_velocity(angle_delta: float, duration: float) -> float:
    """Angular velocity from an angle change over time.

    Args:
        angle_delta: Change in angle (degrees).
        duration: Time elapsed (seconds).

    Returns:
        Velocity in deg/s, or 0 for a degenerate (zero or negative) duration.
    """
    if duration <= 0:
        return 0.0
    return angle_delta / duration


def angle_from_center(center: Sequence[float], point: Sequence[float]) -> float:
    """Angle of ``point`` as seen from ``center``, in screen coordinates.

    0° is directly right of center and 90° directly below it (Y grows
    downward).

    Args:
        center: ``(x, y)`` of the wheel center.
        point: ``(x, y)`` of the touch point.

    Returns:
        Angle in degrees, in the range (-180, 180].
    """
    cx, cy = center
    px, py = point
    degrees = math.degrees(math.atan2(py - cy, px - cx))
    # atan2 yields -180 for a negative-zero dy
    if degrees <= -HALF_ROTATION_DEG:
        degrees += FULL_ROTATION_DEG
    return degrees


def apply_friction(velocity: float, friction: float = DEFAULT_FRICTION) -> float:
    """Velocity after one frame of friction."""
    return velocity * friction


def should_stop(velocity: float, threshold: float = DEFAULT_STOP_THRESHOLD) -> bool:
    """True once the wheel is slow enough to be considered stopped."""
    return abs(velocity) < threshold


def clamp_velocity(velocity: float, max_velocity: float = MAX_VELOCITY) -> float:
    """Clamp velocity to ``[-max_velocity, max_velocity]``."""
    return max(-max_velocity, min(max_velocity, velocity))


def rotation_delta_per_frame(velocity: float, fps: float = DEFAULT_FPS) -> float:
    """Rotation (degrees) covered in one frame, 0 for a non-positive frame rate."""
    if fps <= 0:
        return 0.0
    return velocity / fps


def frames_until_stop(
    velocity: float,
    friction: float = DEFAULT_FRICTION,
    threshold: float = DEFAULT_STOP_THRESHOLD,
) -> int:
    """Number of friction frames until :func:`should_stop` becomes true.

    Solves ``|v| * friction**n < threshold`` for the smallest integer ``n``.

    Args:
        velocity: Starting velocity (deg/s).
        friction: Per-frame decay factor, strictly between 0 and 1.
        threshold: Stop threshold (deg/s).

    Returns:
        Frame count, 0 if the velocity is already below the threshold.

    Raises:
        ValueError: If friction is outside (0, 1), threshold is not positive,
            or velocity is not finite.
    """
    if not 0.0 < friction < 1.0:
        raise ValueError(f"friction must be in (0, 1), got {friction}")
    if not threshold > 0.0:
        raise ValueError(f"threshold must be > 0, got {threshold}")
    if not math.isfinite(velocity):
        raise ValueError(f"velocity must be finite, got {velocity}")

    speed = abs(velocity)
    if speed < threshold:
        return 0

    n = max(1, math.ceil(math.log(threshold / speed) / math.log(friction)))
    # Correct the closed form for rounding at the boundary
    while speed * friction**n >= threshold:
        n += 1
    while n > 1 and speed * friction ** (n - 1) < threshold:
        n -= 1
    return n


@dataclass
class DecayProfile:
    """Per-frame trace of a free spin.

    Attributes:
        velocity: Velocity after each frame's friction (deg/s). Shape: (frames,)
        rotation: Cumulative rotation after each frame (degrees). Shape: (frames,)
        fps: Frame rate used for the trace.
    """

    velocity: np.ndarray
    rotation: np.ndarray
    fps: float

    @property
    def frames(self) -> int:
        """Number of frames until stop."""
        return len(self.velocity)

    @property
    def duration_s(self) -> float:
        """Wall-clock length of the spin."""
        return self.frames / self.fps

    @property
    def total_rotation(self) -> float:
        """Rotation covered before the wheel stops (degrees)."""
        return float(self.rotation[-1]) if self.frames else 0.0


def decay_profile(
    velocity: float,
    friction: float = DEFAULT_FRICTION,
    threshold: float = DEFAULT_STOP_THRESHOLD,
    fps: float = DEFAULT_FPS,
) -> DecayProfile:
    """Simulate a free spin from ``velocity`` down to the stop threshold.

    Each frame applies friction first and then advances rotation by the
    decayed velocity, the same order the frame driver uses.

    Args:
        velocity: Starting velocity (deg/s).
        friction: Per-frame decay factor, strictly between 0 and 1.
        threshold: Stop threshold (deg/s).
        fps: Frame rate.

    Returns:
        DecayProfile with per-frame velocity and cumulative rotation.
    """
    n = frames_until_stop(velocity, friction, threshold)
    steps = np.arange(1, n + 1, dtype=np.float64)
    v = velocity * np.power(friction, steps)
    per_frame = v / fps if fps > 0 else np.zeros_like(v)
    return DecayProfile(velocity=v, rotation=np.cumsum(per_frame), fps=fps)
