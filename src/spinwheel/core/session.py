"""Spin session state machine.

The session tags every spin with a generation number. Deferred work that
resolves a landing sector (an animation completion, a timer callback)
captures the generation returned by :meth:`SpinSession.start_spin` and
re-checks it with :meth:`SpinSession.should_complete` before acting, so a
newer spin or an already-stopped wheel makes the stale callback a no-op.

The session is not synchronized. Gesture and frame callbacks must be
serialized onto one thread (or wrapped in a single lock) by the caller.
"""

from __future__ import annotations

from typing import Any

from ..physics.angle_math import difference
from ..physics.wheel_physics import clamp_velocity
from .constants import MAX_VELOCITY
from .logging import get_logger
from .types import DragUpdate, SpinPhase

logger = get_logger(__name__)


class SpinSession:
    """Transient interaction state for one wheel.

    Args:
        max_velocity: Magnitude cap enforced on every velocity write (deg/s).
    """

    def __init__(self, max_velocity: float = MAX_VELOCITY) -> None:
        self._max_velocity = max_velocity
        self._generation = 0
        self._phase = SpinPhase.IDLE
        self._angular_velocity = 0.0
        self._last_angle = 0.0
        self._last_sample_time: float | None = None
        self._press_start_time: float | None = None
        self._current_hold_duration = 0.0

    # Read-only state

    @property
    def max_velocity(self) -> float:
        return self._max_velocity

    @property
    def generation(self) -> int:
        """Counter incremented by every :meth:`start_spin`."""
        return self._generation

    @property
    def phase(self) -> SpinPhase:
        return self._phase

    @property
    def angular_velocity(self) -> float:
        """Current velocity in deg/s, positive = clockwise."""
        return self._angular_velocity

    @property
    def last_angle(self) -> float:
        return self._last_angle

    @property
    def last_sample_time(self) -> float | None:
        """Time of the drag anchor, None when no drag is in progress."""
        return self._last_sample_time

    @property
    def press_start_time(self) -> float | None:
        return self._press_start_time

    @property
    def current_hold_duration(self) -> float:
        """Hold time so far, for UI feedback only."""
        return self._current_hold_duration

    @property
    def is_spinning(self) -> bool:
        return self._phase is SpinPhase.SPINNING

    @property
    def is_dragging(self) -> bool:
        return self._phase is SpinPhase.DRAGGING

    @property
    def is_pressing(self) -> bool:
        return self._phase is SpinPhase.PRESSING

    # Spin

    def start_spin(self, velocity: float) -> int:
        """Start a new spin attempt.

        Args:
            velocity: Initial velocity (deg/s); clamped to ``max_velocity``.

        Returns:
            The new generation. Deferred completions must capture it.
        """
        self._generation += 1
        self._phase = SpinPhase.SPINNING
        self._angular_velocity = clamp_velocity(velocity, self._max_velocity)
        logger.debug(
            "spin started",
            generation=self._generation,
            velocity=self._angular_velocity,
        )
        return self._generation

    def stop_spin(self) -> None:
        """Return to idle with zero velocity. Safe to call in any phase."""
        self._phase = SpinPhase.IDLE
        self._angular_velocity = 0.0

    def update_velocity(self, velocity: float) -> None:
        """Store the velocity computed by the caller's frame loop (clamped)."""
        self._angular_velocity = clamp_velocity(velocity, self._max_velocity)

    def should_complete(self, generation: int) -> bool:
        """True if ``generation`` is the current spin and it is still running."""
        return generation == self._generation and self._phase is SpinPhase.SPINNING

    def complete_manual_stop(self, generation: int) -> bool:
        """Check-and-stop in one step, for touch-to-stop.

        Checking and stopping as two separate calls would let a pending
        natural completion fire on the already-stopped session.

        Returns:
            True if the spin was current and has now been stopped. False
            (with no state change) otherwise.
        """
        if not self.should_complete(generation):
            logger.debug(
                "manual stop rejected",
                generation=generation,
                current_generation=self._generation,
                phase=self._phase.value,
            )
            return False
        self.stop_spin()
        logger.debug("manual stop", generation=generation)
        return True

    # Drag

    def start_drag(self, time: float, angle: float) -> None:
        """Anchor a drag at ``angle``. Re-entry overwrites the anchor."""
        self._phase = SpinPhase.DRAGGING
        self._last_angle = angle
        self._last_sample_time = time

    def update_drag(self, current_angle: float, time: float) -> DragUpdate | None:
        """Advance the drag by one sample.

        Args:
            current_angle: Angle of the touch from the wheel center (degrees).
            time: Sample timestamp (seconds).

        Returns:
            Angle and time deltas since the previous sample, or None if no
            drag anchor is set (the caller skips this frame).
        """
        if self._last_sample_time is None:
            return None

        angle_delta = difference(self._last_angle, current_angle)
        time_delta = time - self._last_sample_time

        self._last_angle = current_angle
        self._last_sample_time = time

        return DragUpdate(angle_delta=angle_delta, time_delta=time_delta)

    def end_drag(self) -> None:
        """Clear the drag anchor. Spin phase and velocity are untouched."""
        self._last_sample_time = None
        if self._phase is SpinPhase.DRAGGING:
            self._phase = SpinPhase.IDLE

    # Press

    def start_press(self, time: float) -> None:
        self._phase = SpinPhase.PRESSING
        self._press_start_time = time
        self._current_hold_duration = 0.0

    def update_press(self, time: float) -> None:
        """Refresh the feedback hold duration if a press is active."""
        if self._press_start_time is None:
            return
        self._current_hold_duration = time - self._press_start_time

    def end_press(self, time: float) -> float:
        """Finish the press.

        Returns:
            Hold duration in seconds, or 0 if no press was active (in which
            case nothing changes).
        """
        if self._press_start_time is None:
            return 0.0

        duration = time - self._press_start_time
        self._press_start_time = None
        self._current_hold_duration = 0.0
        if self._phase is SpinPhase.PRESSING:
            self._phase = SpinPhase.IDLE
        return duration

    # Lifecycle

    def reset(self) -> None:
        """Invalidate everything, including in-flight spins (generation back to 0)."""
        self._generation = 0
        self._phase = SpinPhase.IDLE
        self._angular_velocity = 0.0
        self._last_angle = 0.0
        self._last_sample_time = None
        self._press_start_time = None
        self._current_hold_duration = 0.0

    def snapshot(self) -> dict[str, Any]:
        """Plain-dict view of the session for diagnostics."""
        return {
            "generation": self._generation,
            "phase": self._phase.value,
            "angular_velocity": self._angular_velocity,
            "last_angle": self._last_angle,
            "last_sample_time": self._last_sample_time,
            "press_start_time": self._press_start_time,
            "current_hold_duration": self._current_hold_duration,
        }
