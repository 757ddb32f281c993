"""Frame driver: the caller side of the spin engine.

:class:`SpinDriver` owns the wheel's rotation accumulator. It turns touch
samples into session calls, advances the rotation once per animation frame,
and resolves the landing sector exactly once per spin generation. A UI
layer forwards its gesture callbacks and display-link ticks here; tests and
the CLI drive it directly with synthetic timestamps.
"""

from __future__ import annotations

from typing import Callable, Sequence

from ..core.config import SpinWheelConfig, default_config
from ..core.logging import get_logger
from ..core.session import SpinSession
from ..feedback.haptics import HapticManager
from ..physics import press_spin
from ..physics.wheel_math import safe_landing_sector
from ..physics.wheel_physics import (
    angle_from_center,
    angular_velocity,
    apply_friction,
    clamp_velocity,
    rotation_delta_per_frame,
    should_stop,
)

logger = get_logger(__name__)


class SpinDriver:
    """Drive a :class:`SpinSession` and its rotation from gestures and frames.

    Args:
        sector_count: Number of sectors on the wheel (0 while content is loading).
        session: Session to drive; a new one is created if omitted.
        config: Physics and driver settings.
        on_land: Called with the landing index when a spin resolves.
        haptics: Optional haptic feedback manager.
        rotation: Initial rotation (degrees).
    """

    def __init__(
        self,
        sector_count: int,
        session: SpinSession | None = None,
        config: SpinWheelConfig | None = None,
        on_land: Callable[[int], None] | None = None,
        haptics: HapticManager | None = None,
        rotation: float = 0.0,
    ) -> None:
        if sector_count < 0:
            raise ValueError(f"sector_count must be >= 0, got {sector_count}")

        self.config = config or default_config()
        self.session = session or SpinSession(max_velocity=self.config.physics.max_velocity)
        self.sector_count = sector_count
        self.on_land = on_land
        self.haptics = haptics
        self.rotation = rotation

        self.frames_elapsed = 0
        self.last_landing: int | None = None
        self.last_landed_generation: int | None = None
        self._release_velocity = 0.0
        self._content_epoch = 0

    @property
    def content_epoch(self) -> int:
        """Bumped by :meth:`set_sector_count`; completions from older content are stale."""
        return self._content_epoch

    # Gestures

    def touch_began(self, point: Sequence[float], time: float, wheel_size: float) -> None:
        """Start a press (center zone) or a drag (anywhere else).

        A touch while spinning interrupts the spin: the session is stopped
        (idle, zero velocity) before the new gesture starts, so pending
        completions for it no longer pass.
        """
        if self.session.is_spinning:
            logger.debug("spin interrupted", generation=self.session.generation)
            self.session.stop_spin()

        if self.haptics is not None:
            self.haptics.wheel_touch_began()

        self._release_velocity = 0.0
        if press_spin.is_in_center_region(point, wheel_size, self.config.press.center_radius):
            self.session.start_press(time)
        else:
            self.session.start_drag(time, self._angle(point, wheel_size))

    def touch_moved(self, point: Sequence[float], time: float, wheel_size: float) -> float:
        """Feed one touch sample.

        Returns:
            Rotation applied for this sample (degrees); 0 while pressing or
            when no drag is anchored.
        """
        if self.session.is_pressing:
            self.session.update_press(time)
            return 0.0

        update = self.session.update_drag(self._angle(point, wheel_size), time)
        if update is None:
            return 0.0

        self.rotation += update.angle_delta
        # Zero-duration samples carry no velocity information
        if update.time_delta > 0:
            self._release_velocity = angular_velocity(update.angle_delta, update.time_delta)
        return update.angle_delta

    def touch_ended(self, time: float) -> int | None:
        """Release the touch and spin if it carried enough momentum.

        Returns:
            Generation of the started spin, or None if no spin started.
        """
        if self.session.is_pressing:
            hold = self.session.end_press(time)
            velocity = press_spin.velocity(
                hold,
                velocity_per_second=self.config.press.velocity_per_second,
                max_velocity=self.config.physics.max_velocity,
            )
        elif self.session.is_dragging:
            self.session.end_drag()
            velocity = self._release_velocity * self.config.driver.release_gain
        else:
            return None

        self._release_velocity = 0.0
        if should_stop(velocity, self.config.physics.stop_threshold):
            return None
        return self.begin_spin(velocity)

    # Frames

    def begin_spin(self, velocity: float) -> int:
        """Start a spin and return its generation."""
        generation = self.session.start_spin(
            clamp_velocity(velocity, self.config.physics.max_velocity)
        )
        self.frames_elapsed = 0
        if self.haptics is not None:
            self.haptics.spin_started()
        return generation

    def tick(self) -> float:
        """Advance one animation frame.

        Applies friction, advances the rotation, and resolves the landing
        sector on the frame the velocity drops below the stop threshold.

        Returns:
            Rotation applied this frame (degrees).
        """
        if not self.session.is_spinning:
            return 0.0

        physics = self.config.physics
        generation = self.session.generation

        velocity = apply_friction(self.session.angular_velocity, physics.friction)
        delta = rotation_delta_per_frame(velocity, physics.fps)
        self.rotation += delta
        self.session.update_velocity(velocity)
        self.frames_elapsed += 1

        if should_stop(velocity, physics.stop_threshold) and self.session.should_complete(generation):
            self.session.stop_spin()
            self._resolve(generation)
        return delta

    def run_until_stopped(self) -> int | None:
        """Tick until the current spin resolves.

        Returns:
            Landing index of the current spin, or None if nothing was
            spinning, the wheel is empty, or ``max_frames`` ran out.
        """
        if not self.session.is_spinning:
            return None

        generation = self.session.generation
        for _ in range(self.config.driver.max_frames):
            if not self.session.is_spinning:
                break
            self.tick()
        else:
            if self.session.is_spinning:
                logger.warn(
                    "spin did not settle",
                    generation=generation,
                    frames=self.frames_elapsed,
                    velocity=self.session.angular_velocity,
                )
                return None

        if self.last_landed_generation == generation:
            return self.last_landing
        return None

    # Completion

    def stop_by_touch(self, generation: int, *, epoch: int | None = None) -> int | None:
        """Touch-to-stop: stop the spin and land where the wheel is now.

        Args:
            generation: Generation the caller is stopping.
            epoch: ``content_epoch`` the caller saw when the spin started.
                Omit it when stopping the spin on screen right now.

        Returns:
            Landing index, or None if ``generation`` or ``epoch`` is stale or
            nothing is spinning.
        """
        if epoch is not None and epoch != self._content_epoch:
            logger.debug(
                "stale stop ignored",
                generation=generation,
                epoch=epoch,
                content_epoch=self._content_epoch,
            )
            return None
        if not self.session.complete_manual_stop(generation):
            return None
        return self._resolve(generation)

    def completion_callback(self, generation: int) -> Callable[[], int | None]:
        """Build a deferred completion for ``generation``.

        The callback is safe to fire late: it re-checks the generation and
        the content epoch, and does nothing once the spin it was built for has
        ended or the sectors were replaced.
        """
        epoch = self._content_epoch

        def complete() -> int | None:
            if epoch != self._content_epoch or not self.session.should_complete(generation):
                logger.debug(
                    "stale completion ignored",
                    generation=generation,
                    current_generation=self.session.generation,
                    epoch=epoch,
                    content_epoch=self._content_epoch,
                )
                return None
            self.session.stop_spin()
            return self._resolve(generation)

        return complete

    def set_sector_count(self, sector_count: int) -> None:
        """Replace wheel content. Any in-flight spin is invalidated.

        The session generation restarts at 0, so the content epoch is bumped
        to keep older completions from matching a later spin's generation.
        """
        if sector_count < 0:
            raise ValueError(f"sector_count must be >= 0, got {sector_count}")
        self.sector_count = sector_count
        self.session.reset()
        self._content_epoch += 1
        self.last_landing = None
        self.last_landed_generation = None
        self._release_velocity = 0.0

    def _angle(self, point: Sequence[float], wheel_size: float) -> float:
        half = wheel_size / 2
        return angle_from_center((half, half), point)

    def _resolve(self, generation: int) -> int | None:
        index = safe_landing_sector(self.rotation, self.sector_count)
        if index is None:
            logger.warn("no sector to land on", generation=generation, sector_count=self.sector_count)
            return None

        self.last_landing = index
        self.last_landed_generation = generation
        logger.info(
            "landed",
            generation=generation,
            sector=index,
            rotation=self.rotation,
            frames=self.frames_elapsed,
        )
        if self.haptics is not None:
            self.haptics.spin_completed()
        if self.on_land is not None:
            self.on_land(index)
        return index
