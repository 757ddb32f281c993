"""Pure physics and geometry functions for the spin engine."""

from . import angle_math, press_spin, wheel_math, wheel_physics

__all__ = ["angle_math", "press_spin", "wheel_math", "wheel_physics"]
