"""spinwheel: spin engine for a gesture-driven decision wheel.

The package converts raw gesture samples into angular momentum, decays that
momentum under friction, and resolves the resting rotation into a sector
index. It owns no clock and renders nothing; callers drive it with
timestamps and frame ticks.

Main subpackages:
- core: session state machine, constants, config, logging
- physics: pure angle, momentum, press and sector math
- animation: headless frame driver that owns the rotation accumulator
- feedback: haptic collaborator interface
- cli: command-line spin simulation
"""

from .core.session import SpinSession
from .core.types import DragUpdate, Point, SpinPhase

__version__ = "0.1.0"

__all__ = [
    "DragUpdate",
    "Point",
    "SpinPhase",
    "SpinSession",
    "__version__",
]
