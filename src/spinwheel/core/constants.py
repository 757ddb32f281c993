"""Core physics constants for the spin engine.

This module defines process-wide defaults such as:
- Friction and stop threshold for momentum decay
- Velocity cap shared by drag and press input
- Press-and-hold ramp and center hit-test radius
"""

from __future__ import annotations

# Angles
FULL_ROTATION_DEG = 360.0
HALF_ROTATION_DEG = 180.0

# Momentum decay
# Per-frame multiplicative factor (0.99 = 1% reduction per frame)
DEFAULT_FRICTION = 0.99
DEFAULT_STOP_THRESHOLD = 1.0  # deg/s
MAX_VELOCITY = 2000.0  # deg/s
DEFAULT_FPS = 60.0

# Press-and-hold input
VELOCITY_PER_SECOND = 600.0  # deg/s gained per second of hold
CENTER_RADIUS = 25.0  # points
MAX_HOLD_DURATION = MAX_VELOCITY / VELOCITY_PER_SECOND  # s, ~3.33

# Drag release
# Measured drag velocity is amplified before it becomes spin momentum
DEFAULT_RELEASE_GAIN = 1.5
DEFAULT_MAX_FRAMES = 100_000
