"""Configuration management with pydantic and YAML support."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

from .constants import (
    CENTER_RADIUS,
    DEFAULT_FPS,
    DEFAULT_FRICTION,
    DEFAULT_MAX_FRAMES,
    DEFAULT_RELEASE_GAIN,
    DEFAULT_STOP_THRESHOLD,
    MAX_VELOCITY,
    VELOCITY_PER_SECOND,
)


class WheelPhysicsConfig(BaseModel):
    """Momentum decay configuration."""

    friction: float = Field(default=DEFAULT_FRICTION, gt=0.0, lt=1.0)
    stop_threshold: float = Field(default=DEFAULT_STOP_THRESHOLD, gt=0.0)
    max_velocity: float = Field(default=MAX_VELOCITY, gt=0.0)
    fps: float = Field(default=DEFAULT_FPS, gt=0.0)


class PressSpinConfig(BaseModel):
    """Press-and-hold input configuration."""

    velocity_per_second: float = Field(default=VELOCITY_PER_SECOND, gt=0.0)
    center_radius: float = Field(default=CENTER_RADIUS, ge=0.0)


class DriverConfig(BaseModel):
    """Frame driver settings."""

    release_gain: float = Field(default=DEFAULT_RELEASE_GAIN, ge=0.0)
    max_frames: int = Field(default=DEFAULT_MAX_FRAMES, ge=1)


class SpinWheelConfig(BaseModel):
    """Root configuration object."""

    physics: WheelPhysicsConfig = Field(default_factory=WheelPhysicsConfig)
    press: PressSpinConfig = Field(default_factory=PressSpinConfig)
    driver: DriverConfig = Field(default_factory=DriverConfig)

    @property
    def max_hold_duration(self) -> float:
        """Hold time (s) after which press velocity is capped."""
        return self.physics.max_velocity / self.press.velocity_per_second


def load_config(path: str | Path) -> SpinWheelConfig:
    """Load wheel settings from a YAML file.

    The file may hold any subset of the ``physics``, ``press`` and ``driver``
    sections; missing sections and keys keep their defaults, and an empty
    file yields :func:`default_config`.

    Args:
        path: Path to YAML config file.

    Returns:
        Validated SpinWheelConfig.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        pydantic.ValidationError: If a value is out of range, e.g. a
            ``physics.friction`` of 1.0 or more.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path) as f:
        data = yaml.safe_load(f)

    return SpinWheelConfig.model_validate(data or {})


def save_config(config: SpinWheelConfig, path: str | Path) -> None:
    """Write all three sections to YAML, creating parent directories.

    The output loads back through :func:`load_config` unchanged.

    Args:
        config: Configuration to save.
        path: Output path.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w") as f:
        yaml.safe_dump(config.model_dump(), f, default_flow_style=False)


def default_config() -> SpinWheelConfig:
    """Return the stock wheel: friction 0.99, 60 fps, 2000 deg/s cap."""
    return SpinWheelConfig()


def merge_config(base: SpinWheelConfig, overrides: dict[str, Any]) -> SpinWheelConfig:
    """Apply per-section overrides on top of ``base``.

    Overrides are merged key by key inside each section, so
    ``{"physics": {"friction": 0.98}}`` keeps the base stop threshold and
    frame rate. The merged result is validated again, so bounds such as
    ``0 < friction < 1`` or ``driver.max_frames >= 1`` still hold.

    Args:
        base: Base configuration.
        overrides: Nested dictionary keyed by section name.

    Returns:
        New validated configuration; ``base`` is not modified.
    """

    def deep_merge(d1: dict, d2: dict) -> dict:
        result = d1.copy()
        for k, v in d2.items():
            if k in result and isinstance(result[k], dict) and isinstance(v, dict):
                result[k] = deep_merge(result[k], v)
            else:
                result[k] = v
        return result

    merged = deep_merge(base.model_dump(), overrides)
    return SpinWheelConfig.model_validate(merged)
