"""Core module: session state machine, types, constants, config, logging."""

from .config import SpinWheelConfig, default_config, load_config, merge_config, save_config
from .session import SpinSession
from .types import DragUpdate, Point, SpinPhase

__all__ = [
    "DragUpdate",
    "Point",
    "SpinPhase",
    "SpinSession",
    "SpinWheelConfig",
    "default_config",
    "load_config",
    "merge_config",
    "save_config",
]
