"""Sector geometry and landing-sector resolution.

Sector 0 is drawn at the top of the wheel and the sectors proceed
clockwise. The pointer is fixed at the top, so a clockwise rotation brings
decreasing-numbered sectors under it: 0 -> N-1 -> N-2 -> ...
"""

from __future__ import annotations

import math

import numpy as np

from ..core.constants import FULL_ROTATION_DEG
from .angle_math import normalize


def sector_angle(sector_count: int) -> float:
    """Angular width of each sector (degrees), 0 for an empty wheel."""
    if sector_count <= 0:
        return 0.0
    return FULL_ROTATION_DEG / sector_count


def _resolve(rotation: float, sector_count: int) -> int:
    normalized = normalize(rotation)
    if normalized == 0:
        return 0
    # A sector counts as landed once its trailing edge has passed the pointer
    rotated = math.ceil(normalized / sector_angle(sector_count)) % sector_count
    return (sector_count - rotated) % sector_count


def landing_sector(rotation: float, sector_count: int) -> int:
    """Index of the sector under the pointer after ``rotation`` degrees.

    Kept for compatibility: an empty wheel (or a non-finite rotation)
    silently yields 0. Production paths use :func:`safe_landing_sector`.

    Args:
        rotation: Total accumulated rotation (degrees, any magnitude or sign).
        sector_count: Number of sectors on the wheel.

    Returns:
        Sector index in ``[0, sector_count)``, or 0.
    """
    if sector_count <= 0 or not math.isfinite(rotation):
        return 0
    return _resolve(rotation, sector_count)


def safe_landing_sector(rotation: float, sector_count: int) -> int | None:
    """Like :func:`landing_sector` but returns None when there is no sector to land on."""
    if sector_count <= 0 or not math.isfinite(rotation):
        return None
    return _resolve(rotation, sector_count)


def landing_sectors(rotations: np.ndarray, sector_count: int) -> np.ndarray:
    """Vectorized :func:`landing_sector` over an array of rotations.

    Args:
        rotations: Rotation array (degrees), any shape.
        sector_count: Number of sectors on the wheel.

    Returns:
        Integer array of sector indices with the shape of ``rotations``.
        All zeros for an empty wheel or non-finite entries.
    """
    r = np.asarray(rotations, dtype=np.float64)
    if sector_count <= 0:
        return np.zeros(r.shape, dtype=np.int64)

    finite = np.isfinite(r)
    normalized = np.mod(np.where(finite, r, 0.0), FULL_ROTATION_DEG)
    normalized = np.where(normalized >= FULL_ROTATION_DEG, 0.0, normalized)

    rotated = np.ceil(normalized / sector_angle(sector_count)).astype(np.int64) % sector_count
    idx = (sector_count - rotated) % sector_count
    return np.where(normalized == 0, 0, idx).astype(np.int64)
