"""Kaleidoscope — fold the top-left quadrant into the other three."""

import numpy as np

EFFECT_ID = "fx.kaleidoscope"
EFFECT_NAME = "Kaleidoscope"
EFFECT_CATEGORY = "whimsy"

PARAMS: dict = {}


def _folded(size: int) -> np.ndarray:
    """Indices for one axis: identity below the midpoint, mirrored above it."""
    idx = np.arange(size)
    return np.where(idx < size // 2, idx, size - idx - 1)


def apply(
    frame: np.ndarray,
    params: dict,
    *,
    resolution: tuple[int, int],
    source: np.ndarray | None = None,
) -> np.ndarray:
    """Quadrant mirror split at (width // 2, height // 2).

    top-left: identity, top-right: horizontal mirror,
    bottom-left: vertical mirror, bottom-right: both.
    """
    width, height = resolution
    rows = _folded(height)
    cols = _folded(width)
    return frame[rows[:, np.newaxis], cols[np.newaxis, :]]
