"""Flip Swap — vertical flip of blue/green with red moved into blue."""

import numpy as np

EFFECT_ID = "fx.flip_swap"
EFFECT_NAME = "Flip Swap"
EFFECT_CATEGORY = "glitch"

PARAMS: dict = {}


def apply(
    frame: np.ndarray,
    params: dict,
    *,
    resolution: tuple[int, int],
    source: np.ndarray | None = None,
) -> np.ndarray:
    """Red and green come from the row mirrored across the horizontal midline."""
    width, height = resolution
    frame = frame[:height, :width]
    flipped = frame[::-1]

    output = np.empty((height, width, 4), dtype=np.uint8)
    output[:, :, 0] = flipped[:, :, 2]
    output[:, :, 1] = flipped[:, :, 1]
    output[:, :, 2] = frame[:, :, 0]
    output[:, :, 3] = frame[:, :, 3]
    return output
