"""Merge — combine the run's source raster with the current one.

Green comes from the source, red and blue from the current raster. Used as
the second stage of a chain to blend a distortion back over the original.
"""

import numpy as np

EFFECT_ID = "fx.merge"
EFFECT_NAME = "Merge With Source"
EFFECT_CATEGORY = "composite"

PARAMS: dict = {}


def merge_rasters(first: np.ndarray, second: np.ndarray) -> np.ndarray:
    """Merge two RGBA rasters cropped to their shared size.

    Output pixel = (red(second), green(first), blue(second), 255).
    """
    height = min(first.shape[0], second.shape[0])
    width = min(first.shape[1], second.shape[1])

    output = np.empty((height, width, 4), dtype=np.uint8)
    output[:, :, 0] = second[:height, :width, 0]
    output[:, :, 1] = first[:height, :width, 1]
    output[:, :, 2] = second[:height, :width, 2]
    output[:, :, 3] = 255
    return output


def apply(
    frame: np.ndarray,
    params: dict,
    *,
    resolution: tuple[int, int],
    source: np.ndarray | None = None,
) -> np.ndarray:
    """Merge ``source`` (green) with ``frame`` (red, blue). Opaque output."""
    if source is None:
        source = frame
    return merge_rasters(source, frame)
