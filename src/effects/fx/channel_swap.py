"""Channel Swap Mirror — swaps red and blue, pulling blue from the mirrored column.

Each output channel can be gated off, which is how the schedule builds its
swap variants (single pass, cascade, triple pass) from one effect.
"""

import numpy as np

EFFECT_ID = "fx.channel_swap"
EFFECT_NAME = "Channel Swap Mirror"
EFFECT_CATEGORY = "glitch"

PARAMS: dict = {
    "keep_blue": {
        "type": "bool",
        "default": True,
        "label": "Keep Blue",
        "description": "Write the mirrored blue channel into the red output",
    },
    "keep_green": {
        "type": "bool",
        "default": True,
        "label": "Keep Green",
        "description": "Write green through unchanged",
    },
    "keep_red": {
        "type": "bool",
        "default": True,
        "label": "Keep Red",
        "description": "Write the red channel into the blue output",
    },
}


def apply(
    frame: np.ndarray,
    params: dict,
    *,
    resolution: tuple[int, int],
    source: np.ndarray | None = None,
) -> np.ndarray:
    """out(x, y) = (blue(x'), green, red, alpha) with x' = width - x. Stateless.

    Column ``width`` lies outside the raster, so the first output column
    reads transparent black for its red channel.
    """
    keep_blue = bool(params.get("keep_blue", True))
    keep_green = bool(params.get("keep_green", True))
    keep_red = bool(params.get("keep_red", True))

    width, height = resolution

    mirrored_blue = np.zeros((height, width), dtype=np.uint8)
    mirrored_blue[:, 1:] = frame[:height, width - 1 : 0 : -1, 2]

    output = np.zeros((height, width, 4), dtype=np.uint8)
    if keep_blue:
        output[:, :, 0] = mirrored_blue
    if keep_green:
        output[:, :, 1] = frame[:height, :width, 1]
    if keep_red:
        output[:, :, 2] = frame[:height, :width, 0]
    output[:, :, 3] = frame[:height, :width, 3]
    return output
