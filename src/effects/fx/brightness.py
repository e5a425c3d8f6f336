"""Brightness — multiply RGB by a fixed factor, saturating at 255."""

import numpy as np

EFFECT_ID = "fx.brightness"
EFFECT_NAME = "Brightness"
EFFECT_CATEGORY = "color"

PARAMS: dict = {
    "factor": {
        "type": "float",
        "min": 0.0,
        "max": 8.0,
        "default": 4.0,
        "label": "Factor",
        "curve": "linear",
        "unit": "x",
        "description": "Channel multiplier (>1 brightens and may clip to white)",
    },
}


def apply(
    frame: np.ndarray,
    params: dict,
    *,
    resolution: tuple[int, int],
    source: np.ndarray | None = None,
) -> np.ndarray:
    """Scale RGB, clamp to [0, 255], preserve alpha. Stateless."""
    factor = float(params.get("factor", 4.0))
    width, height = resolution

    output = frame[:height, :width].copy()
    scaled = output[:, :, :3].astype(np.float32) * factor
    # clip before the cast: astype truncates like int() but wraps out-of-range values
    output[:, :, :3] = np.clip(scaled, 0, 255).astype(np.uint8)
    return output
