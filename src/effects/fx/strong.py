"""Strong — recolor each pixel by its dominant channel."""

import numpy as np

EFFECT_ID = "fx.strong"
EFFECT_NAME = "Strong"
EFFECT_CATEGORY = "color"

PARAMS: dict = {}


def dominant_channel(rgb: np.ndarray) -> np.ndarray:
    """Return 0/1/2 (red/green/blue) per pixel. Ties resolve red > green > blue."""
    r = rgb[:, :, 0]
    g = rgb[:, :, 1]
    b = rgb[:, :, 2]
    red_wins = (r >= g) & (r >= b)
    green_wins = ~red_wins & (g >= b)
    return np.where(red_wins, 0, np.where(green_wins, 1, 2)).astype(np.uint8)


def apply(
    frame: np.ndarray,
    params: dict,
    *,
    resolution: tuple[int, int],
    source: np.ndarray | None = None,
) -> np.ndarray:
    """Remap by winner: red -> (b/2, g/5, r/2), green -> (0, b, g/2), blue -> (g/10, r, b/8)."""
    width, height = resolution
    rgb = frame[:height, :width, :3]
    r = rgb[:, :, 0]
    g = rgb[:, :, 1]
    b = rgb[:, :, 2]
    winner = dominant_channel(rgb)

    output = np.empty((height, width, 4), dtype=np.uint8)
    # choices stay uint8; a scalar choice promotes the result to int64
    output[:, :, 0] = np.select(
        [winner == 0, winner == 1], [b // 2, np.zeros_like(b)], g // 10
    )
    output[:, :, 1] = np.select([winner == 0, winner == 1], [g // 5, b], r)
    output[:, :, 2] = np.select([winner == 0, winner == 1], [r // 2, g // 2], b // 8)
    output[:, :, 3] = 255
    return output
