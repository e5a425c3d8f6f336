"""Checker Twist — odd-parity pixels borrow color from the point-reflected pixel."""

import numpy as np

EFFECT_ID = "fx.checker_twist"
EFFECT_NAME = "Checker Twist"
EFFECT_CATEGORY = "glitch"

PARAMS: dict = {}


def apply(
    frame: np.ndarray,
    params: dict,
    *,
    resolution: tuple[int, int],
    source: np.ndarray | None = None,
) -> np.ndarray:
    """Where (x + y) is odd, green <- red(p) and blue <- blue(p).

    p = (width - x, height - y). Row 0 and column 0 reflect outside the
    raster and read transparent black. Red always comes from (x, y);
    alpha is forced opaque.
    """
    width, height = resolution
    frame = frame[:height, :width]

    reflected = np.zeros((height, width, 4), dtype=np.uint8)
    reflected[1:, 1:] = frame[:0:-1, :0:-1]

    ys, xs = np.indices((height, width))
    odd = (xs + ys) % 2 == 1

    output = np.empty((height, width, 4), dtype=np.uint8)
    output[:, :, 0] = frame[:, :, 0]
    output[:, :, 1] = np.where(odd, reflected[:, :, 0], frame[:, :, 1])
    output[:, :, 2] = np.where(odd, reflected[:, :, 2], frame[:, :, 2])
    output[:, :, 3] = 255
    return output
