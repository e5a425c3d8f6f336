"""Wave — horizontal sinusoidal row displacement with wraparound.

Vectorized with numpy fancy indexing: one integer offset per row, one
gather for the whole raster.
"""

import numpy as np

EFFECT_ID = "fx.wave"
EFFECT_NAME = "Wave"
EFFECT_CATEGORY = "distortion"

PARAMS: dict = {
    "amplitude": {
        "type": "float",
        "min": 0.0,
        "max": 200.0,
        "default": 20.0,
        "label": "Amplitude",
        "curve": "linear",
        "unit": "px",
        "description": "Peak horizontal displacement",
    },
    "frequency": {
        "type": "float",
        "min": 0.0,
        "max": 100.0,
        "default": 20.0,
        "label": "Frequency",
        "curve": "linear",
        "unit": "cycles",
        "description": "Number of wave cycles over the raster height",
    },
}


def source_columns(
    width: int, height: int, amplitude: float, frequency: float
) -> np.ndarray:
    """Return the (height, width) lookup of source columns, all in [0, width)."""
    rows = np.arange(height)
    offsets = np.rint(
        amplitude * np.sin(2 * np.pi * frequency * rows / height)
    ).astype(np.intp)
    # np.mod follows the divisor's sign, so negative columns wrap into range
    return np.mod(np.arange(width)[np.newaxis, :] + offsets[:, np.newaxis], width)


def apply(
    frame: np.ndarray,
    params: dict,
    *,
    resolution: tuple[int, int],
    source: np.ndarray | None = None,
) -> np.ndarray:
    """Shift each row by round(amplitude * sin(2*pi*frequency*y/height))."""
    amplitude = float(params.get("amplitude", 20.0))
    frequency = float(params.get("frequency", 20.0))
    width, height = resolution

    cols = source_columns(width, height, amplitude, frequency)
    return frame[np.arange(height)[:, np.newaxis], cols]
