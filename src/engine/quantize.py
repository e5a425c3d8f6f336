"""Palette quantizer — true-color raster to palette indices with error diffusion."""

import numpy as np
from PIL import Image

from engine.palette import Palette


def quantize(raster: np.ndarray, palette: Palette) -> np.ndarray:
    """Reduce an RGBA (or RGB) raster to an (H, W) uint8 index raster.

    Floyd-Steinberg error diffusion: each pixel's rounding error is spread
    7/16 right, 3/16 down-left, 5/16 down, 1/16 down-right over pixels not
    yet visited in raster-scan order. Alpha is dropped; every palette entry
    is opaque.
    """
    if raster.ndim != 3 or raster.shape[2] not in (3, 4):
        raise ValueError(f"expected (H, W, 3|4) raster, got shape {raster.shape}")

    rgb = np.ascontiguousarray(raster[:, :, :3], dtype=np.uint8)
    img = Image.fromarray(rgb)
    indexed = img.quantize(palette=palette.image, dither=Image.Dither.FLOYDSTEINBERG)
    return np.asarray(indexed, dtype=np.uint8)
