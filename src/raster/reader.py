"""Raster decoding via Pillow, dispatched on file extension."""

import logging
from pathlib import Path

import numpy as np
from PIL import Image

from errors import DecodeError, UnsupportedFormatError

logger = logging.getLogger(__name__)

# extension -> Pillow format name
DECODERS = {
    ".png": "PNG",
    ".jpg": "JPEG",
    ".jpeg": "JPEG",
}


def load_raster(path: str | Path) -> np.ndarray:
    """Decode a PNG or JPEG file. Returns a read-only RGBA uint8 array (H, W, 4).

    Raises:
        UnsupportedFormatError: If the extension is not .png, .jpg or .jpeg.
        DecodeError: If the file cannot be opened or is not a valid raster.
    """
    path = Path(path)
    ext = path.suffix.lower()
    fmt = DECODERS.get(ext)
    if fmt is None:
        raise UnsupportedFormatError(f"unsupported file type: {ext or path.name}")

    try:
        with Image.open(path, formats=[fmt]) as img:
            rgba = np.array(img.convert("RGBA"), dtype=np.uint8)
    except FileNotFoundError as e:
        raise DecodeError(f"source not found: {path}", cause=e) from e
    except (OSError, SyntaxError, Image.DecompressionBombError) as e:
        logger.debug("Decode failed for %s", path, exc_info=True)
        raise DecodeError(f"could not decode {path}", cause=e) from e

    rgba.flags.writeable = False
    logger.info("Loaded %s: %dx%d %s", path.name, rgba.shape[1], rgba.shape[0], fmt)
    return rgba
