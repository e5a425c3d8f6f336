"""GIF encoding via Pillow.

Every frame is written as its own image block with Pillow's frame-level
GIF helpers, including frames that repeat the previous one.
"""

import logging
from pathlib import Path

from PIL import GifImagePlugin, Image

from engine.assembler import AnimationDocument
from errors import DestinationError, EncodeError

logger = logging.getLogger(__name__)

GIF_TRAILER = b";"


def _frame_image(frame, palette) -> Image.Image:
    img = Image.fromarray(frame.indices)
    img.putpalette(palette.flat)  # turns the "L" image into "P"
    return img


def encode_gif(document: AnimationDocument) -> list[bytes]:
    """Return the GIF byte blocks for ``document``, one image block per frame.

    All frames share the global color table written with the header.
    """
    images = [_frame_image(f, document.palette) for f in document.frames]
    header, _ = GifImagePlugin.getheader(images[0], info={"loop": document.loop})
    blocks = list(header)
    for img, frame in zip(images, document.frames):
        blocks.extend(GifImagePlugin.getdata(img, duration=frame.delay_ms))
    blocks.append(GIF_TRAILER)
    return blocks


def write_gif(document: AnimationDocument, path: str | Path) -> Path:
    """Serialize ``document`` as an animated GIF at ``path``.

    Raises:
        DestinationError: If the file cannot be opened for writing.
        EncodeError: If Pillow fails while encoding the frames.
    """
    path = Path(path)
    try:
        fh = open(path, "wb")  # noqa: SIM115
    except OSError as e:
        raise DestinationError(f"could not create {path}", cause=e) from e

    with fh:
        try:
            for block in encode_gif(document):
                fh.write(block)
        except (OSError, ValueError) as e:
            raise EncodeError(f"could not encode GIF to {path}", cause=e) from e

    logger.info("Wrote %s: %d frames", path, len(document))
    return path
