"""Tests for raster.writer — GIF serialization."""

from unittest.mock import patch

import numpy as np
import pytest
from PIL import Image

from engine.assembler import assemble
from engine.frames import Frame
from engine.palette import PLAN9
from errors import DestinationError, EncodeError
from raster.writer import encode_gif, write_gif


def _document(n=4, h=6, w=8):
    rng = np.random.default_rng(0)
    frames = [
        Frame(indices=rng.integers(0, 256, (h, w), dtype=np.uint8), name=f"f{i}")
        for i in range(n)
    ]
    return assemble(frames, PLAN9)


def test_writes_animated_gif(tmp_path):
    path = write_gif(_document(), tmp_path / "out.gif")
    with Image.open(path) as img:
        assert img.format == "GIF"
        assert img.size == (8, 6)
        assert img.n_frames == 4
        assert img.is_animated
        assert img.info["duration"] == 100
        assert img.info["loop"] == 0


def test_first_frame_colors_round_trip(tmp_path):
    doc = _document(n=2)
    path = write_gif(doc, tmp_path / "out.gif")
    with Image.open(path) as img:
        rgb = np.array(img.convert("RGB"))
    expected = PLAN9.as_array()[doc.frames[0].indices]
    np.testing.assert_array_equal(rgb, expected)


def test_destination_error(tmp_path):
    with pytest.raises(DestinationError, match="could not create"):
        write_gif(_document(), tmp_path / "missing_dir" / "out.gif")


def test_encode_error(tmp_path):
    failing = patch(
        "raster.writer.GifImagePlugin.getdata", side_effect=OSError("disk full")
    )
    with failing:
        with pytest.raises(EncodeError, match="disk full"):
            write_gif(_document(), tmp_path / "out.gif")


def test_identical_frames_all_written(tmp_path):
    indices = np.full((4, 4), 7, dtype=np.uint8)
    frames = [Frame(indices=indices.copy(), name=f"same{i}") for i in range(3)]
    path = write_gif(assemble(frames, PLAN9), tmp_path / "out.gif")
    with Image.open(path) as img:
        assert img.n_frames == 3
        for i in range(3):
            img.seek(i)
            assert img.info["duration"] == 100
            rgb = np.array(img.convert("RGB"))
            np.testing.assert_array_equal(rgb, PLAN9.as_array()[indices])


def test_encode_gif_blocks():
    doc = _document(n=3)
    blocks = encode_gif(doc)
    data = b"".join(blocks)
    assert data.startswith(b"GIF89a")
    assert data.endswith(b";")
    assert b"NETSCAPE2.0" in data
