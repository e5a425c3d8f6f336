import numpy as np
import pytest
from PIL import Image


def random_frame(h=24, w=32, seed=42):
    """Deterministic RGBA test frame with varied pixel values."""
    rng = np.random.default_rng(seed)
    return rng.integers(0, 256, (h, w, 4), dtype=np.uint8)


@pytest.fixture
def source_png(tmp_path):
    """A 32x24 random RGBA PNG on disk."""
    path = tmp_path / "source.png"
    Image.fromarray(random_frame()).save(path)
    return path
