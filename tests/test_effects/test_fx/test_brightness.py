"""Tests for fx.brightness — scale and clamp."""

import numpy as np
import pytest

from effects.fx.brightness import PARAMS, apply


def _frame(h=16, w=16):
    rng = np.random.default_rng(42)
    return rng.integers(0, 256, (h, w, 4), dtype=np.uint8)


def test_default_factor():
    assert PARAMS["factor"]["default"] == 4.0


def test_scales_and_saturates():
    frame = np.zeros((1, 3, 4), dtype=np.uint8)
    frame[0, :, :3] = [[10, 20, 30], [63, 64, 65], [100, 200, 255]]
    frame[0, :, 3] = [0, 128, 255]
    result = apply(frame, {"factor": 4.0}, resolution=(3, 1))
    np.testing.assert_array_equal(
        result[0, :, :3], [[40, 80, 120], [252, 255, 255], [255, 255, 255]]
    )
    np.testing.assert_array_equal(result[0, :, 3], [0, 128, 255])


@pytest.mark.parametrize("factor", [0.0, 0.5, 1.0, 4.0, 1000.0])
def test_clamp_invariant(factor):
    frame = _frame()
    result = apply(frame, {"factor": factor}, resolution=(16, 16))
    assert result.dtype == np.uint8
    assert result.min() >= 0
    assert result.max() <= 255
    np.testing.assert_array_equal(result[:, :, 3], frame[:, :, 3])


def test_huge_factor_saturates_nonzero_channels():
    frame = _frame()
    result = apply(frame, {"factor": 1000.0}, resolution=(16, 16))
    rgb_in = frame[:, :, :3]
    np.testing.assert_array_equal(result[:, :, :3], np.where(rgb_in > 0, 255, 0))


def test_truncates_fractional_products():
    frame = np.full((1, 1, 4), 3, dtype=np.uint8)
    result = apply(frame, {"factor": 1.5}, resolution=(1, 1))
    assert tuple(result[0, 0, :3]) == (4, 4, 4)
