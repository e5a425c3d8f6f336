"""Tests for engine.pipeline — chain reduction, ordering, depth cap, timing warnings."""

import logging
import time

import numpy as np
import pytest

from effects.fx.kaleidoscope import apply as kaleidoscope_apply
from engine.pipeline import EFFECT_WARN_MS, MAX_CHAIN_DEPTH, apply_chain

pytestmark = pytest.mark.smoke


def _frame(h=20, w=20):
    rng = np.random.default_rng(42)
    return rng.integers(0, 256, (h, w, 4), dtype=np.uint8)


def _swap(**gates):
    return {"effect_id": "fx.channel_swap", "params": gates}


def test_empty_chain_returns_original():
    frame = _frame()
    np.testing.assert_array_equal(apply_chain(frame, []), frame)


def test_single_effect_chain():
    frame = _frame()
    output = apply_chain(frame, [{"effect_id": "fx.flip_swap", "params": {}}])
    assert output.shape == frame.shape
    np.testing.assert_array_equal(output[:, :, 2], frame[:, :, 0])


def test_steps_apply_left_to_right():
    frame = _frame()
    chain = [
        {"effect_id": "fx.brightness", "params": {"factor": 2.0}},
        {"effect_id": "fx.kaleidoscope", "params": {}},
    ]
    brightened = np.clip(frame[:, :, :3].astype(np.float32) * 2.0, 0, 255)
    expected = frame.copy()
    expected[:, :, :3] = brightened.astype(np.uint8)
    expected = kaleidoscope_apply(expected, {}, resolution=(20, 20))
    np.testing.assert_array_equal(apply_chain(frame, chain), expected)


def test_order_matters():
    frame = _frame()
    ab = [{"effect_id": "fx.checker_twist", "params": {}}, _swap()]
    ba = [_swap(), {"effect_id": "fx.checker_twist", "params": {}}]
    assert not np.array_equal(apply_chain(frame, ab), apply_chain(frame, ba))


def test_merge_step_reads_run_source():
    frame = _frame()
    chain = [
        {"effect_id": "fx.kaleidoscope", "params": {}},
        {"effect_id": "fx.merge", "params": {}},
    ]
    output = apply_chain(frame, chain, source=frame)
    kaleido = kaleidoscope_apply(frame, {}, resolution=(20, 20))
    np.testing.assert_array_equal(output[:, :, 0], kaleido[:, :, 0])
    np.testing.assert_array_equal(output[:, :, 1], frame[:, :, 1])
    np.testing.assert_array_equal(output[:, :, 2], kaleido[:, :, 2])
    np.testing.assert_array_equal(output[:, :, 3], 255)


def test_input_not_mutated():
    frame = _frame()
    before = frame.copy()
    apply_chain(frame, [_swap(), _swap(), _swap()])
    np.testing.assert_array_equal(frame, before)


def test_depth_cap_enforced():
    chain = [_swap() for _ in range(MAX_CHAIN_DEPTH + 1)]
    with pytest.raises(ValueError, match="exceeds maximum"):
        apply_chain(_frame(), chain)


def test_depth_at_limit_succeeds():
    chain = [_swap() for _ in range(MAX_CHAIN_DEPTH)]
    assert apply_chain(_frame(), chain).shape == (20, 20, 4)


def test_unknown_effect_raises():
    with pytest.raises(ValueError, match="unknown effect"):
        apply_chain(_frame(), [{"effect_id": "fx.nonexistent", "params": {}}])


def test_slow_effect_logs_warning(monkeypatch, caplog):
    call_count = 0
    real_monotonic = time.monotonic

    def fake_monotonic():
        nonlocal call_count
        call_count += 1
        if call_count == 1:
            return 0.0
        elif call_count == 2:
            return (EFFECT_WARN_MS + 100) / 1000
        return real_monotonic()

    monkeypatch.setattr(time, "monotonic", fake_monotonic)

    with caplog.at_level(logging.WARNING, logger="engine.pipeline"):
        apply_chain(_frame(), [_swap()])

    assert "warn threshold" in caplog.text
    assert "fx.channel_swap" in caplog.text
