"""Effect schedule — the fixed set of effect instances rendered into frames.

Each instance is data: an ordered chain of ``{"effect_id", "params"}``
steps that ``engine.pipeline.apply_chain`` reduces left to right. The
schedule is permuted once per run with an explicitly passed RNG.
"""

from dataclasses import dataclass

import numpy as np

BRIGHTNESS_FACTOR = 4.0

# (amplitude, frequency)
WAVE_RIPPLE = (20.0, 20.0)
WAVE_SURGE = (100.0, 20.0)


@dataclass(frozen=True)
class EffectInstance:
    """One unit of work in the schedule; produces exactly one frame."""

    name: str
    chain: tuple[dict, ...]


def _step(effect_id: str, **params) -> dict:
    return {"effect_id": effect_id, "params": params}


def _swap(keep_blue: bool = True, keep_green: bool = True, keep_red: bool = True) -> dict:
    return _step(
        "fx.channel_swap",
        keep_blue=keep_blue,
        keep_green=keep_green,
        keep_red=keep_red,
    )


def _wave(amplitude_frequency: tuple[float, float]) -> dict:
    amplitude, frequency = amplitude_frequency
    return _step("fx.wave", amplitude=amplitude, frequency=frequency)


def build_schedule() -> list[EffectInstance]:
    """Return the schedule in its canonical (unshuffled) order."""
    return [
        EffectInstance("swap_mirror", (_swap(),)),
        EffectInstance(
            "swap_cascade",
            (_swap(keep_blue=False), _swap(keep_red=False), _swap()),
        ),
        EffectInstance("flip_swap", (_step("fx.flip_swap"),)),
        EffectInstance(
            "brightness", (_step("fx.brightness", factor=BRIGHTNESS_FACTOR),)
        ),
        EffectInstance("wave_ripple", (_wave(WAVE_RIPPLE),)),
        EffectInstance("swap_mirror_no_green", (_swap(keep_green=False),)),
        EffectInstance("swap_mirror_no_blue", (_swap(keep_blue=False),)),
        EffectInstance(
            "kaleidoscope_merge", (_step("fx.kaleidoscope"), _step("fx.merge"))
        ),
        EffectInstance("swap_mirror_triple", (_swap(), _swap(), _swap())),
        EffectInstance("wave_surge_merge", (_wave(WAVE_SURGE), _step("fx.merge"))),
        EffectInstance("kaleidoscope", (_step("fx.kaleidoscope"),)),
        EffectInstance("strong", (_step("fx.strong"),)),
        EffectInstance("checker_twist", (_step("fx.checker_twist"),)),
        EffectInstance(
            "checker_twist_double_swap",
            (_step("fx.checker_twist"), _swap(), _swap()),
        ),
        EffectInstance("checker_twist_swap", (_step("fx.checker_twist"), _swap())),
    ]


def shuffle_schedule(
    schedule: list[EffectInstance], rng: np.random.Generator
) -> list[EffectInstance]:
    """Return a uniformly random permutation of ``schedule``. Input is untouched."""
    order = rng.permutation(len(schedule))
    return [schedule[i] for i in order]
