"""Seeded randomness for reproducible schedules."""

import numpy as np


def make_rng(seed: int | None = None) -> np.random.Generator:
    """Create an RNG. Same seed = same schedule order; None draws fresh entropy."""
    return np.random.default_rng(seed)
