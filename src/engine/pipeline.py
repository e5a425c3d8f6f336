"""Effect pipeline — reduces a chain of effects over a raster, left to right."""

import logging
import time

import numpy as np

from effects import registry

logger = logging.getLogger(__name__)

# Maximum effects in a single chain
MAX_CHAIN_DEPTH = 10

# Per-effect timing threshold (milliseconds)
EFFECT_WARN_MS = 500


def apply_chain(
    frame: np.ndarray,
    chain: list[dict] | tuple[dict, ...],
    *,
    source: np.ndarray | None = None,
) -> np.ndarray:
    """Apply an ordered chain of effects to a raster.

    Args:
        frame:  Input RGBA raster (H, W, 4) uint8. Never modified.
        chain:  Ordered steps, each {"effect_id": str, "params": dict}.
        source: The run's untouched source raster, handed to every step
                (the merge effect reads it). Defaults to ``frame``.

    Returns:
        The raster produced by the last step, or ``frame`` for an empty chain.

    Raises:
        ValueError: If the chain exceeds MAX_CHAIN_DEPTH or names an unknown effect.
    """
    if len(chain) > MAX_CHAIN_DEPTH:
        raise ValueError(
            f"Chain depth {len(chain)} exceeds maximum {MAX_CHAIN_DEPTH}"
        )

    if source is None:
        source = frame

    output = frame
    for i, step in enumerate(chain):
        effect_id = step.get("effect_id")
        effect_info = registry.get(effect_id)
        if effect_info is None:
            raise ValueError(f"unknown effect: {effect_id}")

        height, width = output.shape[:2]
        t0 = time.monotonic()
        output = effect_info["fn"](
            output,
            dict(step.get("params", {})),
            resolution=(width, height),
            source=source,
        )
        elapsed_ms = (time.monotonic() - t0) * 1000

        if elapsed_ms > EFFECT_WARN_MS:
            logger.warning(
                "Effect %s took %.0fms (>%dms warn threshold) at chain position %d",
                effect_id,
                elapsed_ms,
                EFFECT_WARN_MS,
                i,
            )
        else:
            logger.debug("Effect %s took %.1fms", effect_id, elapsed_ms)

    return output
