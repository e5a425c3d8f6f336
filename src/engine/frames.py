"""Concurrent frame generator — one thread per scheduled effect instance.

Every task reads the same read-only source raster, runs its chain, quantizes
the result, and hands its Frame back through a future. Results are gathered
in schedule order, so frame order equals the (shuffled) schedule order no
matter which task finishes first.
"""

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass

import numpy as np
import sentry_sdk

from effects.schedule import EffectInstance
from engine.palette import Palette
from engine.pipeline import apply_chain
from engine.quantize import quantize
from errors import FrameGenerationError

logger = logging.getLogger(__name__)

# Display delay of every frame
FRAME_DELAY_MS = 100


@dataclass(frozen=True, eq=False)
class Frame:
    """Palette-indexed raster for one effect instance."""

    indices: np.ndarray
    name: str
    delay_ms: int = FRAME_DELAY_MS

    @property
    def size(self) -> tuple[int, int]:
        """(width, height)"""
        return self.indices.shape[1], self.indices.shape[0]


def _capture_with_context(e: Exception, instance: EffectInstance, extra: dict):
    """Capture exception to Sentry with instance-level context and fingerprint dedup."""
    with sentry_sdk.new_scope() as scope:
        scope.set_tag("effect_instance", instance.name)
        scope.fingerprint = ["frame-render", instance.name, type(e).__name__]
        scope.set_context("frame", extra)
        sentry_sdk.capture_exception(e, scope=scope)


def render_frame(
    source: np.ndarray, instance: EffectInstance, palette: Palette
) -> Frame:
    """Run one instance's chain over ``source`` and quantize the result."""
    t0 = time.monotonic()
    raster = apply_chain(source, instance.chain, source=source)
    indices = quantize(raster, palette)
    logger.debug(
        "Rendered %s in %.1fms", instance.name, (time.monotonic() - t0) * 1000
    )
    return Frame(indices=indices, name=instance.name)


def generate_frames(
    source: np.ndarray, schedule: list[EffectInstance], palette: Palette
) -> list[Frame]:
    """Render one Frame per schedule entry, concurrently.

    Blocks until every task has finished. There is no timeout, retry or
    partial result: the first failure (in schedule order) is raised once all
    tasks have stopped.

    Raises:
        ValueError: If the schedule is empty.
        FrameGenerationError: If any instance fails to render.
    """
    if not schedule:
        raise ValueError("schedule is empty")

    shared = source.view()
    shared.flags.writeable = False
    _ = palette.image  # build the Pillow palette once, before the threads share it

    logger.info(
        "Generating %d frames from %dx%d source",
        len(schedule),
        shared.shape[1],
        shared.shape[0],
    )

    frames: list[Frame] = []
    with ThreadPoolExecutor(
        max_workers=len(schedule), thread_name_prefix="frame"
    ) as pool:
        futures = [
            pool.submit(render_frame, shared, instance, palette)
            for instance in schedule
        ]
        for position, (instance, future) in enumerate(zip(schedule, futures)):
            try:
                frames.append(future.result())
            except Exception as e:
                _capture_with_context(
                    e,
                    instance,
                    {
                        "position": position,
                        "chain": [step["effect_id"] for step in instance.chain],
                        "source_shape": list(shared.shape),
                    },
                )
                logger.error(
                    "Effect instance %s failed: %s", instance.name, type(e).__name__
                )
                raise FrameGenerationError(
                    f"effect instance {instance.name!r} failed", cause=e
                ) from e

    return frames
