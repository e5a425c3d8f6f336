"""Fixed quantization palette.

The palette never depends on the input image: every frame of every run is
reduced against the same 256 colors, so the GIF can share one global table.
"""

from dataclasses import dataclass
from functools import cached_property

import numpy as np
from PIL import Image


@dataclass(frozen=True)
class Palette:
    """Immutable ordered set of opaque RGB colors."""

    name: str
    colors: tuple[tuple[int, int, int], ...]

    def __len__(self) -> int:
        return len(self.colors)

    @property
    def flat(self) -> list[int]:
        """[r0, g0, b0, r1, ...] as Pillow's putpalette expects."""
        return [channel for color in self.colors for channel in color]

    def as_array(self) -> np.ndarray:
        return np.array(self.colors, dtype=np.uint8)

    @cached_property
    def image(self) -> Image.Image:
        """1x1 "P" image carrying the palette, for Image.quantize(palette=...)."""
        img = Image.new("P", (1, 1))
        img.putpalette(self.flat)
        return img


def _plan9_colors() -> tuple[tuple[int, int, int], ...]:
    """Plan 9 color map: 4 shades x a 4x4x4 RGB cube, grays on the diagonal.

    Index = 64*r + 16*v + ((4*g + b + v - r) mod 16); v selects the shade.
    """
    colors: list[tuple[int, int, int] | None] = [None] * 256
    for r in range(4):
        for v in range(4):
            base = 64 * r + 16 * v
            j = v - r
            for g in range(4):
                for b in range(4):
                    den = max(r, g, b)
                    if den == 0:
                        color = (0x11 * v, 0x11 * v, 0x11 * v)
                    else:
                        num = 17 * (4 * den + v)
                        color = (r * num // den, g * num // den, b * num // den)
                    colors[base + (j & 0x0F)] = color
                    j += 1
    return tuple(colors)


PLAN9 = Palette("plan9", _plan9_colors())
