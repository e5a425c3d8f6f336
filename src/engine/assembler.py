"""Animation assembler — packages frames into an animation document."""

from dataclasses import dataclass

from engine.frames import FRAME_DELAY_MS, Frame
from engine.palette import Palette

# GIF NETSCAPE loop count meaning "repeat forever"
LOOP_FOREVER = 0


@dataclass(frozen=True, eq=False)
class AnimationDocument:
    """Ordered frames sharing one palette and one delay."""

    frames: tuple[Frame, ...]
    palette: Palette
    delay_ms: int = FRAME_DELAY_MS
    loop: int = LOOP_FOREVER

    def __len__(self) -> int:
        return len(self.frames)

    @property
    def size(self) -> tuple[int, int]:
        """(width, height) shared by every frame."""
        return self.frames[0].size


def assemble(frames: list[Frame], palette: Palette) -> AnimationDocument:
    """Build the document; frame order is the order of ``frames``.

    Raises:
        ValueError: If ``frames`` is empty or the frames differ in size.
    """
    if not frames:
        raise ValueError("cannot assemble an animation without frames")

    size = frames[0].size
    for frame in frames[1:]:
        if frame.size != size:
            raise ValueError(
                f"frame {frame.name!r} is {frame.size[0]}x{frame.size[1]}, "
                f"expected {size[0]}x{size[1]}"
            )

    return AnimationDocument(
        frames=tuple(frames),
        palette=palette,
        delay_ms=FRAME_DELAY_MS,
        loop=LOOP_FOREVER,
    )
