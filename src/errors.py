"""Error taxonomy for a glitchgif run.

Every failure is terminal for the run: the CLI reports the message and
exits non-zero. Nothing is retried.
"""


class GlitchError(Exception):
    """Base exception class for all glitchgif errors."""

    def __init__(self, message: str, cause: Exception | None = None):
        super().__init__(message)
        self.cause = cause

    def __str__(self) -> str:
        base_msg = super().__str__()
        if self.cause:
            return f"{base_msg} (caused by: {self.cause})"
        return base_msg


class DecodeError(GlitchError):
    """Raised when the source raster cannot be read or decoded."""


class UnsupportedFormatError(DecodeError):
    """Raised when the source extension is not a known raster format."""


class DestinationError(GlitchError):
    """Raised when the output file cannot be created."""


class EncodeError(GlitchError):
    """Raised when the animation cannot be serialized."""


class FrameGenerationError(GlitchError):
    """Raised when an effect instance fails to render its frame."""
