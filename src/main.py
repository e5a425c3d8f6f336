"""glitchgif — turn one still image into an animated GIF of glitch effects.

Usage:
    glitchgif /source/path.jpeg /destination/path.gif [--seed N]
"""

import argparse
import logging
import sys
from pathlib import Path

import sentry_sdk

from _version import __version__
from diagnostics import init_diagnostics
from effects import registry
from effects.schedule import build_schedule, shuffle_schedule
from engine.assembler import AnimationDocument, assemble
from engine.determinism import make_rng
from engine.frames import generate_frames
from engine.palette import PLAN9
from errors import GlitchError
from raster.reader import load_raster
from raster.writer import write_gif

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="glitchgif",
        description="Render every built-in glitch effect of an image into one animated GIF",
    )
    parser.add_argument("source", help="Source image (.png, .jpg, .jpeg)")
    parser.add_argument("destination", help="Output GIF path")
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the effect order (default: random)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (default: WARNING)",
    )
    parser.add_argument(
        "--log-file", default=None, help="Also write JSON logs to this file"
    )
    parser.add_argument(
        "--sentry-dsn",
        default="",
        help="Report crashes to this Sentry DSN (default: disabled)",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser


def run(
    source_path: str | Path, destination_path: str | Path, seed: int | None = None
) -> AnimationDocument:
    """Load, render, assemble and write. Returns the written document.

    Raises:
        GlitchError: On any decode, render or write failure.
    """
    source = load_raster(source_path)
    logger.info(
        "Registered effects: %s", ", ".join(e["id"] for e in registry.list_all())
    )
    schedule = shuffle_schedule(build_schedule(), make_rng(seed))
    logger.info("Effect order: %s", ", ".join(i.name for i in schedule))

    frames = generate_frames(source, schedule, PLAN9)
    document = assemble(frames, PLAN9)
    write_gif(document, destination_path)
    return document


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    handlers = init_diagnostics(args.log_level, args.log_file)
    sentry_sdk.init(
        dsn=args.sentry_dsn,
        release=f"glitchgif@{__version__}",
        traces_sample_rate=0.0,
        max_breadcrumbs=50,
    )

    try:
        document = run(args.source, args.destination, args.seed)
    except GlitchError as e:
        logger.error("Run failed: %s", e)
        print(f"error: {e}", file=sys.stderr)
        return 1
    finally:
        root = logging.getLogger()
        for handler in handlers:
            root.removeHandler(handler)
            handler.close()

    print(f"wrote {len(document)} frames to {args.destination}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
