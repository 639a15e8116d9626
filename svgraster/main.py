"""Command-line entry point: svgraster INPUT.svg OUTPUT.png"""

from __future__ import annotations

import argparse
import logging

from svgraster.config import settings
from svgraster.errors import SvgRasterError
from svgraster.render.renderer import convert

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else getattr(logging, settings.svgraster_log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="svgraster",
        description="Rasterize an SVG document (shapes, groups, use, transforms) to a PNG image.",
    )
    parser.add_argument("input", help="SVG file to read")
    parser.add_argument("output", help="image file to write (format from the extension)")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    setup_logging(args.verbose)

    try:
        doc = convert(args.input, args.output)
    except SvgRasterError as e:
        logger.error("%s", e)
        return 1

    logger.info("Converted %s -> %s (%d shapes)", args.input, args.output, doc.num_shapes)
    return 0
