"""Color tokens -> RGB triples, via Pillow's CSS color table."""

from __future__ import annotations

import logging
from typing import NamedTuple

from PIL import ImageColor

logger = logging.getLogger(__name__)


class Color(NamedTuple):
    r: int
    g: int
    b: int

    def hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"


BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)


def parse_color(token: str | None, default: Color = BLACK) -> Color:
    """Parse ``#rrggbb``, ``#rgb``, ``rgb(...)`` or a named color.

    Missing or unknown tokens fall back to ``default``.
    """
    if token is None or not token.strip():
        return default
    try:
        rgb = ImageColor.getrgb(token.strip())
    except ValueError:
        logger.warning("Unknown color %r, using %s", token, default.hex())
        return default
    return Color(*rgb[:3])
