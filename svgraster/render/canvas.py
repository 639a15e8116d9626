"""Canvas capability: three drawing primitives plus image encoding.

``PngCanvas`` backs the capability with a Pillow RGB image; any object with the
same four methods can stand in for it (tests use a recording canvas).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol

from PIL import Image, ImageDraw

from svgraster.errors import RenderError
from svgraster.utils.color import WHITE, Color
from svgraster.utils.geometry import Point

logger = logging.getLogger(__name__)

# Pillow's draw primitives take C ints; far larger values fail inside ImagingDraw
MAX_COORDINATE = 1 << 20


def _in_range(primitive: str, coords: list[int]) -> bool:
    if all(-MAX_COORDINATE <= c <= MAX_COORDINATE for c in coords):
        return True
    logger.warning("Skipping %s with coordinates beyond ±%d", primitive, MAX_COORDINATE)
    return False


class Canvas(Protocol):
    def draw_ellipse(self, center: Point, radius: Point, color: Color) -> None: ...

    def draw_line(self, start: Point, end: Point, color: Color) -> None: ...

    def draw_polygon(self, points: list[Point], color: Color) -> None: ...

    def save(self, path: str | Path) -> None: ...


class PngCanvas:
    """Opaque-overwrite raster canvas sized to the document dimensions."""

    def __init__(self, width: int, height: int, background: Color = WHITE) -> None:
        if width <= 0 or height <= 0:
            raise RenderError(f"Canvas size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.image = Image.new("RGB", (width, height), tuple(background))
        self._draw = ImageDraw.Draw(self.image)

    def draw_ellipse(self, center: Point, radius: Point, color: Color) -> None:
        # Negative (mirrored) radii describe the same ellipse
        rx, ry = abs(radius.x), abs(radius.y)
        box = [center.x - rx, center.y - ry, center.x + rx, center.y + ry]
        if not _in_range("ellipse", box):
            return
        self._draw.ellipse(box, fill=tuple(color))

    def draw_line(self, start: Point, end: Point, color: Color) -> None:
        if not _in_range("line", [*start.as_tuple(), *end.as_tuple()]):
            return
        self._draw.line([start.as_tuple(), end.as_tuple()], fill=tuple(color))

    def draw_polygon(self, points: list[Point], color: Color) -> None:
        if not _in_range("polygon", [c for p in points for c in p.as_tuple()]):
            return
        self._draw.polygon([p.as_tuple() for p in points], fill=tuple(color))

    def pixel(self, x: int, y: int) -> Color:
        return Color(*self.image.getpixel((x, y))[:3])

    def save(self, path: str | Path) -> None:
        path = Path(path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            self.image.save(path)
        except (OSError, ValueError) as e:
            raise RenderError(f"Unable to write {path}: {e}") from e
        logger.info("Wrote %dx%d image to %s", self.width, self.height, path)
