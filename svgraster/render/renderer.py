"""Renderer dispatch, painter's algorithm over the top-level shape list."""

from __future__ import annotations

import logging
from pathlib import Path

from svgraster.config import settings
from svgraster.models.shapes import Shape
from svgraster.models.svg_document import SvgDocument
from svgraster.render.canvas import Canvas, PngCanvas
from svgraster.svg.parser import load_svg
from svgraster.utils.color import WHITE, Color, parse_color

logger = logging.getLogger(__name__)


def render(shapes: list[Shape], canvas: Canvas) -> None:
    """Draw shapes in list order; later shapes overwrite earlier ones."""
    for shape in shapes:
        shape.draw(canvas)


def render_document(
    doc: SvgDocument,
    canvas: Canvas | None = None,
    background: Color | None = None,
) -> Canvas:
    """Render a loaded document, creating a PngCanvas of the document size if needed."""
    if canvas is None:
        bg = background or parse_color(settings.svgraster_background, WHITE)
        canvas = PngCanvas(doc.width, doc.height, bg)
    render(doc.shapes, canvas)
    logger.debug("Rendered %d top-level shapes from %s", len(doc.shapes), doc.source)
    return canvas


def convert(svg_file: str | Path, png_file: str | Path) -> SvgDocument:
    """Load ``svg_file``, rasterize it and write the image to ``png_file``."""
    doc = load_svg(svg_file)
    canvas = render_document(doc)
    canvas.save(png_file)
    return doc
