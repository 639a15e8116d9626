"""svgraster: build a shape tree from an SVG document and rasterize it."""

__version__ = "0.1.0"

from svgraster.errors import LoadError, RenderError, SvgRasterError
from svgraster.models.svg_document import SvgDocument
from svgraster.render.renderer import convert, render, render_document
from svgraster.svg.parser import load_svg, parse_svg

__all__ = [
    "SvgDocument",
    "load_svg",
    "parse_svg",
    "render",
    "render_document",
    "convert",
    "SvgRasterError",
    "LoadError",
    "RenderError",
]
