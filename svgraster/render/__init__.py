"""Rasterization: canvas capability and draw dispatch."""

from svgraster.render.canvas import Canvas, PngCanvas
from svgraster.render.renderer import convert, render, render_document

__all__ = [
    "Canvas",
    "PngCanvas",
    "render",
    "render_document",
    "convert",
]
