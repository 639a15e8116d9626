"""Typed errors raised by the loader and the renderer."""

from __future__ import annotations


class SvgRasterError(Exception):
    """Base error for the project."""


class LoadError(SvgRasterError):
    """The document could not be read or is not an SVG document."""

    def __init__(self, source: str, reason: str) -> None:
        super().__init__(f"Unable to load {source}: {reason}")
        self.source = source
        self.reason = reason


class RenderError(SvgRasterError):
    """The raster image could not be created or written."""
