"""SVG loader: facade over xml.etree.ElementTree + the scene builder.

Reads a file or string, checks the ``svg`` root, reads its dimensions and
returns an SvgDocument with the built shape list.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from pathlib import Path

from svgraster.errors import LoadError
from svgraster.models.svg_document import SvgDocument
from svgraster.svg.attributes import local_name, node_attributes, number
from svgraster.svg.builder import BuildContext, build_scene

logger = logging.getLogger(__name__)


def load_svg(path: str | Path, ctx: BuildContext | None = None) -> SvgDocument:
    """Load and build an SVG file. Raises LoadError naming the path."""
    source = str(path)
    try:
        root = ET.parse(source).getroot()
    except ET.ParseError as e:
        raise LoadError(source, f"malformed markup ({e})") from e
    except OSError as e:
        raise LoadError(source, e.strerror or str(e)) from e
    return _build_document(root, source, ctx)


def parse_svg(svg_text: str, ctx: BuildContext | None = None, source: str = "<string>") -> SvgDocument:
    """Build an SVG document held in memory."""
    try:
        root = ET.fromstring(svg_text)
    except ET.ParseError as e:
        raise LoadError(source, f"malformed markup ({e})") from e
    return _build_document(root, source, ctx)


def _build_document(root: ET.Element, source: str, ctx: BuildContext | None) -> SvgDocument:
    if local_name(root.tag) != "svg":
        raise LoadError(source, f"root element is <{local_name(root.tag)}>, expected <svg>")

    attrs = node_attributes(root)
    width = max(number(attrs, "width"), 0)
    height = max(number(attrs, "height"), 0)

    shapes = build_scene(root, ctx)
    doc = SvgDocument(width=width, height=height, shapes=shapes, source=source)
    logger.info("Parsed SVG %s: %d shapes, canvas %d×%d", source, doc.num_shapes, width, height)
    return doc
