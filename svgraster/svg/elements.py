"""Drawable element handlers: ellipse, circle, polyline, line, polygon, rect.

Each handler turns one markup node into a one-element shape list. Containers
(``g``) and references (``use``) live in the builder.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from typing import TYPE_CHECKING

from svgraster.models.shapes import Ellipse, Polygon, Polyline, Shape
from svgraster.svg.attributes import color, number, parse_points
from svgraster.svg.registry import element
from svgraster.utils.geometry import Point

if TYPE_CHECKING:
    from svgraster.svg.builder import BuildContext

logger = logging.getLogger(__name__)


def _radius(attrs: dict[str, str], name: str) -> int:
    value = number(attrs, name)
    if value < 0:
        logger.warning("Negative radius %s=%d clamped to 0", name, value)
        return 0
    return value


@element(name="ellipse", description="Filled ellipse from cx/cy/rx/ry")
def build_ellipse(node: ET.Element, attrs: dict[str, str], ctx: BuildContext) -> list[Shape]:
    return [
        Ellipse(
            fill=color(attrs, "fill"),
            center=Point(number(attrs, "cx"), number(attrs, "cy")),
            radius=Point(_radius(attrs, "rx"), _radius(attrs, "ry")),
        )
    ]


@element(name="circle", description="Filled circle from cx/cy/r")
def build_circle(node: ET.Element, attrs: dict[str, str], ctx: BuildContext) -> list[Shape]:
    return [
        Ellipse.circle(
            color(attrs, "fill"),
            Point(number(attrs, "cx"), number(attrs, "cy")),
            _radius(attrs, "r"),
        )
    ]


@element(name="polyline", description="Open stroked point sequence")
def build_polyline(node: ET.Element, attrs: dict[str, str], ctx: BuildContext) -> list[Shape]:
    points = parse_points(attrs.get("points"))
    if len(points) < 2:
        logger.warning("<polyline> with %d points skipped", len(points))
        return []
    return [Polyline(points=points, stroke=color(attrs, "stroke"))]


@element(name="line", description="Stroked segment from x1/y1/x2/y2")
def build_line(node: ET.Element, attrs: dict[str, str], ctx: BuildContext) -> list[Shape]:
    return [
        Polyline.line(
            Point(number(attrs, "x1"), number(attrs, "y1")),
            Point(number(attrs, "x2"), number(attrs, "y2")),
            color(attrs, "stroke"),
        )
    ]


@element(name="polygon", description="Closed filled point sequence")
def build_polygon(node: ET.Element, attrs: dict[str, str], ctx: BuildContext) -> list[Shape]:
    points = parse_points(attrs.get("points"))
    if len(points) < 3:
        logger.warning("<polygon> with %d points skipped", len(points))
        return []
    return [Polygon(points=points, fill=color(attrs, "fill"))]


@element(name="rect", description="Axis-aligned filled rectangle from x/y/width/height")
def build_rect(node: ET.Element, attrs: dict[str, str], ctx: BuildContext) -> list[Shape]:
    return [
        Polygon.rect(
            Point(number(attrs, "x"), number(attrs, "y")),
            number(attrs, "width"),
            number(attrs, "height"),
            color(attrs, "fill"),
        )
    ]
