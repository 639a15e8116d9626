"""Attribute helpers for names, numbers, point lists and colors.

Malformed values never abort a document: numbers default to 0 and point lists
are truncated at the first token that does not parse.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET

from svgraster.config import settings
from svgraster.svg.transforms import split_numbers
from svgraster.utils.color import BLACK, Color, parse_color
from svgraster.utils.geometry import Point, round_half_away

logger = logging.getLogger(__name__)

_UNITS = ("px",)


def local_name(name: str) -> str:
    """Strip an ElementTree namespace: ``{http://www.w3.org/2000/svg}rect`` -> ``rect``."""
    if name.startswith("{"):
        return name.rsplit("}", 1)[1]
    return name


def node_attributes(node: ET.Element) -> dict[str, str]:
    """Attributes keyed by local name, so ``xlink:href`` reads as ``href``.

    A plain attribute wins over a namespaced one with the same local name.
    """
    attrs: dict[str, str] = {}
    for key, value in node.attrib.items():
        name = local_name(key)
        if name in attrs and not key.startswith("{"):
            attrs[name] = value
        else:
            attrs.setdefault(name, value)
    return attrs


def parse_number(value: str | None, name: str = "") -> int:
    """Integer value of a numeric attribute; missing or malformed -> 0."""
    if value is None:
        return 0
    text = value.strip()
    for unit in _UNITS:
        if text.endswith(unit):
            text = text[: -len(unit)]
    try:
        return round_half_away(float(text))
    except (ValueError, OverflowError):
        logger.warning("Malformed number %s=%r, using 0", name or "value", value)
        return 0


def number(attrs: dict[str, str], name: str) -> int:
    return parse_number(attrs.get(name), name)


def parse_points(text: str | None) -> list[Point]:
    """Parse "x1,y1 x2,y2 ..." left to right, stopping at the first bad pair."""
    if not text:
        return []
    tokens = split_numbers(text)
    points: list[Point] = []
    for i in range(0, len(tokens) - 1, 2):
        try:
            x, y = float(tokens[i]), float(tokens[i + 1])
            points.append(Point(round_half_away(x), round_half_away(y)))
        except (ValueError, OverflowError):
            logger.warning("Point list truncated at %r", " ".join(tokens[i : i + 2]))
            break
    return points


def color(attrs: dict[str, str], name: str) -> Color:
    default = parse_color(settings.svgraster_default_color, BLACK)
    return parse_color(attrs.get(name), default)
