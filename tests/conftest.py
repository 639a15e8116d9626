"""Shared test fixtures."""

from __future__ import annotations

import pytest

from svgraster.utils.color import Color
from svgraster.utils.geometry import Point


CIRCLE_SVG = '''<svg width="10" height="10"><circle cx="5" cy="5" r="3" fill="#ff0000"/></svg>'''

ROTATED_RECT_SVG = '''<svg width="10" height="10">
  <rect x="0" y="0" width="4" height="2" fill="#000000" transform="rotate(90)"/>
</svg>'''

ALL_SHAPES_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="100" height="80">
  <ellipse cx="20" cy="20" rx="10" ry="5" fill="blue"/>
  <circle cx="50" cy="20" r="8" fill="#00ff00"/>
  <polyline points="0,0 10,10 20,0" stroke="red"/>
  <line x1="0" y1="70" x2="99" y2="70" stroke="#000000"/>
  <polygon points="60,60 80,60 70,75" fill="purple"/>
  <rect x="5" y="40" width="20" height="10" fill="orange"/>
</svg>'''

GROUP_SVG = '''<svg width="50" height="50">
  <g id="pair" transform="translate(10 5)">
    <circle cx="0" cy="0" r="2" fill="red"/>
    <g>
      <rect x="1" y="1" width="2" height="2" fill="blue"/>
    </g>
  </g>
  <use href="#pair" transform="translate(20,0)"/>
</svg>'''

USE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" xmlns:xlink="http://www.w3.org/1999/xlink" width="40" height="40">
  <rect id="a" x="0" y="0" width="4" height="4" fill="red"/>
  <use xlink:href="#a" transform="translate(10,0)"/>
  <use href="#a" transform="translate(20,0)"/>
</svg>'''

# Later shape overlaps the earlier one on [3, 6]
OVERLAP_SVG = '''<svg width="10" height="10">
  <rect x="0" y="0" width="6" height="6" fill="#ff0000"/>
  <rect x="3" y="3" width="6" height="6" fill="#0000ff"/>
</svg>'''


class RecordingCanvas:
    """Canvas stand-in that records primitive calls in order."""

    def __init__(self) -> None:
        self.calls: list[tuple] = []
        self.saved_to = None

    def draw_ellipse(self, center: Point, radius: Point, color: Color) -> None:
        self.calls.append(("ellipse", center, radius, color))

    def draw_line(self, start: Point, end: Point, color: Color) -> None:
        self.calls.append(("line", start, end, color))

    def draw_polygon(self, points: list[Point], color: Color) -> None:
        self.calls.append(("polygon", list(points), color))

    def save(self, path) -> None:
        self.saved_to = path

    def kinds(self) -> list[str]:
        return [call[0] for call in self.calls]


@pytest.fixture
def canvas() -> RecordingCanvas:
    return RecordingCanvas()


@pytest.fixture
def circle_svg() -> str:
    return CIRCLE_SVG


@pytest.fixture
def all_shapes_svg() -> str:
    return ALL_SHAPES_SVG


@pytest.fixture
def svg_file(tmp_path):
    """Write an SVG string to a temp file and return its path."""

    def _write(text: str, name: str = "input.svg"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
