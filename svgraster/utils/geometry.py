"""Leaf-node geometry: integer points and the point transforms. No svg imports."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray


def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero (2.5 -> 3, -2.5 -> -3)."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


@dataclass(frozen=True)
class Point:
    x: int = 0
    y: int = 0

    def as_tuple(self) -> tuple[int, int]:
        return (self.x, self.y)

    def translate(self, t: Point) -> Point:
        return translate(self, t)

    def rotate(self, origin: Point, degrees: float) -> Point:
        return rotate(self, origin, degrees)

    def scale(self, origin: Point, factor: int) -> Point:
        return scale(self, origin, factor)


ORIGIN = Point(0, 0)


def rotation_matrix(degrees: float) -> NDArray[np.float64]:
    theta = math.radians(degrees)
    c = math.cos(theta)
    s = math.sin(theta)
    return np.array([[c, -s], [s, c]], dtype=float)


def translate(p: Point, t: Point) -> Point:
    return Point(p.x + t.x, p.y + t.y)


def rotate(p: Point, origin: Point, degrees: float) -> Point:
    """Rotate ``p`` about ``origin`` by a signed angle in degrees.

    The angle is not normalized; 360 and -720 both map a point onto itself.
    """
    rel = np.array([p.x - origin.x, p.y - origin.y], dtype=float)
    x, y = rotation_matrix(degrees) @ rel
    return Point(round_half_away(x + origin.x), round_half_away(y + origin.y))


def scale(p: Point, origin: Point, factor: int) -> Point:
    return Point(
        origin.x + (p.x - origin.x) * factor,
        origin.y + (p.y - origin.y) * factor,
    )
