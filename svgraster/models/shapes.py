"""Shape model: the closed set of drawable variants plus the Group composite.

Every variant implements the same capability set:

    draw(canvas)                  emit canvas primitives
    translate(vector)             in place
    rotate(origin, degrees)       in place
    scale(origin, factor)         in place, integer factor
    copy()                        structural clone, never shares mutable state

Circle, Line and Rect are construction-time constraints on Ellipse, Polyline
and Polygon (see the ``circle``/``line``/``rect`` constructors); ``tag``
records which markup element produced the shape.
"""

from __future__ import annotations

import copy
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar

from svgraster.utils.color import BLACK, Color
from svgraster.utils.geometry import Point

if TYPE_CHECKING:
    from svgraster.render.canvas import Canvas


@dataclass(kw_only=True)
class Shape:
    kind: ClassVar[str] = ""

    # Document identifier; empty = anonymous
    id: str = ""
    # Markup element the shape was built from; defaults to the variant kind
    tag: str = ""

    def __post_init__(self) -> None:
        if not self.tag:
            self.tag = self.kind

    def draw(self, canvas: Canvas) -> None:
        raise NotImplementedError

    def translate(self, vector: Point) -> None:
        raise NotImplementedError

    def rotate(self, origin: Point, degrees: float) -> None:
        raise NotImplementedError

    def scale(self, origin: Point, factor: int) -> None:
        raise NotImplementedError

    def copy(self) -> Shape:
        raise NotImplementedError


@dataclass
class Ellipse(Shape):
    kind: ClassVar[str] = "ellipse"

    fill: Color = BLACK
    center: Point = field(default_factory=Point)
    # (rx, ry) stored as a Point; a size, not a position
    radius: Point = field(default_factory=Point)

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.radius.x < 0 or self.radius.y < 0:
            raise ValueError(f"Ellipse radii must be >= 0, got {self.radius.as_tuple()}")

    @classmethod
    def circle(cls, fill: Color, center: Point, radius: int, **kwargs) -> Ellipse:
        return cls(fill=fill, center=center, radius=Point(radius, radius), tag="circle", **kwargs)

    @property
    def is_circle(self) -> bool:
        return self.radius.x == self.radius.y

    def draw(self, canvas: Canvas) -> None:
        canvas.draw_ellipse(self.center, self.radius, self.fill)

    def translate(self, vector: Point) -> None:
        self.center = self.center.translate(vector)

    def rotate(self, origin: Point, degrees: float) -> None:
        # Only the center moves; the radii stay axis-aligned
        self.center = self.center.rotate(origin, degrees)

    def scale(self, origin: Point, factor: int) -> None:
        self.center = self.center.scale(origin, factor)
        # Sign is kept for negative factors (mirrored size)
        self.radius = Point(self.radius.x * factor, self.radius.y * factor)

    def copy(self) -> Ellipse:
        # Point and Color are immutable; bypasses __init__ so scaled
        # (possibly negative) radii survive the copy
        return copy.copy(self)


@dataclass
class _PointShape(Shape):
    """Shared point-list behaviour of Polyline and Polygon."""

    points: list[Point] = field(default_factory=list)

    def translate(self, vector: Point) -> None:
        self.points = [p.translate(vector) for p in self.points]

    def rotate(self, origin: Point, degrees: float) -> None:
        self.points = [p.rotate(origin, degrees) for p in self.points]

    def scale(self, origin: Point, factor: int) -> None:
        self.points = [p.scale(origin, factor) for p in self.points]

    def copy(self) -> _PointShape:
        clone = copy.copy(self)
        clone.points = list(self.points)
        return clone


@dataclass
class Polyline(_PointShape):
    kind: ClassVar[str] = "polyline"

    stroke: Color = BLACK

    def __post_init__(self) -> None:
        super().__post_init__()
        if len(self.points) < 2:
            raise ValueError(f"Polyline needs at least 2 points, got {len(self.points)}")

    @classmethod
    def line(cls, start: Point, end: Point, stroke: Color, **kwargs) -> Polyline:
        return cls(points=[start, end], stroke=stroke, tag="line", **kwargs)

    def draw(self, canvas: Canvas) -> None:
        for start, end in zip(self.points, self.points[1:]):
            canvas.draw_line(start, end, self.stroke)


@dataclass
class Polygon(_PointShape):
    kind: ClassVar[str] = "polygon"

    fill: Color = BLACK

    def __post_init__(self) -> None:
        super().__post_init__()
        if len(self.points) < 3:
            raise ValueError(f"Polygon needs at least 3 points, got {len(self.points)}")

    @classmethod
    def rect(cls, corner: Point, width: int, height: int, fill: Color, **kwargs) -> Polygon:
        """Axis-aligned at construction; a plain Polygon afterwards."""
        points = [
            corner,
            Point(corner.x + width, corner.y),
            Point(corner.x + width, corner.y + height),
            Point(corner.x, corner.y + height),
        ]
        return cls(points=points, fill=fill, tag="rect", **kwargs)

    def draw(self, canvas: Canvas) -> None:
        canvas.draw_polygon(list(self.points), self.fill)


@dataclass
class Group(Shape):
    kind: ClassVar[str] = "g"

    children: list[Shape] = field(default_factory=list)

    def draw(self, canvas: Canvas) -> None:
        for child in self.children:
            child.draw(canvas)

    def translate(self, vector: Point) -> None:
        for child in self.children:
            child.translate(vector)

    def rotate(self, origin: Point, degrees: float) -> None:
        for child in self.children:
            child.rotate(origin, degrees)

    def scale(self, origin: Point, factor: int) -> None:
        for child in self.children:
            child.scale(origin, factor)

    def copy(self) -> Group:
        clone = copy.copy(self)
        clone.children = [child.copy() for child in self.children]
        return clone

    def walk(self) -> Iterator[Shape]:
        """Depth-first iteration over all descendants (groups included)."""
        for child in self.children:
            yield child
            if isinstance(child, Group):
                yield from child.walk()


def copy_shapes(shapes: list[Shape]) -> list[Shape]:
    return [shape.copy() for shape in shapes]
