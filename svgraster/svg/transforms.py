"""``transform`` / ``transform-origin`` attribute parsing and application.

Supported functions:

    translate(x[, ]y)    y defaults to 0
    rotate(deg)          about the transform origin
    rotate(deg cx cy)    about (cx, cy), overriding the origin
    scale(n)             integer factor about the transform origin

A list of functions is applied right to left, the SVG composition order, so
``translate(10 0) rotate(90)`` rotates first and then translates.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass

from svgraster.models.shapes import Shape
from svgraster.utils.geometry import ORIGIN, Point, round_half_away

logger = logging.getLogger(__name__)

_FUNCTION_RE = re.compile(r"([A-Za-z]+)\s*\(([^)]*)\)")
_SEPARATOR_RE = re.compile(r"[\s,]+")


@dataclass(frozen=True)
class Translate:
    vector: Point

    def apply(self, shape: Shape, origin: Point) -> None:
        shape.translate(self.vector)


@dataclass(frozen=True)
class Rotate:
    degrees: float
    # Explicit pivot from the three-argument form
    center: Point | None = None

    def apply(self, shape: Shape, origin: Point) -> None:
        shape.rotate(self.center if self.center is not None else origin, self.degrees)


@dataclass(frozen=True)
class Scale:
    factor: int

    def apply(self, shape: Shape, origin: Point) -> None:
        shape.scale(origin, self.factor)


TransformOp = Translate | Rotate | Scale


def split_numbers(text: str) -> list[str]:
    text = text.strip()
    if not text:
        return []
    return _SEPARATOR_RE.split(text)


def parse_transform(text: str) -> list[TransformOp]:
    """Parse a transform attribute into ops, in the order they are written.

    Unknown functions and functions with bad arguments are skipped.
    """
    ops: list[TransformOp] = []
    for match in _FUNCTION_RE.finditer(text):
        name, raw_args = match.group(1), match.group(2)
        try:
            args = [_finite(a) for a in split_numbers(raw_args)]
        except ValueError:
            logger.warning("Malformed transform %r, skipping", match.group(0))
            continue
        op = _make_op(name, args)
        if op is None:
            logger.warning("Unsupported transform %r, skipping", match.group(0))
            continue
        ops.append(op)
    if not ops and text.strip():
        logger.warning("No usable transform in %r", text)
    return ops


def _finite(token: str) -> float:
    """float(token), rejecting inf/nan and values that overflow (1e400)."""
    value = float(token)
    if not math.isfinite(value):
        raise ValueError(f"non-finite number {token!r}")
    return value


def _make_op(name: str, args: list[float]) -> TransformOp | None:
    if name == "translate" and len(args) in (1, 2):
        dy = args[1] if len(args) == 2 else 0.0
        return Translate(Point(round_half_away(args[0]), round_half_away(dy)))
    if name == "rotate" and len(args) == 1:
        return Rotate(args[0])
    if name == "rotate" and len(args) == 3:
        return Rotate(args[0], Point(round_half_away(args[1]), round_half_away(args[2])))
    if name == "scale" and len(args) == 1:
        factor = round_half_away(args[0])
        if factor != args[0]:
            logger.warning("Non-integer scale factor %g rounded to %d", args[0], factor)
        return Scale(factor)
    return None


def parse_origin(text: str | None) -> Point:
    """Parse ``transform-origin`` as "x y" or "x,y"; anything else is (0, 0)."""
    if text is None:
        return ORIGIN
    parts = split_numbers(text)
    try:
        if len(parts) != 2:
            raise ValueError(f"expected 2 coordinates, got {len(parts)}")
        return Point(round_half_away(_finite(parts[0])), round_half_away(_finite(parts[1])))
    except (ValueError, OverflowError) as e:
        logger.warning("Malformed transform-origin %r (%s), using (0, 0)", text, e)
        return ORIGIN


def apply_transforms(shapes: list[Shape], ops: list[TransformOp], origin: Point = ORIGIN) -> None:
    """Apply ops to every shape in place, rightmost op first."""
    for op in reversed(ops):
        for shape in shapes:
            op.apply(shape, origin)
