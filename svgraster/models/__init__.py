from svgraster.models.shapes import Ellipse, Group, Polygon, Polyline, Shape, copy_shapes
from svgraster.models.svg_document import SvgDocument

__all__ = [
    "Shape",
    "Ellipse",
    "Polyline",
    "Polygon",
    "Group",
    "copy_shapes",
    "SvgDocument",
]
