"""Loaded SVG document model."""

from __future__ import annotations

from pydantic import BaseModel, Field, InstanceOf

from svgraster.models.shapes import Group, Shape


class SvgDocument(BaseModel):
    """Root dimensions plus the top-level shape list, in document order."""

    width: int = Field(default=0, ge=0)
    height: int = Field(default=0, ge=0)
    shapes: list[InstanceOf[Shape]] = Field(default_factory=list)
    source: str = "<string>"

    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)

    @property
    def num_shapes(self) -> int:
        """Count of all shapes, nested group members included."""
        total = 0
        for shape in self.shapes:
            total += 1
            if isinstance(shape, Group):
                total += sum(1 for _ in shape.walk())
        return total
