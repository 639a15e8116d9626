"""Element registry. Every markup element is a standalone handler registered via decorator.

Usage:
    @element(name="circle", description="Circle from cx/cy/r")
    def build_circle(node: ET.Element, attrs: dict[str, str], ctx: BuildContext) -> list[Shape]:
        return [Ellipse.circle(...)]

Supporting a new element = writing one handler with the decorator. The builder
looks handlers up by local tag name; names without a handler are skipped.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from svgraster.models.shapes import Shape
    from svgraster.svg.builder import BuildContext

logger = logging.getLogger(__name__)

ElementHandler = Callable[[ET.Element, dict[str, str], "BuildContext"], list["Shape"]]


@dataclass
class ElementSpec:
    name: str
    fn: ElementHandler
    description: str = ""


class ElementRegistry:
    """Registry of element handlers keyed by local tag name."""

    def __init__(self) -> None:
        self._elements: dict[str, ElementSpec] = {}

    def register(self, spec: ElementSpec) -> None:
        if spec.name in self._elements:
            raise ValueError(f"Duplicate element handler: {spec.name}")
        self._elements[spec.name] = spec
        logger.debug("Registered element <%s>", spec.name)

    def get(self, name: str) -> ElementSpec | None:
        return self._elements.get(name)

    def names(self) -> list[str]:
        return sorted(self._elements)

    def __contains__(self, name: object) -> bool:
        return name in self._elements


# Module-level singleton, filled at import time
_registry = ElementRegistry()


def get_registry() -> ElementRegistry:
    return _registry


def element(*, name: str, description: str = ""):
    """Decorator to register an element handler."""

    def decorator(fn: ElementHandler) -> ElementHandler:
        _registry.register(ElementSpec(name=name, fn=fn, description=description))
        return fn

    return decorator
