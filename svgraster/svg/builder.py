"""Scene builder: recursive walk from a markup node to a shape tree.

For every child node, in document order:

    1. look up the handler for the local tag name (unknown names are skipped)
    2. build the node's shapes (``g`` recurses, ``use`` copies from the symbol table)
    3. apply the node's ``transform`` about its ``transform-origin``
    4. register the final, post-transform shapes under the node's ``id``

All build state lives in a ``BuildContext`` passed down the recursion.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from collections import Counter
from dataclasses import dataclass, field

# Imported for the @element registrations
import svgraster.svg.elements  # noqa: F401
from svgraster.models.shapes import Group, Shape
from svgraster.svg.attributes import local_name, node_attributes
from svgraster.svg.registry import ElementRegistry, element, get_registry
from svgraster.svg.symbols import SymbolTable
from svgraster.svg.transforms import apply_transforms, parse_origin, parse_transform

logger = logging.getLogger(__name__)


@dataclass
class BuildContext:
    """Shared state for one build pass."""

    symbols: SymbolTable = field(default_factory=SymbolTable)
    registry: ElementRegistry = field(default_factory=get_registry)
    # Unrecognized element names -> occurrences
    skipped: Counter[str] = field(default_factory=Counter)
    # use references that did not resolve
    unresolved: list[str] = field(default_factory=list)


def build_scene(root: ET.Element, ctx: BuildContext | None = None) -> list[Shape]:
    """Top-level shape list for the children of ``root``."""
    ctx = ctx or BuildContext()
    shapes = build_children(root, ctx)
    logger.debug(
        "Built %d top-level shapes, %d ids, %d skipped elements",
        len(shapes),
        len(ctx.symbols),
        sum(ctx.skipped.values()),
    )
    return shapes


def build_children(node: ET.Element, ctx: BuildContext) -> list[Shape]:
    shapes: list[Shape] = []
    for child in node:
        shapes.extend(build_node(child, ctx))
    return shapes


def build_node(node: ET.Element, ctx: BuildContext) -> list[Shape]:
    if not isinstance(node.tag, str):
        # Comments / processing instructions
        return []
    name = local_name(node.tag)
    spec = ctx.registry.get(name)
    if spec is None:
        ctx.skipped[name] += 1
        logger.debug("Skipping unsupported element <%s>", name)
        return []

    attrs = node_attributes(node)
    shapes = spec.fn(node, attrs, ctx)

    transform = attrs.get("transform")
    if transform and shapes:
        ops = parse_transform(transform)
        apply_transforms(shapes, ops, parse_origin(attrs.get("transform-origin")))

    ident = attrs.get("id", "").strip()
    if ident:
        for shape in shapes:
            shape.id = ident
        ctx.symbols.register(ident, shapes)

    return shapes


@element(name="g", description="Group of child elements")
def build_group(node: ET.Element, attrs: dict[str, str], ctx: BuildContext) -> list[Shape]:
    return [Group(children=build_children(node, ctx))]


@element(name="use", description="Copies of a previously defined id")
def build_use(node: ET.Element, attrs: dict[str, str], ctx: BuildContext) -> list[Shape]:
    ref = attrs.get("href", "").strip()
    ident = ref[1:] if ref.startswith("#") else ref
    if ident not in ctx.symbols:
        logger.warning("<use> references unknown id %r, ignoring", ref)
        ctx.unresolved.append(ref)
        return []
    return ctx.symbols.resolve(ident)
