"""Assemble layout nodes and reference edges into drawable elements."""

from __future__ import annotations

import logging
import textwrap

from tsdiagram.diagram.elements import Arrow, DrawableElement, Rectangle, TextLabel
from tsdiagram.graph.references import ReferenceEdge
from tsdiagram.indexer.parser import SymbolKind
from tsdiagram.layout.grid import LayoutNode

logger = logging.getLogger(__name__)

FONT_SIZE = 20
LINE_HEIGHT = FONT_SIZE * 1.25
CHAR_WIDTH = FONT_SIZE * 0.55
LABEL_PADDING = 10

# (background, stroke) per symbol kind
KIND_COLORS: dict[SymbolKind, tuple[str, str]] = {
    SymbolKind.FUNCTION: ("#b2f2bb", "#2b8a3e"),
    SymbolKind.INTERFACE: ("#a5d8ff", "#1971c2"),
    SymbolKind.TYPE: ("#d0bfff", "#6741d9"),
    SymbolKind.CLASS: ("#ffec99", "#e67700"),
    SymbolKind.VARIABLE: ("#dee2e6", "#495057"),
}


def label_text(node: LayoutNode) -> str:
    return f"{node.symbol.name} ({node.symbol.kind.value})"


def wrap_label(text: str, width: float) -> list[str]:
    """Wrap *text* into lines that fit *width* at the label font size."""
    max_chars = max(1, int(width // CHAR_WIDTH))
    return textwrap.wrap(text, width=max_chars, break_long_words=True) or [text]


def _node_elements(node: LayoutNode, index: int, id_prefix: str) -> list[DrawableElement]:
    rect_id = f"{id_prefix}-node-{index}"
    background, stroke = KIND_COLORS[node.symbol.kind]
    rect = Rectangle(
        id=rect_id,
        x=node.top_left.x, y=node.top_left.y,
        width=node.size.width, height=node.size.height,
        stroke_color=stroke, background_color=background,
    )

    inner_width = node.size.width - 2 * LABEL_PADDING
    lines = wrap_label(label_text(node), inner_width)
    height = LINE_HEIGHT * len(lines)
    label = TextLabel(
        id=f"{rect_id}-label",
        text="\n".join(lines),
        x=node.center.x - inner_width / 2,
        y=node.center.y - height / 2,
        width=inner_width,
        height=height,
        font_size=FONT_SIZE,
    )
    return [rect, label]


def _edge_arrow(nodes: list[LayoutNode], edge: ReferenceEdge, id_prefix: str) -> Arrow:
    start = nodes[edge.source_index].center
    end = nodes[edge.target_index].center
    return Arrow(
        id=f"{id_prefix}-edge-{edge.source_index}-{edge.target_index}",
        x=start.x,
        y=start.y,
        points=((0, 0), (end.x - start.x, end.y - start.y)),
        start_arrowhead=None,
        end_arrowhead="arrow",
    )


def assemble(
    nodes: list[LayoutNode],
    edges: list[ReferenceEdge],
    id_prefix: str = "tsd",
) -> list[DrawableElement]:
    """Build the element list: rectangle/label pairs in node order, then arrows.

    Arrows start at the source node's centre and carry the target centre as
    a relative (dx, dy) point.
    """
    elements: list[DrawableElement] = []
    for index, node in enumerate(nodes):
        elements.extend(_node_elements(node, index, id_prefix))
    for edge in edges:
        elements.append(_edge_arrow(nodes, edge, id_prefix))

    logger.debug(
        "Assembled %d element(s) from %d node(s), %d edge(s)",
        len(elements), len(nodes), len(edges),
    )
    return elements
