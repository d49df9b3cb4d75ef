"""Grid layout — place symbols on a near-square grid around an origin."""

from __future__ import annotations

import math
from dataclasses import dataclass

from tsdiagram.indexer.parser import ExportedSymbol

NODE_WIDTH = 200
NODE_HEIGHT = 90
X_GAP = 80
Y_GAP = 120


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class Size:
    width: float
    height: float


@dataclass(frozen=True)
class LayoutNode:
    symbol: ExportedSymbol
    top_left: Point
    size: Size
    center: Point


ORIGIN = Point(0, 0)


def column_count(symbol_count: int) -> int:
    """Number of grid columns for *symbol_count* nodes (at least 1)."""
    return max(1, math.ceil(math.sqrt(symbol_count)))


def layout(symbols: list[ExportedSymbol], origin: Point = ORIGIN) -> list[LayoutNode]:
    """Assign each symbol a rectangle on the grid.

    The grid is centred horizontally on ``origin.x`` and grows downward from
    ``origin.y``. Positions depend only on a symbol's index and the total
    count, so identical inputs always give identical output.
    """
    columns = column_count(len(symbols))
    size = Size(NODE_WIDTH, NODE_HEIGHT)

    nodes = []
    for index, symbol in enumerate(symbols):
        column = index % columns
        row = index // columns

        x = origin.x + column * (NODE_WIDTH + X_GAP) - (columns * NODE_WIDTH) / 2
        y = origin.y + row * (NODE_HEIGHT + Y_GAP)

        nodes.append(
            LayoutNode(
                symbol=symbol,
                top_left=Point(x, y),
                size=size,
                center=Point(x + NODE_WIDTH / 2, y + NODE_HEIGHT / 2),
            )
        )
    return nodes


def viewport_origin(
    scroll_x: float, scroll_y: float, width: float, height: float, zoom: float = 1
) -> Point:
    """Return the canvas point at the centre of a scrolled, zoomed viewport."""
    zoom = zoom or 1
    return Point(-scroll_x + width / 2 / zoom, -scroll_y + height / 2 / zoom)
