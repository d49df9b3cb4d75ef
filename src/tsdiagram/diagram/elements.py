"""Drawable elements handed to the whiteboard renderer.

Each element serializes to the Excalidraw element shape via ``to_dict``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Union

# Colors
DARK = "#1e1e1e"
WHITE = "#ffffff"
TRANSPARENT = "transparent"


def _base(id: str, type: str, x: float, y: float, width: float, height: float) -> dict[str, Any]:
    return {
        "id": id, "type": type,
        "x": x, "y": y, "width": width, "height": height,
        "angle": 0, "opacity": 100, "groupIds": [],
        "roughness": 1, "strokeWidth": 2,
        "boundElements": [], "isDeleted": False,
    }


@dataclass(frozen=True)
class Rectangle:
    type: ClassVar[str] = "rectangle"

    id: str
    x: float
    y: float
    width: float
    height: float
    stroke_color: str = DARK
    background_color: str = TRANSPARENT

    def to_dict(self) -> dict[str, Any]:
        el = _base(self.id, self.type, self.x, self.y, self.width, self.height)
        el.update({
            "strokeColor": self.stroke_color,
            "backgroundColor": self.background_color,
            "fillStyle": "solid",
            "roundness": {"type": 3},
        })
        return el


@dataclass(frozen=True)
class TextLabel:
    type: ClassVar[str] = "text"

    id: str
    text: str
    x: float
    y: float
    width: float
    height: float
    text_align: str = "center"
    vertical_align: str = "middle"
    font_size: int = 20
    stroke_color: str = DARK

    def to_dict(self) -> dict[str, Any]:
        el = _base(self.id, self.type, self.x, self.y, self.width, self.height)
        el.update({
            "text": self.text, "rawText": self.text,
            "fontSize": self.font_size, "fontFamily": 1,
            "textAlign": self.text_align, "verticalAlign": self.vertical_align,
            "strokeColor": self.stroke_color,
            "backgroundColor": TRANSPARENT,
        })
        return el


@dataclass(frozen=True)
class Arrow:
    type: ClassVar[str] = "arrow"

    id: str
    x: float
    y: float
    points: tuple[tuple[float, float], ...]
    start_arrowhead: str | None = None
    end_arrowhead: str | None = "arrow"
    stroke_color: str = DARK

    @property
    def width(self) -> float:
        xs = [p[0] for p in self.points]
        return max(xs) - min(xs)

    @property
    def height(self) -> float:
        ys = [p[1] for p in self.points]
        return max(ys) - min(ys)

    def to_dict(self) -> dict[str, Any]:
        el = _base(self.id, self.type, self.x, self.y, self.width, self.height)
        el.update({
            "points": [list(p) for p in self.points],
            "startArrowhead": self.start_arrowhead,
            "endArrowhead": self.end_arrowhead,
            "strokeColor": self.stroke_color,
            "backgroundColor": TRANSPARENT,
        })
        return el


DrawableElement = Union[Rectangle, TextLabel, Arrow]


def make_scene(elements: list[DrawableElement]) -> dict[str, Any]:
    """Wrap elements in an Excalidraw document."""
    return {
        "type": "excalidraw",
        "version": 2,
        "source": "https://excalidraw.com",
        "elements": [el.to_dict() for el in elements],
        "appState": {"viewBackgroundColor": WHITE, "gridSize": 20},
        "files": {},
    }
