from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import math
from typing import Protocol, Union

from plotframe.geometry import Point, Rect
from plotframe.style import Color
from plotframe.surface import CoordinateSpace, RenderContext


class LegendShape(Protocol):
    def draw(self, into: Rect, color: Color, ctx: RenderContext) -> None:
        ...


def _regular_polygon(center: Point, radius: float, sides: int, start_deg: float = 90.0) -> list[Point]:
    step = 2.0 * math.pi / sides
    start = math.radians(start_deg)
    return [
        Point(center.x + radius * math.cos(start + i * step), center.y + radius * math.sin(start + i * step))
        for i in range(sides)
    ]


def _star(center: Point, radius: float, points: int = 5, inner_ratio: float = 0.4) -> list[Point]:
    out: list[Point] = []
    step = math.pi / points
    start = math.pi / 2.0
    for i in range(points * 2):
        r = radius if i % 2 == 0 else radius * inner_ratio
        angle = start + i * step
        out.append(Point(center.x + r * math.cos(angle), center.y + r * math.sin(angle)))
    return out


class ScatterShape(Enum):
    CIRCLE = "circle"
    SQUARE = "square"
    TRIANGLE = "triangle"
    DIAMOND = "diamond"
    HEXAGON = "hexagon"
    STAR = "star"

    def draw(
        self,
        into: Rect,
        color: Color,
        ctx: RenderContext,
        *,
        space: CoordinateSpace = CoordinateSpace.CANVAS,
    ) -> None:
        box = into.normalized
        center = box.center
        radius = min(box.width, box.height) * 0.5
        if self is ScatterShape.CIRCLE:
            ctx.draw_solid_circle(center, radius, color=color, space=space)
        elif self is ScatterShape.SQUARE:
            ctx.draw_solid_rect(box, fill_color=color, space=space)
        elif self is ScatterShape.TRIANGLE:
            ctx.draw_solid_polygon(_regular_polygon(center, radius, 3), color=color, space=space)
        elif self is ScatterShape.DIAMOND:
            ctx.draw_solid_polygon(_regular_polygon(center, radius, 4), color=color, space=space)
        elif self is ScatterShape.HEXAGON:
            ctx.draw_solid_polygon(_regular_polygon(center, radius, 6, start_deg=0.0), color=color, space=space)
        else:
            ctx.draw_solid_polygon(_star(center, radius), color=color, space=space)


@dataclass(frozen=True)
class SquareIcon:
    color: Color


@dataclass(frozen=True)
class ShapeIcon:
    shape: LegendShape
    color: Color


LegendIcon = Union[SquareIcon, ShapeIcon]
LegendEntry = tuple[str, LegendIcon]
