from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Sequence

from plotframe.geometry import Point, Rect
from plotframe.style import Color, HatchPattern
from plotframe.surface import CoordinateSpace


@dataclass(frozen=True)
class DrawCall:
    op: str
    space: CoordinateSpace
    origin: Point
    args: dict[str, Any] = field(default_factory=dict)


class RecordingSurface:
    """Drawing surface that keeps every call, in order, instead of rasterizing."""

    def __init__(self) -> None:
        self.calls: list[DrawCall] = []

    def ops(self) -> list[str]:
        return [call.op for call in self.calls]

    def calls_of(self, op: str) -> list[DrawCall]:
        return [call for call in self.calls if call.op == op]

    def clear(self) -> None:
        self.calls.clear()

    def _record(self, op: str, space: CoordinateSpace, origin: Point, **args: Any) -> None:
        self.calls.append(DrawCall(op=op, space=space, origin=origin, args=args))

    def draw_line(
        self,
        start: Point,
        end: Point,
        *,
        stroke_width: float,
        color: Color,
        dashed: bool,
        space: CoordinateSpace,
        origin: Point,
    ) -> None:
        self._record("line", space, origin, start=start, end=end, stroke_width=stroke_width, color=color, dashed=dashed)

    def draw_rect(
        self,
        rect: Rect,
        *,
        stroke_width: float,
        color: Color,
        space: CoordinateSpace,
        origin: Point,
    ) -> None:
        self._record("rect", space, origin, rect=rect, stroke_width=stroke_width, color=color)

    def draw_solid_rect(
        self,
        rect: Rect,
        *,
        fill_color: Color,
        hatch_pattern: HatchPattern,
        space: CoordinateSpace,
        origin: Point,
    ) -> None:
        self._record("solid_rect", space, origin, rect=rect, fill_color=fill_color, hatch_pattern=hatch_pattern)

    def draw_solid_rect_with_border(
        self,
        rect: Rect,
        *,
        stroke_width: float,
        fill_color: Color,
        border_color: Color,
        space: CoordinateSpace,
        origin: Point,
    ) -> None:
        self._record(
            "solid_rect_with_border",
            space,
            origin,
            rect=rect,
            stroke_width=stroke_width,
            fill_color=fill_color,
            border_color=border_color,
        )

    def draw_solid_circle(
        self,
        center: Point,
        radius: float,
        *,
        color: Color,
        space: CoordinateSpace,
        origin: Point,
    ) -> None:
        self._record("solid_circle", space, origin, center=center, radius=radius, color=color)

    def draw_solid_polygon(
        self,
        points: Sequence[Point],
        *,
        color: Color,
        space: CoordinateSpace,
        origin: Point,
    ) -> None:
        self._record("solid_polygon", space, origin, points=tuple(points), color=color)

    def draw_text(
        self,
        text: str,
        location: Point,
        *,
        size: float,
        color: Color,
        stroke_width: float,
        angle: float,
        space: CoordinateSpace,
        origin: Point,
    ) -> None:
        self._record(
            "text",
            space,
            origin,
            text=text,
            location=location,
            size=size,
            color=color,
            stroke_width=stroke_width,
            angle=angle,
        )
