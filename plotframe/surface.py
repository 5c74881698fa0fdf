from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol, Sequence

from plotframe.geometry import Point, Rect
from plotframe.style import Color, HatchPattern


class CoordinateSpace(Enum):
    GRAPH = "graph"  # relative to the graph interior origin (border origin)
    CANVAS = "canvas"  # relative to the chart's own canvas origin


class TextMetrics(Protocol):
    def measure_width(self, text: str, size: float) -> float:
        ...


class DrawingSurface(Protocol):
    """Backend that rasterizes or records primitives.

    Each call carries the coordinate space its points are expressed in and
    `origin`, the absolute canvas position of that space's (0, 0). Backends
    translate by `origin`; they hold no per-render offset state of their own.
    """

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
        ...

    def draw_rect(
        self,
        rect: Rect,
        *,
        stroke_width: float,
        color: Color,
        space: CoordinateSpace,
        origin: Point,
    ) -> None:
        ...

    def draw_solid_rect(
        self,
        rect: Rect,
        *,
        fill_color: Color,
        hatch_pattern: HatchPattern,
        space: CoordinateSpace,
        origin: Point,
    ) -> None:
        ...

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
        ...

    def draw_solid_circle(
        self,
        center: Point,
        radius: float,
        *,
        color: Color,
        space: CoordinateSpace,
        origin: Point,
    ) -> None:
        ...

    def draw_solid_polygon(
        self,
        points: Sequence[Point],
        *,
        color: Color,
        space: CoordinateSpace,
        origin: Point,
    ) -> None:
        ...

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
        ...


@dataclass(frozen=True)
class RenderContext:
    """Per-render drawing handle: a surface plus where this chart sits on it."""

    surface: DrawingSurface
    offset: Point = Point(0.0, 0.0)
    graph_origin: Point = Point(0.0, 0.0)

    def origin_for(self, space: CoordinateSpace) -> Point:
        if space is CoordinateSpace.GRAPH:
            return self.offset + self.graph_origin
        return self.offset

    def with_graph_origin(self, graph_origin: Point) -> "RenderContext":
        return RenderContext(surface=self.surface, offset=self.offset, graph_origin=graph_origin)

    def draw_line(
        self,
        start: Point,
        end: Point,
        *,
        stroke_width: float,
        color: Color,
        dashed: bool = False,
        space: CoordinateSpace = CoordinateSpace.GRAPH,
    ) -> None:
        self.surface.draw_line(
            start,
            end,
            stroke_width=stroke_width,
            color=color,
            dashed=dashed,
            space=space,
            origin=self.origin_for(space),
        )

    def draw_rect(
        self,
        rect: Rect,
        *,
        stroke_width: float,
        color: Color,
        space: CoordinateSpace = CoordinateSpace.CANVAS,
    ) -> None:
        self.surface.draw_rect(
            rect.normalized,
            stroke_width=stroke_width,
            color=color,
            space=space,
            origin=self.origin_for(space),
        )

    def draw_solid_rect(
        self,
        rect: Rect,
        *,
        fill_color: Color,
        hatch_pattern: HatchPattern = HatchPattern.NONE,
        space: CoordinateSpace = CoordinateSpace.CANVAS,
    ) -> None:
        self.surface.draw_solid_rect(
            rect.normalized,
            fill_color=fill_color,
            hatch_pattern=hatch_pattern,
            space=space,
            origin=self.origin_for(space),
        )

    def draw_solid_rect_with_border(
        self,
        rect: Rect,
        *,
        stroke_width: float,
        fill_color: Color,
        border_color: Color,
        space: CoordinateSpace = CoordinateSpace.CANVAS,
    ) -> None:
        self.surface.draw_solid_rect_with_border(
            rect.normalized,
            stroke_width=stroke_width,
            fill_color=fill_color,
            border_color=border_color,
            space=space,
            origin=self.origin_for(space),
        )

    def draw_solid_circle(
        self,
        center: Point,
        radius: float,
        *,
        color: Color,
        space: CoordinateSpace = CoordinateSpace.CANVAS,
    ) -> None:
        self.surface.draw_solid_circle(center, radius, color=color, space=space, origin=self.origin_for(space))

    def draw_solid_polygon(
        self,
        points: Sequence[Point],
        *,
        color: Color,
        space: CoordinateSpace = CoordinateSpace.CANVAS,
    ) -> None:
        self.surface.draw_solid_polygon(tuple(points), color=color, space=space, origin=self.origin_for(space))

    def draw_text(
        self,
        text: str,
        location: Point,
        *,
        size: float,
        color: Color,
        stroke_width: float = 1.2,
        angle: float = 0.0,
        space: CoordinateSpace = CoordinateSpace.CANVAS,
    ) -> None:
        self.surface.draw_text(
            text,
            location,
            size=size,
            color=color,
            stroke_width=stroke_width,
            angle=angle,
            space=space,
            origin=self.origin_for(space),
        )
