from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Callable, Sequence, TypeVar

from plotframe.dimensions import PlotDimensions
from plotframe.errors import LayoutSequenceError
from plotframe.geometry import Point, Rect, Size
from plotframe.legend import LegendEntry, ShapeIcon, SquareIcon
from plotframe.markers import PlotMarkers
from plotframe.style import Grid, HatchPattern, PlotBorder, PlotLabel, PlotLegend, PlotTitle
from plotframe.surface import CoordinateSpace, RenderContext, TextMetrics


LOGGER = logging.getLogger(__name__)

BORDER_MARGIN_RATIO = 0.1
BORDER_SIZE_RATIO = 0.8
LABEL_GAP_RATIO = 0.05
MARKER_TEXT_GAP = 8.0
MARKER_TEXT_BASELINE_DROP = 4.0
TICK_LENGTH = 6.0
LEGEND_INSET = 20.0
LEGEND_WIDTH_PAD_RATIO = 3.5
TEXT_STROKE_WIDTH = 1.2
MARKER_TEXT_STROKE_WIDTH = 0.7

MarkerCalculator = Callable[[PlotMarkers], None]

_T = TypeVar("_T")


def _require(value: _T | None, what: str) -> _T:
    if value is None:
        raise LayoutSequenceError(f"{what} has not been computed; layout stages ran out of order")
    return value


@dataclass
class LayoutResults:
    """Geometry produced by one `GraphLayout.layout` call, consumed by the draw pass."""

    plot_border_rect: Rect | None = None

    x_label_location: Point | None = None
    y_label_location: Point | None = None
    title_location: Point | None = None

    plot_markers: PlotMarkers = field(default_factory=PlotMarkers)
    x_markers_text_location: list[Point] = field(default_factory=list)
    y_markers_text_location: list[Point] = field(default_factory=list)
    y2_markers_text_location: list[Point] = field(default_factory=list)

    legend_rect: Rect | None = None


@dataclass
class GraphLayout:
    """Shared chart geometry and decorations.

    `layout` computes a fresh `LayoutResults` in a fixed stage order; the
    chart's data is drawn between `draw_background` and `draw_foreground` so
    grid, border and ticks sit beneath it and title, labels and legend above.
    """

    plot_dimensions: PlotDimensions
    plot_title: PlotTitle | None = None
    plot_label: PlotLabel | None = None
    plot_legend: PlotLegend = field(default_factory=PlotLegend)
    plot_border: PlotBorder = field(default_factory=PlotBorder)
    grid: Grid = field(default_factory=Grid)
    legend_labels: list[LegendEntry] = field(default_factory=list)

    enable_primary_axis_grid: bool = True
    enable_secondary_axis_grid: bool = True
    marker_text_size: float = 12.0

    # Layout.

    def layout(self, metrics: TextMetrics, calculate_markers: MarkerCalculator) -> LayoutResults:
        results = LayoutResults()
        self.calc_border(results)
        self.calc_label_locations(metrics, results)
        calculate_markers(results.plot_markers)
        self.calc_marker_text_locations(metrics, results)
        self.calc_legend(self.legend_labels, metrics, results)
        LOGGER.debug(
            "layout: border=%s markers x=%d y=%d y2=%d legend=%s",
            results.plot_border_rect,
            len(results.plot_markers.x_markers),
            len(results.plot_markers.y_markers),
            len(results.plot_markers.y2_markers),
            results.legend_rect,
        )
        return results

    def calc_border(self, results: LayoutResults) -> None:
        dims = self.plot_dimensions
        results.plot_border_rect = Rect(
            origin=Point(dims.sub_width * BORDER_MARGIN_RATIO, dims.sub_height * BORDER_MARGIN_RATIO),
            size=Size(dims.sub_width * BORDER_SIZE_RATIO, dims.sub_height * BORDER_SIZE_RATIO),
        )

    def calc_label_locations(self, metrics: TextMetrics, results: LayoutResults) -> None:
        border = _require(results.plot_border_rect, "plot border rect")
        dims = self.plot_dimensions
        if self.plot_label is not None:
            label = self.plot_label
            x_width = metrics.measure_width(label.x_label, label.size)
            y_width = metrics.measure_width(label.y_label, label.size)
            results.x_label_location = Point(
                border.mid_x - x_width * 0.5,
                border.min_y - label.size - LABEL_GAP_RATIO * dims.graph_height,
            )
            # Drawn rotated by 90 degrees, so the measured width runs along y.
            results.y_label_location = Point(
                border.min_x - label.size - LABEL_GAP_RATIO * dims.graph_width,
                border.mid_y - y_width * 0.5,
            )
        if self.plot_title is not None:
            title = self.plot_title
            title_width = metrics.measure_width(title.title, title.size)
            results.title_location = Point(
                border.mid_x - title_width * 0.5,
                border.max_y + title.size * 0.5,
            )

    def calc_marker_text_locations(self, metrics: TextMetrics, results: LayoutResults) -> None:
        markers = results.plot_markers
        markers.validate()
        size = self.marker_text_size

        results.x_markers_text_location = []
        for position, text in zip(markers.x_markers, markers.x_markers_text):
            text_width = metrics.measure_width(text, size)
            results.x_markers_text_location.append(Point(position - text_width / 2.0, -2.0 * size))

        results.y_markers_text_location = []
        for position, text in zip(markers.y_markers, markers.y_markers_text):
            text_width = metrics.measure_width(text, size)
            results.y_markers_text_location.append(
                Point(-(text_width + MARKER_TEXT_GAP), position - MARKER_TEXT_BASELINE_DROP)
            )

        results.y2_markers_text_location = [
            Point(self.plot_dimensions.graph_width + MARKER_TEXT_GAP, position - MARKER_TEXT_BASELINE_DROP)
            for position in markers.y2_markers
        ]

    def calc_legend(self, labels: Sequence[LegendEntry], metrics: TextMetrics, results: LayoutResults) -> None:
        border = _require(results.plot_border_rect, "plot border rect")
        if not labels:
            results.legend_rect = None
            return
        text_size = self.plot_legend.text_size
        max_width = max(metrics.measure_width(label, text_size) for label, _ in labels)

        legend_width = max_width + LEGEND_WIDTH_PAD_RATIO * text_size
        legend_height = (len(labels) * 2.0 + 1.0) * text_size

        top_left = Point(border.min_x + LEGEND_INSET, border.max_y - LEGEND_INSET)
        results.legend_rect = Rect(origin=top_left, size=Size(legend_width, -legend_height)).normalized

    # Drawing.

    def graph_context(self, results: LayoutResults, ctx: RenderContext) -> RenderContext:
        """Bind `ctx` so graph-space points resolve against this layout's border origin."""
        border = _require(results.plot_border_rect, "plot border rect")
        return ctx.with_graph_origin(border.origin)

    def draw_background(self, results: LayoutResults, ctx: RenderContext) -> None:
        ctx = self.graph_context(results, ctx)
        self.draw_grid(results, ctx)
        self.draw_border(results, ctx)
        self.draw_markers(results, ctx)

    def draw_foreground(self, results: LayoutResults, ctx: RenderContext) -> None:
        ctx = self.graph_context(results, ctx)
        self.draw_title(results, ctx)
        self.draw_labels(results, ctx)
        self.draw_legend(self.legend_labels, results, ctx)

    def draw_title(self, results: LayoutResults, ctx: RenderContext) -> None:
        if self.plot_title is None:
            return
        location = _require(results.title_location, "title location")
        ctx.draw_text(
            self.plot_title.title,
            location,
            size=self.plot_title.size,
            color=self.plot_title.color,
            stroke_width=TEXT_STROKE_WIDTH,
            angle=0.0,
            space=CoordinateSpace.CANVAS,
        )

    def draw_labels(self, results: LayoutResults, ctx: RenderContext) -> None:
        label = self.plot_label
        if label is None:
            return
        x_location = _require(results.x_label_location, "x label location")
        y_location = _require(results.y_label_location, "y label location")
        ctx.draw_text(
            label.x_label,
            x_location,
            size=label.size,
            color=label.color,
            stroke_width=TEXT_STROKE_WIDTH,
            angle=0.0,
            space=CoordinateSpace.CANVAS,
        )
        ctx.draw_text(
            label.y_label,
            y_location,
            size=label.size,
            color=label.color,
            stroke_width=TEXT_STROKE_WIDTH,
            angle=90.0,
            space=CoordinateSpace.CANVAS,
        )

    def draw_border(self, results: LayoutResults, ctx: RenderContext) -> None:
        border = _require(results.plot_border_rect, "plot border rect")
        ctx.draw_rect(
            border,
            stroke_width=self.plot_border.thickness,
            color=self.plot_border.color,
            space=CoordinateSpace.CANVAS,
        )

    def draw_grid(self, results: LayoutResults, ctx: RenderContext) -> None:
        markers = results.plot_markers
        graph_width = self.plot_dimensions.graph_width
        graph_height = self.plot_dimensions.graph_height
        if self.enable_primary_axis_grid:
            for x in markers.x_markers:
                self._grid_line(ctx, Point(x, 0.0), Point(x, graph_height))
            for y in markers.y_markers:
                self._grid_line(ctx, Point(0.0, y), Point(graph_width, y))
        if self.enable_secondary_axis_grid:
            for y in markers.y2_markers:
                self._grid_line(ctx, Point(0.0, y), Point(graph_width, y))

    def _grid_line(self, ctx: RenderContext, start: Point, end: Point) -> None:
        ctx.draw_line(
            start,
            end,
            stroke_width=self.grid.thickness,
            color=self.grid.color,
            dashed=False,
            space=CoordinateSpace.GRAPH,
        )

    def draw_markers(self, results: LayoutResults, ctx: RenderContext) -> None:
        markers = results.plot_markers
        graph_width = self.plot_dimensions.graph_width
        for i, x in enumerate(markers.x_markers):
            self._tick(ctx, Point(x, -TICK_LENGTH), Point(x, 0.0))
            self._marker_text(ctx, markers.x_markers_text[i], results.x_markers_text_location[i])
        for i, y in enumerate(markers.y_markers):
            self._tick(ctx, Point(-TICK_LENGTH, y), Point(0.0, y))
            self._marker_text(ctx, markers.y_markers_text[i], results.y_markers_text_location[i])
        for i, y in enumerate(markers.y2_markers):
            self._tick(ctx, Point(graph_width, y), Point(graph_width + TICK_LENGTH, y))
            self._marker_text(ctx, markers.y2_markers_text[i], results.y2_markers_text_location[i])

    def _tick(self, ctx: RenderContext, start: Point, end: Point) -> None:
        ctx.draw_line(
            start,
            end,
            stroke_width=self.plot_border.thickness,
            color=self.plot_border.color,
            dashed=False,
            space=CoordinateSpace.GRAPH,
        )

    def _marker_text(self, ctx: RenderContext, text: str, location: Point) -> None:
        ctx.draw_text(
            text,
            location,
            size=self.marker_text_size,
            color=self.plot_border.color,
            stroke_width=MARKER_TEXT_STROKE_WIDTH,
            angle=0.0,
            space=CoordinateSpace.GRAPH,
        )

    def draw_legend(self, entries: Sequence[LegendEntry], results: LayoutResults, ctx: RenderContext) -> None:
        legend_rect = results.legend_rect
        if legend_rect is None:
            return
        legend = self.plot_legend
        text_size = legend.text_size
        ctx.draw_solid_rect_with_border(
            legend_rect,
            stroke_width=legend.border_thickness,
            fill_color=legend.background_color,
            border_color=legend.border_color,
            space=CoordinateSpace.CANVAS,
        )
        for i, (label, icon) in enumerate(entries):
            icon_box = Rect(
                origin=Point(legend_rect.min_x + text_size, legend_rect.max_y - (2.0 * i + 1.0) * text_size),
                size=Size(text_size, -text_size),
            ).normalized
            if isinstance(icon, SquareIcon):
                ctx.draw_solid_rect(
                    icon_box,
                    fill_color=icon.color,
                    hatch_pattern=HatchPattern.NONE,
                    space=CoordinateSpace.CANVAS,
                )
            elif isinstance(icon, ShapeIcon):
                icon.shape.draw(icon_box, icon.color, ctx)
            else:
                raise TypeError(f"unsupported legend icon: {icon!r}")
            ctx.draw_text(
                label,
                Point(icon_box.max_x + text_size, icon_box.min_y),
                size=text_size,
                color=legend.text_color,
                stroke_width=TEXT_STROKE_WIDTH,
                angle=0.0,
                space=CoordinateSpace.CANVAS,
            )
