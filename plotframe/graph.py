from __future__ import annotations

import logging
from typing import Protocol, Sequence

from plotframe.dimensions import split_frame
from plotframe.errors import PlotDataError
from plotframe.geometry import Point
from plotframe.layout import GraphLayout, LayoutResults
from plotframe.legend import LegendEntry
from plotframe.markers import PlotMarkers
from plotframe.surface import DrawingSurface, RenderContext, TextMetrics


LOGGER = logging.getLogger(__name__)


class HasGraphLayout(Protocol):
    """What a chart type supplies so the shared layout engine can render it.

    `calculate_scale_and_marker_locations` fills `markers` in graph space from
    the chart's own data; `draw_data` draws the series once the markers are
    final. Style is read and written through `layout`.
    """

    layout: GraphLayout

    @property
    def legend_labels(self) -> Sequence[LegendEntry]:
        ...

    def calculate_scale_and_marker_locations(self, markers: PlotMarkers, metrics: TextMetrics) -> None:
        ...

    def draw_data(self, markers: PlotMarkers, ctx: RenderContext) -> None:
        ...


def draw_graph(
    plot: HasGraphLayout,
    surface: DrawingSurface,
    metrics: TextMetrics,
    *,
    offset: Point = Point(0.0, 0.0),
) -> LayoutResults:
    """Lay out and draw one chart: background, then data, then foreground."""
    engine = plot.layout
    engine.legend_labels = list(plot.legend_labels)

    def calculate_markers(markers: PlotMarkers) -> None:
        plot.calculate_scale_and_marker_locations(markers, metrics)

    results = engine.layout(metrics, calculate_markers)
    ctx = engine.graph_context(results, RenderContext(surface=surface, offset=offset))
    LOGGER.debug("draw_graph: %s at offset (%s, %s)", type(plot).__name__, offset.x, offset.y)
    engine.draw_background(results, ctx)
    plot.draw_data(results.plot_markers, ctx)
    engine.draw_foreground(results, ctx)
    return results


def draw_subplots(
    plots: Sequence[HasGraphLayout],
    surface: DrawingSurface,
    metrics: TextMetrics,
    *,
    rows: int,
    cols: int,
    width: float | None = None,
    height: float | None = None,
) -> list[LayoutResults]:
    """Render several charts into a rows x cols grid on one surface.

    Canvas size defaults to the first chart's frame size. Renders run one at a
    time; each chart's sub-region replaces its current plot dimensions.
    """
    if not plots:
        raise PlotDataError("no plots to draw")
    if len(plots) > rows * cols:
        raise PlotDataError(f"{len(plots)} plots do not fit a {rows}x{cols} grid")
    first = plots[0].layout.plot_dimensions
    frame_w = first.frame_width if width is None else width
    frame_h = first.frame_height if height is None else height
    cells = split_frame(frame_w, frame_h, rows, cols)
    LOGGER.debug("draw_subplots: %d plots in %dx%d grid of %sx%s", len(plots), rows, cols, frame_w, frame_h)
    out: list[LayoutResults] = []
    for plot, (offset, dims) in zip(plots, cells):
        plot.layout.plot_dimensions = dims
        out.append(draw_graph(plot, surface, metrics, offset=offset))
    return out
