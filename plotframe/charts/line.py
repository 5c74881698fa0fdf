from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

import numpy as np

from plotframe.charts._axis import (
    PIXELS_PER_X_TICK,
    PIXELS_PER_Y_TICK,
    as_xy,
    build_axis,
    fill_x_markers,
    fill_y_markers,
    x_label_stride,
)
from plotframe.dimensions import PlotDimensions
from plotframe.errors import LayoutSequenceError, PlotDataError
from plotframe.geometry import Point
from plotframe.layout import GraphLayout
from plotframe.legend import LegendEntry, SquareIcon
from plotframe.markers import PlotMarkers
from plotframe.scales import LinearScale
from plotframe.style import Color
from plotframe.surface import CoordinateSpace, RenderContext, TextMetrics


@dataclass(frozen=True)
class LineSeries:
    label: str
    x: np.ndarray
    y: np.ndarray
    color: Color
    width: float = 1.5
    dashed: bool = False
    secondary: bool = False


class LineGraph:
    """Line chart; series flagged `secondary` are scaled against the right axis."""

    def __init__(self, width: float = 1000, height: float = 660) -> None:
        self.layout = GraphLayout(plot_dimensions=PlotDimensions(frame_width=width, frame_height=height))
        self.series: list[LineSeries] = []
        self._x_scale: LinearScale | None = None
        self._y_scale: LinearScale | None = None
        self._y2_scale: LinearScale | None = None

    def add_series(
        self,
        y: Any,
        *,
        x: Any = None,
        label: str = "",
        color: Color = (31, 119, 180, 255),
        width: float = 1.5,
        dashed: bool = False,
        secondary: bool = False,
    ) -> "LineGraph":
        xs, ys = as_xy(x, y)
        self.series.append(
            LineSeries(label=label, x=xs, y=ys, color=color, width=width, dashed=dashed, secondary=secondary)
        )
        return self

    @property
    def legend_labels(self) -> Sequence[LegendEntry]:
        return [(s.label, SquareIcon(s.color)) for s in self.series if s.label]

    def calculate_scale_and_marker_locations(self, markers: PlotMarkers, metrics: TextMetrics) -> None:
        if not self.series:
            raise PlotDataError("line graph has no series")
        dims = self.layout.plot_dimensions
        primary = [s for s in self.series if not s.secondary]
        secondary = [s for s in self.series if s.secondary]

        self._x_scale, x_pos, x_labels = build_axis(
            [s.x for s in self.series], dims.graph_width, pixels_per_tick=PIXELS_PER_X_TICK
        )
        stride = x_label_stride(x_labels, x_pos, metrics, self.layout.marker_text_size)
        fill_x_markers(markers, x_pos, x_labels, stride)

        self._y_scale = None
        if primary:
            self._y_scale, y_pos, y_labels = build_axis(
                [s.y for s in primary], dims.graph_height, pixels_per_tick=PIXELS_PER_Y_TICK
            )
            fill_y_markers(markers, y_pos, y_labels)

        self._y2_scale = None
        if secondary:
            self._y2_scale, y2_pos, y2_labels = build_axis(
                [s.y for s in secondary], dims.graph_height, pixels_per_tick=PIXELS_PER_Y_TICK
            )
            fill_y_markers(markers, y2_pos, y2_labels, secondary=True)

    def draw_data(self, markers: PlotMarkers, ctx: RenderContext) -> None:
        if self._x_scale is None:
            raise LayoutSequenceError("line graph scales have not been computed")
        for s in self.series:
            y_scale = self._y2_scale if s.secondary else self._y_scale
            if y_scale is None:
                raise LayoutSequenceError("line graph scales have not been computed")
            px = self._x_scale.to_graph(s.x)
            py = y_scale.to_graph(s.y)
            finite = np.isfinite(px) & np.isfinite(py)
            for i in range(px.size - 1):
                if not (finite[i] and finite[i + 1]):
                    continue
                ctx.draw_line(
                    Point(float(px[i]), float(py[i])),
                    Point(float(px[i + 1]), float(py[i + 1])),
                    stroke_width=s.width,
                    color=s.color,
                    dashed=s.dashed,
                    space=CoordinateSpace.GRAPH,
                )
