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
from plotframe.geometry import Point, Rect, Size
from plotframe.layout import GraphLayout
from plotframe.legend import LegendEntry, ScatterShape, ShapeIcon
from plotframe.markers import PlotMarkers
from plotframe.scales import LinearScale
from plotframe.style import Color
from plotframe.surface import CoordinateSpace, RenderContext, TextMetrics


@dataclass(frozen=True)
class ScatterSeries:
    label: str
    x: np.ndarray
    y: np.ndarray
    color: Color
    shape: ScatterShape = ScatterShape.CIRCLE
    size: float = 8.0


class ScatterGraph:
    def __init__(self, width: float = 1000, height: float = 660) -> None:
        self.layout = GraphLayout(plot_dimensions=PlotDimensions(frame_width=width, frame_height=height))
        self.series: list[ScatterSeries] = []
        self._x_scale: LinearScale | None = None
        self._y_scale: LinearScale | None = None

    def add_series(
        self,
        y: Any,
        *,
        x: Any = None,
        label: str = "",
        color: Color = (214, 39, 40, 255),
        shape: ScatterShape = ScatterShape.CIRCLE,
        size: float = 8.0,
    ) -> "ScatterGraph":
        if size <= 0:
            raise ValueError("marker size must be > 0")
        xs, ys = as_xy(x, y)
        self.series.append(ScatterSeries(label=label, x=xs, y=ys, color=color, shape=shape, size=float(size)))
        return self

    @property
    def legend_labels(self) -> Sequence[LegendEntry]:
        return [(s.label, ShapeIcon(s.shape, s.color)) for s in self.series if s.label]

    def calculate_scale_and_marker_locations(self, markers: PlotMarkers, metrics: TextMetrics) -> None:
        if not self.series:
            raise PlotDataError("scatter graph has no series")
        dims = self.layout.plot_dimensions
        self._x_scale, x_pos, x_labels = build_axis(
            [s.x for s in self.series], dims.graph_width, pixels_per_tick=PIXELS_PER_X_TICK
        )
        stride = x_label_stride(x_labels, x_pos, metrics, self.layout.marker_text_size)
        fill_x_markers(markers, x_pos, x_labels, stride)
        self._y_scale, y_pos, y_labels = build_axis(
            [s.y for s in self.series], dims.graph_height, pixels_per_tick=PIXELS_PER_Y_TICK
        )
        fill_y_markers(markers, y_pos, y_labels)

    def draw_data(self, markers: PlotMarkers, ctx: RenderContext) -> None:
        if self._x_scale is None or self._y_scale is None:
            raise LayoutSequenceError("scatter graph scales have not been computed")
        for s in self.series:
            px = self._x_scale.to_graph(s.x)
            py = self._y_scale.to_graph(s.y)
            half = s.size * 0.5
            for x, y in zip(px.tolist(), py.tolist()):
                if not (np.isfinite(x) and np.isfinite(y)):
                    continue
                box = Rect(origin=Point(x - half, y - half), size=Size(s.size, s.size))
                s.shape.draw(box, s.color, ctx, space=CoordinateSpace.GRAPH)
