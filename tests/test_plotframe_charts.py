from __future__ import annotations

import unittest

import numpy as np

from plotframe.charts import LineGraph, ScatterGraph
from plotframe.errors import LayoutSequenceError, PlotDataError
from plotframe.graph import draw_graph
from plotframe.legend import ScatterShape, ShapeIcon, SquareIcon
from plotframe.markers import PlotMarkers
from plotframe.recording import RecordingSurface
from plotframe.scales import (
    AxisLimits,
    LinearScale,
    compute_axis_limits,
    format_ticks_for_axis,
    generate_nice_ticks,
)
from plotframe.surface import CoordinateSpace, RenderContext


class _FixedMetrics:
    def measure_width(self, text: str, size: float) -> float:
        return 0.5 * size * len(text)


LINE_COLOR = (31, 119, 180, 255)
SECONDARY_COLOR = (44, 160, 44, 255)


class ScaleTests(unittest.TestCase):
    def test_tick_formatting_uses_consistent_decimals_from_step(self) -> None:
        ticks = np.asarray([1.5, 2.0, 2.5, 3.0], dtype=np.float64)
        self.assertEqual(format_ticks_for_axis(ticks), ["1.5", "2", "2.5", "3"])

    def test_tick_formatting_preserves_integer_trailing_zeros(self) -> None:
        ticks = np.asarray([20.0, 30.0, 40.0], dtype=np.float64)
        self.assertEqual(format_ticks_for_axis(ticks), ["20", "30", "40"])

    def test_nice_ticks_snap_near_zero(self) -> None:
        ticks = generate_nice_ticks(-1.0, 1.0, 5)
        self.assertIn(0.0, ticks.tolist())
        self.assertTrue(np.allclose(np.diff(ticks), 0.5))

    def test_axis_limits_pad_and_widen_flat_data(self) -> None:
        limits = compute_axis_limits(np.asarray([0.0, 10.0]))
        self.assertAlmostEqual(limits.vmin, -0.5)
        self.assertAlmostEqual(limits.vmax, 10.5)
        flat = compute_axis_limits(np.asarray([3.0, 3.0]))
        self.assertLess(flat.vmin, 3.0)
        self.assertGreater(flat.vmax, 3.0)

    def test_axis_limits_require_finite_values(self) -> None:
        with self.assertRaises(PlotDataError):
            compute_axis_limits(np.asarray([np.nan, np.inf]))

    def test_linear_scale_maps_limits_to_length(self) -> None:
        scale = LinearScale(limits=AxisLimits(vmin=-1.0, vmax=3.0), length=200.0)
        self.assertTrue(np.allclose(scale.to_graph(np.asarray([-1.0, 1.0, 3.0])), [0.0, 100.0, 200.0]))


class LineGraphTests(unittest.TestCase):
    def test_markers_fall_inside_graph_and_pair_with_text(self) -> None:
        graph = LineGraph(width=1000, height=660)
        graph.add_series([1.0, 4.0, 2.0, 8.0, 5.0], label="primary", color=LINE_COLOR)
        markers = PlotMarkers()
        graph.calculate_scale_and_marker_locations(markers, _FixedMetrics())

        markers.validate()
        self.assertGreaterEqual(len(markers.x_markers), 2)
        self.assertGreaterEqual(len(markers.y_markers), 2)
        self.assertEqual(markers.y2_markers, [])
        dims = graph.layout.plot_dimensions
        self.assertTrue(all(-1e-9 <= x <= dims.graph_width + 1e-9 for x in markers.x_markers))
        self.assertTrue(all(-1e-9 <= y <= dims.graph_height + 1e-9 for y in markers.y_markers))

    def test_secondary_series_fill_secondary_axis(self) -> None:
        graph = LineGraph()
        graph.add_series([1.0, 2.0, 3.0], label="left", color=LINE_COLOR)
        graph.add_series([100.0, 300.0, 200.0], label="right", color=SECONDARY_COLOR, secondary=True)
        markers = PlotMarkers()
        graph.calculate_scale_and_marker_locations(markers, _FixedMetrics())
        self.assertGreaterEqual(len(markers.y2_markers), 2)
        self.assertIn("200", markers.y2_markers_text)

    def test_draw_graph_renders_one_segment_per_point_pair(self) -> None:
        graph = LineGraph()
        graph.add_series([1.0, 3.0, 2.0, 4.0], x=[0.0, 1.0, 2.0, 3.0], label="primary", color=LINE_COLOR)
        graph.add_series([5.0, 6.0], label="", color=SECONDARY_COLOR, dashed=True, secondary=True)
        surface = RecordingSurface()
        results = draw_graph(graph, surface, _FixedMetrics())

        primary = [c for c in surface.calls_of("line") if c.args["color"] == LINE_COLOR]
        secondary = [c for c in surface.calls_of("line") if c.args["color"] == SECONDARY_COLOR]
        self.assertEqual(len(primary), 3)
        self.assertEqual(len(secondary), 1)
        self.assertTrue(secondary[0].args["dashed"])
        self.assertTrue(all(c.space is CoordinateSpace.GRAPH for c in primary))
        # Unlabelled series stay out of the legend.
        self.assertEqual([label for label, _ in graph.legend_labels], ["primary"])
        self.assertIsInstance(graph.legend_labels[0][1], SquareIcon)
        self.assertIsNotNone(results.legend_rect)

    def test_nan_points_break_the_line(self) -> None:
        graph = LineGraph()
        graph.add_series([1.0, np.nan, 2.0, 3.0], color=LINE_COLOR)
        surface = RecordingSurface()
        draw_graph(graph, surface, _FixedMetrics())
        self.assertEqual(len([c for c in surface.calls_of("line") if c.args["color"] == LINE_COLOR]), 1)

    def test_crowded_x_labels_are_thinned(self) -> None:
        graph = LineGraph(width=1000, height=300)
        graph.add_series(np.arange(20.0))
        loose = PlotMarkers()
        graph.calculate_scale_and_marker_locations(loose, _FixedMetrics())

        class _Wide:
            def measure_width(self, text: str, size: float) -> float:
                return 500.0

        tight = PlotMarkers()
        graph.calculate_scale_and_marker_locations(tight, _Wide())
        self.assertEqual(loose.x_markers_text, ["0", "10"])
        self.assertEqual(tight.x_markers_text, ["0"])

    def test_invalid_series_rejected(self) -> None:
        graph = LineGraph()
        with self.assertRaises(PlotDataError):
            graph.add_series([1.0, 2.0], x=[1.0])
        with self.assertRaises(PlotDataError):
            graph.add_series([])
        with self.assertRaises(PlotDataError):
            graph.calculate_scale_and_marker_locations(PlotMarkers(), _FixedMetrics())

    def test_draw_before_markers_is_fatal(self) -> None:
        graph = LineGraph()
        graph.add_series([1.0, 2.0])
        with self.assertRaises(LayoutSequenceError):
            graph.draw_data(PlotMarkers(), RenderContext(surface=RecordingSurface()))


class ScatterGraphTests(unittest.TestCase):
    def test_points_drawn_as_shapes_in_graph_space(self) -> None:
        graph = ScatterGraph()
        graph.add_series([1.0, 2.0, 3.0], label="pts", color=(214, 39, 40, 255), shape=ScatterShape.CIRCLE, size=6.0)
        surface = RecordingSurface()
        draw_graph(graph, surface, _FixedMetrics())

        circles = surface.calls_of("solid_circle")
        data = [c for c in circles if c.space is CoordinateSpace.GRAPH]
        legend = [c for c in circles if c.space is CoordinateSpace.CANVAS]
        self.assertEqual(len(data), 3)
        self.assertEqual(len(legend), 1)
        self.assertTrue(all(c.args["radius"] == 3.0 for c in data))

    def test_legend_uses_shape_icons(self) -> None:
        graph = ScatterGraph()
        graph.add_series([1.0], label="stars", shape=ScatterShape.STAR)
        [(label, icon)] = graph.legend_labels
        self.assertEqual(label, "stars")
        self.assertIsInstance(icon, ShapeIcon)
        self.assertIs(icon.shape, ScatterShape.STAR)

    def test_polygon_shapes(self) -> None:
        graph = ScatterGraph()
        graph.add_series([1.0, 2.0], shape=ScatterShape.HEXAGON)
        graph.add_series([1.0], shape=ScatterShape.TRIANGLE)
        surface = RecordingSurface()
        draw_graph(graph, surface, _FixedMetrics())
        sides = sorted(len(c.args["points"]) for c in surface.calls_of("solid_polygon"))
        self.assertEqual(sides, [3, 6, 6])

    def test_invalid_marker_size_rejected(self) -> None:
        with self.assertRaises(ValueError):
            ScatterGraph().add_series([1.0], size=0)


if __name__ == "__main__":
    unittest.main()
