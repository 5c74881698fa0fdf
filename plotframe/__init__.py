from plotframe.dimensions import PlotDimensions, split_frame
from plotframe.errors import LayoutSequenceError, PlotDataError
from plotframe.geometry import Point, Rect, Size
from plotframe.graph import HasGraphLayout, draw_graph, draw_subplots
from plotframe.layout import GraphLayout, LayoutResults
from plotframe.legend import LegendShape, ScatterShape, ShapeIcon, SquareIcon
from plotframe.markers import PlotMarkers
from plotframe.recording import DrawCall, RecordingSurface
from plotframe.style import (
    Grid,
    HatchPattern,
    PlotBorder,
    PlotLabel,
    PlotLegend,
    PlotTitle,
    parse_color,
    validate_style_overrides,
)
from plotframe.surface import CoordinateSpace, DrawingSurface, RenderContext, TextMetrics

__all__ = [
    "CoordinateSpace",
    "DrawCall",
    "DrawingSurface",
    "Grid",
    "GraphLayout",
    "HasGraphLayout",
    "HatchPattern",
    "LayoutResults",
    "LayoutSequenceError",
    "LegendShape",
    "PlotBorder",
    "PlotDataError",
    "PlotDimensions",
    "PlotLabel",
    "PlotLegend",
    "PlotMarkers",
    "PlotTitle",
    "Point",
    "RecordingSurface",
    "Rect",
    "RenderContext",
    "ScatterShape",
    "ShapeIcon",
    "Size",
    "SquareIcon",
    "TextMetrics",
    "draw_graph",
    "draw_subplots",
    "parse_color",
    "split_frame",
    "validate_style_overrides",
]
