from plotframe.charts.line import LineGraph, LineSeries
from plotframe.charts.scatter import ScatterGraph, ScatterSeries

__all__ = [
    "LineGraph",
    "LineSeries",
    "ScatterGraph",
    "ScatterSeries",
]
