from __future__ import annotations

from dataclasses import dataclass, replace

from plotframe.errors import PlotDataError
from plotframe.geometry import Point


GRAPH_FRACTION = 0.8


@dataclass(frozen=True)
class PlotDimensions:
    """Canvas size plus the slice of it one chart is allotted.

    The graph interior is derived from the sub-region on every read, so it can
    never go stale relative to the canvas during a render.
    """

    frame_width: float
    frame_height: float
    sub_width: float | None = None
    sub_height: float | None = None

    def __post_init__(self) -> None:
        if self.frame_width <= 0 or self.frame_height <= 0:
            raise ValueError("frame_width/frame_height must be > 0")
        if self.sub_width is None:
            object.__setattr__(self, "sub_width", float(self.frame_width))
        if self.sub_height is None:
            object.__setattr__(self, "sub_height", float(self.frame_height))
        if self.sub_width <= 0 or self.sub_height <= 0:
            raise ValueError("sub_width/sub_height must be > 0")

    @property
    def graph_width(self) -> float:
        return self.sub_width * GRAPH_FRACTION

    @property
    def graph_height(self) -> float:
        return self.sub_height * GRAPH_FRACTION

    def with_sub_size(self, width: float, height: float) -> "PlotDimensions":
        return replace(self, sub_width=float(width), sub_height=float(height))


def split_frame(width: float, height: float, rows: int, cols: int) -> list[tuple[Point, PlotDimensions]]:
    """Split a canvas into equal cells, row-major starting from the top row.

    Offsets are Cartesian (y up), so the first row gets the largest y offset.
    """
    if rows <= 0 or cols <= 0:
        raise PlotDataError("subplot grid must have at least one row and one column")
    base = PlotDimensions(frame_width=width, frame_height=height)
    cell_w = float(width) / float(cols)
    cell_h = float(height) / float(rows)
    cell_dims = base.with_sub_size(cell_w, cell_h)
    cells: list[tuple[Point, PlotDimensions]] = []
    for r in range(rows):
        y = float(height) - (r + 1) * cell_h
        for c in range(cols):
            cells.append((Point(c * cell_w, y), cell_dims))
    return cells
