from __future__ import annotations

from dataclasses import dataclass, field

from plotframe.errors import PlotDataError


@dataclass
class PlotMarkers:
    """Tick positions and their display text for the three axes.

    Positions are in graph space: x markers run along the graph width, y and
    y2 markers along the graph height. Each position pairs with the text at
    the same index.
    """

    x_markers: list[float] = field(default_factory=list)
    x_markers_text: list[str] = field(default_factory=list)
    y_markers: list[float] = field(default_factory=list)
    y_markers_text: list[str] = field(default_factory=list)
    y2_markers: list[float] = field(default_factory=list)
    y2_markers_text: list[str] = field(default_factory=list)

    def add_x(self, position: float, text: str) -> "PlotMarkers":
        self.x_markers.append(float(position))
        self.x_markers_text.append(str(text))
        return self

    def add_y(self, position: float, text: str) -> "PlotMarkers":
        self.y_markers.append(float(position))
        self.y_markers_text.append(str(text))
        return self

    def add_y2(self, position: float, text: str) -> "PlotMarkers":
        self.y2_markers.append(float(position))
        self.y2_markers_text.append(str(text))
        return self

    def clear(self) -> None:
        for values in (
            self.x_markers,
            self.x_markers_text,
            self.y_markers,
            self.y_markers_text,
            self.y2_markers,
            self.y2_markers_text,
        ):
            values.clear()

    def validate(self) -> None:
        for axis, positions, texts in (
            ("x", self.x_markers, self.x_markers_text),
            ("y", self.y_markers, self.y_markers_text),
            ("y2", self.y2_markers, self.y2_markers_text),
        ):
            if len(positions) != len(texts):
                raise PlotDataError(
                    f"{axis} markers have {len(positions)} positions but {len(texts)} labels"
                )
