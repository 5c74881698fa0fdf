from __future__ import annotations

import math
from typing import Any, Sequence

import numpy as np

from plotframe.errors import PlotDataError
from plotframe.markers import PlotMarkers
from plotframe.scales import (
    LinearScale,
    compute_axis_limits,
    format_ticks_for_axis,
    generate_nice_ticks,
    ticks_within_limits,
)
from plotframe.surface import TextMetrics


PIXELS_PER_X_TICK = 120.0
PIXELS_PER_Y_TICK = 80.0
MIN_LABEL_GAP = 4.0


def build_axis(
    values: Sequence[np.ndarray],
    length: float,
    *,
    pixels_per_tick: float,
) -> tuple[LinearScale, np.ndarray, list[str]]:
    """Fit a scale over all `values` and pick tick positions along `length`."""
    limits = compute_axis_limits(np.concatenate([np.asarray(v, dtype=np.float64) for v in values]))
    target = max(2, int(length // pixels_per_tick))
    ticks = ticks_within_limits(generate_nice_ticks(limits.vmin, limits.vmax, target), limits)
    scale = LinearScale(limits=limits, length=length)
    return scale, scale.to_graph(ticks), format_ticks_for_axis(ticks)


def x_label_stride(labels: Sequence[str], positions: np.ndarray, metrics: TextMetrics, text_size: float) -> int:
    """Smallest stride that keeps horizontal tick labels from overlapping."""
    if len(labels) < 2:
        return 1
    spacing = float(abs(positions[1] - positions[0]))
    if spacing <= 0:
        return 1
    widest = max(metrics.measure_width(label, text_size) for label in labels)
    return max(1, int(math.ceil((widest + MIN_LABEL_GAP) / spacing)))


def fill_x_markers(markers: PlotMarkers, positions: np.ndarray, labels: Sequence[str], stride: int) -> None:
    for i, (position, label) in enumerate(zip(positions.tolist(), labels)):
        if i % stride == 0:
            markers.add_x(position, label)


def fill_y_markers(markers: PlotMarkers, positions: np.ndarray, labels: Sequence[str], *, secondary: bool = False) -> None:
    add = markers.add_y2 if secondary else markers.add_y
    for position, label in zip(positions.tolist(), labels):
        add(position, label)


def as_xy(x: Any, y: Any) -> tuple[np.ndarray, np.ndarray]:
    ys = np.asarray(y, dtype=np.float64).reshape(-1)
    xs = np.arange(ys.size, dtype=np.float64) if x is None else np.asarray(x, dtype=np.float64).reshape(-1)
    if xs.size != ys.size:
        raise PlotDataError(f"x has {xs.size} values but y has {ys.size}")
    if ys.size == 0:
        raise PlotDataError("series is empty")
    return xs, ys
