from __future__ import annotations


class PlotDataError(ValueError):
    """Raised when chart-supplied data cannot be laid out."""


class LayoutSequenceError(AssertionError):
    """Raised when a layout or draw stage runs before the geometry it reads exists."""
