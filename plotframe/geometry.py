from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)


@dataclass(frozen=True)
class Size:
    width: float
    height: float


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle. Width/height may be negative until `normalized`."""

    origin: Point
    size: Size

    @classmethod
    def from_xywh(cls, x: float, y: float, width: float, height: float) -> "Rect":
        return cls(origin=Point(x, y), size=Size(width, height))

    @property
    def width(self) -> float:
        return self.size.width

    @property
    def height(self) -> float:
        return self.size.height

    @property
    def min_x(self) -> float:
        return min(self.origin.x, self.origin.x + self.size.width)

    @property
    def max_x(self) -> float:
        return max(self.origin.x, self.origin.x + self.size.width)

    @property
    def mid_x(self) -> float:
        return self.origin.x + self.size.width * 0.5

    @property
    def min_y(self) -> float:
        return min(self.origin.y, self.origin.y + self.size.height)

    @property
    def max_y(self) -> float:
        return max(self.origin.y, self.origin.y + self.size.height)

    @property
    def mid_y(self) -> float:
        return self.origin.y + self.size.height * 0.5

    @property
    def center(self) -> Point:
        return Point(self.mid_x, self.mid_y)

    @property
    def is_normalized(self) -> bool:
        return self.size.width >= 0 and self.size.height >= 0

    @property
    def normalized(self) -> "Rect":
        if self.is_normalized:
            return self
        return Rect(
            origin=Point(self.min_x, self.min_y),
            size=Size(abs(self.size.width), abs(self.size.height)),
        )

    def contains(self, point: Point) -> bool:
        return self.min_x <= point.x <= self.max_x and self.min_y <= point.y <= self.max_y
