from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from enum import Enum
import re
from typing import Any, Mapping, TypeVar


Color = tuple[int, int, int, int]

BLACK: Color = (0, 0, 0, 255)
WHITE: Color = (255, 255, 255, 255)
GRAY: Color = (128, 128, 128, 255)
LIGHT_GRAY: Color = (211, 211, 211, 255)
TRANSLUCENT_WHITE: Color = (255, 255, 255, 204)

_HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}([0-9a-fA-F]{2})?$")


class HatchPattern(Enum):
    NONE = "none"
    FORWARD_SLASH = "forward_slash"
    BACKWARD_SLASH = "backward_slash"
    HOLLOW = "hollow"
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"
    GRID = "grid"
    CROSS = "cross"


def parse_color(value: Any) -> Color:
    """Accept `#RRGGBB`, `#RRGGBBAA`, or an RGB/RGBA tuple of 0-255 ints."""
    if isinstance(value, str):
        if not _HEX_COLOR.match(value):
            raise ValueError(f"color `{value}` must be a hex color (#RRGGBB or #RRGGBBAA)")
        r = int(value[1:3], 16)
        g = int(value[3:5], 16)
        b = int(value[5:7], 16)
        a = int(value[7:9], 16) if len(value) == 9 else 255
        return (r, g, b, a)
    if isinstance(value, (tuple, list)) and len(value) in (3, 4):
        channels = [int(c) for c in value]
        if any(c < 0 or c > 255 for c in channels):
            raise ValueError("color channels must be in [0, 255]")
        if len(channels) == 3:
            channels.append(255)
        return (channels[0], channels[1], channels[2], channels[3])
    raise ValueError(f"unsupported color value: {value!r}")


@dataclass(frozen=True)
class PlotTitle:
    title: str = ""
    color: Color = BLACK
    size: float = 15.0


@dataclass(frozen=True)
class PlotLabel:
    x_label: str = ""
    y_label: str = ""
    color: Color = BLACK
    size: float = 10.0


@dataclass(frozen=True)
class PlotLegend:
    background_color: Color = TRANSLUCENT_WHITE
    border_color: Color = BLACK
    border_thickness: float = 2.0
    text_color: Color = BLACK
    text_size: float = 10.0


@dataclass(frozen=True)
class PlotBorder:
    color: Color = BLACK
    thickness: float = 2.0


@dataclass(frozen=True)
class Grid:
    color: Color = GRAY
    thickness: float = 0.5


StyleGroup = TypeVar("StyleGroup", PlotTitle, PlotLabel, PlotLegend, PlotBorder, Grid)


def validate_style_overrides(base: StyleGroup, overrides: Mapping[str, Any] | None = None) -> StyleGroup:
    """Merge `overrides` into `base` and validate every field of the result.

    Colors go through `parse_color`; sizes must be positive and thicknesses
    non-negative.
    """
    raw: dict[str, Any] = asdict(base)
    if overrides:
        for key, value in overrides.items():
            if key not in raw:
                raise ValueError(f"Unknown {type(base).__name__} field: {key}")
            raw[key] = value

    for f in fields(base):
        key = f.name
        value = raw[key]
        if key == "color" or key.endswith("_color"):
            raw[key] = parse_color(value)
        elif key == "size" or key.endswith("_size"):
            if isinstance(value, bool) or not isinstance(value, (int, float)) or float(value) <= 0:
                raise ValueError(f"Field `{key}` must be a positive number")
            raw[key] = float(value)
        elif key == "thickness" or key.endswith("_thickness"):
            if isinstance(value, bool) or not isinstance(value, (int, float)) or float(value) < 0:
                raise ValueError(f"Field `{key}` must be a non-negative number")
            raw[key] = float(value)
        elif not isinstance(value, str):
            raise ValueError(f"Field `{key}` must be a string")

    return type(base)(**raw)
