from __future__ import annotations

from functools import lru_cache
import logging
from pathlib import Path

from PIL import ImageFont


LOGGER = logging.getLogger(__name__)

DEFAULT_FONT_FAMILY = "DejaVu Sans"
FONT_FALLBACK_PATTERNS = (
    "dejavusans",
    "dejavu sans",
    "helvetica",
    "arial",
    "liberationsans",
    "liberation sans",
)
FONT_DIRS = (
    Path.home() / "Library" / "Fonts",
    Path("/Library/Fonts"),
    Path("/System/Library/Fonts"),
    Path("/System/Library/Fonts/Supplemental"),
    Path("/usr/share/fonts"),
    Path("/usr/local/share/fonts"),
)


class FontTextMetrics:
    """Text widths measured from a real font via Pillow.

    Falls back to Pillow's bundled default font when no installed font matches
    the requested family.
    """

    def __init__(self, font_family: str = DEFAULT_FONT_FAMILY, font_path: str | Path | None = None) -> None:
        self.font_family = font_family
        self.font_path = Path(font_path) if font_path is not None else None

    def measure_width(self, text: str, size: float) -> float:
        if not text:
            return 0.0
        font = _load_font(self.font_family, str(self.font_path) if self.font_path else None, _pixel_size(size))
        left, _, right, _ = font.getbbox(text)
        return float(max(0, right - left))


def _pixel_size(size: float) -> int:
    return max(1, int(round(size)))


@lru_cache(maxsize=64)
def _load_font(
    font_family: str,
    font_path: str | None,
    size: int,
) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
    path = Path(font_path) if font_path else _resolve_font_path(font_family)
    if path is None:
        LOGGER.debug("no installed font matches %r; using Pillow default", font_family)
        return ImageFont.load_default(size=size)
    try:
        return ImageFont.truetype(str(path), size=size)
    except OSError:
        LOGGER.warning("failed to load font %s; using Pillow default", path)
        return ImageFont.load_default(size=size)


@lru_cache(maxsize=16)
def _resolve_font_path(font_family: str) -> Path | None:
    wanted = font_family.strip().lower() if font_family.strip() else DEFAULT_FONT_FAMILY.lower()
    patterns = (wanted,) + FONT_FALLBACK_PATTERNS

    candidates: list[Path] = []
    for base in FONT_DIRS:
        if not base.exists():
            continue
        for ext in ("*.ttf", "*.otf", "*.ttc"):
            candidates.extend(base.rglob(ext))

    for pattern in patterns:
        p = pattern.replace(" ", "")
        for path in candidates:
            stem = path.stem.lower().replace(" ", "")
            if p in stem:
                return path
    return None
