from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Union

from .errors import ResizeError

@dataclass(frozen=True)
class Dimensions:
    """Explicit output size. The source is stretched to exactly width x height."""
    width: int
    height: int

    def __post_init__(self):
        for name, value in (("width", self.width), ("height", self.height)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise ResizeError(f"Dimension {name} must be an integer, got {value!r}")
            if value <= 0:
                raise ResizeError(f"Dimension {name} must be positive, got {value}")

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"

@dataclass(frozen=True)
class AspectRatio:
    """Target width:height ratio. The source keeps its pixels; only the canvas grows."""
    width: float
    height: float

    def __post_init__(self):
        for name, value in (("width", self.width), ("height", self.height)):
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ResizeError(f"Aspect ratio {name} must be a number, got {value!r}")
            if not math.isfinite(value) or value <= 0:
                raise ResizeError(f"Aspect ratio {name} must be positive and finite, got {value}")

    def __str__(self) -> str:
        return f"{self.width:g}:{self.height:g}"

Sizing = Union[Dimensions, AspectRatio]

def _parse_side(part: str, name: str) -> int:
    # ASCII digits only; int() would also take "1_000", " 5" and "+5"
    if not (part.isascii() and part.isdigit()):
        raise ValueError(f"Output image dimension {name} is not a valid integer: {part!r}")
    return int(part)

def parse_dimensions(text: str) -> Dimensions:
    """Parse `<width>x<height>`, e.g. `1920x1080`."""
    w, sep, h = text.partition("x")
    if not sep:
        raise ValueError("Output image dimension parameter does not follow expected format `<width>x<height>`.")
    return Dimensions(_parse_side(w, "width"), _parse_side(h, "height"))

def parse_aspect_ratio(text: str) -> AspectRatio:
    """Parse `<width>:<height>`, e.g. `16:9` or `4.3:2`."""
    w, sep, h = text.strip().partition(":")
    if not sep:
        raise ValueError("Aspect ratio parameter does not follow expected format `<width>:<height>`.")
    try:
        width = float(w)
    except ValueError:
        raise ValueError(f"Aspect ratio width is not a valid number: {w!r}") from None
    try:
        height = float(h)
    except ValueError:
        raise ValueError(f"Aspect ratio height is not a valid number: {h!r}") from None
    return AspectRatio(width, height)
