# framer/imaging/layout.py
# Purpose: Canvas geometry for framing. Everything here is pure arithmetic on
# (width, height) tuples; no pixels are touched.

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Tuple

from PIL import Image

from framer.models.enums import Orientation
from framer.models.errors import GeometryError, ResizeError
from framer.models.sizing import AspectRatio, Dimensions, Sizing

Size = Tuple[int, int]

# Pillow stores each side as a C int
MAX_SIDE = 2**31 - 1


@dataclass(frozen=True)
class Layout:
    canvas_size: Size
    source_size: Size
    orientation: Orientation
    offset: Tuple[int, int]
    resize_to: Optional[Size] = None


def _side(value: float) -> int:
    if not math.isfinite(value) or round(value) > MAX_SIDE:
        raise ResizeError(f"Canvas side {value} is too large to allocate")
    return int(round(value))


def check_canvas_size(size: Size) -> None:
    """Reject sizes Pillow would refuse to allocate, or treat as a decompression bomb."""
    w, h = size
    if w > MAX_SIDE or h > MAX_SIDE:
        raise ResizeError(f"Canvas {w}x{h} exceeds the {MAX_SIDE} pixel side limit")
    # Same threshold at which Image.open raises DecompressionBombError
    if Image.MAX_IMAGE_PIXELS is not None and w * h > 2 * Image.MAX_IMAGE_PIXELS:
        raise ResizeError(
            f"Canvas {w}x{h} has {w * h} pixels, above the {2 * Image.MAX_IMAGE_PIXELS} limit"
        )


def canvas_for_ratio(source_size: Size, ratio: AspectRatio) -> Size:
    """
    Smallest canvas with the requested ratio that still holds the source
    unscaled. The source's own width or height is kept; the other axis grows.
    """
    sw, sh = source_size
    w, h = float(ratio.width), float(ratio.height)
    # Direct comparison; an exact tie falls through to horizontal bars.
    if sw / w < sh / h:
        return _side(sh * (w / h)), sh
    return sw, _side(sw * (h / w))


def orientation_of(canvas_size: Size, source_size: Size) -> Orientation:
    cw, ch = canvas_size
    sw, sh = source_size
    if cw < sw or ch < sh:
        raise GeometryError(
            f"Canvas {cw}x{ch} is smaller than source {sw}x{sh}"
        )
    if cw == sw and ch == sh:
        return Orientation.EXACT
    if cw == sw:
        return Orientation.HORIZONTAL
    if ch == sh:
        return Orientation.VERTICAL
    raise GeometryError(
        f"Canvas {cw}x{ch} matches source {sw}x{sh} on neither axis"
    )


def centre_offset(canvas_size: Size, source_size: Size) -> Tuple[int, int]:
    """Top-left placement that centres the source; odd gaps leave the extra pixel at the far side."""
    orientation = orientation_of(canvas_size, source_size)
    return _offset(orientation, canvas_size, source_size)


def _offset(orientation: Orientation, canvas_size: Size, source_size: Size) -> Tuple[int, int]:
    if orientation is Orientation.HORIZONTAL:
        return 0, (canvas_size[1] - source_size[1]) // 2
    if orientation is Orientation.VERTICAL:
        return (canvas_size[0] - source_size[0]) // 2, 0
    return 0, 0


def compute_layout(source_size: Size, sizing: Sizing) -> Layout:
    if isinstance(sizing, Dimensions):
        resize_to: Optional[Size] = (sizing.width, sizing.height)
        placed = resize_to
        canvas = resize_to
    elif isinstance(sizing, AspectRatio):
        resize_to = None
        placed = source_size
        canvas = canvas_for_ratio(source_size, sizing)
    else:
        raise TypeError(f"Unsupported sizing: {sizing!r}")

    check_canvas_size(canvas)
    orientation = orientation_of(canvas, placed)
    return Layout(
        canvas_size=canvas,
        source_size=placed,
        orientation=orientation,
        offset=_offset(orientation, canvas, placed),
        resize_to=resize_to,
    )
