# framer/imaging/framing.py
# Purpose: Centre an image on a solid white canvas of a requested size or ratio.
# - Dimensions: Lanczos resize to the exact size (aspect ratio not kept)
# - AspectRatio: no resize, canvas grows on one axis to meet the ratio
# - Output encoding is picked from the output file extension
# - Output is written to a temp file and moved into place, so a failed
#   encode never leaves a partial file behind

from __future__ import annotations

import logging
import os
import uuid
from pathlib import Path

from PIL import Image

from framer.imaging.formats import DECODE_FORMATS, output_format_for, save_options
from framer.imaging.layout import Layout, compute_layout
from framer.models.errors import DecodeError, EncodeError, GeometryError
from framer.models.sizing import Sizing

log = logging.getLogger("framer.imaging")

BACKGROUND_RGB = (255, 255, 255)
DEFAULT_QUALITY = 95


def _decode(path: Path) -> Image.Image:
    """Read the file fully into memory as RGB. Alpha, if any, is discarded."""
    try:
        with Image.open(path, formats=DECODE_FORMATS) as im:
            im.load()
            return im.convert("RGB")
    except Image.DecompressionBombError as e:
        raise DecodeError(f"Refusing to decode oversized image {path}: {e}", path=path) from e
    except (OSError, ValueError, SyntaxError, EOFError) as e:
        # Pillow plugins report broken streams as SyntaxError/EOFError during load
        raise DecodeError(f"Could not decode {path}: {e}", path=path) from e


def composite(source: Image.Image, layout: Layout) -> Image.Image:
    """Paste the (already resized) source onto a fresh white canvas."""
    if source.size != layout.source_size:
        raise GeometryError(
            f"Source is {source.size[0]}x{source.size[1]}, layout expects "
            f"{layout.source_size[0]}x{layout.source_size[1]}"
        )
    canvas = Image.new("RGB", layout.canvas_size, BACKGROUND_RGB)
    canvas.paste(source, layout.offset)
    return canvas


def _encode(canvas: Image.Image, output: Path, quality: int) -> None:
    fmt = output_format_for(output)
    tmp_name = None
    try:
        candidate = output.parent / f".{output.stem}.{uuid.uuid4().hex[:12]}{output.suffix}"
        # O_EXCL with mode 0666 lets the process umask decide the final permissions
        flags = os.O_WRONLY | os.O_CREAT | os.O_EXCL | getattr(os, "O_BINARY", 0)
        fd = os.open(candidate, flags, 0o666)
        tmp_name = candidate
        with os.fdopen(fd, "wb") as fh:
            canvas.save(fh, format=fmt.value, **save_options(fmt, quality))
        os.replace(tmp_name, output)
        tmp_name = None
    except (OSError, ValueError, KeyError) as e:
        raise EncodeError(f"Could not write {output}: {e}", path=output) from e
    finally:
        if tmp_name is not None:
            try:
                os.unlink(tmp_name)
            except OSError as e:
                log.warning("Could not remove temp file %s: %s", tmp_name, e)


def frame_image(
    input_path: str | Path,
    output_path: str | Path,
    sizing: Sizing,
    *,
    quality: int = DEFAULT_QUALITY,
) -> Path:
    """
    Frame one image and write it to `output_path`.

    Raises:
        EncodeError: unknown output extension (checked before decoding) or write failure.
        DecodeError: input missing, corrupt, truncated or not JPEG/PNG/WEBP.
        ResizeError: canvas or resize target too large to allocate.
        GeometryError: computed canvas does not fit the source (logic defect).
    """
    src = Path(input_path)
    out = Path(output_path)

    # Fail fast on the extension before paying for a decode.
    output_format_for(out)

    img = _decode(src)
    layout = compute_layout(img.size, sizing)
    log.debug(
        "%s: source %dx%d, sizing %s, canvas %dx%d, %s bars, offset %s",
        src.name, img.width, img.height, sizing,
        layout.canvas_size[0], layout.canvas_size[1],
        layout.orientation.value.lower(), layout.offset,
    )

    # Always resample in Dimensions mode, even when the size already matches.
    if layout.resize_to is not None:
        img = img.resize(layout.resize_to, resample=Image.Resampling.LANCZOS)

    framed = composite(img, layout)
    _encode(framed, out, quality)

    log.info("Framed %s -> %s (%dx%d)", src, out, framed.width, framed.height)
    return out
