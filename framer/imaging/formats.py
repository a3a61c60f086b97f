from __future__ import annotations
from pathlib import Path
from typing import Dict, FrozenSet, Tuple

from framer.models.enums import OutputFormat
from framer.models.errors import EncodeError

EXTENSION_TO_FORMAT: Dict[str, OutputFormat] = {
    ".jpg": OutputFormat.JPEG,
    ".jpeg": OutputFormat.JPEG,
    ".png": OutputFormat.PNG,
    ".webp": OutputFormat.WEBP,
}

ACCEPTED_EXTENSIONS: FrozenSet[str] = frozenset(EXTENSION_TO_FORMAT)

# Pillow plugin names allowed when decoding
DECODE_FORMATS: Tuple[str, ...] = ("JPEG", "PNG", "WEBP")

def is_supported_input(path: str | Path) -> bool:
    return Path(path).suffix.lower() in ACCEPTED_EXTENSIONS

def output_format_for(path: str | Path) -> OutputFormat:
    p = Path(path)
    try:
        return EXTENSION_TO_FORMAT[p.suffix.lower()]
    except KeyError:
        raise EncodeError(
            f"Unsupported output extension {p.suffix or '(none)'!r}; "
            f"use one of {', '.join(sorted(ACCEPTED_EXTENSIONS))}",
            path=p,
        ) from None

def save_options(fmt: OutputFormat, quality: int) -> dict:
    if fmt is OutputFormat.PNG:
        return {}
    return {"quality": quality}
