from __future__ import annotations
from pathlib import Path
from typing import Optional

class FrameError(Exception):
    """Base class for every failure raised while framing a single image."""

    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.path = path

class DecodeError(FrameError):
    """Input is missing, unreadable, corrupt or not JPEG/PNG/WEBP."""

class ResizeError(FrameError, ValueError):
    """Target dimensions or ratio are not usable."""

class GeometryError(FrameError, AssertionError):
    """
    Canvas does not match the source on any axis, or is smaller than it.
    Always a logic defect, never a property of the input file.
    """

class EncodeError(FrameError):
    """Output extension is unknown, or writing the encoded image failed."""
