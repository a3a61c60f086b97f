from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Optional
from .enums import OutputFormat
from .sizing import Sizing

@dataclass(frozen=True)
class RunSettings:
    sizing: Sizing
    output_dir: Path
    output_format: Optional[OutputFormat] = None  # None keeps the input's extension
    quality: int = 95
    stop_on_first_error: bool = False
