from __future__ import annotations
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional
from framer.imaging.formats import is_supported_input
from framer.imaging.framing import frame_image
from framer.models.errors import FrameError, GeometryError
from framer.models.settings import RunSettings

def collect_inputs(path: Path) -> List[Path]:
    """A folder yields its supported images (not recursive, sorted); a file yields itself."""
    path = Path(path)
    if path.is_dir():
        return sorted(p for p in path.iterdir() if p.is_file() and is_supported_input(p))
    return [path]

def default_output_namer(p: Path, settings: RunSettings) -> Path:
    out = settings.output_dir / p.name
    if settings.output_format is not None:
        out = out.with_suffix(settings.output_format.extension)
    return out

@dataclass(frozen=True)
class FrameOutcome:
    source: Path
    output: Path
    error: Optional[FrameError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

class JobController:
    def __init__(self, logger: logging.Logger, output_namer=default_output_namer):
        self.logger = logger
        self.output_namer = output_namer

    def run(
        self,
        files: List[Path],
        settings: RunSettings,
        progress_cb: Optional[Callable[[int], None]] = None,
    ) -> List[FrameOutcome]:
        outcomes: List[FrameOutcome] = []
        total = len(files)
        for idx, f in enumerate(files, 1):
            out_path = self.output_namer(f, settings)
            try:
                frame_image(f, out_path, settings.sizing, quality=settings.quality)
            except GeometryError:
                raise
            except FrameError as e:
                self.logger.error("Failed to frame image %s: %s", f, e)
                outcomes.append(FrameOutcome(f, out_path, e))
                if settings.stop_on_first_error:
                    break
            else:
                outcomes.append(FrameOutcome(f, out_path))
            self._emit_progress(progress_cb, int(idx * 100 / total))
        return outcomes

    def _emit_progress(self, cb: Optional[Callable[[int], None]], value: int) -> None:
        if cb is None:
            return
        cb(max(0, min(100, int(value))))
