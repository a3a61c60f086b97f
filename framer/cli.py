# framer/cli.py
# Command line entry point: frame a single image or every JPEG/PNG/WEBP in a folder.
# Exit codes follow sysexits.h so shell scripts can tell bad arguments from I/O trouble.

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from framer.controllers.job_controller import JobController, collect_inputs
from framer.imaging.formats import ACCEPTED_EXTENSIONS, is_supported_input
from framer.models.enums import OutputFormat
from framer.models.errors import ResizeError
from framer.models.settings import RunSettings
from framer.models.sizing import parse_aspect_ratio, parse_dimensions
from framer.utils.logging_utils import build_logger, log_section

__version__ = "0.1.0"

EX_OK = 0
EX_DATAERR = 65
EX_CANTCREAT = 73
EX_IOERR = 74
EX_CONFIG = 78

OUTPUT_TYPES = {
    "jpeg": OutputFormat.JPEG,
    "png": OutputFormat.PNG,
    "webp": OutputFormat.WEBP,
}


class _Parser(argparse.ArgumentParser):
    def error(self, message: str):
        self.print_usage(sys.stderr)
        self.exit(EX_CONFIG, f"{self.prog}: error: {message}\n")


def _sizing_arg(parse):
    def _convert(text: str):
        try:
            return parse(text)
        except (ValueError, ResizeError) as e:
            raise argparse.ArgumentTypeError(str(e))
    _convert.__name__ = parse.__name__
    return _convert


def _quality_arg(text: str) -> int:
    try:
        q = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"quality must be an integer, got {text!r}")
    if not 1 <= q <= 100:
        raise argparse.ArgumentTypeError(f"quality must be between 1 and 100, got {q}")
    return q


def build_parser() -> argparse.ArgumentParser:
    ap = _Parser(
        prog="framer",
        description="Centre images on a white canvas of a given size or aspect ratio.",
    )
    ap.add_argument("-i", "--input", required=True, type=Path, help="Input folder or image")
    ap.add_argument("-o", "--output", required=True, type=Path, help="Output directory (must exist)")
    sg = ap.add_mutually_exclusive_group(required=True)
    sg.add_argument(
        "--aspect-ratio", "--ratio", dest="sizing", type=_sizing_arg(parse_aspect_ratio),
        help="Aspect ratio as <width>:<height>, e.g. 16:9, 1:1, 4.3:2",
    )
    sg.add_argument(
        "--dimensions", "--dim", dest="sizing", type=_sizing_arg(parse_dimensions),
        help="Output size as <width>x<height>, e.g. 1920x1080, 1080x1080",
    )
    ap.add_argument(
        "output_filetype", nargs="?", choices=sorted(OUTPUT_TYPES),
        help="Output filetype; defaults to the input's own type",
    )
    ap.add_argument("--quality", type=_quality_arg, default=95, help="JPEG/WEBP quality (1-100)")
    ap.add_argument("--log-file", type=Path, help="Also write logs to this file (rotated)")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    ap.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    log = build_logger(
        "framer",
        log_file=args.log_file,
        level=logging.DEBUG if args.verbose else logging.INFO,
    )

    if not args.output.is_dir():
        log.error("The output directory does not exist: %s", args.output)
        return EX_IOERR

    settings = RunSettings(
        sizing=args.sizing,
        output_dir=args.output,
        output_format=OUTPUT_TYPES.get(args.output_filetype),
        quality=args.quality,
    )
    controller = JobController(log)

    if args.input.is_dir():
        files = collect_inputs(args.input)
        with log_section(f"FRAMING {len(files)} IMAGE(S) FROM {args.input} ({settings.sizing})", log):
            outcomes = controller.run(files, settings)
        failed = [o for o in outcomes if not o.ok]
        log.info("Done: %d framed, %d failed", len(outcomes) - len(failed), len(failed))
        return EX_OK

    if not args.input.is_file():
        log.error("Unable to find input file: %s", args.input)
        return EX_CONFIG
    if not args.input.suffix:
        log.error("Unable to detect input file's filetype: %s", args.input)
        return EX_DATAERR
    if not is_supported_input(args.input):
        log.error(
            "Input file's filetype is unsupported. Use only %s files.",
            ", ".join(sorted(e.lstrip(".") for e in ACCEPTED_EXTENSIONS)),
        )
        return EX_CONFIG

    outcome = controller.run([args.input], settings)[0]
    if not outcome.ok:
        return EX_CANTCREAT
    return EX_OK


if __name__ == "__main__":
    sys.exit(main())
