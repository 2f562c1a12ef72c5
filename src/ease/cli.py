"""Command line interface for the easing curves."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional

import pygame

from .easing import EASING_FUNCTIONS
from .options import OPTIONS_FILE, load_options, save_options
from .preview import save_preview
from .sequence import ease_map

logger = logging.getLogger("ease")

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(log_file: Optional[Path]) -> None:
    """Send the package's log records to ``log_file`` when given."""
    if log_file is None:
        return
    for old in list(logger.handlers):
        if isinstance(old, logging.FileHandler):
            logger.removeHandler(old)
            old.close()
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ease", description="Standard animation easing curves")
    parser.add_argument("--options", type=Path, default=OPTIONS_FILE,
                        help="JSON file with preview options")
    parser.add_argument("--log-file", type=Path, default=None,
                        help="Write log messages to this file")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="List the available curves")

    map_parser = sub.add_parser("map", help="Ease the integers from START to STOP")
    map_parser.add_argument("easing", choices=list(EASING_FUNCTIONS))
    map_parser.add_argument("--start", type=int, default=1)
    map_parser.add_argument("--stop", type=int, default=10)
    map_parser.add_argument("--round", type=int, default=3, dest="digits",
                            help="Decimal places to round to; negative disables rounding")

    preview = sub.add_parser("preview", help="Render the curves to an image")
    preview.add_argument("easings", nargs="*", metavar="EASING", help="Curves to draw (default: all)")
    preview.add_argument("--output", "-o", type=Path, required=True)
    preview.add_argument("--columns", type=int, default=None)
    preview.add_argument("--samples", type=int, default=None)
    preview.add_argument("--save-options", action="store_true",
                         help="Remember --columns and --samples in the options file")
    return parser


def _run_map(parser: argparse.ArgumentParser, args: argparse.Namespace) -> int:
    if args.stop <= args.start:
        parser.error("--stop must be greater than --start")
    values = ease_map(range(args.start, args.stop + 1), args.easing)
    if args.digits >= 0:
        values = [round(v, args.digits) for v in values]
    print(values)
    return 0


def _run_preview(parser: argparse.ArgumentParser, args: argparse.Namespace) -> int:
    unknown = [name for name in args.easings if name not in EASING_FUNCTIONS]
    if unknown:
        parser.error(f"unknown easing: {', '.join(unknown)}")
    options = load_options(args.options)
    if args.columns is not None:
        options["columns"] = args.columns
    if args.samples is not None:
        options["samples"] = args.samples
    if options["samples"] < 1:
        parser.error("samples must be at least 1")
    if args.save_options:
        save_options(options, args.options)
    try:
        path = save_preview(args.output, args.easings or None, options)
    except pygame.error as exc:
        logger.error("Failed to save preview: %s", exc)
        return 1
    print(path)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = create_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_file)
    if args.command == "list":
        for name in EASING_FUNCTIONS:
            print(name)
        return 0
    if args.command == "map":
        return _run_map(parser, args)
    return _run_preview(parser, args)


if __name__ == "__main__":
    raise SystemExit(main())
