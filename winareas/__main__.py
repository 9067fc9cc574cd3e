"""Debug entry point: merge two areas and print the resulting strips."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence

from winareas.api.area import Area
from winareas.diagnostics.format import format_area, format_areas, log_area
from winareas.geometry.intersection import intersection
from winareas.geometry.union import horizontal_union, union, vertical_union
from winareas.runtime.logging import setup_logging, shutdown_logging

_LOG = logging.getLogger("winareas.cli")


def parse_area(text: str) -> Area:
    """Parse ``x,y,width,height``."""
    parts = [part.strip() for part in text.split(",")]
    if len(parts) != 4:
        raise argparse.ArgumentTypeError(f"expected x,y,width,height, got {text!r}")
    try:
        x, y, width, height = (int(part) for part in parts)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"non-integer area component in {text!r}") from exc
    return Area(x, y, width, height)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="winareas", description="Merge two screen areas")
    parser.add_argument("first", type=parse_area, help="x,y,width,height")
    parser.add_argument("second", type=parse_area, help="x,y,width,height")
    parser.add_argument(
        "--slicing",
        choices=("horizontal", "vertical", "auto"),
        default="auto",
        help="Strip direction; auto tries horizontal, then vertical.",
    )
    parser.add_argument("--log-file", default=None, help="Also write JSON log records here.")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(file_path=args.log_file)
    try:
        first: Area = args.first
        second: Area = args.second
        log_area(first, message="cli_first_area")
        log_area(second, message="cli_second_area")

        if args.slicing == "horizontal":
            strips = horizontal_union(first, second)
        elif args.slicing == "vertical":
            strips = vertical_union(first, second)
        else:
            strips = union(first, second)

        overlap = intersection(first, second)
        print(f"overlap: {'<none>' if overlap is None else format_area(overlap)}")
        print(f"strips: {format_areas(strips)}")
        if strips is None:
            _LOG.info("cli_areas_not_mergeable")
            return 1
        return 0
    finally:
        shutdown_logging()


if __name__ == "__main__":
    raise SystemExit(main())
