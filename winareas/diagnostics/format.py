"""Debug formatting for areas and union results."""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable
from typing import TextIO

from winareas.api.area import Area
from winareas.api.logging import LoggerPort

_LOG = logging.getLogger(__name__)


def format_area(area: Area) -> str:
    return f"[x={area.x} y={area.y} w={area.width} h={area.height}]"


def format_areas(areas: Iterable[Area] | None) -> str:
    """Format a union result; ``None`` renders as ``<none>``."""
    if areas is None:
        return "<none>"
    return " ".join(format_area(area) for area in areas)


def print_area(area: Area, stream: TextIO | None = None) -> None:
    """Write the bracketed form to stderr, without a trailing newline."""
    out = sys.stderr if stream is None else stream
    out.write(format_area(area))


def area_fields(area: Area, *, prefix: str = "") -> dict[str, int]:
    """Return the raw fields keyed for use as logging extras."""
    return {
        f"{prefix}x": area.x,
        f"{prefix}y": area.y,
        f"{prefix}width": area.width,
        f"{prefix}height": area.height,
    }


def log_area(
    area: Area,
    *,
    message: str = "area",
    logger: LoggerPort | None = None,
) -> None:
    """Emit one DEBUG record carrying the area fields as extras."""
    target = _LOG if logger is None else logger
    target.debug(message, extra=area_fields(area))
