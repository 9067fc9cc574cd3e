"""Pixel coverage masks for checking that strips tile a region exactly."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

import numpy as np

from winareas.api.area import Area, require_valid


def bounding_area(areas: Iterable[Area]) -> Area | None:
    """Return the smallest area covering every non-empty input, or ``None``."""
    covered = [area for area in areas if require_valid(area, "bounding_area").area > 0]
    if not covered:
        return None
    return Area.from_edges(
        min(area.x for area in covered),
        min(area.y for area in covered),
        max(area.x2 for area in covered),
        max(area.y2 for area in covered),
    )


def coverage_counts(areas: Iterable[Area], bounds: Area) -> np.ndarray:
    """Count how many areas cover each pixel of ``bounds`` (row-major, y first)."""
    require_valid(bounds, "coverage_counts")
    counts = np.zeros((bounds.height, bounds.width), dtype=np.int32)
    for area in areas:
        require_valid(area, "coverage_counts")
        x1 = max(area.x, bounds.x) - bounds.x
        y1 = max(area.y, bounds.y) - bounds.y
        x2 = min(area.x2, bounds.x2) - bounds.x + 1
        y2 = min(area.y2, bounds.y2) - bounds.y + 1
        if x2 <= x1 or y2 <= y1:
            continue
        counts[y1:y2, x1:x2] += 1
    return counts


def coverage_mask(areas: Iterable[Area], bounds: Area) -> np.ndarray:
    """Return a boolean mask of the pixels of ``bounds`` covered by any area."""
    return coverage_counts(areas, bounds) > 0


def is_exact_tiling(pieces: Sequence[Area], sources: Sequence[Area]) -> bool:
    """Return whether ``pieces`` cover the union of ``sources`` once per pixel."""
    bounds = bounding_area([*pieces, *sources])
    if bounds is None:
        return True
    piece_counts = coverage_counts(pieces, bounds)
    if bool((piece_counts > 1).any()):
        return False
    return bool(np.array_equal(piece_counts == 1, coverage_mask(sources, bounds)))
