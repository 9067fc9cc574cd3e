"""Overlap test and overlap-region computation."""

from __future__ import annotations

from winareas.api.area import INVALID_AREA, Area


def intersects(a: Area, b: Area) -> bool:
    """Return whether two areas share at least one pixel.

    Edges are inclusive, so areas that share a single boundary column or row
    intersect.
    """
    # [b][a]
    if b.x2 < a.x:
        return False
    # [a][b]
    if b.x > a.x2:
        return False
    # b above a
    if b.y2 < a.y:
        return False
    # b below a
    if b.y > a.y2:
        return False
    return True


def intersection(a: Area, b: Area) -> Area | None:
    """Return the overlap region, or ``None`` when the areas are disjoint."""
    if not intersects(a, b):
        return None
    x1 = max(a.x, b.x)
    x2 = min(a.x2, b.x2)
    y1 = max(a.y, b.y)
    y2 = min(a.y2, b.y2)
    return Area.from_edges(x1, y1, x2, y2)


def intersect(a: Area, b: Area) -> Area:
    """Return the overlap region, or the invalid sentinel when disjoint."""
    overlap = intersection(a, b)
    return INVALID_AREA if overlap is None else overlap
