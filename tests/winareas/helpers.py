from __future__ import annotations

from winareas.api.area import Area

_SAMPLE_XS = (-2, -1, 0, 1, 2)
_SAMPLE_YS = (-2, 0, 1, 3)
_SAMPLE_EXTENTS = (1, 2, 4)


def pixels(*areas: Area) -> set[tuple[int, int]]:
    """Return the set of pixels covered by the given areas."""
    out: set[tuple[int, int]] = set()
    for area in areas:
        for py in range(area.y, area.y + area.height):
            for px in range(area.x, area.x + area.width):
                out.add((px, py))
    return out


def sample_areas() -> list[Area]:
    """Non-degenerate areas around the origin, with negative corners and even and odd extents."""
    return [
        Area(x, y, width, height)
        for x in _SAMPLE_XS
        for y in _SAMPLE_YS
        for width in _SAMPLE_EXTENTS
        for height in _SAMPLE_EXTENTS
    ]
