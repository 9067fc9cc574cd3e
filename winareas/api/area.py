"""Area value type and its derived predicates."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from winareas.api.errors import InvalidAreaError

if TYPE_CHECKING:
    from winareas.api.area_list import AreaList


@dataclass(frozen=True, slots=True)
class Area:
    """Axis-aligned rectangle on an inclusive integer pixel grid.

    ``x``/``y`` is the top-left pixel (y grows downward) and ``width``/``height``
    are extents in pixels. Nothing is validated at construction time; negative
    extents are only reported through :attr:`is_valid`.
    """

    x: int
    y: int
    width: int
    height: int

    INVALID_FIELDS: ClassVar[tuple[int, int, int, int]] = (-1, -1, -1, -1)

    @classmethod
    def invalid(cls) -> Area:
        """Return the ``(-1, -1, -1, -1)`` "no area" sentinel."""
        return cls(*cls.INVALID_FIELDS)

    @classmethod
    def from_edges(cls, x1: int, y1: int, x2: int, y2: int) -> Area:
        """Build an area from inclusive top-left and bottom-right pixels."""
        return cls(x1, y1, x2 - x1 + 1, y2 - y1 + 1)

    @property
    def is_valid(self) -> bool:
        return self.width >= 0 and self.height >= 0

    @property
    def x2(self) -> int:
        """Rightmost column still inside the area."""
        return self.x + self.width - 1

    @property
    def y2(self) -> int:
        """Bottom row still inside the area."""
        return self.y + self.height - 1

    @property
    def area(self) -> int:
        return self.width * self.height

    def contains_point(self, px: int, py: int) -> bool:
        """Return whether a pixel is inside the area, edges included."""
        return self.x <= px <= self.x2 and self.y <= py <= self.y2

    def as_tuple(self) -> tuple[int, int, int, int]:
        return (self.x, self.y, self.width, self.height)

    def intersects(self, other: Area) -> bool:
        from winareas.geometry.intersection import intersects

        return intersects(self, other)

    def intersect(self, other: Area) -> Area:
        from winareas.geometry.intersection import intersect

        return intersect(self, other)

    def horizontal_union(self, other: Area) -> AreaList | None:
        from winareas.geometry.union import horizontal_union

        return horizontal_union(self, other)

    def vertical_union(self, other: Area) -> AreaList | None:
        from winareas.geometry.union import vertical_union

        return vertical_union(self, other)


INVALID_AREA = Area.invalid()


def new_area(x: int, y: int, width: int, height: int) -> Area:
    """Construct an area from raw components."""
    return Area(x, y, width, height)


def invalid_area() -> Area:
    return Area.invalid()


def is_valid(area: Area) -> bool:
    return area.is_valid


def right(area: Area) -> int:
    return area.x2


def bottom(area: Area) -> int:
    return area.y2


def area_of(area: Area) -> int:
    return area.area


def contains_point(area: Area, px: int, py: int) -> bool:
    return area.contains_point(px, py)


def require_valid(area: Area, operation: str = "operation") -> Area:
    """Return ``area`` unchanged, or raise when its extents are negative."""
    if not area.is_valid:
        raise InvalidAreaError(area, operation)
    return area
