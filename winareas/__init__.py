"""Integer rectangle algebra for screen, monitor and window regions."""

from winareas.api import (
    INVALID_AREA,
    Area,
    AreaList,
    InvalidAreaError,
    area_of,
    bottom,
    contains_point,
    invalid_area,
    is_valid,
    new_area,
    require_valid,
    right,
)
from winareas.geometry import (
    horizontal_union,
    intersect,
    intersection,
    intersects,
    union,
    vertical_union,
)

__all__ = [
    "INVALID_AREA",
    "Area",
    "AreaList",
    "InvalidAreaError",
    "area_of",
    "bottom",
    "contains_point",
    "horizontal_union",
    "intersect",
    "intersection",
    "intersects",
    "invalid_area",
    "is_valid",
    "new_area",
    "require_valid",
    "right",
    "union",
    "vertical_union",
]
