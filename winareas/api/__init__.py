"""Public area value types and contracts."""

from winareas.api.area import (
    INVALID_AREA,
    Area,
    area_of,
    bottom,
    contains_point,
    invalid_area,
    is_valid,
    new_area,
    require_valid,
    right,
)
from winareas.api.area_list import AreaList
from winareas.api.errors import InvalidAreaError
from winareas.api.logging import AreasLoggingConfig, LoggerPort

__all__ = [
    "INVALID_AREA",
    "Area",
    "AreaList",
    "AreasLoggingConfig",
    "InvalidAreaError",
    "LoggerPort",
    "area_of",
    "bottom",
    "contains_point",
    "invalid_area",
    "is_valid",
    "new_area",
    "require_valid",
    "right",
]
