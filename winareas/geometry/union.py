"""Merge two touching or overlapping areas into at most three disjoint strips.

``horizontal_union`` slices the merged region into horizontal strips (top,
middle, bottom) and ``vertical_union`` into vertical strips (left, middle,
right). Both return ``None`` when the pair cannot be represented that way;
callers then keep the two areas as separate regions. A returned list is never
empty and exactly partitions the union of the inputs.
"""

from __future__ import annotations

import logging

from winareas.api.area import Area
from winareas.api.area_list import AreaList
from winareas.diagnostics.format import area_fields
from winareas.runtime.debug_config import enabled_union_trace

_LOG = logging.getLogger(__name__)
_MAX_STRIPS = 3
_UNION_PREFERENCES = ("horizontal", "vertical")


def horizontal_union(self: Area, other: Area) -> AreaList | None:
    """Merge two areas into top-to-bottom strips spanning the merged columns."""
    # [other] | [self] with at least one empty column between
    if other.x2 < self.x - 1:
        return _rejected("horizontal", "column_gap", self, other)
    # [self] | [other]
    if other.x > self.x2 + 1:
        return _rejected("horizontal", "column_gap", self, other)

    # No rows in common: only same-column stacks touching edge to edge merge.
    if other.y2 < self.y or other.y > self.y2:
        if self.x == other.x and self.width == other.width:
            # [other]
            # [self]
            if other.y2 + 1 == self.y:
                merged = Area(self.x, other.y, self.width, self.height + other.height)
                return _merged("horizontal", self, other, AreaList(1, (merged,)))
            # [self]
            # [other]
            if self.y2 + 1 == other.y:
                merged = Area(self.x, self.y, self.width, self.height + other.height)
                return _merged("horizontal", self, other, AreaList(1, (merged,)))
        return _rejected("horizontal", "no_common_row", self, other)

    min_x = min(self.x, other.x)
    max_x = max(self.x2, other.x2)
    merged_width = max_x - min_x + 1

    if self.y < other.y:
        low, hi = self, other
    else:
        low, hi = other, self

    strips = AreaList(_MAX_STRIPS)
    if hi.y != low.y:
        strips.add(Area(low.x, low.y, low.width, hi.y - low.y))

    strips.add(
        Area(
            min_x,
            hi.y,
            merged_width,
            min(low.y2, hi.y2) - max(low.y, hi.y) + 1,
        )
    )

    if low.y2 != hi.y2:
        if hi.y2 < low.y2:
            strips.add(Area(low.x, hi.y2 + 1, low.width, low.y2 - hi.y2))
        else:
            strips.add(Area(hi.x, low.y2 + 1, hi.width, hi.y2 - low.y2))

    return _merged("horizontal", self, other, strips)


def vertical_union(self: Area, other: Area) -> AreaList | None:
    """Merge two areas into left-to-right strips spanning the merged rows."""
    # [other] above [self] with at least one empty row between
    if other.y2 < self.y - 1:
        return _rejected("vertical", "row_gap", self, other)
    # [self] above [other]
    if other.y > self.y2 + 1:
        return _rejected("vertical", "row_gap", self, other)

    # No columns in common: only same-row pairs touching side to side merge.
    if other.x2 < self.x or other.x > self.x2:
        if self.y == other.y and self.height == other.height:
            # [other][self]
            if other.x2 + 1 == self.x:
                merged = Area(other.x, self.y, self.width + other.width, self.height)
                return _merged("vertical", self, other, AreaList(1, (merged,)))
            # [self][other]
            if self.x2 + 1 == other.x:
                merged = Area(self.x, self.y, self.width + other.width, self.height)
                return _merged("vertical", self, other, AreaList(1, (merged,)))
        return _rejected("vertical", "no_common_column", self, other)

    min_y = min(self.y, other.y)
    max_y = max(self.y2, other.y2)
    merged_height = max_y - min_y + 1

    if self.x < other.x:
        left, right = self, other
    else:
        left, right = other, self

    strips = AreaList(_MAX_STRIPS)
    if right.x != left.x:
        strips.add(Area(left.x, left.y, right.x - left.x, left.height))

    strips.add(
        Area(
            right.x,
            min_y,
            min(left.x2, right.x2) - max(left.x, right.x) + 1,
            merged_height,
        )
    )

    if left.x2 != right.x2:
        if right.x2 < left.x2:
            strips.add(Area(right.x2 + 1, left.y, left.x2 - right.x2, left.height))
        else:
            strips.add(Area(left.x2 + 1, right.y, right.x2 - left.x2, right.height))

    return _merged("vertical", self, other, strips)


def union(self: Area, other: Area, *, prefer: str = "horizontal") -> AreaList | None:
    """Try the preferred slicing first, then the other one."""
    normalized = prefer.strip().lower()
    if normalized not in _UNION_PREFERENCES:
        raise ValueError(f"unknown union preference: {prefer!r}")
    if normalized == "horizontal":
        return horizontal_union(self, other) or vertical_union(self, other)
    return vertical_union(self, other) or horizontal_union(self, other)


def _rejected(variant: str, reason: str, self: Area, other: Area) -> None:
    if _LOG.isEnabledFor(logging.DEBUG) and enabled_union_trace():
        _LOG.debug(
            "area_union_rejected",
            extra={
                "variant": variant,
                "reason": reason,
                **area_fields(self, prefix="self_"),
                **area_fields(other, prefix="other_"),
            },
        )
    return None


def _merged(variant: str, self: Area, other: Area, strips: AreaList) -> AreaList:
    if _LOG.isEnabledFor(logging.DEBUG) and enabled_union_trace():
        _LOG.debug(
            "area_union_merged",
            extra={
                "variant": variant,
                "strips": len(strips),
                **area_fields(self, prefix="self_"),
                **area_fields(other, prefix="other_"),
            },
        )
    return strips
