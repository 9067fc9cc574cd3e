"""Intersection, union decomposition and coverage operations on areas."""

from winareas.geometry.coverage import (
    bounding_area,
    coverage_counts,
    coverage_mask,
    is_exact_tiling,
)
from winareas.geometry.intersection import intersect, intersection, intersects
from winareas.geometry.union import horizontal_union, union, vertical_union

__all__ = [
    "bounding_area",
    "coverage_counts",
    "coverage_mask",
    "horizontal_union",
    "intersect",
    "intersection",
    "intersects",
    "is_exact_tiling",
    "union",
    "vertical_union",
]
