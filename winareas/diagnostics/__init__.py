"""Debug output helpers."""

from winareas.diagnostics.format import (
    area_fields,
    format_area,
    format_areas,
    log_area,
    print_area,
)

__all__ = ["area_fields", "format_area", "format_areas", "log_area", "print_area"]
