"""Area contract violations raised by strict helpers."""

from __future__ import annotations


class InvalidAreaError(ValueError):
    """Raised when an operation needs non-negative extents and gets an invalid area."""

    def __init__(self, area: object, operation: str) -> None:
        super().__init__(f"{operation} requires a valid area, got {area!r}")
        self.area = area
        self.operation = operation
