"""Ordered, appendable area sequence returned by union decomposition."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from winareas.api.area import Area


class AreaList:
    """Insertion-ordered list of areas.

    ``capacity`` is only a sizing hint; the list grows past it on demand.
    """

    __slots__ = ("_capacity", "_items")

    def __init__(self, capacity: int = 0, areas: Iterable[Area] = ()) -> None:
        if capacity < 0:
            raise ValueError("capacity must be >= 0")
        self._capacity = int(capacity)
        self._items: list[Area] = list(areas)

    @property
    def capacity(self) -> int:
        return max(self._capacity, len(self._items))

    def add(self, area: Area) -> None:
        self._items.append(area)

    def to_tuple(self) -> tuple[Area, ...]:
        return tuple(self._items)

    @property
    def total_area(self) -> int:
        return sum(item.area for item in self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Area]:
        return iter(self._items)

    def __getitem__(self, index: int) -> Area:
        return self._items[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AreaList):
            return NotImplemented
        return self._items == other._items

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"AreaList({self._items!r})"
