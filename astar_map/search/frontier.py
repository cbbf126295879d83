"""Open list of cells waiting to be expanded."""

from __future__ import annotations

from heapq import heappop, heappush
from typing import List, Tuple

from ..core.tile import Coord


Entry = Tuple[float, Coord]


class Frontier:
    """Binary-heap priority queue of ``(priority, coord)`` entries.

    Entries are ordered by priority, then row, then column. The same
    coordinate may be queued several times; entries for cells that have since
    been closed are left in place and skipped by the caller when popped.
    """

    def __init__(self) -> None:
        self._heap: List[Entry] = []

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def insert(self, priority: float, coord: Coord) -> None:
        heappush(self._heap, (priority, coord))

    def pop_min(self) -> Entry:
        """Remove and return the smallest entry. Raises ``IndexError`` if empty."""

        if not self._heap:
            raise IndexError("pop from empty frontier")
        return heappop(self._heap)

    def is_empty(self) -> bool:
        return not self._heap


__all__ = ["Entry", "Frontier"]
