"""A* search loop over a :class:`~astar_map.core.grid.Grid`."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional
import logging

from .expansion import expand
from .frontier import Frontier
from ..core.grid import Grid
from ..core.tile import Coord

logger = logging.getLogger(__name__)


class SearchState(Enum):
    RUNNING = "running"
    FOUND = "found"
    EXHAUSTED = "exhausted"


@dataclass
class SearchStats:
    """Counters collected while the search runs."""

    expanded: int = 0
    pushed: int = 0
    stale_pops: int = 0


@dataclass
class SearchResult:
    """Outcome of :func:`search`."""

    state: SearchState
    finish: Optional[Coord] = None
    cost: Optional[float] = None
    stats: SearchStats = field(default_factory=SearchStats)

    @property
    def found(self) -> bool:
        return self.state is SearchState.FOUND


class _CountingFrontier(Frontier):
    def __init__(self, stats: SearchStats) -> None:
        super().__init__()
        self._stats = stats

    def insert(self, priority: float, coord: Coord) -> None:
        self._stats.pushed += 1
        super().insert(priority, coord)


def search(grid: Grid, start: Coord, finish: Coord) -> SearchResult:
    """Run A* from ``start`` towards ``finish``, mutating ``grid`` in place.

    The start tile is seeded with ``g = h = 0``. Each popped cell is closed and
    expanded; entries for cells that were already closed are skipped. The
    search ends ``FOUND`` as soon as an expansion relaxes ``finish`` and
    ``EXHAUSTED`` once the frontier runs dry.
    """

    stats = SearchStats()
    start_tile = grid[start]
    start_tile.gval = 0.0
    start_tile.hval = 0.0

    if start == finish:
        logger.info("Start %s is the finish; trivial path", start)
        return SearchResult(SearchState.FOUND, finish, 0.0, stats)

    frontier = _CountingFrontier(stats)
    frontier.insert(0.0, start)
    state = SearchState.RUNNING
    result: Optional[Coord] = None

    logger.info("Searching from %s to %s", start, finish)
    while state is SearchState.RUNNING:
        if frontier.is_empty():
            state = SearchState.EXHAUSTED
            break

        priority, coord = frontier.pop_min()
        tile = grid[coord]
        if tile.closed:
            stats.stale_pops += 1
            continue
        tile.closed = True
        stats.expanded += 1
        logger.debug("Expanding %s (f=%.3f)", coord, priority)

        result = expand(grid, frontier, coord, finish)
        if result is not None:
            state = SearchState.FOUND

    if state is SearchState.FOUND:
        cost = grid[finish].gval
        logger.info(
            "Found path to %s with cost %.2f after expanding %d cells",
            finish,
            cost,
            stats.expanded,
        )
        return SearchResult(state, result, cost, stats)

    logger.info("No path from %s to %s after expanding %d cells", start, finish, stats.expanded)
    return SearchResult(state, None, None, stats)


__all__ = ["SearchState", "SearchStats", "SearchResult", "search"]
