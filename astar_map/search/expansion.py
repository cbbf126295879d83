"""Single A* expansion step over the eight neighbours of a cell."""

from __future__ import annotations

from typing import Optional
import logging

from .frontier import Frontier
from .heuristics import DIRECTIONS, heuristic
from ..core.grid import Grid, is_valid_tile
from ..core.tile import Coord

logger = logging.getLogger(__name__)


def expand(
    grid: Grid, frontier: Frontier, origin: Coord, finish: Coord
) -> Optional[Coord]:
    """Relax the neighbours of ``origin`` and queue the improved ones.

    Neighbours are visited in :data:`DIRECTIONS` order. A neighbour is relaxed
    when it has not been reached before or when the new ``g + h`` beats its
    current ``fval``. Relaxing ``finish`` returns it straight away, leaving any
    remaining neighbours of ``origin`` untouched. Returns ``None`` otherwise.
    """

    origin_g = grid[origin].gval
    if origin_g is None:
        raise ValueError(f"cannot expand unreached cell {origin}")

    for cost, (dr, dc) in DIRECTIONS:
        neighbour = (origin[0] + dr, origin[1] + dc)
        if not is_valid_tile(grid, neighbour):
            continue
        tile = grid[neighbour]

        new_h = heuristic(neighbour, finish)
        new_g = origin_g + cost

        if tile.gval is None or tile.hval is None or new_h + new_g < tile.fval:
            tile.hval = new_h
            tile.gval = new_g
            tile.parent = origin
            if neighbour == finish:
                logger.debug("Reached finish %s from %s (g=%.2f)", finish, origin, new_g)
                return neighbour
            frontier.insert(tile.fval, neighbour)

    return None


__all__ = ["expand"]
