"""Walk parent links back from the finish and mark the path."""

from __future__ import annotations

from typing import List

from .heuristics import step_cost
from ..core.grid import Grid
from ..core.tile import Coord, PATH


def reconstruct(grid: Grid, finish: Coord) -> List[Coord]:
    """Overwrite each tile on the path ending at ``finish`` with ``'*'``.

    Returns the path coordinates ordered from start to finish. The start and
    finish markers are overwritten as well.
    """

    path: List[Coord] = []
    current: Coord | None = finish
    while current is not None:
        if len(path) >= grid.size:
            raise RuntimeError(f"parent chain from {finish} does not terminate")
        tile = grid[current]
        tile.symbol = PATH
        path.append(current)
        current = tile.parent
    path.reverse()
    return path


def path_cost(path: List[Coord]) -> float:
    """Return the summed step cost of consecutive moves along ``path``."""

    return sum(step_cost(a, b) for a, b in zip(path, path[1:]))


__all__ = ["reconstruct", "path_cost"]
