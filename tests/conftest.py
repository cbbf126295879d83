# tests/conftest.py
from typing import Callable, List

import pytest

from astar_map.core.grid import Grid, parse_grid
from astar_map.core.tile import Coord


@pytest.fixture
def make_grid() -> Callable[..., Grid]:
    """Return a factory building a :class:`Grid` from string rows."""

    def _make(*rows: str) -> Grid:
        return parse_grid(rows)

    return _make


@pytest.fixture
def parent_chain() -> Callable[[Grid, Coord], List[Coord]]:
    """Return a helper listing the parent links from a cell back to the start."""

    def _chain(grid: Grid, coord: Coord) -> List[Coord]:
        chain = [coord]
        while grid[chain[-1]].parent is not None:
            chain.append(grid[chain[-1]].parent)
            assert len(chain) <= grid.size, "parent links form a cycle"
        return chain

    return _chain
