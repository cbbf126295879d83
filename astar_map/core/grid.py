"""Rectangular tile grid and the lookups the search runs against."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator, List
import logging

from .tile import Coord, Tile, START, FINISH
from ..errors import MapLoadError, MissingMarker

logger = logging.getLogger(__name__)


class Grid:
    """Dense row-major holder for :class:`Tile` objects."""

    def __init__(self, tiles: List[List[Tile]]):
        self.tiles: List[List[Tile]] = tiles

    @property
    def rows(self) -> int:
        return len(self.tiles)

    @property
    def cols(self) -> int:
        return len(self.tiles[0]) if self.tiles else 0

    @property
    def size(self) -> int:
        return self.rows * self.cols

    def __getitem__(self, coord: Coord) -> Tile:
        row, col = coord
        return self.tiles[row][col]

    def __iter__(self) -> Iterator[tuple[Coord, Tile]]:
        """Yield ``((row, col), tile)`` pairs in row-major order."""

        for r, line in enumerate(self.tiles):
            for c, tile in enumerate(line):
                yield (r, c), tile

    def in_bounds(self, coord: Coord) -> bool:
        row, col = coord
        return 0 <= row < self.rows and 0 <= col < self.cols

    def symbols(self) -> List[str]:
        """Return each row as a string of tile symbols."""

        return ["".join(tile.symbol for tile in line) for line in self.tiles]


# ----------------------------------------------------------------------
# Loading
# ----------------------------------------------------------------------


def parse_grid(lines: Iterable[str]) -> Grid:
    """Build a :class:`Grid` from ``lines``, one row per string.

    Trailing ``\\n``/``\\r\\n`` terminators are stripped. Raises
    :class:`MapLoadError` as soon as a row differs in length from the one
    before it.
    """

    tiles: List[List[Tile]] = []
    for line in lines:
        row = line.rstrip("\r\n")
        if tiles and len(row) != len(tiles[-1]):
            raise MapLoadError(
                f"Invalid map: row {len(tiles)} has {len(row)} cells, "
                f"expected {len(tiles[-1])}"
            )
        tiles.append([Tile(symbol) for symbol in row])
    return Grid(tiles)


def load_grid(path: str | Path) -> Grid:
    """Read the map file at ``path`` and return its :class:`Grid`.

    Rows are split on ``\\n`` only; any other character, including control
    characters, is a cell.
    """

    p = Path(path)
    try:
        with p.open(encoding="utf-8", newline="") as fh:
            text = fh.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise MapLoadError(f"Unable to read map {p}: {exc}") from exc
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    grid = parse_grid(lines)
    logger.info("Loaded %dx%d map from %s", grid.rows, grid.cols, p)
    return grid


# ----------------------------------------------------------------------
# Lookups
# ----------------------------------------------------------------------


def _find_symbol(grid: Grid, symbol: str, name: str) -> Coord:
    for coord, tile in grid:
        if tile.symbol == symbol:
            return coord
    raise MissingMarker(symbol, name)


def find_start(grid: Grid) -> Coord:
    """Return the first ``'S'`` cell in row-major order."""

    return _find_symbol(grid, START, "start")


def find_finish(grid: Grid) -> Coord:
    """Return the first ``'F'`` cell in row-major order."""

    return _find_symbol(grid, FINISH, "finish")


def is_valid_tile(grid: Grid, coord: Coord) -> bool:
    """Return ``True`` if ``coord`` is in bounds, passable and not closed."""

    if not grid.in_bounds(coord):
        return False
    tile = grid[coord]
    return not tile.is_obstacle and not tile.closed


__all__ = [
    "Grid",
    "parse_grid",
    "load_grid",
    "find_start",
    "find_finish",
    "is_valid_tile",
]
