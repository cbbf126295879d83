"""Tile component holding per-cell search state."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Tuple


Coord = Tuple[int, int]

OBSTACLE = "o"
START = "S"
FINISH = "F"
PATH = "*"


@dataclass
class Tile:
    """One grid cell.

    ``gval`` and ``hval`` stay ``None`` until the cell is first reached and
    ``parent`` stays ``None`` for the start cell and unreached cells.
    """

    symbol: str
    parent: Optional[Coord] = None
    closed: bool = False
    gval: Optional[float] = None
    hval: Optional[float] = None

    @property
    def fval(self) -> float:
        """Return ``gval + hval`` or ``math.inf`` while either is unknown."""

        if self.gval is None or self.hval is None:
            return math.inf
        return self.gval + self.hval

    @property
    def is_obstacle(self) -> bool:
        return self.symbol == OBSTACLE


__all__ = ["Coord", "Tile", "OBSTACLE", "START", "FINISH", "PATH"]
