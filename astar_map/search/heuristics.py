"""Distance estimate and step costs for 8-directional grid movement."""

from __future__ import annotations

import math
from typing import Tuple

from ..core.tile import Coord


ORTHOGONAL_COST = 1.0
# Approximation of sqrt(2); kept as-is so path costs stay reproducible.
DIAGONAL_COST = 1.4

# (step cost, (d_row, d_col)) in the order neighbours are examined:
# NW, N, NE, W, E, SW, S, SE.
DIRECTIONS: Tuple[Tuple[float, Coord], ...] = (
    (DIAGONAL_COST, (-1, -1)),
    (ORTHOGONAL_COST, (-1, 0)),
    (DIAGONAL_COST, (-1, 1)),
    (ORTHOGONAL_COST, (0, -1)),
    (ORTHOGONAL_COST, (0, 1)),
    (DIAGONAL_COST, (1, -1)),
    (ORTHOGONAL_COST, (1, 0)),
    (DIAGONAL_COST, (1, 1)),
)


def heuristic(coord: Coord, finish: Coord) -> float:
    """Return the straight-line distance from ``coord`` to ``finish``."""

    dr = coord[0] - finish[0]
    dc = coord[1] - finish[1]
    return math.sqrt(dr * dr + dc * dc)


def step_cost(a: Coord, b: Coord) -> float:
    """Return the cost of moving between adjacent cells ``a`` and ``b``."""

    dr = abs(a[0] - b[0])
    dc = abs(a[1] - b[1])
    if max(dr, dc) != 1:
        raise ValueError(f"{a} and {b} are not adjacent")
    return DIAGONAL_COST if dr and dc else ORTHOGONAL_COST


__all__ = [
    "ORTHOGONAL_COST",
    "DIAGONAL_COST",
    "DIRECTIONS",
    "heuristic",
    "step_cost",
]
