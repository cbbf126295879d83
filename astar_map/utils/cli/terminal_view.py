"""ASCII terminal renderer for search grids."""

from __future__ import annotations

import sys
from typing import Any, List, TextIO

from ...core.tile import OBSTACLE, START, FINISH, PATH


# Basic ANSI colour codes used by :class:`TerminalView`
_COLOURS = {
    "red": "\x1b[31m",
    "green": "\x1b[32m",
    "yellow": "\x1b[33m",
    "blue": "\x1b[34m",
    "reset": "\x1b[0m",
}

_SYMBOL_COLOURS = {
    OBSTACLE: "red",
    START: "green",
    FINISH: "blue",
    PATH: "yellow",
}

NOT_FOUND_MESSAGE = "Not found!"


class TerminalView:
    """Line-by-line grid printer with optional ANSI colours."""

    def __init__(self, colour: bool = False) -> None:
        self.colour = colour

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def render_lines(self, grid: Any) -> List[str]:
        """Return the rows of ``grid`` as strings, coloured if enabled."""

        if not self.colour:
            return grid.symbols()

        lines: list[str] = []
        for line in grid.tiles:
            row: list[str] = []
            for tile in line:
                colour = _SYMBOL_COLOURS.get(tile.symbol)
                if colour is None:
                    row.append(tile.symbol)
                else:
                    row.append(f"{_COLOURS[colour]}{tile.symbol}{_COLOURS['reset']}")
            lines.append("".join(row))
        return lines

    def render(self, grid: Any, stream: TextIO | None = None) -> None:
        """Write ``grid`` to ``stream`` (``stdout`` by default)."""

        out = stream if stream is not None else sys.stdout
        for line in self.render_lines(grid):
            out.write(line + "\n")
        out.flush()

    def render_not_found(self, stream: TextIO | None = None) -> None:
        out = stream if stream is not None else sys.stdout
        out.write(NOT_FOUND_MESSAGE + "\n")
        out.flush()


__all__ = ["TerminalView", "NOT_FOUND_MESSAGE"]
