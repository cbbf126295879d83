# astar_map/main.py
"""Load a map, search it and print the result."""

from __future__ import annotations

from typing import TextIO
import logging
import sys

from .config import CONFIG, Config, LoggingConfig
from .core.grid import Grid, find_finish, find_start, load_grid
from .errors import AstarMapError
from .search.driver import SearchResult, search
from .search.reconstruct import reconstruct
from .utils.cli.terminal_view import TerminalView

logger = logging.getLogger(__name__)


def configure_logging(logging_config: LoggingConfig) -> None:
    """Set up root logging and apply per-module levels from ``logging_config``."""

    numeric_level = getattr(logging, logging_config.global_level.upper(), None)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO
    logging.basicConfig(
        level=numeric_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        force=True,
    )

    for module_name, level_str in logging_config.module_levels.items():
        module_numeric_level = getattr(logging, str(level_str).upper(), None)
        if isinstance(module_numeric_level, int):
            logging.getLogger(module_name).setLevel(module_numeric_level)
        else:
            logger.warning(
                "Invalid log level '%s' for module '%s' in config.", level_str, module_name
            )


def solve(grid: Grid) -> SearchResult:
    """Search ``grid`` from its start to its finish and mark the path.

    Raises :class:`~astar_map.errors.MissingMarker` before searching if either
    marker is absent.
    """

    start = find_start(grid)
    finish = find_finish(grid)
    result = search(grid, start, finish)
    if result.found:
        path = reconstruct(grid, finish)
        logger.info("Path has %d cells", len(path))
    return result


def run(config: Config, stream: TextIO | None = None) -> int:
    """Load the configured map, solve it and print the outcome.

    Returns ``0`` once a result (path or ``Not found!``) has been printed and
    ``1`` if the map could not be prepared for search.
    """

    view = TerminalView(colour=config.render.colour)
    try:
        grid = load_grid(config.map.path)
        result = solve(grid)
    except AstarMapError as exc:
        logger.error("%s", exc)
        return 1

    if result.found:
        view.render(grid, stream)
    else:
        view.render_not_found(stream)
    return 0


def main() -> int:
    configure_logging(CONFIG.logging)
    return run(CONFIG)


if __name__ == "__main__":
    sys.exit(main())
