import pytest

from astar_map.core.grid import (
    find_finish,
    find_start,
    is_valid_tile,
    load_grid,
    parse_grid,
)
from astar_map.errors import AstarMapError, MapLoadError, MissingMarker


def test_parse_grid_dimensions(make_grid):
    grid = make_grid("S..", ".o.", "..F")
    assert (grid.rows, grid.cols) == (3, 3)
    assert grid[(1, 1)].symbol == "o"
    assert grid.symbols() == ["S..", ".o.", "..F"]


def test_parse_grid_strips_line_endings():
    grid = parse_grid(["S.\r\n", ".F\n"])
    assert grid.symbols() == ["S.", ".F"]


def test_unequal_rows_raise_map_load_error():
    with pytest.raises(MapLoadError):
        parse_grid(["...", ".."])


def test_map_load_error_is_package_error():
    assert issubclass(MapLoadError, AstarMapError)
    assert issubclass(MissingMarker, AstarMapError)


def test_load_grid_reads_file(tmp_path):
    path = tmp_path / "map.txt"
    path.write_text("S.o\n..F\n")
    grid = load_grid(path)
    assert grid.symbols() == ["S.o", "..F"]


def test_load_grid_missing_file(tmp_path):
    with pytest.raises(MapLoadError):
        load_grid(tmp_path / "nope.txt")


def test_find_markers(make_grid):
    grid = make_grid("..S", "F..")
    assert find_start(grid) == (0, 2)
    assert find_finish(grid) == (1, 0)


def test_find_first_marker_in_row_major_order(make_grid):
    grid = make_grid(".S.S", "S..F")
    assert find_start(grid) == (0, 1)


def test_missing_start(make_grid):
    grid = make_grid("...", "..F")
    with pytest.raises(MissingMarker) as excinfo:
        find_start(grid)
    assert excinfo.value.marker == "S"


def test_missing_finish(make_grid):
    grid = make_grid("S..", "...")
    with pytest.raises(MissingMarker) as excinfo:
        find_finish(grid)
    assert excinfo.value.marker == "F"


def test_is_valid_tile_bounds(make_grid):
    grid = make_grid("S..", "..F")
    assert not is_valid_tile(grid, (-1, 0))
    assert not is_valid_tile(grid, (0, -1))
    assert not is_valid_tile(grid, (2, 0))
    assert not is_valid_tile(grid, (0, 3))


def test_rightmost_column_is_passable(make_grid):
    grid = make_grid("S..", "..F")
    assert is_valid_tile(grid, (0, 2))
    assert is_valid_tile(grid, (1, 2))


def test_is_valid_tile_rejects_obstacles_and_closed(make_grid):
    grid = make_grid("So.", "..F")
    assert not is_valid_tile(grid, (0, 1))
    grid[(1, 0)].closed = True
    assert not is_valid_tile(grid, (1, 0))


def test_load_grid_rejects_undecodable_bytes(tmp_path):
    path = tmp_path / "map.txt"
    path.write_bytes(b"S.\xff\n..F\n")
    with pytest.raises(MapLoadError):
        load_grid(path)


def test_load_grid_splits_rows_on_newline_only(tmp_path):
    path = tmp_path / "map.txt"
    path.write_bytes(b"S.\x0c.F\n")
    grid = load_grid(path)
    assert (grid.rows, grid.cols) == (1, 5)
    assert grid[(0, 2)].symbol == "\x0c"
    assert find_finish(grid) == (0, 4)


def test_load_grid_handles_crlf_and_missing_final_newline(tmp_path):
    path = tmp_path / "map.txt"
    path.write_bytes(b"S..\r\n..F")
    assert load_grid(path).symbols() == ["S..", "..F"]
