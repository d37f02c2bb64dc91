import pytest

from common import CellKind
from file_reader import format_grid, parse_grid, read_grid


def test_parse_grid_symbols_comments_and_spaces():
    text = """
    # a comment
    S . X

    W * o
    . . E
    """
    grid = parse_grid(text)
    assert grid == [
        [CellKind.START, CellKind.EMPTY, CellKind.WALL],
        [CellKind.WALL, CellKind.PATH, CellKind.VISITED],
        [CellKind.EMPTY, CellKind.EMPTY, CellKind.END],
    ]


def test_parse_grid_unknown_symbol():
    with pytest.raises(ValueError, match="line 2, column 3"):
        parse_grid("S..\n..?\n..E")


def test_parse_grid_ragged():
    with pytest.raises(ValueError, match="Row 1"):
        parse_grid("S..\n.E")


def test_parse_grid_empty():
    with pytest.raises(ValueError):
        parse_grid("# nothing here\n\n")


def test_format_grid():
    assert format_grid(parse_grid("SWX\n.*o\n..E")) == "SXX\n.*o\n..E"


def test_read_grid(tmp_path):
    path = tmp_path / "map.txt"
    path.write_text("S.\n.E\n", encoding="utf-8")
    assert read_grid(path) == [[CellKind.START, CellKind.EMPTY], [CellKind.EMPTY, CellKind.END]]


def test_read_grid_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_grid(tmp_path / "nope.txt")
