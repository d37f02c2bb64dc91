import pytest

import search
from conftest import ENCLOSED, GAP_3X3


@pytest.fixture
def map_file(tmp_path):
    def write(text, name="map.txt"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return str(path)
    return write


def test_cli_prints_path(map_file, capsys):
    path = map_file(GAP_3X3)
    assert search.cli([path, "bfs"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == f"{path} BFS"
    assert out[1] == "Path length:7"
    assert out[2] == "Number of cells visited:7"
    assert out[3] == "(0,0) -> (1,0) -> (2,0) -> (2,1) -> (2,2) -> (1,2) -> (0,2)"


def test_cli_no_path(map_file, capsys):
    assert search.cli([map_file(ENCLOSED), "as"]) == 0
    out = capsys.readouterr().out
    assert "No path found" in out
    assert "Number of cells visited:1" in out


def test_cli_show_draws_grid(map_file, capsys):
    assert search.cli([map_file(GAP_3X3), "dijkstra", "--show"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[-3:] == ["SXE", "*X*", "***"]


def test_cli_metrics_stdout(map_file, capsys):
    assert search.cli([map_file(GAP_3X3), "gbfs", "--metrics-stdout"]) == 0
    out = capsys.readouterr().out
    assert "Metrics: method=GBFS visited=6 path_len=7 runtime_ms=" in out


def test_cli_metrics_stderr(map_file, capsys):
    assert search.cli([map_file(ENCLOSED), "dfs", "-m"]) == 0
    captured = capsys.readouterr()
    assert "Metrics: method=DFS visited=1 path_len=N/A" in captured.err
    assert "Metrics" not in captured.out


def test_cli_unknown_method(map_file, capsys):
    assert search.cli([map_file(GAP_3X3), "beam"]) == 2
    assert "Unknown method: BEAM" in capsys.readouterr().err


def test_cli_missing_file(tmp_path, capsys):
    assert search.main(str(tmp_path / "missing.txt"), "bfs") == 1
    assert "File not found" in capsys.readouterr().err


def test_cli_bad_map(map_file, capsys):
    assert search.main(map_file("S?E"), "bfs") == 1
    assert "Invalid map" in capsys.readouterr().err
