import logging
import sys
import time
import tracemalloc

import psutil

import constants
from common import CellKind, Position, cell_kind

logger = logging.getLogger(__name__)


def make_grid(rows):
    """Builds a grid from nested rows of cells, normalising every cell to CellKind.

    Raises ValueError for an empty grid, empty rows, ragged rows or unknown
    cell kinds. Strategies assume these checks have been done.
    """
    rows = [list(row) for row in rows]
    if not rows:
        raise ValueError("Grid must have at least one row")
    width = len(rows[0])
    if width == 0:
        raise ValueError("Grid rows must have at least one cell")
    grid = []
    for r, row in enumerate(rows):
        if len(row) != width:
            raise ValueError(f"Row {r} has {len(row)} cells, expected {width}")
        try:
            grid.append([cell_kind(cell) for cell in row])
        except (ValueError, AttributeError) as e:
            raise ValueError(f"Row {r}: {e}") from e
    return grid


def empty_grid(rows, cols, start=None, end=None, walls=()):
    """Grid of empty cells with optional start, end and wall positions."""
    grid = make_grid([[CellKind.EMPTY] * cols for _ in range(rows)])
    for r, c in walls:
        grid[r][c] = CellKind.WALL
    if start is not None:
        grid[start[0]][start[1]] = CellKind.START
    if end is not None:
        grid[end[0]][end[1]] = CellKind.END
    return grid


def clear_path(grid):
    """Copy of grid with path and visited cells reset to empty."""
    return [
        [CellKind.EMPTY if cell_kind(cell) in (CellKind.PATH, CellKind.VISITED) else cell_kind(cell) for cell in row]
        for row in grid
    ]


def clear_walls(grid):
    """Copy of grid with everything except start and end reset to empty."""
    keep = (CellKind.START, CellKind.END)
    return [[cell_kind(cell) if cell_kind(cell) in keep else CellKind.EMPTY for cell in row] for row in grid]


def replay_steps(result):
    """Yields ("visited", pos) for every visited cell, then ("path", pos) for the path."""
    for pos in result.visited:
        yield CellKind.VISITED, pos
    for pos in result.path:
        yield CellKind.PATH, pos


def apply_result(grid, result):
    """Copy of grid with the search result painted on; start and end are left alone."""
    painted = clear_path(grid)
    for kind, (r, c) in replay_steps(result):
        if painted[r][c] not in (CellKind.START, CellKind.END):
            painted[r][c] = kind
    return painted


def format_path(path):
    return " -> ".join(str(Position(*pos)) for pos in path)


def format_bytes(n_bytes: int) -> str:
    """Convert number of bytes to human-readable in KB/MB with 2 decimals.

    Args:
        n_bytes (int): Number of bytes.

    Returns:
        str: Human-readable string representation.
    """
    if n_bytes < 1024:
        return f"{n_bytes} B"
    kb = n_bytes / 1024.0
    if kb < 1024:
        return f"{kb:.2f} KB"
    mb = kb / 1024.0
    if mb < 1024:
        return f"{mb:.2f} MB"
    gb = mb / 1024.0
    return f"{gb:.2f} GB"


def execute_with_metrics(run_fn, grid):
    """Run a search function and collect runtime and memory metrics.

    Returns: (result, runtime_seconds, peak_tracemalloc_bytes, rss_after_bytes)
    - peak_tracemalloc_bytes: peak Python allocations measured by tracemalloc
    - rss_after_bytes: process RSS at end (approx OS memory usage)
    """
    proc = psutil.Process()
    tracemalloc.start()
    t0 = time.perf_counter()
    try:
        result = run_fn(grid)
        dt = time.perf_counter() - t0
        _cur, peak = tracemalloc.get_traced_memory()
    finally:
        tracemalloc.stop()
    rss_after = proc.memory_info().rss
    logger.debug("%s finished in %.3f ms, peak %s", getattr(run_fn, "__name__", run_fn), dt * 1000, format_bytes(peak))
    return result, dt, peak, rss_after


def setup_logging(level="WARNING"):
    """Attach a stdout handler to the root logger once and set its level."""
    root = logging.getLogger()
    if not any(getattr(h, "_grid_search", False) for h in root.handlers):
        h = logging.StreamHandler(sys.stdout)
        h.setFormatter(logging.Formatter(constants.LOG_FORMAT))
        h._grid_search = True
        root.addHandler(h)
    root.setLevel(level.upper() if isinstance(level, str) else level)
    return root
