from common import CellKind, Position, cell_kind

# up, down, left, right; this order fixes tie-breaking for every strategy
DIRECTIONS = ((-1, 0), (1, 0), (0, -1), (0, 1))


def manhattan(a, b):
    """Manhattan distance between positions a and b."""
    (r1, c1), (r2, c2) = a, b
    return abs(r1 - r2) + abs(c1 - c2)


def get_neighbors(grid, position):
    """In-bounds, non-wall 4-connected neighbours of position, in DIRECTIONS order."""
    row, col = position
    rows, cols = len(grid), len(grid[0])
    neighbors = []
    for d_row, d_col in DIRECTIONS:
        r, c = row + d_row, col + d_col
        if 0 <= r < rows and 0 <= c < cols and cell_kind(grid[r][c]) != CellKind.WALL:
            neighbors.append(Position(r, c))
    return neighbors


def find_start_and_end(grid):
    """Row-major scan for the start and end markers.

    Returns (start, end); either is None when missing. When a marker appears
    more than once the last one scanned wins.
    """
    start = end = None
    for r, row in enumerate(grid):
        for c, cell in enumerate(row):
            kind = cell_kind(cell)
            if kind == CellKind.START:
                start = Position(r, c)
            elif kind == CellKind.END:
                end = Position(r, c)
    return start, end


def reconstruct_path(came_from, start, end):
    """Walks the came_from map back from end to start; returns start..end.

    A chain that never reaches start means the parent map is corrupt, which is
    a bug in the caller and raises AssertionError.
    """
    path = [end]
    current = end
    while current != start:
        if current not in came_from or len(path) > len(came_from):
            raise AssertionError(f"broken parent chain at {current} while rebuilding path to {end}")
        current = came_from[current]
        path.append(current)
    path.reverse()
    return path
