import logging
import math

from common import SearchResult
from strategies.common import find_start_and_end, get_neighbors, manhattan, reconstruct_path

logger = logging.getLogger(__name__)


def run_astar(grid):
    """
    Performs A* search from the start marker to the end marker.
    Args:
        grid: rectangular list of rows of cells (see common.Grid)
    Returns:
        SearchResult with an optimal path when one exists

    Priority is f = g + h with h the Manhattan distance to the end. The open
    set keeps insertion order and is scanned linearly; the first entry with
    the lowest f wins. An open neighbour only gets a new parent when the
    tentative g is strictly better. The end cell is not added to `visited`.
    """
    start, end = find_start_and_end(grid)
    if start is None or end is None:
        logger.debug("astar: start=%s end=%s, nothing to search", start, end)
        return SearchResult.failure()

    # dict used as an insertion-ordered set
    open_set = {start: None}
    closed = set()
    g_score = {start: 0}
    f_score = {start: manhattan(start, end)}
    came_from = {}
    visited = []

    while open_set:
        current, lowest_f = None, math.inf
        for node in open_set:
            if f_score[node] < lowest_f:
                current, lowest_f = node, f_score[node]

        if current == end:
            path = reconstruct_path(came_from, start, end)
            logger.debug("astar: reached %s after %d cells, path length %d", end, len(visited), len(path))
            return SearchResult(path=path, visited=visited, success=True)

        del open_set[current]
        closed.add(current)
        visited.append(current)

        for neighbor in get_neighbors(grid, current):
            if neighbor in closed:
                continue
            tentative_g = g_score[current] + 1
            if neighbor not in open_set:
                open_set[neighbor] = None
            elif tentative_g >= g_score[neighbor]:
                continue
            came_from[neighbor] = current
            g_score[neighbor] = tentative_g
            f_score[neighbor] = tentative_g + manhattan(neighbor, end)

    logger.debug("astar: %s unreachable, %d cells visited", end, len(visited))
    return SearchResult.failure(visited)
