import logging
import math

from common import SearchResult
from strategies.common import find_start_and_end, get_neighbors, manhattan, reconstruct_path

logger = logging.getLogger(__name__)


def run_gbfs(grid):
    """Greedy Best-First Search ordered only by Manhattan distance to the end.

    The first parent recorded for a cell is kept for good: a cell already in
    the open set is never re-parented, which is what separates this from A*.
    Paths are not guaranteed to be shortest. The end cell is not added to
    `visited`.
    """
    start, end = find_start_and_end(grid)
    if start is None or end is None:
        logger.debug("gbfs: start=%s end=%s, nothing to search", start, end)
        return SearchResult.failure()

    open_set = {start: None}
    closed = set()
    came_from = {}
    visited = []

    while open_set:
        current, lowest_h = None, math.inf
        for node in open_set:
            h = manhattan(node, end)
            if h < lowest_h:
                current, lowest_h = node, h

        if current == end:
            path = reconstruct_path(came_from, start, end)
            logger.debug("gbfs: reached %s after %d cells, path length %d", end, len(visited), len(path))
            return SearchResult(path=path, visited=visited, success=True)

        del open_set[current]
        closed.add(current)
        visited.append(current)

        for neighbor in get_neighbors(grid, current):
            if neighbor in closed or neighbor in open_set:
                continue
            open_set[neighbor] = None
            came_from[neighbor] = current

    logger.debug("gbfs: %s unreachable, %d cells visited", end, len(visited))
    return SearchResult.failure(visited)
