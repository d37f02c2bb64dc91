import logging
import math

from common import Position, SearchResult
from strategies.common import find_start_and_end, get_neighbors, reconstruct_path

logger = logging.getLogger(__name__)


def run_dijkstra(grid):
    """
    Dijkstra's algorithm - uninformed shortest path search with unit edge costs.
    Args:
        grid: rectangular list of rows of cells (see common.Grid)
    Returns:
        SearchResult; `visited` is in settling order

    The next cell is chosen by a full row-major scan over the grid for the
    smallest finite distance among unsettled cells, so ties go to the lowest
    row, then the lowest column. O(V) per extraction.
    """
    start, end = find_start_and_end(grid)
    if start is None or end is None:
        logger.debug("dijkstra: start=%s end=%s, nothing to search", start, end)
        return SearchResult.failure()

    rows, cols = len(grid), len(grid[0])
    dist = {Position(r, c): math.inf for r in range(rows) for c in range(cols)}
    dist[start] = 0
    came_from = {}
    settled = set()
    visited = []

    def closest_unsettled():
        best, best_dist = None, math.inf
        for r in range(rows):
            for c in range(cols):
                pos = Position(r, c)
                if pos not in settled and dist[pos] < best_dist:
                    best, best_dist = pos, dist[pos]
        return best

    while True:
        node = closest_unsettled()
        if node is None:
            break
        settled.add(node)
        visited.append(node)

        if node == end:
            path = reconstruct_path(came_from, start, end)
            logger.debug("dijkstra: reached %s after %d cells, path length %d", end, len(visited), len(path))
            return SearchResult(path=path, visited=visited, success=True)

        for neighbor in get_neighbors(grid, node):
            if neighbor in settled:
                continue
            new_dist = dist[node] + 1
            # Only relax if we found a strictly shorter route
            if new_dist < dist[neighbor]:
                dist[neighbor] = new_dist
                came_from[neighbor] = node

    logger.debug("dijkstra: %s unreachable, %d cells visited", end, len(visited))
    return SearchResult.failure(visited)
