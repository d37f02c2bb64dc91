import logging
from collections import deque

from common import SearchResult
from strategies.common import find_start_and_end, get_neighbors, reconstruct_path

logger = logging.getLogger(__name__)


def run_bfs(grid):
    """Breadth-First Search over the 4-connected grid.

    Cells are marked seen when enqueued and recorded in `visited` when
    dequeued. Returns the shortest path by step count.
    """
    start, end = find_start_and_end(grid)
    if start is None or end is None:
        logger.debug("bfs: start=%s end=%s, nothing to search", start, end)
        return SearchResult.failure()

    q = deque([start])
    seen = {start}
    came_from = {}
    visited = []

    while q:
        node = q.popleft()
        visited.append(node)

        if node == end:
            path = reconstruct_path(came_from, start, end)
            logger.debug("bfs: reached %s after %d cells, path length %d", end, len(visited), len(path))
            return SearchResult(path=path, visited=visited, success=True)

        for neighbor in get_neighbors(grid, node):
            if neighbor not in seen:
                seen.add(neighbor)
                came_from[neighbor] = node
                q.append(neighbor)

    logger.debug("bfs: %s unreachable, %d cells visited", end, len(visited))
    return SearchResult.failure(visited)
