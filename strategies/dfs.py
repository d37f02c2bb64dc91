import logging

from common import SearchResult
from strategies.common import find_start_and_end, get_neighbors, reconstruct_path

logger = logging.getLogger(__name__)


def run_dfs(grid):
    """Depth-First Search: same discipline as BFS with a stack for the frontier.

    Neighbours are pushed up, down, left, right so the last pushed (right) is
    expanded first. Finds a path, not necessarily a short one.
    """
    start, end = find_start_and_end(grid)
    if start is None or end is None:
        logger.debug("dfs: start=%s end=%s, nothing to search", start, end)
        return SearchResult.failure()

    stack = [start]
    seen = {start}  # marked on push, so no cell is pushed twice
    came_from = {}
    visited = []

    while stack:
        node = stack.pop()
        visited.append(node)

        if node == end:
            path = reconstruct_path(came_from, start, end)
            logger.debug("dfs: reached %s after %d cells, path length %d", end, len(visited), len(path))
            return SearchResult(path=path, visited=visited, success=True)

        for neighbor in get_neighbors(grid, node):
            if neighbor not in seen:
                seen.add(neighbor)
                came_from[neighbor] = node
                stack.append(neighbor)

    logger.debug("dfs: %s unreachable, %d cells visited", end, len(visited))
    return SearchResult.failure(visited)
