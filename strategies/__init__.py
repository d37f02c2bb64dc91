"""Package exposing grid search strategy implementations."""

from .dfs import run_dfs
from .bfs import run_bfs
from .dijkstra import run_dijkstra
from .astar import run_astar
from .gbfs import run_gbfs

# Method name -> strategy, in the order the command line lists them
STRATEGIES = {
    "BFS": run_bfs,
    "DFS": run_dfs,
    "DIJKSTRA": run_dijkstra,
    "AS": run_astar,
    "GBFS": run_gbfs,
}

ALIASES = {"ASTAR": "AS", "A*": "AS", "GREEDY": "GBFS"}


def get_strategy(method):
    """Look up a strategy by method name (case-insensitive). Raises KeyError."""
    name = method.strip().upper()
    name = ALIASES.get(name, name)
    if name not in STRATEGIES:
        raise KeyError(f"Unknown method: {method}")
    return STRATEGIES[name]


__all__ = ["run_dfs", "run_bfs", "run_dijkstra", "run_astar", "run_gbfs", "STRATEGIES", "get_strategy"]
