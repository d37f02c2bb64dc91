from common import CellKind

# Map file symbols
SYMBOL_TO_KIND = {
    ".": CellKind.EMPTY,
    "S": CellKind.START,
    "E": CellKind.END,
    "X": CellKind.WALL,
    "W": CellKind.WALL,
    "*": CellKind.PATH,
    "o": CellKind.VISITED,
}
KIND_TO_SYMBOL = {
    CellKind.EMPTY: ".",
    CellKind.START: "S",
    CellKind.END: "E",
    CellKind.WALL: "X",
    CellKind.PATH: "*",
    CellKind.VISITED: "o",
}
COMMENT_PREFIX = "#"

# Method names accepted by search.py / multi_search.py
METHODS = ["BFS", "DFS", "DIJKSTRA", "AS", "GBFS"]

MAPS_FOLDER = "maps"
DEFAULT_GRID_SIZE = 5
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
