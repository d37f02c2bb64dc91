from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, NamedTuple


class Position(NamedTuple):
    """0-based (row, col) coordinate of a grid cell."""
    row: int
    col: int

    def __str__(self):
        return f"({self.row},{self.col})"


class CellKind(str, Enum):
    """Kind of a grid cell. Only WALL is impassable."""
    EMPTY = "empty"
    START = "start"
    END = "end"
    WALL = "wall"
    PATH = "path"
    VISITED = "visited"

    def __str__(self):
        return self.value


# Grid: rectangular list of rows, each a list of cells (rows >= 1, cols >= 1)
Grid = List[List[Any]]


def cell_kind(cell) -> CellKind:
    """Normalise a cell to its CellKind.

    A cell may be a CellKind, a plain string such as "wall", or an object
    carrying a `kind` (or `type`) attribute.
    """
    if isinstance(cell, CellKind):
        return cell
    if isinstance(cell, str):
        return CellKind(cell)
    kind = getattr(cell, "kind", None)
    if kind is None:
        kind = getattr(cell, "type")
    return cell_kind(kind)


@dataclass
class SearchResult:
    """Outcome of one strategy run.

    visited: positions in the order the strategy processed them
    path: start..end inclusive when success, otherwise empty
    """
    path: List[Position] = field(default_factory=list)
    visited: List[Position] = field(default_factory=list)
    success: bool = False

    @classmethod
    def failure(cls, visited=None):
        return cls(path=[], visited=list(visited or []), success=False)
