import constants
from common import cell_kind
from util import make_grid


def parse_grid(text):
    """Parses a text map into a grid.

    Args:
        text (string): one grid row per line, one symbol per cell
            (see constants.SYMBOL_TO_KIND). Blank lines and lines starting
            with '#' are skipped, whitespace inside a row is ignored.

    Returns:
        grid: list of rows of CellKind

    Raises:
        ValueError: unknown symbol, ragged rows or no rows at all
    """
    def ignore(line):
        return (not line.strip()) or line.strip().startswith(constants.COMMENT_PREFIX)

    rows = []
    for line_no, raw in enumerate(text.splitlines(), start=1):
        if ignore(raw):
            continue
        row = []
        for col_no, ch in enumerate(raw, start=1):
            if ch.isspace():
                continue
            if ch not in constants.SYMBOL_TO_KIND:
                raise ValueError(f"Unknown symbol {ch!r} at line {line_no}, column {col_no}")
            row.append(constants.SYMBOL_TO_KIND[ch])
        rows.append(row)
    return make_grid(rows)


def read_grid(path):
    """Reads a map file from disk; see parse_grid for the format."""
    with open(path, "r", encoding="utf-8") as f:
        return parse_grid(f.read())


def format_grid(grid):
    """Renders a grid back to map text, one line per row."""
    return "\n".join("".join(constants.KIND_TO_SYMBOL[cell_kind(cell)] for cell in row) for row in grid)
