import logging

import pytest

from file_reader import parse_grid

OPEN_3X3 = """
S..
...
..E
"""

# wall column at col 1 with a gap in the bottom row
GAP_3X3 = """
SXE
.X.
...
"""

ENCLOSED = """
EX.
XSX
.X.
"""

NO_START = """
...
.X.
..E
"""

# greedy gets drawn through the middle pocket before going round the top
GREEDY_TRAP = """
S....
...X.
...XE
.XXX.
.....
"""


@pytest.fixture
def grid_of():
    return parse_grid


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop the stdout handler the command line drivers attach to the root logger."""
    yield
    root = logging.getLogger()
    for h in [h for h in root.handlers if getattr(h, "_grid_search", False)]:
        root.removeHandler(h)
    root.setLevel(logging.WARNING)
