import argparse
import sys

import pandas as pd

import constants
import file_reader
from strategies import get_strategy
from util import execute_with_metrics, format_bytes, setup_logging

COLUMNS = ["method", "success", "path_length", "visited", "runtime_ms", "peak_py_mem"]


def compare_strategies(grid, methods=None):
    """Run several strategies on the same grid and tabulate their results.

    methods: iterable of method names, defaults to every strategy
    Returns a DataFrame with one row per method, in the order given.
    Raises KeyError for an unknown method name.
    """
    if methods is None:
        methods = constants.METHODS
    rows = []
    for method in methods:
        run_fn = get_strategy(method)
        result, runtime_s, peak_bytes, _rss = execute_with_metrics(run_fn, grid)
        rows.append({
            "method": method.upper(),
            "success": result.success,
            "path_length": len(result.path),
            "visited": len(result.visited),
            "runtime_ms": round(runtime_s * 1000, 3),
            "peak_py_mem": format_bytes(peak_bytes),
        })
    return pd.DataFrame(rows, columns=COLUMNS)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Compare grid search strategies on one map file")
    parser.add_argument("filename", help="Map file (rows of . S E X)")
    parser.add_argument("--methods", default=",".join(constants.METHODS),
                        help="Comma separated method names (default: all)")
    parser.add_argument("--log-level", default="WARNING")
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    methods = [m.strip() for m in args.methods.split(",") if m.strip()]
    try:
        grid = file_reader.read_grid(args.filename)
    except FileNotFoundError:
        print(f"Error: File not found: {args.filename}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Error: Invalid map {args.filename}: {e}", file=sys.stderr)
        return 1

    try:
        table = compare_strategies(grid, methods)
    except KeyError as e:
        print(e.args[0], file=sys.stderr)
        return 2

    print(f"{args.filename}")
    print(table.to_string(index=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
