import argparse
import sys

import file_reader
from strategies import get_strategy
from util import apply_result, execute_with_metrics, format_bytes, format_path, setup_logging


def _metrics_line(method, result, runtime_s, peak_bytes, rss_after):
    path_len = len(result.path) if result.success else "N/A"
    return (
        f"Metrics: method={method} visited={len(result.visited)} path_len={path_len} "
        f"runtime_ms={(runtime_s*1000):.3f} peak_py_mem={format_bytes(peak_bytes)}"
        + (f" rss_now={format_bytes(rss_after)}" if rss_after is not None else "")
    )


def main(filename, method, metrics_mode="none", show=False):
    """Main function to run one search strategy on a map file.

    metrics_mode: "none" | "stderr" | "stdout"
    - When not "none", prints a single metrics line in addition to the normal output
    Returns the process exit code.
    """
    method = method.upper()
    try:
        run_fn = get_strategy(method)
    except KeyError:
        print(f"Unknown method: {method}", file=sys.stderr)
        return 2

    try:
        grid = file_reader.read_grid(filename)
    except FileNotFoundError:
        print(f"Error: File not found: {filename}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Error: Invalid map {filename}: {e}", file=sys.stderr)
        return 1

    result, runtime_s, peak_bytes, rss_after = execute_with_metrics(run_fn, grid)

    # Expected output:
    # <filename> <method>
    # Path length:<n> / Number of cells visited:<n> / <path>
    print(f"{filename} {method}")
    if result.success:
        print(f"Path length:{len(result.path)}")
        print(f"Number of cells visited:{len(result.visited)}")
        print(format_path(result.path))
    else:
        print("No path found")
        print(f"Number of cells visited:{len(result.visited)}")

    if show:
        print(file_reader.format_grid(apply_result(grid, result)))

    # Metrics (printed separately so the normal output format remains intact)
    if metrics_mode in ("stderr", "stdout"):
        line = _metrics_line(method, result, runtime_s, peak_bytes, rss_after)
        print(line, file=sys.stdout if metrics_mode == "stdout" else sys.stderr)
    return 0


def build_parser():
    parser = argparse.ArgumentParser(description="Run a grid search strategy on a map file")
    parser.add_argument("filename", help="Map file (rows of . S E X)")
    parser.add_argument("method", help="BFS, DFS, DIJKSTRA, AS or GBFS")
    metrics = parser.add_mutually_exclusive_group()
    metrics.add_argument("--metrics", "-m", dest="metrics_mode", action="store_const", const="stderr", default="none",
                         help="Print a metrics line to stderr")
    metrics.add_argument("--metrics-stdout", dest="metrics_mode", action="store_const", const="stdout",
                         help="Print a metrics line to stdout")
    parser.add_argument("--show", action="store_true", help="Print the grid with visited cells and path drawn in")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (DEBUG, INFO, ...)")
    return parser


def cli(argv=None):
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)
    return main(args.filename, args.method, args.metrics_mode, args.show)


if __name__ == "__main__":
    sys.exit(cli())
