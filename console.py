import argparse
import logging
import sys

import config
from distance_matrix import read_matrix_csv
from errors import TSPError
from heldKarp import held_karp

logger = logging.getLogger(__name__)

WIDTH = 50


def rule(ch, length=WIDTH):
    return ch * length


def format_matrix(matrix):
    lines = ["", "Distance Matrix:"]
    for row in matrix:
        lines.append(" ".join(f"{val:>8g}" for val in row) + " ")
    return "\n".join(lines)


def format_report(matrix, route, cost):
    """Input summary followed by the optimal route and its cost."""
    lines = [
        rule("="),
        f"{'Input Summary':>30}",
        rule("="),
        format_matrix(matrix),
        rule("="),
        f"{'Optimal Delivery Route':>30}",
        rule("="),
        "Route: " + " -> ".join(str(loc) for loc in route),
        "",
        "Locations in the route (one by one):",
    ]
    lines.extend(f"Location {loc}" for loc in route)
    lines.append(rule("-"))
    lines.append(f"Minimum distance: {cost:.{config.DISTANCE_PRECISION}f} units")
    lines.append(rule("="))
    return "\n".join(lines)


def prompt_matrix(ask=input, start=None):
    """Read the location count, every matrix entry and, unless given, the start location."""
    n = int(ask("Enter the number of locations in the delivery route: "))
    print("Enter the distance matrix (space-separated row-wise):")
    matrix = []
    for i in range(n):
        row = []
        for j in range(n):
            row.append(float(ask(f"Enter time for [{i + 1}][{j + 1}]: ")))
        matrix.append(row)
    if start is None:
        start = int(ask(f"Enter the starting location (1 to {n}): "))
    return matrix, start


def main(argv=None, ask=input):
    parser = argparse.ArgumentParser(description="Exact shortest delivery cycle (Held-Karp).")
    parser.add_argument("--csv", help="read the cost matrix from a header-less CSV grid")
    parser.add_argument("--start", type=int, default=None, help="1-based starting location")
    args = parser.parse_args(argv)

    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)

    try:
        if args.csv:
            matrix = read_matrix_csv(args.csv)
            start = args.start if args.start is not None else 1
        else:
            matrix, start = prompt_matrix(ask, start=args.start)
        cost, route = held_karp(matrix, start)
    except EOFError:
        print("Invalid input: input ended before the matrix was complete")
        return 1
    except (OSError, ValueError) as e:
        print(f"Invalid input: {e}")
        return 1
    except TSPError as e:
        logger.error("%s: %s", type(e).__name__, e)
        print(f"Error: {e}")
        return 1

    print()
    print(format_report(matrix, route, cost))
    return 0


if __name__ == "__main__":
    sys.exit(main())
