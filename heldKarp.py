import logging
import math
import numbers

import config
from errors import Infeasible, InvalidCost, InvalidDimension, InvalidStart, TooManyLocations

logger = logging.getLogger(__name__)

# strictly greater than any finite tour cost
UNREACHABLE = math.inf


def _as_matrix(dist):
    """
    Copy a cost matrix into a list of float rows and validate it.

    Accepts nested lists, numpy arrays and pandas DataFrames. None or inf
    marks a missing edge. The diagonal is never read so it is not checked.
    """
    if hasattr(dist, "to_numpy"):
        dist = dist.to_numpy()
    if not hasattr(dist, "__len__") or isinstance(dist, str):
        raise InvalidDimension("cost matrix must be a sequence of rows")
    if len(dist) == 0:
        raise InvalidDimension("cost matrix is empty")

    n = len(dist)
    if n > config.MAX_LOCATIONS:
        raise TooManyLocations(n, config.MAX_LOCATIONS)

    matrix = []
    for i, row in enumerate(dist):
        if not hasattr(row, "__len__") or isinstance(row, str):
            raise InvalidDimension(f"row {i + 1} is not a sequence of costs")
        if len(row) != n:
            raise InvalidDimension(f"row {i + 1} has {len(row)} entries, expected {n}")
        values = []
        for j, value in enumerate(row):
            if i == j:
                values.append(0.0)
                continue
            if value is None:
                values.append(UNREACHABLE)
                continue
            try:
                cost = float(value)
            except (TypeError, ValueError):
                raise InvalidCost(f"cost[{i + 1}][{j + 1}] is not a number: {value!r}")
            if math.isnan(cost) or cost < 0:
                raise InvalidCost(f"cost[{i + 1}][{j + 1}] must be non-negative, got {value!r}")
            values.append(cost)
        matrix.append(values)
    return matrix


def _check_start(start, n):
    if isinstance(start, bool) or not isinstance(start, numbers.Integral):
        raise InvalidStart(f"start location must be an integer, got {start!r}")
    if not 1 <= start <= n:
        raise InvalidStart(f"start location {start} is outside 1..{n}")
    return int(start)


def held_karp(dist, start=1):
    """
    Solve the travelling salesman cycle exactly.

    Args:
        dist: n x n cost matrix, dist[i][j] is the cost of going from i to j.
        start (int): 1-based location the cycle begins and ends at.

    Returns:
        (cost, route) where route holds n + 1 one-based locations, starting
        and ending at start.

    Raises:
        InvalidDimension, InvalidStart, InvalidCost: bad input.
        Infeasible: missing edges leave no cycle through every location.
    """
    matrix = _as_matrix(dist)
    n = len(matrix)
    start = _check_start(start, n)
    s = start - 1

    if n == 1:
        return 0.0, [start, start]

    full = (1 << n) - 1
    start_bit = 1 << s
    # dp[mask][i]: cheapest path from s through every location in mask, ending at i.
    # Only masks holding s get a row, so the tables carry 2^(n-1) rows each.
    dp = [None] * (full + 1)
    parent = [None] * (full + 1)
    for mask in range(start_bit, full + 1):
        if mask & start_bit:
            dp[mask] = [UNREACHABLE] * n
            parent[mask] = [-1] * n
    dp[start_bit][s] = 0.0

    # mask ^ (1 << i) < mask and still holds s, so its row is final before it is read
    for mask in range(full + 1):
        if not mask & start_bit:
            continue
        for i in range(n):
            bit = 1 << i
            if i == s or not mask & bit:
                continue
            prev_mask = mask ^ bit
            prev_row = dp[prev_mask]
            best, best_j = UNREACHABLE, -1
            for j in range(n):
                if not prev_mask & (1 << j):
                    continue
                cost = prev_row[j] + matrix[j][i]
                if cost < best:
                    best, best_j = cost, j
            dp[mask][i] = best
            parent[mask][i] = best_j

    min_cost, last = UNREACHABLE, -1
    for i in range(n):
        if i == s:
            continue
        cost = dp[full][i] + matrix[i][s]
        if cost < min_cost:
            min_cost, last = cost, i

    if last < 0:
        raise Infeasible(f"no cycle visits all {n} locations from location {start}")

    route = [start]
    mask, node = full, last
    while node != s:
        route.append(node + 1)
        node, mask = parent[mask][node], mask ^ (1 << node)
    route.append(start)
    route.reverse()

    logger.debug("held-karp n=%d start=%d cost=%.6f", n, start, min_cost)
    return min_cost, route


def route_cost(dist, route):
    """Sum the direct costs between consecutive 1-based locations of a route."""
    matrix = _as_matrix(dist)
    return sum(matrix[a - 1][b - 1] for a, b in zip(route, route[1:]))
