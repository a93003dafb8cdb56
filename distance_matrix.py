# distance_matrix.py
import logging
import math

import networkx as nx
import pandas as pd
from geopy.distance import geodesic

from errors import InvalidCost, InvalidDimension

logger = logging.getLogger(__name__)


def read_matrix_csv(path):
    """
    Read a header-less numeric grid. Blank cells become inf (no direct edge),
    any other cell that is not a number raises InvalidCost.
    """
    df = pd.read_csv(path, header=None, skipinitialspace=True)
    df = df.dropna(how="all").dropna(axis=1, how="all")
    if df.shape[0] != df.shape[1]:
        raise InvalidDimension(f"{path} holds a {df.shape[0]}x{df.shape[1]} grid, expected a square one")
    blank = df.isna()
    numeric = df.apply(pd.to_numeric, errors="coerce")
    rows, cols = (numeric.isna() & ~blank).to_numpy().nonzero()
    if len(rows):
        i, j = rows[0], cols[0]
        raise InvalidCost(f"cost[{i + 1}][{j + 1}] in {path} is not a number: {df.iat[i, j]!r}")
    return numeric.fillna(math.inf).values.tolist()


def write_matrix_csv(matrix, path):
    pd.DataFrame(matrix).to_csv(path, header=False, index=False)


def geodesic_matrix(landmarks):
    """Pairwise geodesic distance in metres between landmark dicts with Latitude/Longitude."""
    coords = [(lm["Latitude"], lm["Longitude"]) for lm in landmarks]
    n = len(coords)
    matrix = [[0.0] * n for _ in range(n)]
    for i in range(n):
        for j in range(i + 1, n):
            d = geodesic(coords[i], coords[j]).meters
            matrix[i][j] = d
            matrix[j][i] = d
    return matrix


def graph_matrix(G, nodes, weight="length"):
    """
    Shortest path lengths between graph nodes using Dijkstra.
    Pairs with no path get inf, which the solver reports as infeasible.
    """
    n = len(nodes)
    matrix = [[0.0] * n for _ in range(n)]
    for i, src in enumerate(nodes):
        lengths = nx.single_source_dijkstra_path_length(G, src, weight=weight)
        for j, dst in enumerate(nodes):
            if i == j:
                continue
            if dst not in lengths:
                logger.warning("No path between %s and %s", src, dst)
                matrix[i][j] = math.inf
            else:
                matrix[i][j] = float(lengths[dst])
    return matrix
