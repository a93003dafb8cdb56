# path_manager.py
from heldKarp import held_karp


class PathManager:
    def __init__(self, distance_matrix, landmarks=None, start=1):
        """
        Initialize PathManager with a cost matrix and optional landmark list.

        Args:
            distance_matrix (list[list[float]]): n x n travel cost matrix
            landmarks (list[dict]): one entry per location, in matrix order.
                Defaults to the 1-based location numbers.
            start (int): 1-based location the tour starts and ends at
        """
        if hasattr(distance_matrix, "to_numpy"):
            # DataFrame[i] selects a column, index rows positionally instead
            distance_matrix = distance_matrix.to_numpy()
        self.distance_matrix = distance_matrix
        self.landmarks = landmarks if landmarks is not None else list(range(1, len(distance_matrix) + 1))
        self.start = start
        self.optimal_cost = None
        self.optimal_path = None
        self.current_index = 0

    def compute_optimal_path(self):
        """
        Compute optimal TSP cycle using Held-Karp.
        Stores cost and path sequence (list of 1-based locations).
        """
        cost, path = held_karp(self.distance_matrix, self.start)
        self.optimal_cost = cost
        self.optimal_path = path
        self.current_index = 0
        return cost, path

    def get_next_segment(self):
        """
        Get the current navigation segment.
        Returns start and end landmark info with distance.
        """
        if self.optimal_path is None:
            raise ValueError("Optimal path not computed yet. Call compute_optimal_path() first.")

        if self.current_index >= len(self.optimal_path) - 1:
            return None  # Completed

        start_loc = self.optimal_path[self.current_index]
        end_loc = self.optimal_path[self.current_index + 1]

        segment = {
            "start": self.landmarks[start_loc - 1],
            "end": self.landmarks[end_loc - 1],
            "distance": float(self.distance_matrix[start_loc - 1][end_loc - 1]),
            "order": (self.current_index, self.current_index + 1),
        }
        return segment

    def advance_segment(self):
        """
        Move to the next segment in the optimal path.
        """
        if self.optimal_path is None:
            raise ValueError("Optimal path not computed yet. Call compute_optimal_path() first.")
        if self.current_index < len(self.optimal_path) - 1:
            self.current_index += 1
        return self.get_next_segment()

    def segments(self):
        """All segments of the computed path, in travel order."""
        if self.optimal_path is None:
            self.compute_optimal_path()
        saved = self.current_index
        self.current_index = 0
        result = []
        seg = self.get_next_segment()
        while seg:
            result.append(seg)
            seg = self.advance_segment()
        self.current_index = saved
        return result
