class TSPError(Exception):
    """Base class for every input or solve failure reported to a host."""


class InvalidDimension(TSPError):
    """Matrix is empty or not square."""


class TooManyLocations(InvalidDimension):
    """More locations than the exact solver is allowed to enumerate."""

    def __init__(self, n, limit):
        super().__init__(f"{n} locations exceeds the limit of {limit}")
        self.n = n
        self.limit = limit


class InvalidStart(TSPError):
    """Start location is not a 1-based index into the matrix."""


class InvalidCost(TSPError):
    """A matrix entry is negative, NaN or not a number."""


class Infeasible(TSPError):
    """No Hamiltonian cycle exists through the finite edges."""
