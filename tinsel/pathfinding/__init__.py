"""pathfinding package."""

from .algorithms import PathFinder, PathFindingAlgorithm, create_algorithm
from .astar import SearchResult, find
from .domain import Domain, accept_all
from .errors import (
    MissingEdgeCostError,
    PathfindingError,
    PathNotFoundError,
    SearchTimeoutError,
    UnknownNodeError,
    UnsupportedAlgorithmError,
)
from .frontier import Frontier
from .heuristics import chebyshev, flat_manhattan, manhattan, zero

__all__ = [
    "Domain",
    "Frontier",
    "PathFinder",
    "PathFindingAlgorithm",
    "SearchResult",
    "accept_all",
    "chebyshev",
    "create_algorithm",
    "find",
    "flat_manhattan",
    "manhattan",
    "zero",
    "MissingEdgeCostError",
    "PathfindingError",
    "PathNotFoundError",
    "SearchTimeoutError",
    "UnknownNodeError",
    "UnsupportedAlgorithmError",
]
