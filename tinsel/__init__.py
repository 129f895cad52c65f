"""Puzzle-solving toolkit built around a generic shortest-path engine."""

from .graphs.grid import Cell, Grid
from .graphs.weighted_graph import VertexGraph, WeightedGraph
from .pathfinding import (
    Domain,
    PathFinder,
    PathFindingAlgorithm,
    SearchResult,
    create_algorithm,
    find,
)
from .structures.priority import PriorityQueue, PriorityStack

__version__ = "0.1.0"

__all__ = [
    "Cell",
    "Domain",
    "Grid",
    "PathFinder",
    "PathFindingAlgorithm",
    "PriorityQueue",
    "PriorityStack",
    "SearchResult",
    "VertexGraph",
    "WeightedGraph",
    "create_algorithm",
    "find",
]
