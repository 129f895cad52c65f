"""Distance estimates for guiding A*.

Every heuristic here is a plain callable ``(node, goal) -> number``. A
heuristic must never overestimate the remaining cost, otherwise the returned
path may not be the cheapest one. Manhattan distance is only admissible when
every step moves one grid unit and costs at least 1; using it on an arbitrary
weighted graph is a correctness risk, so pick :func:`zero` when unsure.
"""

from __future__ import annotations

from typing import Callable, Tuple


Coord = Tuple[int, int]


def manhattan(a: Coord, b: Coord) -> int:
    """Return the 4-neighbour grid distance between two coordinates."""

    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def chebyshev(a: Coord, b: Coord) -> int:
    """Return the 8-neighbour grid distance between two coordinates."""

    return max(abs(a[0] - b[0]), abs(a[1] - b[1]))


def zero(a: object, b: object) -> int:
    """Always return 0, which reduces A* to Dijkstra's algorithm."""

    return 0


def flat_manhattan(width: int) -> Callable[[int, int], int]:
    """Return a Manhattan heuristic over row-major flattened indices.

    Parameters
    ----------
    width:
        Number of columns in the grid the indices were flattened from.
    """

    if width <= 0:
        raise ValueError("width must be positive")

    def estimate(p: int, q: int) -> int:
        x1, y1 = p % width, p // width
        x2, y2 = q % width, q // width
        return abs(x1 - x2) + abs(y1 - y2)

    return estimate


__all__ = ["Coord", "manhattan", "chebyshev", "zero", "flat_manhattan"]
