"""Error types raised by the path-finding engine."""

from __future__ import annotations


class PathfindingError(Exception):
    """Base error for path-finding."""


class PathNotFoundError(PathfindingError, LookupError):
    """Raised when the path of an unsuccessful search is requested."""


class MissingEdgeCostError(PathfindingError, LookupError):
    """Raised when a domain has no traversal cost for a step."""

    def __init__(self, current: object, neighbor: object) -> None:
        super().__init__(f"no traversal cost defined for {current!r} -> {neighbor!r}")
        self.current = current
        self.neighbor = neighbor


class UnknownNodeError(PathfindingError, ValueError):
    """Raised when the start or goal is not part of the domain."""


class SearchTimeoutError(PathfindingError, TimeoutError):
    """Raised when a search exceeds its deadline or expansion budget."""


class UnsupportedAlgorithmError(PathfindingError, ValueError):
    """Raised for an unknown path-finding algorithm name."""


__all__ = [
    "PathfindingError",
    "PathNotFoundError",
    "MissingEdgeCostError",
    "UnknownNodeError",
    "SearchTimeoutError",
    "UnsupportedAlgorithmError",
]
