"""Named path-finding algorithms and their factory."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional

from ..config import SearchConfig
from . import astar
from .domain import Domain, Heuristic, Predicate
from .errors import UnsupportedAlgorithmError
from .heuristics import zero

logger = logging.getLogger(__name__)


class PathFindingAlgorithm(str, Enum):
    ASTAR = "astar"
    DIJKSTRA = "dijkstra"


@dataclass
class PathFinder:
    """Search front-end bound to one algorithm and a set of limits."""

    algorithm: PathFindingAlgorithm = PathFindingAlgorithm.ASTAR
    default_heuristic: Heuristic = zero
    max_expansions: Optional[int] = None
    timeout: Optional[float] = None

    @classmethod
    def from_config(cls, config: SearchConfig, default_heuristic: Heuristic = zero) -> "PathFinder":
        finder = create_algorithm(config.algorithm)
        finder.default_heuristic = default_heuristic
        finder.max_expansions = config.max_expansions
        finder.timeout = config.timeout_seconds
        return finder

    def find(
        self,
        domain: Domain,
        predicate: Optional[Predicate],
        start: Any,
        goal: Any,
        heuristic: Optional[Heuristic] = None,
        *,
        should_cancel: Optional[Callable[[], bool]] = None,
    ) -> astar.SearchResult:
        """Search ``domain`` from ``start`` to ``goal``.

        Dijkstra ignores ``heuristic``; A* falls back to ``default_heuristic``
        when none is given. ``should_cancel`` is polled before each expansion.
        """

        if self.algorithm is PathFindingAlgorithm.DIJKSTRA:
            estimate = zero
        else:
            estimate = heuristic if heuristic is not None else self.default_heuristic
        return astar.find(
            domain,
            estimate,
            predicate,
            start,
            goal,
            max_expansions=self.max_expansions,
            timeout=self.timeout,
            should_cancel=should_cancel,
        )


def create_algorithm(name: str | PathFindingAlgorithm) -> PathFinder:
    """Return a :class:`PathFinder` for ``name``."""

    try:
        algorithm = PathFindingAlgorithm(name)
    except ValueError:
        raise UnsupportedAlgorithmError(f"Unknown algorithm {name}.") from None
    logger.debug("Created %s path finder", algorithm.value)
    return PathFinder(algorithm=algorithm)


__all__ = ["PathFindingAlgorithm", "PathFinder", "create_algorithm"]
