"""A* shortest-path search over any :class:`~tinsel.pathfinding.domain.Domain`."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple

from .domain import Domain, Heuristic, Predicate, resolve_predicate
from .errors import PathNotFoundError, SearchTimeoutError, UnknownNodeError
from .frontier import Frontier

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchResult:
    """Outcome of a single :func:`find` call.

    ``trail`` is the raw predecessor walk: it runs from the goal back towards
    the start and does not include the start itself. Most callers want
    :attr:`path` instead.
    """

    start: Any
    goal: Any
    found: bool
    trail: Tuple[Any, ...] = ()
    cost: Optional[float] = None
    expansions: int = 0

    @property
    def path(self) -> List[Any]:
        """Return the nodes from start to goal, both included."""

        if not self.found:
            raise PathNotFoundError(f"no path from {self.start!r} to {self.goal!r}")
        return [self.start, *reversed(self.trail)]

    def unwrap(self) -> List[Any]:
        return self.path

    def __bool__(self) -> bool:
        return self.found


def _reconstruct(came_from: Dict[Any, Any], current: Any) -> Tuple[Any, ...]:
    trail = []
    while current in came_from:
        trail.append(current)
        current = came_from[current]
    return tuple(trail)


def _check_budget(
    expansions: int,
    max_expansions: Optional[int],
    deadline: Optional[float],
    should_cancel: Optional[Callable[[], bool]],
) -> None:
    if max_expansions is not None and expansions >= max_expansions:
        raise SearchTimeoutError(f"search exceeded {max_expansions} expansions")
    if deadline is not None and time.monotonic() >= deadline:
        raise SearchTimeoutError("search deadline passed")
    if should_cancel is not None and should_cancel():
        raise SearchTimeoutError("search cancelled")


def find(
    domain: Domain,
    heuristic: Heuristic,
    predicate: Optional[Predicate],
    start: Any,
    goal: Any,
    *,
    max_expansions: Optional[int] = None,
    timeout: Optional[float] = None,
    should_cancel: Optional[Callable[[], bool]] = None,
) -> SearchResult:
    """Return the cheapest route from ``start`` to ``goal`` through ``domain``.

    Parameters
    ----------
    domain:
        Neighbour and step-cost provider. Must stay unchanged during the call.
    heuristic:
        Admissible estimate ``(node, goal) -> cost``.
    predicate:
        Optional ``(current, neighbor, cost) -> bool`` filter; steps it rejects
        are never taken. ``None`` allows every step.
    start, goal:
        Nodes of ``domain``.
    max_expansions, timeout, should_cancel:
        Optional limits checked once per iteration. Hitting any of them raises
        :class:`SearchTimeoutError`.

    Returns
    -------
    SearchResult
        ``found`` is ``False`` when the frontier runs dry before the goal is
        reached; this is a normal outcome, not an error.
    """

    if start not in domain:
        raise UnknownNodeError(f"start {start!r} is not part of the domain")
    if goal not in domain:
        raise UnknownNodeError(f"goal {goal!r} is not part of the domain")

    if start == goal:
        return SearchResult(start=start, goal=goal, found=True, cost=0)

    allowed = resolve_predicate(predicate)
    deadline = time.monotonic() + timeout if timeout is not None else None

    came_from: Dict[Any, Any] = {}
    g_score: Dict[Any, float] = {start: 0}
    open_set = Frontier()
    open_set.push(start, heuristic(start, goal))
    expansions = 0

    while not open_set.is_empty():
        current = open_set.pop()
        if current == goal:
            logger.debug(
                "Path %r -> %r found: cost %s after %d expansions",
                start, goal, g_score[goal], expansions,
            )
            return SearchResult(
                start=start,
                goal=goal,
                found=True,
                trail=_reconstruct(came_from, current),
                cost=g_score[goal],
                expansions=expansions,
            )

        _check_budget(expansions, max_expansions, deadline, should_cancel)
        expansions += 1
        for n in domain.neighbors(current):
            step = domain.cost(current, n)
            if not allowed(current, n, step):
                continue
            tentative_g = g_score[current] + step
            if n not in g_score or tentative_g < g_score[n]:
                came_from[n] = current
                g_score[n] = tentative_g
                open_set.push(n, tentative_g + heuristic(n, goal))

    logger.debug("No path %r -> %r after %d expansions", start, goal, expansions)
    return SearchResult(start=start, goal=goal, found=False, expansions=expansions)


__all__ = ["SearchResult", "find"]
