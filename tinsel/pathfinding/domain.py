from __future__ import annotations

"""Base interface for searchable domains."""

from abc import ABC, abstractmethod
from typing import Any, Callable, Iterable, Optional

# ``(current, neighbor, cost) -> bool``; returning ``False`` blocks the step.
Predicate = Callable[[Any, Any, float], bool]
Heuristic = Callable[[Any, Any], float]


class Domain(ABC):
    """Read-only view of nodes, their neighbours and step costs.

    A domain must not be mutated while a search over it is running. Several
    searches may share one domain concurrently as long as nothing writes to it.
    """

    @abstractmethod
    def neighbors(self, node: Any) -> Iterable[Any]:
        """Return the nodes reachable from ``node`` in one step."""
        raise NotImplementedError

    @abstractmethod
    def cost(self, current: Any, neighbor: Any) -> float:
        """Return the non-negative cost of stepping ``current`` -> ``neighbor``.

        Raises :class:`~tinsel.pathfinding.errors.MissingEdgeCostError` when the
        two nodes are not adjacent.
        """
        raise NotImplementedError

    @abstractmethod
    def __contains__(self, node: object) -> bool:
        """Return ``True`` if ``node`` is part of the domain."""
        raise NotImplementedError


def accept_all(current: Any, neighbor: Any, cost: float) -> bool:
    """Predicate allowing every step."""

    return True


def resolve_predicate(predicate: Optional[Predicate]) -> Predicate:
    return accept_all if predicate is None else predicate


__all__ = ["Domain", "Predicate", "Heuristic", "accept_all", "resolve_predicate"]
