"""Directed, edge-weighted graphs over integer node ids."""

from __future__ import annotations

from typing import Dict, Generic, Iterator, List, Set, Tuple, TypeVar

from ..pathfinding.domain import Domain
from ..pathfinding.errors import MissingEdgeCostError


Edge = Tuple[int, int]
V = TypeVar("V")


class WeightedGraph(Domain):
    """Graph whose vertices exist only as edge endpoints.

    Edges are directed; use :meth:`add_undirected_edge` for two-way links.
    Neighbours are reported in the order their edges were added.
    """

    def __init__(self) -> None:
        self._weights: Dict[Edge, float] = {}
        self._adjacency: Dict[int, List[int]] = {}
        self._nodes: Set[int] = set()

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def add_node(self, p: int) -> None:
        """Register ``p`` even if it has no edges yet."""
        self._nodes.add(p)

    def add_edge(self, e: Edge, w: float = 0) -> bool:
        """Add edge ``p -> q`` with weight ``w``; return ``False`` if present."""
        if not w >= 0:
            raise ValueError(f"edge {e} needs a non-negative weight, got {w}")
        if e in self._weights:
            return False
        p, q = e
        self._weights[e] = w
        self._adjacency.setdefault(p, []).append(q)
        self._nodes.update(e)
        return True

    def add_undirected_edge(self, e: Edge, w: float = 0) -> bool:
        """Add ``p -> q`` and ``q -> p``; return ``True`` if either was new."""
        p, q = e
        forward = self.add_edge((p, q), w)
        backward = self.add_edge((q, p), w)
        return forward or backward

    def remove_edge(self, e: Edge) -> bool:
        """Remove edge ``p -> q``; return ``False`` if it did not exist."""
        if e not in self._weights:
            return False
        p, q = e
        del self._weights[e]
        self._adjacency[p].remove(q)
        return True

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def edges(self) -> List[Edge]:
        return list(self._weights)

    @property
    def weights(self) -> Dict[Edge, float]:
        return dict(self._weights)

    @property
    def nodes(self) -> Set[int]:
        return set(self._nodes)

    def adjacent(self, p: int, q: int) -> bool:
        return (p, q) in self._weights

    def neighbors(self, p: int) -> List[int]:
        return list(self._adjacency.get(p, ()))

    def cost(self, current: int, neighbor: int) -> float:
        try:
            return self._weights[(current, neighbor)]
        except KeyError:
            raise MissingEdgeCostError(current, neighbor) from None

    def __contains__(self, node: object) -> bool:
        return node in self._nodes

    def __iter__(self) -> Iterator[Edge]:
        return iter(self._weights)

    def __len__(self) -> int:
        return len(self._weights)


class VertexGraph(WeightedGraph, Generic[V]):
    """Weighted graph whose node ids index a list of vertex values."""

    def __init__(self) -> None:
        super().__init__()
        self._vertices: List[V] = []

    @property
    def vertices(self) -> List[V]:
        return list(self._vertices)

    def vertex(self, v: int) -> V:
        return self._vertices[v]

    def add_vertex(self, value: V) -> int:
        """Append ``value`` and return its node id."""
        self._vertices.append(value)
        index = len(self._vertices) - 1
        self.add_node(index)
        return index

    def remove_vertex(self, v: int) -> bool:
        """Remove vertex ``v`` and every edge touching it.

        Vertex ids above ``v`` shift down by one, as do the edges referring
        to them.
        """
        if not 0 <= v < len(self._vertices):
            return False
        del self._vertices[v]

        def shift(n: int) -> int:
            return n - 1 if n > v else n

        old = self._weights
        self._weights = {}
        self._adjacency = {}
        self._nodes = set(range(len(self._vertices)))
        for (p, q), w in old.items():
            if v in (p, q):
                continue
            self.add_edge((shift(p), shift(q)), w)
        return True


__all__ = ["Edge", "WeightedGraph", "VertexGraph"]
