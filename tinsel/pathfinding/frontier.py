"""Priority frontier for best-first searches."""

from __future__ import annotations

from heapq import heappop, heappush
from typing import Any, Dict, List, Tuple


class Frontier:
    """Min-priority set of nodes backed by a binary heap.

    Re-pushing a node replaces its priority; the superseded heap entry stays
    behind and is discarded when it surfaces. Nodes with equal priority come
    out lowest identifier first, so node identifiers must be orderable.
    """

    def __init__(self) -> None:
        self._heap: List[Tuple[Any, Any]] = []
        self._priorities: Dict[Any, Any] = {}

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _discard_stale(self) -> None:
        heap = self._heap
        while heap:
            priority, node = heap[0]
            if self._priorities.get(node, _MISSING) == priority:
                return
            heappop(heap)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def push(self, node: Any, priority: Any) -> None:
        """Add ``node`` or move it to ``priority`` if already present."""

        if self._priorities.get(node, _MISSING) == priority:
            return
        self._priorities[node] = priority
        heappush(self._heap, (priority, node))

    def pop(self) -> Any:
        """Remove and return the node with the lowest priority."""

        self._discard_stale()
        if not self._heap:
            raise IndexError("pop from an empty frontier")
        _, node = heappop(self._heap)
        del self._priorities[node]
        return node

    def peek(self) -> Any:
        """Return the node :meth:`pop` would return without removing it."""

        self._discard_stale()
        if not self._heap:
            raise IndexError("peek at an empty frontier")
        return self._heap[0][1]

    def priority(self, node: Any) -> Any:
        """Return the current priority of ``node``."""

        return self._priorities[node]

    def is_empty(self) -> bool:
        return not self._priorities

    def __contains__(self, node: object) -> bool:
        return node in self._priorities

    def __len__(self) -> int:
        return len(self._priorities)


_MISSING = object()


__all__ = ["Frontier"]
