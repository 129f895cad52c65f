"""Dense two-dimensional grids usable as search domains."""

from __future__ import annotations

from typing import Callable, Generic, Iterable, Iterator, List, Optional, Sequence, Tuple, TypeVar

from ..pathfinding.domain import Domain
from ..pathfinding.errors import MissingEdgeCostError


Cell = Tuple[int, int]  # (row, column)
T = TypeVar("T")


class Grid(Domain, Generic[T]):
    """Immutable rectangle of values addressed by ``(row, column)`` cells.

    Neighbours are the cells directly above, below, left and right; every
    such step costs 1.
    """

    def __init__(self, rows: Iterable[Sequence[T]]) -> None:
        self._rows: Tuple[Tuple[T, ...], ...] = tuple(tuple(r) for r in rows)
        widths = {len(r) for r in self._rows}
        if len(widths) > 1:
            raise ValueError(f"grid rows have differing widths: {sorted(widths)}")
        self.height = len(self._rows)
        self.width = widths.pop() if widths else 0

    @classmethod
    def from_lines(
        cls, lines: Iterable[str], convert: Callable[[str], T] = int  # type: ignore[assignment]
    ) -> "Grid[T]":
        """Build a grid from text rows, converting each character."""

        rows = [[convert(ch) for ch in line.rstrip("\r\n")] for line in lines if line.strip()]
        return cls(rows)

    # ------------------------------------------------------------------
    # Cell helpers
    # ------------------------------------------------------------------
    def in_bounds(self, cell: Cell) -> bool:
        r, c = cell
        return 0 <= r < self.height and 0 <= c < self.width

    def value(self, cell: Cell) -> T:
        if not self.in_bounds(cell):
            raise IndexError(f"cell {cell} is outside the grid")
        r, c = cell
        return self._rows[r][c]

    def __getitem__(self, cell: Cell) -> T:
        return self.value(cell)

    def _step(self, cell: Cell, dr: int, dc: int) -> Optional[Cell]:
        nxt = (cell[0] + dr, cell[1] + dc)
        return nxt if self.in_bounds(nxt) else None

    def above(self, cell: Cell) -> Optional[Cell]:
        return self._step(cell, -1, 0)

    def below(self, cell: Cell) -> Optional[Cell]:
        return self._step(cell, 1, 0)

    def left(self, cell: Cell) -> Optional[Cell]:
        return self._step(cell, 0, -1)

    def right(self, cell: Cell) -> Optional[Cell]:
        return self._step(cell, 0, 1)

    def index(self, cell: Cell) -> int:
        """Return the row-major flat index of ``cell``."""
        if not self.in_bounds(cell):
            raise IndexError(f"cell {cell} is outside the grid")
        return cell[0] * self.width + cell[1]

    def cell_at(self, index: int) -> Cell:
        """Inverse of :meth:`index`."""
        if not 0 <= index < self.width * self.height:
            raise IndexError(f"index {index} is outside the grid")
        return divmod(index, self.width)

    def cells(self) -> Iterator[Cell]:
        for r in range(self.height):
            for c in range(self.width):
                yield (r, c)

    def find(self, value: T) -> Optional[Cell]:
        """Return the first cell, in row-major order, holding ``value``."""
        for cell in self.cells():
            if self.value(cell) == value:
                return cell
        return None

    # ------------------------------------------------------------------
    # Domain
    # ------------------------------------------------------------------
    def neighbors(self, cell: Cell) -> List[Cell]:
        candidates = (self.above(cell), self.below(cell), self.left(cell), self.right(cell))
        return [n for n in candidates if n is not None]

    def cost(self, current: Cell, neighbor: Cell) -> int:
        if (
            not self.in_bounds(current)
            or not self.in_bounds(neighbor)
            or abs(current[0] - neighbor[0]) + abs(current[1] - neighbor[1]) != 1
        ):
            raise MissingEdgeCostError(current, neighbor)
        return 1

    def __contains__(self, cell: object) -> bool:
        if not (isinstance(cell, tuple) and len(cell) == 2):
            return False
        if not all(isinstance(part, int) and not isinstance(part, bool) for part in cell):
            return False
        return self.in_bounds(cell)  # type: ignore[arg-type]

    def __len__(self) -> int:
        return self.width * self.height


__all__ = ["Cell", "Grid"]
