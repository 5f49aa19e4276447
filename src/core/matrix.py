"""
Square boolean matrix representing a binary relation on a finite set.

Cells are kept in a single flat list in row-major order; cell (i, j) lives at
index ``i * n + j``. Element i is related to element j iff the cell is True.
"""
from typing import Iterable, List, Optional, Sequence

from src.config import Config
from src.core.errors import InvalidSize


class RelationMatrix:
    """Fixed-size n x n boolean grid, all cells False on creation."""

    __slots__ = ('n', '_cells')

    def __init__(self, n: int, max_size: Optional[int] = None):
        if max_size is None:
            max_size = Config.MAX_UNIVERSE_SIZE
        if n <= 0 or n > max_size:
            raise InvalidSize(n, max_size)
        self.n = n
        self._cells: List[bool] = [False] * (n * n)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[object]], max_size: Optional[int] = None) -> 'RelationMatrix':
        """Build a matrix from nested rows of truthy/falsy values (must be square)."""
        matrix = cls(len(rows), max_size=max_size)
        for i, row in enumerate(rows):
            matrix.set_row(i, row)
        return matrix

    def _index(self, i: int, j: int) -> int:
        if not (0 <= i < self.n and 0 <= j < self.n):
            raise IndexError(f"Cell ({i}, {j}) is outside a {self.n}x{self.n} matrix")
        return i * self.n + j

    def get(self, i: int, j: int) -> bool:
        return self._cells[self._index(i, j)]

    def set(self, i: int, j: int, value: bool) -> None:
        self._cells[self._index(i, j)] = bool(value)

    def set_row(self, i: int, values: Iterable[object]) -> None:
        """Store one row. Exactly n values are required."""
        values = [bool(v) for v in values]
        if len(values) != self.n:
            raise ValueError(f"Row {i} has {len(values)} values, expected {self.n}")
        start = self._index(i, 0)
        self._cells[start:start + self.n] = values

    def row(self, i: int) -> List[bool]:
        start = self._index(i, 0)
        return self._cells[start:start + self.n]

    def rows(self) -> List[List[bool]]:
        return [self.row(i) for i in range(self.n)]

    def copy(self) -> 'RelationMatrix':
        # Bypass __init__ so a copy never depends on the current size limit
        clone = RelationMatrix.__new__(RelationMatrix)
        clone.n = self.n
        clone._cells = list(self._cells)
        return clone

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RelationMatrix):
            return NotImplemented
        return self.n == other.n and self._cells == other._cells

    def __repr__(self) -> str:
        bits = '/'.join(''.join('1' if cell else '0' for cell in row) for row in self.rows())
        return f"RelationMatrix(n={self.n}, rows={bits})"
