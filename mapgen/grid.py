# mapgen/grid.py

from typing import Iterator, List, Optional, Sequence, Tuple

import numpy as np

ENTRANCE = 0
EXIT = 1

_CODE_MIN = int(np.iinfo(np.int64).min)
_CODE_MAX = int(np.iinfo(np.int64).max)


class Grid:
    """Rectangular tile-code map stored as a row-major (C order) numpy buffer.

    Indexing goes through get/set so negative or out-of-range coordinates
    fail loudly instead of wrapping around like raw numpy indexing would.
    """

    def __init__(self, h: int, w: int, cells: Optional[np.ndarray] = None):
        self.h = h
        self.w = w
        if cells is None:
            cells = np.zeros((h, w), dtype=np.int64)
        if cells.shape != (h, w):
            raise ValueError(f"Cell buffer shape {cells.shape} does not match {h}x{w}")
        self.cells = np.ascontiguousarray(cells, dtype=np.int64)

    @staticmethod
    def from_rows(rows: Sequence[Sequence[int]]) -> "Grid":
        rows = [list(r) for r in rows]
        h = len(rows)
        w = len(rows[0]) if h else 0
        for i, r in enumerate(rows):
            if len(r) != w:
                raise ValueError(f"Row {i} has {len(r)} columns, expected {w}")
            for j, v in enumerate(r):
                if isinstance(v, bool) or not isinstance(v, (int, np.integer)):
                    raise ValueError(f"Cell ({i}, {j}) is {v!r}, expected an integer tile code")
                if not (_CODE_MIN <= v <= _CODE_MAX):
                    raise ValueError(f"Cell ({i}, {j}) value {v} does not fit a tile code")
        cells = np.array(rows, dtype=np.int64).reshape(h, w)
        return Grid(h, w, cells)

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.h, self.w)

    def _check(self, r: int, c: int):
        if not (0 <= r < self.h and 0 <= c < self.w):
            raise IndexError(f"Cell ({r}, {c}) outside {self.h}x{self.w} grid")

    def get(self, r: int, c: int) -> int:
        self._check(r, c)
        return int(self.cells[r, c])

    def set(self, r: int, c: int, code: int):
        self._check(r, c)
        self.cells[r, c] = code

    def count(self, code: int) -> int:
        return int(np.count_nonzero(self.cells == code))

    def distinct(self) -> int:
        return int(np.unique(self.cells).size)

    def coords(self) -> Iterator[Tuple[int, int]]:
        for r in range(self.h):
            for c in range(self.w):
                yield r, c

    def to_rows(self) -> List[List[int]]:
        return [[int(v) for v in row] for row in self.cells]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self.cells, other.cells))

    # mutable buffer, so grids compare by value but are not hashable
    __hash__ = None

    def __repr__(self) -> str:
        return f"Grid({self.h}x{self.w}, {self.to_rows()!r})"
