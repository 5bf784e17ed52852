"""
A two dimensional grid of values addressed by ``Pos``.

The values live in a numpy array indexed ``[row, col]``. Arbitrary payloads
use an object array; masks and counters use ``bool`` and integer arrays so
they can be combined with numpy arithmetic.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, Iterator, Optional, Set, Tuple

import numpy as np

from ..geometry.physical import Pos


class Matrix:
    """
    A fixed size, row-major grid.

    ``matrix[pos]`` fails with ``IndexError`` for positions outside the grid;
    use ``get`` for positions that may lie outside. Numeric and boolean
    matrices created without a default start zeroed.
    """

    def __init__(self, width: int, height: int, default: Any = None, dtype=object):
        if width < 0 or height < 0:
            raise ValueError(f"Invalid matrix dimensions {width}x{height}")
        self.width = width
        self.height = height
        if default is None and np.dtype(dtype) != np.dtype(object):
            self.data = np.zeros((height, width), dtype=dtype)
        else:
            self.data = np.full((height, width), default, dtype=dtype)

    @classmethod
    def new_with_data(cls, width: int, height: int, data: Callable[[Pos], Any],
                      dtype=object) -> Matrix:
        """Create a matrix whose cells are initialised by calling ``data(pos)``."""
        result = cls(width, height, dtype=dtype)
        for pos in result.positions():
            result.data[pos.row, pos.col] = data(pos)
        return result

    @classmethod
    def from_array(cls, array: np.ndarray) -> Matrix:
        height, width = array.shape
        result = cls(width, height, dtype=array.dtype)
        result.data = array.copy()
        return result

    # -- access --

    def is_inside(self, pos: Pos) -> bool:
        return 0 <= pos.col < self.width and 0 <= pos.row < self.height

    def get(self, pos: Pos, default: Any = None) -> Any:
        """Returns the value at ``pos``, or ``default`` outside the matrix."""
        if self.is_inside(pos):
            return self.data[pos.row, pos.col]
        return default

    def __getitem__(self, pos: Pos) -> Any:
        if not self.is_inside(pos):
            raise IndexError(f"{pos} is outside of {self.width}x{self.height} matrix")
        return self.data[pos.row, pos.col]

    def __setitem__(self, pos: Pos, value: Any):
        if not self.is_inside(pos):
            raise IndexError(f"{pos} is outside of {self.width}x{self.height} matrix")
        self.data[pos.row, pos.col] = value

    def positions(self) -> Iterator[Pos]:
        """Yield every position, row by row."""
        for row in range(self.height):
            for col in range(self.width):
                yield Pos(col, row)

    def values(self) -> Iterator[Any]:
        for row in range(self.height):
            for col in range(self.width):
                yield self.data[row, col]

    def __len__(self) -> int:
        return self.width * self.height

    # -- transforms --

    def map(self, fn: Callable[[Any], Any], dtype=object) -> Matrix:
        return Matrix.new_with_data(self.width, self.height, lambda pos: fn(self[pos]), dtype)

    def map_with_pos(self, fn: Callable[[Pos, Any], Any], dtype=object) -> Matrix:
        return Matrix.new_with_data(
            self.width, self.height, lambda pos: fn(pos, self[pos]), dtype)

    def fill(self, pos: Pos, value: Any, neighbors: Callable[[Pos], Iterable[Pos]]) -> int:
        """
        Flood fill from a position.

        Every cell reachable from ``pos`` through ``neighbors`` and not already
        holding ``value`` is set to ``value``.

        Returns:
            The number of cells changed, or 0 if ``pos`` is outside
        """
        if not self.is_inside(pos):
            return 0

        count = 1
        self[pos] = value
        path = [pos]
        while path:
            current = path[-1]
            following = next(
                (p for p in neighbors(current) if self.is_inside(p) and self[p] != value),
                None)
            if following is None:
                path.pop()
            else:
                count += 1
                self[following] = value
                path.append(following)
        return count

    def edges(self, neighbors: Callable[[Pos], Iterable[Pos]]) -> Dict[Tuple[Any, Any], Set[Tuple[Pos, Pos]]]:
        """
        Collect the borders between cells holding different values.

        Returns:
            A mapping from ``(low, high)`` value pairs to the set of
            ``(pos_low, pos_high)`` neighbour pairs on that border
        """
        result: Dict[Tuple[Any, Any], Set[Tuple[Pos, Pos]]] = {}
        for p1 in self.positions():
            for p2 in neighbors(p1):
                if not self.is_inside(p2):
                    continue
                k1, k2 = self[p1], self[p2]
                if k1 < k2:
                    result.setdefault((k1, k2), set()).add((p1, p2))
                elif k2 < k1:
                    result.setdefault((k2, k1), set()).add((p2, p1))
        return result

    def copy(self) -> Matrix:
        result = Matrix(self.width, self.height, dtype=self.data.dtype)
        result.data = self.data.copy()
        return result

    def __add__(self, other: Matrix) -> Matrix:
        """Elementwise sum over the region both matrices cover."""
        width = min(self.width, other.width)
        height = min(self.height, other.height)
        result = self.copy()
        result.data[:height, :width] = self.data[:height, :width] + other.data[:height, :width]
        return result

    def __eq__(self, other) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return (self.width == other.width and self.height == other.height
                and all(a == b for a, b in zip(self.values(), other.values())))

    def __repr__(self) -> str:
        return f"Matrix({self.width}x{self.height}, dtype={self.data.dtype})"


def filter(width: int, height: int, predicate: Callable[[Pos], bool]) -> Tuple[int, Matrix]:
    """
    Build a boolean matrix from a predicate.

    Returns:
        The number of positions accepted, and the mask itself
    """
    mask = Matrix(width, height, False, dtype=bool)
    count = 0
    for pos in mask.positions():
        if predicate(pos):
            mask[pos] = True
            count += 1
    return count, mask


def candidate_count(mask: Matrix) -> int:
    return int(np.count_nonzero(mask.data))


def nth_set(mask: Matrix, n: int) -> Optional[Pos]:
    """Returns the n-th set position of a boolean matrix in row-major order."""
    rows, cols = np.nonzero(mask.data)
    if n < 0 or n >= len(rows):
        return None
    return Pos(int(cols[n]), int(rows[n]))
