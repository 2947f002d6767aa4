# =============================================================================
# Infiltration Pathing Engine - Dense Storage
# =============================================================================
"""
Index-aligned storage backing the graph core.

A graph keeps three structures in lock-step:
- VertexTable: vertex values in insertion order
- AdjacencyMatrix: square boolean matrix of edge presence
- WeightMatrix: square float matrix of edge cost (+inf means no edge)

All three share one capacity and one vertex count. Growth doubles the
capacity and copies the live n x n block into the top-left of the new
allocation; removal shifts every higher index down by one.
"""

import logging
from typing import Any, Generic, Iterator, List, Optional, TypeVar

import numpy as np

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_CAPACITY = 10
GROWTH_FACTOR = 2


# =============================================================================
# Vertex Table
# =============================================================================

class VertexTable(Generic[T]):
    """
    Growable slot array mapping vertex values to small integer indices.

    Lookup is a linear scan by equality, so vertices only need __eq__.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        if capacity < 1:
            raise ValueError(f"Capacity must be positive, got {capacity}")
        self._slots: List[Optional[T]] = [None] * capacity
        self._count = 0

    @property
    def capacity(self) -> int:
        return len(self._slots)

    @property
    def is_full(self) -> bool:
        return self._count == len(self._slots)

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[T]:
        for i in range(self._count):
            yield self._slots[i]

    def grow(self, new_capacity: int):
        """Reallocate the slot array, keeping the first count entries"""
        if new_capacity < self._count:
            raise ValueError("New capacity cannot drop live vertices")
        self._slots = self._slots[:self._count] + [None] * (new_capacity - self._count)

    def append(self, vertex: T) -> int:
        """Store a vertex at the next free index and return that index"""
        if self.is_full:
            raise OverflowError("Vertex table is full; grow() first")
        index = self._count
        self._slots[index] = vertex
        self._count += 1
        return index

    def find(self, vertex: Any) -> int:
        """Return the index of the first equal vertex, or -1"""
        for i in range(self._count):
            if self._slots[i] == vertex:
                return i
        return -1

    def get(self, index: int) -> T:
        return self._slots[index]

    def remove_at(self, index: int) -> T:
        """Remove the vertex at index, shifting later vertices down by one"""
        removed = self._slots[index]
        for i in range(index, self._count - 1):
            self._slots[i] = self._slots[i + 1]
        self._slots[self._count - 1] = None
        self._count -= 1
        return removed


# =============================================================================
# Square Matrices
# =============================================================================

class _SquareMatrix:
    """
    Square numpy buffer whose live region is the top-left size x size block.

    Cells outside the live region always hold the fill value, so a newly
    appended index starts out with a clean row and column.
    """

    dtype: Any = float
    fill: Any = 0

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        self._data = np.full((capacity, capacity), self.fill, dtype=self.dtype)
        self._size = 0

    @property
    def capacity(self) -> int:
        return self._data.shape[0]

    @property
    def size(self) -> int:
        return self._size

    def grow(self, new_capacity: int):
        """Reallocate and copy the live block into the new top-left corner"""
        n = self._size
        data = np.full((new_capacity, new_capacity), self.fill, dtype=self.dtype)
        data[:n, :n] = self._data[:n, :n]
        self._data = data

    def append_index(self) -> int:
        """Claim the next index and reset its row and column"""
        index = self._size
        if index >= self.capacity:
            raise OverflowError("Matrix is full; grow() first")
        self._data[index, :index + 1] = self.fill
        self._data[:index + 1, index] = self.fill
        self._size += 1
        return index

    def compact(self, index: int):
        """Drop row and column `index`, shifting the higher ones up/left"""
        n = self._size
        self._data[index:n - 1, :n] = self._data[index + 1:n, :n].copy()
        self._data[:n, index:n - 1] = self._data[:n, index + 1:n].copy()
        self._data[n - 1, :n] = self.fill
        self._data[:n, n - 1] = self.fill
        self._size -= 1

    def get(self, i: int, j: int):
        return self._data[i, j]

    def set_symmetric(self, i: int, j: int, value):
        self._data[i, j] = value
        self._data[j, i] = value

    def row(self, i: int) -> np.ndarray:
        """Live part of row i (a view, do not mutate)"""
        return self._data[i, :self._size]

    def snapshot(self) -> np.ndarray:
        """Copy of the live block"""
        return self._data[:self._size, :self._size].copy()


class AdjacencyMatrix(_SquareMatrix):
    """Boolean edge-presence matrix"""

    dtype = bool
    fill = False

    def neighbors(self, i: int) -> List[int]:
        """Indices adjacent to i, ascending"""
        return [int(j) for j in np.flatnonzero(self.row(i))]


class WeightMatrix(_SquareMatrix):
    """Float edge-cost matrix; +inf marks the absence of an edge"""

    dtype = np.float64
    fill = np.inf

    def get(self, i: int, j: int) -> float:
        return float(self._data[i, j])
