# =============================================================================
# Infiltration Pathing Engine - Graph
# =============================================================================
"""
Undirected graph backed by an adjacency matrix.

Vertices are arbitrary equality-comparable values. The public API takes
vertex values, never raw indices: indices shift whenever a vertex is
removed, and `generation` counts those removals so anyone holding an
index can tell it went stale.

Traversals scan neighbours in ascending index order (insertion order),
which makes every result reproducible for a given construction order.
"""

import logging
from collections import deque
from typing import Any, Generic, Iterator, List, TypeVar

from .exceptions import (
    DuplicateVertex, IndexOutOfRange, InvalidVertex, VertexNotFound
)
from .matrix import AdjacencyMatrix, DEFAULT_CAPACITY, GROWTH_FACTOR, VertexTable

logger = logging.getLogger(__name__)

T = TypeVar("T")

NO_PARENT = -1


class Graph(Generic[T]):
    """
    Adjacency-matrix graph.

    Example:
        graph = Graph()
        graph.add_vertex("A")
        graph.add_vertex("B")
        graph.add_edge("A", "B")
        list(graph.iterator_bfs("A"))  # ["A", "B"]
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        self._vertices: VertexTable[T] = VertexTable(capacity)
        self._adjacency = AdjacencyMatrix(capacity)
        self._generation = 0

    # =========================================================================
    # Size / Containment
    # =========================================================================

    def size(self) -> int:
        return len(self._vertices)

    def is_empty(self) -> bool:
        return len(self._vertices) == 0

    def __len__(self) -> int:
        return len(self._vertices)

    def __contains__(self, vertex: Any) -> bool:
        return self.contains(vertex)

    def contains(self, vertex: Any) -> bool:
        return self._vertices.find(vertex) >= 0

    @property
    def capacity(self) -> int:
        return self._vertices.capacity

    @property
    def generation(self) -> int:
        """Incremented on every vertex removal; indices from older generations are stale"""
        return self._generation

    # =========================================================================
    # Index Resolution
    # =========================================================================

    def get_index(self, vertex: Any) -> int:
        """Current index of a vertex"""
        index = self._vertices.find(vertex)
        if index < 0:
            raise VertexNotFound(f"Vertex not found: {vertex!r}")
        return index

    def get_vertex(self, index: int) -> T:
        """Vertex stored at a given index"""
        if not self._index_is_valid(index):
            raise IndexOutOfRange(f"Invalid index: {index}")
        return self._vertices.get(index)

    def get_vertices(self) -> List[T]:
        """All vertices in current index order"""
        return list(self._vertices)

    def get_adjacent_vertices(self, vertex: Any) -> List[T]:
        """Neighbours of a vertex in ascending index order"""
        index = self._require(vertex)
        return [self._vertices.get(j) for j in self._adjacency.neighbors(index)]

    def _index_is_valid(self, index: int) -> bool:
        return 0 <= index < len(self._vertices)

    def _require(self, vertex: Any) -> int:
        """Resolve a vertex for an edge/traversal operation"""
        index = self._vertices.find(vertex)
        if index < 0:
            raise InvalidVertex(f"Invalid vertex: {vertex!r}")
        return index

    def _require_pair(self, vertex1: Any, vertex2: Any):
        index1 = self._vertices.find(vertex1)
        index2 = self._vertices.find(vertex2)
        if index1 < 0 or index2 < 0:
            raise InvalidVertex(f"Invalid vertex: {vertex1!r} or {vertex2!r}")
        return index1, index2

    # =========================================================================
    # Vertex Mutation
    # =========================================================================

    def add_vertex(self, vertex: T):
        """
        Add a vertex, doubling capacity first if the graph is full.

        Raises:
            DuplicateVertex: an equal vertex is already present
        """
        if self.contains(vertex):
            raise DuplicateVertex(f"Vertex already exists in the graph: {vertex!r}")

        if self._vertices.is_full:
            self._expand_capacity(self._vertices.capacity * GROWTH_FACTOR)

        self._vertices.append(vertex)
        self._append_index()

    def remove_vertex(self, vertex: Any):
        """
        Remove a vertex and every edge touching it.

        All vertices after it move down one index.

        Raises:
            VertexNotFound: the vertex is not present
        """
        index = self.get_index(vertex)
        self._vertices.remove_at(index)
        self._compact(index)
        self._generation += 1
        logger.debug("Removed vertex %r at index %d (generation %d)",
                     vertex, index, self._generation)

    def _expand_capacity(self, new_capacity: int):
        logger.debug("Growing graph capacity %d -> %d",
                     self._vertices.capacity, new_capacity)
        self._vertices.grow(new_capacity)
        self._adjacency.grow(new_capacity)

    def _append_index(self):
        self._adjacency.append_index()

    def _compact(self, index: int):
        self._adjacency.compact(index)

    # =========================================================================
    # Edge Mutation / Queries
    # =========================================================================

    def add_edge(self, vertex1: Any, vertex2: Any):
        """Connect two vertices (undirected)"""
        index1, index2 = self._require_pair(vertex1, vertex2)
        self._adjacency.set_symmetric(index1, index2, True)

    def remove_edge(self, vertex1: Any, vertex2: Any):
        """Disconnect two vertices; a missing edge is left as is"""
        index1, index2 = self._require_pair(vertex1, vertex2)
        self._adjacency.set_symmetric(index1, index2, False)

    def is_adjacent(self, vertex1: Any, vertex2: Any) -> bool:
        index1, index2 = self._require_pair(vertex1, vertex2)
        return bool(self._adjacency.get(index1, index2))

    def _has_edge(self, index1: int, index2: int) -> bool:
        return bool(self._adjacency.get(index1, index2))

    # =========================================================================
    # Traversals
    # =========================================================================

    def iterator_bfs(self, start_vertex: Any) -> Iterator[T]:
        """
        Breadth-first traversal from start_vertex.

        A vertex is marked visited when enqueued and emitted when dequeued.
        Vertices unreachable from the start are not included.
        """
        start = self._require(start_vertex)
        visited = [False] * self.size()
        queue = deque([start])
        visited[start] = True
        result: List[T] = []

        while queue:
            current = queue.popleft()
            result.append(self._vertices.get(current))
            for neighbor in self._adjacency.neighbors(current):
                if not visited[neighbor]:
                    visited[neighbor] = True
                    queue.append(neighbor)

        return iter(result)

    def iterator_dfs(self, start_vertex: Any) -> Iterator[T]:
        """
        Depth-first traversal from start_vertex.

        A vertex is emitted as soon as it is pushed. At each step the
        lowest-index unvisited neighbour of the stack top is pushed; the top
        is popped only once it has no unvisited neighbour left.
        """
        start = self._require(start_vertex)
        visited = [False] * self.size()
        stack = [start]
        visited[start] = True
        result: List[T] = [self._vertices.get(start)]

        while stack:
            current = stack[-1]
            for neighbor in self._adjacency.neighbors(current):
                if not visited[neighbor]:
                    visited[neighbor] = True
                    stack.append(neighbor)
                    result.append(self._vertices.get(neighbor))
                    break
            else:
                stack.pop()

        return iter(result)

    def iterator_shortest_path(self, start_vertex: Any, target_vertex: Any) -> Iterator[T]:
        """
        Fewest-hops path from start to target (edge weights ignored).

        Yields nothing when the target is unreachable.
        """
        start, target = self._require_pair(start_vertex, target_vertex)
        parents = self._bfs_parents(start, target)
        return iter(self._build_path(parents, start, target))

    def _bfs_parents(self, start: int, target: int) -> List[int]:
        """BFS from start with early exit on target; returns the parent array"""
        n = self.size()
        visited = [False] * n
        parents = [NO_PARENT] * n
        queue = deque([start])
        visited[start] = True

        while queue:
            current = queue.popleft()
            if current == target:
                break
            for neighbor in self._adjacency.neighbors(current):
                if not visited[neighbor]:
                    visited[neighbor] = True
                    parents[neighbor] = current
                    queue.append(neighbor)

        return parents

    def _build_path(self, parents: List[int], start: int, target: int) -> List[T]:
        """Walk parent pointers back from target; empty if target was never reached"""
        if target != start and parents[target] == NO_PARENT:
            return []
        path: List[T] = []
        at = target
        while at != NO_PARENT:
            path.append(self._vertices.get(at))
            at = parents[at]
        path.reverse()
        return path

    def is_connected(self) -> bool:
        """True iff every vertex is reachable from index 0"""
        n = self.size()
        if n <= 1:
            return True

        visited = [False] * n
        queue = deque([0])
        visited[0] = True
        while queue:
            current = queue.popleft()
            for neighbor in self._adjacency.neighbors(current):
                if not visited[neighbor]:
                    visited[neighbor] = True
                    queue.append(neighbor)

        return all(visited)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self.size()}, capacity={self.capacity})"
