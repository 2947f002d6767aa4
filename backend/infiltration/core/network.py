# =============================================================================
# Infiltration Pathing Engine - Weighted Network
# =============================================================================
"""
Weighted undirected graph with a dense Dijkstra solver.

The weight matrix is index-aligned with the adjacency matrix but
independent of it: an edge added without a weight keeps whatever value
the weight cell already holds (+inf for a fresh pair).

Dijkstra runs over the dense matrix with a linear scan for the next
vertex to settle, O(V^2) in total. Graphs here are small and dense, so
there is no priority queue.
"""

import logging
import math
from typing import Any, Callable, Iterator, List, Optional, Tuple, TypeVar

from .graph import Graph, NO_PARENT
from .matrix import DEFAULT_CAPACITY, WeightMatrix

logger = logging.getLogger(__name__)

T = TypeVar("T")

# cost(from_vertex, to_vertex) -> directed cost of stepping into to_vertex
CostFunction = Callable[[Any, Any], float]


class Network(Graph[T]):
    """
    Adjacency-matrix graph with symmetric edge weights.

    Example:
        net = Network()
        for v in "ABC":
            net.add_vertex(v)
        net.add_edge("A", "B", 2.0)
        net.add_edge("B", "C", 3.0)
        net.add_edge("A", "C", 10.0)
        net.shortest_path_weight("A", "C")        # 5.0
        list(net.iterator_shortest_path("A", "C"))  # ["A", "B", "C"]
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        super().__init__(capacity)
        self._weights = WeightMatrix(capacity)

    # =========================================================================
    # Storage hooks (keep the weight matrix in lock-step)
    # =========================================================================

    def _expand_capacity(self, new_capacity: int):
        super()._expand_capacity(new_capacity)
        self._weights.grow(new_capacity)

    def _append_index(self):
        super()._append_index()
        self._weights.append_index()

    def _compact(self, index: int):
        super()._compact(index)
        self._weights.compact(index)

    # =========================================================================
    # Weighted Edges
    # =========================================================================

    def add_edge(self, vertex1: Any, vertex2: Any, weight: Optional[float] = None):
        """
        Connect two vertices, optionally setting the edge weight.

        Raises:
            InvalidVertex: either endpoint is not in the network
        """
        index1, index2 = self._require_pair(vertex1, vertex2)
        self._adjacency.set_symmetric(index1, index2, True)
        if weight is not None:
            self._weights.set_symmetric(index1, index2, float(weight))

    def remove_edge(self, vertex1: Any, vertex2: Any):
        """Disconnect two vertices and reset the weight to +inf"""
        index1, index2 = self._require_pair(vertex1, vertex2)
        self._adjacency.set_symmetric(index1, index2, False)
        self._weights.set_symmetric(index1, index2, math.inf)

    def update_edge_weight(self, vertex1: Any, vertex2: Any, new_weight: float):
        """
        Change the weight of an existing edge.

        Does nothing when the vertices are not connected.

        Raises:
            InvalidVertex: either endpoint is not in the network
        """
        index1, index2 = self._require_pair(vertex1, vertex2)
        if not self._has_edge(index1, index2):
            logger.debug("Skipping weight update for missing edge %r-%r", vertex1, vertex2)
            return
        self._weights.set_symmetric(index1, index2, float(new_weight))

    def get_edge_weight(self, vertex1: Any, vertex2: Any) -> float:
        """Weight of an edge; +inf for unknown vertices or missing edges"""
        index1 = self._vertices.find(vertex1)
        index2 = self._vertices.find(vertex2)
        if index1 < 0 or index2 < 0 or not self._has_edge(index1, index2):
            return math.inf
        return self._weights.get(index1, index2)

    def get_weight_matrix(self):
        """Copy of the live weight block as a numpy array"""
        return self._weights.snapshot()

    # =========================================================================
    # Shortest Paths
    # =========================================================================

    def _dijkstra(
        self,
        start: int,
        cost: Optional[CostFunction] = None
    ) -> Tuple[List[float], List[int]]:
        """
        Single-source shortest paths from index `start`.

        Args:
            start: index of the source vertex
            cost: optional directed cost over vertex values; defaults to
                  the weight matrix

        Returns:
            (distances, parents) indexed by vertex index
        """
        n = self.size()
        distances = [math.inf] * n
        settled = [False] * n
        parents = [NO_PARENT] * n
        distances[start] = 0.0

        while True:
            current = NO_PARENT
            min_distance = math.inf
            for i in range(n):
                if not settled[i] and distances[i] < min_distance:
                    current = i
                    min_distance = distances[i]

            if current == NO_PARENT:
                break

            settled[current] = True

            for neighbor in self._adjacency.neighbors(current):
                if settled[neighbor]:
                    continue
                if cost is None:
                    step = self._weights.get(current, neighbor)
                else:
                    step = cost(self._vertices.get(current), self._vertices.get(neighbor))
                candidate = distances[current] + step
                if candidate < distances[neighbor]:
                    distances[neighbor] = candidate
                    parents[neighbor] = current

        return distances, parents

    def shortest_path(
        self,
        start_vertex: Any,
        target_vertex: Any,
        cost: Optional[CostFunction] = None
    ) -> Tuple[List[T], float]:
        """
        Cheapest path and its total weight in one solver run.

        The path is empty and the weight +inf when the target is unreachable.

        Raises:
            InvalidVertex: either endpoint is not in the network
        """
        start, target = self._require_pair(start_vertex, target_vertex)
        distances, parents = self._dijkstra(start, cost)
        path = self._build_path(parents, start, target)
        logger.debug("Shortest path %r -> %r: weight=%s hops=%d",
                     start_vertex, target_vertex, distances[target], max(len(path) - 1, 0))
        return path, distances[target]

    def shortest_path_weight(self, start_vertex: Any, target_vertex: Any) -> float:
        """Total weight of the cheapest path; +inf when unreachable"""
        return self.shortest_path(start_vertex, target_vertex)[1]

    def iterator_shortest_path(self, start_vertex: Any, target_vertex: Any) -> Iterator[T]:
        """Vertices of the cheapest path; empty when unreachable"""
        return iter(self.shortest_path(start_vertex, target_vertex)[0])

    def iterator_fewest_hops(self, start_vertex: Any, target_vertex: Any) -> Iterator[T]:
        """Unweighted shortest path, ignoring edge weights"""
        return Graph.iterator_shortest_path(self, start_vertex, target_vertex)
