# =============================================================================
# Infiltration Pathing Engine - Backend Package
# =============================================================================
"""
Infiltration Pathing Engine

Adjacency-matrix graph core with BFS/DFS traversal, connectivity checks and
Dijkstra shortest paths, plus a mission layer whose room-to-room costs are
derived from the infiltrating agent's current state.
"""

__version__ = "0.1.0"
