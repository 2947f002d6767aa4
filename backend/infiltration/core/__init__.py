# =============================================================================
# Core Pathing Module
# =============================================================================
"""
Core pathing components including:
- Dense vertex/adjacency/weight storage
- Graph traversals and weighted shortest paths
- Agent-dependent edge costs for mission buildings
- Mission definitions and route planning
"""

from .enums import ItemType, TraversalOrder
from .exceptions import (
    GraphError, InvalidVertex, DuplicateVertex, VertexNotFound,
    IndexOutOfRange, EmptyOperation, MissionError
)
from .matrix import VertexTable, AdjacencyMatrix, WeightMatrix, DEFAULT_CAPACITY
from .graph import Graph
from .network import Network
from .data_structures import (
    PathingConfig, Item, MedKit, Kevlar, Enemy,
    Agent, AgentSnapshot, Room, create_item
)
from .game_network import DynamicCostNetwork, room_entry_cost
from .mission import (
    EnemyPlacement, ItemPlacement, MissionDefinition, RouteAdvice,
    RoutePlanner, build_network, create_planner, sample_mission
)

__all__ = [
    # Enums
    "ItemType", "TraversalOrder",
    # Errors
    "GraphError", "InvalidVertex", "DuplicateVertex", "VertexNotFound",
    "IndexOutOfRange", "EmptyOperation", "MissionError",
    # Storage
    "VertexTable", "AdjacencyMatrix", "WeightMatrix", "DEFAULT_CAPACITY",
    # Graphs
    "Graph", "Network", "DynamicCostNetwork", "room_entry_cost",
    # Data structures
    "PathingConfig", "Item", "MedKit", "Kevlar", "Enemy",
    "Agent", "AgentSnapshot", "Room", "create_item",
    # Missions
    "EnemyPlacement", "ItemPlacement", "MissionDefinition", "RouteAdvice",
    "RoutePlanner", "build_network", "create_planner", "sample_mission",
]
