# =============================================================================
# Infiltration Pathing Engine - Dynamic Cost Network
# =============================================================================
"""
Building network whose edge costs follow the agent's current state.

Stepping into a room costs the damage the agent expects to absorb while
killing its enemies, minus the healing it could still use, minus the
kevlar lying in that room. Healing and armor rooms can therefore have
negative cost. Dijkstra is still used as is: it is not a general
negative-weight solver, and routes through such rooms are best-effort.

Two ways to query:
- update_all_edge_weights(agent) followed by the plain Network queries
  (the weight matrix is symmetric, so each edge keeps the cost of its
  last write)
- shortest_route(start, target, agent), which injects the directed cost
  into the solver and leaves the matrix untouched
"""

import logging
import math
from typing import Any, List, Tuple, Union

from .data_structures import Agent, AgentSnapshot, Room
from .matrix import DEFAULT_CAPACITY
from .network import Network

logger = logging.getLogger(__name__)

AgentLike = Union[Agent, AgentSnapshot]


def as_snapshot(agent: AgentLike) -> AgentSnapshot:
    if isinstance(agent, AgentSnapshot):
        return agent
    return agent.snapshot()


def combat_cost(room: Room, agent: AgentSnapshot) -> float:
    """
    Expected damage taken clearing a room.

    Each enemy needs ceil(enemy / agent) agent turns to fall and strikes on
    every turn but the last one.
    """
    total = 0.0
    for enemy in room.enemies:
        if enemy.power <= 0:
            continue
        if agent.power <= 0:
            return math.inf
        turns = math.ceil(enemy.power / agent.power)
        total += max(0, (turns - 1) * enemy.power)
    return total


def healing_benefit(agent: AgentSnapshot) -> int:
    """Health the best carried med kit could restore right now"""
    return min(agent.missing_health, agent.best_healing)


def room_entry_cost(room: Room, agent: AgentLike) -> float:
    """Cost of stepping into a room for the given agent state"""
    snapshot = as_snapshot(agent)
    return combat_cost(room, snapshot) - healing_benefit(snapshot) - room.total_kevlar_points


class DynamicCostNetwork(Network[Room]):
    """
    Network of rooms with agent-dependent edge weights.

    Example:
        building = DynamicCostNetwork()
        building.add_vertex(Room("Hall"))
        building.add_vertex(Room("Lab"))
        building.add_edge(Room("Hall"), Room("Lab"), 1.0)
        path, weight = building.shortest_route(Room("Hall"), Room("Lab"), agent)
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        super().__init__(capacity)

    # =========================================================================
    # Lookup
    # =========================================================================

    def get_room(self, name: str) -> Room:
        """Stored room with the given name"""
        return self.get_vertex(self.get_index(Room(name)))

    def rooms(self) -> List[Room]:
        return self.get_vertices()

    # =========================================================================
    # Cost Model
    # =========================================================================

    def edge_cost(self, to: Room, agent: AgentLike) -> float:
        """Cost of entering `to`, using the stored room's contents"""
        stored = self.get_vertex(self._require(to))
        return room_entry_cost(stored, agent)

    def update_edge_weight(self, from_room: Any, to_room: Any, agent_or_weight):
        """
        Recompute the weight of the edge from_room-to_room.

        Passing an Agent or AgentSnapshot derives the weight from the cost
        model; passing a number sets it directly like Network does.
        """
        if isinstance(agent_or_weight, (Agent, AgentSnapshot)):
            weight = self.edge_cost(to_room, agent_or_weight)
        else:
            weight = agent_or_weight
        super().update_edge_weight(from_room, to_room, weight)

    def update_all_edge_weights(self, agent: AgentLike):
        """
        Recompute every edge from the agent's current state.

        Rooms are visited in index order and their neighbours in index
        order, so the result is the same on every call for the same state.
        """
        snapshot = as_snapshot(agent)
        updated = 0
        for room in self.get_vertices():
            for neighbor in self.get_adjacent_vertices(room):
                self.update_edge_weight(room, neighbor, snapshot)
                updated += 1
        logger.debug("Recomputed %d edge weights for %s", updated, snapshot)

    # =========================================================================
    # Route Queries
    # =========================================================================

    def shortest_route(
        self,
        start: Any,
        target: Any,
        agent: AgentLike
    ) -> Tuple[List[Room], float]:
        """
        Cheapest route for the agent without touching the weight matrix.

        Each step costs the entry cost of the room being entered.

        Returns:
            (path, weight); ([], inf) when the target cannot be reached
        """
        snapshot = as_snapshot(agent)
        return self.shortest_path(
            start, target,
            cost=lambda _from, to: room_entry_cost(to, snapshot)
        )
