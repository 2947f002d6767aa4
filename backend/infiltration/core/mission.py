# =============================================================================
# Infiltration Pathing Engine - Missions
# =============================================================================
"""
Mission definitions, world building and route planning.

A MissionDefinition is plain data: room names, connections, enemy and
item placements, entries/exits and the target room. build_network turns
it into a DynamicCostNetwork with every connection weighted
initial_edge_weight. RoutePlanner answers the per-turn questions asked
while the mission runs.
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from .data_structures import Enemy, PathingConfig, Room, create_item
from .enums import ItemType
from .exceptions import MissionError
from .game_network import AgentLike, DynamicCostNetwork, as_snapshot

logger = logging.getLogger(__name__)


# =============================================================================
# Mission Definition
# =============================================================================

@dataclass
class EnemyPlacement:
    """An enemy and the room it starts in"""
    name: str
    power: int
    room: str


@dataclass
class ItemPlacement:
    """An item and the room it lies in"""
    item_type: ItemType
    points: int
    room: str
    name: str = ""


@dataclass
class MissionDefinition:
    """
    Everything needed to build the building network for one mission version.
    """
    code: str
    version: int = 1
    rooms: List[str] = field(default_factory=list)
    connections: List[Tuple[str, str]] = field(default_factory=list)
    enemies: List[EnemyPlacement] = field(default_factory=list)
    items: List[ItemPlacement] = field(default_factory=list)
    entries_exits: List[str] = field(default_factory=list)
    target: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {
            "code": self.code,
            "version": self.version,
            "rooms": list(self.rooms),
            "connections": [list(pair) for pair in self.connections],
            "enemies": [
                {"name": e.name, "power": e.power, "room": e.room}
                for e in self.enemies
            ],
            "items": [
                {"type": i.item_type.name, "points": i.points, "room": i.room, "name": i.name}
                for i in self.items
            ],
            "entries_exits": list(self.entries_exits),
            "target": self.target,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MissionDefinition":
        """Create a definition from a dictionary"""
        return cls(
            code=data["code"],
            version=data.get("version", 1),
            rooms=list(data.get("rooms", [])),
            connections=[(a, b) for a, b in data.get("connections", [])],
            enemies=[
                EnemyPlacement(name=e["name"], power=e["power"], room=e["room"])
                for e in data.get("enemies", [])
            ],
            items=[
                ItemPlacement(
                    item_type=ItemType.from_name(i["type"]),
                    points=i["points"],
                    room=i["room"],
                    name=i.get("name", ""),
                )
                for i in data.get("items", [])
            ],
            entries_exits=list(data.get("entries_exits", [])),
            target=data.get("target"),
        )


def build_network(
    definition: MissionDefinition,
    config: Optional[PathingConfig] = None
) -> DynamicCostNetwork:
    """
    Build the building network described by a mission definition.

    Raises:
        DuplicateVertex: a room name is listed twice
        VertexNotFound: a placement names an unknown room
        InvalidVertex: a connection names an unknown room
    """
    config = config or PathingConfig()
    network = DynamicCostNetwork(max(config.default_capacity, 1))

    for name in definition.rooms:
        network.add_vertex(Room(name))

    for room1, room2 in definition.connections:
        network.add_edge(Room(room1), Room(room2), config.initial_edge_weight)

    for placement in definition.enemies:
        room = network.get_room(placement.room)
        room.add_enemy(Enemy(name=placement.name, power=placement.power))

    for i, placement in enumerate(definition.items):
        room = network.get_room(placement.room)
        name = placement.name or f"{placement.item_type}_{i + 1}"
        room.add_item(create_item(placement.item_type, name, placement.points))

    for name in definition.entries_exits:
        network.get_room(name).is_entry_exit = True

    if definition.target is not None:
        network.get_room(definition.target).is_target = True

    logger.info("Built mission %s v%d: %d rooms, %d connections",
                definition.code, definition.version,
                network.size(), len(definition.connections))
    return network


# =============================================================================
# Route Planning
# =============================================================================

@dataclass
class RouteAdvice:
    """Suggested route from the agent's room to a destination"""
    start: Room
    destination: Room
    path: List[Room]
    weight: float

    @property
    def reachable(self) -> bool:
        return bool(self.path)

    @property
    def next_hop(self) -> Optional[Room]:
        """Room to move into next, None when already there or unreachable"""
        if len(self.path) < 2:
            return None
        return self.path[1]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "start": self.start.name,
            "destination": self.destination.name,
            "path": [room.name for room in self.path],
            "weight": self.weight if math.isfinite(self.weight) else None,
            "next_hop": self.next_hop.name if self.next_hop else None,
        }


class RoutePlanner:
    """
    Answers the routing questions of a running mission.

    Every query derives edge costs from a fresh agent snapshot, so the
    answers always reflect the agent's state at the time of the call.
    """

    def __init__(self, network: DynamicCostNetwork):
        self.network = network

    def find_target_room(self) -> Room:
        for room in self.network.get_vertices():
            if room.is_target:
                return room
        raise MissionError("Target room not found in the mission")

    def entry_points(self) -> List[Room]:
        return [room for room in self.network.get_vertices() if room.is_entry_exit]

    def advisory_route(self, current: Any, destination: Any, agent: AgentLike) -> RouteAdvice:
        """Cheapest route from current to destination for the agent"""
        path, weight = self.network.shortest_route(current, destination, agent)
        start = self.network.get_vertex(self.network.get_index(current))
        end = self.network.get_vertex(self.network.get_index(destination))
        return RouteAdvice(start=start, destination=end, path=path, weight=weight)

    def find_best_entry_point(self, agent: AgentLike) -> Tuple[Room, float]:
        """
        Entry point with the cheapest route to the target.

        Ties go to the entry that comes first in the building.

        Raises:
            MissionError: no target, no entry point, or no entry reaches the target
        """
        target = self.find_target_room()
        entries = self.entry_points()
        if not entries:
            raise MissionError("No entry point found in the mission")

        snapshot = as_snapshot(agent)
        best_room: Optional[Room] = None
        best_weight = math.inf
        for room in entries:
            _, weight = self.network.shortest_route(room, target, snapshot)
            if weight < best_weight:
                best_room, best_weight = room, weight

        if best_room is None:
            raise MissionError(f"No entry point reaches target {target.name}")

        logger.debug("Best entry point %s (weight %.2f)", best_room.name, best_weight)
        return best_room, best_weight

    def next_room(self, current: Any, destination: Any, agent: AgentLike) -> Room:
        """
        Next room to move into on the way to destination.

        Raises:
            MissionError: already at destination, or it cannot be reached
        """
        advice = self.advisory_route(current, destination, agent)
        if advice.next_hop is None:
            raise MissionError(
                f"No valid next room from {advice.start.name} to {advice.destination.name}"
            )
        return advice.next_hop

    def closest_medkit_room(self, current: Any, agent: AgentLike) -> Optional[RouteAdvice]:
        """Route to the med kit room with the cheapest route, or None"""
        best: Optional[RouteAdvice] = None
        for room in self.network.get_vertices():
            if not room.has_medkit:
                continue
            advice = self.advisory_route(current, room, agent)
            if advice.reachable and (best is None or advice.weight < best.weight):
                best = advice
        return best


# =============================================================================
# Convenience function
# =============================================================================

def create_planner(
    definition: MissionDefinition,
    config: Optional[PathingConfig] = None
) -> RoutePlanner:
    """
    Build a mission network and wrap it in a planner.

    Args:
        definition: Mission to build
        config: Optional pathing configuration

    Returns:
        RoutePlanner over the new network
    """
    return RoutePlanner(build_network(definition, config))


def sample_mission() -> MissionDefinition:
    """Small building used by the demo and the tests"""
    return MissionDefinition(
        code="pr-1",
        version=1,
        rooms=["Heliport", "Hall", "Armory", "Corridor", "Infirmary", "Lab", "Garage"],
        connections=[
            ("Heliport", "Hall"),
            ("Hall", "Armory"),
            ("Hall", "Corridor"),
            ("Armory", "Lab"),
            ("Corridor", "Lab"),
            ("Corridor", "Infirmary"),
            ("Garage", "Corridor"),
        ],
        enemies=[
            EnemyPlacement(name="Guard", power=40, room="Armory"),
            EnemyPlacement(name="Sentry", power=15, room="Hall"),
        ],
        items=[
            ItemPlacement(item_type=ItemType.MEDKIT, points=30, room="Infirmary", name="Kit"),
            ItemPlacement(item_type=ItemType.KEVLAR, points=20, room="Garage", name="Vest"),
        ],
        entries_exits=["Heliport", "Garage"],
        target="Lab",
    )
