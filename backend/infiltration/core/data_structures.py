# =============================================================================
# Infiltration Pathing Engine - Core Data Structures
# =============================================================================
"""
Mission world model: items, enemies, rooms and the moving agent.

Rooms are the vertices of the building network. Their identity is the
room name, so two Room objects with the same name are the same vertex.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from .enums import ItemType
from .exceptions import EmptyOperation


# =============================================================================
# Configuration
# =============================================================================

@dataclass
class PathingConfig:
    """
    Configuration settings for building and querying mission networks.
    """
    # Storage
    default_capacity: int = 10

    # World building
    initial_edge_weight: float = 1.0

    # Agent defaults
    max_health: int = 100
    max_medkits: int = 3

    # Logging
    log_level: str = "INFO"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {
            "default_capacity": self.default_capacity,
            "initial_edge_weight": self.initial_edge_weight,
            "max_health": self.max_health,
            "max_medkits": self.max_medkits,
            "log_level": self.log_level,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PathingConfig":
        """Create config from dictionary, ignoring unknown keys"""
        known = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        return cls(**known)


# =============================================================================
# Items
# =============================================================================

@dataclass
class Item:
    """Base class for anything that can lie in a room"""
    name: str

    @property
    def item_type(self) -> ItemType:
        raise NotImplementedError

    @property
    def points(self) -> int:
        raise NotImplementedError

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "type": self.item_type.name,
            "points": self.points,
        }


@dataclass
class MedKit(Item):
    """Carried recovery item"""
    recovery_points: int = 0

    @property
    def item_type(self) -> ItemType:
        return ItemType.MEDKIT

    @property
    def points(self) -> int:
        return self.recovery_points


@dataclass
class Kevlar(Item):
    """Armor picked up on entry, adds health straight away"""
    extra_points: int = 0

    @property
    def item_type(self) -> ItemType:
        return ItemType.KEVLAR

    @property
    def points(self) -> int:
        return self.extra_points


def create_item(item_type: ItemType, name: str, points: int) -> Item:
    """Build the concrete item for a given type"""
    if item_type == ItemType.MEDKIT:
        return MedKit(name=name, recovery_points=points)
    return Kevlar(name=name, extra_points=points)


# =============================================================================
# Enemy
# =============================================================================

@dataclass
class Enemy:
    """
    Hostile resident of a room.

    Attributes:
        name: Enemy identifier
        power: Damage dealt per turn; also its remaining strength
    """
    name: str
    power: int

    def take_damage(self, amount: int):
        """Reduce power, never below zero"""
        self.power = max(self.power - amount, 0)

    @property
    def is_defeated(self) -> bool:
        return self.power <= 0

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "power": self.power}


# =============================================================================
# Agent
# =============================================================================

@dataclass(frozen=True)
class AgentSnapshot:
    """
    Immutable capability state of the agent at one instant.

    Edge costs are computed from a snapshot so a route query never sees
    the agent change underneath it.
    """
    power: int
    health: int
    max_health: int = 100
    healing_amounts: Tuple[int, ...] = ()

    @property
    def best_healing(self) -> int:
        """Largest recovery amount among carried med kits"""
        return max(self.healing_amounts, default=0)

    @property
    def missing_health(self) -> int:
        return max(self.max_health - self.health, 0)


@dataclass
class Agent:
    """
    The moving entity whose route is being planned.

    Med kits are kept as a stack: the last one picked up is the first used.
    """
    name: str
    power: int
    health: int = 100
    max_health: int = 100
    max_medkits: int = 3
    medkits: List[MedKit] = field(default_factory=list)

    @property
    def is_defeated(self) -> bool:
        return self.health <= 0

    @property
    def best_healing(self) -> int:
        return max((kit.recovery_points for kit in self.medkits), default=0)

    def apply_damage(self, damage: int):
        """Subtract damage from health; a negative amount heals without a cap"""
        self.health -= damage

    def pick_up_medkit(self, medkit: MedKit) -> bool:
        """
        Add a med kit to the stack.
        Returns False (and keeps nothing) when already carrying the maximum.
        """
        if len(self.medkits) >= self.max_medkits:
            return False
        self.medkits.append(medkit)
        return True

    def use_medkit(self) -> int:
        """
        Use the most recently picked-up med kit.
        Returns the health actually restored.
        """
        if not self.medkits:
            raise EmptyOperation("No med kits to use")
        medkit = self.medkits.pop()
        before = self.health
        self.health = min(self.max_health, self.health + medkit.recovery_points)
        return self.health - before

    def snapshot(self) -> AgentSnapshot:
        return AgentSnapshot(
            power=self.power,
            health=self.health,
            max_health=self.max_health,
            healing_amounts=tuple(kit.recovery_points for kit in self.medkits),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "power": self.power,
            "health": self.health,
            "max_health": self.max_health,
            "max_medkits": self.max_medkits,
            "medkits": [kit.recovery_points for kit in self.medkits],
        }


# =============================================================================
# Room
# =============================================================================

@dataclass(eq=False)
class Room:
    """
    A division of the building: one vertex of the mission network.

    Equality and hashing use the name only, so a room can be looked up in
    the network by constructing Room("name").
    """
    name: str
    items: List[Item] = field(default_factory=list)
    enemies: List[Enemy] = field(default_factory=list)
    is_entry_exit: bool = False
    is_target: bool = False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Room):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self) -> str:
        return f"Room({self.name!r})"

    # Contents

    def add_item(self, item: Item):
        self.items.append(item)

    def add_enemy(self, enemy: Enemy):
        self.enemies.append(enemy)

    def remove_enemy(self, enemy: Enemy) -> Optional[Enemy]:
        """Remove an enemy by identity; returns it, or None if absent"""
        for i, resident in enumerate(self.enemies):
            if resident is enemy:
                return self.enemies.pop(i)
        return None

    @property
    def has_enemies(self) -> bool:
        return bool(self.enemies)

    @property
    def total_kevlar_points(self) -> int:
        return sum(item.extra_points for item in self.items if isinstance(item, Kevlar))

    @property
    def has_medkit(self) -> bool:
        return any(isinstance(item, MedKit) for item in self.items)

    def apply_room_effects(self, agent: Agent) -> List[Item]:
        """
        Apply the room's items to an agent entering it.

        Kevlar adds its points to health and is consumed. Med kits are
        picked up while the agent has room for them; the rest stay behind.

        Returns:
            The items taken out of the room
        """
        taken: List[Item] = []
        for item in self.items:
            if isinstance(item, Kevlar):
                agent.apply_damage(-item.extra_points)
                taken.append(item)
            elif isinstance(item, MedKit) and agent.pick_up_medkit(item):
                taken.append(item)

        self.items = [item for item in self.items if not any(item is t for t in taken)]
        return taken

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {
            "name": self.name,
            "items": [item.to_dict() for item in self.items],
            "enemies": [enemy.to_dict() for enemy in self.enemies],
            "is_entry_exit": self.is_entry_exit,
            "is_target": self.is_target,
        }
