# =============================================================================
# Infiltration Pathing Engine - Enumerations
# =============================================================================
"""
Enumeration types used by the mission model.
"""

from enum import Enum, auto


class ItemType(Enum):
    """
    Kinds of items that can be found in a room.
    """
    MEDKIT = auto()     # Picked up and carried; heals when used
    KEVLAR = auto()     # Consumed on entry; adds health immediately

    def __str__(self) -> str:
        return self.name.lower()

    @property
    def symbol(self) -> str:
        """Return ASCII symbol for display"""
        symbols = {
            ItemType.MEDKIT: "+",
            ItemType.KEVLAR: "#",
        }
        return symbols.get(self, "?")

    @property
    def description(self) -> str:
        descriptions = {
            ItemType.MEDKIT: "Recovery kit carried by the agent",
            ItemType.KEVLAR: "Armor vest applied on entering the room",
        }
        return descriptions.get(self, "")

    @classmethod
    def from_name(cls, name: str) -> "ItemType":
        """Parse an item type name case-insensitively"""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown item type: {name}")


class TraversalOrder(Enum):
    """Order of an unweighted graph traversal"""
    BFS = "bfs"
    DFS = "dfs"

    def __str__(self) -> str:
        return self.value
