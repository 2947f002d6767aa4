"""
Dynamic Cost Network Tests

Tests for agent-dependent room costs:
- Combat, healing and kevlar terms
- Matrix refresh (last write wins)
- Directed routing without touching the matrix
"""

import math

import numpy as np
import pytest

from infiltration.core import (
    Agent, AgentSnapshot, DynamicCostNetwork, Enemy, Kevlar, MedKit,
    Room, VertexNotFound, room_entry_cost
)
from infiltration.core.game_network import combat_cost, healing_benefit


def build_building():
    """
    A -- B(enemy 15) -- D
    |                  |
    C(enemy 40) -------+
    """
    building = DynamicCostNetwork()
    for name in "ABCD":
        building.add_vertex(Room(name))
    building.get_room("B").add_enemy(Enemy("Sentry", 15))
    building.get_room("C").add_enemy(Enemy("Guard", 40))
    building.add_edge(Room("A"), Room("B"), 1.0)
    building.add_edge(Room("B"), Room("D"), 1.0)
    building.add_edge(Room("A"), Room("C"), 1.0)
    building.add_edge(Room("C"), Room("D"), 1.0)
    return building


# =============================================================================
# Cost Model Tests
# =============================================================================

@pytest.mark.parametrize("enemy_power, agent_power, expected", [
    (40, 10, 120),  # four turns, three strikes
    (15, 10, 15),
    (10, 10, 0),    # falls on the first turn
    (5, 10, 0),
    (0, 10, 0),
])
def test_combat_cost(enemy_power, agent_power, expected):
    room = Room("R", enemies=[Enemy("e", enemy_power)])
    assert combat_cost(room, AgentSnapshot(power=agent_power, health=100)) == expected


def test_combat_cost_sums_enemies():
    room = Room("R", enemies=[Enemy("a", 40), Enemy("b", 15)])
    assert combat_cost(room, AgentSnapshot(power=10, health=100)) == 135
    print("✓ Enemy costs summed")


def test_zero_power_agent_cannot_enter_guarded_room():
    """An agent with no power faces infinite cost against any live enemy"""
    snapshot = AgentSnapshot(power=0, health=100)
    assert combat_cost(Room("R", enemies=[Enemy("e", 1)]), snapshot) == math.inf
    assert combat_cost(Room("R", enemies=[Enemy("e", 0)]), snapshot) == 0
    assert combat_cost(Room("R"), snapshot) == 0
    print("✓ Zero power is infinite cost")


def test_healing_uses_best_kit():
    """Healing is capped by missing health and uses the largest kit"""
    snapshot = AgentSnapshot(power=10, health=60, healing_amounts=(50, 30))
    assert healing_benefit(snapshot) == 40

    snapshot = AgentSnapshot(power=10, health=90, healing_amounts=(50, 30))
    assert healing_benefit(snapshot) == 10

    assert healing_benefit(AgentSnapshot(power=10, health=50)) == 0
    print("✓ Healing benefit")


def test_room_entry_cost():
    """Combat minus healing minus kevlar"""
    room = Room("R", enemies=[Enemy("Sentry", 15)])
    room.add_item(Kevlar("Vest", 20))
    agent = Agent("agent", power=10, health=60)
    agent.pick_up_medkit(MedKit("a", 30))
    agent.pick_up_medkit(MedKit("b", 50))

    assert room_entry_cost(room, agent) == 15 - 40 - 20
    assert room_entry_cost(room, agent.snapshot()) == -45
    print("✓ Entry cost")


def test_edge_cost_uses_stored_room():
    """A bare Room lookup key resolves to the stored room's contents"""
    building = build_building()
    snapshot = AgentSnapshot(power=10, health=100)
    assert building.edge_cost(Room("B"), snapshot) == 15
    assert building.edge_cost(Room("C"), snapshot) == 120


# =============================================================================
# Matrix Refresh Tests
# =============================================================================

def test_update_edge_weight_with_agent_or_number():
    building = build_building()
    snapshot = AgentSnapshot(power=10, health=100)

    building.update_edge_weight(Room("A"), Room("B"), snapshot)
    assert building.get_edge_weight(Room("A"), Room("B")) == 15

    building.update_edge_weight(Room("A"), Room("B"), 7)
    assert building.get_edge_weight(Room("B"), Room("A")) == 7
    print("✓ Edge weight update")


def test_update_all_edge_weights_last_write_wins():
    """Each edge keeps the cost of its last write in index order"""
    building = build_building()
    building.update_all_edge_weights(Agent("agent", power=10))

    # A-B: written as cost(B)=15 from A, then as cost(A)=0 from B
    assert building.get_edge_weight(Room("A"), Room("B")) == 0
    # B-D: written as cost(D)=0 from B, then as cost(B)=15 from D
    assert building.get_edge_weight(Room("B"), Room("D")) == 15
    assert building.get_edge_weight(Room("C"), Room("D")) == 120
    print("✓ Last write wins")


def test_update_all_edge_weights_idempotent():
    """Recomputing for the same state gives the same matrix"""
    building = build_building()
    agent = Agent("agent", power=10)

    building.update_all_edge_weights(agent)
    first = building.get_weight_matrix()
    building.update_all_edge_weights(agent)
    assert np.array_equal(first, building.get_weight_matrix())
    print("✓ Refresh idempotent")


# =============================================================================
# Route Tests
# =============================================================================

def test_shortest_route_avoids_strong_enemy():
    building = build_building()
    path, weight = building.shortest_route(Room("A"), Room("D"), Agent("agent", power=10))
    assert [room.name for room in path] == ["A", "B", "D"]
    assert weight == 15
    print("✓ Route avoids strong enemy")


def test_shortest_route_leaves_matrix_untouched():
    building = build_building()
    before = building.get_weight_matrix()
    building.shortest_route(Room("A"), Room("D"), Agent("agent", power=10))
    assert np.array_equal(before, building.get_weight_matrix())


def test_shortest_route_follows_agent_state():
    """A stronger agent sees cheaper rooms"""
    building = build_building()
    path, weight = building.shortest_route(Room("A"), Room("D"), Agent("agent", power=40))
    assert [room.name for room in path] == ["A", "B", "D"]
    assert weight == 0

    building.get_room("B").add_enemy(Enemy("Heavy", 200))
    path, weight = building.shortest_route(Room("A"), Room("D"), Agent("agent", power=40))
    assert [room.name for room in path] == ["A", "C", "D"]
    assert weight == 0
    print("✓ Route follows agent state")


def test_shortest_route_zero_power():
    """A powerless agent routes around enemies, or not at all"""
    building = build_building()
    agent = Agent("agent", power=0)

    path, weight = building.shortest_route(Room("A"), Room("D"), agent)
    assert path == []
    assert weight == math.inf

    building.add_vertex(Room("E"))
    building.add_edge(Room("A"), Room("E"), 1.0)
    building.add_edge(Room("E"), Room("D"), 1.0)
    path, weight = building.shortest_route(Room("A"), Room("D"), agent)
    assert [room.name for room in path] == ["A", "E", "D"]
    assert weight == 0
    print("✓ Zero-power routing")


def test_get_room():
    building = build_building()
    assert building.get_room("B").enemies[0].name == "Sentry"
    assert [room.name for room in building.rooms()] == ["A", "B", "C", "D"]
    with pytest.raises(VertexNotFound):
        building.get_room("Z")
