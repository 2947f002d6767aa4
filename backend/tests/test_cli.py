"""
CLI Tests

Tests for the demo walk: combat, room entry and the console entry point.
"""

from infiltration.cli import enter_room, fight, main
from infiltration.core import Agent, AgentSnapshot, Enemy, Kevlar, Room
from infiltration.core.game_network import combat_cost


def test_fight_matches_combat_cost():
    """Damage taken in a fight is what the cost model predicts"""
    enemy = Enemy("Guard", 40)
    room = Room("Armory", enemies=[enemy])
    expected = combat_cost(room, AgentSnapshot(power=10, health=200))
    agent = Agent("agent", power=10, health=200)

    assert fight(enemy, agent) == expected == 120
    assert enemy.is_defeated
    assert agent.health == 80
    print("✓ Fight damage matches cost model")


def test_enter_room_defeats_enemies_and_takes_items():
    room = Room("Hall", enemies=[Enemy("Sentry", 15)])
    room.add_item(Kevlar("Vest", 20))
    agent = Agent("agent", power=10, health=100)

    assert enter_room(room, agent)
    assert room.enemies == []
    assert room.items == []
    assert agent.health == 100 - 15 + 20
    print("✓ Room cleared")


def test_enter_room_without_power():
    """A powerless agent facing an enemy is taken down instead of crashing"""
    room = Room("Hall", enemies=[Enemy("Sentry", 5)])
    agent = Agent("agent", power=0, health=100)

    assert not enter_room(room, agent)
    assert agent.is_defeated
    assert len(room.enemies) == 1
    print("✓ Zero power handled")


def test_main_walks_sample_mission(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Best entry point: Garage" in out
    assert "Agent reached Lab" in out


def test_main_zero_power_agent(capsys):
    """The powerless agent still finds the unguarded way in"""
    assert main(["--power", "0"]) == 0
    out = capsys.readouterr().out
    assert "Best entry point: Garage" in out
    assert "Agent reached Lab" in out
