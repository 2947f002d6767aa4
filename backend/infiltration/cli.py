# =============================================================================
# Infiltration Pathing Engine - Command Line Interface
# =============================================================================
"""
Small demo that plans and walks the sample mission.
"""

import argparse
import logging
import math
from typing import List, Optional

from .core import (
    Agent, Enemy, GraphError, PathingConfig, RoutePlanner, Room,
    create_planner, sample_mission
)
from .core.game_network import combat_cost

logger = logging.getLogger(__name__)


def print_header():
    """Print demo header"""
    print("\n" + "=" * 60)
    print("   INFILTRATION PATHING DEMO")
    print("   Cheapest routes for the agent's current state")
    print("=" * 60 + "\n")


def print_building(planner: RoutePlanner):
    """Print rooms, their contents and connections"""
    network = planner.network
    print(f"Building: {network.size()} rooms, connected={network.is_connected()}")
    for room in network.get_vertices():
        flags = []
        if room.is_entry_exit:
            flags.append("entry")
        if room.is_target:
            flags.append("target")
        contents = [f"{e.name}({e.power})" for e in room.enemies]
        contents += [f"{item.item_type.symbol}{item.name}({item.points})" for item in room.items]
        neighbors = ", ".join(r.name for r in network.get_adjacent_vertices(room))
        label = f" [{', '.join(flags)}]" if flags else ""
        print(f"  {room.name}{label}: {' '.join(contents) or '-'} -> {neighbors}")


def format_route(path: List[Room]) -> str:
    return " -> ".join(room.name for room in path) if path else "(unreachable)"


def fight(enemy: Enemy, agent: Agent) -> int:
    """
    Trade blows until the enemy falls.

    The agent strikes first; the enemy answers with its starting power
    on every turn it survives. Returns the damage the agent took.
    """
    strike = enemy.power
    taken = 0
    enemy.take_damage(agent.power)
    while not enemy.is_defeated:
        agent.apply_damage(strike)
        taken += strike
        enemy.take_damage(agent.power)
    return taken


def enter_room(room: Room, agent: Agent) -> bool:
    """
    Fight the room's enemies, then pick up what it holds.

    Returns False when the agent cannot win here and is taken down.
    """
    if math.isinf(combat_cost(room, agent.snapshot())):
        print(f"    no power left to fight in {room.name}")
        agent.apply_damage(max(agent.health, 0))
        return False

    for enemy in list(room.enemies):
        damage = fight(enemy, agent)
        room.remove_enemy(enemy)
        print(f"    defeated {enemy.name}, took {damage} damage")

    for item in room.apply_room_effects(agent):
        print(f"    took {item.item_type} {item.name} ({item.points})")
    return True


def walk_to_target(planner: RoutePlanner, agent: Agent, max_steps: int = 50):
    """Enter through the best entry point and follow the advised route"""
    entry, weight = planner.find_best_entry_point(agent)
    target = planner.find_target_room()
    print(f"\nBest entry point: {entry.name} (weight {weight:.1f})")

    current = entry
    print(f"  enter {current.name}")
    enter_room(current, agent)

    steps = 0
    while current != target and not agent.is_defeated and steps < max_steps:
        current = planner.next_room(current, target, agent)
        print(f"  move to {current.name}")
        enter_room(current, agent)
        steps += 1

    outcome = "reached" if current == target else "did not reach"
    print(f"\nAgent {outcome} {target.name} with health {agent.health}")


def run_demo(power: int, health: int, config: Optional[PathingConfig] = None):
    """Print the planner's answers for the sample mission, then walk it"""
    config = config or PathingConfig()
    planner = create_planner(sample_mission(), config)
    agent = Agent(
        name="agent",
        power=power,
        health=health,
        max_health=config.max_health,
        max_medkits=config.max_medkits,
    )

    print_building(planner)

    start = planner.entry_points()[0]
    target = planner.find_target_room()
    advice = planner.advisory_route(start, target, agent)
    print(f"\nRoute from {start.name}: {format_route(advice.path)} (weight {advice.weight:.1f})")

    medkit = planner.closest_medkit_room(start, agent)
    if medkit is None:
        print("No med kit left in the building")
    else:
        print(f"Closest med kit: {medkit.destination.name} via {format_route(medkit.path)}")

    walk_to_target(planner, agent)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    config = PathingConfig()
    parser = argparse.ArgumentParser(description="Plan and walk the sample mission")
    parser.add_argument("--power", type=int, default=10, help="agent power")
    parser.add_argument("--health", type=int, default=config.max_health, help="agent health")
    parser.add_argument("--log-level", default=config.log_level, help="logging level")
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO))

    print_header()
    try:
        run_demo(args.power, args.health, config)
    except GraphError as e:
        logger.error("Demo failed: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
