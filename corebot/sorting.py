"""Selecting and ordering warriors, and pairing them against enemy warriors."""

from __future__ import annotations

from corebot.model import GameApi, GameObject, ObjType, UnitType

FIGHTERS_PER_TARGET = 3


def is_warrior(unit: GameObject) -> bool:
    """True for a living warrior unit."""
    return unit.alive and unit.type is ObjType.UNIT and unit.unit_type is UnitType.WARRIOR


def warriors_sorted(
    api: GameApi, units: list[GameObject] | None, order: int
) -> list[GameObject]:
    """Living warriors among units, sorted by distance to our core.

    order 1 sorts nearest first, order -1 farthest first. Without a core of
    our own, or without units, the result is empty.
    """
    core = api.my_core()
    if core is None or units is None:
        return []
    warriors = [u for u in units if is_warrior(u)]
    return sorted(warriors, key=lambda w: order * api.distance(core, w))


def fight(
    api: GameApi,
    our_warriors: list[GameObject],
    opponent_warriors: list[GameObject],
) -> list[tuple[GameObject, GameObject | None]]:
    """Send every other warrior of ours at the enemy, three to each target.

    Returns the (warrior, target) pairs; target is None once the enemy list
    is used up, and no order is given for such a pair.
    """
    assignments = []
    for n, warrior in enumerate(our_warriors[::2]):
        j = n // FIGHTERS_PER_TARGET
        target = opponent_warriors[j] if j < len(opponent_warriors) else None
        api.travel_attack(warrior, target)
        assignments.append((warrior, target))
    return assignments