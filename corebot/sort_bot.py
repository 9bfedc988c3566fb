"""Strategy with sorted warrior formations."""

from __future__ import annotations

from corebot.model import GameApi, GameData, GameObject, UnitType
from corebot.rush import create_warriors, one_day, spawn_worker_wave
from corebot.sorting import fight, warriors_sorted
from corebot.workers import worker_combine


def user_loop(api: GameApi, game_data: GameData) -> None:
    """Each warrior charges its nearest enemy; workers gather; build units."""
    one_day(api, api.my_units())
    spawn_worker_wave(api, game_data)
    create_warriors(api, game_data)


def formation_loop(
    api: GameApi, game_data: GameData
) -> list[tuple[GameObject, GameObject | None]]:
    """Pair our farthest warriors with the enemy's nearest, then build units.

    Returns the warrior assignments made by the fight.
    """
    units = api.my_units()
    for unit in units:
        if unit.unit_type is UnitType.WORKER:
            worker_combine(api, unit)
    ours = warriors_sorted(api, units, -1)
    theirs = warriors_sorted(api, api.opponent_units(), 1)
    assignments = fight(api, ours, theirs)
    spawn_worker_wave(api, game_data)
    create_warriors(api, game_data)
    return assignments