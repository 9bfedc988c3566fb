"""Rush strategy: warriors charge the nearest enemy, workers gather."""

from __future__ import annotations

from corebot.model import GameApi, GameData, GameObject, UnitType
from corebot.workers import worker_combine

WARRIOR_PRICE = 750
WAVE_SIZE = 3
INIT_MESSAGE = "Init CORE Bot"


def init_bot(data: object) -> str:
    """Announce the bot at game start and return the announcement."""
    print(INIT_MESSAGE, flush=True)
    return INIT_MESSAGE


def one_day(api: GameApi, units: list[GameObject]) -> tuple[int, int]:
    """Give every unit its order; return the numbers of workers and warriors."""
    workers = warriors = 0
    for unit in units:
        if unit.unit_type is UnitType.WARRIOR:
            warriors += 1
            target = api.nearest_opponent_unit(unit) or api.first_opponent_core()
            api.travel_attack(unit, target)
        if unit.unit_type is UnitType.WORKER:
            workers += 1
            worker_combine(api, unit)
    return workers, warriors


def create_warriors(api: GameApi, game_data: GameData) -> None:
    """Build a wave of three warriors once affordable, then one per turn."""
    if (
        game_data.warriors_amount == WAVE_SIZE
        and api.balance() >= game_data.warriors_amount * WARRIOR_PRICE
    ):
        for _ in range(WAVE_SIZE):
            api.create_unit(UnitType.WARRIOR)
        game_data.warriors_amount = 1
        game_data.wave_workers = True
    elif game_data.warriors_amount == 1:
        api.create_unit(UnitType.WARRIOR)


def spawn_worker_wave(api: GameApi, game_data: GameData) -> int:
    """Try to build three workers if a wave is due; return how many were built."""
    if not game_data.wave_workers:
        return 0
    built = 0
    for attempt in range(WAVE_SIZE):
        if api.create_unit(UnitType.WORKER) is not None:
            built += 1
            game_data.workers_amount += 1
            if attempt == 0:
                game_data.wave_workers = False
    return built


def user_loop(api: GameApi, game_data: GameData) -> None:
    """Called every time new game data arrives."""
    one_day(api, api.my_units())
    spawn_worker_wave(api, game_data)
    create_warriors(api, game_data)