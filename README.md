# corebot

Decision logic for bots in a real-time strategy game where two teams each
defend a core, gather resources with workers and attack with warriors.

## Installing

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## The game model

`corebot.model` holds everything the strategies work on:

- `UnitType` (`WARRIOR`, `WORKER`), `ObjType` (`CORE`, `UNIT`, `RESOURCE`)
  and `ObjState` (`ALIVE`, `DEAD`).
- `GameObject` — a core, unit or resource with an `id`, position `x`/`y`,
  `team_id`, `unit_type` and `state`; `alive` and `is_unit_of(unit_type)`
  answer the usual questions.
- `GameData` — the state a bot keeps between turns: `workers_amount`
  (starts at 0), `warriors_amount` (starts at 3, the size of the first
  warrior wave) and `wave_workers` (starts `True`: a worker wave is due).
- `GameApi` — an in-memory snapshot of the game seen from one team. You
  build it from a team id, a list of `GameObject`s, a balance and
  optional per-type unit costs. It answers `my_units()`,
  `opponent_units()`, `my_core()`, `first_opponent_core()`,
  `nearest_opponent_unit(unit)`, `nearest_resource(unit)`, `balance()`
  and `distance(a, b)` (straight-line), considering only living objects.
  `travel_attack(unit, target)` records the order in `api.orders` and
  returns `False` when the target is `None` or the unit is dead.
  `create_unit(unit_type)` needs a living core of your own and enough
  balance; it subtracts the cost (0 for types with no cost given), places
  the new unit on your core with the next free id, and returns it, or
  returns `None`.

## Strategies

- `corebot.workers.worker_combine(api, worker)` sends a worker to the
  nearest resource, or at the opponent's core when no resource is left.
- `corebot.sorting`:
  - `is_warrior(unit)` — true for a living warrior unit.
  - `warriors_sorted(api, units, order)` — the living warriors among
    `units`, sorted by distance from your core: `order=1` nearest first,
    `order=-1` farthest first. Empty when you have no core or `units` is
    `None`.
  - `fight(api, our_warriors, opponent_warriors)` — orders every other
    warrior of ours (the first, third, fifth …) at the opponent's
    warriors, three to each target in list order. Returns the
    `(warrior, target)` pairs; once the opponent list runs out the target
    is `None` and no order is given.
- `corebot.rush`, the rush strategy:
  - `init_bot(data)` prints and returns `"Init CORE Bot"`.
  - `one_day(api, units)` sends each warrior at its nearest opponent unit
    (or the opponent's core when there is none) and each worker through
    `worker_combine`; returns `(workers, warriors)` counted.
  - `spawn_worker_wave(api, game_data)` — if a worker wave is due, tries to
    build three workers and returns how many were built; the wave is no
    longer due once the first attempt succeeds.
  - `create_warriors(api, game_data)` — while the wave size is 3, waits
    until the balance reaches 3 × 750, then builds three warriors, drops
    to one warrior per turn and schedules a new worker wave; afterwards
    it tries to build one warrior every call.
  - `user_loop(api, game_data)` — one turn: `one_day`, then the worker
    wave, then warriors.
- `corebot.sort_bot`:
  - `user_loop(api, game_data)` — the same turn as `corebot.rush.user_loop`.
  - `formation_loop(api, game_data)` — workers gather; your warriors,
    farthest from your core first, are paired by `fight` with the
    opponent's warriors, nearest to your core first; then the same
    worker and warrior building. Returns the fight's assignments.

## Example

```python
from corebot import rush
from corebot.model import GameApi, GameData, GameObject, ObjType, UnitType

api = GameApi(
    team_id=20,
    objects=[
        GameObject(id=1, type=ObjType.CORE, x=0, y=0, team_id=20),
        GameObject(id=2, type=ObjType.CORE, x=100, y=100, team_id=10),
        GameObject(id=3, type=ObjType.RESOURCE, x=10, y=5),
    ],
    balance=3000,
    unit_costs={UnitType.WORKER: 100, UnitType.WARRIOR: 750},
)
state = GameData()
rush.init_bot(state)
rush.user_loop(api, state)
print(api.orders, api.balance())
```

## What it does not do

There is no connection to a game server and no command to run a bot:
the package only makes decisions against a `GameApi` snapshot and
records them in `api.orders`. Feeding it live game state each turn and
sending the orders on is left to the program that uses it.