"""Game objects, the per-game bot state and an in-memory view of the game."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Mapping


class UnitType(Enum):
    """Kinds of unit a team can build."""

    WARRIOR = "warrior"
    WORKER = "worker"


class ObjType(Enum):
    """Kinds of object on the map."""

    CORE = "core"
    UNIT = "unit"
    RESOURCE = "resource"


class ObjState(Enum):
    """Life state of an object."""

    ALIVE = "alive"
    DEAD = "dead"


@dataclass(eq=False)
class GameObject:
    """A core, unit or resource on the map."""

    id: int
    type: ObjType
    x: float = 0.0
    y: float = 0.0
    team_id: int | None = None
    unit_type: UnitType | None = None
    state: ObjState = ObjState.ALIVE

    @property
    def alive(self) -> bool:
        return self.state is ObjState.ALIVE

    def is_unit_of(self, unit_type: UnitType) -> bool:
        """Return True if this object is a unit of the given kind."""
        return self.type is ObjType.UNIT and self.unit_type is unit_type


@dataclass
class GameData:
    """State the bot keeps between turns."""

    workers_amount: int = 0
    warriors_amount: int = 3
    wave_workers: bool = True


class GameApi:
    """A snapshot of the game seen from one team, recording the orders given."""

    def __init__(
        self,
        team_id: int,
        objects: Iterable[GameObject] = (),
        balance: int = 0,
        unit_costs: Mapping[UnitType, int] | None = None,
    ) -> None:
        self.team_id = team_id
        self.objects: list[GameObject] = list(objects)
        self._balance = balance
        self.unit_costs: dict[UnitType, int] = dict(unit_costs or {})
        self.orders: list[tuple[GameObject, GameObject]] = []

    def _alive(self, obj_type: ObjType) -> list[GameObject]:
        return [o for o in self.objects if o.alive and o.type is obj_type]

    def my_units(self) -> list[GameObject]:
        """Living units of this team."""
        return [o for o in self._alive(ObjType.UNIT) if o.team_id == self.team_id]

    def opponent_units(self) -> list[GameObject]:
        """Living units of every other team."""
        return [
            o
            for o in self._alive(ObjType.UNIT)
            if o.team_id is not None and o.team_id != self.team_id
        ]

    def my_core(self) -> GameObject | None:
        return next(
            (o for o in self._alive(ObjType.CORE) if o.team_id == self.team_id), None
        )

    def first_opponent_core(self) -> GameObject | None:
        return next(
            (o for o in self._alive(ObjType.CORE) if o.team_id != self.team_id), None
        )

    def _nearest(
        self, origin: GameObject, candidates: list[GameObject]
    ) -> GameObject | None:
        return min(candidates, key=lambda o: self.distance(origin, o), default=None)

    def nearest_opponent_unit(self, unit: GameObject) -> GameObject | None:
        return self._nearest(unit, self.opponent_units())

    def nearest_resource(self, unit: GameObject) -> GameObject | None:
        return self._nearest(unit, self._alive(ObjType.RESOURCE))

    def travel_attack(self, unit: GameObject, target: GameObject | None) -> bool:
        """Order a unit to move to and attack a target; False if no order was given."""
        if target is None or not unit.alive:
            return False
        self.orders.append((unit, target))
        return True

    def create_unit(self, unit_type: UnitType) -> GameObject | None:
        """Build a unit at this team's core, or return None if that is not possible."""
        core = self.my_core()
        cost = self.unit_costs.get(unit_type, 0)
        if core is None or cost > self._balance:
            return None
        self._balance -= cost
        new_id = max((o.id for o in self.objects), default=0) + 1
        unit = GameObject(
            id=new_id,
            type=ObjType.UNIT,
            x=core.x,
            y=core.y,
            team_id=self.team_id,
            unit_type=unit_type,
        )
        self.objects.append(unit)
        return unit

    def balance(self) -> int:
        return self._balance

    def distance(self, a: GameObject, b: GameObject) -> float:
        return math.hypot(a.x - b.x, a.y - b.y)