"""Behaviour of worker units."""

from __future__ import annotations

from corebot.model import GameApi, GameObject


def worker_combine(api: GameApi, worker: GameObject) -> None:
    """Send a worker to the nearest resource, or to the enemy core if none is left."""
    target = api.nearest_resource(worker) or api.first_opponent_core()
    api.travel_attack(worker, target)