from corebot.model import GameApi, GameObject, ObjState, ObjType, UnitType
from corebot.sorting import fight, is_warrior, warriors_sorted

ME, THEM = 1, 2


def warrior(uid, x, team=ME, state=ObjState.ALIVE):
    return GameObject(uid, ObjType.UNIT, x, 0, team, UnitType.WARRIOR, state)


def make_api(objects, with_core=True):
    core = [GameObject(1000, ObjType.CORE, 0, 0, ME)] if with_core else []
    return GameApi(ME, [*core, *objects])


def test_is_warrior():
    assert is_warrior(warrior(1, 0))
    assert not is_warrior(warrior(1, 0, state=ObjState.DEAD))
    assert not is_warrior(GameObject(2, ObjType.UNIT, 0, 0, ME, UnitType.WORKER))
    assert not is_warrior(GameObject(3, ObjType.CORE, 0, 0, ME))


def test_sorted_nearest_first():
    units = [warrior(1, 30), warrior(2, 10), warrior(3, 20)]
    api = make_api(units)
    core = api.my_core()
    result = warriors_sorted(api, units, 1)
    dists = [api.distance(core, w) for w in result]
    assert dists == sorted(dists)
    assert set(result) == set(units)


def test_sorted_farthest_first_skips_non_warriors():
    worker = GameObject(9, ObjType.UNIT, 5, 0, ME, UnitType.WORKER)
    dead = warrior(8, 40, state=ObjState.DEAD)
    units = [warrior(1, 30), worker, warrior(2, 10), dead, warrior(3, 20)]
    api = make_api(units)
    core = api.my_core()
    result = warriors_sorted(api, units, -1)
    dists = [api.distance(core, w) for w in result]
    assert dists == sorted(dists, reverse=True)
    assert worker not in result and dead not in result
    assert len(result) == 3


def test_sorted_without_core_or_units():
    units = [warrior(1, 30)]
    assert warriors_sorted(make_api(units, with_core=False), units, 1) == []
    assert warriors_sorted(make_api(units), None, 1) == []


def test_fight_every_other_warrior_three_per_target():
    ours = [warrior(i, i) for i in range(1, 8)]
    theirs = [warrior(100 + i, 50 + i, THEM) for i in range(3)]
    api = make_api(ours + theirs)
    pairs = fight(api, ours, theirs)
    expected = [
        (ours[0], theirs[0]),
        (ours[2], theirs[0]),
        (ours[4], theirs[0]),
        (ours[6], theirs[1]),
    ]
    assert pairs == expected
    assert api.orders == expected


def test_fight_runs_out_of_targets():
    ours = [warrior(i, i) for i in range(1, 9)]
    theirs = [warrior(100, 60, THEM)]
    api = make_api(ours + theirs)
    pairs = fight(api, ours, theirs)
    assert pairs[-1] == (ours[6], None)
    assert all(target is theirs[0] for _, target in api.orders)
    assert len(api.orders) == len(pairs) - 1


def test_fight_without_warriors():
    api = make_api([])
    assert fight(api, [], []) == []
    assert api.orders == []