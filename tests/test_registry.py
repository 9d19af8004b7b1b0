from __future__ import annotations

import pytest

from house import Chair, Door, House, Window
from house.config import FixtureSpec, HouseConfig


def make_house() -> House:
    house = House()
    house.add("front_door", Door(lock_state="locked"))
    house.add("back_door", Door())
    house.add("kitchen_window", Window("open"))
    house.add("desk_chair", Chair())
    return house


def test_add_and_get():
    house = make_house()

    assert len(house) == 4
    assert "front_door" in house
    assert house.get("front_door").is_locked()
    assert house.names() == ["front_door", "back_door", "kitchen_window", "desk_chair"]
    assert list(house) == house.names()


def test_duplicate_name_rejected():
    house = make_house()
    with pytest.raises(ValueError):
        house.add("front_door", Door())


def test_unknown_name():
    house = House()
    with pytest.raises(KeyError):
        house.get("attic_hatch")
    with pytest.raises(KeyError):
        house.remove("attic_hatch")


def test_remove():
    house = make_house()
    chair = house.remove("desk_chair")
    assert isinstance(chair, Chair)
    assert "desk_chair" not in house


def test_operations_reach_owned_fixture():
    house = make_house()
    assert house.get("front_door").open().is_ok()
    assert house.to_dict()["front_door"] == {"kind": "door", "open": "open", "lock": "unlocked"}


def test_summary_and_by_kind():
    house = make_house()
    assert house.summary() == {
        "door": {"closed/locked": 1, "closed/unlocked": 1},
        "window": {"open": 1},
        "chair": {"vacant": 1},
    }
    assert [d.is_locked() for d in house.by_kind("door")] == [True, False]


def test_from_config(restore_logging):
    config = HouseConfig(fixtures=[
        FixtureSpec(name="front_door", kind="door", state={"open": "open"}),
        FixtureSpec(name="bay_window", kind="window", state={"state": "locked"}),
        FixtureSpec(name="stool", kind="chair"),
    ])

    house = House.from_config(config)

    assert house.get("front_door") == Door("open")
    assert house.get("bay_window").is_locked()
    assert house.get("stool").is_vacant()


def test_summary_follows_state_changes():
    house = make_house()
    house.get("back_door").lock()
    house.get("desk_chair").occupy()

    summary = house.summary()
    assert summary["door"] == {"closed/locked": 2}
    assert summary["chair"] == {"occupied": 1}
