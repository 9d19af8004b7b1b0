from __future__ import annotations

import pytest

from house import (
    Chair,
    LockableOpenError,
    LockableOpening,
    LockableOpenState,
    OccupiableError,
    OccupiableState,
    Window,
)


def test_window_closed_and_unlocked_by_default():
    w = Window()
    assert w.state is LockableOpenState.CLOSED_AND_UNLOCKED
    assert w.to_dict() == {"kind": "window", "state": "closed_and_unlocked"}


@pytest.mark.parametrize("state", list(LockableOpenState))
def test_window_can_be_created(state):
    assert Window(state).state is state
    assert Window(state) == Window(state.value)


def test_window_is_a_lockable_opening():
    assert isinstance(Window(), LockableOpening)


def test_window_lock_does_not_close():
    w = Window(LockableOpenState.OPEN)
    assert w.lock().unwrap_err() is LockableOpenError.OPEN
    assert w.is_open()


def test_window_close_and_lock():
    w = Window(LockableOpenState.OPEN)
    assert w.close_and_lock().is_ok()
    assert w.is_locked()
    assert w.is_closed()
    assert w.open().unwrap_err() is LockableOpenError.LOCKED


def test_window_open_close():
    w = Window()
    assert w.can_open()
    assert w.open().is_ok()
    assert w.can_close()
    assert w.close().is_ok()
    assert w.close().unwrap_err() is LockableOpenError.ALREADY_CLOSED


def test_chair_vacant_by_default():
    c = Chair()
    assert c.is_vacant()
    assert not c.is_occupied()
    assert c.occupation_state is OccupiableState.VACANT


def test_chair_occupy_and_vacate():
    c = Chair()

    assert c.vacate().unwrap_err() is OccupiableError.ALREADY_VACANT
    assert c.can_occupy()
    assert c.occupy().is_ok()
    assert c.occupy().unwrap_err() is OccupiableError.ALREADY_OCCUPIED
    assert c.can_vacate()
    assert c.vacate().is_ok()
    assert c == Chair()


def test_chair_from_dict():
    assert Chair.from_dict({"occupation": "occupied"}).is_occupied()
    assert Chair.from_dict({}).to_dict() == {"kind": "chair", "occupation": "vacant"}


def test_fixtures_of_different_kinds_are_not_equal():
    assert Chair() != Window()
