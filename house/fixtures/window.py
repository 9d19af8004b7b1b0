"""Window backed by the fused tri-state machine."""

from __future__ import annotations

from typing import Any, Optional, Union

from house.capabilities.lockable_open import (
    LockableOpen,
    LockableOpenError,
    LockableOpenState,
)
from house.fixtures.base import Fixture, LockableOpening
from house.utils.result import Result


class Window(Fixture, LockableOpening):
    """
    A window that can be opened, closed and locked, but never unlocked.

    Locking never closes implicitly: ``lock()`` on an open window fails with
    OPEN. Use ``close_and_lock()`` to do both.
    """

    kind = "window"

    def __init__(self, state: Optional[Union[LockableOpenState, str]] = None) -> None:
        self._machine = LockableOpen(state)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Window:
        return cls(state=data.get("state"))

    @property
    def state(self) -> LockableOpenState:
        return self._machine.state

    def state_dict(self) -> dict[str, str]:
        return {"state": self._machine.state.value}

    def is_open(self) -> bool:
        return self._machine.is_open()

    def is_closed(self) -> bool:
        return self._machine.is_closed()

    def is_locked(self) -> bool:
        return self._machine.is_locked()

    def can_open(self) -> bool:
        return self._machine.can_open()

    def can_close(self) -> bool:
        return self._machine.can_close()

    def open(self) -> Result[None, LockableOpenError]:
        return self._machine.open()

    def close(self) -> Result[None, LockableOpenError]:
        return self._machine.close()

    def lock(self) -> Result[None, LockableOpenError]:
        return self._machine.lock()

    def close_and_lock(self) -> Result[None, LockableOpenError]:
        return self._machine.close_and_lock()
