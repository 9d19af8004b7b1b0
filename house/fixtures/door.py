"""Door built from two independent machines: Openable and Lockable.

The two machines know nothing about each other. The door is the only place
where their ordering rules live:

- ``open()`` clears the lock first, then opens.
- ``lock()`` closes first, then locks.
- ``close()`` and ``unlock()`` touch only their own machine.

Together these keep a door from ever being open and locked at once.
"""

from __future__ import annotations

from typing import Any, Optional, Union

from house.capabilities.base import CapabilityError
from house.capabilities.lockable import Lockable, LockableError, LockState
from house.capabilities.openable import Openable, OpenableError, OpenableState
from house.fixtures.base import Fixture, LockableOpening
from house.utils.result import Err, FixtureStateError, Result


class DoorError(CapabilityError):
    CANNOT_OPEN = "This cannot be opened."


class Door(Fixture, LockableOpening):
    """A door that can be opened, closed, locked and unlocked."""

    kind = "door"

    def __init__(
        self,
        open_state: Optional[Union[OpenableState, str]] = None,
        lock_state: Optional[Union[LockState, str]] = None,
    ) -> None:
        """
        Initialize the door.

        Args:
            open_state: Initial open/closed state (closed if omitted)
            lock_state: Initial lock state (unlocked if omitted)

        Raises:
            FixtureStateError: If the door would start open and locked
        """
        openable = Openable(open_state)
        lockable = Lockable(lock_state)
        if openable.is_open() and lockable.is_locked():
            raise FixtureStateError("A door cannot be open and locked at the same time")

        self._openable = openable
        self._lockable = lockable

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Door:
        return cls(open_state=data.get("open"), lock_state=data.get("lock"))

    @property
    def open_state(self) -> OpenableState:
        return self._openable.state

    @property
    def lock_state(self) -> LockState:
        return self._lockable.state

    def state_dict(self) -> dict[str, str]:
        return {
            "open": self._openable.state.value,
            "lock": self._lockable.state.value,
        }

    # Openable side

    def is_open(self) -> bool:
        return self._openable.is_open()

    def is_closed(self) -> bool:
        return self._openable.is_closed()

    def can_open(self) -> bool:
        return self._openable.can_open()

    def can_close(self) -> bool:
        return self._openable.can_close()

    # Lockable side

    def is_locked(self) -> bool:
        return self._lockable.is_locked()

    def is_unlocked(self) -> bool:
        return self._lockable.is_unlocked()

    def can_lock(self) -> bool:
        return self._lockable.can_lock()

    def can_unlock(self) -> bool:
        return self._lockable.can_unlock()

    # Transitions

    def open(self) -> Result[None, Union[OpenableError, DoorError]]:
        """
        Unlock if needed, then open.

        An unlock failure is ignored (ALREADY_UNLOCKED just means there was
        nothing to clear). If the door is somehow still locked afterwards the
        open is refused with CANNOT_OPEN.
        """
        unlocked = self._lockable.unlock()
        if unlocked.is_err():
            self._tolerate("open", unlocked.unwrap_err())

        # Unreachable while unlock() always clears LOCKED; guards the
        # open-and-locked invariant if the lock machine ever refuses.
        if self._lockable.is_locked():
            return Err(DoorError.CANNOT_OPEN)

        return self._openable.open()

    def close(self) -> Result[None, OpenableError]:
        return self._openable.close()

    def lock(self) -> Result[None, LockableError]:
        """Close if needed (result ignored), then lock."""
        closed = self._openable.close()
        if closed.is_err():
            self._tolerate("lock", closed.unwrap_err())

        return self._lockable.lock()

    def unlock(self) -> Result[None, LockableError]:
        return self._lockable.unlock()
