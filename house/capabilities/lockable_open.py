"""Fused open/lock capability.

A single three-variant state covers both dimensions, so "open and locked"
cannot be represented at all:

    CLOSED_AND_UNLOCKED <-> OPEN
    CLOSED_AND_UNLOCKED  -> LOCKED

There is no unlock edge. A fixture in LOCKED stays locked; fixtures that
need to be unlocked again are built from the separate Openable and Lockable
machines instead (see ``house.fixtures.door``).
"""

from __future__ import annotations

from enum import Enum

from house.capabilities.base import CapabilityError, CapabilityMachine, logger
from house.utils.result import Result


class LockableOpenState(Enum):
    CLOSED_AND_UNLOCKED = "closed_and_unlocked"
    OPEN = "open"
    LOCKED = "locked"


class LockableOpenError(CapabilityError):
    ALREADY_OPEN = "This is already open"
    ALREADY_CLOSED = "This is already closed"
    ALREADY_LOCKED = "This is already locked"
    LOCKED = "This can't be opened because it's locked"
    OPEN = "This can't be locked because it's open."


TRANSITIONS: dict[LockableOpenState, set[LockableOpenState]] = {
    LockableOpenState.CLOSED_AND_UNLOCKED: {
        LockableOpenState.OPEN,
        LockableOpenState.LOCKED,
    },
    LockableOpenState.OPEN: {LockableOpenState.CLOSED_AND_UNLOCKED},
    LockableOpenState.LOCKED: set(),
}


class LockableOpen(CapabilityMachine[LockableOpenState]):
    """Tri-state open/lock machine, closed and unlocked at rest."""

    name = "lockable_open"
    state_type = LockableOpenState
    rest_state = LockableOpenState.CLOSED_AND_UNLOCKED
    TRANSITIONS = TRANSITIONS

    def is_open(self) -> bool:
        return self._state is LockableOpenState.OPEN

    def is_closed(self) -> bool:
        # LOCKED counts as closed
        return not self.is_open()

    def is_locked(self) -> bool:
        return self._state is LockableOpenState.LOCKED

    def can_open(self) -> bool:
        return self._state is LockableOpenState.CLOSED_AND_UNLOCKED

    def can_close(self) -> bool:
        return self.is_open()

    def open(self) -> Result[None, LockableOpenError]:
        if self._state is LockableOpenState.OPEN:
            return self._reject("open", LockableOpenError.ALREADY_OPEN)
        if self._state is LockableOpenState.LOCKED:
            return self._reject("open", LockableOpenError.LOCKED)
        return self._transition_to(LockableOpenState.OPEN)

    def close(self) -> Result[None, LockableOpenError]:
        if not self.is_open():
            return self._reject("close", LockableOpenError.ALREADY_CLOSED)
        return self._transition_to(LockableOpenState.CLOSED_AND_UNLOCKED)

    def lock(self) -> Result[None, LockableOpenError]:
        """Lock a closed fixture. An open one is not closed implicitly."""
        if self._state is LockableOpenState.OPEN:
            return self._reject("lock", LockableOpenError.OPEN)
        if self._state is LockableOpenState.LOCKED:
            return self._reject("lock", LockableOpenError.ALREADY_LOCKED)
        return self._transition_to(LockableOpenState.LOCKED)

    def close_and_lock(self) -> Result[None, LockableOpenError]:
        """
        Close if needed, then lock.

        Being already closed is fine here; any failure of the lock step
        (including ALREADY_LOCKED) is returned as is.

        Returns:
            The result of the lock step
        """
        closed = self.close()
        if closed.is_err():
            if closed.unwrap_err() is not LockableOpenError.ALREADY_CLOSED:
                return closed
            logger.debug(
                "tolerated_failure",
                machine=self.name,
                operation="close_and_lock",
                error=closed.unwrap_err().name,
            )
        return self.lock()
