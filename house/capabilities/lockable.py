"""Locked/unlocked capability.

Knows nothing about open/closed; composites that combine the two decide the
ordering between them.
"""

from __future__ import annotations

from enum import Enum

from house.capabilities.base import CapabilityError, CapabilityMachine
from house.utils.result import Result


class LockState(Enum):
    UNLOCKED = "unlocked"
    LOCKED = "locked"


class LockableError(CapabilityError):
    ALREADY_LOCKED = "This is already locked"
    ALREADY_UNLOCKED = "This is already unlocked"


TRANSITIONS: dict[LockState, set[LockState]] = {
    LockState.UNLOCKED: {LockState.LOCKED},
    LockState.LOCKED: {LockState.UNLOCKED},
}


class Lockable(CapabilityMachine[LockState]):
    """Binary lock machine, unlocked at rest."""

    name = "lockable"
    state_type = LockState
    rest_state = LockState.UNLOCKED
    TRANSITIONS = TRANSITIONS

    def is_locked(self) -> bool:
        return self._state is LockState.LOCKED

    def is_unlocked(self) -> bool:
        return self._state is LockState.UNLOCKED

    def can_lock(self) -> bool:
        return self.is_unlocked()

    def can_unlock(self) -> bool:
        return not self.can_lock()

    def lock(self) -> Result[None, LockableError]:
        if self.is_locked():
            return self._reject("lock", LockableError.ALREADY_LOCKED)
        return self._transition_to(LockState.LOCKED)

    def unlock(self) -> Result[None, LockableError]:
        if self.is_unlocked():
            return self._reject("unlock", LockableError.ALREADY_UNLOCKED)
        return self._transition_to(LockState.UNLOCKED)
