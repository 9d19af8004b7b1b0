"""Open/closed capability."""

from __future__ import annotations

from enum import Enum

from house.capabilities.base import CapabilityError, CapabilityMachine
from house.utils.result import Result


class OpenableState(Enum):
    CLOSED = "closed"
    OPEN = "open"


class OpenableError(CapabilityError):
    ALREADY_OPEN = "This is already open"
    ALREADY_CLOSED = "This is already closed"


TRANSITIONS: dict[OpenableState, set[OpenableState]] = {
    OpenableState.CLOSED: {OpenableState.OPEN},
    OpenableState.OPEN: {OpenableState.CLOSED},
}


class Openable(CapabilityMachine[OpenableState]):
    """Binary open/closed machine, closed at rest."""

    name = "openable"
    state_type = OpenableState
    rest_state = OpenableState.CLOSED
    TRANSITIONS = TRANSITIONS

    def is_open(self) -> bool:
        return self._state is OpenableState.OPEN

    def is_closed(self) -> bool:
        return self._state is OpenableState.CLOSED

    def can_open(self) -> bool:
        return self.is_closed()

    def can_close(self) -> bool:
        return not self.can_open()

    def open(self) -> Result[None, OpenableError]:
        if self.is_open():
            return self._reject("open", OpenableError.ALREADY_OPEN)
        return self._transition_to(OpenableState.OPEN)

    def close(self) -> Result[None, OpenableError]:
        if self.is_closed():
            return self._reject("close", OpenableError.ALREADY_CLOSED)
        return self._transition_to(OpenableState.CLOSED)
