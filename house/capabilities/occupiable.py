"""Occupied/vacant capability, used by seating."""

from __future__ import annotations

from enum import Enum

from house.capabilities.base import CapabilityError, CapabilityMachine
from house.utils.result import Result


class OccupiableState(Enum):
    VACANT = "vacant"
    OCCUPIED = "occupied"


class OccupiableError(CapabilityError):
    ALREADY_OCCUPIED = "Already occupied"
    ALREADY_VACANT = "Already vacant"


TRANSITIONS: dict[OccupiableState, set[OccupiableState]] = {
    OccupiableState.VACANT: {OccupiableState.OCCUPIED},
    OccupiableState.OCCUPIED: {OccupiableState.VACANT},
}


class Occupiable(CapabilityMachine[OccupiableState]):
    name = "occupiable"
    state_type = OccupiableState
    rest_state = OccupiableState.VACANT
    TRANSITIONS = TRANSITIONS

    def is_occupied(self) -> bool:
        return self._state is OccupiableState.OCCUPIED

    def is_vacant(self) -> bool:
        return not self.is_occupied()

    def can_occupy(self) -> bool:
        return self._state is OccupiableState.VACANT

    def can_vacate(self) -> bool:
        return not self.can_occupy()

    def occupy(self) -> Result[None, OccupiableError]:
        if self.is_occupied():
            return self._reject("occupy", OccupiableError.ALREADY_OCCUPIED)
        return self._transition_to(OccupiableState.OCCUPIED)

    def vacate(self) -> Result[None, OccupiableError]:
        if self.is_vacant():
            return self._reject("vacate", OccupiableError.ALREADY_VACANT)
        return self._transition_to(OccupiableState.VACANT)
