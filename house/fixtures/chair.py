"""Chair: a fixture with a single occupiable capability."""

from __future__ import annotations

from typing import Any, Optional, Union

from house.capabilities.occupiable import (
    Occupiable,
    OccupiableError,
    OccupiableState,
)
from house.fixtures.base import Fixture
from house.utils.result import Result


class Chair(Fixture):
    kind = "chair"

    def __init__(
        self,
        occupation_state: Optional[Union[OccupiableState, str]] = None,
    ) -> None:
        self._occupation = Occupiable(occupation_state)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Chair:
        return cls(occupation_state=data.get("occupation"))

    @property
    def occupation_state(self) -> OccupiableState:
        return self._occupation.state

    def state_dict(self) -> dict[str, str]:
        return {"occupation": self._occupation.state.value}

    def is_occupied(self) -> bool:
        return self._occupation.is_occupied()

    def is_vacant(self) -> bool:
        return self._occupation.is_vacant()

    def can_occupy(self) -> bool:
        return self._occupation.can_occupy()

    def can_vacate(self) -> bool:
        return self._occupation.can_vacate()

    def occupy(self) -> Result[None, OccupiableError]:
        return self._occupation.occupy()

    def vacate(self) -> Result[None, OccupiableError]:
        return self._occupation.vacate()
