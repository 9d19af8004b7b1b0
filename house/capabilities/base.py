"""Shared machinery for capability state machines."""

from __future__ import annotations

from enum import Enum
from typing import Any, ClassVar, Generic, Optional, TypeVar, Union

from house.utils.logging import get_logger
from house.utils.result import Err, FixtureStateError, Ok, Result

S = TypeVar("S", bound=Enum)
E = TypeVar("E", bound=Enum)

logger = get_logger("capabilities")


class CapabilityError(Enum):
    """Base for per-machine error kinds. The value is the human-readable message."""

    def __str__(self) -> str:
        return self.value


class TransitionError(Exception):
    """Invalid state transition."""

    def __init__(self, machine: str, from_state: Enum, to_state: Enum) -> None:
        self.machine = machine
        self.from_state = from_state
        self.to_state = to_state
        super().__init__(
            f"Invalid {machine} transition: {from_state.name} -> {to_state.name}"
        )


class CapabilityMachine(Generic[S]):
    """
    One closed-state capability (open/closed, locked/unlocked, ...).

    Subclasses declare the state enum, the rest state and the transition
    table. The state value is only ever replaced whole, and only along an
    edge present in ``TRANSITIONS``; operations that would leave the
    declared graph return ``Err`` before touching the state.
    """

    name: ClassVar[str]
    state_type: ClassVar[type[Enum]]
    rest_state: ClassVar[Enum]
    TRANSITIONS: ClassVar[dict[Any, set[Any]]]

    def __init__(self, state: Optional[Union[S, str]] = None) -> None:
        """
        Initialize the machine.

        Args:
            state: Initial state, as a member or its value (rest state if omitted)

        Raises:
            FixtureStateError: If ``state`` is not one of the declared variants
        """
        if state is None:
            state = self.rest_state
        try:
            self._state: S = self.state_type(state)
        except ValueError:
            raise FixtureStateError(f"Unknown {self.name} state: {state!r}") from None

    @property
    def state(self) -> S:
        return self._state

    def can_transition_to(self, new_state: S) -> bool:
        """Check if the edge from the current state to ``new_state`` exists."""
        return new_state in self.TRANSITIONS.get(self._state, set())

    def _transition_to(self, new_state: S) -> Result[None, E]:
        if not self.can_transition_to(new_state):
            raise TransitionError(self.name, self._state, new_state)

        old_state = self._state
        self._state = new_state

        logger.debug(
            "state_transition",
            machine=self.name,
            from_state=old_state.value,
            to_state=new_state.value,
        )
        return Ok(None)

    def _reject(self, operation: str, error: E) -> Result[None, E]:
        logger.debug(
            "transition_rejected",
            machine=self.name,
            state=self._state.value,
            operation=operation,
            error=error.name,
        )
        return Err(error)

    @classmethod
    def edges(cls) -> list[tuple[Any, Any]]:
        """All (from, to) pairs of the transition graph."""
        return [
            (source, target)
            for source, targets in cls.TRANSITIONS.items()
            for target in sorted(targets, key=lambda s: s.value)
        ]

    def to_dict(self) -> dict[str, str]:
        return {"state": self._state.value}

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._state is other._state

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._state.name})"
