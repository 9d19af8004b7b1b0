"""Abstract bases for fixtures."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar

from house.utils.logging import get_logger
from house.utils.result import Result

logger = get_logger("fixtures")


class Fixture(ABC):
    """
    A physical fixture owning one or more capability machines.

    The machines are private to the fixture; callers change state only
    through the fixture's capability operations and read it back through
    predicates or ``to_dict()``.
    """

    kind: ClassVar[str]

    @abstractmethod
    def state_dict(self) -> dict[str, str]:
        """Current state of every owned machine, by field name."""
        ...

    @classmethod
    @abstractmethod
    def from_dict(cls, data: dict[str, Any]) -> "Fixture":
        """Build a fixture from the field names used by ``state_dict()``."""
        ...

    def to_dict(self) -> dict[str, str]:
        return {"kind": self.kind, **self.state_dict()}

    def _tolerate(self, operation: str, error: Any) -> None:
        """Record an internal failure that ``operation`` deliberately ignores."""
        logger.debug(
            "tolerated_failure",
            fixture=self.kind,
            operation=operation,
            error=error.name,
        )

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.state_dict() == other.state_dict()

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        fields = ", ".join(f"{k}={v}" for k, v in self.state_dict().items())
        return f"{type(self).__name__}({fields})"


class LockableOpening(ABC):
    """
    Shared contract for doors and windows.

    Implementations may store open and lock state together or apart, but
    ``is_open()`` and ``is_locked()`` are never both true.
    """

    @abstractmethod
    def is_open(self) -> bool: ...

    @abstractmethod
    def is_closed(self) -> bool: ...

    @abstractmethod
    def is_locked(self) -> bool: ...

    @abstractmethod
    def can_open(self) -> bool: ...

    @abstractmethod
    def can_close(self) -> bool: ...

    @abstractmethod
    def open(self) -> Result[None, Any]: ...

    @abstractmethod
    def close(self) -> Result[None, Any]: ...

    @abstractmethod
    def lock(self) -> Result[None, Any]: ...
