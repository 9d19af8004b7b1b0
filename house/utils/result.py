"""Result type for explicit error handling.

Every fixture operation returns either ``Ok`` or ``Err`` instead of raising,
so a rejected transition is an ordinary value the caller has to look at.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, NoReturn, TypeVar, Union

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type
U = TypeVar("U")  # Mapped type


class ResultError(Exception):
    """Raised when unwrapping a Result fails."""

    pass


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Represents a successful result."""

    value: T = None

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        """Get the success value. Safe to call since this is Ok."""
        return self.value

    def unwrap_or(self, default: T) -> T:
        """Get the success value or a default."""
        return self.value

    def unwrap_err(self) -> NoReturn:
        """Get the error value. Raises since this is Ok."""
        raise ResultError(f"Called unwrap_err on Ok value: {self.value}")

    def map(self, fn: Callable[[T], U]) -> "Ok[U]":
        """Transform the success value."""
        return Ok(fn(self.value))

    def map_err(self, fn: Callable[[E], U]) -> "Ok[T]":
        """Transform the error value. No-op for Ok."""
        return self

    def and_then(self, fn: Callable[[T], "Result[U, E]"]) -> "Result[U, E]":
        """Chain another Result-returning operation."""
        return fn(self.value)

    def or_else(self, fn: Callable[[E], "Result[T, U]"]) -> "Ok[T]":
        """Chain error recovery. No-op for Ok."""
        return self

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True)
class Err(Generic[E]):
    """Represents an error result."""

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        """Get the success value. Raises since this is Err."""
        raise ResultError(f"Called unwrap on Err value: {self.error}")

    def unwrap_or(self, default: T) -> T:
        """Get the success value or a default."""
        return default

    def unwrap_err(self) -> E:
        """Get the error value. Safe to call since this is Err."""
        return self.error

    def map(self, fn: Callable[[T], U]) -> "Err[E]":
        """Transform the success value. No-op for Err."""
        return self

    def map_err(self, fn: Callable[[E], U]) -> "Err[U]":
        """Transform the error value."""
        return Err(fn(self.error))

    def and_then(self, fn: Callable[[T], "Result[U, E]"]) -> "Err[E]":
        """Chain another Result-returning operation. No-op for Err."""
        return self

    def or_else(self, fn: Callable[[E], "Result[T, U]"]) -> "Result[T, U]":
        """Chain error recovery."""
        return fn(self.error)

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


# Type alias for Result
Result = Union[Ok[T], Err[E]]


class FixtureStateError(ValueError):
    """A fixture or machine was built from a state it can never be in."""

    pass


@dataclass(frozen=True)
class ConfigError:
    """Error in configuration."""

    field: str
    message: str

    def __str__(self) -> str:
        return f"Config error in '{self.field}': {self.message}"
