"""Capability state machines.

Each machine models one orthogonal behavior of a fixture as a closed set of
states plus a transition table:

    Openable       CLOSED <-> OPEN
    Lockable       UNLOCKED <-> LOCKED
    Occupiable     VACANT <-> OCCUPIED
    LockableOpen   CLOSED_AND_UNLOCKED <-> OPEN, CLOSED_AND_UNLOCKED -> LOCKED

Operations either replace the state and return Ok(None), or leave it
untouched and return Err with one of the machine's own error kinds.
"""

from house.capabilities.base import CapabilityError, CapabilityMachine, TransitionError
from house.capabilities.lockable import Lockable, LockableError, LockState
from house.capabilities.lockable_open import (
    LockableOpen,
    LockableOpenError,
    LockableOpenState,
)
from house.capabilities.occupiable import (
    Occupiable,
    OccupiableError,
    OccupiableState,
)
from house.capabilities.openable import Openable, OpenableError, OpenableState

__all__ = [
    # Base
    "CapabilityError",
    "CapabilityMachine",
    "TransitionError",
    # Machines
    "Openable",
    "OpenableError",
    "OpenableState",
    "Lockable",
    "LockableError",
    "LockState",
    "Occupiable",
    "OccupiableError",
    "OccupiableState",
    "LockableOpen",
    "LockableOpenError",
    "LockableOpenState",
]
