"""Capability state machines for household fixtures.

Doors, windows and chairs are modelled as small finite-state machines:

    from house import Door

    door = Door(lock_state="locked")
    door.open()        # Ok(None): unlocks, then opens
    door.lock()        # Ok(None): closes, then locks
    door.unlock()      # Ok(None)
    door.unlock()      # Err(<LockableError.ALREADY_UNLOCKED: ...>)
"""

__version__ = "0.1.0"

from house.capabilities import (
    Lockable,
    LockableError,
    LockableOpen,
    LockableOpenError,
    LockableOpenState,
    LockState,
    Occupiable,
    OccupiableError,
    OccupiableState,
    Openable,
    OpenableError,
    OpenableState,
    TransitionError,
)
from house.fixtures import Chair, Door, DoorError, Fixture, LockableOpening, Window
from house.registry import House
from house.utils.result import Err, FixtureStateError, Ok, Result

__all__ = [
    "__version__",
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
    "TransitionError",
    # Fixtures
    "Fixture",
    "LockableOpening",
    "Door",
    "DoorError",
    "Window",
    "Chair",
    "House",
    # Results
    "Ok",
    "Err",
    "Result",
    "FixtureStateError",
]
