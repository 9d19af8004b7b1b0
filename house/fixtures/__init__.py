"""Fixtures composed from capability machines."""

from house.fixtures.base import Fixture, LockableOpening
from house.fixtures.chair import Chair
from house.fixtures.door import Door, DoorError
from house.fixtures.window import Window

# Fixture classes by the ``kind`` name used in configuration
FIXTURE_TYPES: dict[str, type[Fixture]] = {
    Door.kind: Door,
    Window.kind: Window,
    Chair.kind: Chair,
}

__all__ = [
    "Fixture",
    "LockableOpening",
    "Door",
    "DoorError",
    "Window",
    "Chair",
    "FIXTURE_TYPES",
]
