"""In-memory registry of named fixtures."""

from __future__ import annotations

from typing import Iterator

from house.config.settings import HouseConfig
from house.fixtures import FIXTURE_TYPES, Fixture
from house.utils.logging import configure_logging, get_logger

logger = get_logger("registry")


class House:
    """
    A collection of fixtures addressed by name.

    The house owns its fixtures; callers operate on them through ``get()``
    and the fixture's own capability operations.
    """

    def __init__(self) -> None:
        self._fixtures: dict[str, Fixture] = {}

    @classmethod
    def from_config(cls, config: HouseConfig) -> House:
        """
        Build a house from a validated configuration.

        Also applies the configured logging settings.

        Raises:
            KeyError: If a fixture kind is unknown
            ValueError: If a name repeats or a state cannot be parsed
        """
        configure_logging(level=config.logging.level, format_type=config.logging.format)

        house = cls()
        for spec in config.fixtures:
            fixture = FIXTURE_TYPES[spec.kind].from_dict(spec.state)
            house.add(spec.name, fixture)
        return house

    def add(self, name: str, fixture: Fixture) -> Fixture:
        """
        Register a fixture under ``name``.

        Raises:
            ValueError: If the name is already taken
        """
        if name in self._fixtures:
            raise ValueError(f"Fixture already registered: {name}")

        self._fixtures[name] = fixture
        logger.debug("fixture_registered", name=name, kind=fixture.kind)
        return fixture

    def get(self, name: str) -> Fixture:
        if name not in self._fixtures:
            raise KeyError(f"Fixture not registered: {name}")
        return self._fixtures[name]

    def remove(self, name: str) -> Fixture:
        if name not in self._fixtures:
            raise KeyError(f"Fixture not registered: {name}")
        return self._fixtures.pop(name)

    def names(self) -> list[str]:
        return list(self._fixtures)

    def by_kind(self, kind: str) -> list[Fixture]:
        """Get all fixtures of one kind, in registration order."""
        return [f for f in self._fixtures.values() if f.kind == kind]

    def summary(self) -> dict[str, dict[str, int]]:
        """
        Count fixtures by kind and state.

        Multi-machine states are joined with "/", e.g.
        ``{"door": {"closed/locked": 1, "open/unlocked": 2}}``.
        """
        summary: dict[str, dict[str, int]] = {}
        for fixture in self._fixtures.values():
            state = "/".join(fixture.state_dict().values())
            counts = summary.setdefault(fixture.kind, {})
            counts[state] = counts.get(state, 0) + 1
        return summary

    def to_dict(self) -> dict[str, dict[str, str]]:
        return {name: fixture.to_dict() for name, fixture in self._fixtures.items()}

    def __contains__(self, name: object) -> bool:
        return name in self._fixtures

    def __len__(self) -> int:
        return len(self._fixtures)

    def __iter__(self) -> Iterator[str]:
        return iter(self._fixtures)
