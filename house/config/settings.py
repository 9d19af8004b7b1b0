"""Configuration for a house of fixtures.

A house is described in YAML: logging settings plus a list of named
fixtures with their initial state.

    logging:
      level: debug
      format: text
    fixtures:
      - name: front_door
        kind: door
        state: {open: closed, lock: locked}
      - name: kitchen_window
        kind: window
        state: {state: open}
      - name: desk_chair
        kind: chair
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml

from house.fixtures import FIXTURE_TYPES
from house.utils.logging import LEVELS
from house.utils.result import ConfigError, Err, Ok, Result

CONFIG_FILENAME = "house.yaml"


@dataclass
class LoggingConfig:
    """Logging settings."""

    level: str = "info"
    format: str = "json"


@dataclass
class FixtureSpec:
    """One named fixture and its initial state."""

    name: str
    kind: str
    state: dict[str, str] = field(default_factory=dict)


@dataclass
class HouseConfig:
    """Complete house configuration."""

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    fixtures: list[FixtureSpec] = field(default_factory=list)

    @classmethod
    def from_yaml(cls, path: Path) -> Result["HouseConfig", ConfigError]:
        """
        Load configuration from a YAML file.

        Args:
            path: Path to YAML configuration file

        Returns:
            Result with loaded config or error
        """
        path = Path(path)

        if not path.exists():
            return Err(ConfigError(
                field="path",
                message=f"Configuration file not found: {path}",
            ))

        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            return Err(ConfigError(
                field="yaml",
                message=f"Failed to parse YAML: {e}",
            ))
        except OSError as e:
            return Err(ConfigError(
                field="file",
                message=f"Failed to read config file: {e}",
            ))

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Result["HouseConfig", ConfigError]:
        """
        Create configuration from a dictionary.

        Args:
            data: Configuration dictionary

        Returns:
            Result with loaded config or error
        """
        if not isinstance(data, dict):
            return Err(ConfigError(
                field="root",
                message=f"Expected a mapping, got {type(data).__name__}",
            ))

        logging_data = data.get("logging") or {}
        if not isinstance(logging_data, dict):
            return Err(ConfigError(
                field="logging",
                message=f"Expected a mapping, got {type(logging_data).__name__}",
            ))
        logging_config = LoggingConfig(
            level=str(logging_data.get("level", "info")),
            format=str(logging_data.get("format", "json")),
        )

        fixtures = []
        for index, entry in enumerate(data.get("fixtures") or []):
            if not isinstance(entry, dict) or "name" not in entry or "kind" not in entry:
                return Err(ConfigError(
                    field=f"fixtures[{index}]",
                    message="Each fixture needs a 'name' and a 'kind'",
                ))
            state = entry.get("state") or {}
            if not isinstance(state, dict):
                return Err(ConfigError(
                    field=f"fixtures[{index}].state",
                    message=f"Expected a mapping, got {type(state).__name__}",
                ))
            fixtures.append(FixtureSpec(
                name=str(entry["name"]),
                kind=str(entry["kind"]),
                state={str(k): str(v) for k, v in state.items()},
            ))

        return Ok(cls(logging=logging_config, fixtures=fixtures))

    def validate(self) -> Result[None, ConfigError]:
        """
        Validate configuration values.

        Every fixture must have a known kind, a unique name and a state the
        fixture can actually start in.

        Returns:
            Result indicating success or validation error
        """
        if self.logging.level.lower() not in LEVELS:
            return Err(ConfigError(
                field="logging.level",
                message=f"Unknown log level: {self.logging.level}",
            ))
        if self.logging.format not in ("json", "text"):
            return Err(ConfigError(
                field="logging.format",
                message=f"Must be 'json' or 'text', got {self.logging.format}",
            ))

        seen: set[str] = set()
        for spec in self.fixtures:
            if spec.name in seen:
                return Err(ConfigError(
                    field=f"fixtures.{spec.name}",
                    message="Duplicate fixture name",
                ))
            seen.add(spec.name)

            fixture_type = FIXTURE_TYPES.get(spec.kind)
            if fixture_type is None:
                return Err(ConfigError(
                    field=f"fixtures.{spec.name}.kind",
                    message=f"Unknown fixture kind: {spec.kind}",
                ))

            try:
                fixture_type.from_dict(spec.state)
            except ValueError as e:
                return Err(ConfigError(
                    field=f"fixtures.{spec.name}.state",
                    message=str(e),
                ))

        return Ok(None)


def load_config(config_dir: Optional[Path] = None) -> Result[HouseConfig, ConfigError]:
    """
    Load configuration from the standard location.

    Reads ``house.yaml`` from ``config_dir`` and falls back to an empty house
    with default logging when the file is absent.

    Args:
        config_dir: Configuration directory (defaults to ./config)

    Returns:
        Result with loaded config or error
    """
    if config_dir is None:
        config_dir = Path("./config")

    config_path = Path(config_dir) / CONFIG_FILENAME
    if config_path.exists():
        result = HouseConfig.from_yaml(config_path)
        if result.is_err():
            return result
        config = result.unwrap()
    else:
        config = HouseConfig()

    validation_result = config.validate()
    if validation_result.is_err():
        return Err(validation_result.unwrap_err())

    return Ok(config)
