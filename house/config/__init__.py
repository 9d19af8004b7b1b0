"""Configuration module for house-fixtures."""

from house.config.settings import FixtureSpec, HouseConfig, LoggingConfig, load_config

__all__ = ["FixtureSpec", "HouseConfig", "LoggingConfig", "load_config"]
