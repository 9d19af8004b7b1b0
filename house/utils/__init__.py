"""Utility modules for house-fixtures."""

from house.utils.logging import configure_logging, get_logger
from house.utils.result import (
    ConfigError,
    Err,
    FixtureStateError,
    Ok,
    Result,
    ResultError,
)

__all__ = [
    # Logging
    "configure_logging",
    "get_logger",
    # Result
    "Ok",
    "Err",
    "Result",
    "ResultError",
    "ConfigError",
    "FixtureStateError",
]
