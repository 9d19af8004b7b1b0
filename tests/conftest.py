from __future__ import annotations

import io

import pytest
from structlog.testing import capture_logs

from house.utils.logging import configure_logging


@pytest.fixture
def captured_logs():
    """Debug-level structlog events emitted during the test."""
    configure_logging(level="debug", stream=io.StringIO())
    with capture_logs() as logs:
        yield logs
    configure_logging()


@pytest.fixture
def restore_logging():
    """Put the default logging setup back after code that reconfigures it."""
    yield
    configure_logging()
