"""
Pytest configuration and fixtures.
"""

import logging
from pathlib import Path

import pytest


EXAMPLE_CONFIG = """\
# network
endpoint = localhost:3000
debug = true

; logging
log.file = /var/log/console.log
log.name = default.log
"""

EXAMPLE_SCHEMA = """\
endpoint = string
debug = bool
log.file = string
log.name = string
"""


@pytest.fixture
def example_config_path(tmp_path: Path) -> Path:
    """Path to example config file."""
    path = tmp_path / "app.conf"
    path.write_text(EXAMPLE_CONFIG)
    return path


@pytest.fixture
def example_schema_path(tmp_path: Path) -> Path:
    """Path to example schema file."""
    path = tmp_path / "app.schema"
    path.write_text(EXAMPLE_SCHEMA)
    return path


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers installed by setup_logging() between tests."""
    yield
    logger = logging.getLogger("kvschema")
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
