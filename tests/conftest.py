"""
Shared fixtures for the contextualizer test suite.

Author: Marc Rivero | @seifreed
"""

import logging

import pytest

from contextualizer.modules.config import (
    ENV_IGNORE_PRIVATE_IPS,
    ENV_IGNORED_DOMAINS,
    ENV_IGNORED_EMAILS,
)
from contextualizer.modules.logger import DEFAULT_LOGGER_NAME


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Run every test away from real config files and environment settings."""
    for name in (ENV_IGNORE_PRIVATE_IPS, ENV_IGNORED_DOMAINS, ENV_IGNORED_EMAILS):
        # setenv first so values loaded from a .env file are undone too
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)

    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(tmp_path)
    yield

    logger = logging.getLogger(DEFAULT_LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
