"""Pytest configuration and fixtures for responders tests."""

from __future__ import annotations

import logging
from collections.abc import Generator

import pytest

from responders import ResponderConfig, set_config


@pytest.fixture(autouse=True)
def reset_config() -> Generator[None, None, None]:
    """Restore the default process-wide config after every test."""
    yield
    set_config(ResponderConfig())


@pytest.fixture
def package_logger() -> Generator[logging.Logger, None, None]:
    """The responders package logger, with its handlers and level restored afterwards."""
    logger = logging.getLogger("responders")
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield logger
    logger.handlers = handlers
    logger.setLevel(level)
    logger.propagate = propagate
