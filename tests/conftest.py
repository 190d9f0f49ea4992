"""Pytest configuration and fixtures."""

import logging

import pytest

from fluentexpect import configure, default_registry


@pytest.fixture(autouse=True)
def restore_state():
    """Undo settings, log level and matcher registrations changed by a test."""
    snapshot = dict(default_registry._matchers)
    package_logger = logging.getLogger("fluentexpect")
    level = package_logger.level
    yield
    default_registry._matchers = snapshot
    configure()
    package_logger.setLevel(level)
