"""Pytest configuration for integration tests."""

import pytest

from liftlog.config import get_settings


def pytest_collection_modifyitems(items):
    """Tag everything under integration_tests so `-m "not integration"` skips it."""
    for item in items:
        if "integration_tests" in str(item.path):
            item.add_marker(pytest.mark.integration)


@pytest.fixture(autouse=True)
def fresh_settings():
    """Re-read LIFTLOG_* variables for every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
