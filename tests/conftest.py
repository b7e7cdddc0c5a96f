"""Pytest configuration and shared fixtures."""

import pytest

from calgrid.config import reset_calgrid_config


@pytest.fixture(autouse=True)
def reset_calgrid_config_for_all_tests():
    """Reset the configuration singleton before and after each test.

    The configuration is a module-level singleton that persists across tests.
    This fixture ensures each test starts from the default settings.
    """
    reset_calgrid_config()
    yield
    reset_calgrid_config()
