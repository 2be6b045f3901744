"""
Root Pytest Fixtures.

Shared fixtures available to all test types.
"""

from datetime import datetime

import pytest

from noteapp.core.config import get_app_config, get_settings


# =============================================================================
# Configuration Cache
# =============================================================================


@pytest.fixture(autouse=True)
def _clear_config_cache():
    """Clear lru_cache between tests so each test gets a fresh load."""
    get_settings.cache_clear()
    get_app_config.cache_clear()
    yield
    get_settings.cache_clear()
    get_app_config.cache_clear()


# =============================================================================
# Clock Fixtures
# =============================================================================


FIXED_NOW = datetime(2026, 10, 19, 14, 5, 9)


@pytest.fixture
def fixed_clock():
    """Clock that always returns FIXED_NOW."""
    return lambda: FIXED_NOW
