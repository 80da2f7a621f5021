"""
Pytest configuration and fixtures.

This file provides pytest-specific configuration and fixtures.
For standard test utilities, see tests/__init__.py
"""

import pytest


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "api: marks tests that exercise the HTTP layer (deselect with '-m \"not api\"')"
    )


@pytest.fixture(autouse=True)
def disable_rate_limiting():
    """Turn the slowapi limiter off so repeated requests never hit 429."""
    from web.backend.rate_limit import limiter

    limiter.enabled = False
    yield
    limiter.enabled = True


@pytest.fixture(autouse=True)
def fresh_config_cache():
    """Drop the cached AppConfig so env overrides in one test don't leak."""
    from web.backend.config import get_config

    get_config.cache_clear()
    yield
    get_config.cache_clear()
