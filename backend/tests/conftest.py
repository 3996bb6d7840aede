"""Root conftest: shared test configuration."""

import os

import pytest

from netpager.config import get_settings

# Tests run against the documented defaults, not a developer's .env
os.environ.setdefault("DEFAULT_PAGE_SIZE", "20")
os.environ.setdefault("MAX_PAGE_SIZE", "100")
os.environ.setdefault("LOG_FORMAT", "text")


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
