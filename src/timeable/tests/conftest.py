"""Shared fixtures."""

import pytest

from timeable.foundation.config import clear_settings_cache


@pytest.fixture(autouse=True)
def clean_settings() -> object:
    """Reload settings from the environment for each test."""
    clear_settings_cache()
    yield
    clear_settings_cache()
