"""Shared fixtures for resultkit tests."""

import pytest

from resultkit.errors import reset_formatter
from resultkit.foundation.config import clear_settings_cache


@pytest.fixture(autouse=True)
def clean_config() -> object:
    """Reset settings and the process formatter before and after each test."""
    clear_settings_cache()
    reset_formatter()
    yield
    clear_settings_cache()
    reset_formatter()
