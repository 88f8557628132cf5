"""Pytest configuration shared by all querier suites."""

from __future__ import annotations

from typing import Generator

import pytest

from querier.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings() -> Generator[None, None, None]:
    """Reload settings for every test so monkeypatched env vars take effect."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
