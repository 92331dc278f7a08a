"""
Pytest configuration and shared fixtures.

This file provides common fixtures for all tests.
"""

import pytest

from app.core.site_config import SiteConfig, site_config
from app.services.censor import CensorFilter, get_censor_filter


class MutableWordList:
    """Stands in for the live config accessor; tests change .value between calls."""

    def __init__(self, value: str = "") -> None:
        self.value = value
        self.reads = 0

    def __call__(self) -> str:
        self.reads += 1
        return self.value


@pytest.fixture(autouse=True)
def restore_site_config():
    """Undo changes tests make to the process-wide site configuration."""
    snapshot = site_config.snapshot()
    yield
    site_config.update(snapshot)
    get_censor_filter().invalidate()


@pytest.fixture
def word_list() -> MutableWordList:
    return MutableWordList()


@pytest.fixture
def censor_filter(word_list: MutableWordList) -> CensorFilter:
    """Censor filter reading from the word_list fixture."""
    return CensorFilter(word_list)


@pytest.fixture
def no_censor() -> CensorFilter:
    return CensorFilter(lambda: "")


@pytest.fixture
def fresh_site_config() -> SiteConfig:
    return SiteConfig()
