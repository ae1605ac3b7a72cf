"""
Pytest configuration for nba-stats tests.
"""

import pytest

from nba_stats.config import Settings

from .payloads import FakeFetcher, default_responses


@pytest.fixture
def settings():
    return Settings(base_url="https://stats.test/stats", user_agent="nba-stats tests")


@pytest.fixture
def fetcher():
    return FakeFetcher(default_responses())


@pytest.fixture
def slow_fetcher():
    """Fetcher whose requests stay in flight long enough for callers to pile up."""
    return FakeFetcher(default_responses(), delay=0.01)
