"""
Root test configuration and fixtures for the namastra project.

This conftest.py provides common fixtures for all test categories:
- unit/: Fast, isolated unit tests (no network, mock parser, stub astrology)

Note: sys.path manipulation is handled here to ensure imports work correctly.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add project root to path to allow imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from namastra.core.models import BirthDetails, WishFilters  # noqa: E402
from namastra.data.corpus import SAMPLE_NAMES  # noqa: E402
from namastra.integration.astrology import StubAstrologyProvider  # noqa: E402
from namastra.integration.provider_factory import MockWishParser  # noqa: E402
from namastra.search.filter_resolver import FilterResolver  # noqa: E402
from namastra.search.name_matcher import NameMatcher  # noqa: E402


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch):
    """Keep tests away from real API keys and cached settings."""
    from api.settings import get_settings

    monkeypatch.setenv("AI_PROVIDER", "mock")
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def corpus():
    """The five-record sample corpus, in insertion order."""
    return SAMPLE_NAMES


@pytest.fixture
def matcher(corpus):
    return NameMatcher(corpus)


@pytest.fixture
def mock_parser():
    return MockWishParser()


@pytest.fixture
def astrology():
    return StubAstrologyProvider()


@pytest.fixture
def resolver(mock_parser, astrology):
    return FilterResolver(parser=mock_parser, astrology=astrology)


@pytest.fixture
def complete_birth():
    return BirthDetails(date="2024-05-01", time="06:30", place="Chennai")


@pytest.fixture
def default_filters():
    """Filters as the search form starts out."""
    return WishFilters()
