"""
Shared dependencies for the NamAstra API.

This module provides:
- Construction of the wish parser and astrology collaborators from settings
- The process-wide NameSearchService (read-only apart from parser token counters)
"""

from __future__ import annotations

import logging
from functools import lru_cache

from namastra.data.corpus import get_corpus
from namastra.integration.ai_types import ParserConfig, WishParser
from namastra.integration.astrology import AstrologyProvider, create_astrology_provider
from namastra.integration.provider_factory import create_parser
from namastra.search.filter_resolver import FilterResolver
from namastra.search.name_matcher import NameMatcher

from .services.search_service import NameSearchService
from .settings import Settings, get_settings

logger = logging.getLogger(__name__)


def build_parser(settings: Settings) -> WishParser | None:
    """Create the configured wish parser.

    A misconfigured parser is logged and left out; searches then run on the
    caller's filters alone.
    """
    config = ParserConfig(
        provider=settings.ai_provider,
        model=settings.ai_model,
        timeout=settings.ai_timeout,
        api_key=settings.openai_api_key or None,
        base_url=settings.ai_base_url,
    )
    try:
        parser = create_parser(config)
    except ValueError as e:
        logger.error(f"Wish parser disabled: {e}")
        return None
    logger.info(f"Wish parser: {parser.name} ({settings.ai_model})")
    return parser


def build_astrology(settings: Settings) -> AstrologyProvider:
    """Create the configured astrology provider."""
    return create_astrology_provider(settings.astrology_provider)


def build_search_service(settings: Settings) -> NameSearchService:
    """Wire matcher, resolver and collaborators into a service."""
    corpus = get_corpus()
    resolver = FilterResolver(parser=build_parser(settings), astrology=build_astrology(settings))
    logger.info(f"Loaded name corpus with {len(corpus)} records")
    return NameSearchService(NameMatcher(corpus), resolver)


@lru_cache
def get_search_service() -> NameSearchService:
    """FastAPI dependency returning the shared search service (overridable in tests)."""
    return build_search_service(get_settings())
