"""Integration layer for external collaborators.

Provides clean interfaces for the wish parser and the astrology lookup."""

from __future__ import annotations

from .ai_schemas import AIWishFragment
from .ai_types import ParserConfig, ParseResult, ProviderType, WishParser
from .astrology import (
    AstrologyProvider,
    NakshatraResult,
    StubAstrologyProvider,
    create_astrology_provider,
)
from .provider_factory import MockWishParser, ProviderFactory, create_parser

__all__ = [
    # Wish parser
    "AIWishFragment",
    "MockWishParser",
    "ParseResult",
    "ParserConfig",
    "ProviderFactory",
    "ProviderType",
    "WishParser",
    "create_parser",
    # Astrology
    "AstrologyProvider",
    "NakshatraResult",
    "StubAstrologyProvider",
    "create_astrology_provider",
]
