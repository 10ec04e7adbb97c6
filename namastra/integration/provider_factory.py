"""Provider Factory - Creates wish parser instances based on configuration.

Supports OpenAI and a keyword-based Mock parser for local use and tests."""

from __future__ import annotations

import logging
import re
from typing import Any

from ..core.constants import DEITIES, NO_DEITY, SOURCES
from .ai_types import ParserConfig, ParseResult, ProviderType, WishParser

logger = logging.getLogger(__name__)

_NUMBER_WORDS = {"one": 1, "two": 2, "three": 3, "four": 4}

_GENDER_WORDS = {
    "boy": ("boy", "son", "male", "baby boy"),
    "girl": ("girl", "daughter", "female", "baby girl"),
    "unisex": ("unisex", "gender neutral", "gender-neutral"),
}

_VIBE_WORDS = {
    "soft": ("soft", "gentle", "sweet", "melodic"),
    "strong": ("strong", "bold", "powerful", "fierce"),
}

# "starts with the letter V", "starting with letters A or Ha"
_START_LETTERS = re.compile(
    r"\bstart(?:s|ing)?\s+with\s+(?:(?:the|a|an)\s+letters?\s+|letters?\s+)?"
    r"([a-z]{1,3}\b(?:\s*(?:,|\bor\b|\band\b)\s*[a-z]{1,3}\b)*)"
)


class MockWishParser(WishParser):
    """Deterministic keyword parser.

    Recognises gender words, "N syllable(s)", deity and source names from the
    known vocabularies, "starting with X" / "starts with the letter X, Y" and
    a handful of vibe adjectives. "any gender" yields an explicit null gender.
    """

    def __init__(self, config: ParserConfig | None = None):
        self.config = config
        self.calls = 0

    @property
    def name(self) -> str:
        return "mock"

    async def parse_wishes(self, wish_text: str) -> ParseResult:
        self.calls += 1
        text = wish_text.strip()
        if not text:
            return ParseResult(metadata={"provider": self.name})

        lowered = text.lower()
        fragment: dict[str, Any] = {}

        for gender in ("unisex", "girl", "boy"):
            if any(re.search(rf"\b{re.escape(word)}s?\b", lowered) for word in _GENDER_WORDS[gender]):
                fragment["gender"] = gender
                break
        # "boy or girl" style wishes fall back to unisex
        if re.search(r"\bboy\b", lowered) and re.search(r"\bgirl\b", lowered):
            fragment["gender"] = "unisex"
        if re.search(r"\b(?:any|either) gender\b", lowered):
            fragment["gender"] = None

        syllable_match = re.search(r"\b(\d|one|two|three|four)[\s-]+syllables?\b", lowered)
        if syllable_match:
            token = syllable_match.group(1)
            fragment["syllables"] = int(token) if token.isdigit() else _NUMBER_WORDS[token]

        for deity in DEITIES:
            if deity == NO_DEITY:
                continue
            if re.search(rf"\b{deity.lower()}\b", lowered):
                fragment["deity"] = deity
                break

        sources = [s for s in SOURCES if s != "None" and re.search(rf"\b{s.lower()}\b", lowered)]
        if sources:
            fragment["sources"] = sources

        letters_match = _START_LETTERS.search(lowered)
        if letters_match:
            letters = re.split(r"\s*(?:,|\bor\b|\band\b)\s*", letters_match.group(1))
            fragment["start_letters"] = [letter.capitalize() for letter in letters if letter]

        for vibe, words in _VIBE_WORDS.items():
            if any(re.search(rf"\b{word}\b", lowered) for word in words):
                fragment["vibe"] = vibe
                break

        logger.debug(f"Mock parser extracted {sorted(fragment)} from wish")
        return ParseResult(fragment=fragment, metadata={"provider": self.name, "mock": True})


class ProviderFactory:
    """Factory for creating wish parsers"""

    def __init__(self) -> None:
        self.providers: dict[str, type[WishParser]] = {
            ProviderType.MOCK.value: MockWishParser,
        }

    def register_provider(self, name: str, provider_class: type[WishParser]) -> None:
        """Register a custom provider class constructed with a ParserConfig."""
        self.providers[name] = provider_class
        logger.info(f"Registered wish parser provider: {name}")

    def create(self, config: ParserConfig) -> WishParser:
        """Create a parser instance.

        Raises:
            ValueError: If the provider is unknown or OpenAI has no API key
        """
        provider_type = config.provider.lower()

        if provider_type == ProviderType.OPENAI.value:
            from .openai_provider import OpenAIWishParser

            if not config.api_key:
                raise ValueError("API key is required for OpenAI provider")
            return OpenAIWishParser(
                api_key=config.api_key,
                model=config.model,
                base_url=config.base_url,
                timeout=float(config.timeout),
            )

        provider_class = self.providers.get(provider_type)
        if provider_class is None:
            available = ", ".join(sorted({ProviderType.OPENAI.value, *self.providers}))
            raise ValueError(f"Unsupported provider: {provider_type}. Available: {available}")
        return provider_class(config)  # type: ignore[call-arg]


def create_parser(config: ParserConfig) -> WishParser:
    """Create a parser using the default factory"""
    return ProviderFactory().create(config)
