"""Tests for ProviderFactory and the keyword-based mock wish parser."""

from __future__ import annotations

import pytest

from namastra.integration.ai_types import ParserConfig, ParseResult, WishParser
from namastra.integration.openai_provider import OpenAIWishParser
from namastra.integration.provider_factory import MockWishParser, ProviderFactory, create_parser


class TestProviderFactory:
    def test_create_mock(self):
        parser = create_parser(ParserConfig(provider="mock", model="none"))

        assert isinstance(parser, MockWishParser)
        assert parser.name == "mock"

    def test_create_openai(self):
        config = ParserConfig(provider="OpenAI", model="gpt-4.1-mini", api_key="test-key", timeout=10)

        parser = create_parser(config)

        assert isinstance(parser, OpenAIWishParser)
        assert parser.model == "gpt-4.1-mini"

    def test_openai_requires_api_key(self):
        with pytest.raises(ValueError, match="API key is required"):
            create_parser(ParserConfig(provider="openai", model="gpt-4.1-mini"))

    def test_unknown_provider(self):
        with pytest.raises(ValueError, match="Unsupported provider: llama"):
            create_parser(ParserConfig(provider="llama", model="x"))

    def test_register_provider(self):
        class EchoParser(WishParser):
            def __init__(self, config):
                self.config = config

            @property
            def name(self):
                return "echo"

            async def parse_wishes(self, wish_text):
                return ParseResult(fragment={"start_letters": [wish_text[:1].upper()]})

        factory = ProviderFactory()
        factory.register_provider("echo", EchoParser)

        parser = factory.create(ParserConfig(provider="echo", model="x"))

        assert parser.name == "echo"

    def test_config_rejects_bad_timeout(self):
        with pytest.raises(ValueError):
            ParserConfig(provider="mock", model="x", timeout=0)


class TestMockWishParser:
    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "wish, expected",
        [
            ("A two syllable name starting with Ve", {"syllables": 2, "start_letters": ["Ve"]}),
            ("baby girl, 3 syllables", {"gender": "girl", "syllables": 3}),
            ("a strong boy name linked to Vishnu", {"gender": "boy", "deity": "Vishnu", "vibe": "strong"}),
            ("something from the Puranas or Upanishads", {"sources": ["Upanishads", "Puranas"]}),
            ("boy or girl, starts with A or Ha", {"gender": "unisex", "start_letters": ["A", "Ha"]}),
            ("a gentle gender neutral name", {"gender": "unisex", "vibe": "soft"}),
            ("a boy name that starts with the letter V", {"gender": "boy", "start_letters": ["V"]}),
            ("starting with letters S or Ra", {"start_letters": ["S", "Ra"]}),
            ("any gender, starts with Ha", {"gender": None, "start_letters": ["Ha"]}),
        ],
    )
    async def test_extracts_keywords(self, wish, expected):
        result = await MockWishParser().parse_wishes(wish)

        assert result.fragment == expected
        assert result.is_usable

    @pytest.mark.asyncio
    async def test_nothing_recognised(self):
        result = await MockWishParser().parse_wishes("surprise me")

        assert result.fragment == {}

    @pytest.mark.asyncio
    async def test_blank_text(self):
        parser = MockWishParser()

        result = await parser.parse_wishes("  ")

        assert result.fragment == {}
        assert parser.calls == 1
