"""
Tests for the search and names HTTP endpoints.

Tests for:
- POST /api/search, /api/search/parse, /api/search/vedic
- POST /api/parse-wishes
- GET /api/names/{name_id}, POST /api/names/compare
- GET /health, GET /api/options

The search service is overridden with one wired to the mock parser and the
stub astrology provider.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from api.dependencies import get_search_service
from api.main import create_app
from api.services.search_service import NameSearchService
from namastra.data.corpus import SAMPLE_NAMES
from namastra.integration.ai_types import ParseResult, WishParser
from namastra.integration.astrology import StubAstrologyProvider
from namastra.integration.provider_factory import MockWishParser
from namastra.search.filter_resolver import FilterResolver
from namastra.search.name_matcher import NameMatcher

COMPLETE_BIRTH = {"date": "2024-05-01", "time": "06:30", "place": "Chennai"}


class ChattyParser(WishParser):
    """Parser whose model answers in prose instead of JSON."""

    @property
    def name(self):
        return "chatty"

    async def parse_wishes(self, wish_text):
        return ParseResult(raw_text="What a lovely idea! How about Vihaan?")


def make_client(parser: WishParser | None = None) -> TestClient:
    service = NameSearchService(
        NameMatcher(SAMPLE_NAMES),
        FilterResolver(parser=parser or MockWishParser(), astrology=StubAstrologyProvider()),
    )
    app = create_app()
    app.dependency_overrides[get_search_service] = lambda: service
    return TestClient(app)


@pytest.fixture
def client():
    return make_client()


def result_names(response):
    return [item["name"] for item in response.json()["results"]]


class TestSearchEndpoint:
    def test_boy_two_syllables(self, client):
        response = client.post("/api/search", json={"filters": {"gender": "boy", "syllables": 2}})

        assert response.status_code == 200
        data = response.json()
        assert result_names(response) == ["Vihaan", "Vedant", "Vasu", "Hriday", "Harish"]
        assert data["count"] == 5
        assert data["constraints"] == ["gender", "syllables"]

    def test_deity_filter(self, client):
        response = client.post("/api/search", json={"filters": {"deity": "Vishnu"}})

        assert result_names(response) == ["Vihaan", "Vasu", "Harish"]

    def test_start_letters(self, client):
        response = client.post("/api/search", json={"filters": {"start_letters": [" Ve ", ""]}})

        assert result_names(response) == ["Vedant"]
        assert response.json()["filters"]["start_letters"] == ["Ve"]

    def test_no_results_is_not_an_error(self, client):
        response = client.post("/api/search", json={"filters": {"gender": "girl"}})

        assert response.status_code == 200
        assert response.json()["results"] == []
        assert response.json()["count"] == 0

    def test_empty_body_uses_default_filters(self, client):
        response = client.post("/api/search")

        assert response.status_code == 200
        data = response.json()
        assert data["count"] == 5
        assert data["filters"]["gender"] == "boy"
        assert data["filters"]["script"] == "Latin"

    @pytest.mark.parametrize(
        "filters",
        [
            {"script": "Klingon"},
            {"deity": "Zeus"},
            {"sources": ["Wikipedia"]},
            {"syllables": 0},
            {"gender": "other"},
        ],
    )
    def test_invalid_filters_rejected(self, client, filters):
        response = client.post("/api/search", json={"filters": filters})

        assert response.status_code == 422


class TestParseAndSearchEndpoint:
    def test_wish_is_merged_over_filters(self, client):
        response = client.post(
            "/api/search/parse",
            json={"wish_text": "a two syllable name starting with Ve", "filters": {"gender": "boy"}},
        )

        assert response.status_code == 200
        data = response.json()
        assert result_names(response) == ["Vedant"]
        assert data["filters"]["syllables"] == 2
        assert data["fragment_applied"] is True

    def test_unreadable_parser_output_falls_back_to_filters(self):
        client = make_client(ChattyParser())

        response = client.post(
            "/api/search/parse",
            json={"wish_text": "something lovely", "filters": {"deity": "Vishnu"}},
        )

        assert response.status_code == 200
        assert result_names(response) == ["Vihaan", "Vasu", "Harish"]
        assert response.json()["fragment_applied"] is False

    def test_empty_wish_rejected(self, client):
        response = client.post("/api/search/parse", json={"wish_text": ""})

        assert response.status_code == 422


class TestComputeAndSearchEndpoint:
    def test_complete_birth_sets_start_sounds(self, client):
        response = client.post("/api/search/vedic", json={"filters": {"birth": COMPLETE_BIRTH}})

        assert response.status_code == 200
        data = response.json()
        assert data["nakshatra"] == {"nakshatra": "Pushya", "pada": 3, "start_sounds": ["Hu", "He", "Ho", "Da"]}
        assert data["filters"]["vedic_mode"] is True
        assert data["filters"]["start_sounds"] == ["Hu", "He", "Ho", "Da"]
        assert "start_sounds" in data["constraints"]
        assert data["results"] == []

    def test_incomplete_birth_keeps_start_sounds(self, client):
        response = client.post(
            "/api/search/vedic",
            json={"filters": {"birth": {"date": "2024-05-01"}, "start_sounds": ["Va"]}},
        )

        data = response.json()
        assert data["nakshatra"] is None
        assert result_names(response) == ["Vasu"]


class TestParseWishesEndpoint:
    def test_returns_fragment_with_camel_case_letters(self, client):
        response = client.post("/api/parse-wishes", json={"text": "a boy name starting with Ve"})

        assert response.status_code == 200
        assert response.json() == {"gender": "boy", "startLetters": ["Ve"]}

    def test_unreadable_output_returns_raw_text(self):
        client = make_client(ChattyParser())

        response = client.post("/api/parse-wishes", json={"text": "anything"})

        assert response.json() == {"rawText": "What a lovely idea! How about Vihaan?"}

    def test_blank_text_returns_empty_object(self, client):
        response = client.post("/api/parse-wishes", json={"text": "  "})

        assert response.json() == {}


class TestNamesEndpoints:
    def test_get_name(self, client):
        response = client.get("/api/names/2")

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Vedant"
        assert data["scripts"]["Devanagari"] == "वेदान्त"
        assert data["sources"] == ["Upanishads"]
        assert data["popularity"] == "common"

    def test_unknown_name_is_404(self, client):
        response = client.get("/api/names/unknown")

        assert response.status_code == 404
        assert "unknown" in response.json()["detail"]

    def test_compare_keeps_corpus_order(self, client):
        response = client.post("/api/names/compare", json={"name_ids": ["5", "1", "zzz", "5"]})

        assert response.status_code == 200
        data = response.json()
        assert [item["name"] for item in data["items"]] == ["Vihaan", "Harish"]
        assert data["missing_ids"] == ["zzz"]

    def test_compare_requires_ids(self, client):
        response = client.post("/api/names/compare", json={"name_ids": []})

        assert response.status_code == 422


class TestCoreEndpoints:
    def test_health(self, client):
        response = client.get("/health")

        assert response.json() == {"status": "healthy", "service": "namastra-api"}

    def test_options(self, client):
        response = client.get("/api/options")

        assert response.status_code == 200
        data = response.json()
        assert data["genders"] == ["boy", "girl", "unisex"]
        assert data["max_results"] == 40
        assert "Multiple" in data["deities"]
        assert data["default_filters"]["vibe"] == "any"
        assert data["default_filters"]["global_pronounce"] is True

    def test_lifespan_builds_and_closes_service(self):
        get_search_service.cache_clear()
        try:
            with TestClient(create_app()) as client:
                response = client.post("/api/search", json={"filters": {"deity": "Vishnu"}})
                assert response.json()["count"] == 3
        finally:
            get_search_service.cache_clear()

    def test_restart_builds_fresh_service(self):
        get_search_service.cache_clear()
        try:
            with TestClient(create_app()):
                first = get_search_service()

            assert get_search_service.cache_info().currsize == 0

            with TestClient(create_app()) as client:
                second = get_search_service()
                response = client.post("/api/search", json={"filters": {"deity": "Vishnu"}})
                assert response.json()["count"] == 3

            assert second is not first
        finally:
            get_search_service.cache_clear()
