"""
Pydantic schemas for search endpoints.

Request filters are validated against the known vocabularies; the schemas
convert to and from the WishFilters domain model.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator

from namastra.core.constants import DEITIES, SCRIPTS, SOURCES, THEMES
from namastra.core.models import BirthDetails, Gender, Vibe, WishFilters
from namastra.integration.astrology import NakshatraResult

from .names import NameRecordResponse


def _check_vocabulary(values: list[str] | None, allowed: tuple[str, ...], label: str) -> list[str] | None:
    if values is None:
        return None
    unknown = [v for v in values if v not in allowed]
    if unknown:
        raise ValueError(f"unknown {label}: {', '.join(unknown)}")
    return values


class BirthDetailsSchema(BaseModel):
    """Birth descriptor. All three fields are needed for the astrology lookup."""

    date: str | None = None
    time: str | None = None
    place: str | None = None

    def to_domain(self) -> BirthDetails:
        return BirthDetails(date=self.date, time=self.time, place=self.place)


class WishFiltersSchema(BaseModel):
    """Search filters. Omitted or null fields place no restriction."""

    gender: Literal["boy", "girl", "unisex"] | None = "boy"
    syllables: int | None = Field(default=None, ge=1)
    script: str | None = "Latin"
    deity: str | None = None
    sources: list[str] | None = None
    themes: list[str] | None = None
    start_letters: list[str] | None = None
    vibe: Literal["soft", "strong", "any"] | None = "any"
    length_max: int | None = Field(default=None, ge=1, description="Maximum name length (null = unlimited)")
    global_pronounce: bool | None = True
    birth: BirthDetailsSchema | None = None
    vedic_mode: bool = False
    start_sounds: list[str] | None = None

    @field_validator("script")
    @classmethod
    def validate_script(cls, v: str | None) -> str | None:
        if v is not None and v not in SCRIPTS:
            raise ValueError(f"unknown script: {v}")
        return v

    @field_validator("deity")
    @classmethod
    def validate_deity(cls, v: str | None) -> str | None:
        if v is not None and v not in DEITIES:
            raise ValueError(f"unknown deity: {v}")
        return v

    @field_validator("sources")
    @classmethod
    def validate_sources(cls, v: list[str] | None) -> list[str] | None:
        return _check_vocabulary(v, SOURCES, "sources")

    @field_validator("themes")
    @classmethod
    def validate_themes(cls, v: list[str] | None) -> list[str] | None:
        return _check_vocabulary(v, THEMES, "themes")

    @field_validator("start_letters", "start_sounds")
    @classmethod
    def strip_prefixes(cls, v: list[str] | None) -> list[str] | None:
        """Trim entries and drop blanks, as the comma-separated form input does."""
        if v is None:
            return None
        return [item.strip() for item in v if item.strip()]

    def to_filters(self) -> WishFilters:
        return WishFilters(
            gender=Gender(self.gender) if self.gender else None,
            syllables=self.syllables,
            script=self.script,
            deity=self.deity,
            sources=list(self.sources) if self.sources is not None else None,
            themes=list(self.themes) if self.themes is not None else None,
            start_letters=list(self.start_letters) if self.start_letters is not None else None,
            vibe=Vibe(self.vibe) if self.vibe else None,
            length_max=self.length_max,
            global_pronounce=self.global_pronounce,
            birth=self.birth.to_domain() if self.birth else None,
            vedic_mode=self.vedic_mode,
            start_sounds=list(self.start_sounds) if self.start_sounds is not None else None,
        )


class FiltersResponse(BaseModel):
    """Resolved filters as used for matching.

    Unlike the request schema this is not checked against the vocabularies:
    parsed wish fragments may carry values the form does not offer.
    """

    gender: str | None = None
    syllables: int | None = None
    script: str | None = None
    deity: str | None = None
    sources: list[str] | None = None
    themes: list[str] | None = None
    start_letters: list[str] | None = None
    vibe: str | None = None
    length_max: int | None = None
    global_pronounce: bool | None = None
    birth: BirthDetailsSchema | None = None
    vedic_mode: bool = False
    start_sounds: list[str] | None = None

    @classmethod
    def from_filters(cls, filters: WishFilters) -> FiltersResponse:
        birth = None
        if filters.birth is not None:
            birth = BirthDetailsSchema(date=filters.birth.date, time=filters.birth.time, place=filters.birth.place)
        return cls(
            gender=filters.gender.value if filters.gender else None,
            syllables=filters.syllables,
            script=filters.script,
            deity=filters.deity,
            sources=filters.sources,
            themes=filters.themes,
            start_letters=filters.start_letters,
            vibe=filters.vibe.value if filters.vibe else None,
            length_max=filters.length_max,
            global_pronounce=filters.global_pronounce,
            birth=birth,
            vedic_mode=filters.vedic_mode,
            start_sounds=filters.start_sounds,
        )


class SearchRequest(BaseModel):
    """Request body for a filter search ("Search" / "Compute & Search")."""

    filters: WishFiltersSchema = Field(default_factory=WishFiltersSchema)


class ParseSearchRequest(BaseModel):
    """Request body for "Parse & Search"."""

    wish_text: str = Field(min_length=1, max_length=2000)
    filters: WishFiltersSchema = Field(default_factory=WishFiltersSchema)


class ParseWishesRequest(BaseModel):
    """Request body for the raw wish parser endpoint."""

    text: str = Field(max_length=2000)


class NakshatraResponse(BaseModel):
    """Astrology lookup used to derive start sounds."""

    nakshatra: str
    pada: int
    start_sounds: list[str]

    @classmethod
    def from_result(cls, result: NakshatraResult) -> NakshatraResponse:
        return cls(nakshatra=result.nakshatra, pada=result.pada, start_sounds=list(result.start_sounds))


class SearchResponse(BaseModel):
    """Search outcome. An empty results list is a normal no-match outcome."""

    filters: FiltersResponse
    results: list[NameRecordResponse]
    count: int
    constraints: list[str] = Field(description="Constraints that were active during matching")
    nakshatra: NakshatraResponse | None = None
    fragment_applied: bool = False
