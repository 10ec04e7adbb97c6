"""
Pydantic schemas for name catalog endpoints (cards, detail view, compare drawer).
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from namastra.core.models import NameRecord


class NameRecordResponse(BaseModel):
    """A catalog entry as shown on name cards and in the detail view."""

    id: str
    name: str
    gender: str
    scripts: dict[str, str] = Field(default_factory=dict, description="Spelling per script (may be partial)")
    syllables: int
    phonetic_start: str
    deity_affinity: str
    sources: list[str]
    meaning: str
    language: str
    region_tags: list[str]
    modernity: int = Field(ge=1, le=5)
    global_pronounce: int = Field(ge=1, le=5)
    nicknames: list[str]
    related: list[str]
    popularity: str | None = None

    @classmethod
    def from_record(cls, record: NameRecord) -> NameRecordResponse:
        return cls(
            id=record.id,
            name=record.name,
            gender=record.gender.value,
            scripts=dict(record.scripts),
            syllables=record.syllables,
            phonetic_start=record.phonetic_start,
            deity_affinity=record.deity_affinity,
            sources=list(record.sources),
            meaning=record.meaning,
            language=record.language,
            region_tags=list(record.region_tags),
            modernity=record.modernity,
            global_pronounce=record.global_pronounce,
            nicknames=list(record.nicknames),
            related=list(record.related),
            popularity=record.popularity.value if record.popularity else None,
        )


class CompareRequest(BaseModel):
    """Request body for the compare drawer."""

    name_ids: list[str] = Field(min_length=1, max_length=40)


class CompareResponse(BaseModel):
    """Names side by side, in corpus order."""

    items: list[NameRecordResponse]
    missing_ids: list[str] = Field(default_factory=list)
