"""
Pydantic schema for the search form options endpoint.
"""

from __future__ import annotations

from pydantic import BaseModel

from .search import WishFiltersSchema


class OptionsResponse(BaseModel):
    """Vocabularies and default filters for building the search form."""

    genders: list[str]
    syllables: list[int]
    themes: list[str]
    deities: list[str]
    sources: list[str]
    scripts: list[str]
    vibes: list[str]
    max_results: int
    default_filters: WishFiltersSchema
