"""
Pydantic schemas for the NamAstra API.

Re-exports all schemas for convenient importing.
"""

from __future__ import annotations

from .names import CompareRequest, CompareResponse, NameRecordResponse
from .options import OptionsResponse
from .search import (
    BirthDetailsSchema,
    FiltersResponse,
    NakshatraResponse,
    ParseSearchRequest,
    ParseWishesRequest,
    SearchRequest,
    SearchResponse,
    WishFiltersSchema,
)

__all__ = [
    # Names
    "CompareRequest",
    "CompareResponse",
    "NameRecordResponse",
    # Options
    "OptionsResponse",
    # Search
    "BirthDetailsSchema",
    "FiltersResponse",
    "NakshatraResponse",
    "ParseSearchRequest",
    "ParseWishesRequest",
    "SearchRequest",
    "SearchResponse",
    "WishFiltersSchema",
]
