"""Core domain models and vocabularies."""

from __future__ import annotations

from .constants import (
    DEITIES,
    MAX_RESULTS,
    MULTIPLE_DEITY,
    NO_DEITY,
    SCRIPTS,
    SOURCES,
    THEMES,
)
from .models import BirthDetails, Gender, NameRecord, Popularity, Vibe, WishFilters

__all__ = [
    "DEITIES",
    "MAX_RESULTS",
    "MULTIPLE_DEITY",
    "NO_DEITY",
    "SCRIPTS",
    "SOURCES",
    "THEMES",
    "BirthDetails",
    "Gender",
    "NameRecord",
    "Popularity",
    "Vibe",
    "WishFilters",
]
