"""
NamAstra - Core logic for baby name discovery.

This package contains:
- core: Domain models (NameRecord, WishFilters, BirthDetails) and vocabularies
- data: The static name corpus
- search: Filter resolution and deterministic name matching
- integration: External collaborators (wish parser, astrology)
"""

from namastra.core.models import BirthDetails, Gender, NameRecord, WishFilters
from namastra.search.filter_resolver import FilterResolver, ResolvedFilters, merge_filters
from namastra.search.name_matcher import NameMatcher, match_names

__all__ = [
    "BirthDetails",
    "FilterResolver",
    "Gender",
    "NameMatcher",
    "NameRecord",
    "ResolvedFilters",
    "WishFilters",
    "match_names",
    "merge_filters",
]
