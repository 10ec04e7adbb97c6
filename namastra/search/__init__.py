"""Filter resolution and name matching."""

from __future__ import annotations

from .filter_resolver import FilterResolver, ResolvedFilters, merge_filters
from .name_matcher import NameMatcher, match_names

__all__ = [
    "FilterResolver",
    "NameMatcher",
    "ResolvedFilters",
    "match_names",
    "merge_filters",
]
