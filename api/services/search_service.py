"""Search service - the three search actions of the name finder.

Each call is one self-contained pipeline run:
    (optional) parse wish -> resolve filters -> (optional) astrology -> match

No state is kept between calls, so overlapping requests cannot overwrite
each other's filters or results.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from api.schemas.names import CompareResponse, NameRecordResponse
from api.schemas.search import FiltersResponse, NakshatraResponse, SearchResponse
from namastra.core.models import NameRecord, WishFilters
from namastra.data.corpus import find_name
from namastra.errors import UnknownNameError
from namastra.search.filter_resolver import FilterResolver, ResolvedFilters
from namastra.search.name_matcher import NameMatcher

logger = logging.getLogger(__name__)


class NameSearchService:
    """Business logic for name search - testable with a stub parser and astrology provider."""

    def __init__(self, matcher: NameMatcher, resolver: FilterResolver) -> None:
        """Initialize with the matcher (owns the corpus) and the resolver (owns the collaborators)."""
        self.matcher = matcher
        self.resolver = resolver

    @property
    def corpus(self) -> tuple[NameRecord, ...]:
        return self.matcher.corpus

    async def search(self, filters: WishFilters) -> SearchResponse:
        """Run a plain search. Vedic enrichment applies when filters ask for it."""
        resolved = await self.resolver.resolve(filters)
        return self._respond(resolved)

    async def compute_and_search(self, filters: WishFilters) -> SearchResponse:
        """Vedic tab search: forces Vedic mode so complete birth data yields start sounds."""
        vedic = filters.copy()
        vedic.vedic_mode = True
        resolved = await self.resolver.resolve(vedic)
        if resolved.nakshatra is None:
            logger.info("Compute & Search ran without an astrology result; start sounds unchanged")
        return self._respond(resolved)

    async def parse_and_search(self, wish_text: str, filters: WishFilters) -> SearchResponse:
        """Parse a free-text wish, merge it over filters, then search.

        A parser that fails or returns unreadable text leaves filters as they were.
        """
        fragment = await self.resolver.parse_fragment(wish_text)
        resolved = await self.resolver.resolve(filters, fragment)
        return self._respond(resolved)

    async def parse_wishes(self, text: str) -> dict[str, Any]:
        """Raw wish parser output: the fragment, or {"rawText": ...} when unreadable."""
        result = await self.resolver.parse_fragment(text)
        if result is None:
            return {}
        if not result.is_usable:
            return {"rawText": result.raw_text}
        fragment = dict(result.fragment)
        if "start_letters" in fragment:
            fragment["startLetters"] = fragment.pop("start_letters")
        return fragment

    def get_name(self, name_id: str) -> NameRecordResponse:
        """Detail view for one name.

        Raises:
            UnknownNameError: If name_id is not in the corpus
        """
        record = find_name(name_id, self.corpus)
        if record is None:
            raise UnknownNameError(name_id)
        return NameRecordResponse.from_record(record)

    def compare(self, name_ids: Sequence[str]) -> CompareResponse:
        """Compare drawer contents, in corpus order. Unknown ids are reported, not fatal."""
        wanted = set(name_ids)
        items = [NameRecordResponse.from_record(r) for r in self.corpus if r.id in wanted]
        found = {item.id for item in items}
        missing = [name_id for name_id in dict.fromkeys(name_ids) if name_id not in found]
        return CompareResponse(items=items, missing_ids=missing)

    async def close(self) -> None:
        """Release collaborator resources."""
        if self.resolver.parser is not None:
            await self.resolver.parser.close()

    def _respond(self, resolved: ResolvedFilters) -> SearchResponse:
        results = self.matcher.match(resolved.filters)
        constraints = self.matcher.active_constraints(resolved.filters)
        logger.info(f"Search returned {len(results)} name(s) using constraints {constraints}")
        return SearchResponse(
            filters=FiltersResponse.from_filters(resolved.filters),
            results=[NameRecordResponse.from_record(r) for r in results],
            count=len(results),
            constraints=constraints,
            nakshatra=NakshatraResponse.from_result(resolved.nakshatra) if resolved.nakshatra else None,
            fragment_applied=resolved.fragment_applied,
        )
