"""
Search Router - Name search endpoints.

Three search actions mirror the buttons of the name finder:
- POST /api/search         "Search"
- POST /api/search/parse   "Parse & Search" (free-text wish merged over filters)
- POST /api/search/vedic   "Compute & Search" (Vedic mode forced on)

POST /api/parse-wishes exposes the raw wish parser output.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends

from ..dependencies import get_search_service
from ..schemas.search import ParseSearchRequest, ParseWishesRequest, SearchRequest, SearchResponse
from ..services.search_service import NameSearchService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["search"])


@router.post("/search", response_model=SearchResponse)
async def search_names(
    request: SearchRequest | None = None,
    service: NameSearchService = Depends(get_search_service),
) -> SearchResponse:
    """Search the corpus with structured filters. An empty body uses the default filters."""
    request = request or SearchRequest()
    return await service.search(request.filters.to_filters())


@router.post("/search/parse", response_model=SearchResponse)
async def parse_and_search(
    request: ParseSearchRequest,
    service: NameSearchService = Depends(get_search_service),
) -> SearchResponse:
    """Parse a free-text wish, merge it over the given filters and search."""
    return await service.parse_and_search(request.wish_text, request.filters.to_filters())


@router.post("/search/vedic", response_model=SearchResponse)
async def compute_and_search(
    request: SearchRequest,
    service: NameSearchService = Depends(get_search_service),
) -> SearchResponse:
    """Derive start sounds from birth details, then search."""
    return await service.compute_and_search(request.filters.to_filters())


@router.post("/parse-wishes")
async def parse_wishes(
    request: ParseWishesRequest,
    service: NameSearchService = Depends(get_search_service),
) -> dict[str, Any]:
    """Return the wish parser's fragment, or {"rawText": ...} when its output is unreadable."""
    return await service.parse_wishes(request.text)
