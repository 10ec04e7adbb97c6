"""
Names Router - Catalog endpoints for the detail view and compare drawer.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from namastra.errors import UnknownNameError

from ..dependencies import get_search_service
from ..schemas.names import CompareRequest, CompareResponse, NameRecordResponse
from ..services.search_service import NameSearchService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/names", tags=["names"])


@router.post("/compare", response_model=CompareResponse)
async def compare_names(
    request: CompareRequest,
    service: NameSearchService = Depends(get_search_service),
) -> CompareResponse:
    """Return the selected names side by side, in corpus order."""
    return service.compare(request.name_ids)


@router.get("/{name_id}", response_model=NameRecordResponse)
async def get_name(
    name_id: str,
    service: NameSearchService = Depends(get_search_service),
) -> NameRecordResponse:
    """Return one name for the detail view."""
    try:
        return service.get_name(name_id)
    except UnknownNameError as e:
        logger.info(f"Name lookup miss: {name_id}")
        raise HTTPException(status_code=404, detail=str(e)) from e
