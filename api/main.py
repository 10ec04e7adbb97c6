#!/usr/bin/env python3
"""
NamAstra API - HTTP API layer for the NamAstra baby-name finder.

This is the FastAPI application backing the name finder UI. It serves:
- Structured, wish-driven and Vedic name searches
- Raw wish parsing
- Name detail and comparison
- Search form vocabularies
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from namastra.core.constants import DEITIES, MAX_RESULTS, SCRIPTS, SOURCES, SYLLABLE_CHOICES, THEMES
from namastra.core.models import Gender, Vibe
from namastra.logging_config import configure_logging, get_logger

from .dependencies import get_search_service
from .schemas.options import OptionsResponse
from .schemas.search import WishFiltersSchema
from .settings import get_settings

# Format: 2026-01-06T14:05:52Z [api] LEVEL message
configure_logging(source="api")
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifecycle - startup and shutdown."""
    settings = get_settings()

    # Startup
    service = get_search_service()
    logger.info(
        f"NamAstra API ready: parser={settings.ai_provider}, astrology={settings.astrology_provider}, "
        f"corpus={len(service.corpus)} names"
    )

    yield

    # Shutdown; the next startup builds a fresh service with an open client
    await service.close()
    get_search_service.cache_clear()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(title="NamAstra API", description="Baby name discovery API", lifespan=lifespan)

    settings = get_settings()

    # CORS configuration
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    # Register routers
    from .routers import names, search

    app.include_router(search.router)
    app.include_router(names.router)

    # Core endpoints (not in a router)
    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy", "service": "namastra-api"}

    @app.get("/api/options", response_model=OptionsResponse)
    async def get_options() -> OptionsResponse:
        """Vocabularies and default filters for the search form."""
        return OptionsResponse(
            genders=[g.value for g in Gender],
            syllables=list(SYLLABLE_CHOICES),
            themes=list(THEMES),
            deities=list(DEITIES),
            sources=list(SOURCES),
            scripts=list(SCRIPTS),
            vibes=[v.value for v in Vibe],
            max_results=MAX_RESULTS,
            default_filters=WishFiltersSchema(),
        )

    return app


# Create app instance for uvicorn
app = create_app()
