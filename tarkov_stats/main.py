"""Main FastAPI application for the Tarkov player stats service."""

from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tarkov_stats import __version__
from tarkov_stats.core import get_global_settings, setup_logging
from tarkov_stats.core.tarkov_api import TarkovAPIClient
from tarkov_stats.features.players.gateway import TarkovAPIGateway
from tarkov_stats.features.players.router import router as players_router
from tarkov_stats.features.players.service import PlayerService

settings = get_global_settings()
setup_logging(settings.log_level, json_logs=not settings.debug)
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan manager.

    Builds the one client and service the process shares, so the search
    index is fetched at most once per process.
    """
    logger.info("Starting up Tarkov player stats application")
    client = TarkovAPIClient()
    await client.start_session()
    app.state.tarkov_client = client
    app.state.player_service = PlayerService(
        TarkovAPIGateway(client),
        debounce_seconds=settings.search_debounce_seconds,
        result_limit=settings.search_result_limit,
    )
    try:
        yield
    finally:
        logger.info("Shutting down Tarkov player stats application")
        await client.close()


# OpenAPI tags metadata
tags_metadata = [
    {
        "name": "players",
        "description": "Player search, profiles and derived statistics.",
    },
    {
        "name": "health",
        "description": "Health check and system status endpoints.",
    },
]

app = FastAPI(
    title="Tarkov Player Stats",
    description="Read-only lookup of Escape from Tarkov player profiles.",
    version=__version__,
    openapi_tags=tags_metadata,
    lifespan=lifespan,
    debug=settings.debug,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)

app.include_router(players_router, prefix="/api/v1")


@app.get("/health", tags=["health"])
async def health_check() -> Dict[str, Any]:
    """
    Health check endpoint.

    Reports whether the search index has been loaded yet; the index is
    fetched lazily on the first search.
    """
    service = getattr(app.state, "player_service", None)
    return {
        "status": "healthy",
        "version": __version__,
        "debug": settings.debug,
        "search_index_loaded": bool(service and service.index_cache.is_loaded),
    }
