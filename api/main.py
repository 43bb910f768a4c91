"""
TMDb Images API - FastAPI application.

Provides endpoints for:
- Liveness checks
- Resolving a free-text query to a movie/TV title and listing its images grouped by language
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.deps import get_settings
from api.routers import images
from tmdb_images.errors import ImagesError
from tmdb_images.settings import load_cors_origins

logger = logging.getLogger(__name__)

SERVICE_NAME = "tmdb-images-api"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown events."""
    # Startup
    logger.info("Starting up %s...", SERVICE_NAME)
    if not get_settings().has_api_key:
        logger.warning("TMDB_API_KEY is not set; /images requests will fail until it is configured.")
    yield
    # Shutdown
    logger.info("Shutting down %s...", SERVICE_NAME)


app = FastAPI(
    title="TMDb Images API",
    description="Auto-detects movie vs TV via TMDb multi search and returns language-grouped image URLs",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS configuration
# If no origins are configured, allows all origins but disables credentials
cors_origins = list(load_cors_origins())
allow_credentials = len(cors_origins) > 0  # Only allow credentials with explicit origins

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins if cors_origins else ["*"],
    allow_credentials=allow_credentials,
    allow_methods=["GET", "OPTIONS"],
    allow_headers=["*"],
)

app.include_router(images.router)


@app.exception_handler(ImagesError)
async def images_error_handler(request: Request, exc: ImagesError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.get("/")
def root():
    """Health check endpoint."""
    return {"ok": True, "service": SERVICE_NAME, "message": "Up & running"}


@app.get("/health")
def health():
    """Health check endpoint."""
    return {"status": "healthy"}
