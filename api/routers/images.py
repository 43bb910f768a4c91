"""
Image lookup endpoint.
"""
from __future__ import annotations

from fastapi import APIRouter, Query
from pydantic import BaseModel

from api.deps import AppSettings, TmdbSession
from tmdb_images.images import resolve_images

router = APIRouter(tags=["images"])


# --- Pydantic models ---

class DetectedEntity(BaseModel):
    media_type: str
    id: int
    title: str


class ImagesResponse(BaseModel):
    query: str
    detected: DetectedEntity
    backdrops: dict[str, list[str]]
    posters: dict[str, list[str]]
    logos: dict[str, list[str]]
    skipped: list[str]
    formatted: str


# --- Endpoints ---

@router.get("/images", response_model=ImagesResponse)
def get_images(
    settings: AppSettings,
    session: TmdbSession,
    query: str | None = Query(default=None, description="Free-text movie or TV title, e.g. 'Marry My Husband'"),
) -> dict:
    """
    Detect movie vs TV for `query` and return its backdrops, posters and logos grouped by language.
    """
    return resolve_images(query, settings=settings, session=session).to_dict()
