"""
Domain models shared across the API and scripts.
"""

from tmdb_images.models.images import (
    NO_LANGUAGE_KEY,
    ImageAsset,
    ImagesPayload,
    SearchResult,
    SelectedEntity,
)

__all__ = [
    "NO_LANGUAGE_KEY",
    "ImageAsset",
    "ImagesPayload",
    "SearchResult",
    "SelectedEntity",
]
