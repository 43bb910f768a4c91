"""
Resolve a free-text query to a movie/TV title and group its TMDb images by language.
"""

from tmdb_images.images.resolver import resolve_images, select_entity

__all__ = [
    "resolve_images",
    "select_entity",
]
