"""
TMDb integration clients.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tmdb_images.integrations.tmdb.client import (
        TmdbClientError,
        fetch_images,
        search_multi,
    )

__all__ = [
    "TmdbClientError",
    "fetch_images",
    "search_multi",
]


def __getattr__(name: str):
    if name in __all__:
        from tmdb_images.integrations.tmdb import client

        return getattr(client, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
