"""
Dependency injection for settings and the outbound TMDb session.
"""
from __future__ import annotations

from collections.abc import Iterator
from functools import lru_cache
from typing import Annotated

import requests
from fastapi import Depends

from tmdb_images.settings import Settings, load_settings


@lru_cache
def get_settings() -> Settings:
    """
    Returns the process-wide settings, read from the environment on first use.
    """
    return load_settings()


def get_tmdb_session() -> Iterator[requests.Session]:
    """
    Yields a requests session for one request's TMDb calls and closes it afterwards.
    """
    session = requests.Session()
    try:
        yield session
    finally:
        session.close()


# Type aliases for dependency injection
AppSettings = Annotated[Settings, Depends(get_settings)]
TmdbSession = Annotated[requests.Session, Depends(get_tmdb_session)]
