"""
Process-wide configuration, read once at startup.
"""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Mapping

from tmdb_images.utils.env import load_env

TMDB_API_BASE_URL = "https://api.themoviedb.org/3"
TMDB_IMAGE_BASE_URL = "https://image.tmdb.org/t/p/original"
PREFERRED_IMAGE_LANGUAGES = ("en", "hi", "ta", "te", "ja", "ko", "null")

DEFAULT_PORT = 3000
DEFAULT_TIMEOUT_SECONDS = 10.0


@dataclass(frozen=True)
class Settings:
    """
    Immutable service configuration.

    `tmdb_api_key` may be None: a missing credential is reported per request, not at startup.
    """

    tmdb_api_key: str | None = None
    port: int = DEFAULT_PORT
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    api_base_url: str = TMDB_API_BASE_URL
    image_base_url: str = TMDB_IMAGE_BASE_URL
    include_image_language: tuple[str, ...] = PREFERRED_IMAGE_LANGUAGES
    cors_allow_origins: tuple[str, ...] = field(default_factory=tuple)

    @property
    def has_api_key(self) -> bool:
        return bool(self.tmdb_api_key)


def _parse_port(raw: str | None) -> int:
    value = (raw or "").strip()
    if not value:
        return DEFAULT_PORT
    if not value.isdigit() or not 0 < int(value) < 65536:
        raise ValueError(f"PORT must be an integer between 1 and 65535, got {raw!r}")
    return int(value)


def _parse_timeout(raw: str | None) -> float:
    value = (raw or "").strip()
    if not value:
        return DEFAULT_TIMEOUT_SECONDS
    try:
        timeout = float(value)
    except ValueError as exc:
        raise ValueError(f"TMDB_TIMEOUT_SECONDS must be a number, got {raw!r}") from exc
    if timeout <= 0:
        raise ValueError(f"TMDB_TIMEOUT_SECONDS must be positive, got {raw!r}")
    return timeout


def _parse_origins(raw: str | None) -> tuple[str, ...]:
    """
    Parse CORS_ALLOW_ORIGINS as a comma-separated list of origins.
    Example: CORS_ALLOW_ORIGINS=https://example.com,https://app.example.com
    """
    if not raw:
        return ()
    return tuple(origin.strip() for origin in raw.split(",") if origin.strip())


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """
    Build `Settings` from the process environment (after loading `.env`), or from `environ` when given.
    """

    if environ is None:
        load_env()
        environ = os.environ

    api_key = (environ.get("TMDB_API_KEY") or "").strip()
    return Settings(
        tmdb_api_key=api_key or None,
        port=_parse_port(environ.get("PORT")),
        timeout_seconds=_parse_timeout(environ.get("TMDB_TIMEOUT_SECONDS")),
        cors_allow_origins=_parse_origins(environ.get("CORS_ALLOW_ORIGINS")),
    )


def load_cors_origins(environ: Mapping[str, str] | None = None) -> tuple[str, ...]:
    """
    Read only CORS_ALLOW_ORIGINS, so app import does not depend on PORT or timeout parsing.
    """

    if environ is None:
        load_env()
        environ = os.environ
    return _parse_origins(environ.get("CORS_ALLOW_ORIGINS"))
