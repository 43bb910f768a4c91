from __future__ import annotations

from typing import Any, Iterable, Mapping

import requests

from tmdb_images.models.images import ENTITY_MEDIA_TYPES
from tmdb_images.settings import (
    DEFAULT_TIMEOUT_SECONDS,
    PREFERRED_IMAGE_LANGUAGES,
    TMDB_API_BASE_URL,
)


class TmdbClientError(RuntimeError):
    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        body_snippet: str | None = None,
        payload: Any = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body_snippet = body_snippet
        # Parsed JSON error body from TMDb (e.g. {"status_code": 7, "status_message": "..."}), if any.
        self.payload = payload


def _require_api_key(api_key: str | None) -> str:
    resolved = (api_key or "").strip()
    if not resolved:
        raise TmdbClientError("TMDB_API_KEY is not set.")
    return resolved


def _error_payload(resp: requests.Response) -> Any:
    try:
        return resp.json()
    except ValueError:
        return None


def _request_json(
    session: requests.Session,
    url: str,
    *,
    params: Mapping[str, Any] | None = None,
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
) -> dict[str, Any]:
    """
    Issue a single GET and return the JSON object body.

    There is no retry: any network failure, non-2xx status, or non-object body raises `TmdbClientError`.
    """

    headers = {
        "accept": "application/json",
        "user-agent": "tmdb-images-api",
    }
    try:
        resp = session.get(url, params=params, headers=headers, timeout=timeout_seconds)
    except requests.RequestException as exc:
        raise TmdbClientError(f"TMDb request failed: {exc}") from exc

    if not 200 <= resp.status_code < 300:
        raise TmdbClientError(
            f"TMDb request failed with HTTP {resp.status_code}.",
            status_code=resp.status_code,
            body_snippet=(resp.text or "")[:400],
            payload=_error_payload(resp),
        )

    try:
        payload = resp.json()
    except ValueError as exc:
        raise TmdbClientError(
            "TMDb returned non-JSON response.",
            status_code=resp.status_code,
            body_snippet=(resp.text or "")[:400],
        ) from exc

    if not isinstance(payload, dict):
        raise TmdbClientError("TMDb returned unexpected JSON shape (not an object).", status_code=resp.status_code)
    return payload


def search_multi(
    query: str,
    *,
    api_key: str | None,
    session: requests.Session | None = None,
    base_url: str = TMDB_API_BASE_URL,
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
) -> list[dict[str, Any]]:
    """
    Run a TMDb multi search (`/3/search/multi`) and return the first page of results in upstream order.

    Results mix movies, TV shows and people; callers should inspect `media_type`.
    """

    api_key = _require_api_key(api_key)
    session = session or requests.Session()
    payload = _request_json(
        session,
        f"{base_url}/search/multi",
        params={"api_key": api_key, "query": query},
        timeout_seconds=timeout_seconds,
    )
    results = payload.get("results")
    if not isinstance(results, list):
        return []
    return [r for r in results if isinstance(r, dict)]


def fetch_images(
    media_type: str,
    item_id: int,
    *,
    api_key: str | None,
    include_image_language: Iterable[str] = PREFERRED_IMAGE_LANGUAGES,
    session: requests.Session | None = None,
    base_url: str = TMDB_API_BASE_URL,
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
) -> dict[str, Any]:
    """
    Fetch the image catalog for a movie or TV series.

    Returns the full JSON object as returned by `/3/{media_type}/{id}/images`
    (`backdrops`, `posters`, `logos`).
    """

    if media_type not in ENTITY_MEDIA_TYPES:
        raise ValueError(f"Unsupported TMDb media type for images: {media_type!r}")

    api_key = _require_api_key(api_key)
    session = session or requests.Session()
    return _request_json(
        session,
        f"{base_url}/{media_type}/{item_id}/images",
        params={
            "api_key": api_key,
            "include_image_language": ",".join(include_image_language),
        },
        timeout_seconds=timeout_seconds,
    )
