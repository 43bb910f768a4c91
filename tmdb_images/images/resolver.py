"""
Query → entity → grouped images pipeline.

Search, select, fetch images, group, format. Every call repeats both upstream requests; nothing is cached.
"""
from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence

import requests

from tmdb_images.errors import (
    AmbiguousQueryError,
    ConfigurationError,
    NotFoundError,
    UpstreamError,
    UserInputError,
)
from tmdb_images.images.formatting import format_results
from tmdb_images.images.grouping import (
    compute_skipped,
    group_backdrops,
    group_logos,
    group_posters,
    parse_assets,
)
from tmdb_images.integrations.tmdb.client import TmdbClientError, fetch_images, search_multi
from tmdb_images.models.images import ImagesPayload, SearchResult, SelectedEntity
from tmdb_images.settings import Settings

logger = logging.getLogger(__name__)

MISSING_API_KEY_MESSAGE = "TMDB_API_KEY missing in environment variables"
MISSING_QUERY_MESSAGE = "query param is required"
NOT_FOUND_MESSAGE = "No result found"
AMBIGUOUS_MESSAGE = "Top result is not a movie/tv. Try a more specific query (person results are skipped)."
UPSTREAM_MESSAGE = "Error fetching data"


def select_entity(results: Sequence[Mapping[str, Any]]) -> SelectedEntity:
    """
    Pick the first movie/TV result, falling back to the first result of any type.

    Raises NotFoundError for an empty list and AmbiguousQueryError when the fallback is not a movie/TV
    (e.g. every result is a person).
    """

    candidates = [SearchResult.from_tmdb(row) for row in results]
    chosen = next((c for c in candidates if c.is_movie_or_tv), None)
    if chosen is None:
        chosen = candidates[0] if candidates else None
    if chosen is None:
        raise NotFoundError(NOT_FOUND_MESSAGE)
    if not chosen.is_movie_or_tv:
        raise AmbiguousQueryError(AMBIGUOUS_MESSAGE)
    if not isinstance(chosen.id, int) or isinstance(chosen.id, bool):
        raise UpstreamError(UPSTREAM_MESSAGE, details=f"TMDb result has no usable id: {chosen.id!r}")

    return SelectedEntity(id=chosen.id, media_type=str(chosen.media_type), title=chosen.title or "Unknown")


def _upstream_error(exc: TmdbClientError) -> UpstreamError:
    if exc.payload is not None:
        details = exc.payload
    else:
        details = exc.body_snippet or str(exc)
    logger.error("TMDb request failed: %s", details)
    return UpstreamError(UPSTREAM_MESSAGE, details=details)


def build_payload(query: str, entity: SelectedEntity, images: Mapping[str, Any], *, settings: Settings) -> ImagesPayload:
    base_url = settings.image_base_url
    backdrops = group_backdrops(parse_assets(images.get("backdrops")), base_url=base_url)
    posters = group_posters(parse_assets(images.get("posters")), base_url=base_url)
    logos = group_logos(parse_assets(images.get("logos")), base_url=base_url)
    skipped = compute_skipped(backdrops, posters, logos)

    return ImagesPayload(
        query=query,
        detected=entity,
        backdrops=backdrops,
        posters=posters,
        logos=logos,
        skipped=skipped,
        formatted=format_results(entity, backdrops, posters, logos, skipped),
    )


def resolve_images(
    query: str | None,
    *,
    settings: Settings,
    session: requests.Session | None = None,
) -> ImagesPayload:
    """
    Resolve `query` to a movie or TV title and return its images grouped by language.

    The credential is checked before the query. No outbound call is made unless both are present.
    """

    if not settings.has_api_key:
        raise ConfigurationError(MISSING_API_KEY_MESSAGE)

    query = (query or "").strip()
    if not query:
        raise UserInputError(MISSING_QUERY_MESSAGE)

    session = session or requests.Session()
    try:
        results = search_multi(
            query,
            api_key=settings.tmdb_api_key,
            session=session,
            base_url=settings.api_base_url,
            timeout_seconds=settings.timeout_seconds,
        )
    except TmdbClientError as exc:
        raise _upstream_error(exc) from exc

    entity = select_entity(results)
    logger.info("Resolved %r to %s %s (%s)", query, entity.media_type, entity.id, entity.title)

    try:
        images = fetch_images(
            entity.media_type,
            entity.id,
            api_key=settings.tmdb_api_key,
            include_image_language=settings.include_image_language,
            session=session,
            base_url=settings.api_base_url,
            timeout_seconds=settings.timeout_seconds,
        )
    except TmdbClientError as exc:
        raise _upstream_error(exc) from exc

    return build_payload(query, entity, images, settings=settings)
