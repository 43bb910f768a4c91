"""
Language grouping of TMDb image assets.

Backdrops and posters use closed sets of language buckets (other languages are dropped);
logos keep every language, creating buckets in first-seen order.
"""
from __future__ import annotations

from typing import Any, Iterable, Mapping

from tmdb_images.models.images import NO_LANGUAGE_KEY, GroupedImages, ImageAsset
from tmdb_images.settings import TMDB_IMAGE_BASE_URL

BACKDROP_LANGUAGES = ("en", "hi", NO_LANGUAGE_KEY)
POSTER_LANGUAGES = ("en", "hi", "ta", "te", "ja", "ko")

SKIPPED_BACKDROPS = "Backdrops (en/hi/null)"
SKIPPED_LOGOS = "Logos (All Languages)"


def build_image_url(file_path: str, *, base_url: str = TMDB_IMAGE_BASE_URL) -> str:
    return base_url + file_path


def parse_assets(rows: Any) -> list[ImageAsset]:
    if not isinstance(rows, list):
        return []
    assets: list[ImageAsset] = []
    for row in rows:
        if not isinstance(row, Mapping):
            continue
        asset = ImageAsset.from_tmdb(row)
        if asset is not None:
            assets.append(asset)
    return assets


def group_backdrops(assets: Iterable[ImageAsset], *, base_url: str = TMDB_IMAGE_BASE_URL) -> GroupedImages:
    grouped: GroupedImages = {lang: [] for lang in BACKDROP_LANGUAGES}
    for asset in assets:
        key = asset.language_key
        if key in grouped:
            grouped[key].append(build_image_url(asset.file_path, base_url=base_url))
    return grouped


def group_posters(assets: Iterable[ImageAsset], *, base_url: str = TMDB_IMAGE_BASE_URL) -> GroupedImages:
    grouped: GroupedImages = {lang: [] for lang in POSTER_LANGUAGES}
    for asset in assets:
        # Exact code match only; language-agnostic posters have no bucket.
        if asset.language_code in grouped:
            grouped[asset.language_code].append(build_image_url(asset.file_path, base_url=base_url))
    return grouped


def group_logos(assets: Iterable[ImageAsset], *, base_url: str = TMDB_IMAGE_BASE_URL) -> GroupedImages:
    grouped: GroupedImages = {}
    for asset in assets:
        grouped.setdefault(asset.language_key, []).append(build_image_url(asset.file_path, base_url=base_url))
    return grouped


def compute_skipped(backdrops: GroupedImages, posters: GroupedImages, logos: GroupedImages) -> list[str]:
    """Labels for categories (or poster languages) that came back empty."""

    skipped: list[str] = []
    if not any(backdrops.get(lang) for lang in BACKDROP_LANGUAGES):
        skipped.append(SKIPPED_BACKDROPS)

    empty_posters = [lang for lang in POSTER_LANGUAGES if not posters.get(lang)]
    if empty_posters:
        skipped.append(f"Posters ({', '.join(empty_posters)})")

    if not logos:
        skipped.append(SKIPPED_LOGOS)
    return skipped
