from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

# Bucket key for language-agnostic assets (TMDb reports them with `iso_639_1: null`).
NO_LANGUAGE_KEY = "null"

ENTITY_MEDIA_TYPES = ("movie", "tv")

GroupedImages = dict[str, list[str]]


@dataclass(frozen=True)
class SearchResult:
    """One row of a TMDb multi search (`/3/search/multi`)."""

    id: Any
    media_type: str | None
    title: str | None = None

    @classmethod
    def from_tmdb(cls, row: Mapping[str, Any]) -> SearchResult:
        media_type = row.get("media_type")
        title = row.get("title") or row.get("name")
        return cls(
            id=row.get("id"),
            media_type=media_type if isinstance(media_type, str) else None,
            title=title if isinstance(title, str) else None,
        )

    @property
    def is_movie_or_tv(self) -> bool:
        return self.media_type in ENTITY_MEDIA_TYPES


@dataclass(frozen=True)
class SelectedEntity:
    id: int
    media_type: str
    title: str

    def __post_init__(self) -> None:
        if self.media_type not in ENTITY_MEDIA_TYPES:
            raise ValueError(f"SelectedEntity media_type must be movie or tv, got {self.media_type!r}")

    def to_dict(self) -> dict[str, Any]:
        return {"media_type": self.media_type, "id": self.id, "title": self.title}


@dataclass(frozen=True)
class ImageAsset:
    file_path: str
    language_code: str | None = None

    @classmethod
    def from_tmdb(cls, row: Mapping[str, Any]) -> ImageAsset | None:
        """
        Build from a TMDb image row; returns None when the row has no usable `file_path`.

        A null, missing, or empty `iso_639_1` means the asset is language-agnostic.
        """
        file_path = row.get("file_path")
        if not isinstance(file_path, str) or not file_path:
            return None
        lang = row.get("iso_639_1")
        return cls(file_path=file_path, language_code=lang if isinstance(lang, str) and lang else None)

    @property
    def language_key(self) -> str:
        return self.language_code or NO_LANGUAGE_KEY


@dataclass
class ImagesPayload:
    """Everything returned for one resolved query."""

    query: str
    detected: SelectedEntity
    backdrops: GroupedImages = field(default_factory=dict)
    posters: GroupedImages = field(default_factory=dict)
    logos: GroupedImages = field(default_factory=dict)
    skipped: list[str] = field(default_factory=list)
    formatted: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "query": self.query,
            "detected": self.detected.to_dict(),
            "backdrops": {k: list(v) for k, v in self.backdrops.items()},
            "posters": {k: list(v) for k, v in self.posters.items()},
            "logos": {k: list(v) for k, v in self.logos.items()},
            "skipped": list(self.skipped),
            "formatted": self.formatted,
        }
