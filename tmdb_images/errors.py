"""
Errors surfaced to callers of the images pipeline.

Each error carries the HTTP status the API layer answers with.
"""
from __future__ import annotations

from typing import Any


class ImagesError(Exception):
    """Base class for every failure the images pipeline reports."""

    status_code = 500

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.message}


class ConfigurationError(ImagesError):
    """The upstream credential is not configured."""

    status_code = 500


class UserInputError(ImagesError):
    status_code = 400


class NotFoundError(ImagesError):
    status_code = 404


class AmbiguousQueryError(ImagesError):
    """The best search candidate is not a movie or TV show; the query should be narrowed."""

    status_code = 404


class UpstreamError(ImagesError):
    """An outbound TMDb call failed (network, non-2xx, or malformed body)."""

    status_code = 500

    def __init__(self, message: str, *, details: Any = None, status_code: int | None = None) -> None:
        super().__init__(message, status_code=status_code)
        self.details = details

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.message, "details": self.details}
