"""Catalog search error classes.

Raised by catalog backends when a search call cannot produce a result.
Missing document-level fields are never errors; these cover whole-call
failures only.
"""

from __future__ import annotations

from typing import Any


class CatalogSearchError(Exception):
    """Base class for failures of a single catalog search call."""

    error_code: str = "CATALOG_SEARCH_ERROR"

    def __init__(self, message: str, **context: Any) -> None:
        """Create a catalog search error.

        Args:
            message: Human-readable error message.
            **context: Additional context (e.g. status code, source name).
        """
        self.message = message
        self.context = context
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format for the calling layer."""
        return {
            "message": self.message,
            "code": self.error_code,
            **self.context,
        }


class UpstreamRequestError(CatalogSearchError):
    """The catalog API answered with a non-200 status or could not be reached."""

    error_code: str = "UPSTREAM_REQUEST_ERROR"

    def __init__(self, message: str, *, status_code: int | None = None, **context: Any) -> None:
        self.status_code = status_code
        super().__init__(message, status_code=status_code, **context)


class InvalidResponseError(CatalogSearchError):
    """The catalog API response body is not valid JSON."""

    error_code: str = "INVALID_RESPONSE"


class MalformedResponseError(CatalogSearchError):
    """The catalog API response decodes but lacks the expected structure."""

    error_code: str = "MALFORMED_RESPONSE"
