"""Search service layer over interchangeable catalog sources."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Protocol

from SorinPrimo.core.models import SearchResult
from SorinPrimo.utils.log import log


class CatalogSource(Protocol):
    """Protocol for a catalog backend behind the common search contract."""

    name: str

    def search(
        self,
        query: str,
        limit: int,
        offset: int,
        filters: Mapping[str, str] | None = None,
    ) -> SearchResult:
        """Search the catalog and return normalized resources."""
        raise NotImplementedError

    def close(self) -> None:
        """Close resources held by source."""
        raise NotImplementedError


@dataclass(slots=True)
class CatalogSearchService:
    """Application service that routes searches to one configured catalog source."""

    source: CatalogSource

    def search(
        self,
        query: str,
        *,
        limit: int = 10,
        offset: int = 0,
        filters: Mapping[str, str] | None = None,
    ) -> SearchResult:
        """Search the configured catalog.

        Args:
            query: Free-text search term.
            limit: Page size.
            offset: Zero-based result offset.
            filters: UI filter key/value pairs.

        Returns:
            Total hit count and normalized resources.

        Raises:
            ValueError: If ``limit`` or ``offset`` is out of range.
            CatalogSearchError: If the source call fails.
        """
        if limit <= 0:
            raise ValueError("limit must be positive")
        if offset < 0:
            raise ValueError("offset must not be negative")

        source_name = getattr(self.source, "name", "unknown")
        try:
            result = self.source.search(query, limit, offset, dict(filters or {}))
        except Exception as error:
            log.warning("Search source failed: source=%s error=%s", source_name, error)
            raise

        log.info(
            "Search source completed: source=%s total=%d count=%d",
            source_name,
            result.num_results,
            len(result.results),
        )
        return result

    def close(self) -> None:
        """Close the source and release external resources."""
        close_func = getattr(self.source, "close", None)
        if not callable(close_func):
            return
        try:
            close_func()
        except Exception as error:  # noqa: BLE001 - close failure must be isolated
            log.warning("Search source close failed: source=%s error=%s", getattr(self.source, "name", "unknown"), error)
