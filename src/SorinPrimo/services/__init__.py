"""Search service layer for SorinPrimo.

Provides the common catalog-source contract and a factory that builds the
service for a configured backend.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from SorinPrimo.services.search import CatalogSearchService, CatalogSource
from SorinPrimo.sources.registry import build_source

if TYPE_CHECKING:
    from SorinPrimo.config import AppConfig


def create_search_service(config: AppConfig, source_name: str = "primo") -> CatalogSearchService:
    """Create a search service for the named catalog source.

    Args:
        config: Application configuration containing source settings.
        source_name: Registered catalog source to search.

    Returns:
        Configured CatalogSearchService instance.
    """
    return CatalogSearchService(source=build_source(source_name, config=config))


__all__ = [
    "CatalogSearchService",
    "CatalogSource",
    "create_search_service",
]
