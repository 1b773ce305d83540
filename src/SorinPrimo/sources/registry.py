"""Source registry and builders for catalog sources."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from SorinPrimo.config import AppConfig
    from SorinPrimo.services.search import CatalogSource

SourceBuilder = Callable[["AppConfig"], "CatalogSource"]


def build_source(source_name: str, *, config: AppConfig) -> CatalogSource:
    """Build a catalog source instance from the registered source name.

    Args:
        source_name: Registered source identifier.
        config: Parsed application configuration.

    Returns:
        CatalogSource: Initialized source implementation for the given name.

    Raises:
        ValueError: If ``source_name`` is not registered.
    """
    builder = _source_builders().get(source_name)
    if builder is None:
        raise ValueError(f"Unsupported catalog source: {source_name}")
    return builder(config)


def supported_source_names() -> tuple[str, ...]:
    """Return all source names that can be built by the registry.

    Returns:
        tuple[str, ...]: Source names in registry order.
    """
    return tuple(_source_builders().keys())


def _source_builders() -> dict[str, SourceBuilder]:
    """Return source builder registry."""
    return {
        "primo": _build_primo_source,
    }


def _build_primo_source(config: AppConfig) -> CatalogSource:
    """Build Primo source."""
    from SorinPrimo.sources.primo.client import PrimoApiClient
    from SorinPrimo.sources.primo.source import PrimoSource

    return PrimoSource(
        client=PrimoApiClient(config.primo.api_url, timeout=config.primo.timeout),
        config=config.primo,
        definitions=config.filters,
    )
