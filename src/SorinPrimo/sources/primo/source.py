"""Primo source adapter."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Sequence

from SorinPrimo.config import PrimoConfig
from SorinPrimo.core.filters import FilterDefinition
from SorinPrimo.core.models import SearchResult
from SorinPrimo.sources.primo.client import PrimoApiClient
from SorinPrimo.sources.primo.parser import parse_primo_docs
from SorinPrimo.sources.primo.query import build_search_query
from SorinPrimo.utils.log import log


@dataclass(slots=True)
class PrimoSource:
    """Primo-backed catalog source that returns normalized resources."""

    client: PrimoApiClient
    config: PrimoConfig
    definitions: Sequence[FilterDefinition] = ()
    name: str = "primo"

    def search(
        self,
        query: str,
        limit: int,
        offset: int,
        filters: Mapping[str, str] | None = None,
    ) -> SearchResult:
        """Search the Primo catalog and normalize the result page.

        Args:
            query: Free-text search term.
            limit: Page size.
            offset: Zero-based result offset.
            filters: UI filter key/value pairs, including ``search_by``/``sort_by``.

        Returns:
            Total hit count and the normalized resources of this page.

        Raises:
            UpstreamRequestError: On transport failure or a non-200 status.
            InvalidResponseError: If the body is not JSON.
            MalformedResponseError: If ``info.total`` or ``docs`` is missing.
        """
        query_string = build_search_query(
            query,
            limit=limit,
            offset=offset,
            filters=dict(filters or {}),
            definitions=self.definitions,
            config=self.config,
        )
        log.debug("Primo search query=%r limit=%d offset=%d filters=%s", query, limit, offset, dict(filters or {}))
        total, docs = self.client.search(query_string)
        resources = parse_primo_docs(docs, self.config)
        log.info("Primo search completed: total=%d docs=%d kept=%d", total, len(docs), len(resources))
        return SearchResult(num_results=total, results=tuple(resources))

    def close(self) -> None:
        """Close resources held by the Primo source adapter."""
        self.client.close()

    def __enter__(self) -> PrimoSource:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
