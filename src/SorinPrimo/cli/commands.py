"""Command implementations for SorinPrimo CLI.

Encapsulates business logic for commands like search, separated from
CLI parameter handling and output formatting.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from SorinPrimo.renderers import OutputWriter
from SorinPrimo.services.search import CatalogSearchService
from SorinPrimo.utils.log import log


@dataclass(slots=True)
class SearchCommand:
    """Run one catalog search and hand the result to the output writer."""

    search_service: CatalogSearchService
    output_writer: OutputWriter

    def execute(
        self,
        action: str,
        *,
        query: str,
        limit: int,
        offset: int,
        filters: Mapping[str, str],
    ) -> None:
        log.info("query=%s limit=%d offset=%d", query, limit, offset)
        if filters:
            log.info("filters=%s", dict(filters))

        result = self.search_service.search(query, limit=limit, offset=offset, filters=filters)
        log.info("Fetched %d records of %d", len(result.results), result.num_results)

        self.output_writer.write_search_result(result, query)
        self.output_writer.finalize(action)
