"""Base classes for output writers.

Provides abstraction for writing search results to console or files.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence

from SorinPrimo.core.models import SearchResult


class OutputWriter(ABC):
    """Abstract base class for command output writers."""

    @abstractmethod
    def write_search_result(self, result: SearchResult, query: str) -> None:
        """Write results from a single search.

        Args:
            result: Normalized search result.
            query: The free-text query that produced it.
        """

    @abstractmethod
    def finalize(self, action: str) -> None:
        """Finalize output (e.g., write accumulated results to file).

        Args:
            action: The CLI command name (e.g., 'search').
        """


@dataclass(slots=True)
class MultiOutputWriter(OutputWriter):
    """Delegate output to multiple writers."""

    writers: Sequence[OutputWriter]

    def write_search_result(self, result: SearchResult, query: str) -> None:
        """Send search results to all writers."""
        for writer in self.writers:
            writer.write_search_result(result, query)

    def finalize(self, action: str) -> None:
        """Finalize all writers."""
        for writer in self.writers:
            writer.finalize(action)
