"""Console text output renderers.

Renders normalized resources into human-friendly text.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from SorinPrimo.core.models import Resource, SearchResult
from SorinPrimo.renderers.base import OutputWriter
from SorinPrimo.utils.log import log


def _fmt_names(names: Sequence[str] | None) -> str:
    if not names:
        return "-"
    return "; ".join(names)


def render_text(resources: Iterable[Resource], *, start: int = 1) -> str:
    """Render resources into a human-readable text block.

    Args:
        resources: Iterable of normalized resources.
        start: Number of the first listed resource.

    Returns:
        A formatted string ready to be printed.
    """
    lines: list[str] = []
    for idx, resource in enumerate(resources, start=start):
        lines.append(f"{idx}. {resource.title or 'Untitled'}")
        lines.append(f"   Creator: {_fmt_names(resource.creator)}")
        if resource.type or resource.date:
            lines.append(f"   Type: {resource.type or '-'}  Date: {resource.date or '-'}")
        if resource.is_part_of:
            lines.append(f"   Part of: {resource.is_part_of}")
        if resource.availability_status:
            location = " / ".join(part for part in (resource.sublocation, resource.call_number) if part)
            suffix = f" ({location})" if location else ""
            lines.append(f"   Availability: {resource.availability_status}{suffix}")
        if resource.catalog_url:
            lines.append(f"   Link: {resource.catalog_url}")
        lines.append("")
    return "\n".join(lines).rstrip() + "\n"


class ConsoleOutputWriter(OutputWriter):
    """Write results to console via logging."""

    def write_search_result(self, result: SearchResult, query: str) -> None:
        """Write search result to console.

        Args:
            result: Normalized search result.
            query: The free-text query that produced it.
        """
        log.info("query=%s total=%d", query, result.num_results)
        for line in render_text(result.results).splitlines():
            log.info(line)

    def finalize(self, action: str) -> None:
        """No-op for console output."""
