"""JSON output renderers.

Renders search results into JSON-serializable objects and provides
JsonFileWriter for command output.
"""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Any

from SorinPrimo.core.models import SearchResult
from SorinPrimo.renderers.base import OutputWriter
from SorinPrimo.utils.log import log


def render_json(result: SearchResult) -> dict[str, Any]:
    """Render a search result into the orchestrator-facing mapping.

    Args:
        result: Normalized search result.

    Returns:
        ``{"num_results": ..., "results": [...]}`` with every record field present.
    """
    return result.to_dict()


class JsonFileWriter(OutputWriter):
    """Accumulate results and write to JSON file on finalize."""

    def __init__(self, base_dir: str) -> None:
        """Initialize JSON writer.

        Args:
            base_dir: Base output directory.
        """
        self.output_dir = Path(base_dir) / "json"
        self.all_results: list[dict[str, Any]] = []

    def write_search_result(self, result: SearchResult, query: str) -> None:
        """Accumulate search result for later writing."""
        self.all_results.append({"query": query, **render_json(result)})

    def finalize(self, action: str) -> None:
        """Write accumulated results to JSON file.

        Args:
            action: The CLI command name (used in filename).
        """
        payload = json.dumps(self.all_results, ensure_ascii=False, indent=2)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        output_path = self.output_dir / f"{action}_{timestamp}.json"
        output_path.write_text(payload, encoding="utf-8")
        log.info("JSON saved to %s", output_path)
