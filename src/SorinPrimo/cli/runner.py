"""Command runner for coordinating CLI execution.

Manages component lifecycle, resource cleanup, logging configuration,
and error handling for command execution.
"""

from __future__ import annotations

from typing import Mapping

import click

from SorinPrimo.cli.commands import SearchCommand
from SorinPrimo.config import AppConfig
from SorinPrimo.renderers import create_output_writer
from SorinPrimo.services import create_search_service
from SorinPrimo.utils.log import configure_logging, log


class CommandRunner:
    """Orchestrates command execution with proper resource management."""

    def __init__(self, config: AppConfig) -> None:
        """Initialize command runner.

        Args:
            config: Application configuration.
        """
        self.config = config

    def run_search(
        self,
        action: str,
        *,
        query: str,
        limit: int,
        offset: int,
        filters: Mapping[str, str],
    ) -> None:
        """Execute search command with full resource management.

        Args:
            action: The CLI command name (e.g., 'search').
            query: Free-text search term.
            limit: Page size.
            offset: Result offset.
            filters: Filter key/value pairs.

        Raises:
            click.Abort: When the search fails.
        """
        log_path = configure_logging(
            level=self.config.runtime.level,
            action=action,
            log_to_file=self.config.runtime.to_file,
            log_dir=self.config.runtime.dir,
        )
        if log_path is not None:
            log.debug("Action log: %s", log_path)
        if not self.config.primo.api_key:
            log.warning("No Primo API key configured (set %s)", self.config.primo.api_key_env)

        search_service = None
        try:
            search_service = create_search_service(self.config)
            command = SearchCommand(
                search_service=search_service,
                output_writer=create_output_writer(self.config),
            )
            command.execute(action, query=query, limit=limit, offset=offset, filters=filters)
        except Exception as e:  # noqa: BLE001 - cli boundary
            log.error("Search failed: %s", e)
            raise click.Abort from e
        finally:
            if search_service is not None:
                search_service.close()
