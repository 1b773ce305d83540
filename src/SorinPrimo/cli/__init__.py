"""CLI package for SorinPrimo command orchestration."""

from __future__ import annotations

__all__ = ["CommandRunner", "cli", "main"]

from SorinPrimo.cli.runner import CommandRunner
from SorinPrimo.cli.ui import cli


def main() -> None:
    """Run SorinPrimo CLI.

    Entry point referenced by console script in pyproject.toml.
    """
    cli()
