"""Click CLI interface definitions.

Defines the command-line interface structure and routes commands
to their respective runners.
"""

from __future__ import annotations

from pathlib import Path

import click
from dotenv import load_dotenv

from SorinPrimo.cli.runner import CommandRunner
from SorinPrimo.config import load_config


def _parse_filters(ctx: click.Context, param: click.Parameter, values: tuple[str, ...]) -> dict[str, str]:
    """Turn repeated ``key=value`` options into an ordered filter map."""
    del ctx
    filters: dict[str, str] = {}
    for item in values:
        key, sep, value = item.partition("=")
        if not sep or not key.strip():
            raise click.BadParameter(f"expected key=value, got {item!r}", param=param)
        filters[key.strip()] = value.strip()
    return filters


@click.group(help="SorinPrimo: search a Primo catalog and print normalized records.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=Path("config/default.yml"),
    show_default=True,
    help="Path to YAML config file.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path) -> None:
    """CLI entry group.

    Loads environment variables from .env file before processing config.

    Args:
        ctx: Click context.
        config_path: Path to YAML config file.
    """
    load_dotenv()

    cfg = load_config(config_path)
    ctx.obj = cfg


@cli.command("search")
@click.argument("query")
@click.option("--limit", type=click.IntRange(min=1), default=10, show_default=True, help="Page size.")
@click.option("--offset", type=click.IntRange(min=0), default=0, show_default=True, help="Result offset.")
@click.option(
    "--filter",
    "filters",
    multiple=True,
    callback=_parse_filters,
    metavar="KEY=VALUE",
    help="Filter key/value pair; repeatable (e.g. peer_reviewed=true, sort_by=date).",
)
@click.pass_context
def search_cmd(ctx: click.Context, query: str, limit: int, offset: int, filters: dict[str, str]) -> None:
    """Search the catalog and print normalized records.

    Args:
        ctx: Click context.
        query: Free-text search term.
        limit: Page size.
        offset: Result offset.
        filters: Parsed filter map.

    Raises:
        click.Abort: When the search fails.
    """
    runner = CommandRunner(ctx.obj)
    runner.run_search(ctx.command.name, query=query, limit=limit, offset=offset, filters=filters)
