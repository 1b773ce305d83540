from __future__ import annotations

"""Application config orchestration and YAML loading entrypoints."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import yaml

from SorinPrimo.config.filters import check_filters, load_filters
from SorinPrimo.config.output import OutputConfig, check_output, load_output
from SorinPrimo.config.primo import PrimoConfig, check_primo, load_primo
from SorinPrimo.config.runtime import RuntimeConfig, check_runtime, load_runtime
from SorinPrimo.core.filters import FilterDefinition, RangeEntry


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application root configuration."""

    runtime: RuntimeConfig
    primo: PrimoConfig
    filters: tuple[FilterDefinition, ...]
    output: OutputConfig


def parse_config_dict(raw: Mapping[str, Any]) -> AppConfig:
    """Parse normalized mapping into AppConfig."""
    runtime = load_runtime(raw)
    primo = load_primo(raw)
    filters = load_filters(raw)
    output = load_output(raw)

    check_runtime(runtime)
    check_primo(primo)
    check_filters(filters)
    check_output(output)

    config = AppConfig(
        runtime=runtime,
        primo=primo,
        filters=filters,
        output=output,
    )
    check_cross_domain(config)
    return config


def load_config(path: Path) -> AppConfig:
    """Load YAML config file without default merge."""
    return load_config_with_defaults(path, default_path=path)


def load_config_with_defaults(
    config_path: Path,
    default_path: Path = Path("config/default.yml"),
    *,
    _defaults_text: str | None = None,
) -> AppConfig:
    """Load config by merging defaults and optional override."""
    if _defaults_text is not None:
        base = parse_yaml(_defaults_text)
    else:
        base = parse_yaml(default_path.read_text(encoding="utf-8"))
        if config_path == default_path:
            return parse_config_dict(base)
    override = parse_yaml(config_path.read_text(encoding="utf-8"))
    merged = merge_config_dicts(base, override)
    return parse_config_dict(merged)


def check_cross_domain(config: AppConfig) -> None:
    """Validate cross-domain constraints."""
    for definition in config.filters:
        if definition.variable == "publish_date" and not any(
            isinstance(entry, RangeEntry) for entry in definition.entries
        ):
            raise ValueError("filters: publish_date requires a min_variable/max_variable entry")


def parse_yaml(text: str) -> dict[str, Any]:
    """Parse raw YAML text into a mapping."""
    data = yaml.safe_load(text) or {}
    if not isinstance(data, Mapping):
        raise ValueError("Config root must be a mapping/object")
    return dict(data)


def merge_config_dicts(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Deep-merge two config mappings.

    Lists (such as ``filters``) are replaced wholesale, not merged.
    """
    merged: dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in merged and isinstance(merged[key], Mapping) and isinstance(value, Mapping):
            merged[key] = merge_config_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged
