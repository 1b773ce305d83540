"""Output domain configuration for rendering formats."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from SorinPrimo.config.common import ConfigSection

_ALLOWED_FORMATS = {"console", "json"}


@dataclass(frozen=True, slots=True)
class OutputConfig:
    """Store validated output rendering settings."""

    base_dir: str = "output"
    formats: tuple[str, ...] = ("console",)


def load_output(raw: Mapping[str, Any]) -> OutputConfig:
    """Load output domain config from raw mapping.

    Args:
        raw: Root configuration mapping.

    Returns:
        Parsed output configuration.

    Raises:
        TypeError: If config types are invalid.
    """
    section = ConfigSection.from_root(raw, "output")
    formats = section.get_str_list("formats", ["console"])
    return OutputConfig(
        base_dir=section.get_str("base_dir", "output"),
        formats=tuple(item.strip().lower() for item in formats if item.strip()),
    )


def check_output(config: OutputConfig) -> None:
    """Validate output domain constraints.

    Args:
        config: Parsed output configuration.

    Raises:
        ValueError: If values violate output constraints.
    """
    if not config.formats:
        raise ValueError("output.formats must include at least one format")
    unknown = set(config.formats) - _ALLOWED_FORMATS
    if unknown:
        raise ValueError(f"output.formats has unknown values: {sorted(unknown)}")
    if not config.base_dir.strip():
        raise ValueError("output.base_dir must not be empty")
