"""Runtime domain configuration (logging, process behavior)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from SorinPrimo.config.common import ConfigSection

_ALLOWED_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True, slots=True)
class RuntimeConfig:
    """Store validated runtime behavior settings."""

    level: str = "INFO"
    to_file: bool = False
    dir: str = "log"


def load_runtime(raw: Mapping[str, Any]) -> RuntimeConfig:
    """Load runtime configuration from raw mapping.

    Args:
        raw: Root configuration mapping.

    Returns:
        Parsed runtime configuration.

    Raises:
        TypeError: If config types are invalid.
    """
    section = ConfigSection.from_root(raw, "log")
    return RuntimeConfig(
        level=section.get_str("level", "INFO").upper(),
        to_file=section.get_bool("to_file", False),
        dir=section.get_str("dir", "log"),
    )


def check_runtime(config: RuntimeConfig) -> None:
    """Validate runtime domain constraints.

    Args:
        config: Parsed runtime configuration.

    Raises:
        ValueError: If values violate runtime constraints.
    """
    if config.level not in _ALLOWED_LOG_LEVELS:
        raise ValueError(f"log.level must be one of {sorted(_ALLOWED_LOG_LEVELS)}")
    if not config.dir.strip():
        raise ValueError("log.dir must not be empty")
