from __future__ import annotations

"""Public configuration API for SorinPrimo."""

from SorinPrimo.config.app import (
    AppConfig,
    check_cross_domain,
    load_config,
    load_config_with_defaults,
    parse_config_dict,
)
from SorinPrimo.config.output import OutputConfig
from SorinPrimo.config.primo import PrimoConfig
from SorinPrimo.config.runtime import RuntimeConfig

__all__ = [
    "RuntimeConfig",
    "PrimoConfig",
    "OutputConfig",
    "AppConfig",
    "load_config",
    "load_config_with_defaults",
    "parse_config_dict",
    "check_cross_domain",
]
