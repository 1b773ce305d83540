"""Primo endpoint configuration (institution, view, API key, deep links)."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, Mapping

from SorinPrimo.config.common import ConfigSection

DEFAULT_TIMEOUT = 15.0


@dataclass(frozen=True, slots=True)
class PrimoConfig:
    """Store validated Primo Brief Search API settings.

    Attributes:
        api_url: API root, without the trailing ``/v1/search``.
        inst: Institution code.
        vid: View id, also used in deep links.
        tab: Search tab.
        scope: Search scope.
        api_key: Resolved API key.
        lang: Interface language, also used in deep links.
        catalog_url_root: Root of the discovery UI used for deep links.
        newspapers_active: Value sent as ``newspapersActive``.
        newspapers_search: ``newspapersSearch`` default when the request has no ``item_type``.
        timeout: Total request deadline in seconds, body read included.
    """

    api_url: str
    inst: str
    vid: str
    tab: str
    scope: str
    api_key: str = field(repr=False)
    lang: str = "en"
    catalog_url_root: str = ""
    api_key_env: str = "PRIMO_API_KEY"
    newspapers_active: bool = True
    newspapers_search: bool = False
    timeout: float = DEFAULT_TIMEOUT


def load_primo(raw: Mapping[str, Any]) -> PrimoConfig:
    """Load primo domain config from raw mapping.

    The API key comes from ``primo.api_key`` when set, otherwise from the
    environment variable named by ``primo.api_key_env``.

    Args:
        raw: Root configuration mapping.

    Returns:
        Parsed Primo configuration.

    Raises:
        TypeError: If config types are invalid.
        ValueError: If required keys are missing.
    """
    section = ConfigSection.from_root(raw, "primo", required=True)
    api_key_env = section.get_str("api_key_env", "PRIMO_API_KEY")
    inline_key = section.get_str("api_key", "").strip()
    return PrimoConfig(
        api_url=section.get_str("api_url").rstrip("/"),
        inst=section.get_str("inst"),
        vid=section.get_str("vid"),
        tab=section.get_str("tab"),
        scope=section.get_str("scope"),
        api_key=inline_key or _load_api_key_from_env(api_key_env),
        lang=section.get_str("lang", "en"),
        catalog_url_root=section.get_str("catalog_url_root"),
        api_key_env=api_key_env,
        newspapers_active=section.get_bool("newspapers_active", True),
        newspapers_search=section.get_bool("newspapers_search", False),
        timeout=section.get_float("timeout", DEFAULT_TIMEOUT),
    )


def check_primo(config: PrimoConfig) -> None:
    """Validate primo domain constraints.

    Args:
        config: Parsed Primo configuration.

    Raises:
        ValueError: If values violate Primo constraints.
    """
    _check_non_empty(config.api_url, "primo.api_url")
    _check_non_empty(config.inst, "primo.inst")
    _check_non_empty(config.vid, "primo.vid")
    _check_non_empty(config.tab, "primo.tab")
    _check_non_empty(config.scope, "primo.scope")
    _check_non_empty(config.catalog_url_root, "primo.catalog_url_root")
    if not config.api_url.startswith(("http://", "https://")):
        raise ValueError("primo.api_url must be an http(s) URL")
    if config.timeout <= 0:
        raise ValueError("primo.timeout must be positive")


def _check_non_empty(value: str, config_key: str) -> None:
    if not value.strip():
        raise ValueError(f"{config_key} must not be empty")


def _load_api_key_from_env(api_key_env: str) -> str:
    """Load API key from environment variable."""
    return os.getenv(api_key_env, "").strip()
