"""Filter-definition catalog configuration."""

from __future__ import annotations

from typing import Any, Mapping

from SorinPrimo.config.common import ConfigSection, section_list
from SorinPrimo.core.filters import FilterDefinition, FilterEntry, RangeEntry, ToggleEntry

_RANGE_KEYS = ("min_variable", "max_variable")


def load_filters(raw: Mapping[str, Any]) -> tuple[FilterDefinition, ...]:
    """Load the ordered filter-definition catalog from raw mapping.

    Args:
        raw: Root configuration mapping.

    Returns:
        Filter definitions in configured order; empty when ``filters`` is absent.

    Raises:
        TypeError: If config types are invalid.
        ValueError: If required keys are missing.
    """
    value = raw.get("filters")
    if value is None:
        return ()
    return tuple(parse_filter_definition(section) for section in section_list(value, "filters"))


def check_filters(definitions: tuple[FilterDefinition, ...]) -> None:
    """Validate filter catalog constraints.

    Args:
        definitions: Parsed filter definitions.

    Raises:
        ValueError: If a variable is empty or defined twice at top level.
    """
    seen: set[str] = set()
    for idx, definition in enumerate(definitions):
        if not definition.variable.strip():
            raise ValueError(f"filters[{idx}].variable must not be empty")
        if definition.variable in seen:
            raise ValueError(f"filters has duplicate variable: {definition.variable}")
        seen.add(definition.variable)
        for entry_idx, entry in enumerate(definition.entries):
            if isinstance(entry, RangeEntry) and entry.min_value > entry.max_value:
                raise ValueError(f"filters[{idx}].entries[{entry_idx}].min_value must be <= max_value")


def parse_filter_definition(section: ConfigSection) -> FilterDefinition:
    """Parse one filter mapping (``variable``, ``label``, ``entries``)."""
    return FilterDefinition(
        variable=section.get_str("variable"),
        entries=tuple(parse_filter_entry(entry) for entry in section.get_sections("entries")),
        label=section.get_str("label", None),
    )


def parse_filter_entry(section: ConfigSection) -> FilterEntry:
    """Parse one entry mapping into a toggle or range entry.

    Entries carrying ``min_variable``/``max_variable`` are range entries;
    entries carrying ``variable`` are toggle entries. A toggle without
    ``api_parameter`` is a UI-only option that never emits a fragment.

    Raises:
        ValueError: If the entry is neither a toggle nor a range entry.
    """
    api_parameter = section.get_str("api_parameter", "")

    if any(section.has(key) for key in _RANGE_KEYS):
        return RangeEntry(
            min_variable=section.get_str("min_variable"),
            max_variable=section.get_str("max_variable"),
            min_value=section.get_int("min_value"),
            max_value=section.get_int("max_value"),
            api_parameter=api_parameter,
        )

    if not section.has("variable"):
        raise ValueError(f"{section.path} must define variable or min_variable/max_variable")
    return ToggleEntry(
        variable=section.get_str("variable"),
        api_parameter=api_parameter,
        label=section.get_str("label", None),
    )
