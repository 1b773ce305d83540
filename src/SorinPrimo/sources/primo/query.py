"""Primo filter translation and search query compiler."""

from __future__ import annotations

from typing import TYPE_CHECKING, Mapping, Sequence
from urllib.parse import quote, quote_plus

from SorinPrimo.core.filters import (
    BOOLEAN_ON,
    VALUE_PLACEHOLDER,
    FilterDefinition,
    FilterMatch,
    MatchKind,
    RangeEntry,
    ToggleEntry,
)

if TYPE_CHECKING:
    from SorinPrimo.config import PrimoConfig

# Primo's "|,|" multi-filter delimiter, pre-encoded.
FILTER_DELIMITER = "%7C%2C%7C"
PUBLISH_DATE_FIELD = "facet_searchcreationdate"
ITEM_TYPE_KEY = "item_type"
NEWSPAPERS_VALUE = "newspapers"
PUBLISH_DATE_KEY = "publish_date"
SEARCH_BY_KEY = "search_by"
SORT_BY_KEY = "sort_by"
DEFAULT_SEARCH_FIELD = "any"

# Filter keys that shape the request itself rather than contributing a fragment.
_REQUEST_KEYS = frozenset({SEARCH_BY_KEY, SORT_BY_KEY})


def resolve_filter_entry(
    key: str,
    value: str,
    definitions: Sequence[FilterDefinition],
) -> FilterMatch | None:
    """Find the filter entry responsible for one key/value pair.

    A definition whose variable equals ``key`` wins first; its entries are
    searched for a toggle answering to ``value`` or, failing that, a range
    entry. Otherwise ``key`` is looked up as an entry-level variable with a
    non-empty ``api_parameter`` across all definitions.

    Args:
        key: Filter key sent by the UI layer.
        value: Filter value sent by the UI layer.
        definitions: Ordered filter-definition catalog.

    Returns:
        The matched entry with its match kind, or None when nothing applies.
    """
    for definition in definitions:
        if definition.variable != key:
            continue
        for entry in definition.entries:
            if isinstance(entry, ToggleEntry):
                if entry.variable == value:
                    return FilterMatch(kind=MatchKind.TOP_LEVEL, key=key, entry=entry)
            elif isinstance(entry, RangeEntry):
                return FilterMatch(kind=MatchKind.TOP_LEVEL, key=key, entry=entry)
        return None

    for definition in definitions:
        for entry in definition.entries:
            if isinstance(entry, ToggleEntry) and entry.variable == key and entry.api_parameter:
                return FilterMatch(kind=MatchKind.ENTRY_LEVEL, key=key, entry=entry)
    return None


def translate_filter(key: str, value: str, definitions: Sequence[FilterDefinition]) -> str | None:
    """Translate one filter key/value pair into a Primo ``qInclude`` fragment.

    Unknown keys, unmatched values, ``"false"`` values and default date ranges
    all yield None; translation never raises.

    Args:
        key: Filter key sent by the UI layer.
        value: Filter value sent by the UI layer.
        definitions: Ordered filter-definition catalog.

    Returns:
        Fragment string, or None when the filter contributes nothing.
    """
    match = resolve_filter_entry(key, value, definitions)
    if match is None:
        return None

    entry = match.entry
    key_matches = match.resolved_variable == key

    if value == BOOLEAN_ON and key_matches:
        return entry.api_parameter
    if key == ITEM_TYPE_KEY:
        # Newspaper searching is switched on through request flags instead.
        if value == NEWSPAPERS_VALUE:
            return None
        return _substitute(entry.api_parameter, value)
    if key_matches and value and value != "false":
        return _substitute(entry.api_parameter, value)
    if key == PUBLISH_DATE_KEY and isinstance(entry, RangeEntry):
        return _publish_date_fragment(value, entry)
    return None


def translate_filters(
    filters: Mapping[str, str],
    definitions: Sequence[FilterDefinition],
) -> list[str]:
    """Translate a filter map into Primo fragments in input order.

    Args:
        filters: Filter key/value pairs sent by the UI layer.
        definitions: Ordered filter-definition catalog.

    Returns:
        Non-empty fragments, one at most per filter key.
    """
    fragments: list[str] = []
    for key, value in filters.items():
        fragment = translate_filter(str(key), "" if value is None else str(value), definitions)
        if fragment:
            fragments.append(fragment)
    return fragments


def build_search_query(
    query_text: str,
    *,
    limit: int,
    offset: int,
    filters: Mapping[str, str],
    definitions: Sequence[FilterDefinition],
    config: PrimoConfig,
) -> str:
    """Compile a search request into the Primo ``/v1/search`` query string.

    ``search_by`` and ``sort_by`` are read from ``filters`` as request
    parameters; every other key goes through filter translation.

    Args:
        query_text: Free-text search term.
        limit: Page size.
        offset: Zero-based result offset.
        filters: Filter key/value pairs sent by the UI layer.
        definitions: Ordered filter-definition catalog.
        config: Resolved Primo endpoint settings.

    Returns:
        Encoded query string without the leading ``?``.
    """
    search_field = _encode(filters.get(SEARCH_BY_KEY) or DEFAULT_SEARCH_FIELD)
    sort_by = _encode(filters.get(SORT_BY_KEY) or "")
    encoded_text = quote_plus(query_text.strip())

    fragments = translate_filters(
        {key: value for key, value in filters.items() if key not in _REQUEST_KEYS},
        definitions,
    )

    params: list[tuple[str, str]] = [
        ("inst", config.inst),
        ("vid", config.vid),
        ("tab", config.tab),
        ("scope", config.scope),
        ("q", f"{search_field},contains,{encoded_text}"),
        ("apikey", config.api_key),
        ("newspapersActive", _flag(config.newspapers_active)),
        ("newspapersSearch", _flag(newspapers_search_enabled(filters, default=config.newspapers_search))),
        ("lang", config.lang),
        ("pcAvailability", "false"),
        ("offset", str(offset)),
        ("limit", str(limit)),
        ("qInclude", FILTER_DELIMITER.join(fragments)),
    ]
    if sort_by:
        params.append(("sort", sort_by))
    params.append(("blendFacetsSeparately", "true"))
    return "&".join(f"{name}={value}" for name, value in params)


def newspapers_search_enabled(filters: Mapping[str, str], *, default: bool) -> bool:
    """Decide ``newspapersSearch``: the request's ``item_type`` wins over the default."""
    if ITEM_TYPE_KEY not in filters:
        return default
    return filters[ITEM_TYPE_KEY] == NEWSPAPERS_VALUE


def _publish_date_fragment(value: str, entry: RangeEntry) -> str | None:
    """Build the bracket-range fragment, or None for the default range."""
    parts = value.split(",")
    try:
        low = int(parts[0].strip())
        high = int(parts[-1].strip())
    except ValueError:
        return None
    if low == entry.min_value and high == entry.max_value:
        return None
    return f"{PUBLISH_DATE_FIELD},include,%5B{low}%20TO%20{high}%5D"


def _substitute(api_parameter: str, value: str) -> str:
    return api_parameter.replace(VALUE_PLACEHOLDER, _encode(value))


def _encode(value: str) -> str:
    """Percent-encode a caller value so it stays inside its own parameter."""
    return quote(value, safe="")


def _flag(value: bool) -> str:
    return "true" if value else "false"
