from __future__ import annotations

from dataclasses import asdict
from dataclasses import dataclass
from typing import Any, Optional, Sequence

PRIMO_SOURCE_LABEL = "Primo (new Search API)"


@dataclass(frozen=True, slots=True)
class Resource:
    """Flat, schema-stable record shared by all catalog backends.

    Every field is always present; values the catalog does not supply are
    ``None``. ``coverage``, ``relation``, ``direct_url`` and ``rights`` exist
    only to keep the record shape identical across backends.

    Attributes:
        identifier: Catalog record id used in deep links.
        title: Display title.
        creator: Creator names split from the display field.
        contributor: Contributor names split from the display field.
        subject: Subject headings split from the display field.
        catalog_url: Deep link to the record's full display page.
        availability_status: Best-location availability, for result listings.
        sublocation: Best-location sublocation, for result listings.
    """

    identifier: Optional[str]
    title: Optional[str] = None
    creator: Optional[Sequence[str]] = None
    contributor: Optional[Sequence[str]] = None
    date: Optional[str] = None
    description: Optional[str] = None
    doi: Optional[str] = None
    format: Optional[str] = None
    is_part_of: Optional[str] = None
    issue: Optional[str] = None
    journal: Optional[str] = None
    language: Optional[str] = None
    page_start: Optional[str] = None
    page_end: Optional[str] = None
    pages: Optional[str] = None
    publisher: Optional[str] = None
    series: Optional[str] = None
    source: str = PRIMO_SOURCE_LABEL
    subject: Optional[Sequence[str]] = None
    type: Optional[str] = None
    volume: Optional[str] = None
    catalog_url: Optional[str] = None
    availability_status: Optional[str] = None
    call_number: Optional[str] = None
    sublocation: Optional[str] = None
    ext_collection: Optional[str] = None
    coverage: None = None
    relation: None = None
    direct_url: None = None
    rights: None = None

    def to_dict(self) -> dict[str, Any]:
        """Return the record as a flat mapping with every field present."""
        return asdict(self)


@dataclass(frozen=True, slots=True)
class SearchResult:
    """Outcome of one catalog search call."""

    num_results: int
    results: tuple[Resource, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "num_results": self.num_results,
            "results": [resource.to_dict() for resource in self.results],
        }
