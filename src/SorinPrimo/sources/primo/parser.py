"""Primo document parser.

Primo wraps most display values in lists and nests them under ``pnx``
sections; these helpers flatten a document into a ``Resource``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping, Sequence

from SorinPrimo.core.models import Resource
from SorinPrimo.utils.log import log

if TYPE_CHECKING:
    from SorinPrimo.config import PrimoConfig

NEWSPAPER_TYPE = "newspaper_article"
NEWSPAPER_ID_PREFIX = "BM_"

Path = Sequence[str]

_TYPE = ("pnx", "display", "type")
_RECORD_ID = ("pnx", "control", "recordid")
_NEWSPAPER_ID = ("pnx", "control", "addsrcrecordid")


def parse_primo_docs(docs: Sequence[Mapping[str, Any]], config: PrimoConfig) -> list[Resource]:
    """Normalize Primo documents, skipping those without a usable record."""
    resources: list[Resource] = []
    for doc in docs:
        resource = normalize_document(doc, config)
        if resource is None:
            log.debug("Skipping Primo document without usable id: context=%s", doc.get("context"))
            continue
        resources.append(resource)
    return resources


def normalize_document(doc: Mapping[str, Any], config: PrimoConfig) -> Resource | None:
    """Map one Primo document into a ``Resource``.

    Args:
        doc: Raw document from the ``docs`` array.
        config: Primo settings used to build the catalog deep link.

    Returns:
        The normalized record, or None for a newspaper article lacking the
        secondary record id its deep link requires.
    """
    resource_type = extract_last(doc, _TYPE)
    is_newspaper = resource_type == NEWSPAPER_TYPE

    if is_newspaper:
        newspaper_id = extract_last(doc, _NEWSPAPER_ID)
        if not newspaper_id:
            return None
        identifier = f"{NEWSPAPER_ID_PREFIX}{newspaper_id}"
    else:
        identifier = extract_last(doc, _RECORD_ID)

    return Resource(
        identifier=identifier,
        title=extract_last(doc, ("pnx", "display", "title")),
        creator=extract_first_split(doc, ("pnx", "display", "creator")),
        contributor=extract_first_split(doc, ("pnx", "display", "contributor")),
        date=extract_last(doc, ("pnx", "addata", "date")),
        description=extract_last(doc, ("pnx", "display", "description")),
        doi=extract_last(doc, ("pnx", "addata", "doi")),
        format=extract_last(doc, ("pnx", "display", "format")),
        is_part_of=extract_last(doc, ("pnx", "display", "ispartof")),
        issue=extract_last(doc, ("pnx", "addata", "issue")),
        journal=extract_last(doc, ("pnx", "addata", "jtitle")),
        language=extract_last(doc, ("pnx", "display", "language")),
        page_start=extract_last(doc, ("pnx", "addata", "spage")),
        page_end=extract_last(doc, ("pnx", "addata", "epage")),
        pages=extract_last(doc, ("pnx", "addata", "pages")),
        publisher=extract_last(doc, ("pnx", "addata", "pub")),
        series=extract_last(doc, ("pnx", "addata", "seriestitle")),
        subject=extract_first_split(doc, ("pnx", "display", "subject")),
        type=resource_type,
        volume=extract_last(doc, ("pnx", "addata", "volume")),
        catalog_url=build_catalog_url(identifier, doc.get("context"), config, newspaper=is_newspaper),
        availability_status=_dig(doc, ("delivery", "bestlocation", "availabilityStatus")),
        call_number=_dig(doc, ("delivery", "bestlocation", "callNumber")),
        sublocation=_dig(doc, ("delivery", "bestlocation", "subLocation")),
        ext_collection=extract_last(doc, ("pnx", "facets", "collection")),
    )


def build_catalog_url(
    identifier: str | None,
    context: Any,
    config: PrimoConfig,
    *,
    newspaper: bool = False,
) -> str:
    """Build the deep link to a record's full display page."""
    display = "npfulldisplay" if newspaper else "fulldisplay"
    return (
        f"{config.catalog_url_root}{display}?docid={identifier or ''}"
        f"&context={context or ''}"
        f"&vid={config.vid}"
        f"&lang={config.lang}"
    )


def extract_last(doc: Mapping[str, Any], path: Path) -> Any:
    """Return the last element of the list at ``path``.

    Absent paths and empty lists yield None; a bare scalar is returned as is.
    """
    value = _dig(doc, path)
    if isinstance(value, list):
        return value[-1] if value else None
    return value


def extract_first_split(doc: Mapping[str, Any], path: Path) -> list[str] | None:
    """Split the first element of the list at ``path`` on ``;``.

    Segments are stripped and empty ones dropped. Absent paths and empty
    lists yield None.
    """
    value = _dig(doc, path)
    if isinstance(value, list):
        value = value[0] if value else None
    if not isinstance(value, str):
        return None
    return [segment.strip() for segment in value.split(";") if segment.strip()]


def _dig(doc: Mapping[str, Any], path: Path) -> Any:
    """Walk nested mappings, returning None as soon as a step is missing."""
    current: Any = doc
    for key in path:
        if not isinstance(current, Mapping):
            return None
        current = current.get(key)
    return current
