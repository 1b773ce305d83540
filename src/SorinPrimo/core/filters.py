from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Union

VALUE_PLACEHOLDER = "$VALUE"
BOOLEAN_ON = "true"


@dataclass(frozen=True, slots=True)
class ToggleEntry:
    """Filter entry selected by an exact variable match.

    Attributes:
        variable: Value of the parent filter (or standalone key) this entry answers to.
        api_parameter: Primo ``qInclude`` fragment, optionally containing ``$VALUE``.
        label: Display label for the UI layer.
    """

    variable: str
    api_parameter: str = ""
    label: Optional[str] = None


@dataclass(frozen=True, slots=True)
class RangeEntry:
    """Filter entry expressing a min/max bound such as a publication year range.

    ``min_value``/``max_value`` are the default bounds; a request carrying
    exactly these bounds is treated as unset.
    """

    min_variable: str
    max_variable: str
    min_value: int
    max_value: int
    api_parameter: str = ""


FilterEntry = Union[ToggleEntry, RangeEntry]


@dataclass(frozen=True, slots=True)
class FilterDefinition:
    """One application-level filter and its ordered entries."""

    variable: str
    entries: Sequence[FilterEntry] = ()
    label: Optional[str] = None


class MatchKind(str, Enum):
    """How a filter key was resolved against the definition catalog."""

    TOP_LEVEL = "top_level"
    ENTRY_LEVEL = "entry_level"


@dataclass(frozen=True, slots=True)
class FilterMatch:
    """Entry selected for one incoming filter key/value pair."""

    kind: MatchKind
    key: str
    entry: FilterEntry

    @property
    def resolved_variable(self) -> str | None:
        """Variable the matched entry answers to, or None for range entries.

        A top-level ``"true"`` toggle is the on-switch of a boolean filter and
        answers to the filter key itself; any other toggle answers to its own
        variable.
        """
        if not isinstance(self.entry, ToggleEntry):
            return None
        if self.kind is MatchKind.TOP_LEVEL and self.entry.variable == BOOLEAN_ON:
            return self.key
        return self.entry.variable
