"""Tests for Primo filter translation."""

from __future__ import annotations

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from SorinPrimo.core.filters import FilterDefinition, MatchKind, RangeEntry, ToggleEntry
from SorinPrimo.sources.primo.query import resolve_filter_entry, translate_filter, translate_filters


DEFINITIONS = (
    FilterDefinition(
        variable="peer_reviewed",
        entries=(ToggleEntry(variable="true", api_parameter="facet_tlevel,include,peer_reviewed"),),
    ),
    FilterDefinition(
        variable="item_type",
        entries=(
            ToggleEntry(variable="books", api_parameter="facet_rtype,exact,$VALUE"),
            ToggleEntry(variable="newspapers", api_parameter="facet_rtype,exact,newspaper_articles"),
        ),
    ),
    FilterDefinition(
        variable="availability",
        entries=(
            ToggleEntry(variable="open_access", api_parameter="facet_tlevel,include,open_access"),
            ToggleEntry(variable="no_parameter", api_parameter=""),
        ),
    ),
    FilterDefinition(
        variable="languages",
        entries=(ToggleEntry(variable="language", api_parameter="facet_lang,exact,$VALUE"),),
    ),
    FilterDefinition(
        variable="publish_date",
        entries=(
            RangeEntry(
                min_variable="publish_date_min",
                max_variable="publish_date_max",
                min_value=1000,
                max_value=2030,
            ),
        ),
    ),
)


class TestResolveFilterEntry(unittest.TestCase):
    def test_top_level_toggle_matches_value(self) -> None:
        match = resolve_filter_entry("item_type", "books", DEFINITIONS)
        assert match is not None
        self.assertEqual(match.kind, MatchKind.TOP_LEVEL)
        self.assertEqual(match.entry, DEFINITIONS[1].entries[0])
        self.assertEqual(match.resolved_variable, "books")

    def test_top_level_boolean_toggle_answers_to_key(self) -> None:
        match = resolve_filter_entry("peer_reviewed", "true", DEFINITIONS)
        assert match is not None
        self.assertEqual(match.kind, MatchKind.TOP_LEVEL)
        self.assertEqual(match.resolved_variable, "peer_reviewed")

    def test_top_level_range_entry_is_selected(self) -> None:
        match = resolve_filter_entry("publish_date", "1990,2000", DEFINITIONS)
        assert match is not None
        self.assertEqual(match.kind, MatchKind.TOP_LEVEL)
        self.assertIsInstance(match.entry, RangeEntry)
        self.assertIsNone(match.resolved_variable)

    def test_entry_level_match_by_key(self) -> None:
        match = resolve_filter_entry("open_access", "true", DEFINITIONS)
        assert match is not None
        self.assertEqual(match.kind, MatchKind.ENTRY_LEVEL)
        self.assertEqual(match.resolved_variable, "open_access")

    def test_entry_level_requires_api_parameter(self) -> None:
        self.assertIsNone(resolve_filter_entry("no_parameter", "true", DEFINITIONS))

    def test_top_level_without_matching_value_does_not_fall_through(self) -> None:
        self.assertIsNone(resolve_filter_entry("item_type", "maps", DEFINITIONS))

    def test_unknown_key(self) -> None:
        self.assertIsNone(resolve_filter_entry("mystery", "true", DEFINITIONS))


class TestTranslateFilter(unittest.TestCase):
    def test_toggle_true_yields_parameter_verbatim(self) -> None:
        self.assertEqual(
            translate_filters({"peer_reviewed": "true"}, DEFINITIONS),
            ["facet_tlevel,include,peer_reviewed"],
        )

    def test_false_on_top_level_filter_yields_nothing(self) -> None:
        self.assertIsNone(translate_filter("peer_reviewed", "false", DEFINITIONS))

    def test_false_on_entry_level_filter_yields_nothing(self) -> None:
        self.assertIsNone(translate_filter("open_access", "false", DEFINITIONS))

    def test_entry_level_toggle_true(self) -> None:
        self.assertEqual(
            translate_filter("open_access", "true", DEFINITIONS),
            "facet_tlevel,include,open_access",
        )

    def test_entry_level_value_is_substituted(self) -> None:
        self.assertEqual(translate_filter("language", "fre", DEFINITIONS), "facet_lang,exact,fre")

    def test_empty_value_yields_nothing(self) -> None:
        self.assertIsNone(translate_filter("language", "", DEFINITIONS))

    def test_substituted_value_is_percent_encoded(self) -> None:
        self.assertEqual(translate_filter("language", "c#", DEFINITIONS), "facet_lang,exact,c%23")
        self.assertEqual(
            translate_filter("language", "fre|,|x&y", DEFINITIONS),
            "facet_lang,exact,fre%7C%2C%7Cx%26y",
        )

    def test_top_level_value_toggle_yields_nothing(self) -> None:
        self.assertIsNone(translate_filter("availability", "open_access", DEFINITIONS))

    def test_item_type_substitutes_value(self) -> None:
        self.assertEqual(translate_filter("item_type", "books", DEFINITIONS), "facet_rtype,exact,books")

    def test_item_type_newspapers_has_no_templated_fragment(self) -> None:
        self.assertIsNone(translate_filter("item_type", "newspapers", DEFINITIONS))

    def test_item_type_unknown_value_yields_nothing(self) -> None:
        self.assertIsNone(translate_filter("item_type", "maps", DEFINITIONS))

    def test_publish_date_default_range_yields_nothing(self) -> None:
        self.assertIsNone(translate_filter("publish_date", "1000,2030", DEFINITIONS))

    def test_publish_date_custom_range(self) -> None:
        self.assertEqual(
            translate_filter("publish_date", "1990,2000", DEFINITIONS),
            "facet_searchcreationdate,include,%5B1990%20TO%202000%5D",
        )

    def test_publish_date_with_one_default_bound_still_filters(self) -> None:
        self.assertEqual(
            translate_filter("publish_date", "1000,1900", DEFINITIONS),
            "facet_searchcreationdate,include,%5B1000%20TO%201900%5D",
        )

    def test_publish_date_garbage_yields_nothing(self) -> None:
        self.assertIsNone(translate_filter("publish_date", "soon,later", DEFINITIONS))

    def test_unknown_keys_are_silent(self) -> None:
        self.assertEqual(translate_filters({"mystery": "true", "other": "x"}, DEFINITIONS), [])

    def test_empty_catalog(self) -> None:
        self.assertEqual(translate_filters({"peer_reviewed": "true"}, ()), [])

    def test_fragments_follow_input_order(self) -> None:
        fragments = translate_filters(
            {"language": "eng", "mystery": "1", "peer_reviewed": "true", "publish_date": "1990,2000"},
            DEFINITIONS,
        )
        self.assertEqual(
            fragments,
            [
                "facet_lang,exact,eng",
                "facet_tlevel,include,peer_reviewed",
                "facet_searchcreationdate,include,%5B1990%20TO%202000%5D",
            ],
        )


if __name__ == "__main__":
    unittest.main()
