"""CLI tests for the search command with the Primo HTTP call patched out."""

from __future__ import annotations

import json
import sys
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from click.testing import CliRunner

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from SorinPrimo.cli import cli
from SorinPrimo.core.errors import UpstreamRequestError

CONFIG_PATH = REPO_ROOT / "config" / "default.yml"
FIXTURE = REPO_ROOT / "test" / "fixtures" / "primo_search.json"
FETCH_TARGET = "SorinPrimo.sources.primo.client.PrimoApiClient.fetch_json"


def _make_runner() -> CliRunner:
    """Create CliRunner with best-effort stderr capture."""
    try:
        return CliRunner(mix_stderr=True)
    except TypeError:
        # Newer Click versions always mix stderr into output.
        return CliRunner()


class TestSearchCommand(unittest.TestCase):
    def setUp(self) -> None:
        self.payload = json.loads(FIXTURE.read_text(encoding="utf-8"))

    def test_search_prints_records(self) -> None:
        runner = _make_runner()
        with patch(FETCH_TARGET, return_value=self.payload) as fetch:
            result = runner.invoke(
                cli,
                [
                    "--config",
                    str(CONFIG_PATH),
                    "search",
                    "Proust",
                    "--limit",
                    "2",
                    "--filter",
                    "peer_reviewed=true",
                    "--filter",
                    "publish_date=1990,2000",
                ],
                catch_exceptions=False,
            )

        output = result.output
        self.assertEqual(result.exit_code, 0, output)
        self.assertIn("Fetched 2 records of 159875", output)
        self.assertIn("Proust at 150", output)
        query_string = fetch.call_args[0][0]
        self.assertIn("&limit=2&", query_string)
        self.assertIn(
            "qInclude=facet_tlevel,include,peer_reviewed%7C%2C%7C"
            "facet_searchcreationdate,include,%5B1990%20TO%202000%5D",
            query_string,
        )

    def test_upstream_failure_aborts(self) -> None:
        runner = _make_runner()
        with patch(FETCH_TARGET, side_effect=UpstreamRequestError("Primo returned HTTP 500", status_code=500)):
            result = runner.invoke(cli, ["--config", str(CONFIG_PATH), "search", "Proust"])

        self.assertNotEqual(result.exit_code, 0)
        self.assertIn("Search failed", result.output)

    def test_malformed_filter_option(self) -> None:
        runner = _make_runner()
        result = runner.invoke(cli, ["--config", str(CONFIG_PATH), "search", "Proust", "--filter", "oops"])
        self.assertEqual(result.exit_code, 2)

    def test_json_output_file(self) -> None:
        runner = _make_runner()
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.yml"
            config_path.write_text(
                CONFIG_PATH.read_text(encoding="utf-8").replace(
                    "  base_dir: output\n  formats: [console]",
                    f"  base_dir: {tmp}\n  formats: [json]",
                ),
                encoding="utf-8",
            )
            with patch(FETCH_TARGET, return_value=self.payload):
                result = runner.invoke(cli, ["--config", str(config_path), "search", "Proust"], catch_exceptions=False)

            self.assertEqual(result.exit_code, 0, result.output)
            written = list((Path(tmp) / "json").glob("search_*.json"))
            self.assertEqual(len(written), 1)
            data = json.loads(written[0].read_text(encoding="utf-8"))

        self.assertEqual(data[0]["query"], "Proust")
        self.assertEqual(data[0]["num_results"], 159875)
        self.assertEqual(len(data[0]["results"]), 2)
        self.assertIsNone(data[0]["results"][0]["rights"])


if __name__ == "__main__":
    unittest.main()
