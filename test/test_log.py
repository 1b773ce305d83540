"""Tests for the package logger setup."""

from __future__ import annotations

import logging
import sys
import tempfile
import unittest
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from SorinPrimo.utils.log import LevelTagFormatter, action_log_path, configure_logging, log, resolve_level


class TestLogging(unittest.TestCase):
    def tearDown(self) -> None:
        configure_logging(level="INFO")

    def test_resolve_level(self) -> None:
        self.assertEqual(resolve_level("debug"), logging.DEBUG)
        self.assertEqual(resolve_level(None), logging.INFO)
        self.assertEqual(resolve_level("chatty"), logging.INFO)

    def test_action_log_path(self) -> None:
        path = action_log_path("logs", "search", now=datetime(2026, 3, 4, 5, 6, 7))
        self.assertEqual(path, Path("logs") / "search" / "search_0304050607.log")

    def test_formatter_uses_level_tags(self) -> None:
        record = logging.LogRecord("SorinPrimo", logging.WARNING, __file__, 1, "careful", None, None)
        self.assertIn("[WARN] careful", LevelTagFormatter().format(record))

    def test_console_only_returns_no_path(self) -> None:
        self.assertIsNone(configure_logging(level="WARNING", action="search"))
        self.assertEqual(len(log.handlers), 1)
        self.assertEqual(log.level, logging.WARNING)

    def test_file_logging_captures_debug_records(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = configure_logging(level="INFO", action="search", log_to_file=True, log_dir=tmp)
            assert path is not None
            log.debug("request url=%s", "https://primo.example.org")
            configure_logging(level="INFO")

            self.assertEqual(path.parent, Path(tmp) / "search")
            self.assertIn("[DEBG] request url=https://primo.example.org", path.read_text(encoding="utf-8"))


if __name__ == "__main__":
    unittest.main()
