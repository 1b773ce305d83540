"""Tests for the catalog search service and source registry."""

from __future__ import annotations

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from SorinPrimo.config import load_config
from SorinPrimo.core.errors import UpstreamRequestError
from SorinPrimo.core.models import Resource, SearchResult
from SorinPrimo.services import create_search_service
from SorinPrimo.services.search import CatalogSearchService
from SorinPrimo.sources.primo.source import PrimoSource
from SorinPrimo.sources.registry import build_source, supported_source_names


class _StubSource:
    def __init__(self, *, name: str = "stub", should_fail: bool = False, should_fail_close: bool = False) -> None:
        self.name = name
        self.should_fail = should_fail
        self.should_fail_close = should_fail_close
        self.calls: list[tuple] = []
        self.closed = False

    def search(self, query, limit, offset, filters=None) -> SearchResult:
        self.calls.append((query, limit, offset, filters))
        if self.should_fail:
            raise UpstreamRequestError("HTTP 502", status_code=502)
        return SearchResult(num_results=1, results=(Resource(identifier="r1"),))

    def close(self) -> None:
        self.closed = True
        if self.should_fail_close:
            raise RuntimeError("close failed")


class TestCatalogSearchService(unittest.TestCase):
    def test_delegates_to_source(self) -> None:
        source = _StubSource()
        service = CatalogSearchService(source=source)

        result = service.search("Proust", limit=2, offset=4, filters={"peer_reviewed": "true"})

        self.assertEqual(result.num_results, 1)
        self.assertEqual(source.calls, [("Proust", 2, 4, {"peer_reviewed": "true"})])

    def test_source_errors_propagate(self) -> None:
        service = CatalogSearchService(source=_StubSource(should_fail=True))
        with self.assertRaises(UpstreamRequestError):
            service.search("Proust")

    def test_rejects_invalid_paging(self) -> None:
        service = CatalogSearchService(source=_StubSource())
        with self.assertRaises(ValueError):
            service.search("x", limit=0)
        with self.assertRaises(ValueError):
            service.search("x", offset=-1)

    def test_close_failure_is_isolated(self) -> None:
        source = _StubSource(should_fail_close=True)
        CatalogSearchService(source=source).close()
        self.assertTrue(source.closed)


class TestSourceRegistry(unittest.TestCase):
    def test_primo_is_registered(self) -> None:
        self.assertEqual(supported_source_names(), ("primo",))

    def test_builds_primo_source_from_config(self) -> None:
        config = load_config(REPO_ROOT / "config" / "default.yml")
        source = build_source("primo", config=config)
        try:
            self.assertIsInstance(source, PrimoSource)
            self.assertEqual(source.definitions, config.filters)
            self.assertEqual(source.client.timeout, config.primo.timeout)
        finally:
            source.close()

    def test_unknown_source(self) -> None:
        config = load_config(REPO_ROOT / "config" / "default.yml")
        with self.assertRaises(ValueError):
            build_source("worldcat", config=config)

    def test_create_search_service(self) -> None:
        config = load_config(REPO_ROOT / "config" / "default.yml")
        service = create_search_service(config)
        self.assertIsInstance(service.source, PrimoSource)
        service.close()


if __name__ == "__main__":
    unittest.main()
