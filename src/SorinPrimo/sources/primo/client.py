"""Primo Brief Search API client."""

from __future__ import annotations

import json
import time
from typing import Any, Mapping

import requests

from SorinPrimo.core.errors import InvalidResponseError, MalformedResponseError, UpstreamRequestError
from SorinPrimo.utils.log import log

SEARCH_PATH = "/v1/search"
DEFAULT_TIMEOUT = 15.0
CHUNK_SIZE = 64 * 1024

HEADERS = {
    "User-Agent": "sorin-primo/0.1",
    "Accept": "application/json",
}


class PrimoApiClient:
    """Low-level HTTP client for the Primo Brief Search API."""

    def __init__(self, api_url: str, *, timeout: float = DEFAULT_TIMEOUT) -> None:
        """Initialize the client with a reusable HTTP session.

        Args:
            api_url: API root, e.g. ``https://api-na.hosted.exlibrisgroup.com/primo``.
            timeout: Total deadline in seconds for one request, body read included.
        """
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        self._session = requests.Session()

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self._session.close()

    def search(self, query_string: str) -> tuple[int, list[dict[str, Any]]]:
        """Run one search request and return the hit count with raw documents.

        Args:
            query_string: Pre-encoded query string built by ``build_search_query``.

        Returns:
            Tuple of (``info.total``, ``docs``).

        Raises:
            UpstreamRequestError: On transport failure or a non-200 status.
            InvalidResponseError: If the body is not JSON.
            MalformedResponseError: If ``info.total`` or ``docs`` is missing.
        """
        payload = self.fetch_json(query_string)
        return extract_search_payload(payload)

    def fetch_json(self, query_string: str) -> Any:
        """Issue the GET request and decode its JSON body.

        The whole exchange, body included, is held to ``timeout`` seconds;
        ``requests`` alone only bounds each connect and each socket read.
        """
        url = f"{self.api_url}{SEARCH_PATH}?{query_string}"
        deadline = time.monotonic() + self.timeout
        try:
            response = self._session.get(url, headers=HEADERS, timeout=self.timeout, stream=True)
            try:
                if response.status_code != 200:
                    raise UpstreamRequestError(
                        f"Primo returned HTTP {response.status_code}",
                        status_code=response.status_code,
                    )
                body = self._read_body(response, deadline)
            finally:
                response.close()
        except requests.RequestException as error:
            raise UpstreamRequestError(f"Primo request failed: {error}") from error

        log.debug("Primo response status=%d bytes=%d", response.status_code, len(body))
        try:
            return json.loads(body)
        except ValueError as error:
            raise InvalidResponseError(f"Primo response is not valid JSON: {error}") from error

    def _read_body(self, response: requests.Response, deadline: float) -> bytes:
        """Read the streamed body, failing once the request deadline passes."""
        chunks: list[bytes] = []
        for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
            if time.monotonic() > deadline:
                raise UpstreamRequestError(f"Primo response exceeded {self.timeout:.1f}s deadline")
            chunks.append(chunk)
        return b"".join(chunks)


def extract_search_payload(payload: Any) -> tuple[int, list[dict[str, Any]]]:
    """Pull ``info.total`` and ``docs`` out of a decoded search response.

    Args:
        payload: Decoded JSON body.

    Returns:
        Tuple of (total hit count, raw documents).

    Raises:
        MalformedResponseError: If either path is absent or has the wrong type.
    """
    if not isinstance(payload, Mapping):
        raise MalformedResponseError("Primo response root is not an object")

    info = payload.get("info")
    total = info.get("total") if isinstance(info, Mapping) else None
    if isinstance(total, bool) or not isinstance(total, int):
        raise MalformedResponseError("Primo response lacks info.total")

    docs = payload.get("docs")
    if not isinstance(docs, list):
        raise MalformedResponseError("Primo response lacks docs")

    return total, [doc for doc in docs if isinstance(doc, dict)]
