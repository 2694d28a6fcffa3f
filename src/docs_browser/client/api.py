"""HTTP client for the documentation API."""

from typing import Any
from urllib.parse import quote

import requests
from loguru import logger

from docs_browser.errors import NetworkFailure
from docs_browser.models.node import DocumentRecord, NavNode, SearchHit


class DocsApi:
    """Thin requests-based client for /api/navigation, /api/content and /api/search.

    Every failure, including non-2xx responses, surfaces as NetworkFailure.
    Nothing is retried.
    """

    def __init__(self, base_url: str, *, timeout: float = 10.0) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.sess = requests.Session()
        logger.debug("API client ready: base_url {!r}", self.base_url)

    def _get(self, path: str, params: dict[str, str] | None = None) -> Any:
        url = f"{self.base_url}{path}"
        logger.debug("Making request: {} {!r}", url, params)
        try:
            r = self.sess.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            msg = f"Request to {url!r} failed: {e}"
            raise NetworkFailure(msg) from e

        if not r.ok:
            msg = f"Request to {url!r} returned HTTP {r.status_code}"
            raise NetworkFailure(msg, status=r.status_code)
        try:
            return r.json()
        except ValueError as e:
            msg = f"Response from {url!r} is not JSON"
            raise NetworkFailure(msg, status=r.status_code) from e

    def navigation(self) -> list[NavNode]:
        data = self._get("/api/navigation")
        return [NavNode.from_dict(item) for item in data]

    def content(self, path: str) -> DocumentRecord:
        data = self._get(f"/api/content/{quote(path)}")
        return DocumentRecord.from_dict(data)

    def search(self, query: str) -> list[SearchHit]:
        data = self._get("/api/search", params={"q": query})
        return [SearchHit.from_dict(item) for item in data]
