"""HTTP client for the remote service desk sample API (requests + small TTL cache)."""

from __future__ import annotations

import logging
import time
from typing import Any

import requests

from .config import DATA_URL, DEFAULT_CACHE_TTL, DEFAULT_DATAPOINTS, DEFAULT_REQUEST_TIMEOUT

logger = logging.getLogger(__name__)


class SampleDataError(RuntimeError):
    """Raised when the remote dataset cannot be fetched or is malformed."""


class SampleDataAPI:
    def __init__(
        self,
        url: str = DATA_URL,
        *,
        timeout: float = DEFAULT_REQUEST_TIMEOUT,
        cache_ttl: float = DEFAULT_CACHE_TTL,
        session: requests.Session | None = None,
    ):
        self.url = url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"Accept": "application/json"})
        # Simple in-memory cache: {datapoints: (timestamp, payload)}
        self._cache: dict[int, tuple[float, dict[str, Any]]] = {}
        self._cache_ttl = float(cache_ttl)

    @property
    def cache_ttl(self) -> float:
        return self._cache_ttl

    def clear_cache(self) -> None:
        """Reset the in-memory payload cache."""
        cache = getattr(self, "_cache", None)
        if isinstance(cache, dict):
            cache.clear()

    def fetch_sample(self, datapoints: int = DEFAULT_DATAPOINTS, *, fresh: bool = False) -> dict[str, Any]:
        """GET ``<url>?datapoints=N`` and return the validated ``{"results": [...]}`` payload."""
        now = time.time()
        cached = None if fresh else self._cache.get(datapoints)
        if cached and (now - cached[0]) < self._cache_ttl:
            logger.debug("Serving %d datapoints from cache", datapoints)
            return cached[1]

        logger.info("Fetching %d datapoints from %s", datapoints, self.url)
        try:
            resp = self.session.get(self.url, params={"datapoints": datapoints}, timeout=self.timeout)
        except requests.RequestException as exc:
            raise SampleDataError(f"GET {self.url} failed: {exc}") from exc
        if resp.status_code >= 400:
            raise SampleDataError(f"GET {self.url} failed {resp.status_code}: {resp.text[:200]}")
        try:
            data = resp.json()
        except ValueError as exc:
            raise SampleDataError(f"GET {self.url} returned invalid JSON") from exc
        if not isinstance(data, dict) or not isinstance(data.get("results"), list):
            raise SampleDataError(f"GET {self.url} returned a payload without a 'results' list")

        logger.info("Fetched %d issue records", len(data["results"]))
        self._cache[datapoints] = (now, data)
        return data
