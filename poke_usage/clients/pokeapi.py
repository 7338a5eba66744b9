"""Lightweight wrapper around PokeAPI for species, type and move lookups."""

from __future__ import annotations

import logging
import re
import time
from typing import Any, Dict, List, Optional, Union

import requests

logger = logging.getLogger(__name__)


class PokeAPIClientError(RuntimeError):
    """Raised when the PokeAPI request fails."""


class NotFoundError(PokeAPIClientError):
    """The requested resource does not exist (HTTP 404)."""

    def __init__(self, resource: str) -> None:
        super().__init__(f"Resource not found: {resource}")
        self.resource = resource


class RateLimitError(PokeAPIClientError):
    """PokeAPI answered HTTP 429."""

    def __init__(self, message: str = "Rate limit exceeded") -> None:
        super().__init__(message)


class NetworkError(PokeAPIClientError):
    """Transport failure, timeout or unexpected HTTP status."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Network error: {message}")


class ParseError(PokeAPIClientError):
    """The response body was not valid JSON."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Failed to parse response: {message}")


class PokeAPIClient:
    """Small helper client with a size- and time-bounded response cache."""

    BASE_URL = "https://pokeapi.co/api/v2"

    def __init__(
        self,
        *,
        session: Optional[requests.Session] = None,
        base_url: Optional[str] = None,
        cache_ttl: float = 900,
        cache_size: int = 500,
        cache_enabled: bool = True,
        timeout: float = 10,
        user_agent: str = "poke-usage/0.1 (+https://github.com/)",
    ) -> None:
        self.session = session or requests.Session()
        self.base_url = (base_url or self.BASE_URL).rstrip("/")
        self.cache_ttl = cache_ttl
        self.cache_size = cache_size
        self.cache_enabled = cache_enabled
        self.timeout = timeout
        self.user_agent = user_agent
        self._cache: Dict[str, tuple[float, Any]] = {}

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def get_resource(self, resource: str, name_or_id: Union[str, int]) -> Dict[str, Any]:
        slug = name_or_id if isinstance(name_or_id, int) else self._slugify_name(name_or_id)
        return self.get(f"{resource}/{slug}")

    def list_resource(
        self, resource: str, *, limit: Optional[int] = None, offset: Optional[int] = None
    ) -> Dict[str, Any]:
        params: List[str] = []
        if limit:
            params.append(f"limit={limit}")
        if offset:
            params.append(f"offset={offset}")
        endpoint = resource if not params else f"{resource}?{'&'.join(params)}"
        return self.get(endpoint)

    def get_pokemon(self, name_or_id: Union[str, int]) -> Dict[str, Any]:
        return self.get_resource("pokemon", name_or_id)

    def get_pokemon_types(self, name_or_id: Union[str, int]) -> List[str]:
        payload = self.get_pokemon(name_or_id)
        return [slot["type"]["name"] for slot in payload.get("types", [])]

    def get_type(self, name_or_id: Union[str, int]) -> Dict[str, Any]:
        return self.get_resource("type", name_or_id)

    def get_move(self, name_or_id: Union[str, int]) -> Dict[str, Any]:
        return self.get_resource("move", name_or_id)

    def get(self, endpoint: str) -> Any:
        """GET ``endpoint`` (relative or absolute URL) and decode the JSON body."""

        url = self._build_url(endpoint)
        cached = self._from_cache(url)
        if cached is not None:
            return cached

        try:
            response = self.session.get(
                url,
                timeout=self.timeout,
                headers={"User-Agent": self.user_agent, "Accept": "application/json"},
            )
        except requests.Timeout as exc:
            raise NetworkError(f"Request timeout after {self.timeout}s") from exc
        except requests.RequestException as exc:
            raise NetworkError(str(exc)) from exc

        if response.status_code == 404:
            raise NotFoundError(endpoint)
        if response.status_code == 429:
            raise RateLimitError()
        if not 200 <= response.status_code < 300:
            raise NetworkError(f"HTTP {response.status_code}: {response.reason}")

        try:
            payload = response.json()
        except ValueError as exc:
            raise ParseError(str(exc)) from exc

        self._store(url, payload)
        return payload

    def clear_cache(self) -> None:
        self._cache.clear()

    def cache_stats(self) -> Dict[str, Any]:
        return {
            "size": len(self._cache),
            "max_size": self.cache_size,
            "enabled": self.cache_enabled,
        }

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _from_cache(self, url: str) -> Any:
        if not self.cache_enabled:
            return None
        entry = self._cache.get(url)
        if entry is None:
            return None
        stored_at, payload = entry
        if time.time() - stored_at > self.cache_ttl:
            del self._cache[url]
            return None
        return payload

    def _store(self, url: str, payload: Any) -> None:
        if not self.cache_enabled or self.cache_size <= 0:
            return
        if url not in self._cache and len(self._cache) >= self.cache_size:
            oldest = next(iter(self._cache))
            del self._cache[oldest]
            logger.debug("Evicted %s from PokeAPI cache", oldest)
        self._cache[url] = (time.time(), payload)

    def _build_url(self, endpoint: str) -> str:
        if endpoint.startswith("http"):
            return endpoint
        endpoint = endpoint.lstrip("/")
        return f"{self.base_url}/{endpoint}"

    @staticmethod
    def _slugify_name(name: str) -> str:
        slug = name.strip().lower()
        slug = re.sub(r"[\s\.]+", "-", slug)
        slug = slug.replace("'", "")
        slug = slug.replace(":", "")
        slug = slug.replace("%", "")
        slug = re.sub(r"[^a-z0-9\-]", "", slug)
        return slug
