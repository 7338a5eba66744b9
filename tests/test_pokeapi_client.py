"""Tests for the PokeAPI client error mapping and cache."""

from __future__ import annotations

import pytest
import requests

from poke_usage.clients import pokeapi
from poke_usage.clients.pokeapi import (
    NetworkError,
    NotFoundError,
    ParseError,
    PokeAPIClient,
    RateLimitError,
)


class FakeResponse:
    def __init__(self, status_code: int = 200, payload=None, reason: str = "OK") -> None:
        self.status_code = status_code
        self.reason = reason
        self._payload = payload

    def json(self):
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


class FakeSession:
    def __init__(self, responses) -> None:
        self._responses = list(responses)
        self.urls = []

    def get(self, url, timeout=None, headers=None):
        self.urls.append(url)
        response = self._responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


def make_client(*responses, **kwargs) -> tuple[PokeAPIClient, FakeSession]:
    session = FakeSession(responses)
    return PokeAPIClient(session=session, **kwargs), session


def test_get_pokemon_types_and_slugged_url() -> None:
    payload = {"types": [{"type": {"name": "normal"}}, {"type": {"name": "flying"}}]}
    client, session = make_client(FakeResponse(payload=payload))

    assert client.get_pokemon_types("Mr. Mime") == ["normal", "flying"]
    assert session.urls == ["https://pokeapi.co/api/v2/pokemon/mr-mime"]


def test_list_resource_builds_pagination_query() -> None:
    client, session = make_client(FakeResponse(payload={"results": []}))

    client.list_resource("move", limit=20, offset=40)

    assert session.urls == ["https://pokeapi.co/api/v2/move?limit=20&offset=40"]


def test_absolute_urls_pass_through() -> None:
    client, session = make_client(FakeResponse(payload={}))

    client.get("https://pokeapi.co/api/v2/type/3/")

    assert session.urls == ["https://pokeapi.co/api/v2/type/3/"]


@pytest.mark.parametrize(
    ("response", "error", "message"),
    [
        (FakeResponse(404, reason="Not Found"), NotFoundError, "Resource not found: pokemon/mew"),
        (FakeResponse(429, reason="Too Many Requests"), RateLimitError, "Rate limit exceeded"),
        (FakeResponse(503, reason="Service Unavailable"), NetworkError, "HTTP 503"),
        (FakeResponse(payload=ValueError("bad json")), ParseError, "Failed to parse response"),
        (requests.Timeout("slow"), NetworkError, "Request timeout after 10s"),
        (requests.ConnectionError("refused"), NetworkError, "Network error: refused"),
    ],
)
def test_errors_are_mapped(response, error, message) -> None:
    client, _ = make_client(response)

    with pytest.raises(error) as excinfo:
        client.get_pokemon("mew")

    assert message in str(excinfo.value)


def test_responses_are_cached() -> None:
    client, session = make_client(FakeResponse(payload={"name": "surf"}))

    assert client.get_move("Surf") == {"name": "surf"}
    assert client.get_move("surf") == {"name": "surf"}
    assert len(session.urls) == 1
    assert client.cache_stats()["size"] == 1


def test_expired_entries_are_refetched(monkeypatch) -> None:
    clock = [1000.0]
    monkeypatch.setattr(pokeapi.time, "time", lambda: clock[0])
    client, session = make_client(
        FakeResponse(payload={"id": 1}), FakeResponse(payload={"id": 2}), cache_ttl=60
    )

    assert client.get_type("fire") == {"id": 1}
    clock[0] += 61
    assert client.get_type("fire") == {"id": 2}
    assert len(session.urls) == 2


def test_cache_evicts_oldest_at_capacity() -> None:
    client, session = make_client(
        FakeResponse(payload={"id": 1}),
        FakeResponse(payload={"id": 2}),
        FakeResponse(payload={"id": 3}),
        cache_size=2,
    )

    client.get_type(1)
    client.get_type(2)
    client.get_type(1)
    client.get_type(3)
    assert client.cache_stats()["size"] == 2

    client.clear_cache()
    assert client.cache_stats()["size"] == 0
    assert len(session.urls) == 3


def test_disabled_cache_always_fetches() -> None:
    client, session = make_client(
        FakeResponse(payload={}), FakeResponse(payload={}), cache_enabled=False
    )

    client.get_move("surf")
    client.get_move("surf")

    assert len(session.urls) == 2
