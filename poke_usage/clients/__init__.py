"""External data clients used alongside the usage statistics."""

from .pokeapi import (
    NetworkError,
    NotFoundError,
    ParseError,
    PokeAPIClient,
    PokeAPIClientError,
    RateLimitError,
)

__all__ = [
    "NetworkError",
    "NotFoundError",
    "ParseError",
    "PokeAPIClient",
    "PokeAPIClientError",
    "RateLimitError",
]
