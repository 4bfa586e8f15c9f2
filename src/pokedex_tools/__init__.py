"""pokedex-tools — typed, cached client for the PokeAPI REST service."""

from .async_client import AsyncPokedex
from .client import Pokedex
from .config import ClientConfig
from .endpoints import Endpoint
from .errors import (
    MalformedResponseError,
    NetworkError,
    PokedexError,
    UnknownEndpointError,
)

__all__ = [
    "AsyncPokedex",
    "ClientConfig",
    "Endpoint",
    "MalformedResponseError",
    "NetworkError",
    "Pokedex",
    "PokedexError",
    "UnknownEndpointError",
]
__version__ = "0.1.0"
