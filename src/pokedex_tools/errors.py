"""Exceptions raised by the PokeAPI client."""

from __future__ import annotations


class PokedexError(Exception):
    """Base class for every error raised by pokedex-tools."""


class UnknownEndpointError(PokedexError, KeyError):
    """An endpoint name that is not part of the PokeAPI endpoint table."""

    def __init__(self, name: object) -> None:
        self.name = name
        super().__init__(f"Unknown PokeAPI endpoint: {name!r}")

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0])


class NetworkError(PokedexError):
    """The transport failed: non-2xx status, timeout, or connection error.

    The underlying ``httpx`` exception is chained as ``__cause__``.
    """

    def __init__(self, url: str, message: str, status_code: int | None = None) -> None:
        self.url = url
        self.status_code = status_code
        super().__init__(message)


class MalformedResponseError(PokedexError, ValueError):
    """A 2xx response whose body could not be decoded as JSON."""

    def __init__(self, url: str, message: str) -> None:
        self.url = url
        super().__init__(message)
