"""Turns (endpoint, key) pairs into PokeAPI request URLs.

Pure string construction: nothing here touches the network or the cache.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from urllib.parse import urlencode

from .config import ClientConfig
from .endpoints import Endpoint

#: A single lookup key: a resource name or a numeric id.
Key = str | int

#: What accessors accept: one key, or a list/tuple of keys for a batch.
KeyOrKeys = Key | Sequence[Key]


class RequestMode(str, Enum):
    SINGLE = "single"
    BATCH = "batch"
    LIST = "list"


@dataclass(frozen=True)
class ResolvedRequest:
    """The URL(s) to fetch and how their bodies are returned."""

    mode: RequestMode
    urls: tuple[str, ...]

    @property
    def url(self) -> str:
        """The lone URL of a single or list request."""
        if self.mode is RequestMode.BATCH:
            raise ValueError("batch requests carry several URLs")
        return self.urls[0]


def is_batch(key: object) -> bool:
    """Lists and tuples are batches; strings never are."""
    return isinstance(key, (list, tuple))


class Resolver:
    """Builds resource URLs from a :class:`ClientConfig`.

    Example::

        resolver = Resolver(ClientConfig())
        resolver.resolve("berry", "cheri").url
        # 'https://pokeapi.co/api/v2/berry/cheri'
    """

    def __init__(self, config: ClientConfig) -> None:
        self.config = config

    @property
    def base_url(self) -> str:
        return self.config.base_url

    def item_url(self, endpoint: Endpoint, key: Key) -> str:
        return f"{self.base_url}{endpoint.segment}/{key}"

    def list_url(
        self,
        endpoint: Endpoint,
        *,
        limit: int | None = None,
        offset: int | None = None,
    ) -> str:
        query = urlencode(
            {
                "limit": self.config.limit if limit is None else limit,
                "offset": self.config.offset if offset is None else offset,
            }
        )
        return f"{self.base_url}{endpoint.segment}?{query}"

    def resolve(
        self,
        endpoint: Endpoint | str,
        key: KeyOrKeys | None = None,
        *,
        limit: int | None = None,
        offset: int | None = None,
    ) -> ResolvedRequest:
        """Resolve an endpoint and key into a request.

        Args:
            endpoint: An :class:`Endpoint` or its name.
            key: ``None`` for a list request, a name/id for a single
                lookup, or a list/tuple of names/ids for a batch.
            limit: List-mode page size; defaults to the configured limit.
            offset: List-mode offset; defaults to the configured offset.

        Raises:
            UnknownEndpointError: If *endpoint* is not a known endpoint.
        """
        endpoint = Endpoint.parse(endpoint)
        if key is None:
            return ResolvedRequest(
                RequestMode.LIST,
                (self.list_url(endpoint, limit=limit, offset=offset),),
            )
        if is_batch(key):
            return ResolvedRequest(
                RequestMode.BATCH,
                tuple(self.item_url(endpoint, k) for k in key),  # type: ignore[union-attr]
            )
        url = self.item_url(endpoint, key)  # type: ignore[arg-type]
        return ResolvedRequest(RequestMode.SINGLE, (url,))

    def resource_url(self, path: str) -> str:
        """Absolute URLs pass through; relative paths hang off the host root."""
        if path.startswith(("http://", "https://")):
            return path
        return f"{self.config.origin}/{path.lstrip('/')}"

    def resource(self, path: str | Sequence[str]) -> ResolvedRequest:
        """Resolve raw API paths, bypassing the endpoint table."""
        if is_batch(path):
            return ResolvedRequest(
                RequestMode.BATCH, tuple(self.resource_url(p) for p in path)
            )
        url = self.resource_url(path)  # type: ignore[arg-type]
        return ResolvedRequest(RequestMode.SINGLE, (url,))

    def endpoints(self) -> ResolvedRequest:
        """The API root, which lists every endpoint."""
        return ResolvedRequest(RequestMode.SINGLE, (self.base_url,))
