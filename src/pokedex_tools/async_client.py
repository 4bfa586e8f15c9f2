"""Async variant of :class:`~pokedex_tools.client.Pokedex`.

Requests go through :class:`httpx.AsyncClient`, so batch lookups run as
concurrent tasks on the caller's event loop. Cache reads and writes run on a
worker thread, so the client is safe to use from async frameworks
(FastAPI, aiohttp bots, etc.) without blocking the loop.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import httpx

from ._accessors import ResourceAccessors
from .cache import CacheBackend, ResponseCache
from .config import ClientConfig
from .dispatcher import AsyncDispatcher
from .endpoints import Endpoint
from .models.common import NamedAPIResourceList
from .resolver import KeyOrKeys, Resolver


class AsyncPokedex(ResourceAccessors):
    """Async client for the PokeAPI REST service.

    Offers the same accessors as :class:`Pokedex`; each returns an
    awaitable, as do :meth:`cache_size` and :meth:`clear_cache`.

    Usage::

        async with AsyncPokedex() as dex:
            berry = await dex.get_berry_by_name("cheri")
            trio = await dex.get_pokemon_by_name(["bulbasaur", "ivysaur", "venusaur"])
            page = await dex.get_moves_list(limit=5, offset=10)
    """

    def __init__(
        self,
        config: ClientConfig | Mapping[str, Any] | None = None,
        *,
        cache_dir: Path | str | None = None,
        cache_backend: CacheBackend | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the async client.

        Args:
            config: A :class:`ClientConfig` or a mapping of its fields.
            cache_dir: Directory for the response cache.
            cache_backend: Store responses here instead of a disk cache.
            transport: Optional async httpx transport.
        """
        self.config = ClientConfig.coerce(config)
        self._resolver = Resolver(self.config)
        self._cache = ResponseCache(
            cache_dir, ttl=self.config.cache_ttl, backend=cache_backend
        )
        self._dispatcher = AsyncDispatcher(self.config, self._cache, transport=transport)

    async def get(self, endpoint: Endpoint | str, key: KeyOrKeys) -> Any:
        """Fetch one or several resources of any endpoint.

        See :meth:`Pokedex.get`.
        """
        if key is None:
            raise TypeError("get() needs a key; use list() for collections")
        return await self._dispatcher.dispatch(self._resolver.resolve(endpoint, key))

    async def list(
        self,
        endpoint: Endpoint | str,
        *,
        limit: int | None = None,
        offset: int | None = None,
    ) -> NamedAPIResourceList:
        """List any endpoint's resources as ``{count, next, previous, results}``."""
        request = self._resolver.resolve(endpoint, limit=limit, offset=offset)
        return await self._dispatcher.dispatch(request)

    async def resource(self, path: str | Sequence[str]) -> Any:
        """Fetch raw API paths or URLs, bypassing the endpoint table."""
        return await self._dispatcher.dispatch(self._resolver.resource(path))

    async def get_endpoints_list(self) -> dict[str, str]:
        """Map every endpoint name to its collection URL."""
        return await self._dispatcher.dispatch(self._resolver.endpoints())

    async def cache_size(self) -> int:
        """Number of cached responses (0 when caching is disabled)."""
        if not self.config.cache:
            return 0
        return await self._dispatcher.run(len, self._cache)

    async def clear_cache(self) -> None:
        """Drop every cached response."""
        if self.config.cache:
            await self._dispatcher.run(self._cache.clear)

    async def close(self) -> None:
        """Close the HTTP client, the cache thread pool and the cache."""
        await self._dispatcher.run(self._cache.close)
        await self._dispatcher.close()

    async def __aenter__(self) -> AsyncPokedex:
        return self

    async def __aexit__(self, *args: Any) -> None:
        """Exit async context manager and close all resources."""
        await self.close()

    def __repr__(self) -> str:
        return (
            f"AsyncPokedex(base_url={self.config.base_url!r}, "
            f"cache={self.config.cache!r})"
        )
