"""Pokedex main entry point."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import httpx

from ._accessors import ResourceAccessors
from .cache import CacheBackend, ResponseCache
from .config import ClientConfig
from .dispatcher import Dispatcher
from .endpoints import Endpoint
from .models.common import NamedAPIResourceList
from .resolver import KeyOrKeys, Resolver


class Pokedex(ResourceAccessors):
    """Blocking client for the PokeAPI REST service.

    Every resource kind has a ``get_<resource>_by_name`` (or ``_by_id``)
    accessor taking a name/id or a list of them, and a
    ``get_<resources>_list`` accessor returning the paginated envelope.
    Responses are returned exactly as decoded from JSON and, unless
    disabled, cached on disk keyed by URL. A cache hit returns an equal copy
    of the stored body (it is read back from disk), not the same object.

    Usage::

        dex = Pokedex()

        # Single lookups
        berry = dex.get_berry_by_name("cheri")
        chain = dex.get_evolution_chain_by_id(1)

        # Batches run concurrently and keep input order
        starters = dex.get_pokemon_by_name(["bulbasaur", "charmander", "squirtle"])

        # Lists
        page = dex.get_moves_list(limit=5, offset=10)

        # Raw paths
        data = dex.resource("/api/v2/pokemon/36")

        dex.close()
    """

    def __init__(
        self,
        config: ClientConfig | Mapping[str, Any] | None = None,
        *,
        cache_dir: Path | str | None = None,
        cache_backend: CacheBackend | None = None,
        transport: httpx.BaseTransport | None = None,
        max_workers: int = 8,
    ) -> None:
        """Initialize the client.

        Args:
            config: A :class:`ClientConfig` or a mapping of its fields
                (snake_case or camelCase). Defaults to the public PokeAPI.
            cache_dir: Directory for the response cache. Defaults to the
                platform cache dir.
            cache_backend: Store responses here instead of a disk cache in
                *cache_dir*. Must offer ``get``, ``set(..., expire=)``,
                ``clear`` and ``__len__``.
            transport: Optional httpx transport (e.g. ``httpx.MockTransport``).
            max_workers: Thread pool size for batch lookups.
        """
        self.config = ClientConfig.coerce(config)
        self._resolver = Resolver(self.config)
        self._cache = ResponseCache(
            cache_dir, ttl=self.config.cache_ttl, backend=cache_backend
        )
        self._dispatcher = Dispatcher(
            self.config,
            self._cache,
            transport=transport,
            max_workers=max_workers,
        )

    def get(self, endpoint: Endpoint | str, key: KeyOrKeys) -> Any:
        """Fetch one or several resources of any endpoint.

        Args:
            endpoint: An :class:`Endpoint` or its name (e.g. ``"berry"``).
            key: A name/id, or a list/tuple of them.

        Returns:
            The decoded resource, or a list of them in input order.

        Raises:
            UnknownEndpointError: If *endpoint* is not a PokeAPI endpoint.
            NetworkError: If any request fails.
            MalformedResponseError: If any response is not valid JSON.

        Example::

            dex.get("pokemon-species", "pikachu")
        """
        if key is None:
            raise TypeError("get() needs a key; use list() for collections")
        return self._dispatcher.dispatch(self._resolver.resolve(endpoint, key))

    def list(
        self,
        endpoint: Endpoint | str,
        *,
        limit: int | None = None,
        offset: int | None = None,
    ) -> NamedAPIResourceList:
        """List any endpoint's resources as ``{count, next, previous, results}``.

        Args:
            endpoint: An :class:`Endpoint` or its name.
            limit: Page size; defaults to ``config.limit``.
            offset: Page offset; defaults to ``config.offset``.
        """
        request = self._resolver.resolve(endpoint, limit=limit, offset=offset)
        return self._dispatcher.dispatch(request)

    def resource(self, path: str | Sequence[str]) -> Any:
        """Fetch raw API paths or URLs, bypassing the endpoint table.

        Args:
            path: A path such as ``"/api/v2/pokemon/36"`` or a full URL, or
                a list of them.

        Returns:
            The decoded JSON body, or a list of them in input order.

        Example::

            dex.resource(["/api/v2/pokemon/36", "api/v2/berry/8"])
        """
        return self._dispatcher.dispatch(self._resolver.resource(path))

    def get_endpoints_list(self) -> dict[str, str]:
        """Map every endpoint name to its collection URL."""
        return self._dispatcher.dispatch(self._resolver.endpoints())

    def cache_size(self) -> int:
        """Number of cached responses (0 when caching is disabled)."""
        if not self.config.cache:
            return 0
        return len(self._cache)

    def clear_cache(self) -> None:
        """Drop every cached response."""
        if self.config.cache:
            self._cache.clear()

    def close(self) -> None:
        """Close the HTTP client, thread pool and cache, freeing resources.

        Called automatically when using the client as a context manager.
        """
        self._dispatcher.close()
        self._cache.close()

    def __enter__(self) -> Pokedex:
        """Enter context manager.

        Example::

            with Pokedex() as dex:
                berry = dex.get_berry_by_name("cheri")
        """
        return self

    def __exit__(self, *args: Any) -> None:
        """Exit context manager and close all resources."""
        self.close()

    def __repr__(self) -> str:
        return f"Pokedex(base_url={self.config.base_url!r}, cache={self.config.cache!r})"
