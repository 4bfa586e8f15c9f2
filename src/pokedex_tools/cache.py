"""Local response cache keyed by request URL."""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Any, Protocol

from diskcache import Cache

from .config import DEFAULT_CACHE_TTL, default_cache_dir
from .errors import PokedexError

logger = logging.getLogger("pokedex_tools")

#: Returned by :meth:`ResponseCache.get` so a cached ``None`` is not a miss.
MISS = object()


class CacheBackend(Protocol):
    """What the dispatchers need from a cache store."""

    def get(self, key: str, default: Any = None) -> Any: ...

    def set(self, key: str, value: Any, expire: float | None = None) -> Any: ...

    def clear(self) -> Any: ...

    def __len__(self) -> int: ...


class ResponseCache:
    """Stores decoded PokeAPI responses on disk with a time-to-live.

    Backed by :class:`diskcache.Cache` (SQLite), which is safe to share
    between threads and processes. Entries expire after *ttl* seconds.

    A cache hit returns an equal copy of the stored body, not the object
    that was stored.
    """

    def __init__(
        self,
        cache_dir: Path | str | None = None,
        *,
        ttl: float = DEFAULT_CACHE_TTL,
        backend: CacheBackend | None = None,
    ) -> None:
        """Create a response cache.

        Args:
            cache_dir: Directory for the cache database. Defaults to a
                platform-appropriate cache directory.
            ttl: Lifetime of each stored response, in seconds.
            backend: Use this store instead of opening a
                :class:`diskcache.Cache` in *cache_dir*.
        """
        self.cache_dir = Path(cache_dir) if cache_dir else default_cache_dir()
        self.ttl = ttl
        self._backend = backend
        self._owns_backend = backend is None
        self._lock = threading.Lock()
        self._closed = False

    @property
    def backend(self) -> CacheBackend:
        """Lazy cache store, opened once on first use.

        Raises:
            PokedexError: If the store was opened here and has since been
                closed.
        """
        backend = self._backend
        if backend is None:
            with self._lock:
                if self._closed:
                    raise PokedexError(f"Response cache in {self.cache_dir} is closed")
                if self._backend is None:
                    self.cache_dir.mkdir(parents=True, exist_ok=True)
                    self._backend = Cache(str(self.cache_dir))
                backend = self._backend
        return backend

    def get(self, url: str) -> Any:
        """Return the cached body for *url*, or :data:`MISS`."""
        return self.backend.get(url, MISS)

    def set(self, url: str, body: Any) -> None:
        self.backend.set(url, body, expire=self.ttl)

    def __contains__(self, url: object) -> bool:
        return self.get(url) is not MISS  # type: ignore[arg-type]

    def __len__(self) -> int:
        return len(self.backend)

    def clear(self) -> None:
        """Remove every cached response."""
        self.backend.clear()
        logger.debug("Cleared response cache in %s", self.cache_dir)

    def close(self) -> None:
        """Close the cache store, if this cache opened it.

        A closed cache does not reopen its store.
        """
        if not self._owns_backend:
            return
        with self._lock:
            self._closed = True
            if self._backend is not None:
                self._backend.close()  # type: ignore[attr-defined]
                self._backend = None
