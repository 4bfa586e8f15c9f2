"""Executes resolved requests over HTTP, consulting the response cache.

Both dispatchers follow the same rules for every URL: serve a live cache
entry when caching is on, otherwise GET the URL, cache the decoded body on
success, and raise without caching on failure.

Batch requests fan out concurrently and come back in input order. The first
member to fail (in completion order) fails the whole call; members that have
not finished are cancelled rather than awaited.
"""

from __future__ import annotations

import asyncio
import logging
import threading
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Any, TypeVar

import httpx

from .cache import MISS, ResponseCache
from .config import ClientConfig
from .errors import MalformedResponseError, NetworkError, PokedexError
from .resolver import RequestMode, ResolvedRequest

logger = logging.getLogger("pokedex_tools")

T = TypeVar("T")


def _decode(url: str, resp: httpx.Response) -> Any:
    try:
        return resp.json()
    except ValueError as e:
        logger.warning("Malformed JSON from %s: %s", url, e)
        raise MalformedResponseError(
            url, f"Response from {url} is not valid JSON: {e}"
        ) from e


def _network_error(url: str, exc: httpx.HTTPError) -> NetworkError:
    if isinstance(exc, httpx.HTTPStatusError):
        status = exc.response.status_code
        logger.warning("GET %s failed with HTTP %d", url, status)
        return NetworkError(
            url, f"GET {url} returned HTTP {status}", status_code=status
        )
    logger.warning("GET %s failed: %s", url, exc)
    return NetworkError(url, f"GET {url} failed: {exc!r}")


class _DispatcherBase:
    def __init__(
        self,
        config: ClientConfig,
        cache: ResponseCache | None = None,
        *,
        transport: httpx.BaseTransport | httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.config = config
        self.cache = cache if config.cache else None
        self._transport = transport

    def _cached(self, url: str) -> Any:
        if self.cache is None:
            return MISS
        body = self.cache.get(url)
        if body is not MISS:
            logger.debug("Cache hit for %s", url)
        return body

    def _store(self, url: str, body: Any) -> None:
        if self.cache is not None:
            self.cache.set(url, body)


class Dispatcher(_DispatcherBase):
    """Blocking dispatcher built on :class:`httpx.Client`.

    Batch members run on a thread pool owned by the dispatcher. The HTTP
    client and the pool are created once, on first use, and never again
    after :meth:`close`.
    """

    def __init__(
        self,
        config: ClientConfig,
        cache: ResponseCache | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
        max_workers: int = 8,
    ) -> None:
        super().__init__(config, cache, transport=transport)
        self.max_workers = max_workers
        self._client: httpx.Client | None = None
        self._executor: ThreadPoolExecutor | None = None
        self._lock = threading.Lock()
        self._closed = False

    def _check_open(self) -> None:
        if self._closed:
            raise PokedexError("Dispatcher is closed")

    @property
    def client(self) -> httpx.Client:
        """Lazy HTTP client, created on first use."""
        client = self._client
        if client is None:
            with self._lock:
                self._check_open()
                if self._client is None:
                    self._client = httpx.Client(
                        timeout=self.config.timeout,
                        follow_redirects=True,
                        transport=self._transport,  # type: ignore[arg-type]
                    )
                client = self._client
        return client

    @property
    def executor(self) -> ThreadPoolExecutor:
        executor = self._executor
        if executor is None:
            with self._lock:
                self._check_open()
                if self._executor is None:
                    self._executor = ThreadPoolExecutor(
                        max_workers=self.max_workers, thread_name_prefix="pokedex"
                    )
                executor = self._executor
        return executor

    def fetch(self, url: str) -> Any:
        """GET one URL through the cache.

        Raises:
            NetworkError: On a non-2xx status, timeout, or connection error.
            MalformedResponseError: If a 2xx body is not valid JSON.
        """
        body = self._cached(url)
        if body is not MISS:
            return body
        logger.info("Fetching %s", url)
        try:
            resp = self.client.get(url)
            resp.raise_for_status()
        except httpx.HTTPError as e:
            raise _network_error(url, e) from e
        body = _decode(url, resp)
        self._store(url, body)
        return body

    def fetch_many(self, urls: tuple[str, ...] | list[str]) -> list[Any]:
        """GET several URLs concurrently, returning bodies in input order."""
        futures = [self.executor.submit(self.fetch, url) for url in urls]
        for future in as_completed(futures):
            exc = future.exception()
            if exc is not None:
                for other in futures:
                    other.cancel()
                raise exc
        return [future.result() for future in futures]

    def dispatch(self, request: ResolvedRequest) -> Any:
        if request.mode is RequestMode.BATCH:
            return self.fetch_many(request.urls)
        return self.fetch(request.url)

    def close(self) -> None:
        """Close the HTTP client and shut down the thread pool."""
        with self._lock:
            self._closed = True
            if self._executor is not None:
                self._executor.shutdown(wait=False, cancel_futures=True)
                self._executor = None
            if self._client is not None:
                self._client.close()
                self._client = None


class AsyncDispatcher(_DispatcherBase):
    """Non-blocking dispatcher built on :class:`httpx.AsyncClient`.

    Batch members run as concurrent asyncio tasks on the running loop.
    Cache reads and writes go through a single worker thread, so SQLite
    I/O never runs on the loop and the store has one connection to close.
    """

    def __init__(
        self,
        config: ClientConfig,
        cache: ResponseCache | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(config, cache, transport=transport)
        self._client: httpx.AsyncClient | None = None
        self._executor: ThreadPoolExecutor | None = None

    @property
    def client(self) -> httpx.AsyncClient:
        """Lazy HTTP client, created on first use."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self.config.timeout,
                follow_redirects=True,
                transport=self._transport,  # type: ignore[arg-type]
            )
        return self._client

    @property
    def executor(self) -> ThreadPoolExecutor:
        if self._executor is None:
            self._executor = ThreadPoolExecutor(
                max_workers=1, thread_name_prefix="pokedex-cache"
            )
        return self._executor

    async def run(self, fn: Callable[..., T], *args: Any) -> T:
        """Run a blocking call (cache I/O) on the cache worker thread."""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(self.executor, lambda: fn(*args))

    async def fetch(self, url: str) -> Any:
        """GET one URL through the cache.

        Raises:
            NetworkError: On a non-2xx status, timeout, or connection error.
            MalformedResponseError: If a 2xx body is not valid JSON.
        """
        body = await self.run(self._cached, url) if self.cache is not None else MISS
        if body is not MISS:
            return body
        logger.info("Fetching %s", url)
        try:
            resp = await self.client.get(url)
            resp.raise_for_status()
        except httpx.HTTPError as e:
            raise _network_error(url, e) from e
        body = _decode(url, resp)
        if self.cache is not None:
            await self.run(self._store, url, body)
        return body

    async def fetch_many(self, urls: tuple[str, ...] | list[str]) -> list[Any]:
        """GET several URLs concurrently, returning bodies in input order."""
        tasks = [asyncio.ensure_future(self.fetch(url)) for url in urls]
        try:
            return list(await asyncio.gather(*tasks))
        except BaseException:
            for task in tasks:
                task.cancel()
            raise

    async def dispatch(self, request: ResolvedRequest) -> Any:
        if request.mode is RequestMode.BATCH:
            return await self.fetch_many(request.urls)
        return await self.fetch(request.url)

    async def close(self) -> None:
        """Close the HTTP client and shut down the cache thread pool."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
        if self._executor is not None:
            self._executor.shutdown(wait=False, cancel_futures=True)
            self._executor = None
