"""Fake PokeAPI served through httpx.MockTransport, plus canned bodies."""

from __future__ import annotations

import asyncio
import threading
import time
from typing import TypeVar

import httpx

T = TypeVar("T", bound="FakePokeApi")

BASE = "https://pokeapi.co/api/v2/"


def named(endpoint: str, name: str, id_: int) -> dict:
    return {"name": name, "url": f"{BASE}{endpoint}/{id_}/"}


CHERI = {
    "id": 1,
    "name": "cheri",
    "growth_time": 3,
    "max_harvest": 5,
    "natural_gift_power": 60,
    "size": 20,
    "smoothness": 25,
    "soil_dryness": 15,
    "firmness": named("berry-firmness", "soft", 2),
    "flavors": [{"potency": 10, "flavor": named("berry-flavor", "spicy", 1)}],
    "item": named("item", "cheri-berry", 126),
    "natural_gift_type": named("type", "fire", 10),
}

POKEMON = {
    name: {"id": i, "name": name, "species": named("pokemon-species", name, i)}
    for i, name in enumerate(["bulbasaur", "ivysaur", "venusaur"], start=1)
}

MOVES_PAGE = {
    "count": 937,
    "next": f"{BASE}move?offset=15&limit=5",
    "previous": f"{BASE}move?offset=5&limit=5",
    "results": [
        named("move", n, i)
        for i, n in enumerate(
            ["vice-grip", "guillotine", "razor-wind", "swords-dance", "cut"], start=11
        )
    ],
}

ENDPOINTS = {
    "ability": f"{BASE}ability/",
    "berry": f"{BASE}berry/",
    "pokemon": f"{BASE}pokemon/",
}


class FakePokeApi:
    """Callable httpx handler that serves canned bodies and records every GET."""

    def __init__(self) -> None:
        self.routes: dict[str, httpx.Response | dict | Exception] = {}
        self.delays: dict[str, float] = {}
        self.calls: list[str] = []

    def add(self, url: str, body: httpx.Response | dict | Exception) -> None:
        self.routes[url] = body

    def respond(self, request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        self.calls.append(url)
        route = self.routes.get(url)
        if route is None:
            return httpx.Response(404, text="Not Found")
        if isinstance(route, Exception):
            raise route
        if isinstance(route, httpx.Response):
            return route
        return httpx.Response(200, json=route)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        delay = self.delays.get(str(request.url))
        if delay:
            time.sleep(delay)
        return self.respond(request)

    def count(self, url: str) -> int:
        return self.calls.count(url)


class AsyncFakePokeApi(FakePokeApi):
    """Async handler; delays are awaited so responses can finish out of order."""

    def __init__(self) -> None:
        super().__init__()
        self.cancelled: list[str] = []

    async def __call__(  # type: ignore[override]
        self, request: httpx.Request
    ) -> httpx.Response:
        url = str(request.url)
        delay = self.delays.get(url)
        if delay:
            try:
                await asyncio.sleep(delay)
            except asyncio.CancelledError:
                self.cancelled.append(url)
                raise
        return self.respond(request)


def populate(api: T) -> T:
    api.add(f"{BASE}berry/cheri", CHERI)
    api.add(f"{BASE}berry/1", CHERI)
    for name, body in POKEMON.items():
        api.add(f"{BASE}pokemon/{name}", body)
    api.add(f"{BASE}move?limit=5&offset=10", MOVES_PAGE)
    api.add(BASE, ENDPOINTS)
    return api


class RecordingBackend:
    """In-memory store satisfying CacheBackend.

    Remembers each entry's TTL and the threads that read or wrote it.
    """

    def __init__(self) -> None:
        self.data: dict = {}
        self.expires: dict = {}
        self.threads: set[int] = set()

    def get(self, key, default=None):
        self.threads.add(threading.get_ident())
        return self.data.get(key, default)

    def set(self, key, value, expire=None):
        self.threads.add(threading.get_ident())
        self.data[key] = value
        self.expires[key] = expire
        return True

    def clear(self):
        count = len(self.data)
        self.data.clear()
        return count

    def __len__(self) -> int:
        return len(self.data)
