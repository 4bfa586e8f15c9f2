"""Shared fixtures: clients wired to a fake PokeAPI with no network access."""

from __future__ import annotations

import httpx
import pytest

from pokedex_tools import AsyncPokedex, Pokedex

from .fakes import AsyncFakePokeApi, FakePokeApi, populate


@pytest.fixture
def fake_api() -> FakePokeApi:
    return populate(FakePokeApi())


@pytest.fixture
def async_fake_api() -> AsyncFakePokeApi:
    return populate(AsyncFakePokeApi())


@pytest.fixture
def dex(tmp_path, fake_api):
    """A Pokedex with a disk cache in tmp_path."""
    client = Pokedex(
        {"limit": 20, "offset": 0, "cache": True},
        cache_dir=tmp_path / "cache",
        transport=httpx.MockTransport(fake_api),
    )
    yield client
    client.close()


@pytest.fixture
def make_async_dex(tmp_path, async_fake_api):
    """Factory for AsyncPokedex instances; close them with ``await dex.close()``."""

    def factory(**config) -> AsyncPokedex:
        return AsyncPokedex(
            config,
            cache_dir=tmp_path / "async-cache",
            transport=httpx.MockTransport(async_fake_api),
        )

    return factory
