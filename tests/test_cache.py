"""Tests for the response cache."""

import threading
import time

import diskcache
import pytest

from pokedex_tools import PokedexError
from pokedex_tools import cache as cache_module
from pokedex_tools.cache import MISS, ResponseCache

from .fakes import RecordingBackend


def test_cache_dir_created_lazily(tmp_path):
    cache_dir = tmp_path / "test_cache"
    cache = ResponseCache(cache_dir)
    assert not cache_dir.exists()
    assert len(cache) == 0
    assert cache_dir.exists()
    cache.close()


def test_miss_sentinel(tmp_path):
    cache = ResponseCache(tmp_path / "cache")
    assert cache.get("https://pokeapi.co/api/v2/berry/1") is MISS
    assert "https://pokeapi.co/api/v2/berry/1" not in cache
    cache.close()


def test_set_and_get(tmp_path):
    cache = ResponseCache(tmp_path / "cache")
    body = {"id": 1, "name": "cheri", "flavors": [{"potency": 10}]}
    cache.set("https://pokeapi.co/api/v2/berry/1", body)
    assert cache.get("https://pokeapi.co/api/v2/berry/1") == body
    assert len(cache) == 1
    cache.close()


def test_cached_none_is_not_a_miss(tmp_path):
    cache = ResponseCache(tmp_path / "cache")
    cache.set("https://pokeapi.co/api/v2/null", None)
    assert cache.get("https://pokeapi.co/api/v2/null") is None
    assert "https://pokeapi.co/api/v2/null" in cache
    cache.close()


def test_entries_expire(tmp_path):
    cache = ResponseCache(tmp_path / "cache", ttl=0.05)
    cache.set("https://pokeapi.co/api/v2/berry/1", {"id": 1})
    time.sleep(0.2)
    assert cache.get("https://pokeapi.co/api/v2/berry/1") is MISS
    cache.close()


def test_persists_across_instances(tmp_path):
    first = ResponseCache(tmp_path / "cache")
    first.set("https://pokeapi.co/api/v2/type/fire", {"id": 10})
    first.close()
    second = ResponseCache(tmp_path / "cache")
    assert second.get("https://pokeapi.co/api/v2/type/fire") == {"id": 10}
    second.close()


def test_clear(tmp_path):
    cache = ResponseCache(tmp_path / "cache")
    cache.set("a", 1)
    cache.set("b", 2)
    cache.clear()
    assert len(cache) == 0
    assert cache.cache_dir.exists()
    cache.close()


def test_custom_backend_gets_ttl(tmp_path):
    backend = RecordingBackend()
    cache = ResponseCache(tmp_path / "unused", ttl=123, backend=backend)
    cache.set("https://pokeapi.co/api/v2/item/1", {"id": 1})
    assert backend.expires["https://pokeapi.co/api/v2/item/1"] == 123
    assert cache.get("https://pokeapi.co/api/v2/item/1") == {"id": 1}
    cache.close()
    # Caller-owned backends are left open and no directory is created
    assert len(backend) == 1
    assert not (tmp_path / "unused").exists()


def test_closed_cache_does_not_reopen(tmp_path):
    cache = ResponseCache(tmp_path / "cache")
    cache.set("a", 1)
    cache.close()
    with pytest.raises(PokedexError, match="closed"):
        cache.get("a")
    assert cache._backend is None
    # Closing twice is fine
    cache.close()


def test_backend_opened_once_across_threads(tmp_path, monkeypatch):
    opened = []

    class SlowCache(diskcache.Cache):
        def __init__(self, *args, **kwargs):
            opened.append(threading.get_ident())
            time.sleep(0.05)
            super().__init__(*args, **kwargs)

    monkeypatch.setattr(cache_module, "Cache", SlowCache)
    cache = ResponseCache(tmp_path / "cache")
    threads = [threading.Thread(target=cache.get, args=("a",)) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert len(opened) == 1
    cache.close()
