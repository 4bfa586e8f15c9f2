"""Smoke test: hit the live PokeAPI and exercise every client accessor.

Coverage goal: every lookup and list accessor on both clients, batch
ordering, caching, the raw resource escape hatch, and error paths.
"""

import asyncio
import logging
import sys
import tempfile
import time

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
logger = logging.getLogger("smoke_test")

from pokedex_tools import (  # noqa: E402
    AsyncPokedex,
    Endpoint,
    NetworkError,
    Pokedex,
    UnknownEndpointError,
)

PASS = 0
FAIL = 0
SKIP = 0

#: A key known to exist for every endpoint (ids for id-only resources).
SAMPLE_KEYS: dict[Endpoint, str | int] = {
    Endpoint.BERRY: "cheri",
    Endpoint.BERRY_FIRMNESS: "soft",
    Endpoint.BERRY_FLAVOR: "spicy",
    Endpoint.CONTEST_TYPE: "cool",
    Endpoint.CONTEST_EFFECT: 1,
    Endpoint.SUPER_CONTEST_EFFECT: 1,
    Endpoint.ENCOUNTER_METHOD: "walk",
    Endpoint.ENCOUNTER_CONDITION: "swarm",
    Endpoint.ENCOUNTER_CONDITION_VALUE: "swarm-yes",
    Endpoint.EVOLUTION_CHAIN: 1,
    Endpoint.EVOLUTION_TRIGGER: "level-up",
    Endpoint.GENERATION: "generation-i",
    Endpoint.POKEDEX: "kanto",
    Endpoint.VERSION: "red",
    Endpoint.VERSION_GROUP: "red-blue",
    Endpoint.ITEM: "master-ball",
    Endpoint.ITEM_ATTRIBUTE: "countable",
    Endpoint.ITEM_CATEGORY: "stat-boosts",
    Endpoint.ITEM_FLING_EFFECT: "badly-poison",
    Endpoint.ITEM_POCKET: "misc",
    Endpoint.MACHINE: 1,
    Endpoint.MOVE: "pound",
    Endpoint.MOVE_AILMENT: "paralysis",
    Endpoint.MOVE_BATTLE_STYLE: "attack",
    Endpoint.MOVE_CATEGORY: "ailment",
    Endpoint.MOVE_DAMAGE_CLASS: "status",
    Endpoint.MOVE_LEARN_METHOD: "level-up",
    Endpoint.MOVE_TARGET: "specific-move",
    Endpoint.LOCATION: "canalave-city",
    Endpoint.LOCATION_AREA: "canalave-city-area",
    Endpoint.PAL_PARK_AREA: "forest",
    Endpoint.REGION: "kanto",
    Endpoint.ABILITY: "stench",
    Endpoint.CHARACTERISTIC: 1,
    Endpoint.EGG_GROUP: "monster",
    Endpoint.GENDER: "female",
    Endpoint.GROWTH_RATE: "slow",
    Endpoint.NATURE: "bold",
    Endpoint.POKEATHLON_STAT: "speed",
    Endpoint.POKEMON: "bulbasaur",
    Endpoint.POKEMON_COLOR: "black",
    Endpoint.POKEMON_FORM: "bulbasaur",
    Endpoint.POKEMON_HABITAT: "cave",
    Endpoint.POKEMON_SHAPE: "ball",
    Endpoint.POKEMON_SPECIES: "bulbasaur",
    Endpoint.STAT: "hp",
    Endpoint.TYPE: "fire",
    Endpoint.LANGUAGE: "en",
}


def check(label: str, condition: bool, detail: str = ""):
    global PASS, FAIL
    status = "PASS" if condition else "FAIL"
    if condition:
        PASS += 1
    else:
        FAIL += 1
    suffix = f" -- {detail}" if detail else ""
    print(f"  [{status}] {label}{suffix}")


def skip(label: str, reason: str = ""):
    global SKIP
    SKIP += 1
    suffix = f" -- {reason}" if reason else ""
    print(f"  [SKIP] {label}{suffix}")


def section(name: str):
    print(f"\n{'=' * 60}")
    print(f"  {name}")
    print(f"{'=' * 60}")


def accessor_names() -> dict[Endpoint, tuple[str, str]]:
    names: dict[Endpoint, list[str]] = {}
    for attr in dir(Pokedex):
        fn = getattr(Pokedex, attr)
        endpoint = getattr(fn, "endpoint", None)
        if endpoint is not None:
            names.setdefault(endpoint, []).append(attr)
    out = {}
    for endpoint, attrs in names.items():
        lookup = next(a for a in attrs if not a.endswith("_list"))
        listing = next(a for a in attrs if a.endswith("_list"))
        out[endpoint] = (lookup, listing)
    return out


def main():
    t0 = time.time()
    tmpdir = tempfile.mkdtemp(prefix="pokedex-smoke-")

    # ══════════════════════════════════════════════════════════
    #  CLIENT LIFECYCLE
    # ══════════════════════════════════════════════════════════
    section("Client Lifecycle")

    dex = Pokedex({"limit": 20}, cache_dir=tmpdir)
    check("__repr__", "Pokedex" in repr(dex), repr(dex))

    with Pokedex(cache_dir=tmpdir) as ctx_dex:
        check("__enter__ returns client", isinstance(ctx_dex, Pokedex))

    endpoints = dex.get_endpoints_list()
    check(
        "get_endpoints_list",
        isinstance(endpoints, dict) and "pokemon" in endpoints,
        f"{len(endpoints)} endpoints",
    )
    unknown = sorted(set(endpoints) - {e.value for e in Endpoint})
    if unknown:
        skip("endpoint table complete", f"service has extra endpoints: {unknown}")
    else:
        check("endpoint table complete", True)

    # ══════════════════════════════════════════════════════════
    #  EVERY ACCESSOR
    # ══════════════════════════════════════════════════════════
    section("Accessors")

    for endpoint, (lookup, listing) in sorted(
        accessor_names().items(), key=lambda kv: kv[0].value
    ):
        key = SAMPLE_KEYS[endpoint]
        try:
            body = getattr(dex, lookup)(key)
            ok = isinstance(body, dict) and (
                body.get("name") == key or body.get("id") == key
            )
            check(f"{lookup}({key!r})", ok)
        except NetworkError as e:
            check(f"{lookup}({key!r})", False, str(e))
        try:
            page = getattr(dex, listing)(limit=3)
            check(
                f"{listing}(limit=3)",
                set(page) >= {"count", "next", "previous", "results"}
                and len(page["results"]) <= 3,
                f"count={page.get('count')}",
            )
        except NetworkError as e:
            check(f"{listing}(limit=3)", False, str(e))

    # ══════════════════════════════════════════════════════════
    #  BATCHES, CACHE, RAW RESOURCES
    # ══════════════════════════════════════════════════════════
    section("Batches and Cache")

    trio = ["bulbasaur", "ivysaur", "venusaur"]
    result = dex.get_pokemon_by_name(trio)
    check("batch order", [p["name"] for p in result] == trio)

    size_before = dex.cache_size()
    t = time.time()
    dex.get_pokemon_by_name(trio)
    check(
        "batch served from cache",
        dex.cache_size() == size_before,
        f"{(time.time() - t) * 1000:.1f}ms",
    )

    raw = dex.resource(
        [
            "/api/v2/pokemon/36",
            "api/v2/berry/8",
            "https://pokeapi.co/api/v2/ability/9/",
        ]
    )
    check("resource() mixed paths", [r["id"] for r in raw] == [36, 8, 9])

    page = dex.get_moves_list(limit=5, offset=10)
    check("list interval override", len(page["results"]) == 5)

    # ══════════════════════════════════════════════════════════
    #  ERRORS
    # ══════════════════════════════════════════════════════════
    section("Errors")

    try:
        dex.get_berry_by_name("does-not-exist")
        check("404 raises NetworkError", False, "no error")
    except NetworkError as e:
        check("404 raises NetworkError", e.status_code == 404, str(e))

    try:
        dex.get("pokeball", 1)
        check("unknown endpoint raises", False, "no error")
    except UnknownEndpointError:
        check("unknown endpoint raises", True)

    dex.clear_cache()
    check("clear_cache", dex.cache_size() == 0)
    dex.close()

    # ══════════════════════════════════════════════════════════
    #  ASYNC CLIENT
    # ══════════════════════════════════════════════════════════
    section("Async Client")

    async def run_async():
        async with AsyncPokedex({"cache": False}) as adex:
            batch = await adex.get_pokemon_species_by_name(trio)
            check("async batch order", [s["name"] for s in batch] == trio)
            chain = await adex.get_evolution_chain_by_id(1)
            check("async by id", chain["id"] == 1)
            types = await adex.get_types_list(limit=2, offset=1)
            check("async list", len(types["results"]) == 2)
            check("async cache disabled", await adex.cache_size() == 0)

    asyncio.run(run_async())

    elapsed = time.time() - t0

    section("RESULTS")
    total = PASS + FAIL
    print(f"  Total:   {total} checks ({SKIP} skipped)")
    print(f"  Passed:  {PASS}")
    print(f"  Failed:  {FAIL}")
    print(f"  Time:    {elapsed:.1f}s")
    print()

    if FAIL > 0:
        print("  *** FAILURES DETECTED ***")
        print()

    return FAIL == 0


if __name__ == "__main__":
    success = main()
    sys.exit(0 if success else 1)
