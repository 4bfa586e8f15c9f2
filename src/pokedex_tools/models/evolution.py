"""Evolution chain records."""

from __future__ import annotations

from typing_extensions import TypedDict

from .common import Name, NamedAPIResource


class EvolutionDetail(TypedDict, total=False):
    item: NamedAPIResource | None
    trigger: NamedAPIResource
    gender: int | None
    held_item: NamedAPIResource | None
    known_move: NamedAPIResource | None
    known_move_type: NamedAPIResource | None
    location: NamedAPIResource | None
    min_level: int | None
    min_happiness: int | None
    min_beauty: int | None
    min_affection: int | None
    needs_overworld_rain: bool
    party_species: NamedAPIResource | None
    party_type: NamedAPIResource | None
    relative_physical_stats: int | None
    time_of_day: str
    trade_species: NamedAPIResource | None
    turn_upside_down: bool


class ChainLink(TypedDict):
    is_baby: bool
    species: NamedAPIResource
    evolution_details: list[EvolutionDetail]
    evolves_to: list[ChainLink]


class EvolutionChain(TypedDict):
    id: int
    baby_trigger_item: NamedAPIResource | None
    chain: ChainLink


class EvolutionTrigger(TypedDict):
    id: int
    name: str
    names: list[Name]
    pokemon_species: list[NamedAPIResource]
