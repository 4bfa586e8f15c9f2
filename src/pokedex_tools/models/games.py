"""Generation, pokedex and game version records."""

from __future__ import annotations

from typing_extensions import TypedDict

from .common import Description, Name, NamedAPIResource


class Generation(TypedDict):
    id: int
    name: str
    abilities: list[NamedAPIResource]
    names: list[Name]
    main_region: NamedAPIResource
    moves: list[NamedAPIResource]
    pokemon_species: list[NamedAPIResource]
    types: list[NamedAPIResource]
    version_groups: list[NamedAPIResource]


class PokemonEntry(TypedDict):
    entry_number: int
    pokemon_species: NamedAPIResource


class Pokedex(TypedDict):
    id: int
    name: str
    is_main_series: bool
    descriptions: list[Description]
    names: list[Name]
    pokemon_entries: list[PokemonEntry]
    region: NamedAPIResource | None
    version_groups: list[NamedAPIResource]


class Version(TypedDict):
    id: int
    name: str
    names: list[Name]
    version_group: NamedAPIResource


class VersionGroup(TypedDict):
    id: int
    name: str
    order: int
    generation: NamedAPIResource
    move_learn_methods: list[NamedAPIResource]
    pokedexes: list[NamedAPIResource]
    regions: list[NamedAPIResource]
    versions: list[NamedAPIResource]
