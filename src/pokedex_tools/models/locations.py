"""Location, area and region records."""

from __future__ import annotations

from typing_extensions import TypedDict

from .common import (
    GenerationGameIndex,
    Name,
    NamedAPIResource,
    VersionEncounterDetail,
)


class Location(TypedDict):
    id: int
    name: str
    region: NamedAPIResource | None
    names: list[Name]
    game_indices: list[GenerationGameIndex]
    areas: list[NamedAPIResource]


class EncounterVersionDetails(TypedDict):
    rate: int
    version: NamedAPIResource


class EncounterMethodRate(TypedDict):
    encounter_method: NamedAPIResource
    version_details: list[EncounterVersionDetails]


class PokemonEncounter(TypedDict):
    pokemon: NamedAPIResource
    version_details: list[VersionEncounterDetail]


class LocationArea(TypedDict):
    id: int
    name: str
    game_index: int
    encounter_method_rates: list[EncounterMethodRate]
    location: NamedAPIResource
    names: list[Name]
    pokemon_encounters: list[PokemonEncounter]


class PalParkEncounterSpecies(TypedDict):
    base_score: int
    rate: int
    pokemon_species: NamedAPIResource


class PalParkArea(TypedDict):
    id: int
    name: str
    names: list[Name]
    pokemon_encounters: list[PalParkEncounterSpecies]


class Region(TypedDict):
    id: int
    locations: list[NamedAPIResource]
    name: str
    names: list[Name]
    main_generation: NamedAPIResource | None
    pokedexes: list[NamedAPIResource]
    version_groups: list[NamedAPIResource]
