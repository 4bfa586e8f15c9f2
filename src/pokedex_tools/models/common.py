"""Shared PokeAPI sub-records referenced by every resource kind."""

from __future__ import annotations

from typing_extensions import TypedDict


class APIResource(TypedDict):
    url: str


class NamedAPIResource(TypedDict):
    name: str
    url: str


class NamedAPIResourceList(TypedDict):
    """Envelope returned by every list endpoint."""

    count: int
    next: str | None
    previous: str | None
    results: list[NamedAPIResource]


class Description(TypedDict):
    description: str
    language: NamedAPIResource


class Effect(TypedDict):
    effect: str
    language: NamedAPIResource


class VerboseEffect(TypedDict):
    effect: str
    short_effect: str
    language: NamedAPIResource


class Encounter(TypedDict):
    min_level: int
    max_level: int
    condition_values: list[NamedAPIResource]
    chance: int
    method: NamedAPIResource


class FlavorText(TypedDict, total=False):
    flavor_text: str
    language: NamedAPIResource
    version: NamedAPIResource


class GenerationGameIndex(TypedDict):
    game_index: int
    generation: NamedAPIResource


class MachineVersionDetail(TypedDict):
    machine: APIResource
    version_group: NamedAPIResource


class Name(TypedDict):
    name: str
    language: NamedAPIResource


class VersionEncounterDetail(TypedDict):
    version: NamedAPIResource
    max_chance: int
    encounter_details: list[Encounter]


class VersionGameIndex(TypedDict):
    game_index: int
    version: NamedAPIResource


class VersionGroupFlavorText(TypedDict):
    text: str
    language: NamedAPIResource
    version_group: NamedAPIResource
