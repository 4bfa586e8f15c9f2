"""Item records."""

from __future__ import annotations

from typing_extensions import TypedDict

from .common import (
    APIResource,
    Description,
    Effect,
    GenerationGameIndex,
    MachineVersionDetail,
    Name,
    NamedAPIResource,
    VerboseEffect,
    VersionGroupFlavorText,
)


class ItemSprites(TypedDict):
    default: str | None


class ItemHolderPokemonVersionDetail(TypedDict):
    rarity: int
    version: NamedAPIResource


class ItemHolderPokemon(TypedDict):
    pokemon: NamedAPIResource
    version_details: list[ItemHolderPokemonVersionDetail]


class Item(TypedDict):
    id: int
    name: str
    cost: int
    fling_power: int | None
    fling_effect: NamedAPIResource | None
    attributes: list[NamedAPIResource]
    category: NamedAPIResource
    effect_entries: list[VerboseEffect]
    flavor_text_entries: list[VersionGroupFlavorText]
    game_indices: list[GenerationGameIndex]
    names: list[Name]
    sprites: ItemSprites
    held_by_pokemon: list[ItemHolderPokemon]
    baby_trigger_for: APIResource | None
    machines: list[MachineVersionDetail]


class ItemAttribute(TypedDict):
    id: int
    name: str
    items: list[NamedAPIResource]
    names: list[Name]
    descriptions: list[Description]


class ItemCategory(TypedDict):
    id: int
    name: str
    items: list[NamedAPIResource]
    names: list[Name]
    pocket: NamedAPIResource


class ItemFlingEffect(TypedDict):
    id: int
    name: str
    effect_entries: list[Effect]
    items: list[NamedAPIResource]


class ItemPocket(TypedDict):
    id: int
    name: str
    categories: list[NamedAPIResource]
    names: list[Name]
