"""Berry records."""

from __future__ import annotations

from typing_extensions import TypedDict

from .common import Name, NamedAPIResource


class BerryFlavorMap(TypedDict):
    potency: int
    flavor: NamedAPIResource


class Berry(TypedDict):
    id: int
    name: str
    growth_time: int
    max_harvest: int
    natural_gift_power: int
    size: int
    smoothness: int
    soil_dryness: int
    firmness: NamedAPIResource
    flavors: list[BerryFlavorMap]
    item: NamedAPIResource
    natural_gift_type: NamedAPIResource


class BerryFirmness(TypedDict):
    id: int
    name: str
    berries: list[NamedAPIResource]
    names: list[Name]


class FlavorBerryMap(TypedDict):
    potency: int
    berry: NamedAPIResource


class BerryFlavor(TypedDict):
    id: int
    name: str
    berries: list[FlavorBerryMap]
    contest_type: NamedAPIResource
    names: list[Name]
