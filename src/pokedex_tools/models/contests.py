"""Contest records."""

from __future__ import annotations

from typing_extensions import TypedDict

from .common import Effect, FlavorText, NamedAPIResource


class ContestName(TypedDict):
    name: str
    color: str
    language: NamedAPIResource


class ContestType(TypedDict):
    id: int
    name: str
    berry_flavor: NamedAPIResource
    names: list[ContestName]


class ContestEffect(TypedDict):
    id: int
    appeal: int
    jam: int
    effect_entries: list[Effect]
    flavor_text_entries: list[FlavorText]


class SuperContestEffect(TypedDict):
    id: int
    appeal: int
    flavor_text_entries: list[FlavorText]
    moves: list[NamedAPIResource]
