"""Wild encounter records."""

from __future__ import annotations

from typing_extensions import TypedDict

from .common import Name, NamedAPIResource


class EncounterMethod(TypedDict):
    id: int
    name: str
    order: int
    names: list[Name]


class EncounterCondition(TypedDict):
    id: int
    name: str
    names: list[Name]
    values: list[NamedAPIResource]


class EncounterConditionValue(TypedDict):
    id: int
    name: str
    condition: NamedAPIResource
    names: list[Name]
