"""Move records."""

from __future__ import annotations

from typing_extensions import TypedDict

from .common import (
    APIResource,
    Description,
    MachineVersionDetail,
    Name,
    NamedAPIResource,
    VerboseEffect,
)
from .pokemon import AbilityEffectChange


class ContestComboDetail(TypedDict):
    use_before: list[NamedAPIResource] | None
    use_after: list[NamedAPIResource] | None


class ContestComboSets(TypedDict):
    normal: ContestComboDetail
    super: ContestComboDetail


class MoveFlavorText(TypedDict):
    flavor_text: str
    language: NamedAPIResource
    version_group: NamedAPIResource


class MoveMetaData(TypedDict):
    ailment: NamedAPIResource
    category: NamedAPIResource
    min_hits: int | None
    max_hits: int | None
    min_turns: int | None
    max_turns: int | None
    drain: int
    healing: int
    crit_rate: int
    ailment_chance: int
    flinch_chance: int
    stat_chance: int


class MoveStatChange(TypedDict):
    change: int
    stat: NamedAPIResource


class PastMoveStatValues(TypedDict):
    accuracy: int | None
    effect_chance: int | None
    power: int | None
    pp: int | None
    effect_entries: list[VerboseEffect]
    type: NamedAPIResource | None
    version_group: NamedAPIResource


class Move(TypedDict):
    id: int
    name: str
    accuracy: int | None
    effect_chance: int | None
    pp: int | None
    priority: int
    power: int | None
    contest_combos: ContestComboSets | None
    contest_type: NamedAPIResource | None
    contest_effect: APIResource | None
    damage_class: NamedAPIResource
    effect_entries: list[VerboseEffect]
    effect_changes: list[AbilityEffectChange]
    flavor_text_entries: list[MoveFlavorText]
    generation: NamedAPIResource
    learned_by_pokemon: list[NamedAPIResource]
    machines: list[MachineVersionDetail]
    meta: MoveMetaData | None
    names: list[Name]
    past_values: list[PastMoveStatValues]
    stat_changes: list[MoveStatChange]
    super_contest_effect: APIResource | None
    target: NamedAPIResource
    type: NamedAPIResource


class MoveAilment(TypedDict):
    id: int
    name: str
    moves: list[NamedAPIResource]
    names: list[Name]


class MoveBattleStyle(TypedDict):
    id: int
    name: str
    names: list[Name]


class MoveCategory(TypedDict):
    id: int
    name: str
    moves: list[NamedAPIResource]
    descriptions: list[Description]


class MoveDamageClass(TypedDict):
    id: int
    name: str
    descriptions: list[Description]
    moves: list[NamedAPIResource]
    names: list[Name]


class MoveLearnMethod(TypedDict):
    id: int
    name: str
    descriptions: list[Description]
    names: list[Name]
    version_groups: list[NamedAPIResource]


class MoveTarget(TypedDict):
    id: int
    name: str
    descriptions: list[Description]
    moves: list[NamedAPIResource]
    names: list[Name]
