"""Pokémon, species, ability, stat and type records."""

from __future__ import annotations

from typing_extensions import TypedDict

from .common import (
    APIResource,
    Description,
    Effect,
    FlavorText,
    GenerationGameIndex,
    Name,
    NamedAPIResource,
    VerboseEffect,
    VersionGameIndex,
)

# === Abilities ===


class AbilityEffectChange(TypedDict):
    effect_entries: list[Effect]
    version_group: NamedAPIResource


class AbilityFlavorText(TypedDict):
    flavor_text: str
    language: NamedAPIResource
    version_group: NamedAPIResource


class AbilityPokemon(TypedDict):
    is_hidden: bool
    slot: int
    pokemon: NamedAPIResource


class Ability(TypedDict):
    id: int
    name: str
    is_main_series: bool
    generation: NamedAPIResource
    names: list[Name]
    effect_entries: list[VerboseEffect]
    effect_changes: list[AbilityEffectChange]
    flavor_text_entries: list[AbilityFlavorText]
    pokemon: list[AbilityPokemon]


# === Characteristics, breeding and growth ===


class Characteristic(TypedDict):
    id: int
    gene_modulo: int
    possible_values: list[int]
    highest_stat: NamedAPIResource
    descriptions: list[Description]


class EggGroup(TypedDict):
    id: int
    name: str
    names: list[Name]
    pokemon_species: list[NamedAPIResource]


class PokemonSpeciesGender(TypedDict):
    rate: int
    pokemon_species: NamedAPIResource


class Gender(TypedDict):
    id: int
    name: str
    pokemon_species_details: list[PokemonSpeciesGender]
    required_for_evolution: list[NamedAPIResource]


class GrowthRateExperienceLevel(TypedDict):
    level: int
    experience: int


class GrowthRate(TypedDict):
    id: int
    name: str
    formula: str
    descriptions: list[Description]
    levels: list[GrowthRateExperienceLevel]
    pokemon_species: list[NamedAPIResource]


# === Natures and pokeathlon ===


class NatureStatChange(TypedDict):
    max_change: int
    pokeathlon_stat: NamedAPIResource


class MoveBattleStylePreference(TypedDict):
    low_hp_preference: int
    high_hp_preference: int
    move_battle_style: NamedAPIResource


class Nature(TypedDict):
    id: int
    name: str
    decreased_stat: NamedAPIResource | None
    increased_stat: NamedAPIResource | None
    hates_flavor: NamedAPIResource | None
    likes_flavor: NamedAPIResource | None
    pokeathlon_stat_changes: list[NatureStatChange]
    move_battle_style_preferences: list[MoveBattleStylePreference]
    names: list[Name]


class NaturePokeathlonStatAffect(TypedDict):
    max_change: int
    nature: NamedAPIResource


class NaturePokeathlonStatAffectSets(TypedDict):
    increase: list[NaturePokeathlonStatAffect]
    decrease: list[NaturePokeathlonStatAffect]


class PokeathlonStat(TypedDict):
    id: int
    name: str
    names: list[Name]
    affecting_natures: NaturePokeathlonStatAffectSets


# === Pokémon ===


class PokemonAbility(TypedDict):
    is_hidden: bool
    slot: int
    ability: NamedAPIResource


class PokemonType(TypedDict):
    slot: int
    type: NamedAPIResource


class PokemonTypePast(TypedDict):
    generation: NamedAPIResource
    types: list[PokemonType]


class PokemonHeldItemVersion(TypedDict):
    version: NamedAPIResource
    rarity: int


class PokemonHeldItem(TypedDict):
    item: NamedAPIResource
    version_details: list[PokemonHeldItemVersion]


class PokemonMoveVersion(TypedDict):
    move_learn_method: NamedAPIResource
    version_group: NamedAPIResource
    level_learned_at: int


class PokemonMove(TypedDict):
    move: NamedAPIResource
    version_group_details: list[PokemonMoveVersion]


class PokemonStat(TypedDict):
    stat: NamedAPIResource
    effort: int
    base_stat: int


class PokemonSprites(TypedDict, total=False):
    front_default: str | None
    front_shiny: str | None
    front_female: str | None
    front_shiny_female: str | None
    back_default: str | None
    back_shiny: str | None
    back_female: str | None
    back_shiny_female: str | None
    other: dict
    versions: dict


class PokemonCries(TypedDict, total=False):
    latest: str | None
    legacy: str | None


class Pokemon(TypedDict):
    id: int
    name: str
    base_experience: int | None
    height: int
    is_default: bool
    order: int
    weight: int
    abilities: list[PokemonAbility]
    forms: list[NamedAPIResource]
    game_indices: list[VersionGameIndex]
    held_items: list[PokemonHeldItem]
    location_area_encounters: str
    moves: list[PokemonMove]
    past_types: list[PokemonTypePast]
    sprites: PokemonSprites
    cries: PokemonCries
    species: NamedAPIResource
    stats: list[PokemonStat]
    types: list[PokemonType]


class PokemonColor(TypedDict):
    id: int
    name: str
    names: list[Name]
    pokemon_species: list[NamedAPIResource]


class PokemonFormSprites(TypedDict, total=False):
    front_default: str | None
    front_shiny: str | None
    back_default: str | None
    back_shiny: str | None


class PokemonForm(TypedDict):
    id: int
    name: str
    order: int
    form_order: int
    is_default: bool
    is_battle_only: bool
    is_mega: bool
    form_name: str
    pokemon: NamedAPIResource
    types: list[PokemonType]
    sprites: PokemonFormSprites
    version_group: NamedAPIResource
    names: list[Name]
    form_names: list[Name]


class PokemonHabitat(TypedDict):
    id: int
    name: str
    names: list[Name]
    pokemon_species: list[NamedAPIResource]


class AwesomeName(TypedDict):
    awesome_name: str
    language: NamedAPIResource


class PokemonShape(TypedDict):
    id: int
    name: str
    awesome_names: list[AwesomeName]
    names: list[Name]
    pokemon_species: list[NamedAPIResource]


# === Species ===


class Genus(TypedDict):
    genus: str
    language: NamedAPIResource


class PokemonSpeciesDexEntry(TypedDict):
    entry_number: int
    pokedex: NamedAPIResource


class PalParkEncounterArea(TypedDict):
    base_score: int
    rate: int
    area: NamedAPIResource


class PokemonSpeciesVariety(TypedDict):
    is_default: bool
    pokemon: NamedAPIResource


class PokemonSpecies(TypedDict):
    id: int
    name: str
    order: int
    gender_rate: int
    capture_rate: int
    base_happiness: int | None
    is_baby: bool
    is_legendary: bool
    is_mythical: bool
    hatch_counter: int | None
    has_gender_differences: bool
    forms_switchable: bool
    growth_rate: NamedAPIResource
    pokedex_numbers: list[PokemonSpeciesDexEntry]
    egg_groups: list[NamedAPIResource]
    color: NamedAPIResource
    shape: NamedAPIResource | None
    evolves_from_species: NamedAPIResource | None
    evolution_chain: APIResource
    habitat: NamedAPIResource | None
    generation: NamedAPIResource
    names: list[Name]
    pal_park_encounters: list[PalParkEncounterArea]
    flavor_text_entries: list[FlavorText]
    form_descriptions: list[Description]
    genera: list[Genus]
    varieties: list[PokemonSpeciesVariety]


# === Stats and types ===


class MoveStatAffect(TypedDict):
    change: int
    move: NamedAPIResource


class MoveStatAffectSets(TypedDict):
    increase: list[MoveStatAffect]
    decrease: list[MoveStatAffect]


class NatureStatAffectSets(TypedDict):
    increase: list[NamedAPIResource]
    decrease: list[NamedAPIResource]


class Stat(TypedDict):
    id: int
    name: str
    game_index: int
    is_battle_only: bool
    affecting_moves: MoveStatAffectSets
    affecting_natures: NatureStatAffectSets
    characteristics: list[APIResource]
    move_damage_class: NamedAPIResource | None
    names: list[Name]


class TypePokemon(TypedDict):
    slot: int
    pokemon: NamedAPIResource


class TypeRelations(TypedDict):
    no_damage_to: list[NamedAPIResource]
    half_damage_to: list[NamedAPIResource]
    double_damage_to: list[NamedAPIResource]
    no_damage_from: list[NamedAPIResource]
    half_damage_from: list[NamedAPIResource]
    double_damage_from: list[NamedAPIResource]


class TypeRelationsPast(TypedDict):
    generation: NamedAPIResource
    damage_relations: TypeRelations


class Type(TypedDict):
    id: int
    name: str
    damage_relations: TypeRelations
    past_damage_relations: list[TypeRelationsPast]
    game_indices: list[GenerationGameIndex]
    generation: NamedAPIResource
    move_damage_class: NamedAPIResource | None
    names: list[Name]
    pokemon: list[TypePokemon]
    moves: list[NamedAPIResource]
