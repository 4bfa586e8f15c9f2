"""PokeAPI response shapes.

Every record is a ``TypedDict``: accessors hand back the decoded JSON body
unchanged, and these declarations only describe its shape.
"""

from .berries import Berry, BerryFirmness, BerryFlavor
from .common import (
    APIResource,
    Description,
    Effect,
    FlavorText,
    Name,
    NamedAPIResource,
    NamedAPIResourceList,
    VerboseEffect,
)
from .contests import ContestEffect, ContestType, SuperContestEffect
from .encounters import EncounterCondition, EncounterConditionValue, EncounterMethod
from .evolution import ChainLink, EvolutionChain, EvolutionTrigger
from .games import Generation, Pokedex, Version, VersionGroup
from .items import Item, ItemAttribute, ItemCategory, ItemFlingEffect, ItemPocket
from .languages import Language
from .locations import Location, LocationArea, PalParkArea, Region
from .machines import Machine
from .moves import (
    Move,
    MoveAilment,
    MoveBattleStyle,
    MoveCategory,
    MoveDamageClass,
    MoveLearnMethod,
    MoveTarget,
)
from .pokemon import (
    Ability,
    Characteristic,
    EggGroup,
    Gender,
    GrowthRate,
    Nature,
    PokeathlonStat,
    Pokemon,
    PokemonColor,
    PokemonForm,
    PokemonHabitat,
    PokemonShape,
    PokemonSpecies,
    Stat,
    Type,
)

__all__ = [
    "APIResource",
    "Ability",
    "Berry",
    "BerryFirmness",
    "BerryFlavor",
    "ChainLink",
    "Characteristic",
    "ContestEffect",
    "ContestType",
    "Description",
    "Effect",
    "EggGroup",
    "EncounterCondition",
    "EncounterConditionValue",
    "EncounterMethod",
    "EvolutionChain",
    "EvolutionTrigger",
    "FlavorText",
    "Gender",
    "Generation",
    "GrowthRate",
    "Item",
    "ItemAttribute",
    "ItemCategory",
    "ItemFlingEffect",
    "ItemPocket",
    "Language",
    "Location",
    "LocationArea",
    "Machine",
    "Move",
    "MoveAilment",
    "MoveBattleStyle",
    "MoveCategory",
    "MoveDamageClass",
    "MoveLearnMethod",
    "MoveTarget",
    "Name",
    "NamedAPIResource",
    "NamedAPIResourceList",
    "Nature",
    "PalParkArea",
    "PokeathlonStat",
    "Pokedex",
    "Pokemon",
    "PokemonColor",
    "PokemonForm",
    "PokemonHabitat",
    "PokemonShape",
    "PokemonSpecies",
    "Region",
    "Stat",
    "SuperContestEffect",
    "Type",
    "VerboseEffect",
    "Version",
    "VersionGroup",
]
