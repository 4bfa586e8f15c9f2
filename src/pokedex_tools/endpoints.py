"""The fixed table of PokeAPI resource endpoints."""

from __future__ import annotations

from enum import Enum

from .errors import UnknownEndpointError


class Endpoint(str, Enum):
    """A PokeAPI resource kind; the value is its URL path segment."""

    # Berries
    BERRY = "berry"
    BERRY_FIRMNESS = "berry-firmness"
    BERRY_FLAVOR = "berry-flavor"
    # Contests
    CONTEST_TYPE = "contest-type"
    CONTEST_EFFECT = "contest-effect"
    SUPER_CONTEST_EFFECT = "super-contest-effect"
    # Encounters
    ENCOUNTER_METHOD = "encounter-method"
    ENCOUNTER_CONDITION = "encounter-condition"
    ENCOUNTER_CONDITION_VALUE = "encounter-condition-value"
    # Evolution
    EVOLUTION_CHAIN = "evolution-chain"
    EVOLUTION_TRIGGER = "evolution-trigger"
    # Games
    GENERATION = "generation"
    POKEDEX = "pokedex"
    VERSION = "version"
    VERSION_GROUP = "version-group"
    # Items
    ITEM = "item"
    ITEM_ATTRIBUTE = "item-attribute"
    ITEM_CATEGORY = "item-category"
    ITEM_FLING_EFFECT = "item-fling-effect"
    ITEM_POCKET = "item-pocket"
    # Machines
    MACHINE = "machine"
    # Moves
    MOVE = "move"
    MOVE_AILMENT = "move-ailment"
    MOVE_BATTLE_STYLE = "move-battle-style"
    MOVE_CATEGORY = "move-category"
    MOVE_DAMAGE_CLASS = "move-damage-class"
    MOVE_LEARN_METHOD = "move-learn-method"
    MOVE_TARGET = "move-target"
    # Locations
    LOCATION = "location"
    LOCATION_AREA = "location-area"
    PAL_PARK_AREA = "pal-park-area"
    REGION = "region"
    # Pokémon
    ABILITY = "ability"
    CHARACTERISTIC = "characteristic"
    EGG_GROUP = "egg-group"
    GENDER = "gender"
    GROWTH_RATE = "growth-rate"
    NATURE = "nature"
    POKEATHLON_STAT = "pokeathlon-stat"
    POKEMON = "pokemon"
    POKEMON_COLOR = "pokemon-color"
    POKEMON_FORM = "pokemon-form"
    POKEMON_HABITAT = "pokemon-habitat"
    POKEMON_SHAPE = "pokemon-shape"
    POKEMON_SPECIES = "pokemon-species"
    STAT = "stat"
    TYPE = "type"
    # Utility
    LANGUAGE = "language"

    @property
    def segment(self) -> str:
        return self.value

    @property
    def id_only(self) -> bool:
        """True for resources PokeAPI addresses by numeric id alone."""
        return self in _ID_ONLY

    @classmethod
    def parse(cls, name: Endpoint | str) -> Endpoint:
        """Look up an endpoint by member, path segment, or member name.

        Args:
            name: ``Endpoint.POKEMON_SPECIES``, ``"pokemon-species"`` or
                ``"POKEMON_SPECIES"`` (member names are case-insensitive).

        Raises:
            UnknownEndpointError: If *name* matches no endpoint.
        """
        if isinstance(name, cls):
            return name
        if isinstance(name, str):
            try:
                return cls(name)
            except ValueError:
                member = cls.__members__.get(name.upper().replace("-", "_"))
                if member is not None:
                    return member
        raise UnknownEndpointError(name)


_ID_ONLY = frozenset(
    {
        Endpoint.CONTEST_EFFECT,
        Endpoint.SUPER_CONTEST_EFFECT,
        Endpoint.EVOLUTION_CHAIN,
        Endpoint.MACHINE,
        Endpoint.CHARACTERISTIC,
    }
)
