"""Typed per-resource accessors, derived from the :class:`Endpoint` table.

Every accessor is a fixed-endpoint partial of the client's generic
``get(endpoint, key)`` / ``list(endpoint, limit=, offset=)`` pair, so the
same declarations serve the blocking and the async client. Lookups are
typed with the endpoint's record shape from :mod:`pokedex_tools.models`.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol, TypeVar, cast, overload

from . import models
from .endpoints import Endpoint
from .models.common import NamedAPIResourceList
from .resolver import Key, KeyOrKeys

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


class Lookup(Protocol[T_co]):
    """A ``get_<resource>_by_*`` accessor returning records of one shape."""

    endpoint: Endpoint
    record: type

    @overload
    def __call__(self, key: Key) -> T_co: ...

    @overload
    def __call__(self, key: Sequence[Key]) -> list[T_co]: ...


class Listing(Protocol):
    """A ``get_<resources>_list`` accessor."""

    endpoint: Endpoint

    def __call__(
        self, *, limit: int | None = None, offset: int | None = None
    ) -> NamedAPIResourceList: ...


def _by_key(endpoint: Endpoint, record: type[T], summary: str) -> Lookup[T]:
    kind = "id" if endpoint.id_only else "name or id"

    def accessor(self: Any, key: KeyOrKeys) -> Any:
        return self.get(endpoint, key)

    accessor.__doc__ = (
        f"{summary}\n\n"
        f"Args:\n"
        f"    key: A {kind}, or a list of them to fetch several\n"
        f"        ``{endpoint.segment}`` resources concurrently.\n\n"
        f"Returns:\n"
        f"    A :class:`{record.__name__}`, or a list of them in input order.\n"
    )
    accessor.__annotations__ = {"key": KeyOrKeys, "return": record | list[record]}
    accessor.endpoint = endpoint  # type: ignore[attr-defined]
    accessor.record = record  # type: ignore[attr-defined]
    return cast("Lookup[T]", accessor)


def _list(endpoint: Endpoint) -> Listing:
    def accessor(
        self: Any, *, limit: int | None = None, offset: int | None = None
    ) -> NamedAPIResourceList:
        return self.list(endpoint, limit=limit, offset=offset)

    accessor.__doc__ = (
        f"List ``{endpoint.segment}`` resources as a paginated envelope.\n\n"
        f"Args:\n"
        f"    limit: Page size; defaults to the configured limit.\n"
        f"    offset: Page offset; defaults to the configured offset.\n"
    )
    accessor.endpoint = endpoint  # type: ignore[attr-defined]
    return cast(Listing, accessor)


class ResourceAccessors:
    """Mixin providing ``get_<resource>_by_*`` and ``get_<resources>_list``."""

    # === Berries ===

    get_berry_by_name = _by_key(
        Endpoint.BERRY,
        models.Berry,
        "Berries are small fruits that restore HP, cure status conditions, or boost stats.",
    )
    get_berry_firmness_by_name = _by_key(
        Endpoint.BERRY_FIRMNESS,
        models.BerryFirmness,
        "Berries can be soft or hard.",
    )
    get_berry_flavor_by_name = _by_key(
        Endpoint.BERRY_FLAVOR,
        models.BerryFlavor,
        "Flavors decide whether a Pokémon likes or dislikes a berry, based on its nature.",
    )

    # === Contests ===

    get_contest_type_by_name = _by_key(
        Endpoint.CONTEST_TYPE,
        models.ContestType,
        "Contest types are the categories judges weigh in Pokémon contests.",
    )
    get_contest_effect_by_id = _by_key(
        Endpoint.CONTEST_EFFECT,
        models.ContestEffect,
        "Effects of moves when used in contests.",
    )
    get_super_contest_effect_by_id = _by_key(
        Endpoint.SUPER_CONTEST_EFFECT,
        models.SuperContestEffect,
        "Effects of moves when used in super contests.",
    )

    # === Encounters ===

    get_encounter_method_by_name = _by_key(
        Endpoint.ENCOUNTER_METHOD,
        models.EncounterMethod,
        "Methods by which wild Pokémon are encountered, e.g. walking in tall grass.",
    )
    get_encounter_condition_by_name = _by_key(
        Endpoint.ENCOUNTER_CONDITION,
        models.EncounterCondition,
        "Conditions that affect which wild Pokémon appear, e.g. day or night.",
    )
    get_encounter_condition_value_by_name = _by_key(
        Endpoint.ENCOUNTER_CONDITION_VALUE,
        models.EncounterConditionValue,
        "The states an encounter condition can take.",
    )

    # === Evolution ===

    get_evolution_chain_by_id = _by_key(
        Endpoint.EVOLUTION_CHAIN,
        models.EvolutionChain,
        "Evolution chains are family trees from the lowest stage upwards.",
    )
    get_evolution_trigger_by_name = _by_key(
        Endpoint.EVOLUTION_TRIGGER,
        models.EvolutionTrigger,
        "Events and conditions that make a Pokémon evolve.",
    )

    # === Games ===

    get_generation_by_name = _by_key(
        Endpoint.GENERATION,
        models.Generation,
        "A generation groups the games by the Pokémon, moves and types they introduce.",
    )
    get_pokedex_by_name = _by_key(
        Endpoint.POKEDEX,
        models.Pokedex,
        "Regional and national Pokédexes and their entries.",
    )
    get_version_by_name = _by_key(
        Endpoint.VERSION,
        models.Version,
        "Versions of the games, e.g. Red, Blue or Yellow.",
    )
    get_version_group_by_name = _by_key(
        Endpoint.VERSION_GROUP,
        models.VersionGroup,
        "Version groups bundle highly similar game versions.",
    )

    # === Items ===

    get_item_by_name = _by_key(
        Endpoint.ITEM,
        models.Item,
        "Objects the player can pick up, keep in the bag, and use.",
    )
    get_item_attribute_by_name = _by_key(
        Endpoint.ITEM_ATTRIBUTE,
        models.ItemAttribute,
        "Aspects of items, e.g. usable in battle or consumable.",
    )
    get_item_category_by_name = _by_key(
        Endpoint.ITEM_CATEGORY,
        models.ItemCategory,
        "Categories that decide where items go in the bag.",
    )
    get_item_fling_effect_by_name = _by_key(
        Endpoint.ITEM_FLING_EFFECT,
        models.ItemFlingEffect,
        "Effects of the move Fling with different items.",
    )
    get_item_pocket_by_name = _by_key(
        Endpoint.ITEM_POCKET,
        models.ItemPocket,
        "Bag pockets that store items by category.",
    )

    # === Machines ===

    get_machine_by_id = _by_key(
        Endpoint.MACHINE,
        models.Machine,
        "TMs and HMs: the items that teach moves, per version group.",
    )

    # === Moves ===

    get_move_by_name = _by_key(
        Endpoint.MOVE,
        models.Move,
        "Moves are the skills Pokémon use in battle.",
    )
    get_move_ailment_by_name = _by_key(
        Endpoint.MOVE_AILMENT,
        models.MoveAilment,
        "Status conditions caused by moves during battle.",
    )
    get_move_battle_style_by_name = _by_key(
        Endpoint.MOVE_BATTLE_STYLE,
        models.MoveBattleStyle,
        "Styles of moves used in the Battle Palace.",
    )
    get_move_category_by_name = _by_key(
        Endpoint.MOVE_CATEGORY,
        models.MoveCategory,
        "Very general categories that loosely group move effects.",
    )
    get_move_damage_class_by_name = _by_key(
        Endpoint.MOVE_DAMAGE_CLASS,
        models.MoveDamageClass,
        "Damage classes: physical, special, or status.",
    )
    get_move_learn_method_by_name = _by_key(
        Endpoint.MOVE_LEARN_METHOD,
        models.MoveLearnMethod,
        "Methods by which Pokémon learn moves.",
    )
    get_move_target_by_name = _by_key(
        Endpoint.MOVE_TARGET,
        models.MoveTarget,
        "Targets a move can be directed at during battle.",
    )

    # === Locations ===

    get_location_by_name = _by_key(
        Endpoint.LOCATION,
        models.Location,
        "Places in the games: cities, routes, and so on.",
    )
    get_location_area_by_name = _by_key(
        Endpoint.LOCATION_AREA,
        models.LocationArea,
        "Sections of a location that have their own wild encounters.",
    )
    get_pal_park_area_by_name = _by_key(
        Endpoint.PAL_PARK_AREA,
        models.PalParkArea,
        "Areas used to group Pokémon encounters in Pal Park.",
    )
    get_region_by_name = _by_key(
        Endpoint.REGION,
        models.Region,
        "Regions: organized areas of the Pokémon world.",
    )

    # === Pokémon ===

    get_ability_by_name = _by_key(
        Endpoint.ABILITY,
        models.Ability,
        "Abilities give Pokémon passive effects in battle or overworld.",
    )
    get_characteristic_by_id = _by_key(
        Endpoint.CHARACTERISTIC,
        models.Characteristic,
        "Characteristics indicate a Pokémon's highest IV.",
    )
    get_egg_group_by_name = _by_key(
        Endpoint.EGG_GROUP,
        models.EggGroup,
        "Egg groups decide which Pokémon can breed together.",
    )
    get_gender_by_name = _by_key(
        Endpoint.GENDER,
        models.Gender,
        "Genders and the species that require them to evolve.",
    )
    get_growth_rate_by_name = _by_key(
        Endpoint.GROWTH_RATE,
        models.GrowthRate,
        "Speed at which a Pokémon gains levels through experience.",
    )
    get_nature_by_name = _by_key(
        Endpoint.NATURE,
        models.Nature,
        "Natures influence how a Pokémon's stats grow.",
    )
    get_pokeathlon_stat_by_name = _by_key(
        Endpoint.POKEATHLON_STAT,
        models.PokeathlonStat,
        "Stats specific to the Pokéathlon.",
    )
    get_pokemon_by_name = _by_key(
        Endpoint.POKEMON,
        models.Pokemon,
        "Pokémon: the creatures that inhabit the world of the games.",
    )
    get_pokemon_color_by_name = _by_key(
        Endpoint.POKEMON_COLOR,
        models.PokemonColor,
        "Colors used to sort Pokémon in the Pokédex.",
    )
    get_pokemon_form_by_name = _by_key(
        Endpoint.POKEMON_FORM,
        models.PokemonForm,
        "Forms that some Pokémon can take on.",
    )
    get_pokemon_habitat_by_name = _by_key(
        Endpoint.POKEMON_HABITAT,
        models.PokemonHabitat,
        "Habitats where Pokémon species can be found.",
    )
    get_pokemon_shape_by_name = _by_key(
        Endpoint.POKEMON_SHAPE,
        models.PokemonShape,
        "Shapes used to sort Pokémon in the Pokédex.",
    )
    get_pokemon_species_by_name = _by_key(
        Endpoint.POKEMON_SPECIES,
        models.PokemonSpecies,
        "A species forms the basis for at least one Pokémon.",
    )
    get_stat_by_name = _by_key(
        Endpoint.STAT,
        models.Stat,
        "Stats determine aspects of battles such as damage and turn order.",
    )
    get_type_by_name = _by_key(
        Endpoint.TYPE,
        models.Type,
        "Types are properties of Pokémon and their moves.",
    )

    # === Utility ===

    get_language_by_name = _by_key(
        Endpoint.LANGUAGE,
        models.Language,
        "Languages available for translations of API resources.",
    )

    # === Lists ===

    get_berries_list = _list(Endpoint.BERRY)
    get_berry_firmnesses_list = _list(Endpoint.BERRY_FIRMNESS)
    get_berry_flavors_list = _list(Endpoint.BERRY_FLAVOR)
    get_contest_types_list = _list(Endpoint.CONTEST_TYPE)
    get_contest_effects_list = _list(Endpoint.CONTEST_EFFECT)
    get_super_contest_effects_list = _list(Endpoint.SUPER_CONTEST_EFFECT)
    get_encounter_methods_list = _list(Endpoint.ENCOUNTER_METHOD)
    get_encounter_conditions_list = _list(Endpoint.ENCOUNTER_CONDITION)
    get_encounter_condition_values_list = _list(Endpoint.ENCOUNTER_CONDITION_VALUE)
    get_evolution_chains_list = _list(Endpoint.EVOLUTION_CHAIN)
    get_evolution_triggers_list = _list(Endpoint.EVOLUTION_TRIGGER)
    get_generations_list = _list(Endpoint.GENERATION)
    get_pokedexes_list = _list(Endpoint.POKEDEX)
    get_versions_list = _list(Endpoint.VERSION)
    get_version_groups_list = _list(Endpoint.VERSION_GROUP)
    get_items_list = _list(Endpoint.ITEM)
    get_item_attributes_list = _list(Endpoint.ITEM_ATTRIBUTE)
    get_item_categories_list = _list(Endpoint.ITEM_CATEGORY)
    get_item_fling_effects_list = _list(Endpoint.ITEM_FLING_EFFECT)
    get_item_pockets_list = _list(Endpoint.ITEM_POCKET)
    get_machines_list = _list(Endpoint.MACHINE)
    get_moves_list = _list(Endpoint.MOVE)
    get_move_ailments_list = _list(Endpoint.MOVE_AILMENT)
    get_move_battle_styles_list = _list(Endpoint.MOVE_BATTLE_STYLE)
    get_move_categories_list = _list(Endpoint.MOVE_CATEGORY)
    get_move_damage_classes_list = _list(Endpoint.MOVE_DAMAGE_CLASS)
    get_move_learn_methods_list = _list(Endpoint.MOVE_LEARN_METHOD)
    get_move_targets_list = _list(Endpoint.MOVE_TARGET)
    get_locations_list = _list(Endpoint.LOCATION)
    get_location_areas_list = _list(Endpoint.LOCATION_AREA)
    get_pal_park_areas_list = _list(Endpoint.PAL_PARK_AREA)
    get_regions_list = _list(Endpoint.REGION)
    get_abilities_list = _list(Endpoint.ABILITY)
    get_characteristics_list = _list(Endpoint.CHARACTERISTIC)
    get_egg_groups_list = _list(Endpoint.EGG_GROUP)
    get_genders_list = _list(Endpoint.GENDER)
    get_growth_rates_list = _list(Endpoint.GROWTH_RATE)
    get_natures_list = _list(Endpoint.NATURE)
    get_pokeathlon_stats_list = _list(Endpoint.POKEATHLON_STAT)
    get_pokemons_list = _list(Endpoint.POKEMON)
    get_pokemon_colors_list = _list(Endpoint.POKEMON_COLOR)
    get_pokemon_forms_list = _list(Endpoint.POKEMON_FORM)
    get_pokemon_habitats_list = _list(Endpoint.POKEMON_HABITAT)
    get_pokemon_shapes_list = _list(Endpoint.POKEMON_SHAPE)
    get_pokemon_species_list = _list(Endpoint.POKEMON_SPECIES)
    get_stats_list = _list(Endpoint.STAT)
    get_types_list = _list(Endpoint.TYPE)
    get_languages_list = _list(Endpoint.LANGUAGE)

