from typing import Iterable, Optional

from src.battle_core.constants import HP_STAT_OFFSET, MAX_LEVEL, MAX_MON_MOVES, OTHER_STAT_OFFSET, move_slot_key
from src.battle_core.data.learnsets import get_best_moves
from src.battle_core.data.moves import get_move_data
from src.battle_core.data.species import STARTER_SPECIES, get_all_species, get_species_info
from src.battle_core.exceptions import ConfigurationError
from src.battle_core.schema.battle_move import MoveDefinition, MoveInstance
from src.battle_core.schema.combatant import Combatant
from src.battle_core.schema.species_info import SpeciesInfo

__all__ = ["compute_stat", "create_move_instance", "build_moveset", "create_combatant", "create_starters", "heal_combatant", "restore_pp", "level_up", "get_all_species"]


def compute_stat(base: int, level: int, is_hp: bool) -> int:
    # floor(base * 2 * level / 100) + offset; no IVs, EVs or natures
    if is_hp:
        return (base * 2 * level) // 100 + level + HP_STAT_OFFSET
    return (base * 2 * level) // 100 + OTHER_STAT_OFFSET


def _stats_for(info: SpeciesInfo, level: int) -> dict[str, int]:
    max_hp = compute_stat(info.base_hp, level, is_hp=True)
    return {
        "hp": max_hp,
        "max_hp": max_hp,
        "attack": compute_stat(info.base_attack, level, is_hp=False),
        "defense": compute_stat(info.base_defense, level, is_hp=False),
        "special_attack": compute_stat(info.base_special_attack, level, is_hp=False),
        "special_defense": compute_stat(info.base_special_defense, level, is_hp=False),
        "speed": compute_stat(info.base_speed, level, is_hp=False),
    }


def create_move_instance(move: MoveDefinition) -> MoveInstance:
    return MoveInstance(move=move, pp_remaining=move.pp)


def build_moveset(move_names: Iterable[str]) -> dict[str, MoveInstance]:
    """
    Slot keyed moveset ("Move 1".."Move 4").

    Raises:
        UnknownMoveError: a name is not in the catalog
        ConfigurationError: more than MAX_MON_MOVES names were given
    """
    moves = [get_move_data(name) for name in move_names]
    if len(moves) > MAX_MON_MOVES:
        raise ConfigurationError(
            f"A combatant knows at most {MAX_MON_MOVES} moves",
            {"requested": [move.name for move in moves]},
        )
    return {move_slot_key(index): create_move_instance(move) for index, move in enumerate(moves)}


def create_combatant(
    species: str,
    level: int = 5,
    move_names: Iterable[str] | None = None,
    nickname: Optional[str] = None,
) -> Combatant:
    """
    Build a battle-ready combatant at full HP and PP.

    Args:
        species: Key into SPECIES_INFOS
        level: 1-100
        move_names: Up to four catalog move names. Defaults to the species'
            fixed moveset, or its best learnset moves at this level
        nickname: Display name; defaults to the species name

    Raises:
        UnknownSpeciesError: species not in SPECIES_INFOS
        UnknownMoveError: a requested move is not in the catalog
        ConfigurationError: more than four moves were requested
    """
    info = get_species_info(species)
    if move_names is None:
        move_names = info.default_moves or get_best_moves(species, level)

    return Combatant(
        name=nickname or species,
        species=species,
        level=level,
        types=list(info.types),
        moves=build_moveset(move_names),
        **_stats_for(info, level),
    )


def create_starters(level: int = 5) -> dict[str, Combatant]:
    return {species: create_combatant(species, level) for species in STARTER_SPECIES}


def heal_combatant(combatant: Combatant) -> Combatant:
    """Full HP. Stages, status and PP are untouched."""
    return combatant.model_copy(update={"hp": combatant.max_hp})


def restore_pp(combatant: Combatant) -> Combatant:
    moves = {key: instance.restored() for key, instance in combatant.moves.items()}
    return combatant.model_copy(update={"moves": moves})


def level_up(combatant: Combatant, levels: int = 1) -> Combatant:
    """Raise the level and recompute stats from species base stats. HP is refilled to the new max."""
    info = get_species_info(combatant.species)
    new_level = min(MAX_LEVEL, combatant.level + levels)
    return combatant.model_copy(update={"level": new_level, **_stats_for(info, new_level)})
