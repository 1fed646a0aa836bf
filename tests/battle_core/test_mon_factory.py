import pytest

from src.battle_core.data.learnsets import get_available_moves, get_best_moves
from src.battle_core.data.moves import get_all_move_names, get_move_data
from src.battle_core.data.species import SPECIES_INFOS, get_all_species
from src.battle_core.enums import Type
from src.battle_core.exceptions import ConfigurationError, UnknownMoveError, UnknownSpeciesError
from src.battle_core.schema.battle_move import MoveInstance
from src.battle_core.utils.mon_factory import (
    compute_stat,
    create_combatant,
    create_starters,
    heal_combatant,
    level_up,
    restore_pp,
)


def test_compute_stat():
    assert compute_stat(35, 5, is_hp=True) == 18
    assert compute_stat(55, 5, is_hp=False) == 10


def test_create_combatant_uses_default_moveset():
    pikachu = create_combatant("Pikachu", level=5)

    assert pikachu.name == "Pikachu"
    assert pikachu.types == [Type.ELECTRIC]
    assert pikachu.hp == pikachu.max_hp == 18
    assert pikachu.attack == 10
    assert [m.name for m in pikachu.moves.values()] == ["Tackle", "Thundershock", "Thunderbolt"]
    assert list(pikachu.moves) == ["Move 1", "Move 2", "Move 3"]
    assert all(m.pp_remaining == m.move.pp for m in pikachu.moves.values())


def test_create_combatant_from_learnset():
    abra = create_combatant("Abra", level=20, nickname="Spoon")
    assert abra.name == "Spoon"
    assert abra.species == "Abra"
    assert [m.name for m in abra.moves.values()] == ["Metronome", "Growth", "Thunder Wave", "Psyshock"]


def test_create_combatant_with_explicit_moves():
    mon = create_combatant("Eevee", level=12, move_names=["Swift", "Recover"])
    assert [m.name for m in mon.moves.values()] == ["Swift", "Recover"]


def test_unknown_names_raise():
    with pytest.raises(UnknownSpeciesError, match="Unknown Pokémon species: Missingno"):
        create_combatant("Missingno")
    with pytest.raises(UnknownMoveError, match="Unknown move: Splash"):
        create_combatant("Magikarp", move_names=["Splash"])


def test_best_moves_prefer_latest_learned():
    assert get_best_moves("Pikachu", 25) == ["Thunderbolt", "Double-Edge", "Swift", "Thundershock"]
    assert get_best_moves("Pikachu", 4) == ["Tackle", "Growl"]


def test_available_moves_by_level():
    assert get_available_moves("Charmander", 7) == ["Scratch", "Growl", "Ember"]
    assert get_available_moves("Nobody", 50) == []


def test_every_species_builds_with_catalog_moves():
    known = set(get_all_move_names())
    for species in get_all_species():
        mon = create_combatant(species, level=30)
        assert 1 <= len(mon.moves) <= 4
        assert {m.name for m in mon.moves.values()} <= known
    assert len(SPECIES_INFOS) == 25


def test_create_starters():
    starters = create_starters(level=5)
    assert set(starters) == {"Pikachu", "Bulbasaur", "Charmander", "Squirtle"}


def test_level_up_recomputes_stats():
    pikachu = create_combatant("Pikachu", level=5).with_hp(3)
    grown = level_up(pikachu)
    assert grown.level == 6
    assert grown.max_hp == 20
    assert grown.hp == 20
    assert level_up(grown, levels=500).level == 100


def test_heal_and_restore():
    pikachu = create_combatant("Pikachu", level=5)
    tackle = pikachu.moves["Move 1"]
    worn = pikachu.with_hp(1).model_copy(
        update={"moves": {**pikachu.moves, "Move 1": MoveInstance(move=tackle.move, pp_remaining=0)}}
    )

    healed = heal_combatant(worn)
    assert healed.hp == healed.max_hp
    assert healed.moves["Move 1"].pp_remaining == 0

    refreshed = restore_pp(worn)
    assert refreshed.moves["Move 1"].pp_remaining == get_move_data("Tackle").pp
    assert refreshed.hp == 1


def test_every_requested_move_is_checked():
    with pytest.raises(UnknownMoveError, match="Not A Move"):
        create_combatant("Pikachu", 30, move_names=["Tackle", "Growl", "Swift", "Ember", "Not A Move"])


def test_more_than_four_moves_is_rejected():
    with pytest.raises(ConfigurationError, match="at most 4 moves"):
        create_combatant("Pikachu", 30, move_names=["Tackle", "Growl", "Thunder Wave", "Swift", "Thunderbolt"])
