import pytest
from pydantic import ValidationError

from src.battle_core.enums import Stat
from src.battle_core.schema.combatant import StatStages
from src.battle_core.stat_stages import apply_stat_stage_change, effective_stat, get_stat_multiplier, reset_stat_stages, stat_stages_summary


def test_multiplier_tables():
    assert get_stat_multiplier(Stat.ATTACK, -6) == pytest.approx(0.25)
    assert get_stat_multiplier(Stat.ATTACK, 0) == 1.0
    assert get_stat_multiplier(Stat.SPEED, 6) == 4.0
    assert get_stat_multiplier(Stat.ACCURACY, 6) == 3.0
    assert get_stat_multiplier(Stat.EVASION, -6) == pytest.approx(1 / 3)
    assert get_stat_multiplier(Stat.ACCURACY, 1) == pytest.approx(4 / 3)


def test_effective_stat_applies_stage(make_mon):
    mon = make_mon(attack=100)
    assert effective_stat(mon, Stat.ATTACK) == 100

    boosted = mon.model_copy(update={"stat_stages": StatStages(attack=1)})
    assert effective_stat(boosted, Stat.ATTACK) == 150

    lowered = mon.model_copy(update={"stat_stages": StatStages(attack=-1)})
    assert effective_stat(lowered, Stat.ATTACK) == 66


def test_effective_stat_never_below_one(make_mon):
    mon = make_mon(defense=1).model_copy(update={"stat_stages": StatStages(defense=-6)})
    assert effective_stat(mon, Stat.DEFENSE) == 1


def test_change_messages(make_mon):
    mon = make_mon(name="Eevee")
    assert apply_stat_stage_change(mon, Stat.ATTACK, 1).message == "Eevee's Attack rose!"
    assert apply_stat_stage_change(mon, Stat.SPEED, 2).message == "Eevee's Speed sharply rose!"
    assert apply_stat_stage_change(mon, Stat.SPECIAL_DEFENSE, -3).message == "Eevee's Special Defense drastically fell!"
    assert apply_stat_stage_change(mon, Stat.EVASION, -1).message == "Eevee's Evasion fell!"


def test_change_does_not_mutate_input(make_mon):
    mon = make_mon()
    change = apply_stat_stage_change(mon, Stat.DEFENSE, 2)
    assert change.combatant.stat_stages.defense == 2
    assert mon.stat_stages.defense == 0
    assert change.combatant.stat_stages is not mon.stat_stages


def test_stage_clamps_at_plus_six(make_mon):
    mon = make_mon(name="Pinsir")
    for _ in range(6):
        mon = apply_stat_stage_change(mon, Stat.ATTACK, 1).combatant
    assert mon.stat_stages.attack == 6

    seventh = apply_stat_stage_change(mon, Stat.ATTACK, 1)
    assert seventh.new_stage == 6
    assert not seventh.changed
    assert seventh.message == "Pinsir's Attack won't go any higher!"


def test_stage_clamps_at_minus_six(make_mon):
    mon = make_mon(name="Onix").model_copy(update={"stat_stages": StatStages(speed=-5)})
    change = apply_stat_stage_change(mon, Stat.SPEED, -2)
    assert change.new_stage == -6
    assert change.message == "Onix's Speed fell!"

    again = apply_stat_stage_change(change.combatant, Stat.SPEED, -1)
    assert again.message == "Onix's Speed won't go any lower!"


def test_out_of_range_stage_is_rejected():
    with pytest.raises(ValidationError):
        StatStages(attack=7)


def test_summary_and_reset(make_mon):
    mon = make_mon()
    assert stat_stages_summary(mon) == "No stat changes"

    mon = apply_stat_stage_change(mon, Stat.ATTACK, 2).combatant
    mon = apply_stat_stage_change(mon, Stat.SPEED, -1).combatant
    mon = apply_stat_stage_change(mon, Stat.SPECIAL_ATTACK, 1).combatant
    assert stat_stages_summary(mon) == "Attack +2, Sp.Atk +1, Speed -1"

    assert reset_stat_stages(mon).stat_stages.is_neutral()
