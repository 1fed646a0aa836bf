import pytest

from src.battle_core.data.moves import get_move_data
from src.battle_core.enums import BattleEventType, MoveCategory, MoveEffect, Stat, StatusCondition, Type, Weather
from src.battle_core.move_effects.effect_applier import EFFECT_HANDLERS, execute_effect
from src.battle_core.move_effects.multi_hit import roll_hit_count
from src.battle_core.schema.battle_move import EffectParams, MoveDefinition, SubEffect
from src.battle_core.schema.combatant import StatStages, StatusEffectRecord


def _of_type(recorded, event_type):
    return [e for e in recorded if e.type == event_type]


def test_every_effect_has_a_handler():
    assert set(EFFECT_HANDLERS) == set(MoveEffect)


def test_multi_hit_miss_leaves_defender(make_mon, make_rng, make_ctx):
    defender = make_mon(hp=80)
    ctx = make_ctx(make_mon(), defender, "Pin Missile", make_rng(randoms=[0.0], percents=[99.0]))
    result = execute_effect(ctx)
    assert result.hit is False
    assert result.damage == 0
    assert result.defender.hp == 80


@pytest.mark.parametrize(
    "roll, hits",
    [(0.0, 2), (0.374, 2), (0.375, 3), (0.749, 3), (0.75, 4), (0.874, 4), (0.875, 5), (0.999, 5)],
)
def test_hit_count_distribution(make_rng, roll, hits):
    assert roll_hit_count(make_rng(randoms=[roll])) == hits


def test_multi_hit_stops_when_defender_faints(make_mon, make_rng, make_ctx, recorded):
    # Pin Missile: 25 power, no STAB, neutral -> 13 damage per strike at a 1.0 roll
    attacker = make_mon(level=50, attack=50)
    defender = make_mon(hp=31, defense=50)
    rng = make_rng(randoms=[0.8], percents=[0.0], damage_rolls=[1.0] * 5)

    result = execute_effect(make_ctx(attacker, defender, "Pin Missile", rng))

    assert result.hit is True
    assert result.hits == 3
    assert result.damage == 39
    assert result.defender.hp == 0
    multi = _of_type(recorded, BattleEventType.MULTI_HIT)
    assert [e.data["hit_number"] for e in multi] == [1, 2, 3]
    assert all(e.data["total_hits"] == 4 for e in multi)


def test_counter_without_prior_physical_damage_fails(make_mon, make_ctx, recorded):
    defender = make_mon(hp=60)
    result = execute_effect(make_ctx(make_mon(moves=["Counter"]), defender, "Counter"))

    assert result.hit is False
    assert result.damage == 0
    assert result.defender.hp == 60
    assert result.failure_reason == "no-damage-to-counter"
    failed = _of_type(recorded, BattleEventType.MOVE_FAILED)
    assert failed[0].data["reason"] == "no-damage-to-counter"


def test_counter_doubles_last_physical_damage(make_mon, make_ctx, recorded):
    attacker = make_mon(last_received_physical_damage=20)
    result = execute_effect(make_ctx(attacker, make_mon(hp=100), "Counter"))

    assert result.hit is True
    assert result.damage == 40
    assert result.defender.hp == 60
    assert _of_type(recorded, BattleEventType.COUNTER_TRIGGERED)[0].data["counter_damage"] == 40


def test_recoil_attack_hurts_user(make_mon, make_rng, make_ctx, recorded):
    # Double-Edge: 120 power, neutral, no STAB -> 55 damage, recoil floor(55 * 0.33) = 18
    attacker = make_mon(types=[Type.FIRE])
    defender = make_mon(types=[Type.WATER])
    result = execute_effect(make_ctx(attacker, defender, "Double-Edge", make_rng(percents=[0.0], damage_rolls=[1.0])))

    assert result.damage == 55
    assert result.recoil_damage == 18
    assert result.attacker.hp == 82
    assert _of_type(recorded, BattleEventType.RECOIL_DAMAGE)[0].data["recoil_damage"] == 18


def test_vampiric_attack_heals_half_of_damage(make_mon, make_rng, make_ctx):
    # Giga Drain: 75 power, Grass into Water -> 70 damage, heals 35
    attacker = make_mon(hp=50, max_hp=100)
    defender = make_mon(hp=100, types=[Type.WATER])
    result = execute_effect(make_ctx(attacker, defender, "Giga Drain", make_rng(percents=[0.0], damage_rolls=[1.0])))

    assert result.damage == 70
    assert result.heal_amount == 35
    assert result.attacker.hp == 85


def test_vampiric_heal_capped_at_max(make_mon, make_rng, make_ctx):
    attacker = make_mon(hp=90, max_hp=100)
    defender = make_mon(hp=100, types=[Type.WATER])
    result = execute_effect(make_ctx(attacker, defender, "Giga Drain", make_rng(percents=[0.0], damage_rolls=[1.0])))
    assert result.attacker.hp == 100
    assert result.heal_amount == 10


def test_healing_move_restores_half_max_hp(make_mon, make_ctx, recorded):
    result = execute_effect(make_ctx(make_mon(hp=10, max_hp=101), make_mon(), "Recover"))
    assert result.hit is True
    assert result.heal_amount == 50
    assert result.attacker.hp == 60
    assert _of_type(recorded, BattleEventType.HEALING_APPLIED)[0].data["heal_amount"] == 50


def test_status_move_applies_paralysis(make_mon, make_rng, make_ctx):
    result = execute_effect(make_ctx(make_mon(), make_mon(), "Thunder Wave", make_rng(percents=[0.0])))
    assert result.status_effect_applied == StatusCondition.PARALYSIS
    record = result.defender.status_effects["Paralysis"]
    assert record.applied is True
    assert record.duration == 3


def test_status_move_can_miss(make_mon, make_rng, make_ctx):
    result = execute_effect(make_ctx(make_mon(), make_mon(), "Thunder Wave", make_rng(percents=[95.0])))
    assert result.hit is False
    assert result.defender.status_effects == {}


def test_secondary_effect_triggers_at_chance(make_mon, make_rng, make_ctx):
    rng = make_rng(percents=[0.0, 10.0], damage_rolls=[0.85])
    result = execute_effect(make_ctx(make_mon(), make_mon(hp=200), "Fire Punch", rng))
    assert result.secondary_effect_triggered is True
    assert result.defender.has_status("Burn")


def test_secondary_effect_misses_above_chance(make_mon, make_rng, make_ctx):
    rng = make_rng(percents=[0.0, 10.5], damage_rolls=[0.85])
    result = execute_effect(make_ctx(make_mon(), make_mon(hp=200), "Fire Punch", rng))
    assert result.hit is True
    assert result.secondary_effect_triggered is False
    assert result.defender.status_effects == {}


def test_secondary_effect_can_lower_a_stat(make_mon, make_rng, make_ctx):
    rng = make_rng(percents=[0.0, 1.0], damage_rolls=[0.85])
    result = execute_effect(make_ctx(make_mon(), make_mon(hp=200), "Bubble Beam", rng))
    assert result.secondary_effect_triggered is True
    assert result.defender.stat_stages.speed == -1


def test_stat_boost_self(make_mon, make_ctx, recorded):
    result = execute_effect(make_ctx(make_mon(name="Growlithe"), make_mon(), "Howl"))
    assert result.attacker.stat_stages.attack == 1
    assert result.message == "Growlithe's Attack rose!"
    assert _of_type(recorded, BattleEventType.STAT_BOOSTED)[0].data["stat"] == "attack"


def test_stat_lower_target(make_mon, make_rng, make_ctx, recorded):
    result = execute_effect(make_ctx(make_mon(), make_mon(name="Caterpie"), "String Shot", make_rng(percents=[0.0])))
    assert result.defender.stat_stages.speed == -2
    assert result.message == "Caterpie's Speed sharply fell!"
    assert _of_type(recorded, BattleEventType.STAT_LOWERED)[0].data["stage_change"] == -2


def test_combo_boosts_then_heals(make_mon, make_ctx):
    result = execute_effect(make_ctx(make_mon(hp=50, max_hp=100), make_mon(), "Swords Dance"))
    assert result.hit is True
    assert result.damage == 0
    assert result.attacker.stat_stages.attack == 2
    assert result.attacker.hp == 60


def test_combo_two_stat_boosts(make_mon, make_ctx):
    result = execute_effect(make_ctx(make_mon(), make_mon(), "Dragon Dance"))
    assert result.attacker.stat_stages.attack == 1
    assert result.attacker.stat_stages.speed == 1


def test_combo_stops_when_first_leg_faints_defender(make_mon, make_rng, make_ctx, recorded):
    finisher = MoveDefinition(
        name="Finisher",
        power=200,
        pp=5,
        accuracy=None,
        category=MoveCategory.PHYSICAL,
        type=Type.NORMAL,
        effect=MoveEffect.COMBO,
        first_effect=SubEffect(effect=MoveEffect.ALWAYS_HIT),
        second_effect=SubEffect(effect=MoveEffect.STAT_LOWER_TARGET, params=EffectParams(stat=Stat.DEFENSE)),
    )
    result = execute_effect(make_ctx(make_mon(), make_mon(hp=1), finisher, make_rng(damage_rolls=[1.0])))
    assert result.defender.hp == 0
    assert not _of_type(recorded, BattleEventType.STAT_LOWERED)


def test_weather_dependent_move_follows_weather(make_mon, make_rng, make_ctx):
    fire_mon = make_mon(hp=200, types=[Type.FIRE])

    clear = execute_effect(make_ctx(make_mon(), fire_mon, "Weather Ball", make_rng(percents=[0.0], damage_rolls=[1.0])))
    assert clear.type_effectiveness == 1.0

    rain = execute_effect(make_ctx(make_mon(), fire_mon, "Weather Ball", make_rng(percents=[0.0], damage_rolls=[1.0]), weather=Weather.RAIN))
    assert rain.type_effectiveness == 2.0
    assert rain.damage > clear.damage


def test_metronome_runs_a_random_other_move(make_mon, make_rng, make_ctx, recorded):
    catalog = {"Metronome": get_move_data("Metronome"), "Howl": get_move_data("Howl")}
    result = execute_effect(make_ctx(make_mon(), make_mon(), "Metronome", make_rng(), catalog=catalog))

    assert result.attacker.stat_stages.attack == 1
    assert _of_type(recorded, BattleEventType.METRONOME_SELECTED)[0].data["selected_move"] == "Howl"


def test_metronome_needs_another_move(make_mon, make_ctx):
    with pytest.raises(ValueError):
        execute_effect(make_ctx(make_mon(), make_mon(), "Metronome", catalog={"Metronome": get_move_data("Metronome")}))


def test_effects_do_not_mutate_inputs(make_mon, make_rng, make_ctx):
    attacker = make_mon(hp=50, max_hp=100)
    defender = make_mon(hp=100, types=[Type.WATER])
    execute_effect(make_ctx(attacker, defender, "Giga Drain", make_rng(percents=[0.0], damage_rolls=[1.0])))
    assert attacker.hp == 50
    assert defender.hp == 100


def test_status_move_overwrites_same_status(make_mon, make_rng, make_ctx):
    defender = make_mon(status_effects={"Paralysis": StatusEffectRecord(duration=1)})
    result = execute_effect(make_ctx(make_mon(), defender, "Thunder Wave", make_rng(percents=[0.0])))

    assert list(result.defender.status_effects) == ["Paralysis"]
    assert result.defender.status_effects["Paralysis"].duration == 3


def test_secondary_effect_needs_a_connecting_hit(make_mon, make_rng, make_ctx):
    evasive = make_mon(hp=200, stat_stages=StatStages(evasion=6))
    result = execute_effect(make_ctx(make_mon(), evasive, "Fire Punch", make_rng(percents=[99.0, 0.0])))

    assert result.hit is False
    assert result.secondary_effect_triggered is False
    assert result.defender.status_effects == {}


def test_secondary_effect_skips_fainted_target(make_mon, make_rng, make_ctx, recorded):
    rng = make_rng(percents=[0.0, 0.0], damage_rolls=[1.0])
    result = execute_effect(make_ctx(make_mon(), make_mon(hp=1, max_hp=50), "Fire Punch", rng))

    assert result.defender.is_fainted()
    assert result.secondary_effect_triggered is False
    assert result.defender.status_effects == {}
    assert not _of_type(recorded, BattleEventType.STATUS_EFFECT_APPLIED)


def test_secondary_effect_skips_immune_target(make_mon, make_rng, make_ctx):
    rider = MoveDefinition(
        name="Rider",
        power=60,
        pp=10,
        category=MoveCategory.PHYSICAL,
        type=Type.NORMAL,
        effect=MoveEffect.SECONDARY_EFFECT,
        params=EffectParams(secondary_effect_chance=100, stat=Stat.DEFENSE),
    )
    rng = make_rng(percents=[0.0, 0.0], damage_rolls=[1.0])
    result = execute_effect(make_ctx(make_mon(), make_mon(types=[Type.GHOST]), rider, rng))

    assert result.hit is True
    assert result.damage == 0
    assert result.secondary_effect_triggered is False
    assert result.defender.stat_stages.defense == 0
