import logging

from src.battle_core.enums import BattleEventType, MoveEffect
from src.battle_core.move_effects.context import MoveContext
from src.battle_core.schema.battle_move import SubEffect
from src.battle_core.schema.effect_result import EffectResult

logger = logging.getLogger(__name__)


def _dispatch(ctx: MoveContext) -> EffectResult:
    # Deferred import: the applier registry imports this module
    from src.battle_core.move_effects.effect_applier import execute_effect

    return execute_effect(ctx)


def _run_sub_effect(ctx: MoveContext, sub: SubEffect) -> EffectResult:
    return _dispatch(ctx.with_updates(move=ctx.move.derive(sub)))


def combo_move(ctx: MoveContext) -> EffectResult:
    """
    Run first_effect, then second_effect against the updated combatants.

    Stops after the first leg if it fainted the defender. Otherwise results
    are merged: hit if either leg hit, damage summed, latest combatants kept.
    """
    first = _run_sub_effect(ctx, ctx.move.first_effect)
    if first.defender is not None and first.defender.is_fainted():
        return first

    attacker = first.attacker or ctx.attacker
    defender = first.defender or ctx.defender
    second = _run_sub_effect(ctx.with_updates(attacker=attacker, defender=defender), ctx.move.second_effect)

    return EffectResult(
        hit=first.hit or second.hit,
        attacker=second.attacker or first.attacker,
        defender=second.defender or first.defender,
        damage=first.damage + second.damage,
        type_effectiveness=second.type_effectiveness if second.type_effectiveness is not None else first.type_effectiveness,
        heal_amount=second.heal_amount if second.heal_amount is not None else first.heal_amount,
        message=" ".join(m for m in (first.message, second.message) if m) or None,
    )


def weather_dependent_move(ctx: MoveContext) -> EffectResult:
    """Pick the sub-effect keyed by the current weather, falling back to default_effect."""
    weather = ctx.battle_state.weather
    sub = ctx.move.weather_effects.get(weather, ctx.move.default_effect)
    logger.debug("%s resolves as %s under %s", ctx.move.name, sub.effect.name, weather.name)
    return _run_sub_effect(ctx, sub)


def metronome(ctx: MoveContext) -> EffectResult:
    """Pick uniformly from every catalog move except Metronome itself and run it."""
    candidates = [move for move in ctx.catalog.values() if move.effect != MoveEffect.METRONOME]
    index = ctx.rng.choice_index(len(candidates))
    if index < 0:
        raise ValueError("metronome: catalog has no other moves to choose from")

    selected = candidates[index]
    ctx.events.emit(BattleEventType.METRONOME_SELECTED, pokemon=ctx.attacker.name, selected_move=selected.name)

    return _dispatch(ctx.with_updates(move=selected))
