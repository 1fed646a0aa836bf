"""
Move effect dispatch

Maps every MoveEffect to exactly one handler. Handlers take a MoveContext
and return an EffectResult; they never mutate their inputs and publish
their own events through the context's event bus.
"""

from typing import Callable

from src.battle_core.enums import MoveEffect
from src.battle_core.move_effects import healing, meta_moves, multi_hit, reaction_moves, recoil_and_drain, standard, stat_changes, status_effects
from src.battle_core.move_effects.context import MoveContext
from src.battle_core.schema.effect_result import EffectResult

EffectHandler = Callable[[MoveContext], EffectResult]

EFFECT_HANDLERS: dict[MoveEffect, EffectHandler] = {
    MoveEffect.HIT: standard.standard_attack,
    MoveEffect.ALWAYS_HIT: standard.always_hit_attack,
    MoveEffect.STATUS: status_effects.status_move,
    MoveEffect.STAT_BOOST_SELF: stat_changes.stat_boost_self,
    MoveEffect.STAT_LOWER_TARGET: stat_changes.stat_lower_target,
    MoveEffect.MULTI_HIT: multi_hit.multi_hit_attack,
    MoveEffect.RECOIL: recoil_and_drain.recoil_attack,
    MoveEffect.SECONDARY_EFFECT: status_effects.secondary_effect_attack,
    MoveEffect.VAMPIRIC: recoil_and_drain.vampiric_attack,
    MoveEffect.COMBO: meta_moves.combo_move,
    MoveEffect.WEATHER_DEPENDENT: meta_moves.weather_dependent_move,
    MoveEffect.COUNTER: reaction_moves.counter_move,
    MoveEffect.METRONOME: meta_moves.metronome,
    MoveEffect.HEAL: healing.healing_move,
}

_missing = set(MoveEffect) - set(EFFECT_HANDLERS)
assert not _missing, f"MoveEffect members without a handler: {sorted(m.name for m in _missing)}"


def get_effect_handler(effect: MoveEffect) -> EffectHandler:
    return EFFECT_HANDLERS[effect]


def execute_effect(ctx: MoveContext) -> EffectResult:
    """Run the handler registered for ctx.move.effect."""
    return EFFECT_HANDLERS[ctx.move.effect](ctx)
