from src.battle_core.constants import REASON_MISSED
from src.battle_core.enums import BattleEventType, Stat
from src.battle_core.move_effects.context import MoveContext
from src.battle_core.schema.combatant import Combatant
from src.battle_core.schema.effect_result import EffectResult
from src.battle_core.stat_stages import StatStageChange, apply_stat_stage_change


def raise_stat(ctx: MoveContext, combatant: Combatant, stat: Stat, stages: int) -> StatStageChange:
    change = apply_stat_stage_change(combatant, stat, stages)
    ctx.events.emit(
        BattleEventType.STAT_BOOSTED,
        pokemon=combatant.name,
        stat=stat.value,
        stage_change=stages,
        new_stage=change.new_stage,
        message=change.message,
    )
    return change


def lower_stat(ctx: MoveContext, combatant: Combatant, stat: Stat, stages: int) -> StatStageChange:
    change = apply_stat_stage_change(combatant, stat, -stages)
    ctx.events.emit(
        BattleEventType.STAT_LOWERED,
        pokemon=combatant.name,
        stat=stat.value,
        stage_change=-stages,
        new_stage=change.new_stage,
        message=change.message,
    )
    return change


def stat_boost_self(ctx: MoveContext) -> EffectResult:
    """Raise one of the user's stats by `stage_change` stages. Never misses."""
    stat = ctx.params.stat
    if stat is None:
        raise ValueError(f"{ctx.move.name}: stat boost without a stat")
    change = raise_stat(ctx, ctx.attacker, stat, ctx.params.stage_change)
    return EffectResult(hit=True, attacker=change.combatant, damage=0, message=change.message)


def stat_lower_target(ctx: MoveContext) -> EffectResult:
    """Accuracy check, then lower one of the target's stats (defaults to Attack)."""
    if not ctx.calculator.accuracy_check(ctx.attacker, ctx.defender, ctx.move):
        return EffectResult.miss(ctx.defender, REASON_MISSED)
    stat = ctx.params.stat or Stat.ATTACK
    change = lower_stat(ctx, ctx.defender, stat, ctx.params.stage_change)
    return EffectResult(hit=True, defender=change.combatant, damage=0, message=change.message)
