from src.battle_core.constants import REASON_MISSED
from src.battle_core.move_effects.context import MoveContext
from src.battle_core.move_effects.stat_changes import lower_stat
from src.battle_core.move_effects.standard import standard_attack
from src.battle_core.schema.effect_result import EffectResult


def status_move(ctx: MoveContext) -> EffectResult:
    """Thunder Wave and friends: accuracy check, then apply the move's status effect."""
    status = ctx.params.status_effect
    if status is None:
        raise ValueError(f"{ctx.move.name}: status move without a status_effect")

    if not ctx.calculator.accuracy_check(ctx.attacker, ctx.defender, ctx.move):
        return EffectResult.miss(ctx.defender, REASON_MISSED)

    defender = ctx.calculator.apply_status_effect(ctx.defender, status.value, ctx.params.status_duration)
    return EffectResult(hit=True, defender=defender, damage=0, status_effect_applied=status)


def secondary_effect_attack(ctx: MoveContext) -> EffectResult:
    """Damaging move with a chance-based rider (Fire Punch burn, Bubble Beam speed drop).

    The rider rolls independently after a hit that dealt damage and left the
    target standing: `roll <= chance`.
    It applies the move's status effect when one is set, otherwise it lowers
    the move's stat on the target.
    """
    result = standard_attack(ctx)
    chance = ctx.params.secondary_effect_chance
    if not result.hit or chance <= 0:
        return result
    if result.damage == 0 or result.defender.is_fainted():
        return result

    if ctx.rng.percent_roll() > chance:
        return result

    params = ctx.params
    defender = result.defender
    if params.status_effect is not None:
        defender = ctx.calculator.apply_status_effect(defender, params.status_effect.value, params.status_duration)
        return result.model_copy(update={"defender": defender, "secondary_effect_triggered": True, "status_effect_applied": params.status_effect})

    if params.stat is not None:
        lowered = lower_stat(ctx, defender, params.stat, params.stage_change)
        return result.model_copy(update={"defender": lowered.combatant, "secondary_effect_triggered": True, "message": lowered.message})

    return result.model_copy(update={"secondary_effect_triggered": True})
