from src.battle_core.constants import REASON_MISSED
from src.battle_core.enums import MoveCategory
from src.battle_core.move_effects.context import MoveContext
from src.battle_core.schema.battle_move import MoveDefinition
from src.battle_core.schema.combatant import Combatant
from src.battle_core.schema.effect_result import EffectResult


def strike(ctx: MoveContext, defender: Combatant, move: MoveDefinition | None = None) -> tuple[Combatant, int, float]:
    """Roll and apply one strike of damage. Returns (defender, damage, type multiplier)."""
    move = move or ctx.move
    calc = ctx.calculator
    result = calc.calculate_damage(ctx.attacker, defender, move)
    damaged = calc.apply_damage(defender, result.damage, physical=move.category == MoveCategory.PHYSICAL)
    return damaged, result.damage, result.type_multiplier


def standard_attack(ctx: MoveContext) -> EffectResult:
    """Accuracy check, then one strike of damage."""
    if not ctx.calculator.accuracy_check(ctx.attacker, ctx.defender, ctx.move):
        return EffectResult.miss(ctx.defender, REASON_MISSED)
    return always_hit_attack(ctx)


def always_hit_attack(ctx: MoveContext) -> EffectResult:
    defender, damage, type_multiplier = strike(ctx, ctx.defender)
    return EffectResult(hit=True, defender=defender, damage=damage, type_effectiveness=type_multiplier)
