import math

from src.battle_core.move_effects.context import MoveContext
from src.battle_core.schema.effect_result import EffectResult


def healing_move(ctx: MoveContext) -> EffectResult:
    """Recover: restore floor(max_hp * heal_fraction) to the user, capped at max HP."""
    heal = math.floor(ctx.attacker.max_hp * ctx.params.heal_fraction)
    attacker, restored = ctx.calculator.apply_healing(ctx.attacker, heal, source="move", move_name=ctx.move.name)
    return EffectResult(hit=True, attacker=attacker, damage=0, heal_amount=restored)
