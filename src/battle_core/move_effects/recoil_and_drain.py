import math

from src.battle_core.enums import BattleEventType
from src.battle_core.move_effects.context import MoveContext
from src.battle_core.move_effects.standard import standard_attack
from src.battle_core.schema.effect_result import EffectResult


def recoil_attack(ctx: MoveContext) -> EffectResult:
    """Double-Edge: standard attack, then the user takes max(1, floor(damage * recoil_fraction))."""
    result = standard_attack(ctx)
    if not result.hit or result.damage <= 0:
        return result

    recoil = max(1, math.floor(result.damage * ctx.params.recoil_fraction))
    attacker = ctx.attacker.with_hp(ctx.attacker.hp - recoil)
    ctx.events.emit(
        BattleEventType.RECOIL_DAMAGE,
        pokemon=attacker.name,
        recoil_damage=recoil,
        remaining_hp=attacker.hp,
        caused_by_move=ctx.move.name,
    )
    return result.model_copy(update={"attacker": attacker, "recoil_damage": recoil})


def vampiric_attack(ctx: MoveContext) -> EffectResult:
    """Giga Drain: standard attack, then the user heals floor(damage * heal_fraction), capped at max HP."""
    result = standard_attack(ctx)
    if not result.hit or result.damage <= 0:
        return result

    heal = math.floor(result.damage * ctx.params.heal_fraction)
    attacker, restored = ctx.calculator.apply_healing(ctx.attacker, heal, source="vampiric", move_name=ctx.move.name)
    return result.model_copy(update={"attacker": attacker, "heal_amount": restored})
