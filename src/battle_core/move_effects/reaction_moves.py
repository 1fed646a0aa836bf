from src.battle_core.constants import COUNTER_DAMAGE_MULTIPLIER, REASON_NO_DAMAGE_TO_COUNTER
from src.battle_core.enums import BattleEventType, MoveCategory
from src.battle_core.move_effects.context import MoveContext
from src.battle_core.schema.effect_result import EffectResult


def counter_move(ctx: MoveContext) -> EffectResult:
    """Counter: deal twice the last physical damage the user received.

    The remembered amount is Combatant.last_received_physical_damage. With
    nothing recorded the move fails without touching the defender.
    """
    received = ctx.attacker.last_received_physical_damage
    if not received:
        ctx.events.emit(
            BattleEventType.MOVE_FAILED,
            pokemon=ctx.attacker.name,
            move=ctx.move.name,
            reason=REASON_NO_DAMAGE_TO_COUNTER,
        )
        return EffectResult(hit=False, defender=ctx.defender, damage=0, failure_reason=REASON_NO_DAMAGE_TO_COUNTER)

    counter_damage = received * COUNTER_DAMAGE_MULTIPLIER
    defender = ctx.calculator.apply_damage(ctx.defender, counter_damage, physical=ctx.move.category == MoveCategory.PHYSICAL)
    ctx.events.emit(
        BattleEventType.COUNTER_TRIGGERED,
        pokemon=ctx.attacker.name,
        target=ctx.defender.name,
        original_damage=received,
        counter_damage=counter_damage,
    )
    return EffectResult(hit=True, defender=defender, damage=counter_damage)
