from src.battle_core.constants import MULTI_HIT_DISTRIBUTION, REASON_MISSED
from src.battle_core.enums import BattleEventType
from src.battle_core.move_effects.context import MoveContext
from src.battle_core.move_effects.standard import strike
from src.battle_core.schema.effect_result import EffectResult
from src.battle_core.utils.rng import BattleRng


def roll_hit_count(rng: BattleRng) -> int:
    """Draw a strike count from MULTI_HIT_DISTRIBUTION (2 and 3: 37.5% each, 4 and 5: 12.5% each)."""
    roll = rng.random()
    cumulative = 0.0
    for hits, probability in MULTI_HIT_DISTRIBUTION.items():
        cumulative += probability
        if roll < cumulative:
            return hits
    return max(MULTI_HIT_DISTRIBUTION)


def multi_hit_attack(ctx: MoveContext) -> EffectResult:
    """Pin Missile: 2-5 strikes behind a single accuracy check.

    The strike count is rolled before accuracy. Each strike rolls its own
    damage; the loop stops as soon as the defender faints, and the result
    reports only the strikes that landed.
    """
    total_hits = roll_hit_count(ctx.rng)

    if not ctx.calculator.accuracy_check(ctx.attacker, ctx.defender, ctx.move):
        return EffectResult.miss(ctx.defender, REASON_MISSED)

    defender = ctx.defender
    total_damage = 0
    landed = 0
    type_multiplier = None
    for hit_number in range(1, total_hits + 1):
        if defender.is_fainted():
            break
        defender, damage, type_multiplier = strike(ctx, defender)
        total_damage += damage
        landed += 1
        ctx.events.emit(
            BattleEventType.MULTI_HIT,
            pokemon=ctx.attacker.name,
            target=defender.name,
            move=ctx.move.name,
            hit_number=hit_number,
            total_hits=total_hits,
            damage=damage,
        )

    return EffectResult(hit=True, defender=defender, damage=total_damage, hits=landed, type_effectiveness=type_multiplier)
