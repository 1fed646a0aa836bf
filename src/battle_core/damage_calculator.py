"""
Damage, accuracy and HP primitives shared by every move effect.

Damage formula (stage-aware, type-aware):

    base   = ((2 * level / 5 + 2) * power * (atk / def)) / 50 + 2
    damage = round_half_up(base * random[0.85, 1.0) * stab * type_multiplier)

`atk` / `def` are effective (stage-adjusted) stats picked by category unless
the move overrides either side. Damage is at least 1 unless the type
multiplier is 0, in which case it is exactly 0.

Accuracy:

    final = accuracy * acc_ratio(attacker accuracy stage) * acc_ratio(-defender evasion stage)
    hit   = percent_roll <= final        (inclusive)

A move with no accuracy always hits.
"""

import math
from typing import Optional

from pydantic import BaseModel, ConfigDict

from src.battle_core.constants import MIN_DAMAGE, STAB_MULTIPLIER, TYPE_MUL_NO_EFFECT
from src.battle_core.enums import BattleEventType, MoveCategory, Stat
from src.battle_core.event_bus import EventBus
from src.battle_core.schema.battle_move import MoveDefinition
from src.battle_core.schema.combatant import Combatant, StatusEffectRecord
from src.battle_core.stat_stages import effective_stat, get_stat_multiplier
from src.battle_core.type_effectiveness import TypeEffectiveness
from src.battle_core.utils.rng import BattleRng


class DamageResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    damage: int
    stab: float
    type_multiplier: float
    random_factor: float


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def resolve_stats(move: MoveDefinition) -> tuple[Stat, Stat]:
    """Attack/defense stat pair for a move: category default unless overridden."""
    if move.category == MoveCategory.PHYSICAL:
        attack_stat, defense_stat = Stat.ATTACK, Stat.DEFENSE
    else:
        attack_stat, defense_stat = Stat.SPECIAL_ATTACK, Stat.SPECIAL_DEFENSE
    return move.attack_stat or attack_stat, move.defense_stat or defense_stat


def compute_base_damage(level: int, power: int, attack: int, defense: int) -> float:
    return ((level * 2 / 5) + 2) * power * (attack / defense) / 50 + 2


class DamageCalculator:
    """Accuracy and damage rolls plus the HP/status mutations effects build on.

    Holds the battle's random source and event bus; every method that changes
    a combatant returns a new one.
    """

    def __init__(self, rng: BattleRng, events: EventBus):
        self.rng = rng
        self.events = events

    # =========================================================================
    # ACCURACY
    # =========================================================================

    def final_accuracy(self, attacker: Combatant, defender: Combatant, move: MoveDefinition) -> float:
        accuracy_mod = get_stat_multiplier(Stat.ACCURACY, attacker.stat_stages.accuracy)
        evasion_mod = get_stat_multiplier(Stat.EVASION, -defender.stat_stages.evasion)
        return move.accuracy * accuracy_mod * evasion_mod

    def accuracy_check(self, attacker: Combatant, defender: Combatant, move: MoveDefinition) -> bool:
        if not move.accuracy:
            return True

        final_accuracy = self.final_accuracy(attacker, defender, move)
        roll = self.rng.percent_roll()
        hit = roll <= final_accuracy
        if not hit:
            self.events.emit(
                BattleEventType.MOVE_MISSED,
                pokemon=attacker.name,
                target=defender.name,
                move=move.name,
                roll=roll,
                final_accuracy=final_accuracy,
            )
        return hit

    # =========================================================================
    # DAMAGE
    # =========================================================================

    def calculate_damage(self, attacker: Combatant, defender: Combatant, move: MoveDefinition) -> DamageResult:
        """
        Roll damage for one strike of `move`.

        Args:
            attacker: Combatant using the move (stages applied)
            defender: Combatant receiving it (stages applied)
            move: Definition supplying power, type, category and stat overrides

        Returns:
            DamageResult with the rolled damage and the modifiers used
        """
        attack_stat, defense_stat = resolve_stats(move)
        attack = effective_stat(attacker, attack_stat)
        defense = effective_stat(defender, defense_stat)

        stab = STAB_MULTIPLIER if move.type in attacker.types else 1.0
        type_multiplier = TypeEffectiveness.calculate(move.type, defender.types)
        random_factor = self.rng.damage_roll()

        base_damage = compute_base_damage(attacker.level, move.power, attack, defense)
        if type_multiplier == TYPE_MUL_NO_EFFECT:
            damage = 0
        else:
            damage = max(MIN_DAMAGE, round_half_up(base_damage * random_factor * stab * type_multiplier))

        result = DamageResult(damage=damage, stab=stab, type_multiplier=type_multiplier, random_factor=random_factor)
        self.events.emit(
            BattleEventType.DAMAGE_CALCULATED,
            attacker=attacker.name,
            defender=defender.name,
            move=move.name,
            damage=damage,
            stab=stab,
            type_multiplier=type_multiplier,
        )
        return result

    def apply_damage(self, combatant: Combatant, amount: int, physical: bool = False) -> Combatant:
        """Subtract `amount` HP (floored at 0). HP lost to physical hits is remembered for Counter."""
        remaining = max(0, combatant.hp - amount)
        update: dict = {"hp": remaining}
        if physical and combatant.hp > remaining:
            update["last_received_physical_damage"] = combatant.hp - remaining
        damaged = combatant.model_copy(update=update)
        self.events.emit(
            BattleEventType.DAMAGE_APPLIED,
            pokemon=damaged.name,
            damage_amount=amount,
            remaining_hp=damaged.hp,
            max_hp=damaged.max_hp,
        )
        return damaged

    # =========================================================================
    # HEALING / STATUS
    # =========================================================================

    def apply_healing(self, combatant: Combatant, amount: int, source: str, move_name: Optional[str] = None) -> tuple[Combatant, int]:
        """Restore up to `amount` HP, capped at max. Returns (combatant, amount actually restored)."""
        healed = combatant.with_hp(combatant.hp + amount)
        actual = healed.hp - combatant.hp
        self.events.emit(
            BattleEventType.HEALING_APPLIED,
            pokemon=healed.name,
            heal_amount=actual,
            source=source,
            move=move_name,
        )
        return healed, actual

    def apply_status_effect(self, combatant: Combatant, status_effect: str, duration: int) -> Combatant:
        """Add (or overwrite) a named status effect with a fresh duration."""
        status_effects = dict(combatant.status_effects)
        status_effects[status_effect] = StatusEffectRecord(applied=True, duration=duration)
        afflicted = combatant.model_copy(update={"status_effects": status_effects})
        self.events.emit(
            BattleEventType.STATUS_EFFECT_APPLIED,
            pokemon=afflicted.name,
            status_effect=status_effect,
            duration=duration,
        )
        return afflicted
