from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from src.battle_core.enums import StatusCondition
from src.battle_core.schema.combatant import Combatant


class EffectResult(BaseModel):
    """Outcome of one move effect.

    `attacker` / `defender` are only set when the effect produced an updated
    combatant; the engine keeps the previous one otherwise.
    """

    model_config = ConfigDict(frozen=True)

    hit: bool
    attacker: Optional[Combatant] = None
    defender: Optional[Combatant] = None
    damage: int = Field(default=0, ge=0)

    # Annotations
    type_effectiveness: Optional[float] = None
    heal_amount: Optional[int] = None
    hits: Optional[int] = None  # multi-hit: strikes actually landed
    status_effect_applied: Optional[StatusCondition] = None
    secondary_effect_triggered: bool = False
    recoil_damage: Optional[int] = None
    message: Optional[str] = None
    failure_reason: Optional[str] = None

    @classmethod
    def miss(cls, defender: Optional[Combatant] = None, reason: Optional[str] = None) -> "EffectResult":
        return cls(hit=False, defender=defender, damage=0, failure_reason=reason)
