from typing import Any

from pydantic import BaseModel, ConfigDict

from src.battle_core.damage_calculator import DamageCalculator
from src.battle_core.event_bus import EventBus
from src.battle_core.schema.battle_move import MoveDefinition
from src.battle_core.schema.battle_state import BattleState
from src.battle_core.schema.combatant import Combatant
from src.battle_core.utils.rng import BattleRng


class MoveContext(BaseModel):
    """Everything an effect handler may read while resolving one move use"""

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    attacker: Combatant
    defender: Combatant
    move: MoveDefinition
    battle_state: BattleState
    catalog: dict[str, MoveDefinition]  # for effects that redirect to another move
    calculator: DamageCalculator

    @property
    def rng(self) -> BattleRng:
        return self.calculator.rng

    @property
    def events(self) -> EventBus:
        return self.calculator.events

    @property
    def params(self):
        return self.move.params

    def with_updates(self, **update: Any) -> "MoveContext":
        return self.model_copy(update=update)
