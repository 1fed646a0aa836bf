from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from src.battle_core.enums import Side, Weather
from src.battle_core.schema.combatant import Combatant


class BattleState(BaseModel):
    """Snapshot of a single battle between two combatants.

    Every engine transition returns a new BattleState; callers may keep any
    previous snapshot and it will not change underneath them.
    """

    model_config = ConfigDict(frozen=True)

    battlers: list[Combatant] = Field(min_length=2, max_length=2)  # indexed by Side
    turn: int = Field(default=1, ge=1)
    battle_over: bool = False
    winner: Optional[Side] = None
    weather: Weather = Weather.CLEAR

    def battler(self, side: Side) -> Combatant:
        return self.battlers[side]

    @property
    def player(self) -> Combatant:
        return self.battlers[Side.PLAYER]

    @property
    def opponent(self) -> Combatant:
        return self.battlers[Side.OPPONENT]

    def with_battler(self, side: Side, combatant: Combatant) -> "BattleState":
        battlers = list(self.battlers)
        battlers[side] = combatant
        return self.model_copy(update={"battlers": battlers})
