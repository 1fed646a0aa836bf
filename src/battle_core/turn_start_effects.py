"""
Turn-start status processing

Runs once per turn, before either side acts:
- Paralysis: with PARALYSIS_SKIP_CHANCE the combatant's next action is skipped
- Every applied status effect loses one turn of duration and is removed at 0
"""

import logging

from src.battle_core.constants import PARALYSIS_SKIP_CHANCE
from src.battle_core.enums import BattleEventType, Side, StatusCondition
from src.battle_core.event_bus import EventBus
from src.battle_core.schema.battle_state import BattleState
from src.battle_core.schema.combatant import Combatant
from src.battle_core.utils.rng import BattleRng

logger = logging.getLogger(__name__)


class TurnStartEffectsProcessor:
    """Applies per-turn status triggers and ticks status durations for both sides"""

    def __init__(self, rng: BattleRng, events: EventBus):
        self.rng = rng
        self.events = events

    def process(self, state: BattleState) -> BattleState:
        for side in Side:
            combatant = state.battler(side)
            if combatant.status_effects:
                state = state.with_battler(side, self._process_combatant(combatant))
        return state

    def _process_combatant(self, combatant: Combatant) -> Combatant:
        skip_turn = combatant.skip_turn
        status_effects = {}

        for name, record in combatant.status_effects.items():
            if not record.applied:
                status_effects[name] = record
                continue

            if name == StatusCondition.PARALYSIS.value and self.rng.chance(PARALYSIS_SKIP_CHANCE):
                skip_turn = True
                self.events.emit(
                    BattleEventType.STATUS_EFFECT_TRIGGERED,
                    pokemon=combatant.name,
                    status_effect=name,
                    effect="Skip Turn",
                )

            remaining = record.duration - 1
            if remaining <= 0:
                logger.debug("%s is no longer affected by %s", combatant.name, name)
                self.events.emit(BattleEventType.STATUS_EFFECT_REMOVED, pokemon=combatant.name, status_effect=name)
            else:
                status_effects[name] = record.model_copy(update={"duration": remaining})

        return combatant.model_copy(update={"skip_turn": skip_turn, "status_effects": status_effects})
