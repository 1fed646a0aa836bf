import logging
from typing import Callable, Optional

from src.battle_core.constants import MSG_EFFECTIVE, REASON_FAINTED, REASON_NO_PP, REASON_STATUS_EFFECT
from src.battle_core.enums import BattleEventType
from src.battle_core.event_bus import WILDCARD, BattleEvent, EventBus
from src.battle_core.type_effectiveness import TypeEffectiveness

logger = logging.getLogger(__name__)


def _move_used(data: dict) -> Optional[str]:
    if data.get("failed"):
        reason = data.get("reason")
        if reason == REASON_FAINTED:
            return f"{data['pokemon']} is unable to attack!"
        if reason == REASON_NO_PP:
            return f"{data['pokemon']} tried to use {data.get('move')}, but it has no PP left!"
        if reason == REASON_STATUS_EFFECT:
            return f"{data['pokemon']} is unable to move due to status!"
        return f"{data['pokemon']} couldn't use {data.get('move_key')}!"
    return f"{data['pokemon']} used {data.get('move')}!"


def _damage_calculated(data: dict) -> Optional[str]:
    description = TypeEffectiveness.get_effectiveness_description(data.get("type_multiplier", 1.0))
    if description == MSG_EFFECTIVE:
        return None
    return f"It's {description}!"


_FORMATTERS: dict[BattleEventType, Callable[[dict], Optional[str]]] = {
    BattleEventType.BATTLE_STARTED: lambda d: f"Battle started: {d['player']} vs {d['opponent']}!",
    BattleEventType.TURN_STARTED: lambda d: f"--- Turn {d['turn']} ---",
    BattleEventType.SPEED_COMPARISON: lambda d: f"{d['first_attacker']} moves first!",
    BattleEventType.MOVE_USED: _move_used,
    BattleEventType.MOVE_MISSED: lambda d: f"{d['pokemon']}'s attack missed!",
    BattleEventType.MOVE_FAILED: lambda d: f"{d['pokemon']}'s {d['move']} failed!",
    BattleEventType.DAMAGE_CALCULATED: _damage_calculated,
    BattleEventType.DAMAGE_APPLIED: lambda d: f"{d['pokemon']} took {d['damage_amount']} damage ({d['remaining_hp']}/{d['max_hp']} HP).",
    BattleEventType.HEALING_APPLIED: lambda d: f"{d['pokemon']} restored {d['heal_amount']} HP.",
    BattleEventType.MULTI_HIT: lambda d: f"Hit {d['hit_number']}!",
    BattleEventType.RECOIL_DAMAGE: lambda d: f"{d['pokemon']} is damaged by recoil ({d['recoil_damage']})!",
    BattleEventType.COUNTER_TRIGGERED: lambda d: f"{d['pokemon']} countered for {d['counter_damage']} damage!",
    BattleEventType.METRONOME_SELECTED: lambda d: f"Waggling a finger let it use {d['selected_move']}!",
    BattleEventType.STATUS_EFFECT_APPLIED: lambda d: f"{d['pokemon']} is affected by {d['status_effect']}!",
    BattleEventType.STATUS_EFFECT_REMOVED: lambda d: f"{d['pokemon']} is no longer affected by {d['status_effect']}.",
    BattleEventType.STATUS_EFFECT_TRIGGERED: lambda d: f"{d['pokemon']} is affected by {d['status_effect']} and can't move!",
    BattleEventType.STAT_BOOSTED: lambda d: d["message"],
    BattleEventType.STAT_LOWERED: lambda d: d["message"],
    BattleEventType.POKEMON_FAINTED: lambda d: f"{d['pokemon']} fainted!",
    BattleEventType.BATTLE_ENDED: lambda d: f"{d['winner']} wins the battle!",
}


def format_event(event: BattleEvent) -> Optional[str]:
    """Human-readable line for an event, or None for events with no text."""
    formatter = _FORMATTERS.get(event.type)
    if formatter is None:
        return None
    return formatter(event.data)


class BattleEventLogger:
    """Subscriber that renders every battle event as a log line.

    Rendered lines are kept in `messages` for callers that display a battle
    log; each line is also written to the module logger at INFO.
    """

    def __init__(self, events: EventBus, level: int = logging.INFO):
        self.level = level
        self.messages: list[str] = []
        self._unsubscribe = events.subscribe(WILDCARD, self.handle)

    def handle(self, event: BattleEvent) -> None:
        line = format_event(event)
        if line is None:
            logger.debug("%s %s", event.type.value, event.data)
            return
        self.messages.append(line)
        logger.log(self.level, line)

    def clear(self) -> None:
        self.messages.clear()

    def detach(self) -> None:
        self._unsubscribe()
