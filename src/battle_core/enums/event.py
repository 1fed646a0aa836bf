from enum import Enum


class BattleEventType(str, Enum):
    """Event tags published on the EventBus"""

    BATTLE_STARTED = "battle:started"
    BATTLE_ENDED = "battle:ended"
    TURN_STARTED = "turn:started"
    SPEED_COMPARISON = "speed:comparison"

    MOVE_SELECTED = "move:selected"
    MOVE_USED = "move:used"
    MOVE_MISSED = "move:missed"
    MOVE_FAILED = "move:failed"
    PP_UPDATED = "pp:updated"
    METRONOME_SELECTED = "metronome:selected"

    DAMAGE_CALCULATED = "damage:calculated"
    DAMAGE_APPLIED = "damage:applied"
    HEALING_APPLIED = "healing:applied"
    MULTI_HIT = "move:multi-hit"
    RECOIL_DAMAGE = "damage:recoil"
    COUNTER_TRIGGERED = "move:counter"

    STATUS_EFFECT_APPLIED = "status:applied"
    STATUS_EFFECT_REMOVED = "status:removed"
    STATUS_EFFECT_TRIGGERED = "status:triggered"
    STAT_BOOSTED = "stat:boosted"
    STAT_LOWERED = "stat:lowered"

    POKEMON_FAINTED = "pokemon:fainted"
