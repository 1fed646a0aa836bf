from enum import IntEnum


class MoveEffect(IntEnum):
    """Closed set of effect kinds a move can carry.

    Every member must have exactly one handler registered in
    move_effects.effect_applier.EFFECT_HANDLERS.
    """

    HIT = 0  # standard accuracy-checked damage
    ALWAYS_HIT = 1  # damage with no accuracy check
    STATUS = 2  # apply a status effect to the target
    STAT_BOOST_SELF = 3
    STAT_LOWER_TARGET = 4
    MULTI_HIT = 5  # 2-5 strikes, one accuracy check
    RECOIL = 6
    SECONDARY_EFFECT = 7  # damage plus a chance-based rider
    VAMPIRIC = 8  # damage, attacker heals a fraction
    COMBO = 9  # two sub-effects in sequence
    WEATHER_DEPENDENT = 10
    COUNTER = 11
    METRONOME = 12
    HEAL = 13
