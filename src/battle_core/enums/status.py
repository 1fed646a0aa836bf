from enum import Enum


class StatusCondition(str, Enum):
    """Named status effects. Values double as keys in Combatant.status_effects."""

    PARALYSIS = "Paralysis"
    BURN = "Burn"
