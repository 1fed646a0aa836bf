from enum import Enum


class MoveCategory(str, Enum):
    """Damage class of a move; picks the default attack/defense stat pair."""

    PHYSICAL = "Physical"
    SPECIAL = "Special"
    STATUS = "Status"
