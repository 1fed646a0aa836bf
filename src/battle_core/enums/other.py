from enum import IntEnum


class Side(IntEnum):
    """Index of a combatant in BattleState.battlers"""

    PLAYER = 0
    OPPONENT = 1

    @property
    def opponent(self) -> "Side":
        return Side.OPPONENT if self == Side.PLAYER else Side.PLAYER


class Weather(IntEnum):
    CLEAR = 0
    SUN = 1
    RAIN = 2
    SANDSTORM = 3
    HAIL = 4
