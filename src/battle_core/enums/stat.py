from enum import Enum


class Stat(str, Enum):
    """Battle stats that carry a stage. Values match Combatant field names."""

    ATTACK = "attack"
    DEFENSE = "defense"
    SPECIAL_ATTACK = "special_attack"
    SPECIAL_DEFENSE = "special_defense"
    SPEED = "speed"
    ACCURACY = "accuracy"
    EVASION = "evasion"

    @property
    def display_name(self) -> str:
        return STAT_DISPLAY_NAMES[self]

    @property
    def short_name(self) -> str:
        return STAT_SHORT_NAMES[self]

    @property
    def uses_accuracy_table(self) -> bool:
        return self in (Stat.ACCURACY, Stat.EVASION)


STAT_DISPLAY_NAMES = {
    Stat.ATTACK: "Attack",
    Stat.DEFENSE: "Defense",
    Stat.SPECIAL_ATTACK: "Special Attack",
    Stat.SPECIAL_DEFENSE: "Special Defense",
    Stat.SPEED: "Speed",
    Stat.ACCURACY: "Accuracy",
    Stat.EVASION: "Evasion",
}

STAT_SHORT_NAMES = {
    Stat.ATTACK: "Attack",
    Stat.DEFENSE: "Defense",
    Stat.SPECIAL_ATTACK: "Sp.Atk",
    Stat.SPECIAL_DEFENSE: "Sp.Def",
    Stat.SPEED: "Speed",
    Stat.ACCURACY: "Accuracy",
    Stat.EVASION: "Evasion",
}
