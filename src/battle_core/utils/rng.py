import random
from typing import Optional

from src.battle_core.constants import DAMAGE_ROLL_MAX, DAMAGE_ROLL_MIN


class BattleRng:
    """The single random source for a battle.

    Every roll the engine and move effects make goes through one of these
    methods, so a seeded instance replays a battle exactly and tests can
    substitute a scripted subclass.
    """

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._random = random.Random(seed)

    def random(self) -> float:
        """Uniform float in [0, 1)."""
        return self._random.random()

    def percent_roll(self) -> float:
        """Uniform float in [0, 100) for accuracy and secondary-effect checks."""
        return self.random() * 100

    def damage_roll(self) -> float:
        """Damage random factor in [0.85, 1.0)."""
        return (self.random() * (DAMAGE_ROLL_MAX - DAMAGE_ROLL_MIN) + DAMAGE_ROLL_MIN) / 100

    def chance(self, probability: float) -> bool:
        return self.random() < probability

    def coin_flip(self) -> bool:
        return self.random() < 0.5

    def choice_index(self, count: int) -> int:
        """Return a random index in range [0, count), or -1 when count <= 0."""
        if count <= 0:
            return -1
        return min(int(self.random() * count), count - 1)
