from typing import Dict, Iterable

from src.battle_core.constants import (
    MSG_EFFECTIVE,
    MSG_NO_EFFECT,
    MSG_NOT_VERY_EFFECTIVE,
    MSG_SUPER_EFFECTIVE,
    TYPE_MUL_NO_EFFECT,
    TYPE_MUL_NORMAL,
    TYPE_MUL_NOT_EFFECTIVE,
    TYPE_MUL_SUPER_EFFECTIVE,
)
from src.battle_core.enums.type import Type

_X0 = TYPE_MUL_NO_EFFECT
_HALF = TYPE_MUL_NOT_EFFECTIVE
_X2 = TYPE_MUL_SUPER_EFFECTIVE

# Attacking type -> {defending type: multiplier}. Cells not listed are neutral.
# MYSTERY has no row, so it is neutral against every defender.
TYPE_EFFECTIVENESS_CHART: Dict[Type, Dict[Type, float]] = {
    Type.NORMAL: {Type.ROCK: _HALF, Type.GHOST: _X0, Type.STEEL: _HALF},
    Type.FIRE: {
        Type.FIRE: _HALF,
        Type.WATER: _HALF,
        Type.GRASS: _X2,
        Type.ICE: _X2,
        Type.BUG: _X2,
        Type.ROCK: _HALF,
        Type.DRAGON: _HALF,
        Type.STEEL: _X2,
    },
    Type.WATER: {Type.FIRE: _X2, Type.WATER: _HALF, Type.GRASS: _HALF, Type.GROUND: _X2, Type.ROCK: _X2, Type.DRAGON: _HALF},
    Type.ELECTRIC: {Type.WATER: _X2, Type.ELECTRIC: _HALF, Type.GRASS: _HALF, Type.GROUND: _X0, Type.FLYING: _X2, Type.DRAGON: _HALF},
    Type.GRASS: {
        Type.FIRE: _HALF,
        Type.WATER: _X2,
        Type.GRASS: _HALF,
        Type.POISON: _HALF,
        Type.GROUND: _X2,
        Type.FLYING: _HALF,
        Type.BUG: _HALF,
        Type.ROCK: _X2,
        Type.DRAGON: _HALF,
        Type.STEEL: _HALF,
    },
    Type.ICE: {
        Type.FIRE: _HALF,
        Type.WATER: _HALF,
        Type.GRASS: _X2,
        Type.ICE: _HALF,
        Type.GROUND: _X2,
        Type.FLYING: _X2,
        Type.DRAGON: _X2,
        Type.STEEL: _HALF,
    },
    Type.FIGHTING: {
        Type.NORMAL: _X2,
        Type.ICE: _X2,
        Type.POISON: _HALF,
        Type.FLYING: _HALF,
        Type.PSYCHIC: _HALF,
        Type.BUG: _HALF,
        Type.ROCK: _X2,
        Type.GHOST: _X0,
        Type.DARK: _X2,
        Type.STEEL: _X2,
        Type.FAIRY: _HALF,
    },
    Type.POISON: {Type.GRASS: _X2, Type.POISON: _HALF, Type.GROUND: _HALF, Type.ROCK: _HALF, Type.GHOST: _HALF, Type.STEEL: _X0, Type.FAIRY: _X2},
    Type.GROUND: {
        Type.FIRE: _X2,
        Type.ELECTRIC: _X2,
        Type.GRASS: _HALF,
        Type.POISON: _X2,
        Type.FLYING: _X0,
        Type.BUG: _HALF,
        Type.ROCK: _X2,
        Type.STEEL: _X2,
    },
    Type.FLYING: {Type.ELECTRIC: _HALF, Type.GRASS: _X2, Type.FIGHTING: _X2, Type.BUG: _X2, Type.ROCK: _HALF, Type.STEEL: _HALF},
    Type.PSYCHIC: {Type.FIGHTING: _X2, Type.POISON: _X2, Type.PSYCHIC: _HALF, Type.DARK: _X0, Type.STEEL: _HALF},
    Type.BUG: {
        Type.FIRE: _HALF,
        Type.GRASS: _X2,
        Type.FIGHTING: _HALF,
        Type.POISON: _HALF,
        Type.FLYING: _HALF,
        Type.PSYCHIC: _X2,
        Type.GHOST: _HALF,
        Type.DARK: _X2,
        Type.STEEL: _HALF,
        Type.FAIRY: _HALF,
    },
    Type.ROCK: {Type.FIRE: _X2, Type.ICE: _X2, Type.FIGHTING: _HALF, Type.GROUND: _HALF, Type.FLYING: _X2, Type.BUG: _X2, Type.STEEL: _HALF},
    Type.GHOST: {Type.NORMAL: _X0, Type.PSYCHIC: _X2, Type.GHOST: _X2, Type.DARK: _HALF},
    Type.DRAGON: {Type.DRAGON: _X2, Type.STEEL: _HALF, Type.FAIRY: _X0},
    Type.DARK: {Type.FIGHTING: _HALF, Type.PSYCHIC: _X2, Type.GHOST: _X2, Type.DARK: _HALF, Type.FAIRY: _HALF},
    Type.STEEL: {Type.FIRE: _HALF, Type.WATER: _HALF, Type.ELECTRIC: _HALF, Type.ICE: _X2, Type.ROCK: _X2, Type.STEEL: _HALF, Type.FAIRY: _X2},
    Type.FAIRY: {Type.FIRE: _HALF, Type.FIGHTING: _X2, Type.POISON: _HALF, Type.DRAGON: _X2, Type.DARK: _X2, Type.STEEL: _HALF},
}


class TypeEffectiveness:
    """Type matchup lookups over TYPE_EFFECTIVENESS_CHART"""

    @staticmethod
    def get_effectiveness(attack_type: Type, defending_type: Type) -> float:
        """Single-cell multiplier (0, 0.5, 1 or 2)."""
        return TYPE_EFFECTIVENESS_CHART.get(attack_type, {}).get(defending_type, TYPE_MUL_NORMAL)

    @staticmethod
    def calculate(attack_type: Type, defender_types: Iterable[Type]) -> float:
        """
        Combined multiplier against a defender with one or two types.

        Args:
            attack_type: Type of the incoming move
            defender_types: The defender's types; a repeated type counts once

        Returns:
            Product of the per-type multipliers (0 when any type is immune).
            An attack type with no chart row is neutral.
        """
        if attack_type not in TYPE_EFFECTIVENESS_CHART:
            return TYPE_MUL_NORMAL

        multiplier = TYPE_MUL_NORMAL
        for defending_type in dict.fromkeys(defender_types):
            multiplier *= TypeEffectiveness.get_effectiveness(attack_type, defending_type)
        return multiplier

    @staticmethod
    def is_immune(attack_type: Type, defender_types: Iterable[Type]) -> bool:
        return TypeEffectiveness.calculate(attack_type, defender_types) == TYPE_MUL_NO_EFFECT

    @staticmethod
    def is_super_effective(attack_type: Type, defender_types: Iterable[Type]) -> bool:
        return TypeEffectiveness.calculate(attack_type, defender_types) > TYPE_MUL_NORMAL

    @staticmethod
    def get_effectiveness_description(multiplier: float) -> str:
        if multiplier > TYPE_MUL_NORMAL:
            return MSG_SUPER_EFFECTIVE
        if multiplier == TYPE_MUL_NO_EFFECT:
            return MSG_NO_EFFECT
        if multiplier < TYPE_MUL_NORMAL:
            return MSG_NOT_VERY_EFFECTIVE
        return MSG_EFFECTIVE
