from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from src.battle_core.constants import DEFAULT_HEAL_FRACTION, DEFAULT_RECOIL_FRACTION, DEFAULT_STATUS_DURATION
from src.battle_core.enums import MoveCategory, MoveEffect, Stat, StatusCondition, Type, Weather


class EffectParams(BaseModel):
    """Parameter bag read by the effect handlers. Unused fields keep their defaults."""

    model_config = ConfigDict(frozen=True)

    status_effect: Optional[StatusCondition] = None
    status_duration: int = Field(default=DEFAULT_STATUS_DURATION, ge=1)
    stat: Optional[Stat] = None  # stat raised (self) or lowered (target)
    stage_change: int = Field(default=1, ge=1, le=12)  # magnitude; direction comes from the effect
    recoil_fraction: float = Field(default=DEFAULT_RECOIL_FRACTION, gt=0, le=1)
    heal_fraction: float = Field(default=DEFAULT_HEAL_FRACTION, gt=0, le=1)
    secondary_effect_chance: int = Field(default=0, ge=0, le=100)  # percent


class SubEffect(BaseModel):
    """One leg of a combo or weather-dependent move.

    Runs with the parent move's data, overridden by whatever is set here.
    """

    model_config = ConfigDict(frozen=True)

    effect: MoveEffect
    params: EffectParams = Field(default_factory=EffectParams)
    power: Optional[int] = Field(default=None, ge=0)
    type: Optional[Type] = None
    category: Optional[MoveCategory] = None

    @model_validator(mode="after")
    def _no_nested_composites(self) -> "SubEffect":
        if self.effect in (MoveEffect.COMBO, MoveEffect.WEATHER_DEPENDENT):
            raise ValueError(f"sub-effect cannot itself be {self.effect.name}")
        return self


class MoveDefinition(BaseModel):
    """Immutable catalog entry for a move. Behaviour is selected by `effect`."""

    model_config = ConfigDict(frozen=True)

    name: str
    power: int = Field(default=0, ge=0, le=255)
    pp: int = Field(ge=1, le=64)
    accuracy: Optional[int] = Field(default=100, ge=0, le=100)  # None/0 = never misses
    category: MoveCategory
    type: Type
    effect: MoveEffect = MoveEffect.HIT
    attack_stat: Optional[Stat] = None  # overrides the category default
    defense_stat: Optional[Stat] = None
    description: str = ""
    params: EffectParams = Field(default_factory=EffectParams)

    # Composite effects
    first_effect: Optional[SubEffect] = None
    second_effect: Optional[SubEffect] = None
    weather_effects: dict[Weather, SubEffect] = Field(default_factory=dict)
    default_effect: Optional[SubEffect] = None

    @model_validator(mode="after")
    def _composites_complete(self) -> "MoveDefinition":
        if self.effect == MoveEffect.COMBO and (self.first_effect is None or self.second_effect is None):
            raise ValueError(f"{self.name}: combo move needs first_effect and second_effect")
        if self.effect == MoveEffect.WEATHER_DEPENDENT and self.default_effect is None:
            raise ValueError(f"{self.name}: weather-dependent move needs default_effect")
        return self

    def derive(self, sub: SubEffect) -> "MoveDefinition":
        """Definition a sub-effect runs with: this move's data plus the sub-effect's overrides."""
        update: dict = {"effect": sub.effect, "params": sub.params}
        if sub.power is not None:
            update["power"] = sub.power
        if sub.type is not None:
            update["type"] = sub.type
        if sub.category is not None:
            update["category"] = sub.category
        return self.model_copy(update=update)


class MoveInstance(BaseModel):
    """A move learned by a combatant, with its remaining PP"""

    model_config = ConfigDict(frozen=True)

    move: MoveDefinition
    pp_remaining: int = Field(ge=0)

    @model_validator(mode="after")
    def _pp_in_range(self) -> "MoveInstance":
        if self.pp_remaining > self.move.pp:
            raise ValueError(f"{self.move.name}: pp_remaining {self.pp_remaining} exceeds max {self.move.pp}")
        return self

    @property
    def name(self) -> str:
        return self.move.name

    def use(self) -> "MoveInstance":
        return self.model_copy(update={"pp_remaining": max(0, self.pp_remaining - 1)})

    def restored(self) -> "MoveInstance":
        return self.model_copy(update={"pp_remaining": self.move.pp})
