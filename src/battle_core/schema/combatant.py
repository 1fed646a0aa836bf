from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from src.battle_core.constants import DEFAULT_STAT_STAGE, MAX_LEVEL, MAX_STAT_STAGE, MIN_LEVEL, MIN_STAT_STAGE
from src.battle_core.enums import Stat, Type
from src.battle_core.schema.battle_move import MoveInstance


class StatStages(BaseModel):
    """Per-stat stage modifiers (-6 to +6, 0 = neutral)"""

    model_config = ConfigDict(frozen=True)

    attack: int = Field(default=DEFAULT_STAT_STAGE, ge=MIN_STAT_STAGE, le=MAX_STAT_STAGE)
    defense: int = Field(default=DEFAULT_STAT_STAGE, ge=MIN_STAT_STAGE, le=MAX_STAT_STAGE)
    special_attack: int = Field(default=DEFAULT_STAT_STAGE, ge=MIN_STAT_STAGE, le=MAX_STAT_STAGE)
    special_defense: int = Field(default=DEFAULT_STAT_STAGE, ge=MIN_STAT_STAGE, le=MAX_STAT_STAGE)
    speed: int = Field(default=DEFAULT_STAT_STAGE, ge=MIN_STAT_STAGE, le=MAX_STAT_STAGE)
    accuracy: int = Field(default=DEFAULT_STAT_STAGE, ge=MIN_STAT_STAGE, le=MAX_STAT_STAGE)
    evasion: int = Field(default=DEFAULT_STAT_STAGE, ge=MIN_STAT_STAGE, le=MAX_STAT_STAGE)

    def get(self, stat: Stat) -> int:
        return getattr(self, stat.value)

    def with_stage(self, stat: Stat, stage: int) -> "StatStages":
        # Validated copy so an out-of-range stage fails loudly
        return StatStages(**{**self.model_dump(), stat.value: stage})

    def is_neutral(self) -> bool:
        return all(value == DEFAULT_STAT_STAGE for value in self.model_dump().values())


class StatusEffectRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    applied: bool = True
    duration: int  # turns remaining


class Combatant(BaseModel):
    """A creature taking part in a battle. Immutable; transitions build new instances."""

    model_config = ConfigDict(frozen=True)

    name: str
    species: str
    level: int = Field(ge=MIN_LEVEL, le=MAX_LEVEL)

    hp: int = Field(ge=0)
    max_hp: int = Field(ge=1)
    attack: int = Field(ge=1)
    defense: int = Field(ge=1)
    special_attack: int = Field(ge=1)
    special_defense: int = Field(ge=1)
    speed: int = Field(ge=1)
    accuracy: int = Field(default=100, ge=1)
    evasion: int = Field(default=100, ge=1)

    types: list[Type] = Field(min_length=1, max_length=2)
    moves: dict[str, MoveInstance] = Field(default_factory=dict)  # keyed "Move 1".."Move 4"

    # Battle-scoped state
    stat_stages: StatStages = Field(default_factory=StatStages)
    status_effects: dict[str, StatusEffectRecord] = Field(default_factory=dict)
    skip_turn: bool = False
    last_received_physical_damage: int = Field(default=0, ge=0)

    @model_validator(mode="after")
    def _hp_within_max(self) -> "Combatant":
        if self.hp > self.max_hp:
            raise ValueError(f"{self.name}: hp {self.hp} exceeds max_hp {self.max_hp}")
        return self

    def is_fainted(self) -> bool:
        return self.hp <= 0

    def base_stat(self, stat: Stat) -> int:
        return getattr(self, stat.value)

    def get_move(self, move_key: str) -> Optional[MoveInstance]:
        return self.moves.get(move_key)

    def has_status(self, name: str) -> bool:
        record = self.status_effects.get(name)
        return record is not None and record.applied

    def with_hp(self, hp: int) -> "Combatant":
        return self.model_copy(update={"hp": max(0, min(self.max_hp, hp))})
