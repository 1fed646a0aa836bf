from pydantic import BaseModel, ConfigDict, Field

from src.battle_core.enums import Type


class SpeciesInfo(BaseModel):
    """Base stats and typing for a species"""

    model_config = ConfigDict(frozen=True)

    base_hp: int = Field(ge=1, le=255)
    base_attack: int = Field(ge=1, le=255)
    base_defense: int = Field(ge=1, le=255)
    base_special_attack: int = Field(ge=1, le=255)
    base_special_defense: int = Field(ge=1, le=255)
    base_speed: int = Field(ge=1, le=255)

    types: list[Type] = Field(min_length=1, max_length=2)
    default_moves: list[str] = Field(default_factory=list)  # used when no moves are requested


class LearnsetEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    level: int = Field(ge=1, le=100)
    move: str
