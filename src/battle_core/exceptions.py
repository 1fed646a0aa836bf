"""
Exception hierarchy for the battle core.

Only configuration problems raise: asking the catalog or the factory for a
species or move that does not exist. Anticipated in-battle conditions (a
fainted actor, an exhausted move, a counter with nothing to counter) are
reported through failed EffectResults and failure events instead.
"""

from typing import Any, Optional


class BattleCoreError(Exception):
    """Base exception for all battle core errors."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            detail_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({detail_str})"
        return self.message


class ConfigurationError(BattleCoreError):
    """Raised when a battle is set up from data that does not exist."""


class UnknownSpeciesError(ConfigurationError):
    def __init__(self, species: str):
        super().__init__(f"Unknown Pokémon species: {species}")
        self.species = species


class UnknownMoveError(ConfigurationError):
    def __init__(self, move_name: str):
        super().__init__(f"Unknown move: {move_name}")
        self.move_name = move_name
