"""
Stat stage system

Stats are never modified directly during a battle. Moves shift a per-stat
stage in [-6, +6], and the effective value is derived on demand:

    effective = max(1, floor(base * numerator / denominator))

Attack, Defense, Special Attack, Special Defense and Speed use the 2-based
ratio table (x0.25 .. x4); Accuracy and Evasion use the 3-based table
(x0.33 .. x3).
"""

from pydantic import BaseModel, ConfigDict

from src.battle_core.constants import ACCURACY_STAGE_RATIOS, DEFAULT_STAT_STAGE, MAX_STAT_STAGE, MIN_STAT_STAGE, STAT_STAGE_RATIOS
from src.battle_core.enums import Stat
from src.battle_core.schema.combatant import Combatant, StatStages


class StatStageChange(BaseModel):
    """Result of apply_stat_stage_change"""

    model_config = ConfigDict(frozen=True)

    combatant: Combatant
    message: str
    old_stage: int
    new_stage: int

    @property
    def changed(self) -> bool:
        return self.old_stage != self.new_stage


def clamp_stage(stage: int) -> int:
    return max(MIN_STAT_STAGE, min(MAX_STAT_STAGE, stage))


def get_stage_ratio(stat: Stat, stage: int) -> tuple[int, int]:
    """(numerator, denominator) for a stat at the given stage."""
    table = ACCURACY_STAGE_RATIOS if stat.uses_accuracy_table else STAT_STAGE_RATIOS
    return table[clamp_stage(stage) - MIN_STAT_STAGE]


def get_stat_multiplier(stat: Stat, stage: int) -> float:
    numerator, denominator = get_stage_ratio(stat, stage)
    return numerator / denominator


def effective_stat(combatant: Combatant, stat: Stat) -> int:
    """
    Stat value with the combatant's stage applied.

    Args:
        combatant: The combatant to read
        stat: Which stat

    Returns:
        The base stat unchanged at stage 0, otherwise the scaled value floored
        and never below 1
    """
    base = combatant.base_stat(stat)
    stage = combatant.stat_stages.get(stat)
    if stage == DEFAULT_STAT_STAGE:
        return base
    numerator, denominator = get_stage_ratio(stat, stage)
    return max(1, (base * numerator) // denominator)


def _describe_change(name: str, stat: Stat, old_stage: int, new_stage: int, delta: int) -> str:
    if new_stage == old_stage:
        direction = "higher" if delta > 0 else "lower"
        return f"{name}'s {stat.display_name} won't go any {direction}!"

    magnitude = abs(new_stage - old_stage)
    verb = "rose!" if new_stage > old_stage else "fell!"
    if magnitude >= 3:
        return f"{name}'s {stat.display_name} drastically {verb}"
    if magnitude == 2:
        return f"{name}'s {stat.display_name} sharply {verb}"
    return f"{name}'s {stat.display_name} {verb}"


def apply_stat_stage_change(combatant: Combatant, stat: Stat, delta: int) -> StatStageChange:
    """Shift one stat stage by `delta`, clamped to [-6, +6].

    The input combatant is left untouched; the returned one carries its own
    StatStages record. When clamping absorbs the whole delta the stage is
    unchanged and the message says the stat won't go any higher / lower.
    """
    old_stage = combatant.stat_stages.get(stat)
    new_stage = clamp_stage(old_stage + delta)
    updated = combatant.model_copy(update={"stat_stages": combatant.stat_stages.with_stage(stat, new_stage)})
    return StatStageChange(
        combatant=updated,
        message=_describe_change(combatant.name, stat, old_stage, new_stage, delta),
        old_stage=old_stage,
        new_stage=new_stage,
    )


def reset_stat_stages(combatant: Combatant) -> Combatant:
    return combatant.model_copy(update={"stat_stages": StatStages()})


def stat_stages_summary(combatant: Combatant) -> str:
    """Short text listing every non-neutral stage, e.g. "Attack +2, Speed -1"."""
    changed = []
    for stat in Stat:
        stage = combatant.stat_stages.get(stat)
        if stage != DEFAULT_STAT_STAGE:
            sign = "+" if stage > 0 else ""
            changed.append(f"{stat.short_name} {sign}{stage}")
    if not changed:
        return "No stat changes"
    return ", ".join(changed)
