# =============================================================================
# STAT STAGE CONSTANTS
# =============================================================================
MIN_STAT_STAGE = -6
DEFAULT_STAT_STAGE = 0
MAX_STAT_STAGE = 6

# Ratios indexed by stage + 6, applied as (base * numerator) / denominator
STAT_STAGE_RATIOS = [
    (2, 8),  # -6, MIN_STAT_STAGE
    (2, 7),  # -5
    (2, 6),  # -4
    (2, 5),  # -3
    (2, 4),  # -2
    (2, 3),  # -1
    (2, 2),  #  0, DEFAULT_STAT_STAGE
    (3, 2),  # +1
    (4, 2),  # +2
    (5, 2),  # +3
    (6, 2),  # +4
    (7, 2),  # +5
    (8, 2),  # +6, MAX_STAT_STAGE
]

# Accuracy and evasion use the finer 3-based table
ACCURACY_STAGE_RATIOS = [
    (3, 9),  # -6
    (3, 8),  # -5
    (3, 7),  # -4
    (3, 6),  # -3
    (3, 5),  # -2
    (3, 4),  # -1
    (3, 3),  #  0
    (4, 3),  # +1
    (5, 3),  # +2
    (6, 3),  # +3
    (7, 3),  # +4
    (8, 3),  # +5
    (9, 3),  # +6
]

# =============================================================================
# TYPE EFFECTIVENESS MULTIPLIERS
# =============================================================================
TYPE_MUL_NO_EFFECT = 0.0
TYPE_MUL_NOT_EFFECTIVE = 0.5
TYPE_MUL_NORMAL = 1.0
TYPE_MUL_SUPER_EFFECTIVE = 2.0

MSG_SUPER_EFFECTIVE = "super effective"
MSG_NOT_VERY_EFFECTIVE = "not very effective"
MSG_NO_EFFECT = "no effect"
MSG_EFFECTIVE = "effective"

# =============================================================================
# DAMAGE
# =============================================================================
STAB_MULTIPLIER = 1.5
DAMAGE_ROLL_MIN = 85  # percent
DAMAGE_ROLL_MAX = 100  # percent
MIN_DAMAGE = 1

# Multi-hit distribution: hit count -> probability
MULTI_HIT_DISTRIBUTION = {2: 0.375, 3: 0.375, 4: 0.125, 5: 0.125}

DEFAULT_RECOIL_FRACTION = 0.25
DEFAULT_HEAL_FRACTION = 0.5
COUNTER_DAMAGE_MULTIPLIER = 2

# =============================================================================
# STATUS EFFECTS
# =============================================================================
DEFAULT_STATUS_DURATION = 3
PARALYSIS_SKIP_CHANCE = 0.25

# =============================================================================
# POKEMON LIMITS
# =============================================================================
MIN_LEVEL = 1
MAX_LEVEL = 100
MAX_MON_MOVES = 4
MOVE_SLOT_KEY_FORMAT = "Move {index}"

# Stat formula offsets
HP_STAT_OFFSET = 10  # plus level
OTHER_STAT_OFFSET = 5

# =============================================================================
# FAILURE REASONS
# =============================================================================
REASON_STATUS_EFFECT = "status-effect"
REASON_FAINTED = "fainted"
REASON_NO_PP = "no-pp"
REASON_UNKNOWN_MOVE = "unknown-move"
REASON_NO_DAMAGE_TO_COUNTER = "no-damage-to-counter"
REASON_MISSED = "missed"


def move_slot_key(index: int) -> str:
    """Slot key for the zero-based move index ("Move 1" .. "Move 4")."""
    return MOVE_SLOT_KEY_FORMAT.format(index=index + 1)
