"""
Pure computations over profile data.

Nothing in this package performs I/O.
"""

from .experience import (
    EXPERIENCE_THRESHOLDS,
    MAX_LEVEL,
    experience_to_next_level,
    level_for_experience,
)
from .stats import (
    COUNTER_RULES,
    Accumulation,
    CounterRule,
    PlayerStats,
    aggregate,
    match_rule,
    stats_from_game_stats,
)

__all__ = [
    "EXPERIENCE_THRESHOLDS",
    "MAX_LEVEL",
    "experience_to_next_level",
    "level_for_experience",
    "COUNTER_RULES",
    "Accumulation",
    "CounterRule",
    "PlayerStats",
    "aggregate",
    "match_rule",
    "stats_from_game_stats",
]
