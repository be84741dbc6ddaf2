"""Experience points to character level."""

from bisect import bisect_right
from typing import Tuple

# Cumulative experience required for each level; index 0 is level 1.
EXPERIENCE_THRESHOLDS: Tuple[int, ...] = (
    0, 1000, 4017, 8432, 14256, 21477, 30023, 39936, 51204, 63723,
    77563, 92713, 110144, 128384, 149867, 172144, 197203, 225938, 259311, 295287,
    336008, 382308, 432768, 490936, 557528, 631688, 714168, 804808, 905408, 1018908,
    1141108, 1272508, 1413908, 1570708, 1742908, 1930508, 2133508, 2351908, 2585708, 2834908,
    3099508, 3379508, 3674908, 3985708, 4311908, 4653508, 5010508, 5382908, 5770708, 6173908,
    6592508, 7026508, 7475908, 7940708, 8420908, 8916508, 9427508, 9953908, 10495708, 11052908,
    11625508, 12213508, 12816908, 13435708, 14069908, 14719508, 15384508, 16064908, 16760708, 17471908,
)  # fmt: skip

MAX_LEVEL = len(EXPERIENCE_THRESHOLDS)


def level_for_experience(experience: int) -> int:
    """
    Resolve the character level for an experience total.

    The level is the number of thresholds reached, so exactly hitting a
    threshold grants that level. Anything below 1000 (including negative
    values) is level 1; anything past the last threshold is MAX_LEVEL.
    """
    return max(1, bisect_right(EXPERIENCE_THRESHOLDS, experience))


def experience_to_next_level(experience: int) -> int:
    """Experience still missing for the next level, 0 at MAX_LEVEL."""
    level = level_for_experience(experience)
    if level >= MAX_LEVEL:
        return 0
    return EXPERIENCE_THRESHOLDS[level] - experience
