"""
Raid statistics aggregation.

Profiles report lifetime activity as a flat list of counters whose meaning is
encoded in their key path (``["Sessions", "Pmc"]``, ``["ExitStatus",
"Survived", "Pmc"]``, ``["Kills"]`` ...). This module turns that list into a
small set of well-defined numbers.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, Optional, Sequence, Tuple

import structlog

from ..core.tarkov_api.models import CounterItem, GameStats
from ..utils.statistics import safe_divide, safe_percentage

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class PlayerStats:
    """Aggregated raid statistics for one side of a profile."""

    sessions: int = 0
    survived: int = 0
    kills: int = 0
    deaths: int = 0
    total_in_game_time: int = 0

    @property
    def kd(self) -> float:
        """Kills per death; the raw kill count when there are no deaths."""
        return safe_divide(self.kills, self.deaths, default=self.kills)

    @property
    def survival_rate(self) -> float:
        """Survived raids as a percentage of sessions, 0 without sessions."""
        return safe_percentage(self.survived, self.sessions)

    @property
    def avg_session_time(self) -> float:
        """Mean seconds per session, 0 without sessions."""
        return safe_divide(self.total_in_game_time, self.sessions)


class Accumulation(str, Enum):
    """How a matching counter changes its target field."""

    SUM = "sum"
    REPLACE = "replace"


@dataclass(frozen=True)
class CounterRule:
    """Maps counters whose key satisfies ``matches`` onto a PlayerStats field."""

    name: str
    field: str
    matches: Callable[[Sequence[str]], bool]
    accumulation: Accumulation


def _first_is(head: str) -> Callable[[Sequence[str]], bool]:
    return lambda key: len(key) > 0 and key[0] == head


def _exactly(*expected: str) -> Callable[[Sequence[str]], bool]:
    return lambda key: tuple(key) == expected


# Evaluated top to bottom; a counter is consumed by the first rule it matches.
# "Sessions" sums every sub-keyed variant too (["Sessions", "Pmc"], ...), which
# is how the service's own figures are derived.
COUNTER_RULES: Tuple[CounterRule, ...] = (
    CounterRule("sessions", "sessions", _first_is("Sessions"), Accumulation.SUM),
    CounterRule(
        "survived",
        "survived",
        lambda key: _first_is("ExitStatus")(key) and "Survived" in key,
        Accumulation.SUM,
    ),
    CounterRule("kills", "kills", _exactly("Kills"), Accumulation.REPLACE),
    CounterRule("deaths", "deaths", _exactly("Deaths"), Accumulation.REPLACE),
)


def match_rule(key: Sequence[str]) -> Optional[CounterRule]:
    """Return the first rule matching ``key``, or None when it is ignored."""
    for rule in COUNTER_RULES:
        if rule.matches(key):
            return rule
    return None


def aggregate(counters: Iterable[CounterItem], total_time: int) -> PlayerStats:
    """
    Fold a counter list into PlayerStats.

    Summed fields are order independent. Replaced fields take the value of the
    last matching counter scanned.

    Args:
        counters: Counter items from ``overAllCounters.Items``
        total_time: Seconds spent in raids

    Returns:
        PlayerStats for the counters
    """
    totals = {rule.field: 0 for rule in COUNTER_RULES}
    ignored = 0

    for item in counters:
        rule = match_rule(item.key)
        if rule is None:
            ignored += 1
            continue
        if rule.accumulation is Accumulation.SUM:
            totals[rule.field] += item.value
        else:
            totals[rule.field] = item.value

    logger.debug("Aggregated counters", ignored=ignored, **totals)
    return PlayerStats(total_in_game_time=total_time, **totals)


def stats_from_game_stats(game_stats: Optional[GameStats]) -> PlayerStats:
    """Aggregate a profile's pmcStats/scavStats block, tolerating missing levels."""
    if game_stats is None:
        return PlayerStats()
    return aggregate(game_stats.counters, game_stats.total_in_game_time)
