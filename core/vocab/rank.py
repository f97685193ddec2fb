"""
Rank Engine - pure step function of (XP, known-word count).

A tier is reached only when BOTH thresholds hold, so XP alone cannot skip
a vocabulary-size gate.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Rank:
    name: str
    min_xp: int
    min_known_words: int


RANKS: tuple[Rank, ...] = (
    Rank("Copper 3", 0, 0),
    Rank("Copper 2", 100, 10),
    Rank("Copper 1", 250, 20),
    Rank("Bronze 3", 400, 40),
    Rank("Bronze 2", 700, 70),
    Rank("Bronze 1", 1100, 100),
    Rank("Silver 3", 1600, 150),
    Rank("Silver 2", 2200, 220),
    Rank("Silver 1", 2900, 300),
    Rank("Gold 3", 3800, 400),
    Rank("Gold 2", 4800, 520),
    Rank("Gold 1", 6000, 650),
)


@dataclass(frozen=True)
class RankInfo:
    """Display state derived from the rank tiers."""
    current: Rank
    next: Rank
    progress: float
    xp: int
    known_count: int

    @property
    def is_max_rank(self) -> bool:
        return self.next is self.current


def _clamp01(value: float) -> float:
    return max(0.0, min(1.0, value))


def compute_rank(xp: int, known_count: int, ranks: tuple[Rank, ...] = RANKS) -> RankInfo:
    """
    Resolve the current tier, the next tier and progress toward it.

    Tiers are scanned in ascending order and the last qualifying one wins.
    At the top tier, next is current and progress is pinned at 1.0.

    Args:
        xp: Cumulative XP
        known_count: Number of words with status known
        ranks: Ordered tier list (lowest first)

    Returns:
        RankInfo
    """
    current_index = 0
    for index, rank in enumerate(ranks):
        if xp >= rank.min_xp and known_count >= rank.min_known_words:
            current_index = index

    current = ranks[current_index]
    if current_index + 1 < len(ranks):
        next_rank = ranks[current_index + 1]
    else:
        next_rank = current

    if next_rank is current:
        progress = 1.0
    else:
        span = max(1, next_rank.min_xp - current.min_xp)
        progress = _clamp01((xp - current.min_xp) / span)

    return RankInfo(
        current=current,
        next=next_rank,
        progress=progress,
        xp=xp,
        known_count=known_count,
    )
