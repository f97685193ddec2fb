"""
Types for the progress dashboard.
"""

from __future__ import annotations

from dataclasses import dataclass

import pandas as pd


@dataclass(frozen=True)
class XpDashboardData:
    """
    Precomputed metrics and series for the progress page.
    """
    total_xp: int
    stories_finished: int
    known_count: int
    learning_count: int
    daily_xp_gained: pd.Series
    cumulative_xp: pd.Series
