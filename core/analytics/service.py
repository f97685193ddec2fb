"""
Service layer to assemble the progress dashboard.
"""

from __future__ import annotations

from core.analytics.metrics import (
    build_day_index,
    compute_cumulative_xp,
    compute_daily_xp_gained,
    compute_stories_finished,
)
from core.analytics.queries import load_xp_events_df
from core.analytics.types import XpDashboardData
from core.vocab import LearnerState, WordLedger


def build_xp_dashboard(state: LearnerState) -> XpDashboardData:
    """
    Build all KPI values and series needed by the progress page.
    """
    events_df = load_xp_events_df(state)
    day_index = build_day_index(events_df)
    ledger = WordLedger(state)

    return XpDashboardData(
        total_xp=state.xp,
        stories_finished=compute_stories_finished(events_df),
        known_count=ledger.known_count(),
        learning_count=ledger.learning_count(),
        daily_xp_gained=compute_daily_xp_gained(events_df, day_index),
        cumulative_xp=compute_cumulative_xp(events_df, day_index),
    )
