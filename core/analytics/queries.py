"""
Data-loading helpers for analytics.
"""

from __future__ import annotations

import pandas as pd

from core.vocab import LearnerState

EVENT_COLUMNS = ["timestamp", "xp_at_event", "xp_gained", "day_utc"]


def load_xp_events_df(state: LearnerState) -> pd.DataFrame:
    """
    Load XP history into a dataframe sorted by time.

    xp_gained is the difference from the previous event; the first event
    counts from zero.
    """
    if not state.xp_history:
        return pd.DataFrame(columns=EVENT_COLUMNS)

    df = pd.DataFrame(
        [{"timestamp": e.timestamp, "xp_at_event": e.xp_at_event} for e in state.xp_history]
    )
    df["timestamp"] = pd.to_datetime(df["timestamp"], utc=True, errors="coerce")
    df = df.dropna(subset=["timestamp"])
    df = df.sort_values("timestamp").reset_index(drop=True)
    df["xp_gained"] = df["xp_at_event"].diff().fillna(df["xp_at_event"]).astype("int64")
    df["day_utc"] = df["timestamp"].dt.floor("D")
    return df
