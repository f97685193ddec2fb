"""
Metric computations for the progress dashboard.
"""

from __future__ import annotations

import pandas as pd


def build_day_index(events_df: pd.DataFrame) -> pd.DatetimeIndex:
    """
    Build a dense UTC day index spanning the event range.
    """
    if events_df.empty:
        return pd.DatetimeIndex([], tz="UTC")
    start = events_df["day_utc"].min()
    end = events_df["day_utc"].max()
    return pd.date_range(start=start, end=end, freq="D")


def compute_stories_finished(events_df: pd.DataFrame) -> int:
    """
    Every XP event is one finished story.
    """
    return int(len(events_df))


def compute_daily_xp_gained(
    events_df: pd.DataFrame,
    day_index: pd.DatetimeIndex
) -> pd.Series:
    """
    XP gained per UTC day, zero on days without stories.
    """
    if events_df.empty or len(day_index) == 0:
        return pd.Series(dtype="int64")

    daily = events_df.groupby("day_utc")["xp_gained"].sum()
    return daily.reindex(day_index, fill_value=0).astype("int64")


def compute_cumulative_xp(
    events_df: pd.DataFrame,
    day_index: pd.DatetimeIndex
) -> pd.Series:
    """
    Cumulative XP at the end of each UTC day (carried forward on idle days).
    """
    if events_df.empty or len(day_index) == 0:
        return pd.Series(dtype="int64")

    end_of_day = events_df.groupby("day_utc")["xp_at_event"].last()
    return end_of_day.reindex(day_index).ffill().fillna(0).astype("int64")
