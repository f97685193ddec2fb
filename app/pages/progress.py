"""
Progress page rendering.
"""

from __future__ import annotations

import streamlit as st

from app.state import get_lab
from core.analytics import build_xp_dashboard


def render_progress_page() -> None:
    lab = get_lab()
    dashboard = build_xp_dashboard(lab.state)

    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric("Total XP", f"{dashboard.total_xp:,}")
    with col2:
        st.metric("Stories finished", f"{dashboard.stories_finished:,}")
    with col3:
        st.metric("Known words", f"{dashboard.known_count:,}", help=f"{dashboard.learning_count} learning")

    st.markdown("### XP Over Time")
    if dashboard.cumulative_xp.empty:
        st.info("No finished stories yet.")
        return

    st.line_chart(dashboard.cumulative_xp.rename("cumulative_xp").to_frame())

    st.markdown("### Daily XP")
    st.bar_chart(dashboard.daily_xp_gained.rename("xp_gained").to_frame())
