"""
Stats Panel UI

Renders rank, XP progress and vocabulary counts.
"""

import streamlit as st

from core.controller import LabStats


def render_stats_panel(stats: LabStats) -> None:
    col1, col2, col3, col4 = st.columns(4)

    with col1:
        st.metric("Rank", stats.rank_name)
    with col2:
        st.metric("XP", stats.xp, help=f"Next rank ({stats.next_rank_name}) at {stats.next_rank_xp} XP")
    with col3:
        st.metric("Known", stats.known_count)
    with col4:
        st.metric("Learning", stats.learning_count)

    st.progress(stats.progress, text=f"{stats.xp} / {stats.next_rank_xp} XP")
