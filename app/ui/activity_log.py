"""
Activity Log UI
"""

import streamlit as st

from core.controller import LogEntry


def render_activity_log(entries: list[LogEntry], limit: int = 30) -> None:
    st.markdown("**Activity**")
    for entry in entries[:limit]:
        st.caption(f"[{entry.stamp()}] {entry.message}")
