"""
Reading page rendering.
"""

from __future__ import annotations

import streamlit as st

from app.session_controller import (
    discard_story,
    finish_story,
    start_new_story,
    toggle_token,
)
from app.state import get_lab
from app.ui import render_stats_panel, render_story, render_story_result
from core.vocab import STORY_LENGTH_OPTIONS


def render_reading_page() -> None:
    """
    Render the stats panel, story controls and the active story (if any).
    """
    lab = get_lab()
    render_stats_panel(lab.stats())

    col1, col2 = st.columns([2, 1])
    with col1:
        st.session_state.story_length = st.selectbox(
            "Story length (words)",
            STORY_LENGTH_OPTIONS,
            index=STORY_LENGTH_OPTIONS.index(st.session_state.story_length),
        )
    with col2:
        st.markdown("<br>", unsafe_allow_html=True)
        if st.button(
            "Generate new story",
            type="primary",
            use_container_width=True,
            disabled=lab.is_generating,
        ):
            start_new_story(st.session_state.story_length)
            st.rerun()

    if st.session_state.generation_error:
        st.error(st.session_state.generation_error)

    if st.session_state.last_result is not None:
        render_story_result(st.session_state.last_result)

    session = lab.active_session
    if session is None:
        st.caption('Click "Generate new story" to start.')
        return

    st.divider()
    st.caption("Click every word you don't understand. Click again to unmark it.")
    clicked = render_story(session)
    if clicked is not None:
        toggle_token(clicked)

    st.caption(session.info_text())

    col_finish, col_discard = st.columns(2)
    with col_finish:
        if st.button("Finish story", type="primary", use_container_width=True):
            finish_story()
    with col_discard:
        if st.button("Discard story", use_container_width=True):
            discard_story()
