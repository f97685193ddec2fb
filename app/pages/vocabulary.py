"""
Vocabulary page: bulk known-word editor and full reset.
"""

from __future__ import annotations

import streamlit as st

from app.session_controller import reset_all_data, save_known_words
from app.state import get_lab


def _mark_touched() -> None:
    st.session_state.known_words_touched = True


def _on_save() -> None:
    saved = save_known_words(st.session_state.known_words_input)
    st.session_state.vocabulary_notice = f"Saved {saved} known words."


def _on_reset() -> None:
    reset_all_data()
    st.session_state.reset_confirmed = False
    st.session_state.vocabulary_notice = "All data reset."


def render_vocabulary_page() -> None:
    lab = get_lab()
    stats = lab.stats()

    st.subheader("Known words")
    st.caption(
        f"{stats.known_count} known · {stats.learning_count} learning. "
        "Separate words with spaces, commas or semicolons. Saving replaces the "
        "known list; words you are still learning are kept."
    )

    st.text_area(
        "Known words",
        key="known_words_input",
        height=200,
        on_change=_mark_touched,
        label_visibility="collapsed",
    )
    st.button("Save known words", type="primary", on_click=_on_save)

    notice = st.session_state.pop("vocabulary_notice", None)
    if notice:
        st.success(notice)

    learning = lab.ledger.learning_words()
    if learning:
        with st.expander(f"Learning words ({len(learning)})"):
            st.write(", ".join(learning))

    st.divider()
    st.subheader("Reset")
    st.caption("Deletes XP, history and every word. This cannot be undone.")
    confirmed = st.checkbox("I really want to reset all data", key="reset_confirmed")
    st.button("Reset all data", disabled=not confirmed, on_click=_on_reset)
