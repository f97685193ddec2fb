"""
Streamlit session state and controller initialization helpers.
"""

from __future__ import annotations

import streamlit as st

from core.controller import LabController
from core.logging_config import configure_logging
from core.vocab import DEFAULT_STORY_WORD_COUNT, StateGateway


def init_logging() -> None:
    """
    Configure logging once per server process.
    """
    @st.cache_resource
    def _init_logging() -> None:
        configure_logging()

    _init_logging()


def ensure_session_state() -> None:
    """
    Populate Streamlit session_state with defaults.
    """
    if "lab" not in st.session_state:
        st.session_state.lab = LabController(StateGateway())
    if "story_length" not in st.session_state:
        st.session_state.story_length = DEFAULT_STORY_WORD_COUNT
    if "generation_error" not in st.session_state:
        st.session_state.generation_error = None
    if "last_result" not in st.session_state:
        st.session_state.last_result = None
    if "known_words_touched" not in st.session_state:
        st.session_state.known_words_touched = False
    if "known_words_input" not in st.session_state:
        st.session_state.known_words_input = st.session_state.lab.known_words_text()


def get_lab() -> LabController:
    return st.session_state.lab
