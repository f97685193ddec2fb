"""
Story lifecycle helpers for the Streamlit app.

Thin wrappers around LabController that turn errors into inline messages.
"""

from __future__ import annotations

import streamlit as st

from app.state import get_lab
from core.vocab import EmptyVocabularyError, GenerationInProgressError, StoryGenerationError


def start_new_story(target_word_count: int) -> None:
    """
    Generate a new story. Failures are shown inline; state is not touched.
    """
    lab = get_lab()
    st.session_state.generation_error = None
    st.session_state.last_result = None
    try:
        with st.spinner("Generating story..."):
            lab.generate_story(target_word_count)
    except EmptyVocabularyError as exc:
        st.session_state.generation_error = str(exc)
    except GenerationInProgressError as exc:
        st.session_state.generation_error = str(exc)
    except StoryGenerationError:
        st.session_state.generation_error = (
            "Failed to generate story. Check the logs and your API key."
        )


def toggle_token(index: int) -> None:
    get_lab().toggle_token(index)
    st.rerun()


def finish_story() -> None:
    """
    Resolve the active story and keep the XP breakdown for display.
    """
    lab = get_lab()
    st.session_state.last_result = lab.finish_story()
    _refresh_known_words_input()
    st.rerun()


def discard_story() -> None:
    get_lab().discard_story()
    st.rerun()


def save_known_words(text: str) -> int:
    saved = get_lab().save_known_words(text)
    st.session_state.known_words_touched = False
    return saved


def reset_all_data() -> None:
    """
    Reset everything. Callers must have collected explicit confirmation.
    """
    get_lab().reset(confirmed=True)
    st.session_state.last_result = None
    st.session_state.generation_error = None
    st.session_state.known_words_touched = False
    _refresh_known_words_input()


def _refresh_known_words_input() -> None:
    # Keep the learner's unsaved edits
    if not st.session_state.known_words_touched:
        st.session_state.known_words_input = get_lab().known_words_text()
