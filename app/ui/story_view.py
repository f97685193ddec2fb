"""
Story View UI

Renders the passage as clickable tokens. Flagged words are highlighted on
every occurrence.
"""

from __future__ import annotations

import re
from typing import Optional

import streamlit as st

from core.vocab import SessionResult, StorySession, normalize
from core.vocab.constants import TOKENS_PER_LINE

_MARKDOWN_SPECIALS = re.compile(r"([\\`*_{}\[\]()#+\-.!|~<>$])")


def button_label(token: str) -> str:
    """Escape Markdown so a button shows the token exactly as written."""
    return _MARKDOWN_SPECIALS.sub(r"\\\1", token)


def render_story(session: StorySession) -> Optional[int]:
    """
    Render token buttons.

    Returns:
        Index of the token clicked in this run, or None
    """
    clicked = None
    for line in session.token_lines(per_line=TOKENS_PER_LINE):
        cols = st.columns(TOKENS_PER_LINE)
        for col, (index, token) in zip(cols, line):
            word = normalize(token)
            with col:
                if st.button(
                    button_label(token),
                    key=f"token_{index}",
                    type="primary" if word in session.flagged_words else "secondary",
                    disabled=not word,
                    use_container_width=True,
                ):
                    clicked = index
    return clicked


def render_story_result(result: SessionResult) -> None:
    st.success(f"🎉 {result.summary()}")
