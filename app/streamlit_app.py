"""
Language Learning Lab - Main App

Read generated stories, flag the words you don't know, and watch your rank grow.

Run:
    streamlit run app/streamlit_app.py
"""

import streamlit as st

from app.router import PAGES
from app.state import ensure_session_state, get_lab, init_logging
from app.ui import render_activity_log
from core.vocab import is_test_mode


# ---- Page Setup ----

st.set_page_config(
    page_title="Language Learning Lab",
    page_icon="📖",
    layout="centered"
)

init_logging()
ensure_session_state()


# ---- Layout ----

st.title("📖 Language Learning Lab")
if is_test_mode():
    st.warning("⚠️ **TEST MODE** - Using the test state database (set TEST_MODE=false in .env for production)")

tabs = st.tabs([page.title for page in PAGES])
for tab, page in zip(tabs, PAGES):
    with tab:
        page.render()

with st.sidebar:
    render_activity_log(get_lab().log)
