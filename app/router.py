"""
Simple page router for Streamlit tabs.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from app.pages.progress import render_progress_page
from app.pages.reading import render_reading_page
from app.pages.vocabulary import render_vocabulary_page


@dataclass(frozen=True)
class AppPage:
    title: str
    render: Callable[[], None]


PAGES = [
    AppPage(title="Read", render=render_reading_page),
    AppPage(title="Vocabulary", render=render_vocabulary_page),
    AppPage(title="Progress", render=render_progress_page),
]
