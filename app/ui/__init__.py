"""UI Components for Language Learning Lab"""

from app.ui.activity_log import render_activity_log
from app.ui.stats_panel import render_stats_panel
from app.ui.story_view import render_story, render_story_result

__all__ = [
    "render_activity_log",
    "render_stats_panel",
    "render_story",
    "render_story_result",
]
