"""
Pydantic models for the learner's vocabulary state.

These models are the persisted shape of the application: the whole
LearnerState is serialized as one JSON document by the database module.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field

from core.vocab.constants import DEFAULT_STORY_WORD_COUNT, MASTERY_MAX, MASTERY_MIN


class WordStatus(str, Enum):
    """Ledger classification of a word."""
    KNOWN = "known"
    LEARNING = "learning"


class WordRecord(BaseModel):
    """Mastery record for one canonical word."""
    status: WordStatus = WordStatus.LEARNING
    mastery: int = Field(default=0, ge=MASTERY_MIN, le=MASTERY_MAX, description="Retention confidence, 0-100")
    times_seen: int = Field(default=0, ge=0, description="Occurrences read across finished stories")
    times_clicked: int = Field(default=0, ge=0, description="Occurrences flagged as unknown")


class XpEvent(BaseModel):
    """One XP award, stamped with the cumulative total after it."""
    timestamp: datetime
    xp_at_event: int = Field(..., ge=0)


class LearnerState(BaseModel):
    """
    The single aggregate for a learner.

    Loaded once at startup, saved after every mutation and replaced
    wholesale on reset.
    """
    xp: int = Field(default=0, ge=0)
    words: dict[str, WordRecord] = Field(default_factory=dict)
    xp_history: list[XpEvent] = Field(default_factory=list)


class StoryRequest(BaseModel):
    """Input for the passage generator."""
    known_words: list[str] = Field(default_factory=list)
    learning_words: list[str] = Field(default_factory=list)
    target_word_count: int = Field(default=DEFAULT_STORY_WORD_COUNT, gt=0)
