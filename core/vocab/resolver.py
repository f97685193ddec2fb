"""
Session Resolver - fold a finished story back into the ledger.

Main workflow:
1. Snapshot each word's status before the story
2. Walk every non-empty token in order (once per occurrence)
3. Apply the flagged / clean-read update to the live record
4. Award XP and append it to the history

"Prior" status always comes from the snapshot, so a word created earlier in
the same pass is still treated as new. Mastery and counters compound on the
live record in token order.

No database calls: the caller saves the state afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from core.vocab.constants import (
    BASE_STORY_XP,
    FLAG_PENALTY,
    KNOWN_GAIN,
    KNOWN_THRESHOLD,
    LEARNING_EXPOSURE_XP,
    LEARNING_GAIN,
    MASTERY_MAX,
    MASTERY_MIN,
    NEW_WORD_GAIN,
    NEW_WORD_XP,
)
from core.vocab.schemas import LearnerState, WordRecord, WordStatus, XpEvent
from core.vocab.story_session import StorySession


@dataclass(frozen=True)
class SessionResult:
    """XP breakdown for one finished story."""
    xp_gained: int
    base_xp: int
    new_word_xp: int
    learning_xp: int
    new_words_discovered: int
    clean_learning_exposures: int
    total_xp: int

    def summary(self) -> str:
        return (
            f"Story finished. XP +{self.xp_gained} (base {self.base_xp}, "
            f"new words {self.new_word_xp}, learning exposures {self.learning_xp})."
        )


def _apply_flagged(record: WordRecord) -> None:
    record.times_clicked += 1
    record.mastery = max(MASTERY_MIN, record.mastery - FLAG_PENALTY)
    record.status = WordStatus.LEARNING


def _apply_clean_read(record: WordRecord, prior: Optional[WordStatus]) -> None:
    if prior is None:
        record.status = WordStatus.LEARNING
        record.mastery = min(MASTERY_MAX, record.mastery + NEW_WORD_GAIN)
    elif prior == WordStatus.LEARNING:
        record.mastery = min(MASTERY_MAX, record.mastery + LEARNING_GAIN)
    elif prior == WordStatus.KNOWN:
        record.mastery = min(MASTERY_MAX, record.mastery + KNOWN_GAIN)

    if record.mastery >= KNOWN_THRESHOLD:
        record.status = WordStatus.KNOWN


def resolve_session(
    session: StorySession,
    state: LearnerState,
    now: Optional[datetime] = None
) -> SessionResult:
    """
    Update word mastery and XP from a finished story.

    Args:
        session: The story the learner just read
        state: Learner state, mutated in place
        now: Timestamp for the XP event (defaults to now, UTC)

    Returns:
        SessionResult with the XP breakdown
    """
    if now is None:
        now = datetime.now(timezone.utc)

    prior_status = {word: record.status for word, record in state.words.items()}
    flagged = set(session.flagged_words)

    new_words_discovered = 0
    clean_learning_exposures = 0

    for word in session.words:
        if not word:
            continue

        prior = prior_status.get(word)
        record = state.words.get(word)
        if record is None:
            record = WordRecord(status=WordStatus.LEARNING, mastery=0)
            state.words[word] = record

        record.times_seen += 1

        if word in flagged:
            if prior is None:
                new_words_discovered += 1
            _apply_flagged(record)
        else:
            if prior == WordStatus.LEARNING:
                clean_learning_exposures += 1
            _apply_clean_read(record, prior)

    new_word_xp = new_words_discovered * NEW_WORD_XP
    learning_xp = clean_learning_exposures * LEARNING_EXPOSURE_XP
    xp_gained = BASE_STORY_XP + new_word_xp + learning_xp

    state.xp += xp_gained
    state.xp_history.append(XpEvent(timestamp=now, xp_at_event=state.xp))

    return SessionResult(
        xp_gained=xp_gained,
        base_xp=BASE_STORY_XP,
        new_word_xp=new_word_xp,
        learning_xp=learning_xp,
        new_words_discovered=new_words_discovered,
        clean_learning_exposures=clean_learning_exposures,
        total_xp=state.xp,
    )
