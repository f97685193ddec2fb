"""
Lab controller - owns the learner state and the active story.

This is the only place that sequences the core operations:
load -> seed -> (generate -> flag -> finish) -> save, with a save after every
mutation. It has no UI dependencies; the Streamlit app keeps one instance in
its session state.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Iterable, Optional

import structlog

from core.vocab import (
    DEFAULT_STARTER_VOCAB,
    DEFAULT_STORY_WORD_COUNT,
    EmptyVocabularyError,
    GenerationInProgressError,
    LearnerState,
    NoActiveSessionError,
    RankInfo,
    ResetNotConfirmedError,
    SessionResult,
    StoryGenerationError,
    StoryRequest,
    StorySession,
    WordLedger,
    build_story_session,
    compute_rank,
    resolve_session,
    seed_starter_vocab,
    split_word_list,
)

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class LogEntry:
    """One line of the learner-facing activity log."""
    timestamp: datetime
    message: str

    def stamp(self) -> str:
        return self.timestamp.strftime("%H:%M")


@dataclass(frozen=True)
class LabStats:
    """Everything the stats panel shows."""
    rank_name: str
    next_rank_name: str
    xp: int
    next_rank_xp: int
    progress: float
    known_count: int
    learning_count: int


class LabController:
    """
    Top-level owner of LearnerState, the persistence gateway and the
    optional active StorySession.

    Args:
        gateway: Object with load() -> LearnerState | None and save(state) -> bool
        generator: Object with generate(StoryRequest) -> str (OpenAI by default)
        starter_vocab: Words seeded as known when the ledger starts empty
    """

    def __init__(
        self,
        gateway,
        generator=None,
        starter_vocab: Iterable[str] = DEFAULT_STARTER_VOCAB
    ):
        self.gateway = gateway
        self._generator = generator
        self.active_session: Optional[StorySession] = None
        self.is_generating = False
        self.log: list[LogEntry] = []

        init_db = getattr(gateway, "init_db", None)
        if callable(init_db):
            init_db()

        self.state = gateway.load() or LearnerState()
        self.ledger = WordLedger(self.state)

        seeded = seed_starter_vocab(self.state, starter_vocab)
        if seeded:
            self._save()
            self.add_log_entry("Loaded built-in starter vocabulary.")
            logger.info("Seeded starter vocabulary", words=seeded)

        self.add_log_entry("Language Learning Lab ready.")

    # ---- Collaborators ----

    @property
    def generator(self):
        if self._generator is None:
            from core.story_client import StoryGenerator
            self._generator = StoryGenerator()
        return self._generator

    def _save(self) -> bool:
        return self.gateway.save(self.state)

    def add_log_entry(self, message: str) -> None:
        """Prepend a message to the activity log (newest first)."""
        self.log.insert(0, LogEntry(timestamp=datetime.now(timezone.utc), message=message))

    # ---- Display State ----

    def rank_info(self) -> RankInfo:
        return compute_rank(self.state.xp, self.ledger.known_count())

    def stats(self) -> LabStats:
        info = self.rank_info()
        return LabStats(
            rank_name=info.current.name,
            next_rank_name=info.next.name,
            xp=info.xp,
            next_rank_xp=info.next.min_xp,
            progress=info.progress,
            known_count=info.known_count,
            learning_count=self.ledger.learning_count(),
        )

    def known_words_text(self) -> str:
        """Known words as the bulk editor shows them."""
        return ", ".join(self.ledger.known_words())

    # ---- Vocabulary Editing ----

    def save_known_words(self, text: str) -> int:
        """
        Replace the known-word set from free-text input.

        Returns:
            Number of distinct words saved as known
        """
        saved = self.ledger.upsert_known(split_word_list(text))
        self._save()
        self.add_log_entry(f"Saved {saved} known words from input.")
        return saved

    def reset(self, confirmed: bool = False) -> None:
        """
        DANGEROUS: Replace all learner data with a fresh state.

        Raises:
            ResetNotConfirmedError: if confirmed is not True
        """
        if not confirmed:
            raise ResetNotConfirmedError("Reset requires explicit confirmation")

        self.state = LearnerState()
        self.ledger = WordLedger(self.state)
        self.active_session = None
        self._save()
        self.add_log_entry("All data reset.")
        logger.warning("Learner state reset")

    # ---- Story Lifecycle ----

    def require_session(self, action: str = "continue") -> StorySession:
        if self.active_session is None:
            raise NoActiveSessionError(action)
        return self.active_session

    def build_story_request(self, target_word_count: int = DEFAULT_STORY_WORD_COUNT) -> StoryRequest:
        return StoryRequest(
            known_words=self.ledger.known_words(),
            learning_words=self.ledger.learning_words(),
            target_word_count=target_word_count,
        )

    def generate_story(self, target_word_count: int = DEFAULT_STORY_WORD_COUNT) -> StorySession:
        """
        Request a passage and open it as the active story.

        Only one request may be outstanding. On failure nothing changes:
        the previous active story (if any) stays open.

        Raises:
            GenerationInProgressError: another request has not settled
            EmptyVocabularyError: no known or learning words to seed with
            StoryGenerationError: the generator failed
        """
        if self.is_generating:
            raise GenerationInProgressError("A story is already being generated")

        request = self.build_story_request(target_word_count)
        if not request.known_words and not request.learning_words:
            raise EmptyVocabularyError(
                "Starter vocabulary not loaded properly. Try refreshing the page."
            )

        self.is_generating = True
        try:
            text = self.generator.generate(request)
        except StoryGenerationError as e:
            logger.error(f"Story generation failed: {e!s}")
            raise
        finally:
            self.is_generating = False

        session = self.open_story(text)
        self.add_log_entry("New story generated.")
        return session

    def open_story(self, text: str) -> StorySession:
        """
        Make text the active story, replacing any open one.

        Raises:
            ValueError: if text is blank
        """
        if not text or not text.strip():
            raise ValueError("Story text is empty")
        self.active_session = build_story_session(text, self.ledger)
        return self.active_session

    def toggle_flag(self, word: str) -> bool:
        return self.require_session("flag a word").toggle_flag(word)

    def toggle_token(self, index: int) -> bool:
        return self.require_session("flag a word").toggle_token(index)

    def finish_story(self, now: Optional[datetime] = None) -> SessionResult:
        """
        Resolve the active story into the ledger, award XP and save.
        """
        session = self.require_session("finish the story")
        result = resolve_session(session, self.state, now=now)
        self._save()
        self.add_log_entry(result.summary())
        logger.info(
            "Story finished",
            xp_gained=result.xp_gained,
            total_xp=result.total_xp,
            flagged=session.flagged_count,
        )
        self.active_session = None
        return result

    def discard_story(self) -> None:
        self.require_session("discard the story")
        self.active_session = None
        self.add_log_entry("Story discarded.")
