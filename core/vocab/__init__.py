"""
Vocab - learner vocabulary state, ranks and story resolution.

Quick start:
    from core import vocab

    state = vocab.LearnerState()
    vocab.seed_starter_vocab(state)

    ledger = vocab.WordLedger(state)
    session = vocab.build_story_session("Eu moro numa casa.", ledger)
    session.toggle_flag("moro")
    result = vocab.resolve_session(session, state)

    rank = vocab.compute_rank(state.xp, ledger.known_count())
"""

# Normalization
from core.vocab.normalizer import normalize, split_word_list

# Data model
from core.vocab.schemas import (
    LearnerState,
    StoryRequest,
    WordRecord,
    WordStatus,
    XpEvent,
)

# Ledger, ranks, sessions
from core.vocab.ledger import WordLedger
from core.vocab.rank import RANKS, Rank, RankInfo, compute_rank
from core.vocab.story_session import (
    StorySession,
    TokenCounts,
    build_story_session,
)
from core.vocab.resolver import SessionResult, resolve_session
from core.vocab.bootstrap import seed_starter_vocab

# Persistence
from core.vocab.database import StateGateway, get_database_url, is_test_mode

# Errors
from core.vocab.errors import (
    EmptyVocabularyError,
    GenerationInProgressError,
    LabError,
    NoActiveSessionError,
    ResetNotConfirmedError,
    StoryGenerationError,
)

# Constants
from core.vocab.constants import (
    DEFAULT_STARTER_VOCAB,
    DEFAULT_STORY_WORD_COUNT,
    KNOWN_THRESHOLD,
    STORY_LENGTH_OPTIONS,
)


__all__ = [
    # Normalization
    "normalize",
    "split_word_list",

    # Data model
    "LearnerState",
    "StoryRequest",
    "WordRecord",
    "WordStatus",
    "XpEvent",

    # Core operations
    "WordLedger",
    "RANKS",
    "Rank",
    "RankInfo",
    "compute_rank",
    "StorySession",
    "TokenCounts",
    "build_story_session",
    "SessionResult",
    "resolve_session",
    "seed_starter_vocab",

    # Persistence
    "StateGateway",
    "get_database_url",
    "is_test_mode",

    # Errors
    "EmptyVocabularyError",
    "GenerationInProgressError",
    "LabError",
    "NoActiveSessionError",
    "ResetNotConfirmedError",
    "StoryGenerationError",

    # Parameters
    "DEFAULT_STARTER_VOCAB",
    "DEFAULT_STORY_WORD_COUNT",
    "KNOWN_THRESHOLD",
    "STORY_LENGTH_OPTIONS",
]
