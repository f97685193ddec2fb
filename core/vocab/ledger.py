"""
Word Ledger - canonical word -> WordRecord.

The ledger is a view over LearnerState.words (held by reference), so edits
made through it are edits to the state that gets persisted.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from core.vocab.constants import KNOWN_DEFAULT_MASTERY
from core.vocab.normalizer import normalize
from core.vocab.schemas import LearnerState, WordRecord, WordStatus


def known_record() -> WordRecord:
    """Fresh record for a word the learner declares as known."""
    return WordRecord(
        status=WordStatus.KNOWN,
        mastery=KNOWN_DEFAULT_MASTERY,
        times_seen=0,
        times_clicked=0,
    )


class WordLedger:
    """Sole source of known/learning classification."""

    def __init__(self, state: LearnerState):
        self.state = state

    @property
    def words(self) -> dict[str, WordRecord]:
        return self.state.words

    def __len__(self) -> int:
        return len(self.state.words)

    def __contains__(self, word: object) -> bool:
        return word in self.state.words

    def __iter__(self) -> Iterator[str]:
        return iter(self.state.words)

    def get(self, word: str) -> Optional[WordRecord]:
        return self.state.words.get(word)

    def status_of(self, word: str) -> Optional[WordStatus]:
        record = self.state.words.get(word)
        return record.status if record is not None else None

    def known_words(self) -> list[str]:
        return [w for w, r in self.state.words.items() if r.status == WordStatus.KNOWN]

    def learning_words(self) -> list[str]:
        return [w for w, r in self.state.words.items() if r.status == WordStatus.LEARNING]

    def known_count(self) -> int:
        return sum(1 for r in self.state.words.values() if r.status == WordStatus.KNOWN)

    def learning_count(self) -> int:
        return sum(1 for r in self.state.words.values() if r.status == WordStatus.LEARNING)

    def upsert_known(self, words: Iterable[str]) -> int:
        """
        Replace the known-word set with exactly the given words.

        Listed words become known at default mastery (counters reset).
        Learning words that are not listed are kept untouched; every other
        previously known word is dropped. This is a full replace, not a merge.

        Args:
            words: Raw or canonical words; normalized here, empties dropped

        Returns:
            Number of distinct words saved as known
        """
        new_map: dict[str, WordRecord] = {}
        for raw in words:
            word = normalize(raw)
            if word and word not in new_map:
                new_map[word] = known_record()

        saved = len(new_map)

        for word, record in self.state.words.items():
            if word not in new_map and record.status == WordStatus.LEARNING:
                new_map[word] = record

        self.state.words = new_map
        return saved

    def reset(self) -> None:
        """Drop every entry. Irreversible."""
        self.state.words = {}
