"""
Story Session - ephemeral state for one generated passage.

Tokens keep their punctuation for display; lookups always use the
normalized word. Flags apply to the word type, not to a single occurrence.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from core.vocab.constants import TOKENS_PER_LINE
from core.vocab.ledger import WordLedger
from core.vocab.normalizer import normalize
from core.vocab.schemas import WordStatus


@dataclass
class TokenCounts:
    """Ledger classification of the passage, fixed at session creation."""
    total: int = 0
    known: int = 0
    learning: int = 0
    other: int = 0


@dataclass
class StorySession:
    raw_text: str
    tokens: list[str]
    flagged_words: set[str] = field(default_factory=set)
    token_counts: TokenCounts = field(default_factory=TokenCounts)

    @property
    def words(self) -> list[str]:
        """Normalized word per token ("" for punctuation-only tokens)."""
        return [normalize(token) for token in self.tokens]

    @property
    def flagged_count(self) -> int:
        return len(self.flagged_words)

    def is_flagged(self, word: str) -> bool:
        return normalize(word) in self.flagged_words

    def toggle_flag(self, word: str) -> bool:
        """
        Flag or unflag a word as unknown.

        Args:
            word: Raw token or canonical word

        Returns:
            True if the word is flagged after the call
        """
        canonical = normalize(word)
        if not canonical:
            return False
        if canonical in self.flagged_words:
            self.flagged_words.discard(canonical)
            return False
        self.flagged_words.add(canonical)
        return True

    def toggle_token(self, index: int) -> bool:
        """Toggle the word behind the token at position index."""
        return self.toggle_flag(self.tokens[index])

    def info_text(self) -> str:
        total = self.token_counts.total
        if total > 0:
            return f"Clicked unknown: {self.flagged_count} words out of ~{total} tokens."
        return f"Clicked unknown: {self.flagged_count} words."

    def token_lines(self, per_line: int = TOKENS_PER_LINE) -> list[list[tuple[int, str]]]:
        """Group (index, token) pairs into display lines."""
        lines: list[list[tuple[int, str]]] = []
        for start in range(0, len(self.tokens), per_line):
            chunk = self.tokens[start:start + per_line]
            lines.append([(start + offset, token) for offset, token in enumerate(chunk)])
        return lines


def count_tokens(tokens: list[str], ledger: WordLedger) -> TokenCounts:
    counts = TokenCounts()
    for token in tokens:
        word = normalize(token)
        if not word:
            continue
        counts.total += 1
        status = ledger.status_of(word)
        if status == WordStatus.KNOWN:
            counts.known += 1
        elif status == WordStatus.LEARNING:
            counts.learning += 1
        else:
            counts.other += 1
    return counts


def build_story_session(text: str, ledger: WordLedger) -> StorySession:
    """
    Split a passage on whitespace and classify each token against the ledger.
    """
    tokens = text.split()
    return StorySession(
        raw_text=text,
        tokens=tokens,
        token_counts=count_tokens(tokens, ledger),
    )
