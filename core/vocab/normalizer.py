"""
Normalizer - canonical word keys.

Every ledger key, story lookup and bulk-editor entry goes through normalize().
"""

from __future__ import annotations

import re

from core.vocab.constants import STRIP_CHARS

_WORD_LIST_SPLIT = re.compile(r"[\s,;]+")


def normalize(token: str) -> str:
    """
    Lower-case a raw token and strip surrounding punctuation and quotes.

    Internal characters (hyphens, apostrophes inside words, diacritics) are
    kept as-is, so "Você," -> "você" and "d'água" stays "d'água".

    Returns:
        Canonical word, or "" for empty / punctuation-only input
    """
    if not token:
        return ""
    return token.lower().strip(STRIP_CHARS)


def split_word_list(text: str) -> list[str]:
    """
    Parse free-text word input (whitespace, comma or semicolon separated).

    Pieces that normalize to "" are dropped; order and duplicates are kept.
    """
    if not text:
        return []
    words = (normalize(piece) for piece in _WORD_LIST_SPLIT.split(text))
    return [w for w in words if w]
