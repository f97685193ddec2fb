"""
Starter vocabulary bootstrap.

Runs once when a learner starts with an empty ledger so the first story
request has something to build on.
"""

from __future__ import annotations

from typing import Iterable

from core.vocab.constants import DEFAULT_STARTER_VOCAB
from core.vocab.ledger import known_record
from core.vocab.normalizer import normalize
from core.vocab.schemas import LearnerState


def seed_starter_vocab(
    state: LearnerState,
    words: Iterable[str] = DEFAULT_STARTER_VOCAB
) -> int:
    """
    Mark the starter words as known if the ledger is empty.

    Returns:
        Number of words seeded (0 when the ledger already had entries)
    """
    if state.words:
        return 0

    seeded = {}
    for raw in words:
        word = normalize(raw)
        if word:
            seeded[word] = known_record()

    state.words = seeded
    return len(seeded)
