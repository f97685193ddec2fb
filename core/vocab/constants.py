"""
Vocabulary Constants and Parameters

All tunable numbers for mastery updates, XP awards and rank tiers in one place.
"""

from __future__ import annotations

from typing import Final


# ---- Normalization ----

# Characters stripped from either end of a token before lookup
STRIP_CHARS: Final[str] = "«»\"“”'(){}[],.!?:;"


# ---- Mastery ----

MASTERY_MIN = 0
MASTERY_MAX = 100
KNOWN_THRESHOLD = 70        # Promote to known at or above this (clean reads only)
KNOWN_DEFAULT_MASTERY = 80  # Mastery for words entered as known (bulk editor, starter vocab)

FLAG_PENALTY = 15           # Word flagged as unknown while reading
NEW_WORD_GAIN = 20          # Unflagged word with no prior record
LEARNING_GAIN = 10          # Unflagged word that was already learning
KNOWN_GAIN = 2              # Unflagged word that was already known


# ---- XP ----

BASE_STORY_XP = 20          # Awarded for every finished story
NEW_WORD_XP = 10            # Per flagged occurrence of a never-seen word
LEARNING_EXPOSURE_XP = 3    # Per clean read of a word that was already learning


# ---- Story Generation ----

MAX_KNOWN_WORDS_IN_PROMPT = 150
MAX_LEARNING_WORDS_IN_PROMPT = 40
DEFAULT_STORY_WORD_COUNT = 180
STORY_LENGTH_OPTIONS: Final[tuple[int, ...]] = (120, 180, 250)
TOKENS_PER_LINE = 8         # Token buttons per row in the reading view


# ---- Persistence ----

STORAGE_SLOT = "languageLearningLabState"


# ---- Starter Vocabulary ----
# Super basic Brazilian Portuguese, seeded as known when the ledger is empty

DEFAULT_STARTER_VOCAB: Final[tuple[str, ...]] = (
    "eu", "você", "ele", "ela", "nós", "eles", "vocês",
    "meu", "minha", "seu", "sua",
    "a", "o", "um", "uma", "de", "do", "da", "em", "para", "com", "sem", "por",
    "sim", "não", "talvez", "aqui", "ali", "lá", "hoje", "amanhã", "ontem",
    "casa", "rua", "cidade", "trabalho", "escola", "mercado", "loja", "restaurante",
    "homem", "mulher", "amigo", "amiga", "filho", "filha", "pai", "mãe", "gente",
    "dia", "noite", "tarde", "manhã", "tempo", "hora", "minuto", "ano",
    "comer", "beber", "falar", "andar", "correr", "ver", "ouvir", "abrir", "fechar",
    "entrar", "sair", "trabalhar", "estudar", "gostar", "amar", "querer", "poder",
    "bom", "boa", "ruim", "feliz", "triste", "cansado", "cansada", "calmo", "calma",
    "grande", "pequeno", "novo", "velho", "quente", "frio",
)
