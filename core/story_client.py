"""
OpenAI-backed story generator.

Builds a graded-reader prompt from the learner's known and learning words and
asks the chat completions API for a short Brazilian Portuguese story.

Usage:
    from core.story_client import StoryGenerator
    from core.vocab import StoryRequest

    story = StoryGenerator().generate(StoryRequest(known_words=["casa"], learning_words=["livro"]))
"""

from __future__ import annotations

import os
from typing import Optional

import openai
import structlog
from dotenv import load_dotenv
from openai import OpenAI

from core.vocab.constants import (
    DEFAULT_STORY_WORD_COUNT,
    MAX_KNOWN_WORDS_IN_PROMPT,
    MAX_LEARNING_WORDS_IN_PROMPT,
)
from core.vocab.errors import StoryGenerationError
from core.vocab.schemas import StoryRequest

# Load environment variables
load_dotenv()

logger = structlog.get_logger(__name__)

DEFAULT_MODEL = os.getenv("OPENAI_MODEL", "gpt-4o-mini")
DEFAULT_TEMPERATURE = 0.7

SYSTEM_PROMPT = (
    "Você é um professor de português brasileiro que cria histórias simples "
    "e claras para leitura graduada."
)

STORY_PROMPT = """O usuário está aprendendo português brasileiro lendo pequenas histórias.

Escreva uma história em português brasileiro com cerca de {word_count} palavras.

Regras:
- Use principalmente estas palavras já conhecidas pelo usuário quando fizer sentido: {known_list}.
- Inclua naturalmente várias vezes estas palavras em foco (aprendendo): {learning_list}.
- A história deve ter cerca de 85 a 90 por cento de palavras que um iniciante/intermediário provavelmente reconhece, e 10 a 15 por cento de palavras um pouco mais novas ou desafiadoras.
- Mantenha frases curtas e claras, com situações concretas do dia a dia.
- Não explique nada em inglês, não traduza, não use listas. Apenas escreva o texto da história em um único bloco.

Saída: apenas a história em português, sem título e sem comentário extra."""

NO_KNOWN_WORDS = "(nenhuma lista, use vocabulário básico e simples)"
NO_LEARNING_WORDS = "(nenhuma palavra em foco)"

# Initialize OpenAI client (module-level, reused across calls)
_client: Optional[OpenAI] = None


def get_client() -> OpenAI:
    """Get or create the OpenAI client."""
    global _client
    if _client is None:
        api_key = os.getenv("OPENAI_API_KEY")
        if not api_key:
            raise ValueError("OPENAI_API_KEY not found in environment variables")
        _client = OpenAI(api_key=api_key)
    return _client


def build_prompt(
    known_words: Optional[list[str]],
    learning_words: Optional[list[str]],
    target_word_count: Optional[int] = None
) -> str:
    """
    Build the user prompt for a story request.

    Known words are capped at 150 and learning words at 40; an empty list is
    replaced by a short instruction instead of an empty enumeration.
    """
    known_list = ", ".join((known_words or [])[:MAX_KNOWN_WORDS_IN_PROMPT])
    learning_list = ", ".join((learning_words or [])[:MAX_LEARNING_WORDS_IN_PROMPT])

    return STORY_PROMPT.format(
        word_count=target_word_count or DEFAULT_STORY_WORD_COUNT,
        known_list=known_list or NO_KNOWN_WORDS,
        learning_list=learning_list or NO_LEARNING_WORDS,
    )


class StoryGenerator:
    """
    Chat-completions story generator.

    Args:
        client: OpenAI client (created from OPENAI_API_KEY on first use if omitted)
        model: Chat model name
        temperature: Sampling temperature
    """

    def __init__(
        self,
        client: Optional[OpenAI] = None,
        model: str = DEFAULT_MODEL,
        temperature: float = DEFAULT_TEMPERATURE
    ):
        self._client = client
        self.model = model
        self.temperature = temperature

    @property
    def client(self) -> OpenAI:
        if self._client is None:
            self._client = get_client()
        return self._client

    def generate(self, request: StoryRequest) -> str:
        """
        Request one story.

        Returns:
            Story text, stripped

        Raises:
            StoryGenerationError: missing API key, API failure or empty reply
        """
        messages = [
            {"role": "system", "content": SYSTEM_PROMPT},
            {
                "role": "user",
                "content": build_prompt(
                    request.known_words,
                    request.learning_words,
                    request.target_word_count,
                ),
            },
        ]

        try:
            completion = self.client.chat.completions.create(
                model=self.model,
                messages=messages,
                temperature=self.temperature,
            )
        except ValueError as e:
            raise StoryGenerationError(str(e)) from e
        except openai.OpenAIError as e:
            logger.error(f"Error generating story: {e!s}", model=self.model)
            raise StoryGenerationError("Failed to generate story") from e

        story = None
        if completion.choices:
            content = completion.choices[0].message.content
            story = content.strip() if content else None

        if not story:
            raise StoryGenerationError("No story returned from OpenAI")

        logger.info(
            "Story generated",
            model=self.model,
            target_word_count=request.target_word_count,
            words=len(story.split()),
        )
        return story
