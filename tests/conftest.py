from __future__ import annotations

from pathlib import Path

import pytest

from core.vocab import (
    LearnerState,
    StateGateway,
    StoryGenerationError,
    WordRecord,
    WordStatus,
)

from fakes import FakeGenerator, MemoryGateway


@pytest.fixture
def make_state():
    def _make(xp: int = 0, **words: tuple[str, int]) -> LearnerState:
        return LearnerState(
            xp=xp,
            words={
                word: WordRecord(status=WordStatus(status), mastery=mastery)
                for word, (status, mastery) in words.items()
            },
        )
    return _make


@pytest.fixture
def memory_gateway() -> MemoryGateway:
    return MemoryGateway()


@pytest.fixture
def generator() -> FakeGenerator:
    return FakeGenerator()


@pytest.fixture
def failing_generator() -> FakeGenerator:
    return FakeGenerator(error=StoryGenerationError("Failed to generate story"))


@pytest.fixture
def sqlite_url(tmp_path: Path) -> str:
    return f"sqlite:///{tmp_path / 'state.db'}"


@pytest.fixture
def gateway(sqlite_url: str) -> StateGateway:
    gw = StateGateway(sqlite_url, slot="test-slot")
    assert gw.init_db()
    return gw
