"""Test doubles for the gateway and story generator."""

from __future__ import annotations

from core.vocab import LearnerState, StoryRequest


class MemoryGateway:
    """In-process stand-in for StateGateway."""

    def __init__(self, stored: LearnerState | None = None, fail_writes: bool = False):
        self.stored_json = stored.model_dump_json() if stored is not None else None
        self.fail_writes = fail_writes
        self.save_calls = 0

    def load(self) -> LearnerState | None:
        if self.stored_json is None:
            return None
        return LearnerState.model_validate_json(self.stored_json)

    def save(self, state: LearnerState) -> bool:
        self.save_calls += 1
        if self.fail_writes:
            return False
        self.stored_json = state.model_dump_json()
        return True

    @property
    def stored(self) -> LearnerState | None:
        return self.load()


class FakeGenerator:
    def __init__(self, story: str = "Eu vejo um gato na rua.", error: Exception | None = None):
        self.story = story
        self.error = error
        self.requests: list[StoryRequest] = []

    def generate(self, request: StoryRequest) -> str:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return self.story

