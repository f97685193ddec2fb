import pytest

from core.controller import LabController
from core.vocab import (
    DEFAULT_STARTER_VOCAB,
    EmptyVocabularyError,
    GenerationInProgressError,
    LearnerState,
    NoActiveSessionError,
    ResetNotConfirmedError,
    StateGateway,
    StoryGenerationError,
    WordStatus,
    normalize,
)

from fakes import FakeGenerator, MemoryGateway


def _messages(lab: LabController) -> list[str]:
    return [entry.message for entry in lab.log]


class TestStartup:
    def test_seeds_starter_vocab_into_empty_store(self, memory_gateway, generator) -> None:
        lab = LabController(memory_gateway, generator)

        expected = {normalize(w) for w in DEFAULT_STARTER_VOCAB}
        assert lab.ledger.known_count() == len(expected)
        assert memory_gateway.save_calls == 1
        assert set(memory_gateway.stored.words) == expected
        assert _messages(lab) == ["Language Learning Lab ready.", "Loaded built-in starter vocabulary."]

    def test_restores_stored_state_without_seeding(self, make_state, generator) -> None:
        gateway = MemoryGateway(make_state(xp=40, casa=("known", 90)))

        lab = LabController(gateway, generator)

        assert lab.state.xp == 40
        assert list(lab.ledger) == ["casa"]
        assert gateway.save_calls == 0


class TestStoryFlow:
    def test_generate_opens_session(self, memory_gateway, generator) -> None:
        lab = LabController(memory_gateway, generator)

        session = lab.generate_story(120)

        assert lab.active_session is session
        assert session.tokens == ["Eu", "vejo", "um", "gato", "na", "rua."]
        request = generator.requests[0]
        assert request.target_word_count == 120
        assert "eu" in request.known_words
        assert lab.is_generating is False
        assert lab.log[0].message == "New story generated."

    def test_generation_failure_keeps_current_story(self, memory_gateway, failing_generator) -> None:
        lab = LabController(memory_gateway, failing_generator)
        previous = lab.open_story("A casa.")
        saves = memory_gateway.save_calls

        with pytest.raises(StoryGenerationError):
            lab.generate_story()

        assert lab.active_session is previous
        assert lab.is_generating is False
        assert memory_gateway.save_calls == saves

    def test_one_request_at_a_time(self, memory_gateway, generator) -> None:
        lab = LabController(memory_gateway, generator)
        lab.is_generating = True

        with pytest.raises(GenerationInProgressError):
            lab.generate_story()
        assert generator.requests == []

    def test_empty_vocabulary_blocks_generation(self, memory_gateway, generator) -> None:
        lab = LabController(memory_gateway, generator, starter_vocab=())

        with pytest.raises(EmptyVocabularyError):
            lab.generate_story()
        assert generator.requests == []

    def test_blank_story_rejected(self, memory_gateway, generator) -> None:
        lab = LabController(memory_gateway, generator)

        with pytest.raises(ValueError):
            lab.open_story("   ")
        assert lab.active_session is None

    def test_finish_resolves_and_saves(self, memory_gateway, generator) -> None:
        lab = LabController(memory_gateway, generator, starter_vocab=())
        lab.open_story("casa casa livro")
        assert lab.toggle_flag("livro") is True

        result = lab.finish_story()

        assert result.xp_gained == 30
        assert lab.active_session is None
        assert memory_gateway.stored.xp == 30
        assert memory_gateway.stored.words["casa"].mastery == 40
        assert lab.stats().xp == 30
        assert lab.log[0].message == result.summary()

    def test_toggle_token_flags_word(self, memory_gateway, generator) -> None:
        lab = LabController(memory_gateway, generator)
        lab.open_story("O gato, o gato.")

        assert lab.toggle_token(1) is True
        assert lab.active_session.flagged_words == {"gato"}

    def test_discard_keeps_state(self, memory_gateway, generator) -> None:
        lab = LabController(memory_gateway, generator, starter_vocab=())
        lab.open_story("casa")
        lab.toggle_flag("casa")

        lab.discard_story()

        assert lab.active_session is None
        assert lab.state.words == {}
        assert lab.state.xp == 0
        assert lab.log[0].message == "Story discarded."

    @pytest.mark.parametrize(
        "action",
        [
            lambda lab: lab.toggle_flag("casa"),
            lambda lab: lab.toggle_token(0),
            lambda lab: lab.finish_story(),
            lambda lab: lab.discard_story(),
        ],
    )
    def test_actions_need_an_active_story(self, memory_gateway, generator, action) -> None:
        lab = LabController(memory_gateway, generator)

        with pytest.raises(NoActiveSessionError):
            action(lab)


class TestVocabularyEditing:
    def test_save_known_words(self, memory_gateway, generator) -> None:
        lab = LabController(memory_gateway, generator, starter_vocab=())

        saved = lab.save_known_words("casa, livro; mesa casa")

        assert saved == 3
        assert lab.known_words_text() == "casa, livro, mesa"
        assert set(memory_gateway.stored.words) == {"casa", "livro", "mesa"}
        assert lab.log[0].message == "Saved 3 known words from input."

    def test_reset_requires_confirmation(self, memory_gateway, generator) -> None:
        lab = LabController(memory_gateway, generator)
        known = lab.ledger.known_count()

        with pytest.raises(ResetNotConfirmedError):
            lab.reset()

        assert lab.ledger.known_count() == known

    def test_confirmed_reset_wipes_everything(self, memory_gateway, generator) -> None:
        lab = LabController(memory_gateway, generator)
        lab.open_story("casa")
        lab.finish_story()
        lab.open_story("livro")

        lab.reset(confirmed=True)

        assert lab.state == LearnerState()
        assert len(lab.ledger) == 0
        assert lab.active_session is None
        assert memory_gateway.stored.model_dump() == LearnerState().model_dump()
        assert lab.log[0].message == "All data reset."


class TestStats:
    def test_rank_progress(self, memory_gateway, generator) -> None:
        lab = LabController(memory_gateway, generator, starter_vocab=())
        lab.save_known_words(" ".join(f"w{i}" for i in range(10)))
        lab.state.xp = 175

        stats = lab.stats()

        assert stats.rank_name == "Copper 2"
        assert stats.next_rank_name == "Copper 1"
        assert stats.next_rank_xp == 250
        assert stats.progress == pytest.approx(0.5)
        assert stats.known_count == 10
        assert stats.learning_count == 0


def test_keeps_working_when_store_fails(generator) -> None:
    gateway = MemoryGateway(fail_writes=True)
    lab = LabController(gateway, generator)
    lab.open_story("Eu vejo.")

    result = lab.finish_story()

    assert result.total_xp == 20
    assert gateway.stored is None


def test_state_survives_restart(sqlite_url) -> None:
    lab = LabController(StateGateway(sqlite_url, slot="restart"), FakeGenerator(), starter_vocab=("casa",))
    lab.open_story("casa livro")
    lab.toggle_flag("livro")
    lab.finish_story()

    restarted = LabController(StateGateway(sqlite_url, slot="restart"), FakeGenerator())

    assert restarted.state.xp == 30
    assert restarted.ledger.status_of("livro") == WordStatus.LEARNING
    assert restarted.ledger.status_of("casa") == WordStatus.KNOWN
    assert len(restarted.state.xp_history) == 1


def test_starts_seeded_when_store_is_unreachable(generator) -> None:
    lab = LabController(StateGateway("bogusdialect://x/y", slot="bad"), generator)

    expected = {normalize(w) for w in DEFAULT_STARTER_VOCAB}
    assert lab.ledger.known_count() == len(expected)
    lab.open_story("Eu vejo.")
    assert lab.finish_story().total_xp == 20
