import pytest

from core.vocab import TokenCounts, WordLedger, build_story_session


@pytest.fixture
def ledger(make_state) -> WordLedger:
    return WordLedger(make_state(casa=("known", 80), livro=("learning", 30)))


def test_tokens_keep_punctuation_and_counts_classify(ledger) -> None:
    session = build_story_session("A casa, o livro e a mesa ...", ledger)

    assert session.tokens == ["A", "casa,", "o", "livro", "e", "a", "mesa", "..."]
    assert session.words == ["a", "casa", "o", "livro", "e", "a", "mesa", ""]
    assert session.token_counts == TokenCounts(total=7, known=1, learning=1, other=5)
    assert session.flagged_words == set()


def test_counts_do_not_change_when_flagging(ledger) -> None:
    session = build_story_session("casa livro mesa", ledger)
    before = session.token_counts

    session.toggle_flag("mesa")

    assert session.token_counts == before


def test_toggle_flag_is_per_word_type(ledger) -> None:
    session = build_story_session("Livro! o livro.", ledger)

    assert session.toggle_flag("Livro!") is True
    assert session.flagged_words == {"livro"}
    assert session.is_flagged("livro.")

    assert session.toggle_flag("livro") is False
    assert session.flagged_words == set()


def test_toggle_flag_ignores_punctuation_only(ledger) -> None:
    session = build_story_session("casa ...", ledger)

    assert session.toggle_flag("...") is False
    assert session.flagged_words == set()


def test_toggle_token_by_index(ledger) -> None:
    session = build_story_session("A casa, o livro", ledger)

    assert session.toggle_token(1) is True
    assert session.is_flagged("Casa")
    assert session.toggle_token(1) is False


def test_info_text(ledger) -> None:
    session = build_story_session("A casa, o livro e a mesa ...", ledger)
    session.toggle_flag("mesa")

    assert session.info_text() == "Clicked unknown: 1 words out of ~7 tokens."


def test_blank_text_gives_empty_session(ledger) -> None:
    session = build_story_session("   ", ledger)

    assert session.tokens == []
    assert session.token_counts.total == 0
    assert session.info_text() == "Clicked unknown: 0 words."
    assert session.token_lines() == []


def test_token_lines_preserve_indices(ledger) -> None:
    session = build_story_session("A casa, o livro e a mesa ...", ledger)

    lines = session.token_lines(per_line=3)

    assert [len(line) for line in lines] == [3, 3, 2]
    assert [i for i, _ in lines[0]] == [0, 1, 2]
    assert lines[-1] == [(6, "mesa"), (7, "...")]


def test_default_line_width_matches_reading_grid(ledger) -> None:
    session = build_story_session(" ".join(f"w{i}" for i in range(20)), ledger)

    assert [len(line) for line in session.token_lines()] == [8, 8, 4]
