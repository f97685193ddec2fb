import pytest

from core.vocab import RANKS, compute_rank


def test_tier_table_shape() -> None:
    assert len(RANKS) == 12
    assert RANKS[0].name == "Copper 3"
    assert RANKS[-1].name == "Gold 1"
    assert [r.min_xp for r in RANKS] == sorted(r.min_xp for r in RANKS)


def test_fresh_learner_is_copper_3() -> None:
    info = compute_rank(0, 0)
    assert info.current.name == "Copper 3"
    assert info.next.name == "Copper 2"
    assert info.progress == 0.0


def test_xp_alone_cannot_skip_vocabulary_gate() -> None:
    info = compute_rank(10000, 0)
    assert info.current.min_known_words == 0
    assert info.current.name == "Copper 3"


def test_both_thresholds_required() -> None:
    # Enough XP for Copper 1 but only 15 known words
    info = compute_rank(260, 15)
    assert info.current.name == "Copper 2"
    assert info.next.name == "Copper 1"
    assert info.progress == 1.0


def test_progress_fraction_between_tiers() -> None:
    info = compute_rank(175, 10)
    assert info.current.name == "Copper 2"
    assert info.progress == pytest.approx(0.5)


def test_top_tier_is_terminal() -> None:
    info = compute_rank(7000, 700)
    assert info.current.name == "Gold 1"
    assert info.next is info.current
    assert info.is_max_rank
    assert info.progress == 1.0


def test_exactly_on_threshold_qualifies() -> None:
    info = compute_rank(400, 40)
    assert info.current.name == "Bronze 3"
    assert info.progress == 0.0


@pytest.mark.parametrize("known_count", [0, 25, 100, 400, 700])
def test_rank_is_monotonic_in_xp(known_count: int) -> None:
    previous = -1
    for xp in range(0, 8000, 50):
        current = compute_rank(xp, known_count).current.min_xp
        assert current >= previous
        previous = current
