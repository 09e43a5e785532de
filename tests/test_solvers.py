from fractions import Fraction

import pytest
from termhack.engine import CandidatePool, NothingToRecommend
from termhack.solvers import (
    create_strategy, get_strategy_ids, partition_stats, recommend, DEFAULT_STRATEGY,
)

TERMINAL = ["CODEX", "CODER", "WATER", "TOWER"]
SKEWED = ["ZZZZ", "AAAA", "AAAB", "AABA"]


def test_registry_ids():
    assert get_strategy_ids() == ["entropy", "expected_left", "minimax"]
    assert DEFAULT_STRATEGY == "expected_left"
    with pytest.raises(ValueError):
        create_strategy("nope")


def test_partition_stats_terminal():
    stats = partition_stats(TERMINAL)
    assert [s.guess for s in stats] == TERMINAL
    # CODEX/CODER split the pool into singletons; WATER/TOWER leave a pair
    assert [s.expected_remaining for s in stats] == [
        Fraction(1), Fraction(1), Fraction(3, 2), Fraction(3, 2),
    ]
    assert [s.worst_case for s in stats] == [1, 1, 2, 2]
    assert [s.buckets for s in stats] == [4, 4, 3, 3]
    assert stats[0].entropy_bits == pytest.approx(2.0)
    assert stats[2].entropy_bits == pytest.approx(1.5)


def test_expected_left_picks_earliest_minimum():
    rec = recommend(TERMINAL)
    assert rec.guess == "CODEX"
    assert rec.expected_remaining == Fraction(1)
    assert rec.strategy == "expected_left"


def test_expected_left_skips_uninformative_first_candidate():
    # ZZZZ scores 0 against everything else: E = (1 + 9) / 4
    stats = partition_stats(SKEWED)
    assert stats[0].expected_remaining == Fraction(5, 2)
    assert stats[1].expected_remaining == Fraction(3, 2)
    rec = recommend(SKEWED)
    assert rec.guess == "AAAB"  # ties with AABA, earlier wins
    assert rec.expected_remaining == Fraction(1)


def test_recommend_accepts_pool():
    pool = CandidatePool(SKEWED)
    assert recommend(pool).guess == "AAAB"
    assert pool.view() == tuple(SKEWED)  # read-only


@pytest.mark.parametrize("strategy", ["expected_left", "minimax", "entropy"])
@pytest.mark.parametrize("words", [
    TERMINAL,
    SKEWED,
    ["TRIED", "TIRES", "TRIES", "TRIBE", "SPIES", "SIDES", "TIDES", "RIDES"],
])
def test_recommendation_is_member_and_bounded(strategy, words):
    rec = recommend(words, strategy)
    assert rec.guess in words
    assert rec.expected_remaining <= len(words)
    assert rec.strategy == strategy


@pytest.mark.parametrize("words", [
    TERMINAL,
    SKEWED,
    ["TRIED", "TIRES", "TRIES", "TRIBE", "SPIES", "SIDES", "TIDES", "RIDES"],
])
def test_minimax_and_entropy_follow_their_definitions(words):
    stats = partition_stats(words)

    rec = recommend(words, "minimax")
    best_worst = min(s.worst_case for s in stats)
    first = next(s for s in stats if s.worst_case == best_worst)
    assert (rec.guess, rec.worst_case) == (first.guess, best_worst)

    rec = recommend(words, "entropy")
    best_H = max(s.entropy_bits for s in stats)
    first = next(s for s in stats if s.entropy_bits == best_H)
    assert rec.guess == first.guess


def test_nothing_to_recommend():
    with pytest.raises(NothingToRecommend):
        recommend(["CODEX"])
    pool = CandidatePool(["AAAA", "BBBB"])
    pool.eliminate("CCCC", 2)
    with pytest.raises(NothingToRecommend) as exc:
        recommend(pool)
    assert exc.value.size == 0
