"""Tests for the perception-gap scoring engine."""

import copy

import pytest

from perception_match.scoring import (
    Question,
    QuestionResult,
    RoleRatings,
    build_question_results,
    calculate_gap,
    compute_match_percentage,
    pick_top_differences,
    pick_top_matches,
    round_half_up,
)


def _result(avg_gap, qid="q"):
    """A QuestionResult carrying only an avg_gap, for aggregation tests."""
    return QuestionResult(
        question=Question(question_id=qid, idx=0, text=qid, icon="*"),
        ratings=RoleRatings(),
        gap_a=0,
        gap_b=0,
        avg_gap=avg_gap
    )


# =============================================================================
# build_question_results
# =============================================================================

def test_scenario_a_identical_views(make_question, make_ratings):
    """Matching self and partner ratings give zero gaps and 100%."""
    q = make_question("q1")
    results = build_question_results([q], make_ratings("q1", a_to_a=8, b_to_a=8, b_to_b=7, a_to_b=7))

    assert len(results) == 1
    r = results[0]
    assert (r.gap_a, r.gap_b, r.avg_gap) == (0, 0, 0)
    assert compute_match_percentage(results) == 100


def test_scenario_b_one_sided_gap(make_question, make_ratings):
    """A sees themself as 10, B sees A as 1."""
    q = make_question("q1")
    results = build_question_results([q], make_ratings("q1", a_to_a=10, b_to_a=1, b_to_b=5, a_to_b=5))

    r = results[0]
    assert r.gap_a == 9
    assert r.gap_b == 0
    assert r.avg_gap == 4.5
    assert compute_match_percentage(results) == 55


def test_scenario_c_missing_ratings_push_gap_to_maximum(make_question, make_ratings):
    """Missing partner ratings count as 0, so a 10 self-rating gives gap 10."""
    questions = [make_question("q1", idx=0), make_question("q2", idx=1)]
    ratings = make_ratings("q1", a_to_a=6, b_to_a=6, b_to_b=3, a_to_b=3)
    ratings += make_ratings("q2", a_to_a=10, b_to_b=10)

    results = build_question_results(questions, ratings)

    assert results[0].avg_gap == 0
    assert results[1].ratings.to_dict() == {"AtoA": 10, "AtoB": 0, "BtoA": 0, "BtoB": 10}
    assert (results[1].gap_a, results[1].gap_b, results[1].avg_gap) == (10, 10, 10)
    assert compute_match_percentage(results) == 50


def test_scenario_d_no_ratings_reads_as_perfect_match(questions):
    """With nothing submitted every gap is 0, indistinguishable from a perfect match."""
    results = build_question_results(questions, [])

    assert len(results) == len(questions)
    for r in results:
        assert r.ratings.to_dict() == {"AtoA": 0, "AtoB": 0, "BtoA": 0, "BtoB": 0}
        assert (r.gap_a, r.gap_b, r.avg_gap) == (0, 0, 0)
    assert compute_match_percentage(results) == 100


def test_results_follow_question_order_not_rating_order(questions, ratings_by_gap):
    reversed_questions = list(reversed(questions))
    results = build_question_results(reversed_questions, ratings_by_gap)

    assert [r.question.question_id for r in results] == ["q4", "q3", "q2", "q1", "q0"]
    assert [r.avg_gap for r in results] == [8, 5, 2, 2, 0]


def test_empty_questions_give_empty_results(ratings_by_gap):
    assert build_question_results([], ratings_by_gap) == []
    assert build_question_results([], []) == []


def test_unknown_question_ratings_are_ignored(make_question, make_ratings):
    q = make_question("known")
    ratings = make_ratings("known", a_to_a=5, b_to_a=5, b_to_b=5, a_to_b=5)
    ratings += make_ratings("stray", a_to_a=1, b_to_a=10, b_to_b=1, a_to_b=10)

    results = build_question_results([q], ratings)

    assert len(results) == 1
    assert results[0].avg_gap == 0


def test_partial_ratings_default_to_zero(make_question, make_ratings):
    q = make_question("q1")
    results = build_question_results([q], make_ratings("q1", a_to_a=7, a_to_b=4))

    r = results[0]
    assert r.ratings.to_dict() == {"AtoA": 7, "AtoB": 4, "BtoA": 0, "BtoB": 0}
    assert r.gap_a == 7
    assert r.gap_b == 4
    assert r.avg_gap == 5.5


def test_duplicate_rating_last_one_wins(make_question, make_ratings):
    q = make_question("q1")
    ratings = make_ratings("q1", a_to_a=3, b_to_a=3, b_to_b=3, a_to_b=3)
    ratings += make_ratings("q1", a_to_a=9)

    results = build_question_results([q], ratings)

    assert results[0].ratings.a_to_a == 9
    assert results[0].gap_a == 6


def test_inputs_are_not_mutated(questions, ratings_by_gap):
    questions_before = copy.deepcopy(questions)
    ratings_before = copy.deepcopy(ratings_by_gap)

    build_question_results(questions, ratings_by_gap)

    assert questions == questions_before
    assert ratings_by_gap == ratings_before


def test_repeated_calls_are_identical(questions, ratings_by_gap):
    first = build_question_results(questions, ratings_by_gap)
    second = build_question_results(questions, ratings_by_gap)

    assert first == second
    assert [r.to_dict() for r in first] == [r.to_dict() for r in second]


def test_result_serializes_with_external_keys(make_ratings):
    q = Question(question_id="q1", idx=2, text="Punctual", icon="⏰")
    r = build_question_results([q], make_ratings("q1", a_to_a=10, b_to_a=1, b_to_b=5, a_to_b=5))[0]

    assert r.to_dict() == {
        "question": {"questionId": "q1", "idx": 2, "text": "Punctual", "icon": "⏰"},
        "ratings": {"AtoA": 10, "AtoB": 5, "BtoA": 1, "BtoB": 5},
        "gapA": 9,
        "gapB": 0,
        "avgGap": 4.5,
    }


def test_calculate_gap_is_absolute():
    assert calculate_gap(3, 8) == 5
    assert calculate_gap(8, 3) == 5
    assert calculate_gap(4, 4) == 0


# =============================================================================
# compute_match_percentage
# =============================================================================

def test_match_percentage_empty_is_zero():
    assert compute_match_percentage([]) == 0


@pytest.mark.parametrize("gaps,expected", [
    ([0], 100),
    ([10], 0),
    ([0, 10], 50),
    ([1, 2, 3], 80),
    ([4.5], 55),
])
def test_match_percentage_from_mean_gap(gaps, expected):
    results = [_result(g, f"q{i}") for i, g in enumerate(gaps)]
    assert compute_match_percentage(results) == expected


def test_match_percentage_rounds_half_up():
    """Mean gap 0.75 gives 92.5, which rounds up to 93."""
    results = [_result(0.5, "q0"), _result(1.0, "q1")]
    assert compute_match_percentage(results) == 93


def test_match_percentage_clamps_at_zero():
    assert compute_match_percentage([_result(15.0)]) == 0


def test_match_percentage_is_int():
    assert isinstance(compute_match_percentage([_result(1.5)]), int)


def test_round_half_up():
    assert round_half_up(92.5) == 93
    assert round_half_up(97.5) == 98
    assert round_half_up(54.4) == 54
    assert round_half_up(0.0) == 0


# =============================================================================
# pick_top_matches / pick_top_differences
# =============================================================================

def test_scenario_e_top_matches_keep_tie_order(questions, ratings_by_gap):
    results = build_question_results(questions, ratings_by_gap)

    top = pick_top_matches(results, 3)

    assert [r.avg_gap for r in top] == [0, 2, 2]
    assert [r.question.question_id for r in top] == ["q0", "q1", "q2"]


def test_top_differences_descending(questions, ratings_by_gap):
    results = build_question_results(questions, ratings_by_gap)

    top = pick_top_differences(results, 3)

    assert [r.avg_gap for r in top] == [8, 5, 2]
    assert [r.question.question_id for r in top] == ["q4", "q3", "q1"]


def test_top_differences_keep_tie_order():
    results = [_result(1, "first"), _result(3, "second"), _result(3, "third"), _result(1, "fourth")]

    top = pick_top_differences(results, 4)

    assert [r.question.question_id for r in top] == ["second", "third", "first", "fourth"]


def test_all_zero_gaps_keep_input_order():
    results = [_result(0, f"q{i}") for i in range(4)]

    assert [r.question.question_id for r in pick_top_matches(results, 3)] == ["q0", "q1", "q2"]
    assert [r.question.question_id for r in pick_top_differences(results, 3)] == ["q0", "q1", "q2"]


def test_top_lists_default_limit_is_three(questions, ratings_by_gap):
    results = build_question_results(questions, ratings_by_gap)

    assert len(pick_top_matches(results)) == 3
    assert len(pick_top_differences(results)) == 3


def test_top_lists_with_fewer_results_than_limit():
    results = [_result(4, "a"), _result(1, "b")]

    assert [r.question.question_id for r in pick_top_matches(results, 5)] == ["b", "a"]
    assert [r.question.question_id for r in pick_top_differences(results, 5)] == ["a", "b"]


def test_top_lists_non_positive_limit():
    results = [_result(4, "a"), _result(1, "b")]

    assert pick_top_matches(results, 0) == []
    assert pick_top_differences(results, -1) == []


def test_top_lists_do_not_reorder_input():
    results = [_result(4, "a"), _result(1, "b"), _result(2, "c")]

    pick_top_matches(results)
    pick_top_differences(results)

    assert [r.question.question_id for r in results] == ["a", "b", "c"]
