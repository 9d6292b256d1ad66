"""
Perception-gap scoring.

Turns the ratings two participants gave themselves and each other into
per-question gaps, an aggregate match percentage and ranked insight lists.

Gap Formulas (per question):
    gap_a = |AtoA - BtoA|     (A's self view vs B's view of A)
    gap_b = |BtoB - AtoB|     (B's self view vs A's view of B)
    avg_gap = (gap_a + gap_b) / 2

Match Percentage (per session):
    mean_gap = mean(avg_gap over all questions)
    match = max(0, round_half_up(100 - (mean_gap / 10) * 100))

All functions here are pure: no I/O, inputs are never mutated, and the
same inputs always give the same outputs. Missing ratings resolve to 0.
"""

import logging
from typing import Dict, List, Sequence, Tuple

import numpy as np

from .schema import (
    Question,
    QuestionResult,
    Rating,
    Role,
    RoleRatings,
)

logger = logging.getLogger(__name__)

# Width of the rating scale used to normalize gaps into a percentage
RATING_SCALE = 10

DEFAULT_TOP_LIMIT = 3


def calculate_gap(rating1: int, rating2: int) -> int:
    """Absolute difference between two rating values."""
    return abs(rating1 - rating2)


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, with .5 going toward +infinity.

    Python's built-in round() uses banker's rounding (92.5 -> 92); match
    percentages use half-up (92.5 -> 93) everywhere.
    """
    return int(np.floor(value + 0.5))


def _index_ratings(ratings: Sequence[Rating]) -> Dict[Tuple[str, Role, Role], int]:
    """Map (question_id, rater, target) to value. Later duplicates win."""
    return {
        (r.question_id, r.rater_role, r.target_role): r.value
        for r in ratings
    }


def build_question_results(
    questions: Sequence[Question],
    ratings: Sequence[Rating]
) -> List[QuestionResult]:
    """
    Compute perception gaps for every question.

    Ratings for question ids that are not in ``questions`` are ignored.
    Never raises for incomplete rating lists: missing ratings count as 0.

    Args:
        questions: Questions in session order
        ratings: Ratings for the same session, in any order

    Returns:
        One QuestionResult per question, in the order of ``questions``
    """
    if not questions:
        return []

    lookup = _index_ratings(ratings)
    results = []

    for question in questions:
        qid = question.question_id
        role_ratings = RoleRatings(
            a_to_a=lookup.get((qid, Role.A, Role.A), 0),
            a_to_b=lookup.get((qid, Role.A, Role.B), 0),
            b_to_a=lookup.get((qid, Role.B, Role.A), 0),
            b_to_b=lookup.get((qid, Role.B, Role.B), 0),
        )

        gap_a = calculate_gap(role_ratings.a_to_a, role_ratings.b_to_a)
        gap_b = calculate_gap(role_ratings.b_to_b, role_ratings.a_to_b)

        results.append(QuestionResult(
            question=question,
            ratings=role_ratings,
            gap_a=gap_a,
            gap_b=gap_b,
            avg_gap=(gap_a + gap_b) / 2
        ))

    logger.debug(f"Built {len(results)} question results from {len(ratings)} ratings")
    return results


def compute_match_percentage(question_results: Sequence[QuestionResult]) -> int:
    """
    Aggregate alignment across all questions as an integer in [0, 100].

    A mean gap of 0 gives 100, a mean gap of 10 gives 0. Returns 0 when
    there are no results.

    Args:
        question_results: Output of build_question_results

    Returns:
        Match percentage
    """
    if not question_results:
        return 0

    mean_gap = float(np.mean([r.avg_gap for r in question_results]))
    # Anything past the full scale already scores 0
    mean_gap = min(mean_gap, RATING_SCALE)
    percentage = round_half_up(100 - mean_gap * (100 / RATING_SCALE))
    return max(0, percentage)


def pick_top_matches(
    question_results: Sequence[QuestionResult],
    limit: int = DEFAULT_TOP_LIMIT
) -> List[QuestionResult]:
    """
    Return the ``limit`` best-aligned questions, smallest avg_gap first.

    Ties keep their original relative order. A non-positive ``limit``
    gives an empty list.
    """
    if limit <= 0:
        return []
    return sorted(question_results, key=lambda r: r.avg_gap)[:limit]


def pick_top_differences(
    question_results: Sequence[QuestionResult],
    limit: int = DEFAULT_TOP_LIMIT
) -> List[QuestionResult]:
    """
    Return the ``limit`` most divergent questions, largest avg_gap first.

    Ties keep their original relative order. A non-positive ``limit``
    gives an empty list.
    """
    if limit <= 0:
        return []
    # sorted() stays stable with reverse=True
    return sorted(question_results, key=lambda r: r.avg_gap, reverse=True)[:limit]
