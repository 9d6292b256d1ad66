"""Rating completeness checks for questions and sessions."""

from typing import List, Sequence, Set, Tuple

from .schema import Question, Rating, Role, ROLE_PAIRS, pair_label


def _present_pairs(question: Question, ratings: Sequence[Rating]) -> Set[Tuple[Role, Role]]:
    return {
        (r.rater_role, r.target_role)
        for r in ratings
        if r.question_id == question.question_id
    }


def missing_rating_keys(question: Question, ratings: Sequence[Rating]) -> List[str]:
    """
    List the role pairs still unrated for a question.

    Returns:
        Labels such as ["AtoB", "BtoB"], in AtoA, AtoB, BtoA, BtoB order
    """
    present = _present_pairs(question, ratings)
    return [pair_label(rater, target) for rater, target in ROLE_PAIRS
            if (rater, target) not in present]


def is_question_complete(question: Question, ratings: Sequence[Rating]) -> bool:
    """A question is complete once all four ratings exist."""
    return not missing_rating_keys(question, ratings)


def count_completed_questions(questions: Sequence[Question], ratings: Sequence[Rating]) -> int:
    return sum(1 for q in questions if is_question_complete(q, ratings))


def is_session_complete(questions: Sequence[Question], ratings: Sequence[Rating]) -> bool:
    """True when there is at least one question and every question is complete."""
    if not questions:
        return False
    return count_completed_questions(questions, ratings) == len(questions)
