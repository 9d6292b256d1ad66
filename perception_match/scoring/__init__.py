"""
Scoring module for perception-gap computation.

This module provides the pure functions that turn a session's questions
and ratings into per-question gaps, a match percentage and rankings.
"""

from .schema import (
    Role,
    SessionStatus,
    Question,
    Rating,
    RoleRatings,
    QuestionResult,
    Participant,
    SessionSnapshot,
)
from .engine import (
    calculate_gap,
    round_half_up,
    build_question_results,
    compute_match_percentage,
    pick_top_matches,
    pick_top_differences,
)
from .progress import (
    missing_rating_keys,
    is_question_complete,
    count_completed_questions,
    is_session_complete,
)

__all__ = [
    "Role",
    "SessionStatus",
    "Question",
    "Rating",
    "RoleRatings",
    "QuestionResult",
    "Participant",
    "SessionSnapshot",
    "calculate_gap",
    "round_half_up",
    "build_question_results",
    "compute_match_percentage",
    "pick_top_matches",
    "pick_top_differences",
    "missing_rating_keys",
    "is_question_complete",
    "count_completed_questions",
    "is_session_complete",
]
