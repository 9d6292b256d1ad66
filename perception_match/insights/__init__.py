"""Insights module for result summaries and descriptions."""

from .messages import (
    MatchTier,
    RESULT_MESSAGES,
    are_close,
    describe_gap,
    classify_match,
    result_message,
)
from .summary import (
    SessionSummary,
    SessionNotFinishedError,
    MissingParticipantsError,
    PlayerStats,
    build_session_summary,
    summarize_snapshot,
)
from .export import results_to_frame, save_summary

__all__ = [
    "MatchTier",
    "RESULT_MESSAGES",
    "are_close",
    "describe_gap",
    "classify_match",
    "result_message",
    "SessionSummary",
    "SessionNotFinishedError",
    "MissingParticipantsError",
    "PlayerStats",
    "build_session_summary",
    "summarize_snapshot",
    "results_to_frame",
    "save_summary",
]
