"""
Session result summaries.

Combines the scoring engine outputs into the payload a results or share
view needs: match percentage, tier, headline, best matches, biggest
differences and the per-question results. Also keeps the per-player
running totals shown on an account page.

The checks that a session is finished and that both players joined live
here, in the calling layer, not in the pure engine.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Any, List, Optional, Sequence

from ..configs.settings import ScoringConfig
from ..scoring.engine import (
    build_question_results,
    compute_match_percentage,
    pick_top_matches,
    pick_top_differences,
    round_half_up,
)
from ..scoring.progress import count_completed_questions
from ..scoring.schema import (
    Participant,
    Question,
    QuestionResult,
    Rating,
    Role,
    SessionSnapshot,
)
from .messages import MatchTier, classify_match, describe_gap, result_message

logger = logging.getLogger(__name__)


class SessionNotFinishedError(ValueError):
    """Raised when results are requested for a session that is not done."""


class MissingParticipantsError(ValueError):
    """Raised when a session lacks a participant for role A or B."""


@dataclass
class SessionSummary:
    """
    Computed results for one session.

    Attributes:
        match_percentage: Aggregate alignment in [0, 100]
        tier: Match tier for the percentage
        message: Headline for the tier
        top_matches: Best-aligned questions, smallest gap first
        top_differences: Most divergent questions, largest gap first
        question_results: Per-question results in session order (possibly truncated)
        completed_questions: Questions with all four ratings present
        total_questions: Questions in the session
        participant_a: Player A, when known
        participant_b: Player B, when known
        session_id: Session identifier, when known
    """
    match_percentage: int
    tier: MatchTier
    message: str
    top_matches: List[QuestionResult]
    top_differences: List[QuestionResult]
    question_results: List[QuestionResult]
    completed_questions: int
    total_questions: int
    participant_a: Optional[Participant] = None
    participant_b: Optional[Participant] = None
    session_id: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-ready dictionary with camelCase keys."""
        result = {
            "sessionId": self.session_id,
            "matchPercentage": self.match_percentage,
            "tier": self.tier.value,
            "message": self.message,
            "topMatches": [_insight_dict(r) for r in self.top_matches],
            "topDifferences": [_insight_dict(r) for r in self.top_differences],
            "questionResults": [r.to_dict() for r in self.question_results],
            "completedQuestions": self.completed_questions,
            "totalQuestions": self.total_questions,
        }
        if self.participant_a:
            result["participantA"] = self.participant_a.to_dict()
        if self.participant_b:
            result["participantB"] = self.participant_b.to_dict()
        return result


def _insight_dict(result: QuestionResult) -> Dict[str, Any]:
    item = result.to_dict()
    item["description"] = describe_gap(result.avg_gap)
    return item


def build_session_summary(
    questions: Sequence[Question],
    ratings: Sequence[Rating],
    config: Optional[ScoringConfig] = None
) -> SessionSummary:
    """
    Score a session and collect its insights.

    Args:
        questions: Questions in session order
        ratings: Ratings for the session
        config: Summary settings (defaults if None)

    Returns:
        SessionSummary; the top lists are computed over all questions even
        when question_results is truncated
    """
    config = config or ScoringConfig()

    results = build_question_results(questions, ratings)
    percentage = compute_match_percentage(results)
    tier = classify_match(
        percentage,
        high_threshold=config.high_match_threshold,
        medium_threshold=config.medium_match_threshold
    )

    shared = results
    if config.max_shared_results is not None:
        shared = results[:config.max_shared_results]

    completed = count_completed_questions(questions, ratings)
    if completed < len(questions):
        logger.warning(
            f"Scoring with incomplete ratings: {completed}/{len(questions)} questions complete, "
            f"missing ratings count as 0"
        )

    logger.info(f"Match percentage {percentage}% ({tier.value}) over {len(results)} questions")

    return SessionSummary(
        match_percentage=percentage,
        tier=tier,
        message=result_message(tier),
        top_matches=pick_top_matches(results, config.top_limit),
        top_differences=pick_top_differences(results, config.top_limit),
        question_results=shared,
        completed_questions=completed,
        total_questions=len(questions),
    )


def summarize_snapshot(
    snapshot: SessionSnapshot,
    config: Optional[ScoringConfig] = None,
    require_finished: bool = True
) -> SessionSummary:
    """
    Build the summary for a session read from the store.

    Args:
        snapshot: Consistent read of the session
        config: Summary settings (defaults if None)
        require_finished: Refuse sessions that are not done

    Raises:
        SessionNotFinishedError: If require_finished and the session is not done
        MissingParticipantsError: If role A or B has no participant
    """
    if require_finished and not snapshot.is_finished:
        raise SessionNotFinishedError(
            f"Session {snapshot.session_id} is not finished (status: {snapshot.status.value})"
        )

    participant_a = snapshot.participant(Role.A)
    participant_b = snapshot.participant(Role.B)
    if participant_a is None or participant_b is None:
        missing = [role.value for role, p in [(Role.A, participant_a), (Role.B, participant_b)] if p is None]
        raise MissingParticipantsError(
            f"Session {snapshot.session_id} has no participant for role(s): {', '.join(missing)}"
        )

    summary = build_session_summary(snapshot.questions, snapshot.ratings, config)
    summary.session_id = snapshot.session_id
    summary.participant_a = participant_a
    summary.participant_b = participant_b
    return summary


@dataclass
class PlayerStats:
    """
    Running totals for one player across finished games.

    Attributes:
        games_played: Number of finished games
        match_sum: Sum of match percentages over those games
    """
    games_played: int = 0
    match_sum: int = 0

    def record_game(self, match_percentage: int) -> None:
        """Add one finished game."""
        self.games_played += 1
        self.match_sum += match_percentage

    @property
    def average_match(self) -> int:
        """Average match percentage, 0 before the first game."""
        if self.games_played <= 0:
            return 0
        return round_half_up(self.match_sum / self.games_played)

    def to_dict(self) -> Dict[str, int]:
        """Convert to dictionary."""
        return {
            "gamesPlayed": self.games_played,
            "matchSum": self.match_sum,
            "avgMatch": self.average_match
        }
