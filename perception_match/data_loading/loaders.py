"""
Data loading functions for session snapshots.

A snapshot is a JSON document exported from the session store:

    {
      "session": {"id": "...", "status": "done"},
      "participants": [{"role": "A", "name": "...", "emoji": "..."}, ...],
      "questions": [{"questionId": "...", "idx": 0, "text": "...", "icon": "..."}, ...],
      "ratings": [{"questionId": "...", "raterRole": "A", "targetRole": "B", "value": 7}, ...]
    }

Rating values are validated here, before anything reaches the scoring
engine. No scoring is done in this module.
"""

import json
import logging
from pathlib import Path
from typing import Dict, Any, List, Sequence

from ..scoring.schema import Participant, Question, Rating, SessionSnapshot

logger = logging.getLogger(__name__)

MIN_RATING = 1
MAX_RATING = 10


def validate_rating_value(value: Any) -> int:
    """
    Check that a rating value is an integer in [MIN_RATING, MAX_RATING].

    Raises:
        ValueError: If the value is not an integer or out of range
    """
    # bool is an int subclass but never a valid rating
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Rating value must be an integer, got {value!r}")
    if not MIN_RATING <= value <= MAX_RATING:
        raise ValueError(f"Rating value must be between {MIN_RATING} and {MAX_RATING}, got {value}")
    return value


def dedupe_ratings(ratings: Sequence[Rating]) -> List[Rating]:
    """
    Collapse ratings sharing a rating key, keeping the last one (last write wins).

    Returns:
        Ratings in order of each key's first appearance
    """
    latest: Dict[str, Rating] = {}
    for rating in ratings:
        latest[rating.rating_key] = rating

    n_dropped = len(ratings) - len(latest)
    if n_dropped:
        logger.info(f"Dropped {n_dropped} overwritten rating(s)")
    return list(latest.values())


def parse_rating(data: Dict[str, Any]) -> Rating:
    """
    Build a validated Rating from its JSON form.

    Raises:
        ValueError: On missing fields, unknown roles or out-of-range values
    """
    try:
        rating = Rating.from_dict(data)
    except KeyError as e:
        raise ValueError(f"Rating is missing field {e}: {data}") from e
    except TypeError as e:
        raise ValueError(f"Rating is malformed: {data!r}: {e}") from e
    validate_rating_value(rating.value)
    return rating


def _get_list(data: Dict[str, Any], key: str) -> List[Any]:
    """Read an optional list section; null counts as empty."""
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"Snapshot {key} must be a list, got {type(value).__name__}")
    return value


def parse_session_snapshot(data: Dict[str, Any]) -> SessionSnapshot:
    """
    Build a SessionSnapshot from its JSON form.

    Questions are sorted by idx; duplicate ratings are collapsed.

    Raises:
        ValueError: If the document is malformed or contains invalid ratings
    """
    if not isinstance(data, dict):
        raise ValueError(f"Snapshot must be a JSON object, got {type(data).__name__}")

    session = data.get("session")
    if not isinstance(session, dict) or "id" not in session:
        raise ValueError("Snapshot is missing session.id")

    raw_questions = _get_list(data, "questions")
    raw_participants = _get_list(data, "participants")
    raw_ratings = _get_list(data, "ratings")

    try:
        questions = [Question.from_dict(q) for q in raw_questions]
        participants = [Participant.from_dict(p) for p in raw_participants]
    except KeyError as e:
        raise ValueError(f"Snapshot entry is missing field {e}") from e
    except TypeError as e:
        raise ValueError(f"Snapshot entry is malformed: {e}") from e

    questions.sort(key=lambda q: q.idx)
    ratings = dedupe_ratings([parse_rating(r) for r in raw_ratings])

    return SessionSnapshot(
        session_id=str(session["id"]),
        status=session.get("status", "done"),
        participants=participants,
        questions=questions,
        ratings=ratings
    )


def load_session_snapshot(filepath: str) -> SessionSnapshot:
    """
    Load a session snapshot from a JSON file.

    Args:
        filepath: Path to the snapshot JSON

    Returns:
        Parsed and validated SessionSnapshot

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file is empty, not valid JSON, or malformed
    """
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"Session snapshot not found: {filepath}")

    logger.info(f"Loading session snapshot from {filepath}")
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        raise ValueError(f"Session snapshot is empty: {filepath}")

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Session snapshot is not valid JSON: {filepath}: {e}") from e

    snapshot = parse_session_snapshot(data)
    logger.info(
        f"Loaded session {snapshot.session_id}: {len(snapshot.questions)} questions, "
        f"{len(snapshot.ratings)} ratings, status={snapshot.status.value}"
    )
    return snapshot
