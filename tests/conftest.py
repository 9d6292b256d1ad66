"""
Pytest fixtures - shared questions, ratings and snapshots for all tests.
"""

import json

import pytest

from perception_match.scoring import Question, Rating, Participant, SessionSnapshot


def _make_question(qid: str, idx: int = 0, text: str = None, icon: str = "*") -> Question:
    return Question(question_id=qid, idx=idx, text=text or qid.title(), icon=icon)


def _make_ratings(qid: str, a_to_a=None, a_to_b=None, b_to_a=None, b_to_b=None):
    """Ratings for one question; pairs left as None are not submitted."""
    values = [("A", "A", a_to_a), ("A", "B", a_to_b), ("B", "A", b_to_a), ("B", "B", b_to_b)]
    return [
        Rating(question_id=qid, rater_role=rater, target_role=target, value=value)
        for rater, target, value in values
        if value is not None
    ]


@pytest.fixture
def make_question():
    """Factory for questions: make_question(qid, idx=0, text=None, icon="*")."""
    return _make_question


@pytest.fixture
def make_ratings():
    """Factory for one question's ratings; pairs left as None are not submitted."""
    return _make_ratings


@pytest.fixture
def questions():
    """Five questions in session order."""
    return [_make_question(f"q{i}", idx=i) for i in range(5)]


@pytest.fixture
def ratings_by_gap(questions):
    """Ratings giving avg_gap [0, 2, 2, 5, 8] across the five questions."""
    ratings = []
    ratings += _make_ratings("q0", a_to_a=5, b_to_a=5, b_to_b=5, a_to_b=5)   # 0
    ratings += _make_ratings("q1", a_to_a=5, b_to_a=7, b_to_b=5, a_to_b=3)   # (2+2)/2 = 2
    ratings += _make_ratings("q2", a_to_a=4, b_to_a=8, b_to_b=6, a_to_b=6)   # (4+0)/2 = 2
    ratings += _make_ratings("q3", a_to_a=1, b_to_a=6, b_to_b=10, a_to_b=5)  # (5+5)/2 = 5
    ratings += _make_ratings("q4", a_to_a=1, b_to_a=9, b_to_b=10, a_to_b=2)  # (8+8)/2 = 8
    return ratings


@pytest.fixture
def participants():
    return [
        Participant(role="A", name="Alex", emoji="🦊"),
        Participant(role="B", name="Sam", emoji="🐼"),
    ]


@pytest.fixture
def finished_snapshot(questions, ratings_by_gap, participants):
    return SessionSnapshot(
        session_id="session-1",
        status="done",
        participants=participants,
        questions=questions,
        ratings=ratings_by_gap
    )


@pytest.fixture
def snapshot_document():
    """JSON form of a small finished session."""
    return {
        "session": {"id": "session-json", "status": "done"},
        "participants": [
            {"role": "A", "name": "Alex", "emoji": "🦊"},
            {"role": "B", "name": "Sam", "emoji": "🐼"},
        ],
        "questions": [
            {"questionId": "q-late", "idx": 1, "text": "Punctual", "icon": "⏰"},
            {"questionId": "q-first", "idx": 0, "text": "Funny", "icon": "😂"},
        ],
        "ratings": [
            {"questionId": "q-first", "raterRole": "A", "targetRole": "A", "value": 8},
            {"questionId": "q-first", "raterRole": "B", "targetRole": "A", "value": 8},
            {"questionId": "q-first", "raterRole": "B", "targetRole": "B", "value": 7},
            {"questionId": "q-first", "raterRole": "A", "targetRole": "B", "value": 7},
            {"questionId": "q-late", "raterRole": "A", "targetRole": "A", "value": 10},
            {"questionId": "q-late", "raterRole": "B", "targetRole": "A", "value": 1},
            {"questionId": "q-late", "raterRole": "B", "targetRole": "B", "value": 5},
            {"questionId": "q-late", "raterRole": "A", "targetRole": "B", "value": 5},
        ],
    }


@pytest.fixture
def snapshot_file(tmp_path, snapshot_document):
    path = tmp_path / "session.json"
    path.write_text(json.dumps(snapshot_document), encoding="utf-8")
    return path
