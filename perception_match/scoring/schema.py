"""
Data structures for questions, ratings and derived per-question results.

Serialization uses the camelCase keys of the external interface:

    Question:       {questionId, idx, text, icon}
    Rating:         {questionId, raterRole, targetRole, value}
    QuestionResult: {question, ratings: {AtoA, AtoB, BtoA, BtoB},
                     gapA, gapB, avgGap}
"""

from dataclasses import dataclass, field
from typing import Optional, Dict, Any, List
from enum import Enum


class Role(Enum):
    """The two participant roles in a session."""
    A = "A"
    B = "B"


class SessionStatus(Enum):
    """Session lifecycle states as reported by the session store."""
    LOBBY = "lobby"
    LIVE = "live"
    DONE = "done"


# (rater, target) pairs in the order they appear in serialized results
ROLE_PAIRS = [
    (Role.A, Role.A),
    (Role.A, Role.B),
    (Role.B, Role.A),
    (Role.B, Role.B),
]


def pair_label(rater: Role, target: Role) -> str:
    """Short label for a role pair, e.g. ``AtoB``."""
    return f"{rater.value}to{target.value}"


@dataclass
class Question:
    """
    One trait being rated in a session.

    Attributes:
        question_id: Stable unique identifier
        idx: Ordinal position within the session
        text: Display text (e.g. "Punctual")
        icon: Display icon
    """
    question_id: str
    idx: int
    text: str
    icon: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "questionId": self.question_id,
            "idx": self.idx,
            "text": self.text,
            "icon": self.icon
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Question":
        """Create from dictionary."""
        return cls(
            question_id=str(data["questionId"]),
            idx=int(data.get("idx", 0)),
            text=str(data.get("text", "")),
            icon=str(data.get("icon", ""))
        )


@dataclass
class Rating:
    """
    One participant's judgment of one target for one question.

    A rating is identified by (question_id, rater_role, target_role).
    Value bounds are checked by the loading layer, not here.

    Attributes:
        question_id: Question being rated
        rater_role: Who gave the rating
        target_role: Who is being rated (self or partner)
        value: Integer rating, 1-10 for stored ratings
    """
    question_id: str
    rater_role: Role
    target_role: Role
    value: int

    def __post_init__(self):
        """Convert string roles to enums."""
        if isinstance(self.rater_role, str):
            self.rater_role = Role(self.rater_role)
        if isinstance(self.target_role, str):
            self.target_role = Role(self.target_role)

    @property
    def rating_key(self) -> str:
        """Store key, unique per (question, rater, target)."""
        return f"{self.question_id}#{self.rater_role.value}#{self.target_role.value}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "questionId": self.question_id,
            "raterRole": self.rater_role.value,
            "targetRole": self.target_role.value,
            "value": self.value
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Rating":
        """Create from dictionary."""
        return cls(
            question_id=str(data["questionId"]),
            rater_role=data["raterRole"],
            target_role=data["targetRole"],
            value=data["value"]
        )


@dataclass
class RoleRatings:
    """
    The four resolved ratings for one question.

    A missing rating is stored as 0.
    """
    a_to_a: int = 0
    a_to_b: int = 0
    b_to_a: int = 0
    b_to_b: int = 0

    def get(self, rater: Role, target: Role) -> int:
        return getattr(self, f"{rater.value.lower()}_to_{target.value.lower()}")

    def to_dict(self) -> Dict[str, int]:
        """Convert to dictionary."""
        return {
            "AtoA": self.a_to_a,
            "AtoB": self.a_to_b,
            "BtoA": self.b_to_a,
            "BtoB": self.b_to_b
        }


@dataclass
class QuestionResult:
    """
    Perception gaps for one question.

    Attributes:
        question: The question these ratings belong to
        ratings: Resolved A/B self and partner ratings
        gap_a: |AtoA - BtoA|, how differently A is seen by A and by B
        gap_b: |BtoB - AtoB|, how differently B is seen by B and by A
        avg_gap: (gap_a + gap_b) / 2
    """
    question: Question
    ratings: RoleRatings
    gap_a: int
    gap_b: int
    avg_gap: float

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "question": self.question.to_dict(),
            "ratings": self.ratings.to_dict(),
            "gapA": self.gap_a,
            "gapB": self.gap_b,
            "avgGap": self.avg_gap
        }


@dataclass
class Participant:
    """A player in a session."""
    role: Role
    name: str
    emoji: str = ""

    def __post_init__(self):
        if isinstance(self.role, str):
            self.role = Role(self.role)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "role": self.role.value,
            "name": self.name,
            "emoji": self.emoji
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Participant":
        """Create from dictionary."""
        return cls(
            role=data["role"],
            name=str(data.get("name", "")),
            emoji=str(data.get("emoji", ""))
        )


@dataclass
class SessionSnapshot:
    """
    A consistent read of one session, as handed over by the session store.

    Attributes:
        session_id: Session identifier
        status: Lifecycle state; results are meaningful once DONE
        participants: Joined players (at most one per role)
        questions: Questions in session order
        ratings: All ratings submitted so far
    """
    session_id: str
    status: SessionStatus
    participants: List[Participant] = field(default_factory=list)
    questions: List[Question] = field(default_factory=list)
    ratings: List[Rating] = field(default_factory=list)

    def __post_init__(self):
        if isinstance(self.status, str):
            self.status = SessionStatus(self.status)

    def participant(self, role: Role) -> Optional[Participant]:
        """Return the participant playing ``role``, if joined."""
        for participant in self.participants:
            if participant.role == role:
                return participant
        return None

    @property
    def is_finished(self) -> bool:
        return self.status == SessionStatus.DONE
