"""
Human-readable descriptions for gaps and match percentages.

Gap tiers (avg_gap):
    0      perfect match
    <= 1   almost identical
    <= 2   close to the truth
    <= 3   slight difference
    <= 5   noticeable difference
    > 5    completely different views

Match tiers (percentage):
    >= high_threshold (70)     high
    >= medium_threshold (40)   medium
    otherwise                  low
"""

from enum import Enum
from typing import Dict, List


class MatchTier(Enum):
    """Overall alignment band for a match percentage."""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


RESULT_MESSAGES: Dict[MatchTier, List[str]] = {
    MatchTier.HIGH: [
        "You two are surprisingly in sync",
        "You understand each other really well!",
        "True harmony!",
    ],
    MatchTier.MEDIUM: [
        "Some things to work on, but you're on the right track",
        "Interesting result!",
        "You each have your quirks",
    ],
    MatchTier.LOW: [
        "Opposites attract!",
        "You're very different, and that's great!",
        "Everyone sees the world their own way",
    ],
}


def are_close(a: float, b: float, threshold: float = 2) -> bool:
    """Check whether two ratings differ by at most ``threshold``."""
    return abs(a - b) <= threshold


def describe_gap(gap: float) -> str:
    """Short description of a per-question gap."""
    if gap == 0:
        return "Perfect match!"
    if gap <= 1:
        return "Almost identical!"
    if gap <= 2:
        return "Close to the truth"
    if gap <= 3:
        return "Slight difference"
    if gap <= 5:
        return "Noticeable difference"
    return "Completely different views!"


def classify_match(
    percentage: int,
    high_threshold: int = 70,
    medium_threshold: int = 40
) -> MatchTier:
    """Place a match percentage into its tier."""
    if percentage >= high_threshold:
        return MatchTier.HIGH
    if percentage >= medium_threshold:
        return MatchTier.MEDIUM
    return MatchTier.LOW


def result_message(tier: MatchTier) -> str:
    """Headline message for a tier (always the first, so summaries are stable)."""
    return RESULT_MESSAGES[tier][0]
