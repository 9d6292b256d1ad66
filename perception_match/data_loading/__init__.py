"""Data loading module for session snapshots."""

from .loaders import (
    load_session_snapshot,
    parse_session_snapshot,
    parse_rating,
    validate_rating_value,
    dedupe_ratings,
)

__all__ = [
    "load_session_snapshot",
    "parse_session_snapshot",
    "parse_rating",
    "validate_rating_value",
    "dedupe_ratings",
]
