"""
Export of scored results.

Provides a tabular view of question results (one row per question) and
JSON persistence of session summaries.
"""

import json
import logging
from pathlib import Path
from typing import Sequence

import pandas as pd

from ..scoring.schema import QuestionResult
from .messages import are_close, describe_gap
from .summary import SessionSummary

logger = logging.getLogger(__name__)

RESULT_COLUMNS = [
    "idx", "icon", "text",
    "a_to_a", "a_to_b", "b_to_a", "b_to_b",
    "gap_a", "gap_b", "avg_gap", "a_close", "b_close", "description",
]


def results_to_frame(
    question_results: Sequence[QuestionResult],
    close_threshold: float = 2
) -> pd.DataFrame:
    """
    Convert question results to a DataFrame.

    Args:
        question_results: Results in session order
        close_threshold: Max self/partner difference flagged as close in
            the a_close / b_close columns

    Returns:
        DataFrame indexed by question id with RESULT_COLUMNS, in input order
    """
    rows = []
    for r in question_results:
        rows.append({
            "question_id": r.question.question_id,
            "idx": r.question.idx,
            "icon": r.question.icon,
            "text": r.question.text,
            "a_to_a": r.ratings.a_to_a,
            "a_to_b": r.ratings.a_to_b,
            "b_to_a": r.ratings.b_to_a,
            "b_to_b": r.ratings.b_to_b,
            "gap_a": r.gap_a,
            "gap_b": r.gap_b,
            "avg_gap": r.avg_gap,
            "a_close": are_close(r.ratings.a_to_a, r.ratings.b_to_a, close_threshold),
            "b_close": are_close(r.ratings.b_to_b, r.ratings.a_to_b, close_threshold),
            "description": describe_gap(r.avg_gap),
        })

    df = pd.DataFrame(rows, columns=["question_id"] + RESULT_COLUMNS)
    return df.set_index("question_id")


def save_summary(summary: SessionSummary, filepath: str) -> None:
    """Save a session summary as JSON, creating parent directories."""
    path = Path(filepath)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(summary.to_dict(), f, indent=2, ensure_ascii=False)
    logger.info(f"Saved session summary to {filepath}")
