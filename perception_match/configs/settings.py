"""Typed scoring settings built from the YAML configuration."""

import logging
from dataclasses import dataclass, asdict, fields
from typing import Dict, Any, Optional

logger = logging.getLogger(__name__)


@dataclass
class ScoringConfig:
    """
    Settings for result summaries.

    Attributes:
        top_limit: How many questions go into each insight list
        max_shared_results: Cap on question results in a shared summary (None = all)
        close_threshold: Max rating difference still considered "close"
        high_match_threshold: Lowest percentage in the high tier
        medium_match_threshold: Lowest percentage in the medium tier
    """
    top_limit: int = 3
    max_shared_results: Optional[int] = 8
    close_threshold: int = 2
    high_match_threshold: int = 70
    medium_match_threshold: int = 40

    def validate(self) -> None:
        """Validate configuration values."""
        if self.top_limit <= 0:
            raise ValueError(f"top_limit must be positive, got {self.top_limit}")
        if self.max_shared_results is not None and self.max_shared_results < 0:
            raise ValueError(f"max_shared_results must be non-negative, got {self.max_shared_results}")
        if self.close_threshold < 0:
            raise ValueError(f"close_threshold must be non-negative, got {self.close_threshold}")
        if not 0 <= self.medium_match_threshold <= self.high_match_threshold <= 100:
            raise ValueError(
                f"Match thresholds must satisfy 0 <= medium <= high <= 100, got "
                f"medium={self.medium_match_threshold}, high={self.high_match_threshold}"
            )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "ScoringConfig":
        """Create from dictionary, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in d.items() if k in known})

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "ScoringConfig":
        """Create from main config dictionary."""
        scoring = config.get("scoring") or {}
        insights = config.get("insights") or {}

        settings = cls(
            top_limit=scoring.get("top_limit", 3),
            max_shared_results=scoring.get("max_shared_results", 8),
            close_threshold=scoring.get("close_threshold", 2),
            high_match_threshold=insights.get("high_match_threshold", 70),
            medium_match_threshold=insights.get("medium_match_threshold", 40)
        )
        settings.validate()
        logger.debug(f"Scoring settings: {settings.to_dict()}")
        return settings
