"""Configuration module."""

from .loader import load_config, validate_config, get_config_value
from .settings import ScoringConfig

__all__ = [
    "load_config",
    "validate_config",
    "get_config_value",
    "ScoringConfig",
]
