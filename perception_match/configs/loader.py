"""
Configuration loading and validation.

This module handles loading of YAML configuration files and
validates that all required fields are present.
"""

import logging
from pathlib import Path
from typing import Dict, Any, List

import yaml

logger = logging.getLogger(__name__)

REQUIRED_SECTIONS = ["global", "scoring", "insights"]


def load_config(filepath: str) -> Dict[str, Any]:
    """
    Load configuration from YAML file.

    Args:
        filepath: Path to the YAML configuration file

    Returns:
        Configuration dictionary

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If config file is empty
        yaml.YAMLError: If YAML is invalid
    """
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {filepath}")

    logger.info(f"Loading configuration from {filepath}")
    with open(filepath, "r") as f:
        config = yaml.safe_load(f)

    if config is None:
        raise ValueError(f"Configuration file is empty: {filepath}")

    return config


def validate_config(config: Dict[str, Any]) -> List[str]:
    """
    Validate configuration and return list of warnings/errors.

    Args:
        config: Configuration dictionary

    Returns:
        List of warning/error messages (empty if valid)
    """
    issues = []

    sections = {}
    for section in REQUIRED_SECTIONS:
        if section not in config:
            issues.append(f"Missing required section: {section}")
            continue
        value = config[section] or {}
        if not isinstance(value, dict):
            issues.append(f"Section {section} must be a mapping, got {type(value).__name__}")
            continue
        sections[section] = value

    if "scoring" in sections:
        scoring = sections["scoring"]
        top_limit = scoring.get("top_limit", 3)
        if not isinstance(top_limit, int) or top_limit <= 0:
            issues.append(f"scoring.top_limit must be a positive integer, got {top_limit}")

        max_shared = scoring.get("max_shared_results")
        if max_shared is not None and (not isinstance(max_shared, int) or max_shared < 0):
            issues.append(f"scoring.max_shared_results must be a non-negative integer, got {max_shared}")

    if "insights" in sections:
        insights = sections["insights"]
        high = insights.get("high_match_threshold", 70)
        medium = insights.get("medium_match_threshold", 40)
        numeric = True
        for name, value in [("high_match_threshold", high), ("medium_match_threshold", medium)]:
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                issues.append(f"insights.{name} must be a number, got {value!r}")
                numeric = False
            elif not 0 <= value <= 100:
                issues.append(f"insights.{name} must be in [0, 100], got {value}")
        if numeric and medium > high:
            issues.append(f"insights.medium_match_threshold ({medium}) exceeds high_match_threshold ({high})")

    return issues


def get_config_value(config: Dict[str, Any], path: str, default: Any = None) -> Any:
    """
    Get a nested configuration value using dot notation.

    Args:
        config: Configuration dictionary
        path: Dot-separated path (e.g., "scoring.top_limit")
        default: Default value if path doesn't exist

    Returns:
        Configuration value or default
    """
    keys = path.split(".")
    value = config
    for key in keys:
        if isinstance(value, dict) and key in value:
            value = value[key]
        else:
            return default
    return value
