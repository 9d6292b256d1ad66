"""
Command-line entrypoint for scoring a session snapshot.

Usage:
    python -m perception_match.run --snapshot data/example_session.json

Steps:
1. Load configuration (defaults when the file is missing)
2. Load and validate the session snapshot
3. Score the session and build the summary
4. Print it as JSON or as a table, optionally saving the JSON
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Dict, Any, List, Optional

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def setup_logging(log_level: str) -> None:
    """Configure logging level from config."""
    level = getattr(logging, log_level.upper(), logging.INFO)
    logging.getLogger().setLevel(level)


def load_settings(config_path: str) -> Dict[str, Any]:
    """Load the config file, falling back to an empty config if it is missing."""
    from .configs import load_config, validate_config

    if not Path(config_path).exists():
        logger.warning(f"Config file not found: {config_path}, using defaults")
        return {}

    config = load_config(config_path)
    for issue in validate_config(config):
        logger.warning(f"Config issue: {issue}")
    return config


def run_scoring(
    snapshot_path: str,
    config_path: str = "configs/config.yaml",
    output_format: str = "json",
    output_path: Optional[str] = None,
    allow_unfinished: bool = False
) -> Dict[str, Any]:
    """
    Score one session snapshot.

    Args:
        snapshot_path: Path to the snapshot JSON
        config_path: Path to the configuration YAML
        output_format: "json" or "table"
        output_path: If provided, also write the JSON summary here
        allow_unfinished: Score sessions that are not done yet

    Returns:
        The summary dictionary
    """
    from .configs import ScoringConfig
    from .data_loading import load_session_snapshot
    from .insights import summarize_snapshot, save_summary

    config = load_settings(config_path)
    setup_logging((config.get("global") or {}).get("log_level", "INFO"))
    settings = ScoringConfig.from_config(config)

    snapshot = load_session_snapshot(snapshot_path)
    summary = summarize_snapshot(snapshot, settings, require_finished=not allow_unfinished)

    if output_format == "table":
        print(_format_table(summary, settings.close_threshold))
    else:
        print(json.dumps(summary.to_dict(), indent=2, ensure_ascii=False))

    if output_path:
        save_summary(summary, output_path)

    return summary.to_dict()


def _format_table(summary, close_threshold: float) -> str:
    from .insights import results_to_frame

    lines: List[str] = []
    a, b = summary.participant_a, summary.participant_b
    lines.append(f"{a.emoji} {a.name} & {b.emoji} {b.name}")
    lines.append(f"Match: {summary.match_percentage}% - {summary.message}")
    lines.append(f"Completed questions: {summary.completed_questions}/{summary.total_questions}")
    lines.append("")
    lines.append(results_to_frame(summary.question_results, close_threshold).to_string())
    lines.append("")
    lines.append("Best matches: " + ", ".join(r.question.text for r in summary.top_matches))
    lines.append("Biggest differences: " + ", ".join(r.question.text for r in summary.top_differences))
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Compute perception-match results for a finished session"
    )
    parser.add_argument(
        "--snapshot",
        type=str,
        required=True,
        help="Path to session snapshot JSON"
    )
    parser.add_argument(
        "--config",
        type=str,
        default="configs/config.yaml",
        help="Path to configuration file"
    )
    parser.add_argument(
        "--format",
        choices=["json", "table"],
        default="json",
        help="Output format"
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Also write the JSON summary to this path"
    )
    parser.add_argument(
        "--allow-unfinished",
        action="store_true",
        help="Score sessions that are not marked done"
    )

    args = parser.parse_args(argv)

    try:
        run_scoring(
            args.snapshot,
            config_path=args.config,
            output_format=args.format,
            output_path=args.output,
            allow_unfinished=args.allow_unfinished
        )
        return 0
    except Exception as e:
        logger.exception(f"Scoring failed with error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
