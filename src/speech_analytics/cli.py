"""
Command-line interface for Speech Analytics.

Usage:
    speech-analytics analyze talk.json --duration 3.5
    speech-analytics analyze talk.json --duration 3.5 --output-json
    speech-analytics analyze talk.json --duration 3.5 --config words.yaml
    speech-analytics wordlists            # Show the active word lists

Exit codes:
    0  analytics produced
    1  transcript or configuration error
    2  insufficient data (no finalized words to analyze)
"""

import argparse
import logging
import sys
from pathlib import Path

import yaml

from speech_analytics.analysis.engine import AnalyticsEngine
from speech_analytics.config import AnalysisConfig, Settings, get_analysis_config
from speech_analytics.errors import AnalyticsError
from speech_analytics.transcript import load_transcript

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_NO_DATA = 2


def _resolve_config(args, settings: Settings) -> AnalysisConfig:
    if getattr(args, "config", None):
        settings = settings.model_copy(update={"word_lists_path": Path(args.config)})
    return get_analysis_config(settings)


def cmd_analyze(args, settings: Settings) -> int:
    """Analyze a transcript file and print the report."""
    try:
        config = _resolve_config(args, settings)
        chunks = load_transcript(Path(args.transcript))
    except AnalyticsError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return EXIT_ERROR

    report = AnalyticsEngine(config).analyze(chunks, args.duration)
    if report is None:
        print("Not enough finalized transcript text to analyze.", file=sys.stderr)
        return EXIT_NO_DATA

    if args.output_json:
        print(report.to_json(indent=2))
        return EXIT_OK

    print(report.summary)
    bands = report.scores.bands()
    print(
        "Bands: "
        + ", ".join(f"{name}={band}" for name, band in bands.items())
    )
    if report.repetitions.repeated_words:
        print("Repeated words: " + ", ".join(
            f"{r.word} ({r.count})" for r in report.repetitions.repeated_words
        ))
    if report.sentence_starters.weak:
        print("Weak starters: " + ", ".join(
            f"{w.word} ({w.count})" for w in report.sentence_starters.weak
        ))
    for weak in report.weak_words:
        print(f'  "{weak.word}" in: {weak.sentence}')
    return EXIT_OK


def cmd_wordlists(args, settings: Settings) -> int:
    """Print the active word lists and thresholds as YAML."""
    try:
        config = _resolve_config(args, settings)
    except AnalyticsError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return EXIT_ERROR
    print(yaml.safe_dump(config.to_mapping(), sort_keys=False), end="")
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="speech-analytics",
        description="Speech quality analytics for finalized transcripts",
    )
    # Shared by every subcommand
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--config",
        default=None,
        help="YAML file with word list / threshold overrides",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # analyze
    sub_analyze = subparsers.add_parser(
        "analyze",
        parents=[common],
        help="Analyze a transcript JSON file",
    )
    sub_analyze.add_argument("transcript", help="Path to transcript JSON")
    sub_analyze.add_argument(
        "--duration",
        type=float,
        required=True,
        help="Recording duration in minutes",
    )
    sub_analyze.add_argument(
        "--output-json",
        action="store_true",
        default=False,
        help="Output the report as JSON",
    )
    sub_analyze.set_defaults(func=cmd_analyze)

    # wordlists
    sub_words = subparsers.add_parser(
        "wordlists",
        parents=[common],
        help="Show the active word lists",
    )
    sub_words.set_defaults(func=cmd_wordlists)

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        return EXIT_OK

    settings = Settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return args.func(args, settings)


if __name__ == "__main__":
    sys.exit(main())
