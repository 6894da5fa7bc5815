"""Command-line interface."""

import argparse

from commonstrip.core.types import OffsetPolicy
from commonstrip.utils.constants import Constants


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        prog="commonstrip",
        description="Repeatedly remove the longest common substring from two strings",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Examples:
  # Built-in sample strings ({Constants.DEFAULT_SOURCE} / {Constants.DEFAULT_TARGET})
  %(prog)s -v

  # Custom strings, patterns up to 4 characters
  %(prog)s --source XYZ --target ZYXW -L 4

  # Using JSON config, writing a YAML report
  %(prog)s --config config.json -o reports/run.yml

Example config.json:
{{
  "source": "ATCGTACGTA",
  "target": "CGTACGTGCG",
  "max_length": 6,
  "offset_policy": "literal",
  "output": "./reports/run.yml",
  "verbose": true
}}
        """,
    )

    # Configuration
    parser.add_argument(
        "-c",
        "--config",
        type=str,
        help="JSON configuration file (CLI args override JSON values)",
    )

    # Inputs
    parser.add_argument("--source", type=str, help="String whose substrings are indexed")
    parser.add_argument("--target", type=str, help="String scanned for common substrings")
    parser.add_argument(
        "-L",
        "--max-length",
        dest="max_length",
        type=int,
        help=f"Longest substring length considered (default: {Constants.DEFAULT_MAX_LENGTH})",
    )

    # Behaviour
    parser.add_argument(
        "--offset-policy",
        dest="offset_policy",
        choices=[policy.value for policy in OffsetPolicy],
        help="Remove from the first literal occurrence in source, "
        "or from the offset the match was indexed at (default: literal)",
    )
    parser.add_argument(
        "--max-rounds",
        dest="max_rounds",
        type=int,
        help="Stop after this many removals",
    )

    # Output
    parser.add_argument("-o", "--output", type=str, help="Write a report to this file")
    parser.add_argument(
        "--format",
        dest="report_format",
        choices=list(Constants.REPORT_FORMATS),
        help="Report format (default: yaml)",
    )

    # Flags
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    parser.add_argument(
        "--debug", action="store_true", help="Log automaton details for every round"
    )

    return parser
