"""
jobscreen command line.

Usage:
    jobscreen check posting.txt                 # Verdict + explanation
    jobscreen check a.txt b.txt --json          # Full results as JSON
    cat posting.txt | jobscreen check -         # Read stdin
    jobscreen patterns --family red_flag        # Inspect the rule table

Exit code for `check` is the worst verdict seen:
0 REAL, 1 UNCERTAIN, 2 FAKE, 3 if a file could not be read.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Optional

from jobscreen import __version__
from jobscreen.config import settings
from jobscreen.detector import predict, REAL, UNCERTAIN, FAKE
from jobscreen.logging import setup_logging, get_logger
from jobscreen.patterns import FAMILIES, LIBRARY_VERSION, describe_rules

logger = get_logger("cli")

EXIT_CODES = {REAL: 0, UNCERTAIN: 1, FAKE: 2}
EXIT_READ_ERROR = 3


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jobscreen",
        description="Rule-based fake job posting classifier",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__} (library {LIBRARY_VERSION})",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Log level for diagnostics on stderr (default: WARNING)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    check = sub.add_parser("check", help="Classify one or more postings")
    check.add_argument(
        "paths",
        nargs="+",
        help="Text files to classify, or - for stdin",
    )
    check.add_argument(
        "--json",
        action="store_true",
        help="Print full results as JSON",
    )
    check.add_argument(
        "--min-length",
        type=int,
        default=settings.MIN_TEXT_LENGTH,
        help=f"Warn when a posting is shorter than this (default: {settings.MIN_TEXT_LENGTH})",
    )

    patterns = sub.add_parser("patterns", help="List the detection rules")
    patterns.add_argument("--family", choices=FAMILIES, default=None)

    return parser


def _read(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def _format_text(path: str, result) -> str:
    lines = [
        f"{path}: {result.verdict} (confidence {result.confidence:.0f}%)",
        f"  {result.explanation}",
    ]
    for flag in result.red_flags:
        lines.append(f"  - [{flag.severity}] {flag.label}: {flag.description}")
    lines.append("  Recommendations:")
    lines.extend(f"    * {r}" for r in result.recommendations)
    return "\n".join(lines)


def _run_check(args) -> int:
    worst = 0
    output = []

    for path in args.paths:
        try:
            text = _read(path)
        except OSError as e:
            logger.error(
                f"Could not read {path}",
                extra={"error": str(e), "error_type": type(e).__name__},
            )
            print(f"error: could not read {path}: {e}", file=sys.stderr)
            worst = max(worst, EXIT_READ_ERROR)
            continue

        if len(text.strip()) < args.min_length:
            logger.warning(
                f"{path} is shorter than {args.min_length} characters; "
                f"results will be unreliable",
                extra={"word_count": len(text.split())},
            )

        result = predict(text)
        worst = max(worst, EXIT_CODES[result.verdict])

        if args.json:
            output.append({"path": path, **result.to_dict()})
        else:
            print(_format_text(path, result))

    if args.json and output:
        print(json.dumps(output if len(output) > 1 else output[0], indent=2))

    return worst


def _run_patterns(args) -> int:
    for rule in describe_rules(args.family):
        print(f"{rule['label']:<24} {rule['family']:<9} {rule['weight']:+.1f}  {rule['description']}")
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(level=args.log_level, fmt="text", stream=sys.stderr)

    if args.command == "check":
        return _run_check(args)
    return _run_patterns(args)


if __name__ == "__main__":
    sys.exit(main())
