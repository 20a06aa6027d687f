"""Command line interface for the disjoint palindrome finder.

Each positional argument is scanned independently.  Without arguments the
non-empty lines of standard input are processed instead.  Results are shown
as a ``rich`` table or emitted as JSON for scripting.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
import argparse
import json
import logging
import sys
from typing import List, Tuple

from rich.console import Console
from rich.table import Table

from .finder import find_palindromes
from .selection import MIN_PALINDROME_LENGTH
from .validation import PalindromeInputError

logger = logging.getLogger(__name__)

Result = Tuple[str, Tuple[str, ...]]


def _positive_int(value: str) -> int:
    try:
        parsed = int(value, 10)
    except ValueError as exc:
        raise argparse.ArgumentTypeError("Minimum length must be an integer") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("Minimum length must be positive")
    return parsed


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="palindrome-cover",
        description=(
            "Find non-overlapping palindromes in alphanumeric text, "
            "preferring longer ones."
        ),
    )
    parser.add_argument(
        "texts",
        nargs="*",
        help="Texts to scan. Reads non-empty lines from stdin when omitted.",
    )
    parser.add_argument(
        "--min-length",
        type=_positive_int,
        default=MIN_PALINDROME_LENGTH,
        help="Shortest palindrome to report (default: %(default)s).",
    )
    parser.add_argument(
        "--output-format",
        choices=("text", "json"),
        default="text",
        help="Render results as a table or as JSON.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"),
        help="Logging verbosity for diagnostic output.",
    )
    return parser


def _configure_logging(level: str) -> None:
    logging.basicConfig(level=getattr(logging, level.upper(), logging.WARNING))


def _read_stdin_lines() -> List[str]:
    return [line.strip() for line in sys.stdin if line.strip()]


def _render_table(results: Iterable[Result]) -> Table:
    table = Table(title="Palindromes")
    table.add_column("Input")
    table.add_column("Palindromes")
    for text, palindromes in results:
        table.add_row(text, ", ".join(palindromes) if palindromes else "-")
    return table


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point; returns the process exit status."""

    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.log_level)

    texts = list(args.texts) if args.texts else _read_stdin_lines()
    results: List[Result] = []
    for text in texts:
        try:
            palindromes = find_palindromes(text, min_length=args.min_length)
        except PalindromeInputError as error:
            logger.error("Rejected input %r: %s", text, error)
            return 2
        logger.info("Found %d palindromes in %r", len(palindromes), text)
        results.append((text, palindromes))

    if args.output_format == "json":
        payload = [
            {"text": text, "palindromes": list(palindromes)}
            for text, palindromes in results
        ]
        print(json.dumps(payload, ensure_ascii=False))
    else:
        Console().print(_render_table(results))

    return 0


if __name__ == "__main__":  # pragma: no cover - exercised via CLI
    sys.exit(main())
