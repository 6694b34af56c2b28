"""Command-line entry point: print the spans of a text.

Usage:
    sibylline-tokens notes.txt
    echo "Mail me at john@example.com" | sibylline-tokens --json
    sibylline-tokens --helpers emails,time notes.txt
    sibylline-tokens --no-helpers notes.txt
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from .analyzer import Analyzer
from .config import HelperConfig
from .errors import UnrecognizedCharacter


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sibylline-tokens",
        description="Tokenize text into typed spans",
    )
    parser.add_argument(
        "input",
        nargs="?",
        type=Path,
        default=None,
        help="File to read (defaults to stdin)",
    )
    parser.add_argument(
        "--helpers",
        type=str,
        default=None,
        help="Comma-separated helper names to apply, in order (e.g., urls,emails)",
    )
    parser.add_argument(
        "--no-helpers",
        action="store_true",
        help="Print raw tokenizer output only",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Helper config file (defaults to the usual search locations)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print a JSON array instead of one span per line",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.no_helpers:
        helpers = []
    elif args.helpers:
        helpers = [name.strip() for name in args.helpers.split(",") if name.strip()]
    else:
        helpers = None

    if args.input is None:
        text = sys.stdin.read()
    else:
        text = args.input.read_text(encoding="utf-8")

    try:
        analyzer = Analyzer(helpers=helpers, config=HelperConfig(path=args.config))
        spans = analyzer.analyze(text)
    except (UnrecognizedCharacter, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.json:
        payload = [
            {"start": s.start, "end": s.end, "kind": str(s.kind), "text": s.slice(text)}
            for s in spans
        ]
        print(json.dumps(payload, ensure_ascii=False))
    else:
        for s in spans:
            print(f"{s.start}\t{s.end}\t{str(s.kind)}\t{s.slice(text)!r}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
