"""Command line front end printing suggestions for one word."""

from __future__ import annotations

import argparse
import os
import sys

from .suggest import Suggest


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="upodesh", description="Suggest Bengali words for romanised input."
    )
    parser.add_argument("word", nargs="?", help="romanised word")
    parser.add_argument(
        "--data",
        default=os.environ.get("UPODESH_DATA", "data"),
        help="directory holding the pattern, word and suffix files",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Print the suggestions for the given word; return the exit status."""
    args = _parser().parse_args(argv)
    if not args.word:
        print("Please provide a word", file=sys.stderr)
        return 1

    try:
        engine = Suggest.from_directory(args.data)
    except (OSError, ValueError) as exc:
        print(f"Cannot load data from {args.data}: {exc}", file=sys.stderr)
        return 1

    try:
        suggestions = engine.suggest(args.word)
    except ValueError as exc:
        print(f"Cannot suggest for {args.word!r}: {exc}", file=sys.stderr)
        return 1

    print(f"Word: {args.word}")
    print(f"Suggestions: [{', '.join(suggestions)}]")
    return 0


if __name__ == "__main__":
    sys.exit(main())