#!/usr/bin/env python3
"""Link Finder - list the URLs and email addresses in a text.

Usage:
    # Scan files
    linkscan notes.txt chat.log

    # Scan stdin
    cat message.txt | linkscan

    # Export matches as JSON
    linkscan notes.txt -o links.json
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from .config import Config
from .links import Linkifier
from .models import MatchKind, MatchSpan


logger = logging.getLogger(__name__)

STDIN_SOURCE = "<stdin>"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="linkscan",
        description="Find URLs and email addresses in text",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Print every match with its offsets
  linkscan message.txt

  # Only email addresses, each listed once
  linkscan message.txt --kind email --unique

  # Save matches for further processing
  linkscan message.txt -o links.json
        """,
    )
    parser.add_argument(
        "paths",
        nargs="*",
        help="Text files to scan (reads stdin when omitted)",
    )
    parser.add_argument(
        "-o", "--output",
        help="Output path for a JSON export of all matches",
        default=None,
    )
    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Only output summary counts",
    )
    parser.add_argument(
        "--unique",
        action="store_true",
        default=None,
        help="List each distinct link once (default: LINKSCAN_UNIQUE)",
    )
    parser.add_argument(
        "--no-unique",
        dest="unique",
        action="store_false",
        default=None,
        help="List every match, even when LINKSCAN_UNIQUE is set",
    )
    parser.add_argument(
        "--kind",
        choices=[kind.value for kind in MatchKind],
        default=None,
        help="Only list matches of this kind",
    )
    return parser


def read_sources(paths: list[str]) -> list[tuple[str, str]]:
    """Read the inputs to scan.

    Args:
        paths: File paths from the command line. Empty means stdin.

    Returns:
        (source name, text) pairs.

    Raises:
        FileNotFoundError: If a path does not exist.
    """
    if not paths:
        return [(STDIN_SOURCE, sys.stdin.read())]

    sources = []
    for path_str in paths:
        path = Path(path_str)
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path_str}")
        sources.append((path_str, path.read_text(encoding="utf-8")))
    return sources


def format_match(span: MatchSpan) -> str:
    return f"{span.kind.value}\t{span.start}-{span.end}\t{span.text}"


def export_json(results: list[tuple[str, list[MatchSpan]]], output_path: str) -> None:
    """Write all matches to a JSON file."""
    payload = [
        {"source": source, "matches": [span.to_dict() for span in spans]}
        for source, spans in results
    ]
    Path(output_path).write_text(
        json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8"
    )


def run(args, config: Config) -> int:
    """Scan every source and print the results."""
    linkifier = Linkifier()
    kind = MatchKind(args.kind) if args.kind else None
    unique = config.unique if args.unique is None else args.unique

    sources = read_sources(args.paths)
    results = []

    for source, text in sources:
        if not config.accepts(text):
            print(
                f"Error: {source} is {len(text)} chars, "
                f"limit is {config.max_input_length} (LINKSCAN_MAX_INPUT_LENGTH)"
            )
            return 1

        spans = linkifier.find_links(text, unique=unique, kind=kind)
        logger.info(f"{source}: {len(spans)} match(es)")
        results.append((source, spans))

        if not args.quiet:
            if len(sources) > 1:
                print(f"== {source}")
            for span in spans:
                print(format_match(span))

    url_count = sum(1 for _, spans in results for span in spans if span.kind == MatchKind.URL)
    email_count = sum(1 for _, spans in results for span in spans if span.kind == MatchKind.EMAIL)
    if args.quiet:
        print(f"URLs: {url_count}, Emails: {email_count}")

    if args.output:
        export_json(results, args.output)
        print(f"\nMatches saved to: {args.output}")

    return 0


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = Config.load()
    except ValueError as e:
        print(f"Configuration error: {e}")
        return 1

    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=config.log_level,
    )
    for warning in config.validate():
        logger.warning(warning)

    try:
        return run(args, config)
    except Exception as e:
        print(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
